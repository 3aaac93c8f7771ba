"""Local configuration for docsnav."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_DOCS_DIR = "public/docs"
DEFAULT_OUTPUT_FILE = "public/docs-config.json"
DEFAULT_NEST_CUTOFF = 4
DEFAULT_ORDER = 999
DEFAULT_LOG_LEVEL = "WARNING"

# Directory scanned for *.md files and the JSON index written from it.
DOCSNAV_DOCS_DIR = Path(os.getenv("DOCSNAV_DOCS_DIR", DEFAULT_DOCS_DIR)).expanduser()
DOCSNAV_OUTPUT_FILE = Path(os.getenv("DOCSNAV_OUTPUT_FILE", DEFAULT_OUTPUT_FILE)).expanduser()
# Headers with a level below the cutoff may have children in the navigation tree.
DOCSNAV_NEST_CUTOFF = int(os.getenv("DOCSNAV_NEST_CUTOFF", str(DEFAULT_NEST_CUTOFF)))
# Order assigned to files without a numeric "NN-" prefix.
DOCSNAV_DEFAULT_ORDER = int(os.getenv("DOCSNAV_DEFAULT_ORDER", str(DEFAULT_ORDER)))
DOCSNAV_LOG_LEVEL = os.getenv("DOCSNAV_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
