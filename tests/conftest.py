"""Test setup for docsnav."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """A docs directory with ordered, unordered, and non-Markdown files."""
    root = tmp_path / "docs"
    root.mkdir()
    (root / "02-user-guide.md").write_text(
        "# User Guide\n\n## Installation\n\n### From Source\n\n## Usage\n",
        encoding="utf-8",
    )
    (root / "01-getting-started.md").write_text(
        "# Getting Started\n\nWelcome.\n\n## Requirements\n",
        encoding="utf-8",
    )
    (root / "faq.md").write_text("# FAQ\n\n## Why?\n", encoding="utf-8")
    (root / "notes.txt").write_text("# Not a doc\n", encoding="utf-8")
    return root
