"""Command line entry point for docsnav."""

from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import datetime, timezone
from pathlib import Path

from docsnav.config import DOCSNAV_DOCS_DIR, DOCSNAV_NEST_CUTOFF, DOCSNAV_OUTPUT_FILE
from docsnav.exceptions import DocsnavError
from docsnav.generator import (
    collect_sections,
    list_markdown_files,
    serialize_docs_structure,
    write_docs_config,
)
from docsnav.report import format_file_list, format_section_line, format_structure_summary
from docsnav.schemas import DocsStructure
from docsnav.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsnav",
        description="Generate a navigation index (docs-config.json) from a directory of Markdown files.",
    )
    parser.add_argument(
        "docs_dir",
        nargs="?",
        default=str(DOCSNAV_DOCS_DIR),
        help=f"Directory with the Markdown files (default: {DOCSNAV_DOCS_DIR})",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=str(DOCSNAV_OUTPUT_FILE),
        help=f"Output JSON file, or '-' for stdout (default: {DOCSNAV_OUTPUT_FILE})",
    )
    parser.add_argument(
        "--nest-cutoff",
        type=int,
        default=DOCSNAV_NEST_CUTOFF,
        help="First header level that can no longer have children in the navigation tree",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print errors")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: DOCSNAV_LOG_LEVEL)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the generator and return the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    to_stdout = args.output == "-"
    verbose = not (args.quiet or to_stdout)
    docs_dir = Path(args.docs_dir)

    def echo(message: str = "") -> None:
        if verbose:
            print(message)

    echo("Scanning documentation files...")
    try:
        filenames = list_markdown_files(docs_dir)
        echo(format_file_list(filenames))
        sections = asyncio.run(collect_sections(docs_dir, filenames, nest_cutoff=args.nest_cutoff))
        structure = DocsStructure(generated=datetime.now(timezone.utc), sections=sections)
        if to_stdout:
            sys.stdout.write(serialize_docs_structure(structure) + "\n")
            return 0
        output_path = asyncio.run(write_docs_config(structure, Path(args.output)))
    except DocsnavError as exc:
        logger.debug("Docs config generation failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    # Per-file lines follow read order, before sorting by order.
    sections_by_name = {section.filename: section for section in structure.sections}
    for filename in filenames:
        echo()
        echo(format_section_line(sections_by_name[filename]))
    echo()
    echo("Documentation config generated successfully!")
    echo(f"Output: {output_path}")
    echo(f"Sections: {len(structure.sections)}")
    echo()
    echo(format_structure_summary(structure))
    return 0
