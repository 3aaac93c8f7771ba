"""Generate the docs config from a directory of Markdown files."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from pathlib import Path

from docsnav.config import (
    DOCSNAV_DEFAULT_ORDER,
    DOCSNAV_DOCS_DIR,
    DOCSNAV_NEST_CUTOFF,
    DOCSNAV_OUTPUT_FILE,
)
from docsnav.exceptions import DocsDirectoryNotFoundError, NoMarkdownFilesError
from docsnav.file_info import get_file_info
from docsnav.fs_utils import read_documents, write_text_async
from docsnav.headers import extract_headers
from docsnav.navigation import build_navigation
from docsnav.schemas import DocsStructure, Section
from docsnav.utils.logging_config import get_logger

logger = get_logger(__name__)


def list_markdown_files(docs_dir: Path) -> list[str]:
    """Return the sorted names of the ``.md`` files directly inside ``docs_dir``.

    Raises:
        DocsDirectoryNotFoundError: If ``docs_dir`` is not an existing directory.
        NoMarkdownFilesError: If the directory holds no Markdown files.
    """
    docs_dir = Path(docs_dir)
    if not docs_dir.is_dir():
        logger.warning("Documentation directory not found", extra={"docs_dir": str(docs_dir)})
        raise DocsDirectoryNotFoundError(f"Documentation directory not found: {docs_dir}")

    files = sorted(path.name for path in docs_dir.iterdir() if path.name.endswith(".md") and path.is_file())
    if not files:
        logger.warning("No markdown files found", extra={"docs_dir": str(docs_dir)})
        raise NoMarkdownFilesError(f"No markdown files found in docs directory: {docs_dir}")
    return files


def build_section(
    filename: str,
    content: str,
    *,
    nest_cutoff: int = DOCSNAV_NEST_CUTOFF,
    default_order: int = DOCSNAV_DEFAULT_ORDER,
) -> Section:
    """Extract headers and navigation for one document."""
    info = get_file_info(filename, default_order=default_order)
    headers = extract_headers(content)
    navigation = build_navigation(headers, nest_cutoff=nest_cutoff)

    logger.debug("Processed %s: %d headers", filename, len(headers))

    return Section(
        id=info.id,
        title=info.title,
        filename=info.filename,
        order=info.order,
        headers=headers,
        navigation=navigation,
    )


async def collect_sections(
    docs_dir: Path,
    filenames: list[str],
    *,
    nest_cutoff: int = DOCSNAV_NEST_CUTOFF,
    default_order: int = DOCSNAV_DEFAULT_ORDER,
) -> list[Section]:
    """Read ``filenames`` concurrently and return their sections sorted by order.

    The sort is stable, so sections sharing an order keep the order of
    ``filenames``.

    Raises:
        DocumentReadError: If any document cannot be read.
    """
    documents = await read_documents(Path(docs_dir), filenames)
    sections = [
        build_section(filename, content, nest_cutoff=nest_cutoff, default_order=default_order)
        for filename, content in documents
    ]
    sections.sort(key=lambda section: section.order)
    return sections


async def build_docs_structure(
    docs_dir: Path | None = None,
    *,
    nest_cutoff: int | None = None,
    default_order: int | None = None,
    generated: datetime | None = None,
) -> DocsStructure:
    """Scan ``docs_dir`` and build the full docs config.

    Args:
        docs_dir: Directory with the Markdown files. Defaults to ``DOCSNAV_DOCS_DIR``.
        nest_cutoff: Nesting cutoff for navigation trees. Defaults to ``DOCSNAV_NEST_CUTOFF``.
        default_order: Order for files without a numeric prefix.
        generated: Timestamp to record. Defaults to the current UTC time.

    Returns:
        The docs structure with sections sorted by order.
    """
    docs_dir = Path(docs_dir or DOCSNAV_DOCS_DIR)
    filenames = list_markdown_files(docs_dir)
    sections = await collect_sections(
        docs_dir,
        filenames,
        nest_cutoff=DOCSNAV_NEST_CUTOFF if nest_cutoff is None else nest_cutoff,
        default_order=DOCSNAV_DEFAULT_ORDER if default_order is None else default_order,
    )
    return DocsStructure(generated=generated or datetime.now(timezone.utc), sections=sections)


def serialize_docs_structure(structure: DocsStructure) -> str:
    """Render the docs config as indented JSON."""
    return structure.model_dump_json(indent=2)


async def write_docs_config(structure: DocsStructure, output_path: Path) -> Path:
    """Write the docs config JSON to ``output_path`` and return the path."""
    output_path = Path(output_path)
    await write_text_async(output_path, serialize_docs_structure(structure))
    logger.info("Wrote docs config", extra={"output": str(output_path), "sections": len(structure.sections)})
    return output_path


def generate_docs_config(
    docs_dir: Path | None = None,
    output_path: Path | None = None,
    *,
    nest_cutoff: int | None = None,
) -> DocsStructure:
    """Build the docs config for ``docs_dir`` and write it to ``output_path``.

    Raises:
        DocsnavError: If the directory is missing, empty, or a file is unreadable.
    """

    async def _run() -> DocsStructure:
        structure = await build_docs_structure(docs_dir, nest_cutoff=nest_cutoff)
        await write_docs_config(structure, Path(output_path or DOCSNAV_OUTPUT_FILE))
        return structure

    return asyncio.run(_run())
