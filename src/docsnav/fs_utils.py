"""Async file helpers backed by a thread pool."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Iterable

from docsnav.exceptions import DocumentReadError
from docsnav.utils.logging_config import get_logger

logger = get_logger(__name__)


async def read_text_async(path: Path, encoding: str = "utf-8-sig") -> str:
    """Read a document without blocking the event loop.

    Raises:
        DocumentReadError: If the file is missing, unreadable, or not valid
            text in ``encoding``.
    """
    try:
        return await asyncio.to_thread(path.read_text, encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Failed to read document", extra={"path": str(path), "error": str(exc)})
        raise DocumentReadError(f"Cannot read {path}: {exc}") from exc


async def read_documents(
    docs_dir: Path, filenames: Iterable[str], encoding: str = "utf-8-sig"
) -> list[tuple[str, str]]:
    """Read several documents concurrently.

    Returns:
        ``(filename, content)`` pairs in the order ``filenames`` were given.
    """
    names = list(filenames)
    contents = await asyncio.gather(
        *(read_text_async(docs_dir / name, encoding=encoding) for name in names)
    )
    return list(zip(names, contents))


async def write_text_async(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Write text to ``path``, creating missing parent directories first."""
    await asyncio.to_thread(path.parent.mkdir, parents=True, exist_ok=True)
    await asyncio.to_thread(path.write_text, content, encoding=encoding)
