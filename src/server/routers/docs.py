"""Docs endpoints for the API."""

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from docsnav.config import DOCSNAV_DOCS_DIR, DOCSNAV_NEST_CUTOFF
from docsnav.exceptions import DocsDirectoryNotFoundError, DocumentReadError, NoMarkdownFilesError
from docsnav.fs_utils import read_text_async
from docsnav.generator import build_docs_structure
from docsnav.schemas import DocsStructure
from docsnav.utils.logging_config import get_logger
from server.models import COMMON_ERROR_RESPONSES, HealthResponse

logger = get_logger(__name__)

router = APIRouter()


def get_docs_dir() -> Path:
    """Resolve the directory the API serves documents from."""
    return DOCSNAV_DOCS_DIR.resolve()


def get_nest_cutoff() -> int:
    """Nesting cutoff used for navigation trees."""
    return DOCSNAV_NEST_CUTOFF


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report that the service is up."""
    return HealthResponse()


@router.get("/api/docs-config", response_model=DocsStructure, responses=COMMON_ERROR_RESPONSES)
async def docs_config(
    docs_dir: Path = Depends(get_docs_dir),
    nest_cutoff: int = Depends(get_nest_cutoff),
) -> DocsStructure:
    """Build and return the docs config for the served directory.

    **The structure is rebuilt from the Markdown files on every request,**
    so edits show up without regenerating ``docs-config.json``.

    **Returns**

    - **DocsStructure**: generation timestamp and sections sorted by order

    **Raises**

    - **HTTPException**: **404** - the directory is missing or holds no Markdown files
    - **HTTPException**: **500** - a document could not be read

    """
    try:
        return await build_docs_structure(docs_dir, nest_cutoff=nest_cutoff)
    except (DocsDirectoryNotFoundError, NoMarkdownFilesError) as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except DocumentReadError as exc:
        logger.error("Failed to build docs config", extra={"docs_dir": str(docs_dir), "error": str(exc)})
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc


@router.get("/api/docs/{filename}", response_class=PlainTextResponse, responses=COMMON_ERROR_RESPONSES)
async def docs_file(
    filename: str,
    docs_dir: Path = Depends(get_docs_dir),
) -> PlainTextResponse:
    """Return the raw Markdown of one document.

    **Parameters**

    - **filename** (`str`): Name of a ``.md`` file inside the docs directory

    **Raises**

    - **HTTPException**: **403** - the name resolves outside the docs directory
    - **HTTPException**: **404** - no such Markdown file
    - **HTTPException**: **500** - the file could not be read

    """
    if not filename.endswith(".md"):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Not a markdown document: {filename!r}")

    root = docs_dir.resolve()
    path = (root / filename).resolve()
    if path.parent != root:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=f"Invalid document name: {filename!r}")

    if not path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Document {filename!r} not found")

    try:
        content = await read_text_async(path)
    except DocumentReadError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return PlainTextResponse(content, media_type="text/markdown; charset=utf-8")
