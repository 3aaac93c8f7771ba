"""docsnav: build a navigation index from a directory of Markdown files."""

from docsnav.exceptions import (
    DocsDirectoryNotFoundError,
    DocsnavError,
    DocumentReadError,
    NoMarkdownFilesError,
)
from docsnav.file_info import FileInfo, get_file_info
from docsnav.generator import (
    build_docs_structure,
    build_section,
    generate_docs_config,
    serialize_docs_structure,
)
from docsnav.headers import extract_headers, slugify
from docsnav.navigation import build_navigation, count_nodes
from docsnav.schemas import DocsStructure, Header, NavNode, Section

__all__ = [
    "DocsDirectoryNotFoundError",
    "DocsStructure",
    "DocsnavError",
    "DocumentReadError",
    "FileInfo",
    "Header",
    "NavNode",
    "NoMarkdownFilesError",
    "Section",
    "build_docs_structure",
    "build_navigation",
    "build_section",
    "count_nodes",
    "extract_headers",
    "generate_docs_config",
    "get_file_info",
    "serialize_docs_structure",
    "slugify",
]
