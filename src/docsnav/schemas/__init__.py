"""Shared schemas for docsnav."""

from docsnav.schemas.docs import DocsStructure, Section
from docsnav.schemas.headers import Header, NavNode

__all__ = ["DocsStructure", "Header", "NavNode", "Section"]
