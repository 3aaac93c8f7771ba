"""Custom exceptions for docsnav."""


class DocsnavError(Exception):
    """Base exception for docsnav operations."""


class DocsDirectoryNotFoundError(DocsnavError):
    """Documentation directory does not exist."""


class NoMarkdownFilesError(DocsnavError):
    """Documentation directory contains no Markdown files."""


class DocumentReadError(DocsnavError):
    """A Markdown document could not be read or decoded."""
