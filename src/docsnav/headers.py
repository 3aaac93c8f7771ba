"""Extract headers from raw Markdown text."""

from __future__ import annotations

import re

from docsnav.schemas import Header

_HEADING_MARKER_RE = re.compile(r"^#+")
_HEADING_PREFIX_RE = re.compile(r"^#+\s*")
# Word characters are ASCII only, so accented letters are dropped from slugs.
_NON_SLUG_CHARS_RE = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHENS_RE = re.compile(r"-+")
# Byte-order marks count as surrounding whitespace when trimming lines.
_LINE_EDGES_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def slugify(text: str) -> str:
    """Turn a header title into a URL-safe anchor id."""
    slug = _NON_SLUG_CHARS_RE.sub("", text.lower())
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _HYPHENS_RE.sub("-", slug)
    return slug.strip("-")


def extract_headers(content: str) -> list[Header]:
    """Return every heading line of ``content`` in document order.

    A heading is any line that starts with ``#`` once surrounding whitespace is
    trimmed. Fenced code blocks are not tracked, so ``# comment`` lines inside
    them are reported as headings too.

    Args:
        content: Raw Markdown text of one document.

    Returns:
        Headers in the order their lines appear. Empty input yields an empty list.
    """
    headers: list[Header] = []
    for line in content.split("\n"):
        trimmed = _LINE_EDGES_RE.sub("", line)
        if not trimmed.startswith("#"):
            continue
        level = len(_HEADING_MARKER_RE.match(trimmed).group(0))
        title = _HEADING_PREFIX_RE.sub("", trimmed, count=1)
        headers.append(Header(level=level, title=title, id=slugify(title)))
    return headers
