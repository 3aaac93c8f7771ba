"""Derive section metadata from documentation filenames."""

from __future__ import annotations

import re
from dataclasses import dataclass

from docsnav.config import DEFAULT_ORDER

_ORDERED_NAME_RE = re.compile(r"^([0-9]+)-(.+)\.md$")
_MD_SUFFIX_RE = re.compile(r"\.md$")


@dataclass(frozen=True)
class FileInfo:
    """Section metadata taken from a filename.

    Attributes:
        order: Numeric prefix of the filename, or the default order.
        id: Filename without the numeric prefix and the ``.md`` suffix.
        title: ``id`` with hyphens turned into spaces and each word capitalized.
        filename: The original filename.
    """

    order: int
    id: str
    title: str
    filename: str


def get_file_info(filename: str, *, default_order: int = DEFAULT_ORDER) -> FileInfo:
    """Split ``NN-some-name.md`` into order ``NN`` and id ``some-name``."""
    match = _ORDERED_NAME_RE.match(filename)
    if match:
        order = int(match.group(1))
        name = match.group(2)
    else:
        order = default_order
        name = _MD_SUFFIX_RE.sub("", filename)
    return FileInfo(order=order, id=name, title=title_from_name(name), filename=filename)


def title_from_name(name: str) -> str:
    """Capitalize the first letter of each hyphen-separated word."""
    return " ".join(word[:1].upper() + word[1:] for word in name.split("-"))
