"""Fold a flat header list into a navigation tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from docsnav.config import DEFAULT_NEST_CUTOFF
from docsnav.schemas import Header, NavNode


@dataclass
class _Frame:
    """An open parent on the builder stack."""

    level: int
    children: list[NavNode] = field(default_factory=list)


def build_navigation(
    headers: Sequence[Header],
    *,
    nest_cutoff: int = DEFAULT_NEST_CUTOFF,
) -> list[NavNode]:
    """Build the navigation forest for one document.

    Each header becomes a node attached to the nearest open header with a
    smaller level. Only headers with ``level < nest_cutoff`` stay open as
    parents; deeper headers are leaves, and headers that follow them attach to
    the closest eligible ancestor instead. Level jumps are not validated.

    Args:
        headers: Headers in document order.
        nest_cutoff: First level that can no longer receive children.

    Returns:
        Top-level navigation nodes.
    """
    root = _Frame(level=0)
    stack: list[_Frame] = [root]

    for header in headers:
        while len(stack) > 1 and stack[-1].level >= header.level:
            stack.pop()

        node = NavNode.from_header(header)
        stack[-1].children.append(node)

        if header.level < nest_cutoff:
            stack.append(_Frame(level=header.level, children=node.children))

    return root.children


def count_nodes(nodes: Iterable[NavNode]) -> int:
    """Count navigation nodes in the forest, nested ones included."""
    total = 0
    for node in nodes:
        total += 1
        total += count_nodes(node.children)
    return total
