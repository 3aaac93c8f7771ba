"""Format console output for a docs config run."""

from __future__ import annotations

from typing import Iterable

from docsnav.schemas import DocsStructure, NavNode, Section


def format_file_list(filenames: list[str]) -> str:
    """List the Markdown files found in the docs directory."""
    lines = [f"Found {len(filenames)} markdown files:"]
    lines.extend(f"   - {filename}" for filename in filenames)
    return "\n".join(lines)


def format_section_line(section: Section) -> str:
    """Describe one processed document."""
    return "\n".join(
        [
            f"Processing {section.filename}:",
            f"   Title: {section.title}",
            f"   Headers found: {len(section.headers)}",
        ]
    )


def format_structure_summary(structure: DocsStructure, *, max_depth: int = 3) -> str:
    """Render every section with its navigation tree, ``max_depth`` levels deep."""
    lines = ["Documentation Structure:"]
    for section in structure.sections:
        lines.append(f"   {section.order}. {section.title} ({len(section.headers)} headers)")
        tree = _render_navigation(section.navigation, depth=0, max_depth=max_depth)
        if tree:
            lines.append(tree)
    return "\n".join(lines)


def _render_navigation(nodes: Iterable[NavNode], *, depth: int, max_depth: int) -> str:
    if depth >= max_depth:
        return ""
    lines: list[str] = []
    for node in nodes:
        lines.append(" " * (6 + depth * 2) + "- " + node.title)
        if node.children:
            children = _render_navigation(node.children, depth=depth + 1, max_depth=max_depth)
            if children:
                lines.append(children)
    return "\n".join(lines)
