"""Tests for navigation tree building."""

from __future__ import annotations

import pytest

from docsnav.headers import extract_headers
from docsnav.navigation import build_navigation, count_nodes
from docsnav.schemas import Header, NavNode


def _shape(nodes: list[NavNode]) -> list:
    """Reduce a forest to (id, children) tuples for compact assertions."""
    return [(node.id, _shape(node.children)) for node in nodes]


def _assert_children_deeper(nodes: list[NavNode]) -> None:
    for node in nodes:
        for child in node.children:
            assert child.level > node.level
        _assert_children_deeper(node.children)


class TestBuildNavigation:
    """Tests for build_navigation function."""

    def test_siblings_and_nesting(self) -> None:
        """Level-2 headers nest under the preceding level-1 header."""
        forest = build_navigation(extract_headers("# A\n## B\n## C\n# D"))

        assert [node.model_dump() for node in forest] == [
            {
                "id": "a",
                "title": "A",
                "level": 1,
                "children": [
                    {"id": "b", "title": "B", "level": 2, "children": []},
                    {"id": "c", "title": "C", "level": 2, "children": []},
                ],
            },
            {"id": "d", "title": "D", "level": 1, "children": []},
        ]

    def test_empty_input(self) -> None:
        """No headers build an empty forest."""
        assert build_navigation([]) == []

    def test_level_jump_attaches_to_open_ancestor(self) -> None:
        """A level-5 header right after level 1 becomes its child."""
        forest = build_navigation(extract_headers("# A\n##### B"))

        assert _shape(forest) == [("a", [("b", [])])]

    def test_cutoff_level_never_gets_children(self) -> None:
        """Headers at the cutoff are leaves; deeper headers attach above them."""
        forest = build_navigation(extract_headers("# A\n#### B\n##### C"))

        assert _shape(forest) == [("a", [("b", []), ("c", [])])]

    def test_three_levels_nest(self) -> None:
        """Levels 1 to 3 nest and level 4 attaches under level 3."""
        content = "# A\n## B\n### C\n#### D\n## E"

        forest = build_navigation(extract_headers(content))

        assert _shape(forest) == [("a", [("b", [("c", [("d", [])])]), ("e", [])])]

    def test_shallower_header_closes_deeper_ones(self) -> None:
        """A level-1 header after a level-2 one starts a new root."""
        forest = build_navigation(extract_headers("## A\n# B\n### C"))

        assert _shape(forest) == [("a", []), ("b", [("c", [])])]

    def test_document_starting_deep(self) -> None:
        """Leading deep headers become roots."""
        forest = build_navigation(extract_headers("### A\n### B\n# C\n## D"))

        assert _shape(forest) == [("a", []), ("b", []), ("c", [("d", [])])]

    def test_custom_cutoff(self) -> None:
        """With cutoff 2 only level-1 headers take children."""
        forest = build_navigation(extract_headers("# A\n## B\n### C"), nest_cutoff=2)

        assert _shape(forest) == [("a", [("b", []), ("c", [])])]

    def test_cutoff_one_flattens_everything(self) -> None:
        """With cutoff 1 no header can be a parent."""
        forest = build_navigation(extract_headers("# A\n## B\n### C"), nest_cutoff=1)

        assert _shape(forest) == [("a", []), ("b", []), ("c", [])]

    def test_nodes_copy_header_fields(self) -> None:
        """Nodes carry the header id, title, and level."""
        header = Header(level=2, title="Hello World", id="hello-world")

        (node,) = build_navigation([header])

        assert (node.id, node.title, node.level, node.children) == ("hello-world", "Hello World", 2, [])

    @pytest.mark.parametrize(
        "content",
        [
            "# A\n## B\n## C\n# D",
            "# A\n##### B\n## C\n###### D\n### E\n# F",
            "### A\n## B\n# C\n#### D\n#### E\n## F\n### G\n#### H\n##### I",
            "## A\n## B\n## C",
            "#\n##\n#\n###",
        ],
    )
    def test_invariants(self, content: str) -> None:
        """Children are always deeper and every header becomes exactly one node."""
        headers = extract_headers(content)

        forest = build_navigation(headers)

        _assert_children_deeper(forest)
        assert count_nodes(forest) == len(headers)


class TestCountNodes:
    """Tests for count_nodes function."""

    def test_counts_nested_nodes(self) -> None:
        forest = build_navigation(extract_headers("# A\n## B\n### C\n# D"))

        assert count_nodes(forest) == 4

    def test_empty_forest(self) -> None:
        assert count_nodes([]) == 0
