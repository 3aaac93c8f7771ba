"""Tests for filename metadata."""

from __future__ import annotations

import pytest

from docsnav.file_info import FileInfo, get_file_info, title_from_name


@pytest.mark.parametrize(
    ("filename", "order", "section_id", "title"),
    [
        ("01-getting-started.md", 1, "getting-started", "Getting Started"),
        ("10-api.md", 10, "api", "Api"),
        ("003-user-guide-advanced.md", 3, "user-guide-advanced", "User Guide Advanced"),
        ("faq.md", 999, "faq", "Faq"),
        ("README.md", 999, "README", "README"),
        ("release-notes.md", 999, "release-notes", "Release Notes"),
    ],
)
def test_get_file_info(filename: str, order: int, section_id: str, title: str) -> None:
    info = get_file_info(filename)

    assert info == FileInfo(order=order, id=section_id, title=title, filename=filename)


def test_custom_default_order() -> None:
    """Unnumbered files take the given default order."""
    assert get_file_info("faq.md", default_order=50).order == 50


def test_numeric_prefix_needs_hyphen() -> None:
    """A number without a hyphen is part of the id."""
    info = get_file_info("2024.md")

    assert info.order == 999
    assert info.id == "2024"


def test_title_keeps_rest_of_word() -> None:
    """Only the first letter of each word changes."""
    assert title_from_name("iOS-setup-FAQ") == "IOS Setup FAQ"


def test_non_ascii_digits_are_not_an_order_prefix() -> None:
    """Only ASCII digits form the numeric prefix."""
    info = get_file_info("١٢-intro.md")

    assert info.order == 999
    assert info.id == "١٢-intro"
