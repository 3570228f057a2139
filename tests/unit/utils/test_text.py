"""Unit tests for utilkit.utils.text."""

import pytest

from utilkit.utils.text import truncate_text


@pytest.mark.parametrize(
    ("text", "max_length", "suffix", "expected"),
    [
        ("Un très long texte", 10, "...", "Un très..."),
        ("short", 10, "...", "short"),
        ("exactly10!", 10, "...", "exactly10!"),
        ("abcdefghijk", 10, "…", "abcdefghi…"),
        ("abcdefghijk", 5, "", "abcde"),
        ("", 0, "...", ""),
    ],
)
def test_truncate_text(text, max_length, suffix, expected):
    assert truncate_text(text, max_length, suffix) == expected


def test_default_suffix():
    assert truncate_text("Hello, world", 8) == "Hello..."


def test_max_length_shorter_than_suffix_yields_suffix():
    assert truncate_text("Hello, world", 2) == "..."
