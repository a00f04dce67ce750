"""Unit tests for core/tables.py"""

import pytest

from mdrepair.core.tables import is_table_fragment, parse_table_fragment, split_table_fragment


@pytest.mark.parametrize("line,expected", [
    ("| A | B | | --- | --- |", True),
    ("Caption | A | | :-- |",   True),
    ("| :--- |",                True),
    ("a | b | c",               False),
    ("---",                     False),
    (":-- only colons",         False),
    ("",                        False),
])
def test_is_table_fragment(line, expected):
    """A fragment needs both a pipe and a separator marker."""
    assert is_table_fragment(line) is expected


def test_caption_separated_from_header():
    """Caption text before the first pipe becomes its own paragraph."""
    out = split_table_fragment("Table 1: Results | A | B | | :--- | :--- |")
    assert out.split("\n") == [
        "Table 1: Results",
        "",
        "| A | B |",
        "| :--- | :--- |",
    ]


def test_no_caption_only_row_breaks():
    """A line that already starts with a pipe is only split into rows."""
    fragment = parse_table_fragment("| A | B | | --- | --- |")
    assert fragment.caption is None
    assert fragment.rows == ["| A | B |", "| --- | --- |"]


def test_every_row_starts_with_pipe():
    """Reconstructed rows all begin with a pipe."""
    fragment = parse_table_fragment("Cap | h1 | h2 | | --- | --- | | a | b | | c | d |")
    assert len(fragment.rows) == 4
    assert all(row.startswith("|") for row in fragment.rows)


def test_separator_index():
    """The separator row is the first row holding a dash or colon marker."""
    fragment = parse_table_fragment("Cap | h1 | | :-- | | x |")
    assert fragment.separator_index == 1


def test_separator_index_none_without_marker():
    fragment = parse_table_fragment("| h1 | | x |")
    assert fragment.separator_index is None


@pytest.mark.parametrize("line,expected_rows", [
    ("| A |   | --- |",  ["| A |", "| --- |"]),
    ("| A |\t| --- |",  ["| A |", "| --- |"]),
    ("| A || --- |",    ["| A || --- |"]),
])
def test_row_break_spacing(line, expected_rows):
    """Any whitespace run between two pipes is a row break; adjacent pipes are not."""
    assert parse_table_fragment(line).rows == expected_rows


def test_ragged_columns_are_kept():
    """Column counts are not reconciled across rows."""
    fragment = parse_table_fragment("| A | B | C | | --- | | 1 | 2")
    assert fragment.rows == ["| A | B | C |", "| --- |", "| 1 | 2"]


def test_false_positive_is_still_split():
    """Prose with a pipe and a dash run is treated as a fragment."""
    assert split_table_fragment("Use --- or | here") == "Use --- or\n\n| here"
