"""Tests for single-line table classification."""

import pytest

from orgtable.classify import get_indent, is_separator_line, is_table_line, is_table_row


class TestIsTableLine:
    """The loose check only needs a leading pipe."""

    @pytest.mark.parametrize("text", ["|a|b|", "  | a", "\t|", "|"])
    def test_table_lines(self, text: str) -> None:
        assert is_table_line(text)

    @pytest.mark.parametrize("text", ["", "a | b |", "* heading |", "  text"])
    def test_non_table_lines(self, text: str) -> None:
        assert not is_table_line(text)


class TestIsTableRow:
    """The strict check also needs a trailing pipe."""

    def test_complete_row(self) -> None:
        assert is_table_row("| a | b |")
        assert is_table_row("  | a |  ")

    def test_missing_trailing_pipe(self) -> None:
        assert not is_table_row("| a | b")
        assert is_table_line("| a | b")

    def test_single_pipe(self) -> None:
        assert not is_table_row("|")


class TestIsSeparatorLine:
    """Separator lines hold only pipes, dashes, plus signs and spaces."""

    def test_dashes(self) -> None:
        assert is_separator_line("|---|---|")

    def test_org_style(self) -> None:
        assert is_separator_line("  |-----+---|")

    def test_data_row(self) -> None:
        assert not is_separator_line("|a|b|")

    def test_mixed_content(self) -> None:
        assert not is_separator_line("|---|b|")

    def test_empty_row_is_not_separator(self) -> None:
        assert not is_separator_line("|   |   |")

    def test_requires_leading_pipe(self) -> None:
        assert not is_separator_line("---|---|")


class TestGetIndent:
    """get_indent keeps leading spaces and tabs."""

    def test_no_indent(self) -> None:
        assert get_indent("| a |") == ""

    def test_spaces_and_tabs(self) -> None:
        assert get_indent(" \t | a |") == " \t "

    def test_empty(self) -> None:
        assert get_indent("") == ""
