"""Tests for rendering rows back into table text."""

from orgtable.formatting import (
    format_empty_row,
    format_separator_line,
    format_table_row,
    format_table_rows_with_indents,
)
from orgtable.grid import calc_col_widths
from orgtable.rows import SEPARATOR, DataRow, split_table_rows


class TestFormatSeparatorLine:
    """Separator segments are width + 2 dashes joined by '+'."""

    def test_indented(self) -> None:
        assert format_separator_line([1, 2, 3], "  ") == "  |---+----+-----|"

    def test_no_indent(self) -> None:
        assert format_separator_line([3]) == "|-----|"


class TestFormatEmptyRow:
    """Empty rows keep the full column width."""

    def test_indented(self) -> None:
        assert format_empty_row([1, 2, 3], "  ") == "  |   |    |     |"

    def test_default_widths(self) -> None:
        assert format_empty_row([3, 3]) == "|     |     |"


class TestFormatTableRow:
    """Data rows are padded by display width."""

    def test_pads_cells(self) -> None:
        assert format_table_row(DataRow.of("a", "bb"), [3, 2]) == "| a   | bb |"

    def test_missing_cells_blank(self) -> None:
        assert format_table_row(DataRow.of("a"), [1, 2]) == "| a |    |"

    def test_wide_characters(self) -> None:
        # "日" is two columns wide, so it needs no padding in a width-2 column
        assert format_table_row(DataRow.of("日", "ab"), [2, 2]) == "| 日 | ab |"

    def test_plain_sequence(self) -> None:
        assert format_table_row(["x", "y"], [1, 1]) == "| x | y |"


class TestFormatTableRowsWithIndents:
    """Each row keeps its own indent."""

    def test_mixed_rows(self) -> None:
        rows = [DataRow.of("a", "b"), SEPARATOR, DataRow.of("cc", "d")]
        assert format_table_rows_with_indents(rows, [2, 1], ["  ", "  ", "\t"]) == [
            "  | a  | b |",
            "  |----+---|",
            "\t| cc | d |",
        ]

    def test_missing_indents_default_empty(self) -> None:
        rows = [DataRow.of("a"), DataRow.of("b")]
        assert format_table_rows_with_indents(rows, [1], ["  "]) == [
            "  | a |",
            "| b |",
        ]

    def test_irregular_input_normalized(self) -> None:
        compact = split_table_rows(["|a|b|c|"])
        spaced = split_table_rows(["| a | b | c |"])
        widths = calc_col_widths(compact)
        assert format_table_rows_with_indents(compact, widths, [""]) == ["| a | b | c |"]
        assert format_table_rows_with_indents(spaced, widths, [""]) == ["| a | b | c |"]

    def test_formatting_is_idempotent(self) -> None:
        lines = ["  | name | qty |", "  |------+-----|", "  | 日本 | 1   |"]
        rows = split_table_rows(lines)
        widths = calc_col_widths(rows)
        assert format_table_rows_with_indents(rows, widths, ["  "] * 3) == lines
