"""Tests for the row model and row parser."""

import pytest

from orgtable.rows import (
    SEPARATOR,
    DataRow,
    Separator,
    data_rows,
    split_table_line_to_cells,
    split_table_rows,
)


class TestSplitTableLineToCells:
    """Cells are trimmed; only the outer empty segments are dropped."""

    def test_spaced(self) -> None:
        assert split_table_line_to_cells("| a | b | c |") == ["a", "b", "c"]

    def test_compact(self) -> None:
        assert split_table_line_to_cells("|a|b|c|") == ["a", "b", "c"]

    def test_interior_empty_cell(self) -> None:
        assert split_table_line_to_cells("| a |  | c |") == ["a", "", "c"]

    def test_missing_trailing_pipe(self) -> None:
        assert split_table_line_to_cells("| a | b") == ["a", "b"]

    def test_indented(self) -> None:
        assert split_table_line_to_cells("    | a | b |") == ["a", "b"]

    def test_inner_spaces_kept(self) -> None:
        assert split_table_line_to_cells("| hello world |") == ["hello world"]

    def test_empty_row(self) -> None:
        assert split_table_line_to_cells("|   |   |") == ["", ""]

    @pytest.mark.parametrize("line", ["", "|", "||"])
    def test_degenerate(self, line: str) -> None:
        assert split_table_line_to_cells(line) in ([], [""])

    def test_only_one_outer_segment_dropped(self) -> None:
        assert split_table_line_to_cells("||a||") == ["", "a", ""]


class TestSplitTableRows:
    """split_table_rows builds Separator / DataRow values."""

    def test_mixed_rows(self) -> None:
        rows = split_table_rows(["| a | b |", "|---+---|", "| c | d |"])
        assert rows == [
            DataRow.of("a", "b"),
            SEPARATOR,
            DataRow.of("c", "d"),
        ]

    def test_irregular_spacing_parses_identically(self) -> None:
        assert split_table_rows(["|a|b|c|"]) == split_table_rows(["| a | b | c |"])

    def test_empty_input(self) -> None:
        assert split_table_rows([]) == []

    def test_separator_is_field_less(self) -> None:
        rows = split_table_rows(["|---|"])
        assert isinstance(rows[0], Separator)
        assert rows[0] == Separator()


class TestDataRow:
    """DataRow helpers."""

    def test_of(self) -> None:
        assert DataRow.of("a", "b").cells == ("a", "b")

    def test_len(self) -> None:
        assert len(DataRow.of("a", "b", "c")) == 3
        assert len(DataRow()) == 0

    def test_get_out_of_range(self) -> None:
        row = DataRow.of("a")
        assert row.get(0) == "a"
        assert row.get(1) == ""
        assert row.get(-1) == ""

    def test_frozen(self) -> None:
        row = DataRow.of("a")
        with pytest.raises(AttributeError):
            row.cells = ("b",)  # type: ignore[misc]

    def test_data_rows_filters_separators(self) -> None:
        rows = [DataRow.of("a"), SEPARATOR, DataRow.of("b")]
        assert data_rows(rows) == [DataRow.of("a"), DataRow.of("b")]
