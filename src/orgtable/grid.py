"""Column widths and grid transformations.

All functions here are pure: input rows are never mutated and a fresh
list is returned. Separator rows pass through every transformation
unchanged and never contribute to column widths.

Out-of-range column indices are a no-op for the affected row rather than
an error, so a ragged table can always be edited.
"""

from collections.abc import Sequence

from orgtable.config import get_table_config
from orgtable.rows import DataRow, Row, data_rows, split_table_rows
from orgtable.width import get_display_width


def calc_col_widths(rows: Sequence[Row]) -> list[int]:
    """Return the display width needed by each column.

    Column count is the longest data row; a missing cell counts as ``""``.
    Returns ``[]`` when there are no data rows. Callers that need something
    to render must substitute a default (see ``col_widths_from_lines``).

    Examples:
        >>> calc_col_widths([DataRow.of("longer", "short")])
        [6, 5]
        >>> calc_col_widths([])
        []
    """
    body = data_rows(rows)
    col_count = max((len(row) for row in body), default=0)
    widths = [0] * col_count
    for row in body:
        for c in range(col_count):
            widths[c] = max(widths[c], get_display_width(row.get(c)))
    return widths


def col_widths_from_lines(lines: Sequence[str]) -> list[int]:
    """Parse lines and return their column widths.

    An empty table gets the configured ``default_col_widths``.
    """
    widths = calc_col_widths(split_table_rows(lines))
    if not widths:
        return list(get_table_config().default_col_widths)
    return widths


def max_col_count(rows: Sequence[Row]) -> int:
    """Return the cell count of the longest data row (0 if none)."""
    return max((len(row) for row in data_rows(rows)), default=0)


def add_column_to_table_rows(rows: Sequence[Row]) -> list[Row]:
    """Append one empty cell to every data row."""
    return [
        DataRow(cells=(*row.cells, "")) if isinstance(row, DataRow) else row
        for row in rows
    ]


def remove_column_from_rows(rows: Sequence[Row], index: int) -> list[Row]:
    """Remove the cell at index from every data row long enough to have it."""
    result: list[Row] = []
    for row in rows:
        if isinstance(row, DataRow) and 0 <= index < len(row):
            row = DataRow(cells=row.cells[:index] + row.cells[index + 1 :])
        result.append(row)
    return result


def pad_rows_to_max_cols(rows: Sequence[Row]) -> list[Row]:
    """Pad every data row with empty cells up to the longest row."""
    target = max_col_count(rows)
    return [
        DataRow(cells=row.cells + ("",) * (target - len(row)))
        if isinstance(row, DataRow)
        else row
        for row in rows
    ]


def swap_columns(rows: Sequence[Row], i: int, j: int) -> list[Row]:
    """Exchange cells i and j in every data row where both exist."""
    result: list[Row] = []
    for row in rows:
        if isinstance(row, DataRow) and 0 <= i < len(row) and 0 <= j < len(row):
            cells = list(row.cells)
            cells[i], cells[j] = cells[j], cells[i]
            row = DataRow(cells=tuple(cells))
        result.append(row)
    return result
