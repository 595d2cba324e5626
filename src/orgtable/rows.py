"""Table rows and the row parser.

A parsed table is a list of rows. Each row is either a ``Separator`` (a
header/body divider with no cell data) or a ``DataRow`` holding its cells
in column order.

Row Hierarchy:
Row
├── Separator   |---+---|
└── DataRow     | a | b |

Rows are frozen dataclasses, so grid operations always build new rows and
never mutate their input.

Example:
    >>> split_table_rows(["| a | b |", "|---+---|", "|c||"])
    [DataRow(cells=('a', 'b')), Separator(), DataRow(cells=('c', ''))]

"""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from orgtable.classify import is_separator_line

_CELL_DELIMITER = re.compile(r"\s*\|\s*")


@dataclass(frozen=True, slots=True)
class Separator:
    """Header/body divider row. Carries no cells."""


@dataclass(frozen=True, slots=True)
class DataRow:
    """Row of cell strings.

    Cells keep insertion order and are not unique. Rows in one table may
    have different lengths until padded with ``pad_rows_to_max_cols``.

    """

    cells: tuple[str, ...] = ()

    @classmethod
    def of(cls, *cells: str) -> "DataRow":
        """Build a row from positional cells: ``DataRow.of("a", "b")``."""
        return cls(cells=cells)

    def __len__(self) -> int:
        return len(self.cells)

    def get(self, index: int) -> str:
        """Return the cell at index, or ``""`` when the row is too short."""
        if 0 <= index < len(self.cells):
            return self.cells[index]
        return ""


Row = Separator | DataRow

SEPARATOR = Separator()


def data_rows(rows: Iterable[Row]) -> list[DataRow]:
    """Return only the data rows, dropping separators."""
    return [row for row in rows if isinstance(row, DataRow)]


def split_table_line_to_cells(line: str) -> list[str]:
    """Split one table line into trimmed cells.

    The outer pipes of a line produce one empty segment on each side;
    exactly one such segment is dropped at each end. Interior empty cells
    are kept as ``""``.

    Examples:
        >>> split_table_line_to_cells("| a | b |")
        ['a', 'b']
        >>> split_table_line_to_cells("|a||c|")
        ['a', '', 'c']
        >>> split_table_line_to_cells("|")
        []
    """
    cells = _CELL_DELIMITER.split(line.strip())
    if cells and cells[0] == "":
        cells.pop(0)
    if cells and cells[-1] == "":
        cells.pop()
    return cells


def split_table_rows(lines: Sequence[str]) -> list[Row]:
    """Parse table-region lines into rows.

    Separator lines become ``SEPARATOR``; every other line becomes a
    ``DataRow`` of its cells.
    """
    rows: list[Row] = []
    for line in lines:
        if is_separator_line(line):
            rows.append(SEPARATOR)
        else:
            rows.append(DataRow(cells=tuple(split_table_line_to_cells(line))))
    return rows
