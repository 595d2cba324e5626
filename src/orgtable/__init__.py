"""
orgtable: Table editing engine for org-style plain text

Parses pipe-delimited table text into rows, aligns columns (counting
CJK/full-width characters as two columns), and computes cursor targets for
cell navigation and column editing. Pure functions, zero runtime
dependencies, no editor coupling.

Quick Start:
    >>> from orgtable import split_table_rows, calc_col_widths
    >>> from orgtable import format_table_rows_with_indents
    >>> rows = split_table_rows(["|a|b|", "|---|", "|ccc|d|"])
    >>> widths = calc_col_widths(rows)
    >>> format_table_rows_with_indents(rows, widths, ["", "", ""])
    ['| a   | b |', '|-----+---|', '| ccc | d |']

Editing Commands:
    >>> from orgtable import Cursor, apply_edit, next_cell
    >>> lines = ["| a | b |", "| c | d |"]
    >>> edit = next_cell(lines, Cursor(line=1, character=6))
    >>> apply_edit(lines, edit)[-1]
    '|   |   |'

The editor integration reads document lines and the cursor, calls one
command, and applies the returned ``TableEdit`` as a single text edit.
"""

from orgtable.classify import (
    get_indent,
    is_separator_line,
    is_table_line,
    is_table_row,
)
from orgtable.config import (
    TableConfig,
    get_table_config,
    reset_table_config,
    set_table_config,
    table_config_context,
)
from orgtable.editing import (
    Cursor,
    TableEdit,
    apply_edit,
    delete_column,
    format_table,
    insert_separator_row,
    is_table_cell_focus,
    is_table_line_focus,
    move_column,
    move_column_left,
    move_column_right,
    next_cell,
    prev_cell,
    table_enter,
)
from orgtable.errors import OrgTableError, TableEditError
from orgtable.formatting import (
    format_empty_row,
    format_separator_line,
    format_table_row,
    format_table_rows_with_indents,
)
from orgtable.grid import (
    add_column_to_table_rows,
    calc_col_widths,
    col_widths_from_lines,
    max_col_count,
    pad_rows_to_max_cols,
    remove_column_from_rows,
    swap_columns,
)
from orgtable.navigation import (
    CellPosition,
    find_cell_index,
    get_cell_index_at_position,
    get_cell_offset_in_row,
    get_next_cell_position_info,
    get_prev_cell_position_info,
)
from orgtable.region import TableRange, detect_table_range_from_lines
from orgtable.rows import (
    SEPARATOR,
    DataRow,
    Row,
    Separator,
    split_table_line_to_cells,
    split_table_rows,
)
from orgtable.width import get_display_width

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Rows
    "Row",
    "DataRow",
    "Separator",
    "SEPARATOR",
    # Width
    "get_display_width",
    # Classification
    "is_table_line",
    "is_table_row",
    "is_separator_line",
    "get_indent",
    # Parsing
    "split_table_rows",
    "split_table_line_to_cells",
    # Grid
    "calc_col_widths",
    "col_widths_from_lines",
    "max_col_count",
    "add_column_to_table_rows",
    "remove_column_from_rows",
    "pad_rows_to_max_cols",
    "swap_columns",
    # Formatting
    "format_separator_line",
    "format_empty_row",
    "format_table_row",
    "format_table_rows_with_indents",
    # Navigation
    "CellPosition",
    "find_cell_index",
    "get_cell_index_at_position",
    "get_cell_offset_in_row",
    "get_prev_cell_position_info",
    "get_next_cell_position_info",
    # Region
    "TableRange",
    "detect_table_range_from_lines",
    # Editing commands
    "Cursor",
    "TableEdit",
    "apply_edit",
    "format_table",
    "next_cell",
    "prev_cell",
    "table_enter",
    "delete_column",
    "move_column",
    "move_column_left",
    "move_column_right",
    "insert_separator_row",
    "is_table_cell_focus",
    "is_table_line_focus",
    # Configuration (ContextVar-based)
    "TableConfig",
    "get_table_config",
    "set_table_config",
    "reset_table_config",
    "table_config_context",
    # Errors
    "OrgTableError",
    "TableEditError",
]
