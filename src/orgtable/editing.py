"""Table editing commands.

Each command composes the engine (region detection, parsing, widths,
formatting, navigation) into one user action and returns a ``TableEdit``:
the replacement text for a span of document lines plus where the cursor
should go. Commands never touch an editor; the integration layer applies
the edit as a single transaction.

Commands:
    format_table          Reformat, append an empty row, go to it
    next_cell             Tab: reformat, go to next cell or append a row
    prev_cell             Shift-Tab: reformat, go to previous cell
    table_enter           Enter: add a column on the header row, else go
                          down one row (appending one at the bottom)
    delete_column         Remove the cursor column
    move_column           Swap the cursor column with a neighbour
    insert_separator_row  Normalize a separator and add an empty row below

All commands return None when the cursor line is not a table line or the
command has nothing to do (e.g. moving the first column left).

Example:
    >>> lines = ["|a|bb|", "|c|d|"]
    >>> edit = next_cell(lines, Cursor(line=0, character=1))
    >>> apply_edit(lines, edit)
    ['| a | bb |', '| c | d  |']
    >>> edit.cursor
    Cursor(line=0, character=6)

"""

from collections.abc import Sequence
from dataclasses import dataclass

from orgtable.classify import get_indent, is_separator_line, is_table_line
from orgtable.config import get_table_config
from orgtable.errors import TableEditError
from orgtable.formatting import (
    format_empty_row,
    format_separator_line,
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
    get_cell_index_at_position,
    get_cell_offset_in_row,
    get_next_cell_position_info,
    get_prev_cell_position_info,
    pipe_positions,
)
from orgtable.region import TableRange, detect_table_range_from_lines
from orgtable.rows import Row, split_table_line_to_cells, split_table_rows
from orgtable.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Cursor:
    """Editor cursor: document line and character (0-indexed)."""

    line: int
    character: int


@dataclass(frozen=True, slots=True)
class TableEdit:
    """Result of an editing command.

    Replace document lines ``start_line..end_line`` (inclusive) with
    ``lines``, then move the cursor to ``cursor`` unless it is None.
    ``lines`` may be longer than the span (rows inserted) or empty (table
    deleted).

    """

    start_line: int
    end_line: int
    lines: tuple[str, ...]
    cursor: Cursor | None = None


def apply_edit(lines: Sequence[str], edit: TableEdit) -> list[str]:
    """Return a copy of the document lines with the edit applied."""
    return [*lines[: edit.start_line], *edit.lines, *lines[edit.end_line + 1 :]]


# =============================================================================
# Helpers
# =============================================================================


def _require_line(lines: Sequence[str], line: int, character: int | None = None) -> None:
    if not 0 <= line < len(lines):
        raise TableEditError(
            f"cursor line outside document of {len(lines)} lines",
            lineno=line,
            character=character,
        )


def _locate(lines: Sequence[str], cursor: Cursor) -> TableRange | None:
    """Return the table region under the cursor, or None off-table."""
    _require_line(lines, cursor.line, cursor.character)
    if not is_table_line(lines[cursor.line]):
        return None
    region = detect_table_range_from_lines(lines, cursor.line)
    logger.debug(
        "Table region %d-%d for cursor %d:%d",
        region.start_line,
        region.end_line,
        cursor.line,
        cursor.character,
    )
    return region


def _widths_or_default(rows: Sequence[Row]) -> list[int]:
    widths = calc_col_widths(rows)
    if not widths:
        return list(get_table_config().default_col_widths)
    return widths


def _reformat(
    lines: Sequence[str],
    region: TableRange,
    rows: Sequence[Row],
    widths: Sequence[int],
) -> list[str]:
    indents = [get_indent(text) for text in region.slice(lines)]
    return format_table_rows_with_indents(rows, widths, indents)


def _first_cell_offset(row_text: str) -> int:
    return row_text.index("| ") + 2


def _skip_separator_target(document: Sequence[str], target: CellPosition) -> CellPosition:
    """Move a target that landed on a separator to the line below it."""
    if not is_separator_line(document[target.line]) or target.line + 1 >= len(document):
        return target
    below = document[target.line + 1]
    first = below.find("| ")
    return CellPosition(target.line + 1, first + 2 if first != -1 else 0)


# =============================================================================
# Commands
# =============================================================================


def format_table(lines: Sequence[str], cursor: Cursor) -> TableEdit | None:
    """Reformat the table under the cursor.

    With ``append_row_on_format`` (the default) an empty row is added after
    the table, indented like its last row, and the cursor moves to its
    first cell.
    """
    region = _locate(lines, cursor)
    if region is None:
        return None

    rows = split_table_rows(region.slice(lines))
    widths = _widths_or_default(rows)
    formatted = _reformat(lines, region, rows, widths)

    if not get_table_config().append_row_on_format:
        return TableEdit(region.start_line, region.end_line, tuple(formatted))

    empty_row = format_empty_row(widths, get_indent(lines[region.end_line]))
    return TableEdit(
        region.start_line,
        region.end_line,
        (*formatted, empty_row),
        Cursor(region.end_line + 1, _first_cell_offset(empty_row)),
    )


def insert_separator_row(lines: Sequence[str], line: int) -> TableEdit:
    """Rewrite line as a full-width separator and add an empty row below.

    Widths come from the non-separator lines of the surrounding region,
    detected loosely so a row still being typed counts. The cursor moves
    just inside the new empty row.
    """
    _require_line(lines, line)
    region = detect_table_range_from_lines(lines, line, strict=False)
    widths = col_widths_from_lines(
        [text for text in region.slice(lines) if not is_separator_line(text)]
    )
    indent = get_indent(lines[line])
    separator = format_separator_line(widths, indent)
    empty_row = format_empty_row(widths, indent)
    return TableEdit(line, line, (separator, empty_row), Cursor(line + 1, len(indent) + 2))


def next_cell(lines: Sequence[str], cursor: Cursor) -> TableEdit | None:
    """Tab: reformat and move to the next cell.

    On a separator line the separator is normalized instead (see
    ``insert_separator_row``). Past the last cell of the table an empty
    row is appended and the cursor moves into it.
    """
    region = _locate(lines, cursor)
    if region is None:
        return None

    line_text = lines[cursor.line]
    if is_separator_line(line_text):
        return insert_separator_row(lines, cursor.line)

    rows = split_table_rows(region.slice(lines))
    widths = _widths_or_default(rows)
    formatted = _reformat(lines, region, rows, widths)
    document = apply_edit(lines, TableEdit(region.start_line, region.end_line, tuple(formatted)))

    target = get_next_cell_position_info(
        document,
        cursor.line,
        cursor.character,
        region.start_line,
        region.end_line,
    )
    if target is not None:
        target = _skip_separator_target(document, target)
        return TableEdit(
            region.start_line,
            region.end_line,
            tuple(formatted),
            Cursor(target.line, target.offset),
        )

    logger.debug("No next cell after line %d, appending a row", cursor.line)
    empty_row = format_empty_row(widths, get_indent(line_text))
    return TableEdit(
        region.start_line,
        region.end_line,
        (*formatted, empty_row),
        Cursor(region.end_line + 1, _first_cell_offset(empty_row)),
    )


def prev_cell(lines: Sequence[str], cursor: Cursor) -> TableEdit | None:
    """Shift-Tab: reformat and move to the previous cell.

    On the first cell of the table the cursor stays where it is.
    """
    region = _locate(lines, cursor)
    if region is None:
        return None

    rows = split_table_rows(region.slice(lines))
    formatted = _reformat(lines, region, rows, _widths_or_default(rows))
    document = apply_edit(lines, TableEdit(region.start_line, region.end_line, tuple(formatted)))

    target = get_prev_cell_position_info(
        document,
        cursor.line,
        cursor.character,
        region.start_line,
    )
    new_cursor = Cursor(target.line, target.offset) if target is not None else None
    return TableEdit(region.start_line, region.end_line, tuple(formatted), new_cursor)


def table_enter(lines: Sequence[str], cursor: Cursor) -> TableEdit | None:
    """Enter inside a table.

    On the first row of the table a column is appended to every row and the
    cursor moves into it. Elsewhere the table is reformatted and the cursor
    moves to the same cell one row down; on the last row an empty row is
    appended first.
    """
    region = _locate(lines, cursor)
    if region is None:
        return None

    line_text = lines[cursor.line]
    row_offset = cursor.line - region.start_line

    if cursor.line == region.start_line:
        rows = add_column_to_table_rows(split_table_rows(region.slice(lines)))
        formatted = _reformat(lines, region, rows, _widths_or_default(rows))
        header = formatted[row_offset]
        return TableEdit(
            region.start_line,
            region.end_line,
            tuple(formatted),
            Cursor(cursor.line, len(header) - 2),
        )

    rows = split_table_rows(region.slice(lines))
    widths = _widths_or_default(rows)
    formatted = _reformat(lines, region, rows, widths)
    cell_index = get_cell_index_at_position(line_text, cursor.character)

    if cursor.line == region.end_line:
        empty_row = format_empty_row(widths, get_indent(line_text))
        return TableEdit(
            region.start_line,
            region.end_line,
            (*formatted, empty_row),
            Cursor(cursor.line + 1, get_cell_offset_in_row(empty_row, cell_index)),
        )

    below = formatted[row_offset + 1]
    new_cursor = None
    if cell_index < len(pipe_positions(below)) - 1:
        new_cursor = Cursor(cursor.line + 1, get_cell_offset_in_row(below, cell_index))
    return TableEdit(region.start_line, region.end_line, tuple(formatted), new_cursor)


def delete_column(lines: Sequence[str], cursor: Cursor) -> TableEdit | None:
    """Remove the column under the cursor from every row.

    When no cells remain the whole table is deleted (an edit with no
    lines). Otherwise the cursor stays in the same column, or the new last
    column when the last one was removed.
    """
    region = _locate(lines, cursor)
    if region is None:
        return None

    cell_index = get_cell_index_at_position(lines[cursor.line], cursor.character)
    rows = remove_column_from_rows(split_table_rows(region.slice(lines)), cell_index)
    widths = calc_col_widths(rows)
    if not widths:
        logger.debug("Last column removed, deleting table %d-%d", region.start_line, region.end_line)
        return TableEdit(region.start_line, region.end_line, ())

    formatted = _reformat(lines, region, rows, widths)
    row_text = formatted[cursor.line - region.start_line]
    new_index = min(cell_index, len(split_table_line_to_cells(row_text)) - 1)
    return TableEdit(
        region.start_line,
        region.end_line,
        tuple(formatted),
        Cursor(cursor.line, get_cell_offset_in_row(row_text, new_index)),
    )


def move_column(lines: Sequence[str], cursor: Cursor, direction: int) -> TableEdit | None:
    """Swap the cursor column with its left (-1) or right (+1) neighbour.

    Rows are padded to a common length first so every row moves together.
    Returns None at the table edge.

    Raises:
        TableEditError: direction is not -1 or 1.
    """
    if direction not in (-1, 1):
        raise TableEditError(
            f"column move direction must be -1 or 1, got {direction!r}",
            lineno=cursor.line,
            character=cursor.character,
        )
    region = _locate(lines, cursor)
    if region is None:
        return None

    rows = pad_rows_to_max_cols(split_table_rows(region.slice(lines)))
    cell_index = get_cell_index_at_position(lines[cursor.line], cursor.character)
    target_index = cell_index + direction
    if not 0 <= target_index < max_col_count(rows):
        return None

    rows = swap_columns(rows, cell_index, target_index)
    formatted = _reformat(lines, region, rows, calc_col_widths(rows))
    row_text = formatted[cursor.line - region.start_line]
    return TableEdit(
        region.start_line,
        region.end_line,
        tuple(formatted),
        Cursor(cursor.line, get_cell_offset_in_row(row_text, target_index)),
    )


def move_column_left(lines: Sequence[str], cursor: Cursor) -> TableEdit | None:
    """Swap the cursor column with the one to its left."""
    return move_column(lines, cursor, -1)


def move_column_right(lines: Sequence[str], cursor: Cursor) -> TableEdit | None:
    """Swap the cursor column with the one to its right."""
    return move_column(lines, cursor, 1)


# =============================================================================
# Focus predicates
# =============================================================================


def is_table_cell_focus(line_text: str, character: int) -> bool:
    """Check if the cursor is strictly between the first and last pipe."""
    if not is_table_line(line_text):
        return False
    return line_text.index("|") < character < line_text.rindex("|")


def is_table_line_focus(lines: Sequence[str], line: int) -> bool:
    """Check if line is a lone table line (no table line above or below).

    A lone line is a table being started, where Tab should normalize it
    rather than navigate.
    """
    if not 0 <= line < len(lines) or not is_table_line(lines[line]):
        return False
    if line + 1 < len(lines) and is_table_line(lines[line + 1]):
        return False
    if line - 1 >= 0 and is_table_line(lines[line - 1]):
        return False
    return True
