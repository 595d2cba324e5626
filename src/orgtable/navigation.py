"""Cursor navigation between table cells.

Positions are computed from row text alone: a row with pipes at offsets
``p0 < p1 < ... < pn`` has cells ``0..n-1``, cell ``i`` spanning
``[p_i, p_(i+1))``. The cursor target for a cell sits right after its
opening pipe, skipping one space if present::

    | a | b | c |
      ^   ^   ^      offsets 2, 6, 10

Navigation never raises. ``None`` means "no cell to move to", which the
caller turns into "stay in place" or "append a row".

``lines`` arguments are indexed by document line number, so a table that
starts at line 40 is addressed with ``start_line=40``.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from orgtable.classify import is_separator_line


@dataclass(frozen=True, slots=True)
class CellPosition:
    """Navigation target: document line and character offset (0-indexed)."""

    line: int
    offset: int


def pipe_positions(text: str) -> list[int]:
    """Return the offsets of every ``|`` in text."""
    return [i for i, ch in enumerate(text) if ch == "|"]


def _offset_after_pipe(text: str, pipe: int) -> int:
    offset = pipe + 1
    if offset < len(text) and text[offset] == " ":
        offset += 1
    return offset


def find_cell_index(line_text: str, character: int) -> int | None:
    """Return the index of the cell containing character, or None.

    None means the character is before the first pipe, on or after the
    last pipe, or the line has fewer than two pipes.
    """
    pipes = pipe_positions(line_text)
    for i in range(len(pipes) - 1):
        if pipes[i] <= character < pipes[i + 1]:
            return i
    return None


def get_cell_index_at_position(line_text: str, character: int) -> int:
    """Return the index of the cell containing character, defaulting to 0.

    Examples:
        >>> get_cell_index_at_position("|test|test|", 6)
        1
        >>> get_cell_index_at_position("test", 0)
        0
    """
    index = find_cell_index(line_text, character)
    return 0 if index is None else index


def get_cell_offset_in_row(row_text: str, cell_index: int) -> int:
    """Return the cursor offset for a cell of a formatted row.

    Out-of-range indices fall back to just inside the first ``| `` of the
    row, or just past the last pipe when the row has no ``| ``.

    Example:
        >>> get_cell_offset_in_row("| a | b | c |", 2)
        10
    """
    pipes = pipe_positions(row_text)
    if 0 <= cell_index < len(pipes) - 1:
        return _offset_after_pipe(row_text, pipes[cell_index])
    first = row_text.find("| ")
    if first != -1:
        return first + 2
    return (pipes[-1] if pipes else 0) + 1


def get_prev_cell_position_info(
    lines: Sequence[str],
    current_line: int,
    char_pos: int,
    start_line: int,
) -> CellPosition | None:
    """Return the cell before the cursor (Shift-Tab).

    The cursor cell is taken at ``char_pos - 1`` so a cursor sitting right
    after a pipe belongs to the cell it just left. From the first cell the
    target is the last cell of the nearest data row above, skipping
    separators. Returns None on the first cell of the first row.
    """
    row_text = lines[current_line]
    cell_index = get_cell_index_at_position(row_text, char_pos - 1)

    if cell_index == 0 and current_line > start_line:
        prev_line = current_line - 1
        while prev_line >= start_line and is_separator_line(lines[prev_line]):
            prev_line -= 1
        if prev_line >= start_line:
            prev_text = lines[prev_line]
            prev_pipes = pipe_positions(prev_text)
            if len(prev_pipes) >= 2:
                return CellPosition(prev_line, _offset_after_pipe(prev_text, prev_pipes[-2]))
    elif cell_index > 0:
        pipes = pipe_positions(row_text)
        return CellPosition(current_line, _offset_after_pipe(row_text, pipes[cell_index - 1]))
    return None


def get_next_cell_position_info(
    lines: Sequence[str],
    current_line: int,
    char_pos: int,
    start_line: int,
    end_line: int,
) -> CellPosition | None:
    """Return the cell after the cursor (Tab).

    A cursor at end of line counts as being in the last cell. From the last
    cell the target is the first cell of the next row; a separator right
    below is skipped when a row follows it. Returns None when there is no
    next row within ``end_line`` or the next row has no ``| `` cell start.
    """
    row_text = lines[current_line]
    cell_index = get_cell_index_at_position(row_text, char_pos)
    pipes = pipe_positions(row_text)

    if char_pos == len(row_text) and len(pipes) >= 2:
        cell_index = len(pipes) - 2

    if cell_index < len(pipes) - 2:
        return CellPosition(current_line, _offset_after_pipe(row_text, pipes[cell_index + 1]))

    if current_line < end_line:
        next_text = lines[current_line + 1]
        if is_separator_line(next_text) and current_line + 2 <= end_line:
            first = lines[current_line + 2].find("| ")
            if first != -1:
                return CellPosition(current_line + 2, first + 2)
        else:
            first = next_text.find("| ")
            if first != -1:
                return CellPosition(current_line + 1, first + 2)
    return None
