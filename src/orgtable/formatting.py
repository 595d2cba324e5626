"""Render rows back into aligned table text.

Output shapes for widths ``[1, 2]``::

    | a | bb |      data row
    |---+----|      separator
    |   |    |      empty row

Each cell gets one space of padding on both sides, cells are joined by
``" | "`` and separator segments are ``width + 2`` dashes joined by ``+``.
Padding is computed from display width, so wide characters line up.
"""

from collections.abc import Sequence

from orgtable.rows import DataRow, Row, Separator
from orgtable.width import get_display_width


def format_separator_line(widths: Sequence[int], indent: str = "") -> str:
    """Render a separator line.

    Example:
        >>> format_separator_line([1, 2, 3], "  ")
        '  |---+----+-----|'
    """
    return indent + "|" + "+".join("-" * (w + 2) for w in widths) + "|"


def format_empty_row(widths: Sequence[int], indent: str = "") -> str:
    """Render a row with every cell blank.

    Example:
        >>> format_empty_row([1, 2, 3], "  ")
        '  |   |    |     |'
    """
    return indent + "| " + " | ".join(" " * w for w in widths) + " |"


def format_table_row(row: DataRow | Sequence[str], widths: Sequence[int]) -> str:
    """Render a data row padded to widths (without indent).

    Cells beyond ``len(widths)`` are not rendered; missing cells render
    blank.
    """
    cells = row.cells if isinstance(row, DataRow) else tuple(row)
    padded = []
    for c, w in enumerate(widths):
        cell = cells[c] if c < len(cells) else ""
        padded.append(cell + " " * (w - get_display_width(cell)))
    return "| " + " | ".join(padded) + " |"


def format_table_rows_with_indents(
    rows: Sequence[Row],
    widths: Sequence[int],
    indents: Sequence[str],
) -> list[str]:
    """Render rows, prefixing each with its own indent.

    ``indents`` is parallel to ``rows``; missing entries mean no indent.
    """
    lines: list[str] = []
    for idx, row in enumerate(rows):
        indent = indents[idx] if idx < len(indents) else ""
        match row:
            case Separator():
                lines.append(format_separator_line(widths, indent))
            case DataRow():
                lines.append(indent + format_table_row(row, widths))
    return lines
