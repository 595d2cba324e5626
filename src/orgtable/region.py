"""Table-region detection.

Expands from a line up and down while neighbouring lines look like table
rows. The starting line itself is not checked; callers only ask about a
line they already classified as a table line.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from orgtable.classify import is_table_line, is_table_row
from orgtable.config import get_table_config


@dataclass(frozen=True, slots=True)
class TableRange:
    """Inclusive span of document lines forming one table (0-indexed)."""

    start_line: int
    end_line: int

    def __len__(self) -> int:
        return self.end_line - self.start_line + 1

    def __contains__(self, line: object) -> bool:
        return isinstance(line, int) and self.start_line <= line <= self.end_line

    def slice(self, lines: Sequence[str]) -> list[str]:
        """Return the region's lines out of the document lines."""
        return list(lines[self.start_line : self.end_line + 1])


def detect_table_range_from_lines(
    lines: Sequence[str],
    line: int,
    *,
    strict: bool | None = None,
) -> TableRange:
    """Find the contiguous table region around line.

    Args:
        lines: All document lines
        line: A line inside the table
        strict: Require a trailing pipe on neighbouring lines
            (``is_table_row``). False uses the looser ``is_table_line``.
            None reads ``strict_region`` from the active config.

    Example:
        >>> detect_table_range_from_lines(["text", "| a |", "| b |", ""], 1)
        TableRange(start_line=1, end_line=2)
    """
    if strict is None:
        strict = get_table_config().strict_region
    belongs = is_table_row if strict else is_table_line

    start_line = line
    end_line = line
    while start_line > 0 and belongs(lines[start_line - 1]):
        start_line -= 1
    while end_line < len(lines) - 1 and belongs(lines[end_line + 1]):
        end_line += 1
    return TableRange(start_line, end_line)
