"""Line classification for table text.

Each classifier looks at one line in isolation; there is no memory across
lines.

Two notions of "table line" exist:

- ``is_table_line`` is loose: the line only has to start with ``|``. It is
  used for a line the user is actively typing, which may lack its closing
  pipe.
- ``is_table_row`` is strict: the line must also end with ``|``. It is used
  for region boundaries so that a stray line starting with ``|`` is not
  absorbed into an adjacent table.
"""

import re

_TABLE_LINE = re.compile(r"[ \t]*\|")
_TABLE_ROW = re.compile(r"\s*\|.*\|\s*")
_SEPARATOR = re.compile(r"\|[-+| ]*")
_INDENT = re.compile(r"[ \t]*")


def is_table_line(text: str) -> bool:
    """Check if text starts with ``|`` after optional spaces/tabs."""
    return _TABLE_LINE.match(text) is not None


def is_table_row(text: str) -> bool:
    """Check if text is a complete table row (leading and trailing pipe)."""
    return _TABLE_ROW.fullmatch(text) is not None


def is_separator_line(text: str) -> bool:
    """Check if text is a header/body divider such as ``|---+---|``.

    The trimmed line must start with ``|``, consist only of ``|``, ``-``,
    ``+`` and spaces, and contain at least one ``-``. A row of pipes and
    spaces (an empty table row) is not a separator.

    Examples:
        >>> is_separator_line("|---|---|")
        True
        >>> is_separator_line("|---|b|")
        False
        >>> is_separator_line("|   |   |")
        False
    """
    return _SEPARATOR.fullmatch(text.strip()) is not None and "-" in text


def get_indent(text: str) -> str:
    """Return the leading spaces/tabs of text."""
    match = _INDENT.match(text)
    return match.group(0) if match else ""
