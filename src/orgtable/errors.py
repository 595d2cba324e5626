"""Exception classes for orgtable.

The table engine itself is total and never raises for odd table text.
These exceptions cover malformed command input handed to
``orgtable.editing``, such as a cursor outside the document.
"""

from __future__ import annotations


class OrgTableError(Exception):
    """Base exception for all orgtable errors.

    Subclass this for specific error categories.
    """

    pass


class TableEditError(OrgTableError):
    """Error raised by an editing command.

    Raised when the command input is inconsistent, e.g. a cursor line that
    does not exist in the supplied document lines.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        character: int | None = None,
    ) -> None:
        """Initialize edit error with optional cursor location.

        Args:
            message: Error description
            lineno: Document line of the cursor (0-indexed)
            character: Character offset of the cursor (0-indexed)
        """
        self.message = message
        self.lineno = lineno
        self.character = character

        location = ""
        if lineno is not None:
            location = f"{lineno}:"
            if character is not None:
                location += f"{character}:"
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
