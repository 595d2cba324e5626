"""Minimal logging utilities for orgtable.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from orgtable.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Formatting table")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "orgtable." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'orgtable.mymodule'
    """
    if not (name == "orgtable" or name.startswith("orgtable.")):
        name = f"orgtable.{name}"
    return logging.getLogger(name)
