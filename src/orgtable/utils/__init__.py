"""Utility modules for orgtable.

Provides:
- logger: get_logger for logging
"""

from orgtable.utils.logger import get_logger

__all__ = [
    "get_logger",
]
