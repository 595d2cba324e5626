"""ContextVar-based table configuration for orgtable.

The engine functions take all their input as arguments. The few knobs that
an editor integration may want to change (default widths for an empty
table, region detection strictness, whether formatting appends a row) live
in a frozen config read through a ContextVar.

Usage:
    from orgtable.config import TableConfig, table_config_context

    with table_config_context(TableConfig(append_row_on_format=False)):
        edit = format_table(lines, cursor)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TableConfig:
    """Immutable table editing configuration.

    Attributes:
        default_col_widths: Widths used when a table has no data columns.
            Two columns of width 3 render as ``|     |     |``.
        strict_region: Require a trailing pipe on every line when detecting
            the table region around the cursor.
        append_row_on_format: Append an empty row after ``format_table``
            and move the cursor into it.

    """

    default_col_widths: tuple[int, ...] = (3, 3)
    strict_region: bool = True
    append_row_on_format: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TableConfig":
        """Create TableConfig from dictionary.

        Unknown keys are ignored. A list for ``default_col_widths`` is
        converted to a tuple.

        Example:
            >>> config = TableConfig.from_dict({
            ...     "default_col_widths": [4, 4, 4],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.default_col_widths
            (4, 4, 4)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "default_col_widths" in filtered:
            filtered["default_col_widths"] = tuple(filtered["default_col_widths"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TableConfig = TableConfig()

_table_config: ContextVar[TableConfig] = ContextVar(
    "table_config",
    default=_DEFAULT_CONFIG,
)


def get_table_config() -> TableConfig:
    """Get the active table configuration for this context."""
    return _table_config.get()


def set_table_config(config: TableConfig) -> None:
    """Set table configuration for the current context."""
    _table_config.set(config)


def reset_table_config() -> None:
    """Reset to the default configuration."""
    _table_config.set(_DEFAULT_CONFIG)


@contextmanager
def table_config_context(config: TableConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with table_config_context(TableConfig(strict_region=False)):
        ...     get_table_config().strict_region
        False

    """
    previous = _table_config.get()
    _table_config.set(config)
    try:
        yield
    finally:
        _table_config.set(previous)


__all__ = [
    "TableConfig",
    "get_table_config",
    "set_table_config",
    "reset_table_config",
    "table_config_context",
]
