"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class DataTableError(Exception):
    """Base exception for datatable-helpers."""

    exit_code: int = 1


class InvalidArgumentError(DataTableError, ValueError):
    """A required argument was ``None`` or empty."""

    exit_code = 2

    def __init__(self, param: str, message: str | None = None) -> None:
        self.param = param
        super().__init__(message or f"'{param}' cannot be None.")


class ColumnNotFoundError(DataTableError, KeyError):
    """A cell was addressed by a column name the table does not have."""

    exit_code = 3

    def __init__(self, column_name: str, table_name: str | None = None) -> None:
        self.column_name = column_name
        where = f"table '{table_name}'" if table_name else "the table"
        super().__init__(f"Column '{column_name}' does not belong to {where}.")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class DuplicateColumnError(DataTableError, ValueError):
    """A column with the same name already exists."""

    exit_code = 4

    def __init__(self, column_name: str) -> None:
        self.column_name = column_name
        super().__init__(f"A column named '{column_name}' already belongs to this table.")


class RowOwnershipError(DataTableError):
    """A row was attached to the wrong table, attached twice, or has no table."""

    exit_code = 5


class ConfigurationError(DataTableError):
    """Invalid or unusable CLI configuration."""

    exit_code = 6


class RecordLoadError(DataTableError):
    """An input file could not be read as a list of records."""

    exit_code = 7

    def __init__(self, message: str = "") -> None:
        super().__init__(message or "Could not load records")


def error_handler(func: F) -> F:
    """Decorator that catches DataTableError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except DataTableError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
