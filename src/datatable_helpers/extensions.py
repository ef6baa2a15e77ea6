"""Helper operations over a caller-owned :class:`DataTable`.

None of these functions construct or own a table; they only append
columns, append rows and set cells on the table they are given. Arguments
are validated before anything is mutated.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from datatable_helpers.errors import InvalidArgumentError, RowOwnershipError
from datatable_helpers.introspection import (
    PropertyDescriptor,
    get_instance_properties,
    get_properties,
    unwrap_optional,
)
from datatable_helpers.models.comparison import StringComparison
from datatable_helpers.models.table import DataRow, DataTable

T = TypeVar("T")


def _require(value: Any, param: str) -> None:
    if value is None:
        raise InvalidArgumentError(param)


def _require_name(value: str | None, param: str) -> None:
    if not value:
        raise InvalidArgumentError(param, f"'{param}' cannot be None or empty.")


def contains_column(
    table: DataTable,
    column_name: str,
    comparison: StringComparison = StringComparison.ORDINAL_IGNORE_CASE,
) -> bool:
    """Return True if *table* has a column whose name matches *column_name*."""
    _require(table, "table")
    _require_name(column_name, "column_name")
    return any(comparison.equals(column_name, c.column_name) for c in table.columns)


def ensure_column(table: DataTable, column_name: str, column_type: Any = None) -> bool:
    """Create a column on *table* unless one with that name already exists.

    *column_type* defaults to ``str``; optional wrappers are unwrapped to
    their underlying type. Returns True if the column already existed,
    False if it was created.
    """
    _require(table, "table")
    _require_name(column_name, "column_name")

    if column_type is None:
        column_type = str
    column_type = unwrap_optional(column_type)

    if contains_column(table, column_name):
        return True

    table.columns.add(column_name, column_type)
    return False


def add(table: DataTable, item: Any) -> DataRow:
    """Add *item* to *table* as a row and return the row.

    A :class:`DataRow` is attached as-is. Any other object is converted
    property by property into a new row; each property is written to the
    column of the same name, which must already exist.
    """
    _require(table, "table")
    _require(item, "item")

    if isinstance(item, DataRow):
        return table.rows.add(item)

    row = table.new_row()
    for prop in get_instance_properties(item):
        row[prop.name] = prop.get_value(item)
    return table.rows.add(row)


def add_or_update(row: DataRow, column_name: str, value: Any) -> None:
    """Set a cell on *row*, adding the column to its table first if needed."""
    _require(row, "row")
    table = row.table
    if table is None:
        raise RowOwnershipError("Row does not belong to a table.")

    ensure_column(table, column_name)
    row[column_name] = value


def scaffold(table: DataTable, source_type: type) -> None:
    """Create a typed column on *table* for each readable property of *source_type*."""
    _require(table, "table")
    _require(source_type, "source_type")

    for prop in get_properties(source_type):
        ensure_column(table, prop.name, prop.value_type)


def order_properties(properties: Sequence[T]) -> list[T]:
    """Order properties for :func:`fill`.

    Walks *properties* in reverse and inserts each at the first position
    whose recorded insertion index is not greater than that position,
    recording the index each property was inserted at.
    """
    ordered: list[T] = []
    recorded: list[int] = []
    for prop in reversed(properties):
        index = 0
        while index < len(ordered) and recorded[index] > index:
            index += 1
        ordered.insert(index, prop)
        recorded.insert(index, index)
    return ordered


def fill(table: DataTable, data: Iterable[T], item_type: type[T] | None = None) -> None:
    """Fill *table* with one untyped column per property and one row per item.

    Columns are named by each property's display name when it has one.
    Cells are written by position, in the same property order.
    Without *item_type* the properties are read off the first item.
    """
    _require(table, "table")
    _require(data, "data")

    items = list(data)
    properties = _fill_properties(items, item_type)

    for prop in properties:
        table.columns.add(prop.column_name)

    for item in items:
        row = table.new_row()
        for i, prop in enumerate(properties):
            row[i] = prop.get_value(item)
        table.rows.add(row)


def _fill_properties(items: list[Any], item_type: type | None) -> list[PropertyDescriptor]:
    if item_type is not None:
        properties = get_properties(item_type)
        # Attributes only assigned at runtime are read off the first item
        if properties or not items:
            return order_properties(properties)
    elif not items:
        raise InvalidArgumentError(
            "item_type", "'item_type' is required when 'data' is empty.",
        )
    return order_properties(get_instance_properties(items[0]))
