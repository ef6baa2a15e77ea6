"""Helpers for filling and rendering in-memory tables from plain objects."""

from datatable_helpers.errors import (
    ColumnNotFoundError,
    DataTableError,
    DuplicateColumnError,
    InvalidArgumentError,
    RowOwnershipError,
)
from datatable_helpers.extensions import (
    add,
    add_or_update,
    contains_column,
    ensure_column,
    fill,
    order_properties,
    scaffold,
)
from datatable_helpers.introspection import PropertyDescriptor, display_name, get_properties
from datatable_helpers.models import (
    DB_NULL,
    DataColumn,
    DataRow,
    DataTable,
    StringComparison,
)
from datatable_helpers.output.html import extract_cells, to_html_table, to_html_table_raw

__version__ = "0.1.0"

__all__ = [
    "DB_NULL",
    "ColumnNotFoundError",
    "DataColumn",
    "DataRow",
    "DataTable",
    "DataTableError",
    "DuplicateColumnError",
    "InvalidArgumentError",
    "PropertyDescriptor",
    "RowOwnershipError",
    "StringComparison",
    "add",
    "add_or_update",
    "contains_column",
    "display_name",
    "ensure_column",
    "extract_cells",
    "fill",
    "get_properties",
    "order_properties",
    "scaffold",
    "to_html_table",
    "to_html_table_raw",
]
