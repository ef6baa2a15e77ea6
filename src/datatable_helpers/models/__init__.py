"""Tabular container types."""

from datatable_helpers.models.comparison import StringComparison
from datatable_helpers.models.table import (
    DB_NULL,
    DataColumn,
    DataColumnCollection,
    DataRow,
    DataRowCollection,
    DataTable,
)

__all__ = [
    "DB_NULL",
    "DataColumn",
    "DataColumnCollection",
    "DataRow",
    "DataRowCollection",
    "DataTable",
    "StringComparison",
]
