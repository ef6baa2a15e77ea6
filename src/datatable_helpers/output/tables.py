"""Rich table rendering helpers."""

from __future__ import annotations

from typing import Any, Sequence

from rich.table import Table

from datatable_helpers.models.table import DataTable
from datatable_helpers.output.html import cell_text, extract_cells


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    *,
    show_lines: bool = False,
) -> Table:
    """Build a Rich Table from column headers and row data."""
    table = Table(title=title, show_lines=show_lines)
    for col in columns:
        table.add_column(col, no_wrap=False)
    for row in rows:
        table.add_row(*(cell_text(cell) for cell in row))
    return table


def datatable_to_rich(data: DataTable, *, title: str | None = None) -> Table:
    """Render a DataTable's columns and rows as a Rich Table."""
    headers, rows = extract_cells(data)
    return make_table(title or data.table_name, headers, rows)


def schema_table(data: DataTable, *, title: str | None = None) -> Table:
    """List a DataTable's columns with their ordinal and declared type."""
    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Column", style="bold cyan", no_wrap=True)
    table.add_column("Type")
    for column in data.columns:
        table.add_row(str(column.ordinal), column.column_name, type_label(column.data_type))
    return table


def type_label(data_type: Any) -> str:
    if data_type is None:
        return "object"
    return getattr(data_type, "__name__", None) or str(data_type)


def kv_table(data: dict[str, Any], *, title: str | None = None) -> Table:
    """Render a key-value dict as a two-column table."""
    table = Table(title=title, show_header=False, show_lines=False)
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, cell_text(value))
    return table
