"""Output dispatcher — renders a DataTable as a Rich table, HTML, CSV, JSON, or YAML."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from typing import Any

from rich.console import Console

from datatable_helpers.models.table import DB_NULL, DataTable
from datatable_helpers.output.html import cell_text, extract_cells, to_html_table
from datatable_helpers.output.tables import datatable_to_rich

console = Console()


def _plain(value: Any) -> Any:
    return None if value is DB_NULL else value


def table_records(table: DataTable) -> list[dict[str, Any]]:
    """Rows as ``{column: value}`` dicts, null cells as ``None``."""
    headers, rows = extract_cells(table)
    return [dict(zip(headers, (_plain(v) for v in cells))) for cells in rows]


def output_json(data: Any) -> None:
    """Print data as formatted JSON."""
    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")
    console.print_json(json.dumps(data, indent=2, default=str))


def output_yaml(data: Any) -> None:
    """Print data as YAML."""
    import yaml

    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")
    text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    console.print(text, end="", markup=False, highlight=False, emoji=False, soft_wrap=True)


def output_csv(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    """Print data as CSV."""
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(columns)
    writer.writerows([[cell_text(v) for v in row] for row in rows])
    console.print(buf.getvalue(), end="", markup=False, highlight=False, emoji=False, soft_wrap=True)


def output_html(table: DataTable, *, escape: bool = True) -> None:
    """Print the table as a single-line HTML table."""
    console.print(to_html_table(table, escape=escape), markup=False, highlight=False, emoji=False, soft_wrap=True)


def output(
    table: DataTable,
    fmt: str = "table",
    *,
    title: str | None = None,
    escape_html: bool = True,
) -> None:
    """Dispatch output to the appropriate formatter."""
    if fmt == "json":
        output_json(table_records(table))
    elif fmt == "yaml":
        output_yaml(_yaml_safe(table_records(table)))
    elif fmt == "csv":
        output_csv(*extract_cells(table))
    elif fmt == "html":
        output_html(table, escape=escape_html)
    elif fmt == "html-raw":
        output_html(table, escape=False)
    else:
        console.print(datatable_to_rich(table, title=title))


def _yaml_safe(records: list[dict[str, Any]]) -> list[dict[str, Any]]:
    # safe_dump only knows builtin scalars
    scalars = (str, int, float, bool, type(None))
    return [
        {k: v if isinstance(v, scalars) else str(v) for k, v in record.items()}
        for record in records
    ]
