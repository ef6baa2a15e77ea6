"""HTML ``<table>`` rendering for a DataTable.

Extraction and rendering are separate steps: :func:`extract_cells` pulls
headers and cell values out of the table, the renderers turn them into
markup. :func:`to_html_table` escapes everything it interpolates;
:func:`to_html_table_raw` does not and must only be used on trusted data.

:func:`to_html_table_raw` is the entry point that keeps the historical
output: headers and cell text are written verbatim, byte for byte, with no
escaping. For values without markup characters both renderers agree.
"""

from __future__ import annotations

import html
from typing import Any

from datatable_helpers.errors import InvalidArgumentError
from datatable_helpers.models.table import DB_NULL, DataTable


def cell_text(value: Any) -> str:
    """Default string form of a cell; null cells are empty."""
    if value is None or value is DB_NULL:
        return ""
    return str(value)


def extract_cells(table: DataTable) -> tuple[list[str], list[list[Any]]]:
    """Return ``(headers, rows)`` with rows as cell values in column order."""
    if table is None:
        raise InvalidArgumentError("table")
    headers = [c.column_name for c in table.columns]
    rows = [row.item_array for row in table.rows]
    return headers, rows


def to_html_table(table: DataTable, *, escape: bool = True) -> str:
    """Render *table* as a single-line HTML table."""
    headers, rows = extract_cells(table)
    quote = html.escape if escape else _identity

    body = ["<table><tr>"]
    body.extend(f"<th>{quote(name)}</th>" for name in headers)
    body.append("</tr>")
    for cells in rows:
        body.append("<tr>")
        body.extend(f"<td>{quote(cell_text(value))}</td>" for value in cells)
        body.append("</tr>")
    body.append("</table>")
    return "".join(body)


def to_html_table_raw(table: DataTable) -> str:
    """Render *table* without escaping column names or cell values."""
    return to_html_table(table, escape=False)


def _identity(text: str) -> str:
    return text
