"""Table commands — render record files and inspect their schema."""

from __future__ import annotations

import typer
from rich.console import Console

from datatable_helpers.commands._common import (
    FormatOpt,
    PathArg,
    TitleOpt,
    build_record_model,
    get_manager,
    load_records,
)
from datatable_helpers.errors import error_handler
from datatable_helpers.extensions import fill, scaffold
from datatable_helpers.models.table import DataTable
from datatable_helpers.output.formatter import output, output_csv, output_json, output_yaml
from datatable_helpers.output.tables import schema_table, type_label

app = typer.Typer(name="table", help="Fill tables from record files and render them.")
console = Console()


@app.command()
@error_handler
def render(
    path: PathArg,
    fmt: FormatOpt = None,
    title: TitleOpt = None,
) -> None:
    """Fill a table from a record file and print it."""
    mgr = get_manager()
    resolved = mgr.resolve_format(fmt)
    records = load_records(path)
    if not records:
        console.print(f"[yellow]No records found in {path}.[/]")
        return

    model = build_record_model(records)
    items = [model.model_validate(r) for r in records]

    table = DataTable(path.stem)
    fill(table, items, model)
    output(
        table,
        resolved,
        title=title or mgr.config.title,
        escape_html=mgr.config.escape_html,
    )


@app.command()
@error_handler
def schema(
    path: PathArg,
    fmt: FormatOpt = None,
) -> None:
    """Show the typed columns a record file scaffolds to."""
    mgr = get_manager()
    resolved = mgr.resolve_format(fmt)
    records = load_records(path)
    if not records:
        console.print(f"[yellow]No records found in {path}.[/]")
        return

    model = build_record_model(records)
    table = DataTable(path.stem)
    scaffold(table, model)

    keys = {name: info.alias for name, info in model.model_fields.items()}
    columns = ["Ordinal", "Column", "Source Key", "Type"]
    rows = [
        [c.ordinal, c.column_name, keys.get(c.column_name, ""), type_label(c.data_type)]
        for c in table.columns
    ]
    if resolved == "json":
        output_json([dict(zip(columns, r)) for r in rows])
    elif resolved == "yaml":
        output_yaml([dict(zip(columns, r)) for r in rows])
    elif resolved == "csv":
        output_csv(columns, rows)
    else:
        console.print(schema_table(table, title=f"Schema: {path.name}"))
