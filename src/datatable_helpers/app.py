"""Root Typer app — global options and command group registration."""

from __future__ import annotations

from typing import Optional

import typer

from datatable_helpers import __version__
from datatable_helpers.commands import config_cmd, table

app = typer.Typer(
    name="datatable-helpers",
    help="Fill in-memory tables from record files and render them.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"datatable-helpers {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """datatable-helpers — scaffold, fill, and render tables."""


# Register command groups
app.add_typer(table.app, name="table")
app.add_typer(config_cmd.app, name="config")


def main() -> None:
    app()
