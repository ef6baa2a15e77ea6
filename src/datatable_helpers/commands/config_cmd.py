"""Config commands — show and change CLI defaults."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm

from datatable_helpers.commands._common import get_manager
from datatable_helpers.config.constants import ENV_OUTPUT_FORMAT, OUTPUT_FORMATS
from datatable_helpers.errors import error_handler
from datatable_helpers.output.formatter import output_json
from datatable_helpers.output.tables import kv_table

app = typer.Typer(name="config", help="Show and change CLI defaults.")
console = Console()


@app.command()
@error_handler
def show(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format (table or json)")] = "table",
) -> None:
    """Show the current configuration."""
    mgr = get_manager()
    data = mgr.config.model_dump()
    if fmt == "json":
        output_json(data)
        return
    console.print(kv_table(data, title="Configuration"))
    console.print(f"Config file: {mgr.config_path}")


@app.command("set-format")
@error_handler
def set_format(
    fmt: Annotated[str, typer.Argument(help=f"One of: {', '.join(OUTPUT_FORMATS)}")],
) -> None:
    """Set the default output format."""
    mgr = get_manager()
    mgr.set_format(fmt)
    console.print(f"[green]Default format set to '{mgr.config.default_format}'.[/]")
    console.print(f"[dim]{ENV_OUTPUT_FORMAT} still overrides it when set.[/]")


@app.command("set-escape")
@error_handler
def set_escape(
    enabled: Annotated[bool, typer.Option("--on/--off", help="Escape HTML output")] = True,
) -> None:
    """Turn HTML escaping of 'html' output on or off."""
    mgr = get_manager()
    mgr.set_escape(enabled)
    state = "on" if enabled else "off"
    console.print(f"[green]HTML escaping turned {state}.[/]")


@app.command("set-title")
@error_handler
def set_title(
    title: Annotated[Optional[str], typer.Argument(help="Default table title (omit to clear)")] = None,
) -> None:
    """Set or clear the default table title."""
    mgr = get_manager()
    mgr.set_title(title)
    if title:
        console.print(f"[green]Default title set to '{title}'.[/]")
    else:
        console.print("[green]Default title cleared.[/]")


@app.command()
@error_handler
def reset(
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
) -> None:
    """Restore default settings."""
    mgr = get_manager()
    if not force:
        if not Confirm.ask("Reset configuration to defaults?"):
            console.print("Cancelled.")
            return

    if mgr.reset():
        console.print("[green]Configuration reset.[/]")
    else:
        console.print("[yellow]No config file; already using defaults.[/]")
