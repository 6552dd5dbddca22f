# SPDX-License-Identifier: MIT

import typer
from rich.console import Console
from rich.table import Table

from daygrid import configuration
from daygrid.repository.configuration import CONFIGURATION_REPO
from daygrid.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("locale", config["locale"])
    table.add_row("event_gap", str(config["event_gap"]))
    table.add_row("week_day_width", str(config["week_day_width"]))
    table.add_row("month_cell_width", str(config["month_cell_width"]))
    table.add_row(
        "data_path",
        config["data_path"] if config["data_path"] is not None else "(default)",
    )

    console.print(table)
    console.print(f"[dim]config file: {configuration.APP_CONFIG_PATH}[/dim]")
    console.print(f"[dim]events file: {configuration.DATA_EVENTS_PATH}[/dim]")
