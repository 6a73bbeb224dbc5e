# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer
from rich.console import Console
from rich.table import Table

from taskboard import configuration
from taskboard.model.week_start import WeekStartType
from taskboard.repository.configuration import CONFIGURATION_REPO
from taskboard.terminal.custom_typer import AlphabeticalAliasedGroup
from taskboard.terminal.validate import validate_week_start

app = typer.Typer(cls=AlphabeticalAliasedGroup, no_args_is_help=True)


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
    table.add_row("week_starts_on", config["week_starts_on"])
    table.add_row(
        "hide_completed_in_calendar",
        "✓ Enabled" if config["hide_completed_in_calendar"] else "✗ Disabled",
    )
    table.add_row("default_space_id", str(config["default_space_id"]))
    table.add_row("data_path", str(configuration.DATA_PATH))

    console.print(table)


@app.command("set, s")
def set(
    week_starts_on: Annotated[
        Optional[str],
        typer.Option(
            "--week-starts-on",
            "-w",
            callback=validate_week_start,
            help="sunday or monday",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header"),
    ] = None,
    hide_completed: Annotated[
        Optional[bool],
        typer.Option(
            "--hide-completed/--show-completed",
            help="Hide completed tasks in the calendar by default",
        ),
    ] = None,
    space: Annotated[
        Optional[str],
        typer.Option("--space", "-s", help="Default space for all commands"),
    ] = None,
    remove_space: Annotated[bool, typer.Option("--remove-space")] = False,
    data_path: Annotated[Optional[str], typer.Option("--data-path")] = None,
    remove_data_path: Annotated[bool, typer.Option("--remove-data-path")] = False,
) -> None:
    """Update configuration settings."""
    try:
        CONFIGURATION_REPO.update_config(
            show_header=show_header,
            week_starts_on=cast(Optional[WeekStartType], week_starts_on),
            hide_completed_in_calendar=hide_completed,
            default_space_id=space,
            remove_default_space_id=remove_space,
            data_path=data_path,
            remove_data_path=remove_data_path,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    view()
