# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from taskboard.logger import configure_logging
from taskboard.terminal import configuration, employee, task, view
from taskboard.terminal.custom_typer import OrderedAliasedTyperGroup
from taskboard.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="taskboard - Team task calendars, timelines and charts in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.add_typer(task.app, name="task, t")
app.add_typer(employee.app, name="employee, em")
app.add_typer(view.app, name="view, v")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-vb", help="Show debug logging"),
    ] = False,
) -> None:
    """
    taskboard - Team task calendars, timelines and charts in the CLI

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
