# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import pendulum
import typer
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from taskboard.color import PRIORITY_COLORS, STATUS_COLORS
from taskboard.model.task import PRIORITY_LABELS, STATUS_LABELS, Priority, TaskStatus
from taskboard.repository.configuration import CONFIGURATION_REPO
from taskboard.repository.task import TASK_REPO
from taskboard.template.task import get_task_template
from taskboard.terminal.custom_typer import AlphabeticalAliasedGroup
from taskboard.terminal.parse import parse_date
from taskboard.terminal.validate import validate_priority, validate_status
from taskboard.time import date_to_iso_str, datetime_to_iso_str, now_local

app = typer.Typer(cls=AlphabeticalAliasedGroup, no_args_is_help=True)


@app.command("add, a")
def add(
    title: str,
    due: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--due",
            "-u",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    priority: Annotated[
        Optional[str],
        typer.Option(
            "--priority",
            "-pr",
            callback=validate_priority,
            help="valid inputs: LOW, MEDIUM, HIGH, URGENT",
        ),
    ] = None,
    status: Annotated[
        Optional[str],
        typer.Option(
            "--status",
            "-st",
            callback=validate_status,
            help="valid inputs: TODO, IN_PROGRESS, DONE",
        ),
    ] = None,
    assignee: Annotated[
        Optional[str], typer.Option("--assignee", "-as", help="Employee id")
    ] = None,
    description: Annotated[
        Optional[str], typer.Option("--description", "-de")
    ] = None,
    space: Annotated[
        Optional[str],
        typer.Option("--space", "-s", help="Defaults to the configured space"),
    ] = None,
) -> None:
    """Add a task."""
    config = CONFIGURATION_REPO.get_config()
    space_id = space if space is not None else config["default_space_id"]
    if space_id is None:
        typer.echo(
            "Error: no space given and no default space configured", err=True
        )
        raise typer.Exit(1)

    task = get_task_template()
    task["space_id"] = space_id
    task["title"] = title
    task["description"] = description
    task["due_date"] = date_to_iso_str(due) if due is not None else None
    task["assignee_id"] = assignee
    if priority is not None:
        task["priority"] = cast(Priority, priority)
    if status is not None:
        task["status"] = cast(TaskStatus, status)
        if status == "DONE":
            task["completed_at"] = datetime_to_iso_str(now_local())

    new_task = TASK_REPO.upsert_task(task)
    Console().print(f"Added task [bold]{new_task['id']}[/bold]: {new_task['title']}")


@app.command("complete, c")
def complete(id: int) -> None:
    """Mark a task as done."""
    try:
        task = TASK_REPO.get_task(id)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    task["status"] = "DONE"
    task["completed_at"] = datetime_to_iso_str(now_local())
    TASK_REPO.upsert_task(task)
    Console().print(f"Completed task [bold]{id}[/bold]: {task['title']}")


@app.command("list, ls")
def list_tasks(
    space: Annotated[
        Optional[str],
        typer.Option("--space", "-s", help="Defaults to the configured space"),
    ] = None,
) -> None:
    """List tasks."""
    space_id = space if space is not None else CONFIGURATION_REPO.get_config()[
        "default_space_id"
    ]
    tasks = TASK_REPO.list_tasks(space_id)

    console = Console()
    if not tasks:
        console.print("\n[dim]No tasks[/dim]\n")
        return

    table = Table(box=box.SIMPLE)
    table.add_column("ID", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Status")
    table.add_column("Priority")
    table.add_column("Due")
    table.add_column("Assignee")
    table.add_column("Space", style="dim")

    for task in tasks:
        table.add_row(
            str(task["id"]),
            task["title"],
            Text(STATUS_LABELS[task["status"]], style=STATUS_COLORS[task["status"]]),
            Text(
                PRIORITY_LABELS[task["priority"]],
                style=PRIORITY_COLORS[task["priority"]],
            ),
            task["due_date"] or "",
            task["assignee_id"] or "",
            task["space_id"],
        )

    console.print(table)
