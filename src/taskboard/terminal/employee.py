# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from taskboard.repository.employee import EMPLOYEE_REPO
from taskboard.terminal.custom_typer import AlphabeticalAliasedGroup

app = typer.Typer(cls=AlphabeticalAliasedGroup, no_args_is_help=True)


@app.command("add, a")
def add(
    id: str,
    name: str,
    avatar_url: Annotated[Optional[str], typer.Option("--avatar-url", "-av")] = None,
) -> None:
    """Add an employee, or rename an existing one."""
    employee = EMPLOYEE_REPO.upsert_employee(
        {"id": id, "name": name, "avatar_url": avatar_url}
    )
    Console().print(f"Saved employee [bold]{employee['id']}[/bold]: {employee['name']}")


@app.command("list, ls")
def list_employees() -> None:
    """List employees."""
    employees = EMPLOYEE_REPO.list_employees()

    console = Console()
    if not employees:
        console.print("\n[dim]No employees[/dim]\n")
        return

    table = Table(box=box.SIMPLE)
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="bold")
    for employee in employees:
        table.add_row(employee["id"], employee["name"])
    console.print(table)
