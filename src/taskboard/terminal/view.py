# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import pendulum
import typer

from taskboard.model.task import Task
from taskboard.model.week_start import WeekStartType
from taskboard.repository.configuration import CONFIGURATION_REPO
from taskboard.repository.employee import EMPLOYEE_REPO
from taskboard.repository.task import TASK_REPO
from taskboard.service.calendar import shift_month
from taskboard.service.timeline import shift_window
from taskboard.terminal.custom_typer import AlphabeticalAliasedGroup
from taskboard.terminal.parse import parse_date
from taskboard.terminal.validate import validate_week_start
from taskboard.time import today_local
from taskboard.view.views.calendar import calendar_month_view
from taskboard.view.views.chart import (
    history_view,
    priority_view,
    status_view,
    workload_view,
)
from taskboard.view.views.gantt import gantt_view

app = typer.Typer(cls=AlphabeticalAliasedGroup, no_args_is_help=True)

SpaceOption = Annotated[
    Optional[str],
    typer.Option(
        "--space",
        "-s",
        help="Only include tasks of this space (defaults to the configured space)",
    ),
]

DateOption = Annotated[
    Optional[pendulum.Date],
    typer.Option(
        "--date",
        "-d",
        parser=parse_date,
        help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
    ),
]


def _resolve_space(space: Optional[str]) -> Optional[str]:
    if space is not None:
        return space
    return CONFIGURATION_REPO.get_config()["default_space_id"]


def _load_tasks(space_id: Optional[str]) -> list[Task]:
    return TASK_REPO.list_tasks(space_id)


@app.command("cal-month, cm")
def cal_month(
    date: DateOption = None,
    months: Annotated[
        int,
        typer.Option("--months", "-m", help="Move the month by this many months"),
    ] = 0,
    week_starts_on: Annotated[
        Optional[str],
        typer.Option(
            "--week-starts-on",
            "-w",
            callback=validate_week_start,
            help="sunday or monday (defaults to the configured value)",
        ),
    ] = None,
    hide_completed: Annotated[
        Optional[bool],
        typer.Option(
            "--hide-completed/--show-completed",
            help="Hide completed tasks (defaults to the configured value)",
        ),
    ] = None,
    cell_width: Annotated[
        int,
        typer.Option("--cell-width", help="Width of each day cell in characters"),
    ] = 16,
    space: SpaceOption = None,
) -> None:
    """Display a monthly calendar grid showing tasks on their due dates."""
    config = CONFIGURATION_REPO.get_config()
    space_id = _resolve_space(space)
    tasks = _load_tasks(space_id)

    if hide_completed is None:
        hide_completed = config["hide_completed_in_calendar"]
    if hide_completed:
        tasks = [task for task in tasks if task["status"] != "DONE"]

    resolved_week_start = config["week_starts_on"]
    if week_starts_on is not None:
        resolved_week_start = cast(WeekStartType, week_starts_on)

    if months != 0:
        date = shift_month(date if date is not None else today_local(), months)

    calendar_month_view(space_id, tasks, date, resolved_week_start, cell_width)


@app.command("gantt, g")
def gantt(
    date: DateOption = None,
    weeks: Annotated[
        int,
        typer.Option("--weeks", "-k", help="Move the window by this many weeks"),
    ] = 0,
    space: SpaceOption = None,
) -> None:
    """Display a two-week timeline of tasks grouped by assignee."""
    space_id = _resolve_space(space)
    tasks = _load_tasks(space_id)
    employees = EMPLOYEE_REPO.list_employees()

    if weeks != 0:
        date = shift_window(date if date is not None else today_local(), weeks)

    gantt_view(space_id, tasks, employees, date)


@app.command("status, st")
def status(space: SpaceOption = None) -> None:
    """Display how tasks are distributed across statuses."""
    space_id = _resolve_space(space)
    status_view(space_id, _load_tasks(space_id))


@app.command("priority, p")
def priority(space: SpaceOption = None) -> None:
    """Display active tasks per priority."""
    space_id = _resolve_space(space)
    priority_view(space_id, _load_tasks(space_id))


@app.command("workload, w")
def workload(space: SpaceOption = None) -> None:
    """Display the number of tasks assigned to each employee."""
    space_id = _resolve_space(space)
    workload_view(space_id, _load_tasks(space_id), EMPLOYEE_REPO.list_employees())


@app.command("history, h")
def history(space: SpaceOption = None) -> None:
    """Display tasks completed on each of the last seven days."""
    space_id = _resolve_space(space)
    history_view(space_id, _load_tasks(space_id))


@app.command("dashboard, d")
def dashboard(space: SpaceOption = None) -> None:
    """Display all charts."""
    space_id = _resolve_space(space)
    tasks = _load_tasks(space_id)
    employees = EMPLOYEE_REPO.list_employees()

    status_view(space_id, tasks)
    priority_view(space_id, tasks)
    workload_view(space_id, tasks, employees)
    history_view(space_id, tasks)
