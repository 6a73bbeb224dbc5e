# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from taskboard.color import OUTSIDE_MONTH_STYLE, STATUS_COLORS, TODAY_STYLE
from taskboard.model.calendar_cell import CalendarCell
from taskboard.model.week_start import WeekStartType
from taskboard.model.task import Task
from taskboard.service.calendar import (
    build_month_grid,
    get_weekday_names,
    split_into_weeks,
)
from taskboard.time import today_local
from taskboard.view.views.header import header

MAX_TASKS_PER_CELL = 3


def calendar_month_view(
    space_name: Optional[str],
    tasks: list[Task],
    date: Optional[pendulum.Date] = None,
    week_starts_on: WeekStartType = "sunday",
    cell_width: int = 16,
    today: Optional[pendulum.Date] = None,
) -> None:
    """
    Display a monthly calendar grid with tasks bucketed by due date.

    Args:
        space_name: The space the tasks belong to (None for all spaces)
        tasks: Tasks to place on the calendar, already filtered by the caller
        date: Any date in the month to display (defaults to today)
        week_starts_on: "sunday" or "monday"
        cell_width: Width of each day cell in characters
        today: The date to highlight as today (defaults to today in local timezone)
    """
    header(space_name, "calendar-month")

    console = Console()

    if today is None:
        today = today_local()
    if date is None:
        date = today

    cells = build_month_grid(date, week_starts_on, tasks, today)

    console.print(f"\n[bold]{date.format('MMMM YYYY')}[/bold]\n")
    console.print(_render_month_grid(cells, week_starts_on, cell_width))
    console.print()


def _render_cell(cell: CalendarCell, cell_width: int) -> Text:
    cell_content = Text()
    day_num = cell["date"].day

    if not cell["is_current_month"]:
        cell_content.append(f"{day_num:2d}\n", style=OUTSIDE_MONTH_STYLE)
        return cell_content

    if cell["is_today"]:
        cell_content.append(f"{day_num:2d}", style=TODAY_STYLE)
        cell_content.append("\n")
    else:
        cell_content.append(f"{day_num:2d}\n", style="bold")

    # Account for the status marker and its space
    max_title_len = cell_width - 2
    for task in cell["tasks"][:MAX_TASKS_PER_CELL]:
        title = task["title"] or "[no title]"
        if len(title) > max_title_len:
            title = title[: max_title_len - 3] + "..."
        color = STATUS_COLORS[task["status"]]
        cell_content.append("● ", style=color)
        cell_content.append(f"{title}\n")

    if len(cell["tasks"]) > MAX_TASKS_PER_CELL:
        remaining = len(cell["tasks"]) - MAX_TASKS_PER_CELL
        cell_content.append(f"  +{remaining} more\n", style="dim")

    return cell_content


def _render_month_grid(
    cells: list[CalendarCell], week_starts_on: WeekStartType, cell_width: int
) -> Table:
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))

    for day_name in get_weekday_names(week_starts_on):
        table.add_column(day_name, style="bold", width=cell_width)

    for week in split_into_weeks(cells):
        table.add_row(*[_render_cell(cell, cell_width) for cell in week])

    return table
