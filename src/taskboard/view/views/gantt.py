# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich.console import Console
from rich.text import Text

from taskboard.color import STATUS_COLORS, TODAY_STYLE
from taskboard.model.employee import Employee
from taskboard.model.task import Task
from taskboard.model.timeline import TimelineColumn, TimelineRow
from taskboard.service.assignee import UNASSIGNED_KEY
from taskboard.service.timeline import (
    build_timeline_columns,
    build_timeline_rows,
    build_window,
)
from taskboard.time import date_to_iso_str, today_local
from taskboard.view.views.header import header

COLUMN_WIDTH = 4


def gantt_view(
    space_name: Optional[str],
    tasks: list[Task],
    employees: list[Employee],
    date: Optional[pendulum.Date] = None,
    today: Optional[pendulum.Date] = None,
    left_column_width: int = 28,
) -> None:
    """
    Display a two-week timeline of task bars grouped by assignee.

    The window starts on the Sunday on or before ``date``. Bars run from a
    task's creation date to its due date and are clipped at the window edges.

    Args:
        space_name: The space the tasks belong to (None for all spaces)
        tasks: Tasks to draw
        employees: Employees used to name the assignee rows
        date: Reference date for the window (defaults to today)
        today: The date to highlight as today (defaults to today in local timezone)
        left_column_width: Width of the left column for names and titles
    """
    header(space_name, "gantt")

    console = Console()

    if today is None:
        today = today_local()
    if date is None:
        date = today

    window = build_window(date)
    columns = build_timeline_columns(window, tasks, today)
    rows = build_timeline_rows(tasks, window, employees)

    date_range_str = f"{date_to_iso_str(window[0])} to {date_to_iso_str(window[-1])}"
    console.print(f"\n[bold]{date_range_str}[/bold] ({window[0].format('MMMM YYYY')})\n")

    console.print(_build_date_header(columns, left_column_width))
    console.print(Text("─" * (left_column_width + COLUMN_WIDTH * len(columns)), style="dim"))

    if not rows:
        console.print("\n[dim]No tasks to display[/dim]\n")
        return

    for row in rows:
        for line in _build_row_lines(row, columns, left_column_width):
            console.print(line)
    console.print(_build_starts_line(columns, left_column_width))
    console.print()


def _build_date_header(columns: list[TimelineColumn], left_column_width: int) -> Text:
    line = Text(" " * left_column_width)
    for column in columns:
        label = f"{column['date'].format('dd')[:2]}{column['date'].day:02d}"
        style = TODAY_STYLE if column["is_today"] else "bold"
        line.append(label.ljust(COLUMN_WIDTH), style=style)
    return line


def _build_starts_line(
    columns: list[TimelineColumn], left_column_width: int
) -> Text:
    """Number of bars that begin in each column, blank where none do."""
    line = Text("Starts".ljust(left_column_width), style="dim")
    for column in columns:
        count = len(column["placements"])
        line.append((str(count) if count else "").ljust(COLUMN_WIDTH), style="dim")
    return line


def _truncate(text: str, width: int) -> str:
    if len(text) > width:
        return text[: width - 3] + "..."
    return text


def _build_row_lines(
    row: TimelineRow, columns: list[TimelineColumn], left_column_width: int
) -> list[Text]:
    if row["employee"] is not None:
        name = row["employee"]["name"]
    elif row["assignee_key"] == UNASSIGNED_KEY:
        name = "Unassigned"
    else:
        name = row["assignee_key"]

    lines = [
        Text(
            _truncate(f"{name} ({len(row['tasks'])})", left_column_width),
            style="bold plum1",
        )
    ]

    for bar in row["bars"]:
        task = bar["task"]
        placement = bar["placement"]
        start = placement["start_column"]
        end = start + placement["span"]
        color = STATUS_COLORS[task["status"]]

        line = Text(
            _truncate(f"  {task['title']}", left_column_width - 1).ljust(
                left_column_width
            )
        )
        for index, column in enumerate(columns):
            if start <= index < end:
                line.append("█" * COLUMN_WIDTH, style=color)
            elif column["is_today"]:
                line.append("│".ljust(COLUMN_WIDTH), style="bright_cyan")
            else:
                line.append("·".ljust(COLUMN_WIDTH), style="dim")
        lines.append(line)

    return lines
