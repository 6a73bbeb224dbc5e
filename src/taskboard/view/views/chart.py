# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from taskboard.color import (
    EMPLOYEE_BAR_COLOR,
    PRIORITY_COLORS,
    STATUS_COLORS,
    TREND_COLOR,
)
from taskboard.model.chart import BarDatum
from taskboard.model.employee import Employee
from taskboard.model.task import (
    PRIORITY_DISPLAY_ORDER,
    PRIORITY_LABELS,
    STATUS_LABELS,
    TASK_STATUSES,
    Task,
)
from taskboard.service.aggregate import (
    build_breakdown,
    count_by_priority,
    count_by_status,
    count_completions_by_day,
    is_active,
)
from taskboard.service.assignee import count_tasks_per_employee
from taskboard.service.chart import (
    build_bar_data,
    build_pie_segments,
    build_trend_points,
)
from taskboard.view.views.header import header

BAR_WIDTH = 30
TREND_HEIGHT = 5


def _bar(width_percent: float, bar_width: int = BAR_WIDTH) -> str:
    return "█" * round(width_percent / 100 * bar_width)


def status_view(space_name: Optional[str], tasks: list[Task]) -> None:
    """Display the share of tasks in each status with the pie segment angles."""
    header(space_name, "status")
    console = Console()

    breakdown = build_breakdown(dict(count_by_status(tasks)))
    if not breakdown["has_data"]:
        console.print("\n[dim]No task data available[/dim]\n")
        return

    segments = build_pie_segments(breakdown["counts"], TASK_STATUSES)

    table = Table(box=box.SIMPLE)
    table.add_column("Status", style="bold")
    table.add_column("Count", justify="right")
    table.add_column("%", justify="right")
    table.add_column("Arc", justify="right", style="dim")
    table.add_column("")

    for segment in segments:
        color = STATUS_COLORS[segment["category"]]  # type: ignore[index]
        table.add_row(
            Text(STATUS_LABELS[segment["category"]], style=color),  # type: ignore[index]
            str(segment["count"]),
            f"{segment['display_percentage']}%",
            f"{segment['start_angle']:.0f}°-{segment['end_angle']:.0f}°",
            Text(_bar(segment["percentage"]), style=color),
        )

    console.print(table)
    console.print(f"[bold]{breakdown['total']}[/bold] tasks\n")


def _bar_table(bars: list[BarDatum], colors: dict[str, str]) -> Table:
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Label", style="bold")
    table.add_column("Count", justify="right")
    table.add_column("")
    for bar in bars:
        color = colors.get(bar["label"], EMPLOYEE_BAR_COLOR)
        table.add_row(
            Text(bar["label"], style=color),
            str(bar["count"]),
            Text(_bar(bar["width"]), style=color),
        )
    return table


def priority_view(space_name: Optional[str], tasks: list[Task]) -> None:
    """Display active tasks per priority as horizontal bars."""
    header(space_name, "priority")
    console = Console()

    counts = count_by_priority(tasks)
    bars = build_bar_data(dict(counts), PRIORITY_DISPLAY_ORDER, PRIORITY_LABELS)
    colors = {PRIORITY_LABELS[p]: PRIORITY_COLORS[p] for p in PRIORITY_DISPLAY_ORDER}

    console.print(_bar_table(bars, colors))
    if not any(is_active(task) for task in tasks):
        console.print("[dim]No active tasks[/dim]\n")


def workload_view(
    space_name: Optional[str], tasks: list[Task], employees: list[Employee]
) -> None:
    """Display the number of tasks assigned to each employee."""
    header(space_name, "workload")
    console = Console()

    if not employees:
        console.print("\n[dim]No employees to display[/dim]\n")
        return

    counts = count_tasks_per_employee(tasks, employees)
    labels = {employee["id"]: employee["name"] for employee in employees}
    bars = build_bar_data(counts, list(counts), labels)

    console.print(_bar_table(bars, {}))


def history_view(
    space_name: Optional[str],
    tasks: list[Task],
    today: Optional[pendulum.Date] = None,
) -> None:
    """Display tasks completed on each of the last seven days as a column chart."""
    header(space_name, "history")
    console = Console()

    history = count_completions_by_day(tasks, today)
    points = build_trend_points([day["count"] for day in history])

    # Column height in rows, from the normalized y (0 is the top of the plot)
    heights = [round((100 - point["y"]) / 100 * TREND_HEIGHT) for point in points]

    console.print()
    for level in range(TREND_HEIGHT, 0, -1):
        line = Text()
        for height in heights:
            line.append(" ██ " if height >= level else "    ", style=TREND_COLOR)
        console.print(line)

    labels = Text()
    counts = Text()
    for day in history:
        labels.append(f"{day['label']:^4}", style="bold")
        counts.append(f"{day['count']:^4}", style="dim")
    console.print(labels)
    console.print(counts)
    console.print()
