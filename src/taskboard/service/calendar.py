# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from taskboard.model.calendar_cell import CalendarCell
from taskboard.model.task import Task
from taskboard.model.week_start import WeekStartType
from taskboard.time import date_to_iso_str, today_local, weekday_index

logger = logging.getLogger(__name__)


def index_by_due_date(tasks: list[Task]) -> dict[str, list[Task]]:
    """
    Bucket tasks by their literal due date string.

    The key is the ``due_date`` value exactly as supplied; no parsing or
    timezone normalization is applied. Tasks without a due date are left out.
    Within a bucket tasks keep their input order.
    """
    tasks_by_date: dict[str, list[Task]] = {}

    for task in tasks:
        date_key = task["due_date"]
        if not date_key:
            continue
        if date_key not in tasks_by_date:
            tasks_by_date[date_key] = []
        tasks_by_date[date_key].append(task)

    return tasks_by_date


def get_lead_days(month_start: pendulum.Date, week_starts_on: WeekStartType) -> int:
    """Number of days from the previous month needed to fill the first week."""
    start_weekday = weekday_index(month_start)
    if week_starts_on == "sunday":
        return start_weekday
    if week_starts_on == "monday":
        # Sunday wraps to the end of the prior week
        return start_weekday - 1 if start_weekday >= 1 else 6
    raise ValueError(f"Unknown week start: {week_starts_on!r}")


def get_trail_days(month_end: pendulum.Date, week_starts_on: WeekStartType) -> int:
    """Number of days from the next month needed to fill the last week."""
    end_weekday = weekday_index(month_end)
    if week_starts_on == "sunday":
        return 6 - end_weekday
    if week_starts_on == "monday":
        return (7 - end_weekday) % 7
    raise ValueError(f"Unknown week start: {week_starts_on!r}")


def build_month_grid(
    reference_date: pendulum.Date,
    week_starts_on: WeekStartType = "sunday",
    tasks: Optional[list[Task]] = None,
    today: Optional[pendulum.Date] = None,
) -> list[CalendarCell]:
    """
    Build the ordered cells of a month calendar grid.

    The grid always covers whole weeks: leading days from the previous month
    and trailing days from the next month are included so that the first
    cell falls on the configured week start and the last cell on the day
    before it.

    Args:
        reference_date: Any date within the month to display
        week_starts_on: "sunday" or "monday"
        tasks: Tasks to bucket into the cells by due date (defaults to none)
        today: The date to flag as today (defaults to today in local timezone)

    Returns:
        One cell per calendar day, oldest first
    """
    if today is None:
        today = today_local()

    month_start = reference_date.start_of("month")
    month_end = reference_date.end_of("month")

    start_date = month_start.subtract(days=get_lead_days(month_start, week_starts_on))
    end_date = month_end.add(days=get_trail_days(month_end, week_starts_on))

    tasks_by_date = index_by_due_date(tasks) if tasks is not None else {}

    cells: list[CalendarCell] = []
    current_date = start_date
    while current_date <= end_date:
        cells.append(
            {
                "date": current_date,
                "is_current_month": current_date.month == reference_date.month,
                "is_today": current_date == today,
                "tasks": list(tasks_by_date.get(date_to_iso_str(current_date), [])),
            }
        )
        current_date = current_date.add(days=1)

    logger.debug(
        "Built month grid for %s: %d cells from %s to %s",
        month_start.format("YYYY-MM"),
        len(cells),
        start_date,
        end_date,
    )
    return cells


def split_into_weeks(cells: list[CalendarCell]) -> list[list[CalendarCell]]:
    return [cells[i : i + 7] for i in range(0, len(cells), 7)]


def get_weekday_names(week_starts_on: WeekStartType) -> list[str]:
    names = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    if week_starts_on == "monday":
        return names[1:] + names[:1]
    return names


def shift_month(reference_date: pendulum.Date, offset: int) -> pendulum.Date:
    """Return the first day of the month ``offset`` months away."""
    return reference_date.start_of("month").add(months=offset)
