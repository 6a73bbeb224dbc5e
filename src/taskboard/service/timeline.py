# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from taskboard.model.employee import Employee
from taskboard.model.task import Task
from taskboard.model.timeline import (
    TaskBar,
    TaskPlacement,
    TimelineColumn,
    TimelineRow,
)
from taskboard.service.assignee import UNASSIGNED_KEY, group_by_assignee
from taskboard.time import date_from_iso_str_optional, today_local, weekday_index

logger = logging.getLogger(__name__)

TIMELINE_WINDOW_DAYS = 14

# Assumed age of a task whose creation time is unknown
DEFAULT_LOOKBACK_DAYS = 3


def build_window(reference_date: pendulum.Date) -> list[pendulum.Date]:
    """Return the 14 consecutive dates starting at the Sunday on or before the reference date."""
    start = reference_date.subtract(days=weekday_index(reference_date))
    return [start.add(days=offset) for offset in range(TIMELINE_WINDOW_DAYS)]


def shift_window(reference_date: pendulum.Date, weeks: int) -> pendulum.Date:
    return reference_date.add(weeks=weeks)


def get_task_interval(task: Task) -> Optional[tuple[pendulum.Date, pendulum.Date]]:
    """
    Resolve the (start, end) calendar dates a task occupies on the timeline.

    A missing creation time falls back to DEFAULT_LOOKBACK_DAYS before the due
    date. A creation date after the due date collapses the interval onto the
    due date. Tasks without a due date have no interval.
    """
    due = date_from_iso_str_optional(task["due_date"])
    if due is None:
        return None

    created = date_from_iso_str_optional(task["created_at"])
    if created is None:
        created = due.subtract(days=DEFAULT_LOOKBACK_DAYS)

    if created > due:
        created = due

    return created, due


def map_task_to_columns(
    task: Task, window: list[pendulum.Date]
) -> Optional[TaskPlacement]:
    """
    Map a task's date range onto window-relative columns.

    Endpoints outside the window are clamped to its bounds. When neither the
    start nor the end date falls inside the window the task is not drawn and
    None is returned.
    """
    interval = get_task_interval(task)
    if interval is None:
        logger.debug("Task %s has no due date, not placed", task["id"])
        return None
    created, due = interval

    column_by_date = {date: index for index, date in enumerate(window)}
    start_index = column_by_date.get(created, -1)
    end_index = column_by_date.get(due, -1)

    if start_index == -1 and end_index == -1:
        logger.debug("Task %s falls outside the window, not placed", task["id"])
        return None

    last_column = len(window) - 1
    actual_start = max(0, 0 if start_index == -1 else start_index)
    actual_end = min(last_column, last_column if end_index == -1 else end_index)

    return {"start_column": actual_start, "span": actual_end - actual_start + 1}


def build_timeline_columns(
    window: list[pendulum.Date],
    tasks: Optional[list[Task]] = None,
    today: Optional[pendulum.Date] = None,
) -> list[TimelineColumn]:
    """
    Build one column per window date.

    Each column carries the placements of the tasks whose bar starts on it.
    """
    if today is None:
        today = today_local()

    columns: list[TimelineColumn] = [
        {"date": date, "is_today": date == today, "placements": []} for date in window
    ]

    for task in tasks or []:
        placement = map_task_to_columns(task, window)
        if placement is not None:
            columns[placement["start_column"]]["placements"].append(placement)

    return columns


def build_timeline_rows(
    tasks: list[Task],
    window: list[pendulum.Date],
    employees: Optional[list[Employee]] = None,
) -> list[TimelineRow]:
    """
    Build one timeline row per assignee group.

    Rows follow the order in which assignees first appear in ``tasks``. Every
    task of the group is listed; only tasks that overlap the window get a bar.
    """
    employees_by_id = {employee["id"]: employee for employee in employees or []}

    rows: list[TimelineRow] = []
    for assignee_key, assignee_tasks in group_by_assignee(tasks).items():
        bars: list[TaskBar] = []
        for task in assignee_tasks:
            placement = map_task_to_columns(task, window)
            if placement is not None:
                bars.append({"task": task, "placement": placement})

        employee = None
        if assignee_key != UNASSIGNED_KEY:
            employee = employees_by_id.get(assignee_key)

        rows.append(
            {
                "assignee_key": assignee_key,
                "employee": employee,
                "tasks": assignee_tasks,
                "bars": bars,
            }
        )

    return rows
