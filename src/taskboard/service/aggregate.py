# SPDX-License-Identifier: MIT

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

import pendulum

from taskboard.model.chart import CategoryBreakdown, DailyCount
from taskboard.model.task import PRIORITIES, TASK_STATUSES, Priority, Task, TaskStatus
from taskboard.time import date_from_iso_str_optional, today_local

logger = logging.getLogger(__name__)

COMPLETION_HISTORY_DAYS = 7


def round_half_up(value: Union[Decimal, float]) -> int:
    """Round to the nearest integer, with halves rounded away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def percentage_of(count: int, total: int) -> int:
    """
    Whole-number percentage of ``count`` in ``total``, rounded half-up.

    The division is done in Decimal so exact halves such as 29 of 200 stay
    exact and round up.
    """
    return round_half_up(Decimal(count) * 100 / Decimal(total))


def is_active(task: Task) -> bool:
    return task["status"] != "DONE"


def count_by_status(tasks: list[Task]) -> dict[TaskStatus, int]:
    counts: dict[TaskStatus, int] = {status: 0 for status in TASK_STATUSES}
    for task in tasks:
        if task["status"] in counts:
            counts[task["status"]] += 1
    return counts


def count_by_priority(tasks: list[Task]) -> dict[Priority, int]:
    """
    Count active tasks by priority.

    Completed tasks are left out so the breakdown reflects outstanding work
    only.
    """
    counts: dict[Priority, int] = {priority: 0 for priority in PRIORITIES}
    for task in tasks:
        if is_active(task) and task["priority"] in counts:
            counts[task["priority"]] += 1
    return counts


def derive_percentages(counts: dict[str, int]) -> dict[str, int]:
    """Whole-number share of the total for each category, 0 everywhere when empty."""
    total = sum(counts.values())
    if total == 0:
        return {category: 0 for category in counts}
    return {
        category: percentage_of(count, total)
        for category, count in counts.items()
    }


def build_breakdown(counts: dict[str, int]) -> CategoryBreakdown:
    total = sum(counts.values())
    if total == 0:
        logger.debug("No data for breakdown over %s", list(counts))
    return {
        "counts": dict(counts),
        "percentages": derive_percentages(counts),
        "total": total,
        "has_data": total > 0,
    }


def count_completions_by_day(
    tasks: list[Task],
    today: Optional[pendulum.Date] = None,
    days: int = COMPLETION_HISTORY_DAYS,
) -> list[DailyCount]:
    """
    Count completed tasks for each of the last ``days`` days, oldest first.

    A task counts towards a day when it is DONE and its ``completed_at``
    timestamp falls on that day in local time.
    """
    if today is None:
        today = today_local()

    completion_dates = [
        date_from_iso_str_optional(task["completed_at"])
        for task in tasks
        if task["status"] == "DONE"
    ]

    history: list[DailyCount] = []
    for offset in range(days - 1, -1, -1):
        date = today.subtract(days=offset)
        count = completion_dates.count(date)
        history.append({"date": date, "label": date.format("ddd"), "count": count})
    return history
