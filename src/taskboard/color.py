# SPDX-License-Identifier: MIT

from taskboard.model.task import Priority, TaskStatus

STATUS_COLORS: dict[TaskStatus, str] = {
    "TODO": "#fb923c",
    "IN_PROGRESS": "#6366f1",
    "DONE": "#10b981",
}

PRIORITY_COLORS: dict[Priority, str] = {
    "URGENT": "red",
    "HIGH": "dark_orange",
    "MEDIUM": "blue",
    "LOW": "grey62",
}

TODAY_STYLE = "bold black on bright_cyan"
OUTSIDE_MONTH_STYLE = "dim"
EMPLOYEE_BAR_COLOR = "cyan"
TREND_COLOR = "green"
