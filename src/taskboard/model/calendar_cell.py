# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from taskboard.model.task import Task


class CalendarCell(TypedDict):
    date: pendulum.Date
    is_current_month: bool
    is_today: bool
    tasks: list[Task]
