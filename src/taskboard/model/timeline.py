# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from taskboard.model.employee import Employee
from taskboard.model.task import Task


class TaskPlacement(TypedDict):
    start_column: int
    span: int


class TaskBar(TypedDict):
    task: Task
    placement: TaskPlacement


class TimelineColumn(TypedDict):
    date: pendulum.Date
    is_today: bool
    placements: list[TaskPlacement]


class TimelineRow(TypedDict):
    assignee_key: str
    employee: Optional[Employee]
    tasks: list[Task]
    bars: list[TaskBar]
