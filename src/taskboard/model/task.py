# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

TaskStatus = Literal["TODO", "IN_PROGRESS", "DONE"]
Priority = Literal["LOW", "MEDIUM", "HIGH", "URGENT"]

TASK_STATUSES: tuple[TaskStatus, ...] = ("TODO", "IN_PROGRESS", "DONE")
PRIORITIES: tuple[Priority, ...] = ("LOW", "MEDIUM", "HIGH", "URGENT")

# Display order used by the priority bar chart
PRIORITY_DISPLAY_ORDER: tuple[Priority, ...] = ("URGENT", "HIGH", "MEDIUM", "LOW")

STATUS_LABELS: dict[TaskStatus, str] = {
    "TODO": "To Do",
    "IN_PROGRESS": "In Progress",
    "DONE": "Done",
}

PRIORITY_LABELS: dict[Priority, str] = {
    "LOW": "Low",
    "MEDIUM": "Medium",
    "HIGH": "High",
    "URGENT": "Urgent",
}


class Task(TypedDict):
    id: Optional[int]
    space_id: str
    title: str
    description: Optional[str]
    status: TaskStatus
    priority: Priority
    # ISO calendar date, kept verbatim as supplied
    due_date: Optional[str]
    created_at: Optional[str]
    assignee_id: Optional[str]
    completed_at: Optional[str]
