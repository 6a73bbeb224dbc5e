# SPDX-License-Identifier: MIT

from taskboard.model.employee import Employee
from taskboard.model.task import Task

UNASSIGNED_KEY = "unassigned"


def get_assignee_key(task: Task) -> str:
    return task["assignee_id"] or UNASSIGNED_KEY


def group_by_assignee(tasks: list[Task]) -> dict[str, list[Task]]:
    """
    Partition tasks by assignee.

    Groups appear in the order their assignee is first seen and keep the
    input order of their tasks. Tasks without an assignee share the
    UNASSIGNED_KEY group.
    """
    grouped: dict[str, list[Task]] = {}
    for task in tasks:
        key = get_assignee_key(task)
        if key not in grouped:
            grouped[key] = []
        grouped[key].append(task)
    return grouped


def count_tasks_per_employee(
    tasks: list[Task], employees: list[Employee]
) -> dict[str, int]:
    """Count the tasks assigned to each employee, keyed by employee id in employee order."""
    counts = {employee["id"]: 0 for employee in employees}
    for task in tasks:
        if task["assignee_id"] in counts:
            counts[task["assignee_id"]] += 1
    return counts
