# SPDX-License-Identifier: MIT

from taskboard.model.task import Task
from taskboard.time import datetime_to_iso_str, now_local


def get_task_template() -> Task:
    return {
        "id": None,
        "space_id": "",
        "title": "",
        "description": None,
        "status": "TODO",
        "priority": "MEDIUM",
        "due_date": None,
        "created_at": datetime_to_iso_str(now_local()),
        "assignee_id": None,
        "completed_at": None,
    }
