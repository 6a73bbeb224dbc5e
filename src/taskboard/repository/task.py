# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskboard import configuration
from taskboard.model.task import PRIORITIES, TASK_STATUSES, Task

logger = logging.getLogger(__name__)


class TaskRepository:
    def __init__(self) -> None:
        self._tasks: Optional[list[Task]] = None
        self.is_dirty = False

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        self._tasks = []
        if not configuration.DATA_TASKS_PATH.is_file():
            return

        data = load(configuration.DATA_TASKS_PATH.read_text(), Loader=Loader)
        if data is None:
            return
        if not isinstance(data, dict) or not isinstance(data.get("tasks"), list):
            raise ValueError(
                f"Expected a 'tasks' list in {configuration.DATA_TASKS_PATH}"
            )

        for raw_task in data["tasks"]:
            self._tasks.append(self.__convert_task_for_deserialization(raw_task))
        logger.debug(
            "Loaded %d tasks from %s", len(self._tasks), configuration.DATA_TASKS_PATH
        )

    def __save_data(self) -> None:
        data = {"tasks": [dict(task) for task in self.tasks]}
        configuration.DATA_TASKS_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.DATA_TASKS_PATH.write_text(
            dump(data, Dumper=Dumper, sort_keys=False)
        )
        logger.debug(
            "Saved %d tasks to %s", len(self.tasks), configuration.DATA_TASKS_PATH
        )

    def flush(self) -> bool:
        if self._tasks is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_task_for_deserialization(self, raw_task: dict[str, Any]) -> Task:
        # Dates stay strings; YAML turns unquoted dates into date objects
        for key in ("due_date", "created_at", "completed_at"):
            value = raw_task.get(key)
            raw_task[key] = value.isoformat() if hasattr(value, "isoformat") else value

        task = {
            "id": raw_task.get("id"),
            "space_id": str(raw_task.get("space_id", "")),
            "title": raw_task.get("title", ""),
            "description": raw_task.get("description"),
            "status": raw_task.get("status", "TODO"),
            "priority": raw_task.get("priority", "MEDIUM"),
            "due_date": raw_task.get("due_date"),
            "created_at": raw_task.get("created_at"),
            "assignee_id": raw_task.get("assignee_id"),
            "completed_at": raw_task.get("completed_at"),
        }
        self.__validate_task(cast(Task, task))
        return cast(Task, task)

    def __validate_task(self, task: Task) -> None:
        if task["status"] not in TASK_STATUSES:
            raise ValueError(f"Task {task['id']} has unknown status {task['status']!r}")
        if task["priority"] not in PRIORITIES:
            raise ValueError(
                f"Task {task['id']} has unknown priority {task['priority']!r}"
            )

    def list_tasks(self, space_id: Optional[str] = None) -> list[Task]:
        """Return copies of all tasks, optionally only those of one space."""
        return [
            deepcopy(task)
            for task in self.tasks
            if space_id is None or task["space_id"] == space_id
        ]

    def get_task(self, id: int) -> Task:
        for task in self.tasks:
            if task["id"] == id:
                return deepcopy(task)
        raise ValueError(f"No task with id {id}")

    def upsert_task(self, task: Task) -> Task:
        """
        Insert a new task or replace the stored task with the same id.

        A task without an id is assigned the next free one. Returns a copy of
        the stored task.
        """
        self.__validate_task(task)
        self.is_dirty = True

        stored = deepcopy(task)
        if stored["id"] is None:
            stored["id"] = max((t["id"] or 0 for t in self.tasks), default=0) + 1
            self.tasks.append(stored)
            logger.debug("Inserted task %s", stored["id"])
            return deepcopy(stored)

        for index, existing in enumerate(self.tasks):
            if existing["id"] == stored["id"]:
                self.tasks[index] = stored
                logger.debug("Updated task %s", stored["id"])
                return deepcopy(stored)

        self.tasks.append(stored)
        logger.debug("Inserted task %s", stored["id"])
        return deepcopy(stored)


TASK_REPO = TaskRepository()
