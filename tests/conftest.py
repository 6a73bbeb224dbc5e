from typing import Any

import pytest

from taskboard import configuration
from taskboard.model.task import Task


def make_task(**overrides: Any) -> Task:
    task: dict[str, Any] = {
        "id": 1,
        "space_id": "space-1",
        "title": "Task",
        "description": None,
        "status": "TODO",
        "priority": "MEDIUM",
        "due_date": None,
        "created_at": None,
        "assignee_id": None,
        "completed_at": None,
    }
    task.update(overrides)
    return task  # type: ignore[return-value]


@pytest.fixture
def data_paths(tmp_path, monkeypatch):
    """Point configuration and data files at a temporary directory."""
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", tmp_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", tmp_path / "data")
    monkeypatch.setattr(configuration, "DATA_TASKS_PATH", tmp_path / "data" / "tasks.yaml")
    monkeypatch.setattr(
        configuration, "DATA_EMPLOYEES_PATH", tmp_path / "data" / "employees.yaml"
    )
    return tmp_path
