import pytest
from conftest import make_task

from taskboard import configuration
from taskboard.repository.configuration import ConfigurationRepository
from taskboard.repository.employee import EmployeeRepository
from taskboard.repository.task import TaskRepository


def test_task_repository_starts_empty(data_paths):
    repo = TaskRepository()
    assert repo.list_tasks() == []
    assert repo.flush() is False


def test_task_repository_assigns_ids_and_persists(data_paths):
    repo = TaskRepository()
    first = repo.upsert_task(make_task(id=None, title="Write report"))
    second = repo.upsert_task(make_task(id=None, title="Review", space_id="space-2"))
    assert first["id"] == 1
    assert second["id"] == 2
    assert repo.flush() is True
    assert configuration.DATA_TASKS_PATH.is_file()

    reloaded = TaskRepository()
    assert [t["title"] for t in reloaded.list_tasks()] == ["Write report", "Review"]
    assert [t["id"] for t in reloaded.list_tasks("space-2")] == [2]


def test_task_repository_updates_existing_task(data_paths):
    repo = TaskRepository()
    task = repo.upsert_task(make_task(id=None))
    task["status"] = "DONE"
    repo.upsert_task(task)
    assert repo.get_task(task["id"])["status"] == "DONE"
    assert len(repo.list_tasks()) == 1


def test_task_repository_returns_copies(data_paths):
    repo = TaskRepository()
    repo.upsert_task(make_task(id=None, title="Original"))
    repo.list_tasks()[0]["title"] = "Changed"
    assert repo.get_task(1)["title"] == "Original"


def test_task_repository_reads_unquoted_dates_as_strings(data_paths):
    configuration.DATA_TASKS_PATH.parent.mkdir(parents=True)
    configuration.DATA_TASKS_PATH.write_text(
        "tasks:\n"
        "- id: 4\n"
        "  space_id: space-1\n"
        "  title: Launch\n"
        "  status: IN_PROGRESS\n"
        "  priority: HIGH\n"
        "  due_date: 2024-01-12\n"
        "  created_at: '2024-01-08T09:30:00'\n"
    )
    task = TaskRepository().get_task(4)
    assert task["due_date"] == "2024-01-12"
    assert task["created_at"] == "2024-01-08T09:30:00"
    assert task["assignee_id"] is None


def test_task_repository_rejects_unknown_status(data_paths):
    configuration.DATA_TASKS_PATH.parent.mkdir(parents=True)
    configuration.DATA_TASKS_PATH.write_text(
        "tasks:\n- id: 1\n  space_id: s\n  title: A\n  status: BLOCKED\n"
    )
    with pytest.raises(ValueError):
        TaskRepository().list_tasks()


def test_task_repository_missing_task(data_paths):
    with pytest.raises(ValueError):
        TaskRepository().get_task(99)


def test_employee_repository_round_trip(data_paths):
    repo = EmployeeRepository()
    repo.upsert_employee({"id": "emp-1", "name": "Alice", "avatar_url": None})
    repo.upsert_employee({"id": "emp-2", "name": "Bob", "avatar_url": None})
    repo.upsert_employee({"id": "emp-1", "name": "Alicia", "avatar_url": None})
    repo.flush()

    reloaded = EmployeeRepository()
    assert [e["name"] for e in reloaded.list_employees()] == ["Alicia", "Bob"]
    assert reloaded.get_employee("emp-2")["name"] == "Bob"
    with pytest.raises(ValueError):
        reloaded.get_employee("emp-3")


def test_configuration_repository_defaults(data_paths):
    config = ConfigurationRepository().get_config()
    assert config == configuration.get_default_configuration()


def test_configuration_repository_update_and_reload(data_paths):
    repo = ConfigurationRepository()
    repo.update_config(week_starts_on="monday", default_space_id="space-1")
    assert repo.flush() is True

    config = ConfigurationRepository().get_config()
    assert config["week_starts_on"] == "monday"
    assert config["default_space_id"] == "space-1"

    repo.update_config(remove_default_space_id=True)
    assert repo.get_config()["default_space_id"] is None


def test_configuration_repository_fills_missing_settings(data_paths):
    configuration.APP_CONFIG_PATH.write_text("week_starts_on: monday\n")
    config = ConfigurationRepository().get_config()
    assert config["week_starts_on"] == "monday"
    assert config["show_header"] is True
    assert config["hide_completed_in_calendar"] is False


def test_configuration_repository_rejects_invalid_week_start(data_paths):
    configuration.APP_CONFIG_PATH.write_text("week_starts_on: friday\n")
    with pytest.raises(ValueError):
        ConfigurationRepository().get_config()
    with pytest.raises(ValueError):
        ConfigurationRepository().update_config(week_starts_on="friday")  # type: ignore[arg-type]
