from conftest import make_task

from taskboard.service.assignee import (
    UNASSIGNED_KEY,
    count_tasks_per_employee,
    group_by_assignee,
)


def test_group_by_assignee_keeps_first_seen_order():
    tasks = [
        make_task(id=1, assignee_id="emp-2"),
        make_task(id=2, assignee_id=None),
        make_task(id=3, assignee_id="emp-1"),
        make_task(id=4, assignee_id="emp-2"),
        make_task(id=5, assignee_id=""),
    ]
    grouped = group_by_assignee(tasks)
    assert list(grouped) == ["emp-2", UNASSIGNED_KEY, "emp-1"]
    assert [t["id"] for t in grouped["emp-2"]] == [1, 4]
    assert [t["id"] for t in grouped[UNASSIGNED_KEY]] == [2, 5]


def test_group_by_assignee_empty():
    assert group_by_assignee([]) == {}


def test_count_tasks_per_employee():
    employees = [
        {"id": "emp-1", "name": "Alice", "avatar_url": None},
        {"id": "emp-2", "name": "Bob", "avatar_url": None},
    ]
    tasks = [
        make_task(id=1, assignee_id="emp-2"),
        make_task(id=2, assignee_id="emp-2"),
        make_task(id=3, assignee_id=None),
        make_task(id=4, assignee_id="emp-7"),
    ]
    assert count_tasks_per_employee(tasks, employees) == {"emp-1": 0, "emp-2": 2}


def test_group_by_assignee_is_repeatable():
    tasks = [
        make_task(id=1, assignee_id="emp-1"),
        make_task(id=2, assignee_id=None),
        make_task(id=3, assignee_id="emp-1"),
    ]
    assert group_by_assignee(tasks) == group_by_assignee(tasks)
