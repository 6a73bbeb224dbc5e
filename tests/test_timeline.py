import pendulum
from conftest import make_task

from taskboard.service.timeline import (
    DEFAULT_LOOKBACK_DAYS,
    TIMELINE_WINDOW_DAYS,
    build_timeline_columns,
    build_timeline_rows,
    build_window,
    map_task_to_columns,
    shift_window,
)
from taskboard.time import weekday_index

REFERENCE = pendulum.date(2024, 1, 10)


def test_build_window_starts_on_sunday():
    window = build_window(REFERENCE)
    assert window[0] == pendulum.date(2024, 1, 7)
    assert window[-1] == pendulum.date(2024, 1, 20)


def test_build_window_is_fourteen_consecutive_days():
    start = pendulum.date(2023, 12, 20)
    for offset in range(60):
        window = build_window(start.add(days=offset))
        assert len(window) == TIMELINE_WINDOW_DAYS
        assert len(set(window)) == TIMELINE_WINDOW_DAYS
        assert weekday_index(window[0]) == 0
        for previous, current in zip(window, window[1:]):
            assert current == previous.add(days=1)


def test_build_window_on_a_sunday_starts_that_day():
    assert build_window(pendulum.date(2024, 1, 7))[0] == pendulum.date(2024, 1, 7)


def test_map_clamps_created_date_before_window():
    window = build_window(REFERENCE)
    task = make_task(created_at="2024-01-05", due_date="2024-01-09")
    assert map_task_to_columns(task, window) == {"start_column": 0, "span": 3}


def test_map_clamps_due_date_after_window():
    window = build_window(REFERENCE)
    task = make_task(created_at="2024-01-18", due_date="2024-01-25")
    assert map_task_to_columns(task, window) == {"start_column": 11, "span": 3}


def test_map_task_inside_window():
    window = build_window(REFERENCE)
    task = make_task(created_at="2024-01-08T09:30:00", due_date="2024-01-12")
    assert map_task_to_columns(task, window) == {"start_column": 1, "span": 5}


def test_map_defaults_missing_created_at_to_lookback():
    window = build_window(REFERENCE)
    task = make_task(created_at=None, due_date="2024-01-12")
    placement = map_task_to_columns(task, window)
    assert placement == {"start_column": 5 - DEFAULT_LOOKBACK_DAYS, "span": 4}


def test_map_without_created_at_stays_in_bounds():
    window = build_window(REFERENCE)
    for date in window:
        task = make_task(created_at=None, due_date=date.format("YYYY-MM-DD"))
        placement = map_task_to_columns(task, window)
        assert placement is not None
        assert 1 <= placement["span"] <= TIMELINE_WINDOW_DAYS
        assert placement["start_column"] >= 0
        assert placement["start_column"] + placement["span"] - 1 <= 13


def test_map_returns_none_outside_window():
    window = build_window(REFERENCE)
    before = make_task(created_at="2023-12-01", due_date="2024-01-06")
    after = make_task(created_at="2024-01-21", due_date="2024-01-30")
    assert map_task_to_columns(before, window) is None
    assert map_task_to_columns(after, window) is None


def test_map_returns_none_without_due_date():
    window = build_window(REFERENCE)
    assert map_task_to_columns(make_task(due_date=None), window) is None


def test_map_collapses_inverted_interval_onto_due_date():
    window = build_window(REFERENCE)
    task = make_task(created_at="2024-01-15", due_date="2024-01-09")
    assert map_task_to_columns(task, window) == {"start_column": 2, "span": 1}


def test_map_inverted_interval_due_before_window_is_not_drawn():
    window = build_window(REFERENCE)
    task = make_task(created_at="2024-01-15", due_date="2024-01-01")
    assert map_task_to_columns(task, window) is None


def test_shift_window():
    assert shift_window(REFERENCE, 1) == pendulum.date(2024, 1, 17)
    assert build_window(shift_window(REFERENCE, -1))[0] == pendulum.date(2023, 12, 31)


def test_build_timeline_columns_flags_today_and_starts():
    window = build_window(REFERENCE)
    tasks = [
        make_task(id=1, created_at="2024-01-05", due_date="2024-01-09"),
        make_task(id=2, created_at="2024-01-11", due_date="2024-01-12"),
    ]
    columns = build_timeline_columns(window, tasks, today=REFERENCE)
    assert len(columns) == 14
    assert [column["is_today"] for column in columns].index(True) == 3
    assert columns[0]["placements"] == [{"start_column": 0, "span": 3}]
    assert columns[4]["placements"] == [{"start_column": 4, "span": 2}]


def test_build_timeline_rows_groups_and_resolves_employees():
    window = build_window(REFERENCE)
    employees = [{"id": "emp-1", "name": "Alice Johnson", "avatar_url": None}]
    tasks = [
        make_task(id=1, assignee_id="emp-1", due_date="2024-01-09"),
        make_task(id=2, assignee_id=None, due_date="2024-01-10"),
        make_task(id=3, assignee_id="emp-1", due_date="2023-11-01"),
        make_task(id=4, assignee_id="emp-9", due_date="2024-01-11"),
    ]
    rows = build_timeline_rows(tasks, window, employees)
    assert [row["assignee_key"] for row in rows] == ["emp-1", "unassigned", "emp-9"]
    assert rows[0]["employee"] == employees[0]
    assert rows[1]["employee"] is None
    assert rows[2]["employee"] is None
    assert [t["id"] for t in rows[0]["tasks"]] == [1, 3]
    assert [bar["task"]["id"] for bar in rows[0]["bars"]] == [1]


def test_window_and_mapping_are_repeatable():
    assert build_window(REFERENCE) == build_window(REFERENCE)
    window = build_window(REFERENCE)
    task = make_task(created_at="2024-01-05", due_date="2024-01-12")
    assert map_task_to_columns(task, window) == map_task_to_columns(task, window)
