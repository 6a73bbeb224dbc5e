import pendulum
import pytest
import typer

from taskboard.terminal.parse import parse_date
from taskboard.time import (
    date_from_iso_str,
    date_from_iso_str_optional,
    date_to_iso_str,
    today_local,
    weekday_index,
)


def test_weekday_index_starts_on_sunday():
    assert weekday_index(pendulum.date(2024, 1, 7)) == 0
    assert weekday_index(pendulum.date(2024, 1, 8)) == 1
    assert weekday_index(pendulum.date(2024, 1, 13)) == 6


def test_date_from_iso_str():
    assert date_from_iso_str("2024-01-08") == pendulum.date(2024, 1, 8)
    assert date_from_iso_str("2024-01-08T09:30:00") == pendulum.date(2024, 1, 8)


def test_date_from_iso_str_rejects_garbage():
    with pytest.raises(ValueError):
        date_from_iso_str("next tuesday")


def test_date_from_iso_str_optional():
    assert date_from_iso_str_optional(None) is None
    assert date_from_iso_str_optional("") is None
    assert date_from_iso_str_optional("2024-03-01") == pendulum.date(2024, 3, 1)


def test_date_to_iso_str():
    assert date_to_iso_str(pendulum.date(2024, 3, 1)) == "2024-03-01"


def test_parse_date():
    today = today_local()
    assert parse_date(None) is None
    assert parse_date("2024-02-29") == pendulum.date(2024, 2, 29)
    assert parse_date("today") == today
    assert parse_date("y") == today.subtract(days=1)
    assert parse_date("o") == today.add(days=1)
    assert parse_date("-3") == today.subtract(days=3)
    assert parse_date(7) == today.add(days=7)


@pytest.mark.parametrize("value", ["2024-02-30", "someday", "01/02/2024"])
def test_parse_date_rejects_invalid_input(value):
    with pytest.raises(typer.BadParameter):
        parse_date(value)
