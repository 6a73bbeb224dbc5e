# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def weekday_index(date: pendulum.Date) -> int:
    """Day-of-week index with Sunday as 0 and Saturday as 6."""
    return date.isoweekday() % 7


def date_from_iso_str(value: str) -> pendulum.Date:
    """
    Parse an ISO calendar date or timestamp into a local calendar date.

    Date-only strings are taken as-is. Timestamps without an offset are read
    as local time; timestamps with an offset are converted to local time
    before the date is taken.
    """
    parsed = pendulum.parse(value, tz="local", exact=True)
    if isinstance(parsed, pendulum.DateTime):
        return parsed.in_tz("local").date()
    if isinstance(parsed, pendulum.Date):
        return parsed
    raise ValueError(f"Not a calendar date or timestamp: {value!r}")


def date_from_iso_str_optional(value: Optional[str]) -> Optional[pendulum.Date]:
    if not value:
        return None
    return date_from_iso_str(value)


def date_to_iso_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()
