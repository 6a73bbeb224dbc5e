# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from taskboard.model.task import PRIORITIES, TASK_STATUSES
from taskboard.model.week_start import WEEK_START_OPTIONS


def validate_week_start(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.lower()
    if value not in WEEK_START_OPTIONS:
        raise typer.BadParameter(
            f"valid inputs: {', '.join(WEEK_START_OPTIONS)}, got {value!r}"
        )
    return value


def validate_status(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.upper().replace("-", "_")
    if value not in TASK_STATUSES:
        raise typer.BadParameter(f"valid inputs: {', '.join(TASK_STATUSES)}")
    return value


def validate_priority(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.upper()
    if value not in PRIORITIES:
        raise typer.BadParameter(f"valid inputs: {', '.join(PRIORITIES)}")
    return value
