# SPDX-License-Identifier: MIT

from typing import Literal

WeekStartType = Literal["sunday", "monday"]

WEEK_START_OPTIONS: tuple[WeekStartType, ...] = ("sunday", "monday")
