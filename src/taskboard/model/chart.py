# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class ChartSegment(TypedDict):
    category: str
    count: int
    percentage: float
    display_percentage: int
    start_angle: float
    end_angle: float
    large_arc_flag: int
    path: str


class CategoryBreakdown(TypedDict):
    counts: dict[str, int]
    percentages: dict[str, int]
    total: int
    has_data: bool


class BarDatum(TypedDict):
    label: str
    count: int
    width: float


class DailyCount(TypedDict):
    date: pendulum.Date
    label: str
    count: int


class TrendPoint(TypedDict):
    x: float
    y: float
