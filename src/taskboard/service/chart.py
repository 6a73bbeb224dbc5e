# SPDX-License-Identifier: MIT

import math
from collections.abc import Mapping, Sequence
from typing import Optional

from taskboard.model.chart import BarDatum, ChartSegment, TrendPoint
from taskboard.model.task import TASK_STATUSES
from taskboard.service.aggregate import percentage_of

# Pie geometry lives in a 100x100 viewport
PIE_CENTER = 50
PIE_RADIUS = 40

# Trend charts never scale below this many items
TREND_SCALE_FLOOR = 5

BAR_SCALE_FLOOR = 1

FULL_CIRCLE_PATH = (
    f"M {PIE_CENTER},{PIE_CENTER} "
    f"m -{PIE_RADIUS},0 "
    f"a {PIE_RADIUS},{PIE_RADIUS} 0 1,0 {PIE_RADIUS * 2},0 "
    f"a {PIE_RADIUS},{PIE_RADIUS} 0 1,0 -{PIE_RADIUS * 2},0"
)


def _format_number(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def point_on_circle(angle_degrees: float) -> tuple[float, float]:
    radians = angle_degrees * math.pi / 180
    return (
        PIE_CENTER + PIE_RADIUS * math.cos(radians),
        PIE_CENTER + PIE_RADIUS * math.sin(radians),
    )


def build_slice_path(start_angle: float, end_angle: float, large_arc_flag: int) -> str:
    start_x, start_y = point_on_circle(start_angle)
    end_x, end_y = point_on_circle(end_angle)
    return (
        f"M {PIE_CENTER},{PIE_CENTER} "
        f"L {_format_number(start_x)},{_format_number(start_y)} "
        f"A {PIE_RADIUS},{PIE_RADIUS} 0 {large_arc_flag},1 "
        f"{_format_number(end_x)},{_format_number(end_y)} Z"
    )


def build_pie_segments(
    counts_by_category: Mapping[str, int],
    category_order: Sequence[str] = TASK_STATUSES,
) -> list[ChartSegment]:
    """
    Convert category counts into pie chart segments.

    Segments follow ``category_order``; categories with a zero count are
    skipped. Angles are in degrees, clockwise from the positive x axis. A
    category holding the whole total is drawn as a full circle because a
    slice whose start and end points coincide has no visible arc.

    Returns:
        The visible segments, empty when the total is zero
    """
    total = sum(counts_by_category.get(category, 0) for category in category_order)
    if total == 0:
        return []

    segments: list[ChartSegment] = []
    cumulative_percentage = 0.0
    for category in category_order:
        count = counts_by_category.get(category, 0)
        if count == 0:
            continue

        percentage = count / total * 100
        start_angle = cumulative_percentage / 100 * 360
        cumulative_percentage += percentage
        end_angle = cumulative_percentage / 100 * 360
        large_arc_flag = 1 if percentage > 50 else 0

        if count == total:
            path = FULL_CIRCLE_PATH
        else:
            path = build_slice_path(start_angle, end_angle, large_arc_flag)

        segments.append(
            {
                "category": category,
                "count": count,
                "percentage": percentage,
                "display_percentage": percentage_of(count, total),
                "start_angle": start_angle,
                "end_angle": end_angle,
                "large_arc_flag": large_arc_flag,
                "path": path,
            }
        )

    return segments


def build_trend_points(daily_counts: Sequence[int]) -> list[TrendPoint]:
    """
    Normalize a series of counts into points in a 0-100 plot box.

    x runs left to right across the series; y is inverted so larger counts
    sit higher. The vertical scale never drops below TREND_SCALE_FLOOR.
    """
    if not daily_counts:
        return []

    scale = max(max(daily_counts), TREND_SCALE_FLOOR)
    last_index = len(daily_counts) - 1

    points: list[TrendPoint] = []
    for index, count in enumerate(daily_counts):
        x = index / last_index * 100 if last_index > 0 else 0.0
        points.append({"x": x, "y": 100 - count / scale * 100})
    return points


def build_bar_data(
    counts: Mapping[str, int],
    order: Sequence[str],
    labels: Optional[Mapping[str, str]] = None,
) -> list[BarDatum]:
    """Scale counts to 0-100 bar widths relative to the largest count."""
    scale = max([counts.get(key, 0) for key in order] + [BAR_SCALE_FLOOR])
    return [
        {
            "label": labels.get(key, key) if labels is not None else key,
            "count": counts.get(key, 0),
            "width": counts.get(key, 0) / scale * 100,
        }
        for key in order
    ]
