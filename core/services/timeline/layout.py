"""
Gantt geometry shared by the project and task timelines.

Every bar in a chart is expressed as a percentage of one shared window so
rows line up visually. Items are read by attribute (``start_date``,
``end_date``, ``due_date``); tasks have no ``end_date`` and may lack a
``start_date``, in which case the due date anchors the bar.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Iterable, List

from core.services.timeline.models import ChartWindow, MonthBucket, TimelineBar

WINDOW_BUFFER_DAYS = 7
EMPTY_WINDOW_DAYS = 30
PROJECT_FALLBACK_DAYS = 14
TASK_FALLBACK_DAYS = 7


def item_start(item: Any) -> date | None:
    return getattr(item, "start_date", None) or getattr(item, "due_date", None)


def item_window_end(item: Any) -> date | None:
    return (
        getattr(item, "end_date", None)
        or getattr(item, "due_date", None)
        or item_start(item)
    )


def resolve_end(item: Any, *, fallback_days: int = PROJECT_FALLBACK_DAYS) -> date:
    end = getattr(item, "end_date", None) or getattr(item, "due_date", None)
    if end is not None:
        return end
    return item_start(item) + timedelta(days=fallback_days)


def compute_chart_window(items: Iterable[Any], *, today: date) -> ChartWindow:
    dated = [item for item in items if item_start(item) is not None]
    if not dated:
        return ChartWindow(start=today, end=today + timedelta(days=EMPTY_WINDOW_DAYS))

    earliest = min(item_start(item) for item in dated)
    latest = max(item_window_end(item) for item in dated)
    buffer = timedelta(days=WINDOW_BUFFER_DAYS)
    return ChartWindow(start=earliest - buffer, end=latest + buffer)


def percent_of_window(day: date, window: ChartWindow) -> float:
    return (day - window.start).days / window.days * 100.0


def bar_position(
    item: Any,
    window: ChartWindow,
    *,
    fallback_days: int = PROJECT_FALLBACK_DAYS,
) -> TimelineBar:
    start = item_start(item)
    end = resolve_end(item, fallback_days=fallback_days)
    duration_days = max(1, (end - start).days)
    return TimelineBar(
        item_id=str(getattr(item, "id", "")),
        left_percent=percent_of_window(start, window),
        width_percent=duration_days / window.days * 100.0,
    )


def layout_bars(
    items: Iterable[Any],
    window: ChartWindow,
    *,
    fallback_days: int = PROJECT_FALLBACK_DAYS,
) -> List[TimelineBar]:
    dated = sorted(
        (item for item in items if item_start(item) is not None),
        key=item_start,
    )
    return [bar_position(item, window, fallback_days=fallback_days) for item in dated]


def month_buckets(window: ChartWindow) -> List[MonthBucket]:
    buckets: List[MonthBucket] = []
    total = (window.end - window.start).days + 1
    index = 0
    while index < total:
        day = window.start + timedelta(days=index)
        run = 0
        while index + run < total:
            current = day + timedelta(days=run)
            if (current.year, current.month) != (day.year, day.month):
                break
            run += 1
        buckets.append(MonthBucket(label=day.strftime("%b %Y"), start_index=index, day_width=run))
        index += run
    return buckets


def today_marker_percent(window: ChartWindow, today: date) -> float:
    return percent_of_window(today, window)


def due_marker_percent(item: Any, window: ChartWindow) -> float | None:
    due = getattr(item, "due_date", None)
    if due is None:
        return None
    return percent_of_window(due, window)


__all__ = [
    "WINDOW_BUFFER_DAYS",
    "EMPTY_WINDOW_DAYS",
    "PROJECT_FALLBACK_DAYS",
    "TASK_FALLBACK_DAYS",
    "compute_chart_window",
    "resolve_end",
    "bar_position",
    "layout_bars",
    "month_buckets",
    "percent_of_window",
    "today_marker_percent",
    "due_marker_percent",
]
