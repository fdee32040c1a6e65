from datetime import date

import pytest

from core.services.timeline import (
    ChartWindow,
    bar_position,
    compute_chart_window,
    layout_bars,
    month_buckets,
    resolve_end,
)
from core.services.timeline.layout import due_marker_percent, today_marker_percent
from tests.factories import project, task_like

TODAY = date(2024, 1, 20)


def test_empty_input_gets_thirty_day_window_from_today():
    window = compute_chart_window([], today=TODAY)

    assert window == ChartWindow(start=TODAY, end=date(2024, 2, 19))
    assert window.days == 30


def test_window_pads_seven_days_on_each_side():
    items = [
        project(date(2024, 1, 1), due=date(2024, 1, 15)),
        project(date(2024, 1, 10), end=date(2024, 1, 29)),
    ]

    window = compute_chart_window(items, today=TODAY)

    assert window.start == date(2023, 12, 25)
    assert window.end == date(2024, 2, 5)
    assert window.days == 42


def test_window_end_prefers_end_date_over_due_date():
    item = project(date(2024, 3, 1), end=date(2024, 3, 10), due=date(2024, 4, 30))

    window = compute_chart_window([item], today=TODAY)

    assert window.end == date(2024, 3, 17)


def test_window_falls_back_to_start_when_item_has_no_end():
    window = compute_chart_window([project(date(2024, 5, 1))], today=TODAY)

    assert window == ChartWindow(start=date(2024, 4, 24), end=date(2024, 5, 8))


def test_bar_geometry_example():
    window = ChartWindow(start=date(2023, 12, 25), end=date(2024, 2, 5))
    item = project(date(2024, 1, 1), due=date(2024, 1, 15))

    bar = bar_position(item, window)

    assert bar.item_id == item.id
    assert bar.left_percent == pytest.approx(16.67, abs=0.01)
    assert bar.width_percent == pytest.approx(33.33, abs=0.01)


def test_bar_width_never_below_one_day():
    window = ChartWindow(start=date(2024, 1, 1), end=date(2024, 1, 21))
    item = project(date(2024, 1, 5), end=date(2024, 1, 5))

    bar = bar_position(item, window)

    assert bar.width_percent == pytest.approx(100 / 20)


def test_end_resolution_order_and_fallbacks():
    with_end = project(date(2024, 1, 1), end=date(2024, 1, 9), due=date(2024, 1, 30))
    with_due = project(date(2024, 1, 1), due=date(2024, 1, 30))
    bare = project(date(2024, 1, 1))

    assert resolve_end(with_end) == date(2024, 1, 9)
    assert resolve_end(with_due) == date(2024, 1, 30)
    assert resolve_end(bare) == date(2024, 1, 15)
    assert resolve_end(bare, fallback_days=7) == date(2024, 1, 8)


def test_task_without_start_is_anchored_on_due_date():
    task = task_like(due=date(2024, 1, 12))
    window = ChartWindow(start=date(2024, 1, 2), end=date(2024, 1, 22))

    bar = bar_position(task, window, fallback_days=7)

    assert bar.left_percent == pytest.approx(50.0)
    assert bar.width_percent == pytest.approx(5.0)


def test_layout_bars_orders_by_start_and_skips_undated():
    late = task_like(start=date(2024, 1, 10), due=date(2024, 1, 12))
    early = task_like(start=date(2024, 1, 2), due=date(2024, 1, 4))
    undated = task_like()
    items = [late, undated, early]

    window = compute_chart_window(items, today=TODAY)
    bars = layout_bars(items, window, fallback_days=7)

    assert [b.item_id for b in bars] == [early.id, late.id]
    for bar in bars:
        assert 0 <= bar.left_percent <= 100
        assert bar.left_percent + bar.width_percent <= 100


def test_month_buckets_cover_window_inclusively():
    window = ChartWindow(start=date(2024, 1, 25), end=date(2024, 3, 5))

    buckets = month_buckets(window)

    assert [b.label for b in buckets] == ["Jan 2024", "Feb 2024", "Mar 2024"]
    assert [b.start_index for b in buckets] == [0, 7, 36]
    assert [b.day_width for b in buckets] == [7, 29, 5]
    assert sum(b.day_width for b in buckets) == (window.end - window.start).days + 1


def test_month_buckets_across_year_boundary():
    window = ChartWindow(start=date(2023, 12, 30), end=date(2024, 1, 2))

    buckets = month_buckets(window)

    assert [(b.label, b.day_width) for b in buckets] == [("Dec 2023", 2), ("Jan 2024", 2)]


def test_today_and_due_markers():
    window = ChartWindow(start=date(2024, 1, 1), end=date(2024, 1, 11))
    item = project(date(2024, 1, 2), due=date(2024, 1, 6))

    assert today_marker_percent(window, date(2024, 1, 3)) == pytest.approx(20.0)
    assert due_marker_percent(item, window) == pytest.approx(50.0)
    assert due_marker_percent(project(date(2024, 1, 2)), window) is None
