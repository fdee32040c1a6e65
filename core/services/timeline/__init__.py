from .layout import (
    bar_position,
    compute_chart_window,
    layout_bars,
    month_buckets,
    resolve_end,
)
from .models import ChartWindow, DueDateStatus, MonthBucket, TimelineBar, TimelineRow, TimelineView
from .service import TimelineService
from .urgency import due_date_status

__all__ = [
    "TimelineService",
    "ChartWindow",
    "TimelineBar",
    "MonthBucket",
    "DueDateStatus",
    "TimelineRow",
    "TimelineView",
    "compute_chart_window",
    "bar_position",
    "layout_bars",
    "month_buckets",
    "resolve_end",
    "due_date_status",
]
