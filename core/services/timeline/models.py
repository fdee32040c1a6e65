from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional


@dataclass(frozen=True)
class ChartWindow:
    start: date
    end: date

    @property
    def days(self) -> int:
        # never zero so percentage math stays finite
        return max(1, (self.end - self.start).days)


@dataclass(frozen=True)
class TimelineBar:
    item_id: str
    left_percent: float
    width_percent: float


@dataclass(frozen=True)
class MonthBucket:
    label: str
    start_index: int
    day_width: int


@dataclass(frozen=True)
class DueDateStatus:
    overdue: bool
    due_soon: bool


@dataclass
class TimelineRow:
    item_id: str
    label: str
    status: str
    start_date: date
    end_date: date
    due_date: Optional[date]
    completion: Optional[int]
    bar: TimelineBar
    due_status: DueDateStatus
    due_marker_percent: Optional[float] = None


@dataclass
class TimelineView:
    window: ChartWindow
    months: List[MonthBucket]
    rows: List[TimelineRow]
    today: date
    today_percent: float


__all__ = [
    "ChartWindow",
    "TimelineBar",
    "MonthBucket",
    "DueDateStatus",
    "TimelineRow",
    "TimelineView",
]
