from __future__ import annotations

from datetime import date
from typing import Any

from core.services.timeline.models import DueDateStatus

DUE_SOON_DAYS = 7


def _is_closed(item: Any) -> bool:
    status = getattr(item, "status", None)
    return getattr(status, "value", status) == "completed"


def _is_complete(item: Any) -> bool:
    # Projects also count as complete at 100%; tasks only by status.
    flag = getattr(item, "is_complete", None)
    if flag is not None:
        return bool(flag)
    return _is_closed(item)


def due_date_status(item: Any, today: date) -> DueDateStatus:
    due = getattr(item, "due_date", None)
    if due is None:
        return DueDateStatus(overdue=False, due_soon=False)

    overdue = due < today and not _is_complete(item)
    due_soon = not overdue and not _is_closed(item) and 0 <= (due - today).days <= DUE_SOON_DAYS
    return DueDateStatus(overdue=overdue, due_soon=due_soon)


__all__ = ["DUE_SOON_DAYS", "due_date_status"]
