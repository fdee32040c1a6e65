from __future__ import annotations

from datetime import date
from typing import Iterable

from core.models import Transaction
from core.services.financials.helpers import (
    VIEW_ALL,
    normalize_view,
    timeframe_cutoff,
)


def filter_by_timeframe(
    transactions: Iterable[Transaction],
    timeframe: str,
    *,
    today: date,
) -> list[Transaction]:
    cutoff = timeframe_cutoff(timeframe, today)
    if cutoff is None:
        return list(transactions)
    return [t for t in transactions if t.date >= cutoff]


def filter_by_type(transactions: Iterable[Transaction], view: str) -> list[Transaction]:
    token = normalize_view(view)
    if token == VIEW_ALL:
        return list(transactions)
    return [t for t in transactions if t.type.value == token]


def apply_view(
    transactions: Iterable[Transaction],
    *,
    timeframe: str,
    view: str,
    today: date,
) -> list[Transaction]:
    """Timeframe then type filter; the ledger lists newest rows first."""
    rows = filter_by_timeframe(transactions, timeframe, today=today)
    rows = filter_by_type(rows, view)
    rows.sort(key=lambda t: t.date, reverse=True)
    return rows


__all__ = ["filter_by_timeframe", "filter_by_type", "apply_view"]
