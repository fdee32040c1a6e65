from __future__ import annotations

from calendar import monthrange
from datetime import date, timedelta
from decimal import Decimal

from core.exceptions import ValidationError

ZERO = Decimal("0")

TIMEFRAME_ALL = "all"
TIMEFRAME_DAYS: dict[str, int] = {
    "30days": 30,
    "90days": 90,
}
TIMEFRAME_MONTHS: dict[str, int] = {
    "6months": 6,
}
TIMEFRAMES = (TIMEFRAME_ALL, *TIMEFRAME_DAYS, *TIMEFRAME_MONTHS)

VIEW_ALL = "all"
VIEWS = (VIEW_ALL, "income", "expense")


def as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if value is None:
        return ZERO
    # str() keeps float inputs like 0.1 from dragging binary noise along
    return Decimal(str(value))


def normalize_timeframe(value: str | None) -> str:
    token = (value or TIMEFRAME_ALL).strip().lower()
    if token not in TIMEFRAMES:
        raise ValidationError(
            f"Unsupported timeframe: {value!r}.",
            code="TIMEFRAME_INVALID",
        )
    return token


def normalize_view(value: str | None) -> str:
    token = (value or VIEW_ALL).strip().lower()
    if token not in VIEWS:
        raise ValidationError(
            f"Unsupported transaction view: {value!r}.",
            code="VIEW_INVALID",
        )
    return token


def shift_months(anchor: date, months: int) -> date:
    """Move ``anchor`` by whole calendar months, clamping the day to the target month."""
    index = anchor.year * 12 + (anchor.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(anchor.day, monthrange(year, month)[1])
    return date(year, month, day)


def timeframe_cutoff(timeframe: str, today: date) -> date | None:
    token = normalize_timeframe(timeframe)
    if token in TIMEFRAME_DAYS:
        return today - timedelta(days=TIMEFRAME_DAYS[token])
    if token in TIMEFRAME_MONTHS:
        return shift_months(today, -TIMEFRAME_MONTHS[token])
    return None


def month_label(year: int, month: int) -> str:
    return date(year, month, 1).strftime("%b %Y")


__all__ = [
    "ZERO",
    "TIMEFRAMES",
    "VIEWS",
    "as_decimal",
    "normalize_timeframe",
    "normalize_view",
    "shift_months",
    "timeframe_cutoff",
    "month_label",
]
