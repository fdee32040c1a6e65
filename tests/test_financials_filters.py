from datetime import date

import pytest

from core.exceptions import ValidationError
from core.services.financials import apply_view, filter_by_timeframe, filter_by_type
from core.services.financials.helpers import shift_months, timeframe_cutoff
from tests.factories import tx

TODAY = date(2024, 7, 15)


def _rows():
    return [
        tx(100, "income", date(2024, 7, 1)),
        tx(200, "expense", date(2024, 6, 15)),
        tx(300, "income", date(2024, 6, 14)),
        tx(400, "expense", date(2024, 4, 16)),
        tx(500, "income", date(2024, 1, 15)),
        tx(600, "expense", date(2024, 1, 14)),
    ]


def test_timeframe_all_is_identity():
    rows = _rows()
    assert filter_by_timeframe(rows, "all", today=TODAY) == rows


def test_timeframe_cutoffs():
    assert timeframe_cutoff("30days", TODAY) == date(2024, 6, 15)
    assert timeframe_cutoff("90days", TODAY) == date(2024, 4, 16)
    assert timeframe_cutoff("6months", TODAY) == date(2024, 1, 15)
    assert timeframe_cutoff("all", TODAY) is None


def test_timeframe_keeps_rows_on_or_after_cutoff():
    rows = _rows()

    last_30 = filter_by_timeframe(rows, "30days", today=TODAY)
    last_90 = filter_by_timeframe(rows, "90days", today=TODAY)
    last_6m = filter_by_timeframe(rows, "6months", today=TODAY)

    assert [r.amount for r in last_30] == [100, 200]
    assert [r.amount for r in last_90] == [100, 200, 300, 400]
    assert [r.amount for r in last_6m] == [100, 200, 300, 400, 500]


def test_timeframe_empty_result_is_not_an_error():
    rows = [tx(100, "income", date(2020, 1, 1))]
    assert filter_by_timeframe(rows, "30days", today=TODAY) == []


def test_unknown_timeframe_is_rejected():
    with pytest.raises(ValidationError) as exc:
        filter_by_timeframe(_rows(), "fortnight", today=TODAY)
    assert exc.value.code == "TIMEFRAME_INVALID"


def test_shift_months_clamps_to_month_length():
    assert shift_months(date(2024, 8, 31), -6) == date(2024, 2, 29)
    assert shift_months(date(2023, 8, 31), -6) == date(2023, 2, 28)
    assert shift_months(date(2024, 1, 15), -6) == date(2023, 7, 15)


def test_filter_by_type():
    rows = _rows()

    assert filter_by_type(rows, "all") == rows
    assert {r.type.value for r in filter_by_type(rows, "income")} == {"income"}
    assert [r.amount for r in filter_by_type(rows, "expense")] == [200, 400, 600]

    with pytest.raises(ValidationError):
        filter_by_type(rows, "refund")


def test_apply_view_combines_filters_newest_first():
    rows = list(reversed(_rows()))

    ledger = apply_view(rows, timeframe="90days", view="expense", today=TODAY)

    assert [r.date for r in ledger] == [date(2024, 6, 15), date(2024, 4, 16)]
