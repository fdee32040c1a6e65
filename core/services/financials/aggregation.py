from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from core.models import Transaction, TransactionType
from core.services.financials.helpers import ZERO, as_decimal, month_label
from core.services.financials.models import CategoryTotal, FinancialsSummary, MonthlyTotal

HUNDRED = Decimal("100")


def profit_margin(income: Decimal, profit: Decimal) -> Decimal:
    if income <= ZERO:
        return ZERO
    return profit * HUNDRED / income


def summarize(transactions: Iterable[Transaction], budget=ZERO) -> FinancialsSummary:
    income = ZERO
    expenses = ZERO
    for row in transactions:
        amount = as_decimal(row.amount)
        if row.type == TransactionType.INCOME:
            income += amount
        elif row.type == TransactionType.EXPENSE:
            expenses += amount

    profit = income - expenses
    return FinancialsSummary(
        total_budget=as_decimal(budget),
        total_income=income,
        total_expenses=expenses,
        current_profit=profit,
        profit_margin=profit_margin(income, profit),
    )


def group_by_category(transactions: Iterable[Transaction]) -> list[CategoryTotal]:
    # dicts keep insertion order, so buckets come out in first-seen order
    buckets: dict[str, Decimal] = {}
    for row in transactions:
        buckets[row.category] = buckets.get(row.category, ZERO) + as_decimal(row.amount)
    return [CategoryTotal(name=name, value=value) for name, value in buckets.items()]


def expense_breakdown(transactions: Iterable[Transaction]) -> list[CategoryTotal]:
    return group_by_category(t for t in transactions if t.type == TransactionType.EXPENSE)


def group_by_month(transactions: Iterable[Transaction]) -> list[MonthlyTotal]:
    buckets: dict[tuple[int, int], dict[str, Decimal]] = {}
    for row in transactions:
        key = (row.date.year, row.date.month)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = {"income": ZERO, "expense": ZERO}
            buckets[key] = bucket
        if row.type == TransactionType.INCOME:
            bucket["income"] += as_decimal(row.amount)
        else:
            bucket["expense"] += as_decimal(row.amount)

    out: list[MonthlyTotal] = []
    for (year, month) in sorted(buckets):
        bucket = buckets[(year, month)]
        out.append(
            MonthlyTotal(
                month_label=month_label(year, month),
                year=year,
                month=month,
                income=bucket["income"],
                expense=bucket["expense"],
                profit=bucket["income"] - bucket["expense"],
            )
        )
    return out


__all__ = [
    "profit_margin",
    "summarize",
    "group_by_category",
    "expense_breakdown",
    "group_by_month",
]
