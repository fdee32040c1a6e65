from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from core.models import Transaction


@dataclass(frozen=True)
class FinancialsSummary:
    total_budget: Decimal
    total_income: Decimal
    total_expenses: Decimal
    current_profit: Decimal
    profit_margin: Decimal


@dataclass(frozen=True)
class CategoryTotal:
    name: str
    value: Decimal


@dataclass(frozen=True)
class MonthlyTotal:
    month_label: str
    year: int
    month: int
    income: Decimal
    expense: Decimal
    profit: Decimal


@dataclass(frozen=True)
class ProjectFinancials:
    project_id: str
    timeframe: str
    view: str
    summary: FinancialsSummary
    filtered_summary: FinancialsSummary
    ledger: list[Transaction]
    by_category: list[CategoryTotal]
    by_month: list[MonthlyTotal]


__all__ = [
    "FinancialsSummary",
    "CategoryTotal",
    "MonthlyTotal",
    "ProjectFinancials",
]
