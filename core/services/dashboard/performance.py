from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import List

from core.models import Project
from core.services.dashboard.models import ProgressPoint

BUDGET_TOLERANCE_PERCENT = Decimal("10")
MIN_SCHEDULE_PROGRESS = 5


def budget_used_percent(total_expenses: Decimal, budget: Decimal) -> Decimal:
    if not budget or budget <= 0:
        return Decimal("0")
    return total_expenses * Decimal("100") / budget


def days_left(project: Project, today: date) -> int | None:
    if project.end_date is None:
        return None
    return (project.end_date - today).days


def is_on_budget(used_percent: Decimal, completion: int) -> bool:
    """Spending may run up to ten points ahead of reported completion."""
    return used_percent <= Decimal(completion) + BUDGET_TOLERANCE_PERCENT


def is_on_schedule(project: Project, today: date) -> bool:
    remaining = days_left(project, today)
    if remaining is None:
        return project.completion > 0
    return remaining > 0 and project.completion >= MIN_SCHEDULE_PROGRESS


def progress_points(project: Project, today: date) -> List[ProgressPoint]:
    points = [
        ProgressPoint(day=project.start_date, completion=0),
        ProgressPoint(day=today, completion=project.completion),
    ]
    if project.end_date and project.end_date > today:
        points.append(ProgressPoint(day=project.end_date, completion=100))
    return points


__all__ = [
    "budget_used_percent",
    "days_left",
    "is_on_budget",
    "is_on_schedule",
    "progress_points",
]
