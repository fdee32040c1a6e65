from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional

from core.services.financials.models import CategoryTotal


@dataclass
class UpcomingDeadline:
    project_id: str
    project_name: str
    due_date: date


@dataclass
class DashboardStats:
    active_projects: int
    completed_projects: int
    total_revenue: Decimal
    total_profit: Decimal
    upcoming_deadlines: List[UpcomingDeadline] = field(default_factory=list)


@dataclass
class ProgressPoint:
    day: date
    completion: int


@dataclass
class ProjectPerformance:
    project_id: str
    completion: int
    budget: Decimal
    total_expenses: Decimal
    budget_used_percent: Decimal
    is_on_budget: bool
    days_left: Optional[int]
    is_on_schedule: bool
    progress: List[ProgressPoint]
    expense_breakdown: List[CategoryTotal]
