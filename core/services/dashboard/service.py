# core/services/dashboard/service.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

from core.exceptions import NotFoundError
from core.interfaces import ProjectRepository, TransactionRepository
from core.models import ProjectStatus
from core.services.dashboard.models import DashboardStats, ProjectPerformance
from core.services.dashboard.performance import (
    budget_used_percent,
    days_left,
    is_on_budget,
    is_on_schedule,
    progress_points,
)
from core.services.dashboard.upcoming import build_upcoming_deadlines
from core.services.financials.aggregation import expense_breakdown, summarize


class DashboardService:
    """
    Portfolio-level figures for the dashboard landing view and the
    per-project performance panel.
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        transaction_repo: TransactionRepository,
    ):
        self._project_repo = project_repo
        self._transaction_repo = transaction_repo

    def get_dashboard_stats(self, *, today: date | None = None) -> DashboardStats:
        today = today or date.today()
        projects = self._project_repo.list_all()

        total_revenue = Decimal("0")
        total_profit = Decimal("0")
        for project in projects:
            summary = summarize(self._transaction_repo.list_by_project(project.id))
            total_revenue += summary.total_income
            total_profit += summary.current_profit

        return DashboardStats(
            active_projects=sum(1 for p in projects if p.status == ProjectStatus.ACTIVE),
            completed_projects=sum(1 for p in projects if p.status == ProjectStatus.COMPLETED),
            total_revenue=total_revenue,
            total_profit=total_profit,
            upcoming_deadlines=build_upcoming_deadlines(projects, today=today),
        )

    def get_project_performance(self, project_id: str, *, today: date | None = None) -> ProjectPerformance:
        today = today or date.today()
        project = self._project_repo.get(project_id)
        if project is None:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")

        rows = self._transaction_repo.list_by_project(project_id)
        summary = summarize(rows, budget=project.budget)
        used = budget_used_percent(summary.total_expenses, summary.total_budget)

        return ProjectPerformance(
            project_id=project_id,
            completion=project.completion,
            budget=summary.total_budget,
            total_expenses=summary.total_expenses,
            budget_used_percent=used,
            is_on_budget=is_on_budget(used, project.completion),
            days_left=days_left(project, today),
            is_on_schedule=is_on_schedule(project, today),
            progress=progress_points(project, today),
            expense_breakdown=expense_breakdown(rows),
        )
