from __future__ import annotations

from datetime import date

from core.exceptions import NotFoundError
from core.interfaces import ProjectRepository, TransactionRepository
from core.services.financials.aggregation import group_by_category, group_by_month, summarize
from core.services.financials.filters import apply_view
from core.services.financials.helpers import normalize_timeframe, normalize_view
from core.services.financials.models import FinancialsSummary, ProjectFinancials


class FinancialsService:
    """P&L read models built from a project's transaction rows."""

    def __init__(
        self,
        *,
        project_repo: ProjectRepository,
        transaction_repo: TransactionRepository,
    ) -> None:
        self._project_repo: ProjectRepository = project_repo
        self._transaction_repo: TransactionRepository = transaction_repo

    def get_summary(self, project_id: str) -> FinancialsSummary:
        project = self._project_repo.get(project_id)
        if project is None:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")
        rows = self._transaction_repo.list_by_project(project_id)
        return summarize(rows, budget=project.budget)

    def get_project_financials(
        self,
        project_id: str,
        *,
        timeframe: str = "all",
        view: str = "all",
        today: date | None = None,
    ) -> ProjectFinancials:
        today = today or date.today()
        timeframe = normalize_timeframe(timeframe)
        view = normalize_view(view)

        project = self._project_repo.get(project_id)
        if project is None:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")

        rows = self._transaction_repo.list_by_project(project_id)
        ledger = apply_view(rows, timeframe=timeframe, view=view, today=today)

        return ProjectFinancials(
            project_id=project_id,
            timeframe=timeframe,
            view=view,
            summary=summarize(rows, budget=project.budget),
            filtered_summary=summarize(ledger, budget=project.budget),
            ledger=ledger,
            by_category=group_by_category(ledger),
            by_month=group_by_month(ledger),
        )


__all__ = ["FinancialsService"]
