from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from core.services.dashboard import DashboardService
from core.services.financials import FinancialsService
from core.services.project import ProjectService
from core.services.task import TaskService
from core.services.timeline import TimelineService
from core.services.transaction import TransactionService
from infra.db.repositories import (
    SqlAlchemyProjectRepository,
    SqlAlchemyTaskRepository,
    SqlAlchemyTransactionCategoryRepository,
    SqlAlchemyTransactionRepository,
)


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    project_service: ProjectService
    task_service: TaskService
    transaction_service: TransactionService
    financials_service: FinancialsService
    timeline_service: TimelineService
    dashboard_service: DashboardService

    def as_dict(self) -> dict[str, object]:
        return {
            "session": self.session,
            "project_service": self.project_service,
            "task_service": self.task_service,
            "transaction_service": self.transaction_service,
            "financials_service": self.financials_service,
            "timeline_service": self.timeline_service,
            "dashboard_service": self.dashboard_service,
        }


def build_service_graph(session: Session) -> ServiceGraph:
    project_repo = SqlAlchemyProjectRepository(session)
    task_repo = SqlAlchemyTaskRepository(session)
    transaction_repo = SqlAlchemyTransactionRepository(session)
    category_repo = SqlAlchemyTransactionCategoryRepository(session)

    return ServiceGraph(
        session=session,
        project_service=ProjectService(session, project_repo),
        task_service=TaskService(session, task_repo, project_repo),
        transaction_service=TransactionService(session, transaction_repo, category_repo, project_repo),
        financials_service=FinancialsService(project_repo=project_repo, transaction_repo=transaction_repo),
        timeline_service=TimelineService(project_repo=project_repo, task_repo=task_repo),
        dashboard_service=DashboardService(project_repo, transaction_repo),
    )


def build_services(session: Session | None = None, *, migrate: bool = True) -> ServiceGraph:
    """Wire repositories and services against the application database."""
    if session is None:
        from infra.db.base import SessionLocal, db_url
        from infra.migrate import run_migrations

        if migrate:
            run_migrations(db_url=db_url)
        session = SessionLocal()
    return build_service_graph(session)


__all__ = ["ServiceGraph", "build_service_graph", "build_services"]
