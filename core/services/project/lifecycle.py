from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError
from core.interfaces import ProjectRepository
from core.models import Project, ProjectStatus
from core.services.financials.helpers import as_decimal
from core.services.project.validation import ProjectValidationMixin

logger = logging.getLogger(__name__)


class ProjectLifecycleMixin(ProjectValidationMixin):
    _session: Session
    _project_repo: ProjectRepository

    def create_project(
        self,
        name: str,
        client: str,
        location: str,
        budget: Decimal | float | str,
        start_date: date,
        description: str = "",
        end_date: date | None = None,
        due_date: date | None = None,
        status: ProjectStatus = ProjectStatus.PLANNING,
        completion: int = 0,
    ) -> Project:
        self._validate_project_name(name)
        client = self._validate_party(client, field="client")
        location = self._validate_party(location, field="location")
        description = self._validate_description(description)
        budget = as_decimal(budget)
        self._validate_budget(budget)
        self._validate_completion(completion)
        self._validate_dates(start_date, end_date, due_date)
        if not isinstance(status, ProjectStatus):
            status = ProjectStatus(str(status))

        project = Project.create(
            name=name.strip(),
            client=client,
            location=location,
            budget=budget,
            start_date=start_date,
            end_date=end_date,
            due_date=due_date,
            status=status,
            completion=int(completion),
            description=description,
        )

        try:
            self._project_repo.add(project)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error("Error creating project: %s", e)
            raise

        logger.info("Created project %s - %s", project.id, project.name)
        domain_events.project_changed.emit(project.id)
        return project

    def set_status(self, project_id: str, status: ProjectStatus, *, today: date | None = None) -> Project:
        project = self._project_repo.get(project_id)
        if not project:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")

        project.status = status
        if status == ProjectStatus.COMPLETED and project.end_date is None:
            # end date is only known once the project is closed out
            project.end_date = max(today or date.today(), project.start_date)
        self._commit_update(project)
        return project

    def set_completion(self, project_id: str, completion: int, *, today: date | None = None) -> Project:
        project = self._project_repo.get(project_id)
        if not project:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")
        self._validate_completion(completion)

        project.completion = int(completion)
        if project.completion == 100 and project.end_date is None:
            project.end_date = max(today or date.today(), project.start_date)
        self._commit_update(project)
        return project

    def _commit_update(self, project: Project) -> None:
        try:
            self._project_repo.update(project)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error("Error updating project %s: %s", project.id, e)
            raise
        domain_events.project_changed.emit(project.id)


__all__ = ["ProjectLifecycleMixin"]
