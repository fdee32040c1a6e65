from __future__ import annotations

from sqlalchemy.orm import Session

from core.interfaces import ProjectRepository
from core.services.project.lifecycle import ProjectLifecycleMixin
from core.services.project.query import ProjectQueryMixin


class ProjectService(ProjectLifecycleMixin, ProjectQueryMixin):
    """Project service orchestrator: wiring repositories + composing mixins."""

    def __init__(
        self,
        session: Session,
        project_repo: ProjectRepository,
    ):
        self._session: Session = session
        self._project_repo: ProjectRepository = project_repo


__all__ = ["ProjectService"]
