from __future__ import annotations

from sqlalchemy.orm import Session

from core.interfaces import ProjectRepository, TaskRepository
from core.services.task.lifecycle import TaskLifecycleMixin
from core.services.task.query import TaskQueryMixin


class TaskService(TaskLifecycleMixin, TaskQueryMixin):
    def __init__(
        self,
        session: Session,
        task_repo: TaskRepository,
        project_repo: ProjectRepository,
    ):
        self._session: Session = session
        self._task_repo: TaskRepository = task_repo
        self._project_repo: ProjectRepository = project_repo


__all__ = ["TaskService"]
