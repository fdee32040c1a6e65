from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError
from core.interfaces import ProjectRepository, TaskRepository
from core.models import Task, TaskPriority, TaskStatus
from core.services.task.validation import TaskValidationMixin

logger = logging.getLogger(__name__)


class TaskLifecycleMixin(TaskValidationMixin):
    _session: Session
    _project_repo: ProjectRepository
    _task_repo: TaskRepository

    def create_task(
        self,
        project_id: str,
        title: str,
        description: str = "",
        status: TaskStatus = TaskStatus.TODO,
        priority: TaskPriority = TaskPriority.MEDIUM,
        start_date: date | None = None,
        due_date: date | None = None,
        estimated_hours: float | None = None,
        actual_hours: float | None = None,
        assigned_to: str | None = None,
        category: str | None = None,
        tags: Iterable[str] | None = None,
    ) -> Task:
        self._require_project(project_id)
        self._validate_task_title(title)
        self._validate_dates(start_date, due_date)
        self._validate_hours(estimated_hours, field="estimated hours")
        self._validate_hours(actual_hours, field="actual hours")
        if not isinstance(status, TaskStatus):
            status = TaskStatus(str(status))
        if not isinstance(priority, TaskPriority):
            priority = TaskPriority(str(priority))

        task = Task.create(
            project_id=project_id,
            title=title.strip(),
            description=(description or "").strip(),
            status=status,
            priority=priority,
            start_date=start_date,
            due_date=due_date,
            estimated_hours=estimated_hours,
            actual_hours=actual_hours,
            assigned_to=(assigned_to or "").strip() or None,
            category=(category or "").strip() or None,
            tags=self._normalize_tags(tags),
            completed_at=datetime.now() if status == TaskStatus.COMPLETED else None,
        )

        try:
            self._task_repo.add(task)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error("Error adding task: %s", e)
            raise

        logger.info("Created task %s in project %s", task.id, project_id)
        domain_events.tasks_changed.emit(project_id)
        return task

    def update_task_status(
        self,
        task_id: str,
        status: TaskStatus,
        *,
        now: datetime | None = None,
    ) -> Task:
        task = self._task_repo.get(task_id)
        if not task:
            raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")
        if not isinstance(status, TaskStatus):
            status = TaskStatus(str(status))

        task.status = status
        task.completed_at = (now or datetime.now()) if status == TaskStatus.COMPLETED else None

        try:
            self._task_repo.update(task)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error("Error updating task: %s", e)
            raise

        domain_events.tasks_changed.emit(task.project_id)
        return task


__all__ = ["TaskLifecycleMixin"]
