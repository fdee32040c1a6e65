from __future__ import annotations

from datetime import date
from typing import Iterable, List

from core.exceptions import NotFoundError, ValidationError


class TaskValidationMixin:
    def _validate_dates(self, start_date: date | None, due_date: date | None) -> None:
        if start_date and due_date and due_date < start_date:
            raise ValidationError("Task due date cannot be before start date.", code="TASK_INVALID_DATE")

    def _validate_hours(self, value: float | None, *, field: str) -> None:
        if value is not None and value < 0:
            raise ValidationError(f"Task {field} cannot be negative.", code="TASK_HOURS_NEGATIVE")

    def _validate_task_title(self, title: str) -> None:
        if not title or not title.strip():
            raise ValidationError("Task title cannot be empty.", code="TASK_TITLE_EMPTY")
        if len(title.strip()) < 3:
            raise ValidationError("Task title must be at least 3 characters.", code="TASK_TITLE_TOO_SHORT")

    def _normalize_tags(self, tags: Iterable[str] | None) -> List[str]:
        # first spelling wins; blank tags are dropped
        cleaned: List[str] = []
        for tag in tags or ():
            tag = (tag or "").strip()
            if tag and tag not in cleaned:
                cleaned.append(tag)
        return cleaned

    def _require_project(self, project_id: str) -> None:
        if not self._project_repo.get(project_id):
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")


__all__ = ["TaskValidationMixin"]
