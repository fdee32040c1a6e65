from __future__ import annotations

from datetime import datetime
from typing import List

from core.interfaces import TaskRepository
from core.models import Task, TaskStatus


class TaskQueryMixin:
    _task_repo: TaskRepository

    def list_tasks_for_project(self, project_id: str) -> List[Task]:
        tasks = self._task_repo.list_by_project(project_id)
        # newest first, as the task board lists them
        tasks.sort(key=lambda t: t.created_at or datetime.min, reverse=True)
        return tasks

    def get_task(self, task_id: str) -> Task | None:
        return self._task_repo.get(task_id)

    def list_tasks_by_status(self, project_id: str, status: TaskStatus) -> List[Task]:
        return [task for task in self.list_tasks_for_project(project_id) if task.status == status]


__all__ = ["TaskQueryMixin"]
