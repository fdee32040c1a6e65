from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

from core.domain.enums import TaskPriority, TaskStatus
from core.domain.identifiers import generate_id


@dataclass
class Task:
    id: str
    project_id: str
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    estimated_hours: Optional[float] = None
    actual_hours: Optional[float] = None
    assigned_to: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @property
    def is_complete(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    @staticmethod
    def create(project_id: str, title: str, description: str = "", **extra) -> "Task":
        extra.setdefault("created_at", datetime.now())
        return Task(
            id=generate_id(),
            project_id=project_id,
            title=title,
            description=description,
            **extra,
        )


__all__ = ["Task"]
