from __future__ import annotations

from datetime import date
from typing import Iterable, List

from core.models import Project
from core.services.dashboard.models import UpcomingDeadline

UPCOMING_LIMIT = 5


def project_deadline(project: Project) -> date | None:
    return project.due_date or project.end_date


def build_upcoming_deadlines(
    projects: Iterable[Project],
    *,
    today: date,
    limit: int = UPCOMING_LIMIT,
) -> List[UpcomingDeadline]:
    rows = [
        UpcomingDeadline(project_id=p.id, project_name=p.name, due_date=project_deadline(p))
        for p in projects
        if project_deadline(p) is not None and project_deadline(p) > today
    ]
    rows.sort(key=lambda row: (row.due_date, row.project_name.lower()))
    return rows[:limit]


__all__ = ["build_upcoming_deadlines", "project_deadline"]
