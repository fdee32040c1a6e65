from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, List

from core.exceptions import NotFoundError
from core.interfaces import ProjectRepository, TaskRepository
from core.services.timeline.layout import (
    PROJECT_FALLBACK_DAYS,
    TASK_FALLBACK_DAYS,
    bar_position,
    compute_chart_window,
    due_marker_percent,
    item_start,
    month_buckets,
    resolve_end,
    today_marker_percent,
)
from core.services.timeline.models import ChartWindow, TimelineRow, TimelineView
from core.services.timeline.urgency import due_date_status

logger = logging.getLogger(__name__)


class TimelineService:
    """Gantt read models for the portfolio (projects) and per-project task views."""

    def __init__(
        self,
        *,
        project_repo: ProjectRepository,
        task_repo: TaskRepository,
    ) -> None:
        self._project_repo: ProjectRepository = project_repo
        self._task_repo: TaskRepository = task_repo

    def get_project_timeline(self, *, today: date | None = None) -> TimelineView:
        today = today or date.today()
        projects = self._project_repo.list_all()
        return self._build_view(
            projects,
            today=today,
            fallback_days=PROJECT_FALLBACK_DAYS,
            label=lambda p: p.name,
        )

    def get_task_timeline(self, project_id: str, *, today: date | None = None) -> TimelineView:
        today = today or date.today()
        if self._project_repo.get(project_id) is None:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")

        tasks = self._task_repo.list_by_project(project_id)
        undated = [t for t in tasks if item_start(t) is None]
        if undated:
            logger.info(
                "Task timeline for %s skips %d task(s) without start or due date",
                project_id,
                len(undated),
            )
        return self._build_view(
            tasks,
            today=today,
            fallback_days=TASK_FALLBACK_DAYS,
            label=lambda t: t.title,
        )

    def _build_view(
        self,
        items: Iterable[Any],
        *,
        today: date,
        fallback_days: int,
        label,
    ) -> TimelineView:
        dated = sorted((item for item in items if item_start(item) is not None), key=item_start)
        window: ChartWindow = compute_chart_window(dated, today=today)

        rows: List[TimelineRow] = []
        for item in dated:
            status = getattr(item, "status", None)
            rows.append(
                TimelineRow(
                    item_id=item.id,
                    label=label(item),
                    status=getattr(status, "value", str(status)),
                    start_date=item_start(item),
                    end_date=resolve_end(item, fallback_days=fallback_days),
                    due_date=getattr(item, "due_date", None),
                    completion=getattr(item, "completion", None),
                    bar=bar_position(item, window, fallback_days=fallback_days),
                    due_status=due_date_status(item, today),
                    due_marker_percent=due_marker_percent(item, window),
                )
            )

        return TimelineView(
            window=window,
            months=month_buckets(window),
            rows=rows,
            today=today,
            today_percent=today_marker_percent(window, today),
        )


__all__ = ["TimelineService"]
