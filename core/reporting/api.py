"""Reporting API wrappers around renderer classes."""

import logging
from pathlib import Path
from datetime import date
from contextlib import suppress

from core.exceptions import NotFoundError
from core.reporting.contexts import (
    ExcelReportContext,
    PdfReportContext,
    PnlChartContext,
)
from core.reporting.renderers.excel import ExcelReportRenderer
from core.reporting.renderers.gantt import GanttPngRenderer
from core.reporting.renderers.pdf import PdfReportRenderer
from core.reporting.renderers.pnl import PnlChartRenderer
from core.services.dashboard import DashboardService
from core.services.financials import FinancialsService
from core.services.project import ProjectService
from core.services.timeline import TimelineService

logger = logging.getLogger(__name__)


def _ensure_parent(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _cleanup_temp_artifact(path: Path | None, temp_dir: Path | None = None) -> None:
    if path:
        with suppress(FileNotFoundError, PermissionError, OSError):
            path.unlink()

    parent = temp_dir if temp_dir is not None else (path.parent if path else None)
    if parent is None:
        return
    if parent.exists():
        with suppress(FileNotFoundError, PermissionError, OSError):
            if not any(parent.iterdir()):
                parent.rmdir()


def _require_project(project_service: ProjectService, project_id: str):
    project = project_service.get_project(project_id)
    if project is None:
        raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")
    return project


def generate_gantt_png(
    timeline_service: TimelineService,
    output_path: str | Path,
    project_id: str | None = None,
    today: date | None = None,
) -> Path:
    """Portfolio timeline when ``project_id`` is None, otherwise that project's task timeline."""
    today = today or date.today()
    if project_id is None:
        view = timeline_service.get_project_timeline(today=today)
        title = "Project Timeline"
    else:
        view = timeline_service.get_task_timeline(project_id, today=today)
        title = "Task Timeline"
    return GanttPngRenderer().render(view, _ensure_parent(Path(output_path)), title=title)


def generate_pnl_png(
    financials_service: FinancialsService,
    project_id: str,
    output_path: str | Path,
    timeframe: str = "all",
    view: str = "all",
    today: date | None = None,
) -> Path:
    financials = financials_service.get_project_financials(
        project_id, timeframe=timeframe, view=view, today=today
    )
    ctx = PnlChartContext(financials=financials, title=f"Profit & Loss ({timeframe}, {view})")
    return PnlChartRenderer().render(ctx, _ensure_parent(Path(output_path)))


def generate_excel_report(
    project_service: ProjectService,
    financials_service: FinancialsService,
    dashboard_service: DashboardService,
    timeline_service: TimelineService,
    project_id: str,
    output_path: str | Path,
    as_of: date | None = None,
) -> Path:
    as_of = as_of or date.today()
    project = _require_project(project_service, project_id)
    ctx = ExcelReportContext(
        project=project,
        financials=financials_service.get_project_financials(project_id, today=as_of),
        performance=dashboard_service.get_project_performance(project_id, today=as_of),
        as_of=as_of,
        timeline=timeline_service.get_task_timeline(project_id, today=as_of),
    )
    return ExcelReportRenderer().render(ctx, _ensure_parent(Path(output_path)))


def generate_pdf_report(
    project_service: ProjectService,
    financials_service: FinancialsService,
    dashboard_service: DashboardService,
    timeline_service: TimelineService,
    project_id: str,
    output_path: str | Path,
    temp_dir: str | Path = "tmp_reports",
    as_of: date | None = None,
) -> Path:
    as_of = as_of or date.today()
    project = _require_project(project_service, project_id)
    temp_dir = Path(temp_dir)
    temp_dir.mkdir(parents=True, exist_ok=True)

    timeline = timeline_service.get_task_timeline(project_id, today=as_of)
    gantt_path: Path | None = None
    if timeline.rows:
        gantt_path = GanttPngRenderer().render(timeline, temp_dir / f"gantt_{project_id}.png", title="Task Timeline")
    else:
        logger.info("Project %s has no dated tasks; PDF report omits the timeline", project_id)

    pnl_path = generate_pnl_png(financials_service, project_id, temp_dir / f"pnl_{project_id}.png", today=as_of)

    ctx = PdfReportContext(
        project=project,
        financials=financials_service.get_project_financials(project_id, today=as_of),
        performance=dashboard_service.get_project_performance(project_id, today=as_of),
        as_of=as_of,
        gantt_png_path=str(gantt_path) if gantt_path else "",
        pnl_png_path=str(pnl_path),
    )
    try:
        return PdfReportRenderer().render(ctx, _ensure_parent(Path(output_path)))
    finally:
        _cleanup_temp_artifact(gantt_path)
        _cleanup_temp_artifact(pnl_path, temp_dir=temp_dir)
