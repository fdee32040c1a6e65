from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.models import Project
from core.services.dashboard import ProjectPerformance
from core.services.financials import ProjectFinancials
from core.services.timeline import TimelineView


@dataclass
class PnlChartContext:
    financials: ProjectFinancials
    title: str


@dataclass
class ReportExportContext:
    project: Project
    financials: ProjectFinancials
    performance: Optional[ProjectPerformance]
    as_of: date


@dataclass
class ExcelReportContext(ReportExportContext):
    timeline: Optional[TimelineView] = None


@dataclass
class PdfReportContext(ReportExportContext):
    gantt_png_path: str = ""
    pnl_png_path: str = ""
