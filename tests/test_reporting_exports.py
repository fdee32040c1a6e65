from datetime import date

import pytest
from openpyxl import load_workbook

from core.models import ProjectStatus
from core.reporting import api as reporting_api
from core.reporting.renderers.gantt import GanttPngRenderer

AS_OF = date(2024, 4, 15)


@pytest.fixture
def seeded(services):
    ps = services["project_service"]
    project = ps.create_project(
        "Northgate Warehouse",
        client="Northgate Logistics",
        location="Tacoma, WA",
        description="General contracting scope for Tacoma, WA",
        budget="300000",
        start_date=date(2024, 1, 15),
        due_date=date(2024, 6, 1),
        status=ProjectStatus.ACTIVE,
        completion=35,
    )
    tx_s = services["transaction_service"]
    tx_s.add_transaction(project.id, date(2024, 1, 20), 60000, "income", "Client Payment")
    tx_s.add_transaction(project.id, date(2024, 2, 11), 18000, "expense", "Labor")
    tx_s.add_transaction(project.id, date(2024, 3, 4), 9500, "expense", "Equipment Rental")
    ts = services["task_service"]
    ts.create_task(project.id, "Grading", start_date=date(2024, 1, 16), due_date=date(2024, 2, 2))
    ts.create_task(project.id, "Steel erection", start_date=date(2024, 3, 1), due_date=date(2024, 4, 20))
    return project


def test_generate_portfolio_gantt_png(services, seeded, tmp_path):
    out = reporting_api.generate_gantt_png(services["timeline_service"], tmp_path / "gantt.png", today=AS_OF)

    assert out.exists()
    assert out.stat().st_size > 0


def test_generate_task_gantt_png(services, seeded, tmp_path):
    out = reporting_api.generate_gantt_png(
        services["timeline_service"], tmp_path / "charts" / "tasks.png", project_id=seeded.id, today=AS_OF
    )

    assert out.exists()


def test_gantt_without_projects_raises(services, tmp_path):
    with pytest.raises(ValueError):
        reporting_api.generate_gantt_png(services["timeline_service"], tmp_path / "empty.png", today=AS_OF)


def test_generate_pnl_png(services, seeded, tmp_path):
    out = reporting_api.generate_pnl_png(
        services["financials_service"], seeded.id, tmp_path / "pnl.png", timeframe="90days", today=AS_OF
    )

    assert out.exists()


def test_generate_excel_report(services, seeded, tmp_path):
    out = reporting_api.generate_excel_report(
        services["project_service"],
        services["financials_service"],
        services["dashboard_service"],
        services["timeline_service"],
        seeded.id,
        tmp_path / "report.xlsx",
        as_of=AS_OF,
    )

    wb = load_workbook(out)
    assert wb.sheetnames == ["Summary", "Transactions", "By Category", "By Month", "Timeline"]
    assert wb["Transactions"].max_row == 4
    assert wb["Timeline"].max_row == 3


def test_generate_pdf_report_cleans_temp_files(services, seeded, tmp_path):
    temp_dir = tmp_path / "tmp"
    out = reporting_api.generate_pdf_report(
        services["project_service"],
        services["financials_service"],
        services["dashboard_service"],
        services["timeline_service"],
        seeded.id,
        tmp_path / "report.pdf",
        temp_dir=temp_dir,
        as_of=AS_OF,
    )

    assert out.exists()
    assert out.read_bytes().startswith(b"%PDF")
    assert not temp_dir.exists()


def _pdf(services, project_id, out, temp_dir):
    return reporting_api.generate_pdf_report(
        services["project_service"],
        services["financials_service"],
        services["dashboard_service"],
        services["timeline_service"],
        project_id,
        out,
        temp_dir=temp_dir,
        as_of=AS_OF,
    )


def test_pdf_report_without_dated_tasks_omits_timeline(services, tmp_path):
    project = services["project_service"].create_project(
        "Quarry Road Depot",
        client="Quarry Transit",
        location="Reno, NV",
        description="Bus maintenance depot, phase one",
        budget="90000",
        start_date=date(2024, 2, 1),
    )
    services["task_service"].create_task(project.id, "Scope review")

    out = _pdf(services, project.id, tmp_path / "depot.pdf", tmp_path / "tmp")

    assert out.read_bytes().startswith(b"%PDF")
    assert not (tmp_path / "tmp").exists()


def test_pdf_report_does_not_hide_chart_errors(services, seeded, tmp_path, monkeypatch):
    def _broken_render(self, view, output_path, title="Project Timeline"):
        raise ValueError("bad axis limits")

    monkeypatch.setattr(GanttPngRenderer, "render", _broken_render)

    with pytest.raises(ValueError, match="bad axis limits"):
        _pdf(services, seeded.id, tmp_path / "report.pdf", tmp_path / "tmp")
