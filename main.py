# main.py
import logging
import sys
from datetime import date
from pathlib import Path

from core.reporting import api as reporting_api
from infra.logging_config import setup_logging
from infra.path import user_data_dir
from infra.services import build_services

logger = logging.getLogger("siteledger")


def export_portfolio(output_dir: Path, today: date | None = None) -> list[Path]:
    """Render the portfolio timeline plus an Excel P&L workbook per project."""
    today = today or date.today()
    graph = build_services()
    try:
        graph.transaction_service.seed_default_categories()

        written: list[Path] = []
        timeline = graph.timeline_service.get_project_timeline(today=today)
        if timeline.rows:
            written.append(
                reporting_api.generate_gantt_png(
                    graph.timeline_service, output_dir / "portfolio_timeline.png", today=today
                )
            )
        else:
            logger.info("No projects yet; skipping portfolio timeline")

        for project in graph.project_service.list_projects():
            written.append(
                reporting_api.generate_excel_report(
                    graph.project_service,
                    graph.financials_service,
                    graph.dashboard_service,
                    graph.timeline_service,
                    project.id,
                    output_dir / f"pnl_{project.id}.xlsx",
                    as_of=today,
                )
            )

        stats = graph.dashboard_service.get_dashboard_stats(today=today)
        logger.info(
            "%d active / %d completed projects, revenue %s, profit %s",
            stats.active_projects,
            stats.completed_projects,
            stats.total_revenue,
            stats.total_profit,
        )
    except Exception as e:
        logger.error("Portfolio export failed: %s", e)
        raise
    finally:
        graph.session.close()
    return written


if __name__ == "__main__":
    setup_logging()
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else user_data_dir() / "reports"
    for path in export_portfolio(target):
        print(path)
