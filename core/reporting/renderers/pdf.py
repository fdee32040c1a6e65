from pathlib import Path
from xml.sax.saxutils import escape
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib import colors
from reportlab.platypus import (
    SimpleDocTemplate,
    Paragraph,
    Spacer,
    Table,
    TableStyle,
    Image,
)
from reportlab.lib.styles import getSampleStyleSheet

from core.reporting.contexts import PdfReportContext

TABLE_STYLE = TableStyle([
    ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
])


def _money(value) -> str:
    return f"{value:,.2f}"


class PdfReportRenderer:
    def render(self, ctx: PdfReportContext, output_path: Path) -> Path:
        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=landscape(A4),
            leftMargin=40,
            rightMargin=40,
            topMargin=40,
            bottomMargin=40,
        )

        styles = getSampleStyleSheet()
        story = []
        project = ctx.project
        summary = ctx.financials.summary

        # ---------------- Title ----------------
        story.append(Paragraph(f"Project Report - {escape(project.name)}", styles["Title"]))
        story.append(Spacer(1, 12))

        # ---------------- Summary ----------------
        info = [
            f"Client: {escape(project.client)}",
            f"Location: {escape(project.location)}",
            f"Status: {project.status.value} ({project.completion}% complete)",
            f"Start date: {project.start_date}",
            f"Due date: {project.due_date or '-'}",
            f"As of: {ctx.as_of}",
            f"Budget: {_money(summary.total_budget)}",
            f"Income: {_money(summary.total_income)}",
            f"Expenses: {_money(summary.total_expenses)}",
            f"Profit: {_money(summary.current_profit)} ({summary.profit_margin:.1f}% margin)",
        ]
        if ctx.performance is not None:
            info.append(
                f"Budget used: {ctx.performance.budget_used_percent:.1f}% "
                f"({'on budget' if ctx.performance.is_on_budget else 'over budget'})"
            )

        for line in info:
            story.append(Paragraph(line, styles["Normal"]))

        story.append(Spacer(1, 16))

        # ---------------- Charts ----------------
        for heading, path in (("Timeline", ctx.gantt_png_path), ("Profit &amp; Loss", ctx.pnl_png_path)):
            if not path:
                continue
            story.append(Paragraph(heading, styles["Heading2"]))
            story.append(Spacer(1, 8))
            img = Image(path)
            img._restrictSize(720, 280)
            story.append(img)
            story.append(Spacer(1, 16))

        # ---------------- Monthly table ----------------
        if ctx.financials.by_month:
            story.append(Paragraph("Monthly Breakdown", styles["Heading2"]))
            story.append(Spacer(1, 8))

            data = [["Month", "Income", "Expense", "Profit"]]
            for m in ctx.financials.by_month:
                data.append([m.month_label, _money(m.income), _money(m.expense), _money(m.profit)])

            table = Table(data, colWidths=[160, 120, 120, 120])
            table.setStyle(TABLE_STYLE)
            story.append(table)

        doc.build(story)
        return output_path
