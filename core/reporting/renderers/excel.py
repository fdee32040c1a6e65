from pathlib import Path
from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side

from core.reporting.contexts import ExcelReportContext

MONEY_FORMAT = "#,##0.00"
PERCENT_FORMAT = "0.00"


class ExcelReportRenderer:
    def render(self, ctx: ExcelReportContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb = Workbook()

        header_font = Font(bold=True)
        title_font = Font(bold=True, size=14)
        center = Alignment(horizontal="center")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )
        header_fill = PatternFill("solid", fgColor="DDDDDD")

        def header_row(ws, headers):
            for col_index, h in enumerate(headers, start=1):
                cell = ws.cell(row=1, column=col_index, value=h)
                cell.font = header_font
                cell.alignment = center
                cell.fill = header_fill
                cell.border = thin_border

        def money(cell):
            cell.number_format = MONEY_FORMAT
            cell.border = thin_border
            return cell

        project = ctx.project
        summary = ctx.financials.summary

        # ---------------- Summary ----------------
        ws = wb.active
        ws.title = "Summary"

        ws["A1"] = f"Project P&L - {project.name}"
        ws["A1"].font = title_font

        row = 3

        def kv(key, value, number_format=None):
            nonlocal row
            ws[f"A{row}"] = key
            ws[f"B{row}"] = value
            ws[f"A{row}"].font = header_font
            ws[f"A{row}"].border = thin_border
            ws[f"B{row}"].border = thin_border
            if number_format:
                ws[f"B{row}"].number_format = number_format
            row += 1

        kv("Project ID", project.id)
        kv("Client", project.client)
        kv("Location", project.location)
        kv("Status", project.status.value)
        kv("Completion (%)", project.completion)
        kv("Start date", project.start_date)
        kv("Due date", project.due_date)
        kv("End date", project.end_date)
        kv("As of", ctx.as_of)

        row += 1
        kv("Budget", summary.total_budget, MONEY_FORMAT)
        kv("Total income", summary.total_income, MONEY_FORMAT)
        kv("Total expenses", summary.total_expenses, MONEY_FORMAT)
        kv("Current profit", summary.current_profit, MONEY_FORMAT)
        kv("Profit margin (%)", summary.profit_margin, PERCENT_FORMAT)

        if ctx.performance is not None:
            row += 1
            kv("Budget used (%)", ctx.performance.budget_used_percent, PERCENT_FORMAT)
            kv("On budget", "Yes" if ctx.performance.is_on_budget else "No")
            kv("Days left", ctx.performance.days_left)
            kv("On schedule", "Yes" if ctx.performance.is_on_schedule else "No")

        ws.column_dimensions["A"].width = 24
        ws.column_dimensions["B"].width = 40

        # ---------------- Transactions ----------------
        ws_tx = wb.create_sheet("Transactions")
        header_row(ws_tx, ["Date", "Type", "Category", "Amount", "Description"])
        for r, tx in enumerate(ctx.financials.ledger, start=2):
            ws_tx.cell(r, 1, tx.date).border = thin_border
            ws_tx.cell(r, 2, tx.type.value).border = thin_border
            ws_tx.cell(r, 3, tx.category).border = thin_border
            money(ws_tx.cell(r, 4, tx.amount))
            ws_tx.cell(r, 5, tx.description).border = thin_border
        for col_letter, width in (("A", 14), ("B", 10), ("C", 26), ("D", 16), ("E", 40)):
            ws_tx.column_dimensions[col_letter].width = width

        # ---------------- By Category ----------------
        ws_cat = wb.create_sheet("By Category")
        header_row(ws_cat, ["Category", "Total"])
        for r, bucket in enumerate(ctx.financials.by_category, start=2):
            ws_cat.cell(r, 1, bucket.name).border = thin_border
            money(ws_cat.cell(r, 2, bucket.value))
        ws_cat.column_dimensions["A"].width = 28
        ws_cat.column_dimensions["B"].width = 16

        # ---------------- By Month ----------------
        ws_month = wb.create_sheet("By Month")
        header_row(ws_month, ["Month", "Income", "Expense", "Profit"])
        for r, bucket in enumerate(ctx.financials.by_month, start=2):
            ws_month.cell(r, 1, bucket.month_label).border = thin_border
            money(ws_month.cell(r, 2, bucket.income))
            money(ws_month.cell(r, 3, bucket.expense))
            money(ws_month.cell(r, 4, bucket.profit))
        for col_letter in ("A", "B", "C", "D"):
            ws_month.column_dimensions[col_letter].width = 16

        # ---------------- Timeline ----------------
        if ctx.timeline is not None and ctx.timeline.rows:
            ws_tl = wb.create_sheet("Timeline")
            header_row(ws_tl, ["Item", "Status", "Start", "End", "Due", "Left (%)", "Width (%)", "Overdue", "Due soon"])
            for r, tl_row in enumerate(ctx.timeline.rows, start=2):
                values = [
                    tl_row.label,
                    tl_row.status,
                    tl_row.start_date,
                    tl_row.end_date,
                    tl_row.due_date,
                    round(tl_row.bar.left_percent, 2),
                    round(tl_row.bar.width_percent, 2),
                    "Yes" if tl_row.due_status.overdue else "No",
                    "Yes" if tl_row.due_status.due_soon else "No",
                ]
                for c, v in enumerate(values, 1):
                    ws_tl.cell(r, c, v).border = thin_border
            ws_tl.column_dimensions["A"].width = 32
            for col_letter in ("B", "C", "D", "E", "F", "G", "H", "I"):
                ws_tl.column_dimensions[col_letter].width = 13

        wb.save(output_path)
        return output_path
