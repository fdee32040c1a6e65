from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from core.reporting.contexts import PnlChartContext


class PnlChartRenderer:
    """Monthly income/expense/profit bars next to a category pie."""

    def render(self, ctx: PnlChartContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        months = ctx.financials.by_month
        categories = ctx.financials.by_category

        fig, (ax_month, ax_cat) = plt.subplots(1, 2, figsize=(12, 4))

        if months:
            xs = range(len(months))
            width = 0.28
            ax_month.bar([x - width for x in xs], [float(m.income) for m in months], width, label="Income", color="#22c55e")
            ax_month.bar(list(xs), [float(m.expense) for m in months], width, label="Expense", color="#ef4444")
            ax_month.bar([x + width for x in xs], [float(m.profit) for m in months], width, label="Profit", color="#3b82f6")
            ax_month.set_xticks(list(xs))
            ax_month.set_xticklabels([m.month_label for m in months], rotation=30, fontsize=8)
            ax_month.axhline(0, color="black", linewidth=0.6)
            ax_month.legend(fontsize=8)
        else:
            ax_month.text(0.5, 0.5, "No transactions", ha="center", va="center")
        ax_month.set_title("Monthly P&L")
        ax_month.grid(True, axis="y", linestyle=":", linewidth=0.6)

        values = [float(c.value) for c in categories]
        if values and sum(values) > 0:
            ax_cat.pie(values, labels=[c.name for c in categories], autopct="%1.0f%%", textprops={"fontsize": 8})
        else:
            ax_cat.text(0.5, 0.5, "No transactions", ha="center", va="center")
            ax_cat.set_axis_off()
        ax_cat.set_title("By Category")

        fig.suptitle(ctx.title)
        fig.tight_layout()
        fig.savefig(output_path, dpi=150)
        plt.close(fig)

        return output_path
