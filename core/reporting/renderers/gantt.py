from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib import ticker

from core.services.timeline import TimelineView

STATUS_COLORS = {
    # projects
    "planning": "#3b82f6",
    "active": "#22c55e",
    "completed": "#a855f7",
    "on-hold": "#f59e0b",
    # tasks
    "todo": "#9ca3af",
    "in-progress": "#3b82f6",
    "blocked": "#ef4444",
    "review": "#a855f7",
}
DEFAULT_COLOR = "#6b7280"


class GanttPngRenderer:
    """Draws a timeline view on a 0-100 percent axis, one row per item."""

    def render(self, view: TimelineView, output_path: Path, title: str = "Project Timeline") -> Path:
        if not view.rows:
            raise ValueError("No dated items available for Gantt chart")

        fig, ax = plt.subplots(figsize=(12, max(3, 0.6 * len(view.rows) + 1.5)))

        labels = []
        for i, row in enumerate(view.rows):
            color = STATUS_COLORS.get(row.status, DEFAULT_COLOR)
            ax.barh(
                i,
                row.bar.width_percent,
                left=row.bar.left_percent,
                height=0.45,
                color=color,
                edgecolor="black",
                linewidth=0.5,
            )
            if row.due_marker_percent is not None:
                ax.plot(
                    [row.due_marker_percent, row.due_marker_percent],
                    [i - 0.35, i + 0.35],
                    color="#dc2626",
                    linewidth=1.2,
                )

            label = row.label
            if row.due_status.overdue:
                label += "  (overdue)"
            elif row.due_status.due_soon:
                label += "  (due soon)"
            labels.append(label)

        ax.set_yticks(range(len(labels)))
        ax.set_yticklabels(labels, fontsize=9)
        ax.invert_yaxis()

        window_days = view.window.days
        ax.set_xlim(0, 100)
        ax.set_xticks([bucket.start_index / window_days * 100.0 for bucket in view.months])
        ax.set_xticklabels([bucket.label for bucket in view.months], fontsize=8, ha="left")
        ax.xaxis.set_minor_locator(ticker.NullLocator())

        if 0.0 <= view.today_percent <= 100.0:
            ax.axvline(view.today_percent, color="red", linestyle="--", linewidth=1)

        ax.set_title(title)
        ax.grid(True, axis="x", linestyle=":", linewidth=0.5)

        fig.tight_layout()
        fig.savefig(output_path, dpi=150)
        plt.close(fig)

        return output_path
