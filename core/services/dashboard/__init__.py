from .models import DashboardStats, ProgressPoint, ProjectPerformance, UpcomingDeadline
from .service import DashboardService

__all__ = [
    "DashboardService",
    "DashboardStats",
    "UpcomingDeadline",
    "ProgressPoint",
    "ProjectPerformance",
]
