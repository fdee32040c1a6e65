from .dashboard import DashboardService, DashboardStats, ProjectPerformance, UpcomingDeadline
from .financials import FinancialsService, FinancialsSummary, ProjectFinancials
from .project import ProjectService
from .task import TaskService
from .timeline import TimelineService, TimelineView
from .transaction import TransactionService

__all__ = [
    "ProjectService",
    "TaskService",
    "TransactionService",
    "FinancialsService",
    "FinancialsSummary",
    "ProjectFinancials",
    "TimelineService",
    "TimelineView",
    "DashboardService",
    "DashboardStats",
    "ProjectPerformance",
    "UpcomingDeadline",
]
