from .aggregation import expense_breakdown, group_by_category, group_by_month, summarize
from .filters import apply_view, filter_by_timeframe, filter_by_type
from .models import CategoryTotal, FinancialsSummary, MonthlyTotal, ProjectFinancials
from .service import FinancialsService

__all__ = [
    "FinancialsService",
    "FinancialsSummary",
    "CategoryTotal",
    "MonthlyTotal",
    "ProjectFinancials",
    "summarize",
    "group_by_category",
    "group_by_month",
    "expense_breakdown",
    "filter_by_timeframe",
    "filter_by_type",
    "apply_view",
]
