from .service import DEFAULT_CATEGORIES, TransactionService

__all__ = ["TransactionService", "DEFAULT_CATEGORIES"]
