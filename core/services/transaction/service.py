# core/services/transaction/service.py
from __future__ import annotations

import logging
import datetime as dt
from decimal import Decimal, InvalidOperation
from typing import List

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError, ValidationError
from core.interfaces import (
    ProjectRepository,
    TransactionCategoryRepository,
    TransactionRepository,
)
from core.models import Transaction, TransactionCategory, TransactionType
from core.services.financials.helpers import as_decimal

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES: dict[TransactionType, tuple[str, ...]] = {
    TransactionType.INCOME: (
        "Client Payment",
        "Milestone Payment",
        "Additional Services",
        "Materials Reimbursement",
        "Other Income",
    ),
    TransactionType.EXPENSE: (
        "Labor",
        "Materials",
        "Equipment Rental",
        "Permits & Fees",
        "Subcontractor",
        "Transportation",
        "Administrative",
        "Other Expense",
    ),
}


class TransactionService:
    def __init__(
        self,
        session: Session,
        transaction_repo: TransactionRepository,
        category_repo: TransactionCategoryRepository,
        project_repo: ProjectRepository,
    ):
        self._session: Session = session
        self._transaction_repo: TransactionRepository = transaction_repo
        self._category_repo: TransactionCategoryRepository = category_repo
        self._project_repo: ProjectRepository = project_repo

    def add_transaction(
        self,
        project_id: str,
        date: dt.date,
        amount: Decimal | float | str,
        type: TransactionType | str,
        category: str,
        description: str = "",
    ) -> Transaction:
        if not self._project_repo.get(project_id):
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")

        try:
            amount = as_decimal(amount)
        except InvalidOperation:
            raise ValidationError("Amount must be a number.", code="TRANSACTION_AMOUNT_INVALID") from None
        if not amount.is_finite() or amount <= 0:
            raise ValidationError("Amount must be a positive number.", code="TRANSACTION_AMOUNT_INVALID")

        try:
            type = TransactionType(getattr(type, "value", type))
        except ValueError:
            raise ValidationError(
                f"Unknown transaction type: {type!r}.",
                code="TRANSACTION_TYPE_INVALID",
            ) from None

        if not category or not category.strip():
            raise ValidationError("Please select a category.", code="TRANSACTION_CATEGORY_EMPTY")

        if not isinstance(date, dt.date):
            raise ValidationError("Transaction date must be a valid date.", code="TRANSACTION_DATE_INVALID")

        transaction = Transaction.create(
            project_id=project_id,
            date=date,
            amount=amount,
            type=type,
            # categories are free text; only surrounding whitespace is trimmed
            category=category.strip(),
            description=(description or "").strip(),
        )

        try:
            self._transaction_repo.add(transaction)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error("Error adding transaction: %s", e)
            raise

        logger.info(
            "Recorded %s of %s for project %s",
            transaction.type.value,
            transaction.amount,
            project_id,
        )
        domain_events.transactions_changed.emit(project_id)
        return transaction

    def list_transactions_for_project(self, project_id: str) -> List[Transaction]:
        return self._transaction_repo.list_by_project(project_id)

    def list_all_transactions(self) -> List[Transaction]:
        return self._transaction_repo.list_all()

    def list_categories(self, type: TransactionType | None = None) -> List[TransactionCategory]:
        return self._category_repo.list_all(type)

    def seed_default_categories(self) -> int:
        existing = {(c.type, c.name) for c in self._category_repo.list_all()}
        added = 0
        for category_type, names in DEFAULT_CATEGORIES.items():
            for name in names:
                if (category_type, name) in existing:
                    continue
                self._category_repo.add(TransactionCategory.create(name=name, type=category_type))
                added += 1
        try:
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        if added:
            logger.info("Seeded %d transaction categories", added)
        return added


__all__ = ["TransactionService", "DEFAULT_CATEGORIES"]
