from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from core.domain.enums import TransactionType
from core.domain.identifiers import generate_id


@dataclass(frozen=True)
class Transaction:
    id: str
    project_id: str
    date: date
    amount: Decimal
    type: TransactionType
    category: str
    description: str = ""

    @staticmethod
    def create(
        project_id: str,
        date: date,
        amount: Decimal,
        type: TransactionType,
        category: str,
        description: str = "",
    ) -> "Transaction":
        return Transaction(
            id=generate_id(),
            project_id=project_id,
            date=date,
            amount=amount,
            type=type,
            category=category,
            description=description,
        )


@dataclass(frozen=True)
class TransactionCategory:
    id: str
    name: str
    type: TransactionType

    @staticmethod
    def create(name: str, type: TransactionType) -> "TransactionCategory":
        return TransactionCategory(id=generate_id(), name=name, type=type)


__all__ = ["Transaction", "TransactionCategory"]
