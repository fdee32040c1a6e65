"""Compatibility re-exports for domain models."""

from core.domain import (
    Project,
    ProjectStatus,
    Task,
    TaskPriority,
    TaskStatus,
    Transaction,
    TransactionCategory,
    TransactionType,
    generate_id,
)

__all__ = [
    "generate_id",
    "ProjectStatus",
    "TaskStatus",
    "TaskPriority",
    "TransactionType",
    "Project",
    "Task",
    "Transaction",
    "TransactionCategory",
]
