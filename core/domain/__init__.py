from core.domain.enums import ProjectStatus, TaskPriority, TaskStatus, TransactionType
from core.domain.identifiers import generate_id
from core.domain.project import Project
from core.domain.task import Task
from core.domain.transaction import Transaction, TransactionCategory

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
