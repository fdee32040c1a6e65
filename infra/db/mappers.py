# infra/db/mappers.py
from __future__ import annotations

from core.models import Project, Task, Transaction, TransactionCategory
from infra.db.models import ProjectORM, TaskORM, TransactionCategoryORM, TransactionORM


# ---------------- Project ----------------

def project_to_orm(project: Project) -> ProjectORM:
    return ProjectORM(
        id=project.id,
        name=project.name,
        client=project.client,
        location=project.location,
        description=project.description,
        budget=project.budget,
        start_date=project.start_date,
        end_date=project.end_date,
        due_date=project.due_date,
        status=project.status,
        completion=project.completion,
    )


def project_from_orm(obj: ProjectORM) -> Project:
    return Project(
        id=obj.id,
        name=obj.name,
        client=obj.client,
        location=obj.location,
        description=obj.description or "",
        budget=obj.budget,
        start_date=obj.start_date,
        end_date=obj.end_date,
        due_date=obj.due_date,
        status=obj.status,
        completion=obj.completion or 0,
    )


# ---------------- Task ----------------

def task_to_orm(task: Task) -> TaskORM:
    return TaskORM(
        id=task.id,
        project_id=task.project_id,
        title=task.title,
        description=task.description,
        status=task.status,
        priority=task.priority,
        start_date=task.start_date,
        due_date=task.due_date,
        estimated_hours=task.estimated_hours,
        actual_hours=task.actual_hours,
        assigned_to=task.assigned_to,
        category=task.category,
        tags=list(task.tags),
        created_at=task.created_at,
        completed_at=task.completed_at,
    )


def task_from_orm(obj: TaskORM) -> Task:
    return Task(
        id=obj.id,
        project_id=obj.project_id,
        title=obj.title,
        description=obj.description or "",
        status=obj.status,
        priority=obj.priority,
        start_date=obj.start_date,
        due_date=obj.due_date,
        estimated_hours=obj.estimated_hours,
        actual_hours=obj.actual_hours,
        assigned_to=obj.assigned_to,
        category=obj.category,
        tags=list(obj.tags or []),
        created_at=obj.created_at,
        completed_at=obj.completed_at,
    )


# ---------------- Transaction ----------------

def transaction_to_orm(transaction: Transaction) -> TransactionORM:
    return TransactionORM(
        id=transaction.id,
        project_id=transaction.project_id,
        date=transaction.date,
        amount=transaction.amount,
        type=transaction.type,
        category=transaction.category,
        description=transaction.description,
    )


def transaction_from_orm(obj: TransactionORM) -> Transaction:
    return Transaction(
        id=obj.id,
        project_id=obj.project_id,
        date=obj.date,
        amount=obj.amount,
        type=obj.type,
        category=obj.category,
        description=obj.description or "",
    )


def category_to_orm(category: TransactionCategory) -> TransactionCategoryORM:
    return TransactionCategoryORM(id=category.id, name=category.name, type=category.type)


def category_from_orm(obj: TransactionCategoryORM) -> TransactionCategory:
    return TransactionCategory(id=obj.id, name=obj.name, type=obj.type)


__all__ = [
    "project_to_orm",
    "project_from_orm",
    "task_to_orm",
    "task_from_orm",
    "transaction_to_orm",
    "transaction_from_orm",
    "category_to_orm",
    "category_from_orm",
]
