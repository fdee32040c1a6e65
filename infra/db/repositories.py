# infra/db/repositories.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.interfaces import (
    ProjectRepository,
    TaskRepository,
    TransactionCategoryRepository,
    TransactionRepository,
)
from core.models import Project, Task, Transaction, TransactionCategory, TransactionType
from infra.db.mappers import (
    category_from_orm,
    category_to_orm,
    project_from_orm,
    project_to_orm,
    task_from_orm,
    task_to_orm,
    transaction_from_orm,
    transaction_to_orm,
)
from infra.db.models import ProjectORM, TaskORM, TransactionCategoryORM, TransactionORM


class SqlAlchemyProjectRepository(ProjectRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, project: Project) -> None:
        self.session.add(project_to_orm(project))

    def update(self, project: Project) -> None:
        obj = self.session.get(ProjectORM, project.id)
        if obj is None:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")
        obj.name = project.name
        obj.client = project.client
        obj.location = project.location
        obj.description = project.description
        obj.budget = project.budget
        obj.start_date = project.start_date
        obj.end_date = project.end_date
        obj.due_date = project.due_date
        obj.status = project.status
        obj.completion = project.completion

    def get(self, project_id: str) -> Optional[Project]:
        obj = self.session.get(ProjectORM, project_id)
        return project_from_orm(obj) if obj else None

    def list_all(self) -> List[Project]:
        stmt = select(ProjectORM)
        rows = self.session.execute(stmt).scalars().all()
        return [project_from_orm(row) for row in rows]


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, task: Task) -> None:
        self.session.add(task_to_orm(task))

    def update(self, task: Task) -> None:
        obj = self.session.get(TaskORM, task.id)
        if obj is None:
            raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")
        obj.title = task.title
        obj.description = task.description
        obj.status = task.status
        obj.priority = task.priority
        obj.start_date = task.start_date
        obj.due_date = task.due_date
        obj.estimated_hours = task.estimated_hours
        obj.actual_hours = task.actual_hours
        obj.assigned_to = task.assigned_to
        obj.category = task.category
        obj.tags = list(task.tags)
        obj.completed_at = task.completed_at

    def get(self, task_id: str) -> Optional[Task]:
        obj = self.session.get(TaskORM, task_id)
        return task_from_orm(obj) if obj else None

    def list_by_project(self, project_id: str) -> List[Task]:
        stmt = select(TaskORM).where(TaskORM.project_id == project_id)
        rows = self.session.execute(stmt).scalars().all()
        return [task_from_orm(row) for row in rows]


class SqlAlchemyTransactionRepository(TransactionRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, transaction: Transaction) -> None:
        self.session.add(transaction_to_orm(transaction))

    def get(self, transaction_id: str) -> Optional[Transaction]:
        obj = self.session.get(TransactionORM, transaction_id)
        return transaction_from_orm(obj) if obj else None

    def list_by_project(self, project_id: str) -> List[Transaction]:
        stmt = select(TransactionORM).where(TransactionORM.project_id == project_id)
        rows = self.session.execute(stmt).scalars().all()
        return [transaction_from_orm(row) for row in rows]

    def list_all(self) -> List[Transaction]:
        rows = self.session.execute(select(TransactionORM)).scalars().all()
        return [transaction_from_orm(row) for row in rows]


class SqlAlchemyTransactionCategoryRepository(TransactionCategoryRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, category: TransactionCategory) -> None:
        self.session.add(category_to_orm(category))

    def list_all(self, type: TransactionType | None = None) -> List[TransactionCategory]:
        stmt = select(TransactionCategoryORM).order_by(TransactionCategoryORM.name)
        if type is not None:
            stmt = stmt.where(TransactionCategoryORM.type == type)
        rows = self.session.execute(stmt).scalars().all()
        return [category_from_orm(row) for row in rows]


__all__ = [
    "SqlAlchemyProjectRepository",
    "SqlAlchemyTaskRepository",
    "SqlAlchemyTransactionRepository",
    "SqlAlchemyTransactionCategoryRepository",
]
