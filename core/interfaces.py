# core/interfaces.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from core.models import Project, Task, Transaction, TransactionCategory, TransactionType


class ProjectRepository(ABC):
    @abstractmethod
    def add(self, project: Project) -> None: ...

    @abstractmethod
    def update(self, project: Project) -> None: ...

    @abstractmethod
    def get(self, project_id: str) -> Optional[Project]: ...

    @abstractmethod
    def list_all(self) -> List[Project]: ...


class TaskRepository(ABC):
    @abstractmethod
    def add(self, task: Task) -> None: ...

    @abstractmethod
    def update(self, task: Task) -> None: ...

    @abstractmethod
    def get(self, task_id: str) -> Optional[Task]: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[Task]: ...


class TransactionRepository(ABC):
    @abstractmethod
    def add(self, transaction: Transaction) -> None: ...

    @abstractmethod
    def get(self, transaction_id: str) -> Optional[Transaction]: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[Transaction]: ...

    @abstractmethod
    def list_all(self) -> List[Transaction]: ...


class TransactionCategoryRepository(ABC):
    @abstractmethod
    def add(self, category: TransactionCategory) -> None: ...

    @abstractmethod
    def list_all(self, type: TransactionType | None = None) -> List[TransactionCategory]: ...


__all__ = [
    "ProjectRepository",
    "TaskRepository",
    "TransactionRepository",
    "TransactionCategoryRepository",
]
