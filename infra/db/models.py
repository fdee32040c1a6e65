# infra/db/models.py
from __future__ import annotations
import datetime as dt
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    String,
    Date,
    DateTime,
    Float,
    Integer,
    JSON,
    Numeric,
    ForeignKey,
    Enum as SAEnum,
    Index,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from infra.db.base import Base
from core.models import (
    ProjectStatus,
    TaskPriority,
    TaskStatus,
    TransactionType,
)

# Enum columns persist the lowercase values ("on-hold"), not member names
def _enum(enum_cls):
    return SAEnum(
        enum_cls,
        values_callable=lambda members: [m.value for m in members],
        native_enum=False,
        validate_strings=True,
    )


MONEY = Numeric(14, 2, asdecimal=True)


class ProjectORM(Base):
    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    client: Mapped[str] = mapped_column(String, nullable=False)
    location: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, default="")
    budget: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    start_date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    end_date: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)
    due_date: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)
    status: Mapped[ProjectStatus] = mapped_column(
        _enum(ProjectStatus), default=ProjectStatus.PLANNING, nullable=False
    )
    completion: Mapped[int] = mapped_column(Integer, default=0, nullable=False)


class TaskORM(Base):
    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, default="")
    status: Mapped[TaskStatus] = mapped_column(
        _enum(TaskStatus), default=TaskStatus.TODO, nullable=False
    )
    priority: Mapped[TaskPriority] = mapped_column(
        _enum(TaskPriority), default=TaskPriority.MEDIUM, nullable=False
    )
    start_date: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)
    due_date: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)
    estimated_hours: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    actual_hours: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    assigned_to: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    category: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[Optional[dt.datetime]] = mapped_column(DateTime, nullable=True)
    completed_at: Mapped[Optional[dt.datetime]] = mapped_column(DateTime, nullable=True)
Index("idx_tasks_project_id", TaskORM.project_id)


class TransactionORM(Base):
    __tablename__ = "transactions"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    amount: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    type: Mapped[TransactionType] = mapped_column(_enum(TransactionType), nullable=False)
    category: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, default="")
Index("idx_transactions_project_id", TransactionORM.project_id)


class TransactionCategoryORM(Base):
    __tablename__ = "transaction_categories"
    __table_args__ = (UniqueConstraint("name", "type", name="uq_transaction_category_name_type"),)

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    type: Mapped[TransactionType] = mapped_column(_enum(TransactionType), nullable=False)
