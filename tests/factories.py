from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from core.models import Project, ProjectStatus, Transaction, TransactionType, generate_id


def tx(amount, type_: str, day: date, category: str = "Materials", project_id: str = "p-1") -> Transaction:
    return Transaction(
        id=generate_id(),
        project_id=project_id,
        date=day,
        amount=Decimal(str(amount)),
        type=TransactionType(type_),
        category=category,
    )


def project(
    start: date,
    *,
    end: date | None = None,
    due: date | None = None,
    status: ProjectStatus = ProjectStatus.ACTIVE,
    completion: int = 0,
    name: str = "Riverside Center",
) -> Project:
    return Project(
        id=generate_id(),
        name=name,
        client="Acme Builders",
        location="Springfield",
        budget=Decimal("100000"),
        start_date=start,
        end_date=end,
        due_date=due,
        status=status,
        completion=completion,
    )


def task_like(*, start: date | None = None, due: date | None = None, status: str = "todo"):
    return SimpleNamespace(id=generate_id(), start_date=start, due_date=due, status=status)
