from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from core.domain.enums import ProjectStatus
from core.domain.identifiers import generate_id


@dataclass
class Project:
    id: str
    name: str
    client: str
    location: str
    budget: Decimal
    start_date: date
    end_date: Optional[date] = None
    due_date: Optional[date] = None
    status: ProjectStatus = ProjectStatus.PLANNING
    completion: int = 0
    description: str = ""

    @property
    def is_complete(self) -> bool:
        return self.status == ProjectStatus.COMPLETED or self.completion >= 100

    @staticmethod
    def create(
        name: str,
        client: str,
        location: str,
        budget: Decimal,
        start_date: date,
        **extra,
    ) -> "Project":
        return Project(
            id=generate_id(),
            name=name,
            client=client,
            location=location,
            budget=budget,
            start_date=start_date,
            **extra,
        )


__all__ = ["Project"]
