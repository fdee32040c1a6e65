from __future__ import annotations

from datetime import date
from decimal import Decimal

from core.exceptions import ValidationError


class ProjectValidationMixin:
    def _validate_project_name(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Project name cannot be empty.", code="PROJECT_NAME_EMPTY")
        if len(name.strip()) < 3:
            raise ValidationError("Project name must be at least 3 characters.", code="PROJECT_NAME_TOO_SHORT")

    def _validate_party(self, value: str | None, *, field: str) -> str:
        cleaned = (value or "").strip()
        if len(cleaned) < 2:
            raise ValidationError(
                f"{field.capitalize()} is required.",
                code=f"PROJECT_{field.upper()}_REQUIRED",
            )
        return cleaned

    def _validate_description(self, description: str | None) -> str:
        cleaned = (description or "").strip()
        if len(cleaned) < 10:
            raise ValidationError(
                "Description must be at least 10 characters.",
                code="PROJECT_DESCRIPTION_TOO_SHORT",
            )
        return cleaned

    def _validate_budget(self, budget: Decimal) -> None:
        if budget is None or budget <= 0:
            raise ValidationError("Budget must be a positive number.", code="PROJECT_BUDGET_INVALID")

    def _validate_completion(self, completion: int) -> None:
        if completion < 0 or completion > 100:
            raise ValidationError("Completion must be between 0 and 100.", code="PROJECT_COMPLETION_RANGE")

    def _validate_dates(
        self,
        start_date: date,
        end_date: date | None,
        due_date: date | None,
    ) -> None:
        if not isinstance(start_date, date):
            raise ValidationError("Start date must be a valid date.", code="PROJECT_START_INVALID")
        if end_date is not None and end_date < start_date:
            raise ValidationError("End date cannot be before start date.", code="PROJECT_END_BEFORE_START")
        if due_date is not None and due_date < start_date:
            raise ValidationError("Due date cannot be before start date.", code="PROJECT_DUE_BEFORE_START")


__all__ = ["ProjectValidationMixin"]
