from datetime import date, datetime

import pytest

from core.exceptions import NotFoundError, ValidationError
from core.models import TaskPriority, TaskStatus


@pytest.fixture
def project(services):
    return services["project_service"].create_project(
        "Cedar Ridge Homes",
        client="Cedar Ridge LLC",
        location="Boise, ID",
        description="General contracting scope for Boise, ID",
        budget="450000",
        start_date=date(2024, 3, 1),
    )


def test_create_task_with_defaults(services, project):
    ts = services["task_service"]

    task = ts.create_task(project.id, "  Pour foundation ", start_date=date(2024, 3, 4), due_date=date(2024, 3, 8))

    loaded = ts.get_task(task.id)
    assert loaded.title == "Pour foundation"
    assert loaded.status == TaskStatus.TODO
    assert loaded.priority == TaskPriority.MEDIUM
    assert loaded.created_at is not None
    assert loaded.completed_at is None


def test_task_tags_are_trimmed_deduplicated_and_persisted(services, project):
    ts = services["task_service"]

    task = ts.create_task(project.id, "Rough plumbing", tags=[" MEP ", "", "inspection", "MEP"])
    untagged = ts.create_task(project.id, "Backfill")

    assert ts.get_task(task.id).tags == ["MEP", "inspection"]
    assert ts.get_task(untagged.id).tags == []

    ts.update_task_status(task.id, TaskStatus.IN_PROGRESS)
    assert ts.get_task(task.id).tags == ["MEP", "inspection"]


def test_task_validation(services, project):
    ts = services["task_service"]

    with pytest.raises(ValidationError) as exc:
        ts.create_task(project.id, "  ")
    assert exc.value.code == "TASK_TITLE_EMPTY"

    with pytest.raises(ValidationError) as exc:
        ts.create_task(project.id, " ab ")
    assert exc.value.code == "TASK_TITLE_TOO_SHORT"
    assert ts.list_tasks_for_project(project.id) == []

    with pytest.raises(ValidationError) as exc:
        ts.create_task(project.id, "Framing", start_date=date(2024, 3, 10), due_date=date(2024, 3, 9))
    assert exc.value.code == "TASK_INVALID_DATE"

    with pytest.raises(ValidationError) as exc:
        ts.create_task(project.id, "Framing", estimated_hours=-4)
    assert exc.value.code == "TASK_HOURS_NEGATIVE"

    with pytest.raises(NotFoundError):
        ts.create_task("missing", "Framing")


def test_tasks_listed_newest_first(services, project):
    ts = services["task_service"]
    ts.create_task(project.id, "Excavation", priority="high")
    ts.create_task(project.id, "Inspection", category="Permits")

    tasks = ts.list_tasks_for_project(project.id)

    assert {t.title for t in tasks} == {"Excavation", "Inspection"}
    stamps = [t.created_at for t in tasks]
    assert stamps == sorted(stamps, reverse=True)


def test_status_change_stamps_and_clears_completed_at(services, project):
    ts = services["task_service"]
    task = ts.create_task(project.id, "Roofing")
    done_at = datetime(2024, 4, 2, 15, 30)

    ts.update_task_status(task.id, TaskStatus.COMPLETED, now=done_at)
    loaded = ts.get_task(task.id)
    assert loaded.status == TaskStatus.COMPLETED
    assert loaded.completed_at == done_at
    assert [t.id for t in ts.list_tasks_by_status(project.id, TaskStatus.COMPLETED)] == [task.id]

    ts.update_task_status(task.id, "review")
    loaded = ts.get_task(task.id)
    assert loaded.status == TaskStatus.REVIEW
    assert loaded.completed_at is None


def test_update_status_of_missing_task(services):
    with pytest.raises(NotFoundError) as exc:
        services["task_service"].update_task_status("missing", TaskStatus.BLOCKED)
    assert exc.value.code == "TASK_NOT_FOUND"
