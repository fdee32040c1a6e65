from datetime import date, timedelta

from core.models import ProjectStatus
from core.services.timeline import DueDateStatus, due_date_status
from tests.factories import project, task_like

TODAY = date(2024, 6, 10)


def _project_due(offset_days: int, **kwargs):
    return project(date(2024, 1, 1), due=TODAY + timedelta(days=offset_days), **kwargs)


def test_due_yesterday_is_overdue():
    status = due_date_status(_project_due(-1), TODAY)

    assert status.overdue is True
    assert status.due_soon is False


def test_due_in_three_days_is_due_soon():
    status = due_date_status(_project_due(3), TODAY)

    assert status.overdue is False
    assert status.due_soon is True


def test_due_today_and_due_in_seven_days_are_due_soon():
    assert due_date_status(_project_due(0), TODAY).due_soon is True
    assert due_date_status(_project_due(7), TODAY).due_soon is True


def test_due_in_ten_days_is_neither():
    status = due_date_status(_project_due(10), TODAY)

    assert (status.overdue, status.due_soon) == (False, False)


def test_no_due_date_is_neither():
    status = due_date_status(project(date(2024, 1, 1)), TODAY)

    assert (status.overdue, status.due_soon) == (False, False)


def test_completed_project_is_never_flagged():
    closed_late = _project_due(-5, status=ProjectStatus.COMPLETED)
    closed_soon = _project_due(2, status=ProjectStatus.COMPLETED)

    assert due_date_status(closed_late, TODAY).overdue is False
    assert due_date_status(closed_soon, TODAY).due_soon is False


def test_fully_progressed_project_is_not_overdue_but_still_due_soon():
    late = _project_due(-5, completion=100)
    upcoming = _project_due(3, completion=100)

    assert due_date_status(late, TODAY) == DueDateStatus(overdue=False, due_soon=False)
    assert due_date_status(upcoming, TODAY) == DueDateStatus(overdue=False, due_soon=True)


def test_task_completeness_uses_status_only():
    open_task = task_like(due=TODAY - timedelta(days=2), status="in-progress")
    done_task = task_like(due=TODAY - timedelta(days=2), status="completed")

    assert due_date_status(open_task, TODAY).overdue is True
    assert due_date_status(done_task, TODAY).overdue is False


def test_flags_are_mutually_exclusive():
    for offset in range(-10, 15):
        status = due_date_status(_project_due(offset), TODAY)
        assert not (status.overdue and status.due_soon)
