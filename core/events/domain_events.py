"""Change notifications for projects, tasks and transactions; listeners re-run the read models."""
from core.events.signal import Signal


class DomainEvents:
    def __init__(self) -> None:
        self.project_changed: Signal[str] = Signal()       # project_id
        self.tasks_changed: Signal[str] = Signal()         # project_id
        self.transactions_changed: Signal[str] = Signal()  # project_id


# SINGLE global instance
domain_events = DomainEvents()
