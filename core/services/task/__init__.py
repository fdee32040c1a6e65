from .service import TaskService

__all__ = ["TaskService"]
