from __future__ import annotations


class TaskError(Exception):
    """Base class for failures the task store reports to its callers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TaskError):
    """Raised when task fields are rejected before anything is stored."""

    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(message)
        self.field = field


class NotFoundError(TaskError):
    """Raised when a mutation targets a task id the store does not hold."""

    def __init__(self, task_id: str):
        super().__init__(f"Task {task_id!r} not found")
        self.task_id = task_id
