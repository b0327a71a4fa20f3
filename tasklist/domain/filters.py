from __future__ import annotations

from collections.abc import Sequence

from .entities import TaskEntity
from .enums import TaskFilter
from .errors import ValidationError


def coerce_filter(value: TaskFilter | str) -> TaskFilter:
    if isinstance(value, TaskFilter):
        return value
    try:
        return TaskFilter(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown filter: {value!r}", field="filter") from None


def project(
    tasks: Sequence[TaskEntity],
    task_filter: TaskFilter | str,
) -> tuple[TaskEntity, ...]:
    """Return the tasks visible under ``task_filter``, keeping input order.

    The input sequence is never modified.
    """
    selected = coerce_filter(task_filter)
    if selected is TaskFilter.ALL:
        return tuple(tasks)
    if selected is TaskFilter.ACTIVE:
        return tuple(task for task in tasks if not task.is_completed)
    if selected is TaskFilter.COMPLETED:
        return tuple(task for task in tasks if task.is_completed)
    raise ValidationError(f"Unhandled filter: {selected!r}", field="filter")


def count_by_filter(tasks: Sequence[TaskEntity]) -> dict[TaskFilter, int]:
    completed = sum(1 for task in tasks if task.is_completed)
    return {
        TaskFilter.ALL: len(tasks),
        TaskFilter.ACTIVE: len(tasks) - completed,
        TaskFilter.COMPLETED: completed,
    }
