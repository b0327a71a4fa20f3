from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import replace
from typing import Any

from tasklist.domain.entities import TaskDraft, TaskEntity
from tasklist.domain.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

Snapshot = tuple[TaskEntity, ...]
Observer = Callable[[Snapshot], None]


class TaskStore:
    """
    In-memory owner of the task collection.

    The collection is an immutable tuple, newest task first. Every mutation
    builds a new tuple plus index and swaps both in with one assignment, so
    readers always see either the old or the new state.

    Observers are called synchronously after each committed mutation with
    the new snapshot.
    """

    def __init__(self, id_factory: Callable[[], str] | None = None) -> None:
        self._tasks: Snapshot = ()
        self._index: dict[str, int] = {}
        self._observers: list[Observer] = []
        self._next_number = 1
        self._generation = 0
        self._id_factory = id_factory

    # ---- reads ----

    def list_tasks(self) -> Snapshot:
        return self._tasks

    def get_by_id(self, task_id: str) -> TaskEntity | None:
        position = self._index.get(task_id)
        return self._tasks[position] if position is not None else None

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._index

    # ---- mutations ----

    def create(self, fields: Mapping[str, Any]) -> TaskEntity:
        try:
            draft = TaskDraft.from_fields(fields)
        except ValidationError as exc:
            logger.warning("Task create rejected field=%s: %s", exc.field, exc.message)
            raise
        task = draft.to_entity(self._next_id())
        self._commit((task, *self._tasks))
        logger.info("Task created id=%s priority=%s", task.id, task.priority.label)
        return task

    def toggle_completion(self, task_id: str) -> TaskEntity:
        position = self._require(task_id, "toggle")
        current = self._tasks[position]
        updated = replace(current, is_completed=not current.is_completed)
        tasks = list(self._tasks)
        tasks[position] = updated
        self._commit(tuple(tasks))
        logger.info("Task toggled id=%s completed=%s", task_id, updated.is_completed)
        return updated

    def delete(self, task_id: str) -> TaskEntity:
        position = self._require(task_id, "delete")
        removed = self._tasks[position]
        self._commit(self._tasks[:position] + self._tasks[position + 1:])
        logger.info("Task deleted id=%s", task_id)
        return removed

    def seed(self, tasks: Iterable[TaskEntity]) -> None:
        if self._tasks:
            raise RuntimeError("TaskStore can only be seeded while empty")
        seeded = tuple(tasks)
        seen: set[str] = set()
        for task in seeded:
            if not isinstance(task.id, str) or not task.id:
                raise ValidationError(f"Seed task id must be a non-empty string, got {task.id!r}", field="id")
            if not task.title or not task.title.strip():
                raise ValidationError(f"Seed task {task.id!r} has no title", field="title")
            if task.id in seen:
                raise ValidationError(f"Duplicate seed task id {task.id!r}", field="id")
            seen.add(task.id)
        numeric = [int(task_id) for task_id in seen if task_id.isdigit()]
        if numeric:
            self._next_number = max(self._next_number, max(numeric) + 1)
        self._commit(seeded)
        logger.info("TaskStore seeded total=%s", len(seeded))

    # ---- observers ----

    def subscribe(self, callback: Observer) -> Callable[[], None]:
        self._observers.append(callback)
        return lambda: self.unsubscribe(callback)

    def unsubscribe(self, callback: Observer) -> None:
        if callback in self._observers:
            self._observers.remove(callback)

    def close(self) -> None:
        self._observers.clear()
        self._tasks = ()
        self._index = {}
        logger.info("TaskStore closed")

    # ---- internals ----

    def _require(self, task_id: str, action: str) -> int:
        position = self._index.get(task_id)
        if position is None:
            logger.warning("Task %s rejected: id=%s not found", action, task_id)
            raise NotFoundError(task_id)
        return position

    def _next_id(self) -> str:
        if self._id_factory is not None:
            task_id = self._id_factory()
            if task_id in self._index:
                raise RuntimeError(f"id_factory returned an id already in use: {task_id!r}")
            return task_id
        while True:
            task_id = str(self._next_number)
            self._next_number += 1
            if task_id not in self._index:
                return task_id

    def _commit(self, tasks: Snapshot) -> None:
        index = {task.id: position for position, task in enumerate(tasks)}
        self._tasks, self._index = tasks, index
        self._generation += 1
        generation = self._generation
        for observer in list(self._observers):
            # A nested commit already notified everyone with a newer snapshot.
            if self._generation != generation:
                break
            try:
                observer(self._tasks)
            except Exception:
                logger.exception("Task observer %r failed", observer)
