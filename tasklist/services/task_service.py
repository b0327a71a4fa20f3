from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from tasklist.config import Settings
from tasklist.domain.entities import TaskEntity
from tasklist.domain.enums import TaskFilter
from tasklist.domain.filters import coerce_filter, count_by_filter, project
from tasklist.infra.task_store import Snapshot, TaskStore
from tasklist.seed import sample_tasks

logger = logging.getLogger(__name__)

ViewListener = Callable[[TaskFilter, Snapshot], None]


class TaskService:
    def __init__(self, store: TaskStore, default_filter: TaskFilter | str = TaskFilter.ACTIVE) -> None:
        self._store = store
        self._filter = coerce_filter(default_filter)
        self._listeners: list[ViewListener] = []
        self._visible: Snapshot = project(store.list_tasks(), self._filter)
        self._unsubscribe = store.subscribe(self._on_store_changed)

    @property
    def store(self) -> TaskStore:
        return self._store

    @property
    def current_filter(self) -> TaskFilter:
        return self._filter

    def list_tasks(self) -> Snapshot:
        return self._store.list_tasks()

    def visible_tasks(self) -> Snapshot:
        return self._visible

    def get_task(self, task_id: str) -> TaskEntity | None:
        return self._store.get_by_id(task_id)

    def create_task(self, data: Mapping[str, Any]) -> TaskEntity:
        return self._store.create(data)

    def toggle_completion(self, task_id: str) -> TaskEntity:
        return self._store.toggle_completion(task_id)

    def delete_task(self, task_id: str) -> TaskEntity:
        return self._store.delete(task_id)

    def set_filter(self, task_filter: TaskFilter | str) -> None:
        selected = coerce_filter(task_filter)
        if selected is self._filter:
            return
        self._filter = selected
        logger.debug("Filter changed to %s", selected.value)
        self._refresh(self._store.list_tasks())

    def get_stats(self) -> dict[str, int]:
        counts = count_by_filter(self._store.list_tasks())
        return {
            "total": counts[TaskFilter.ALL],
            "active": counts[TaskFilter.ACTIVE],
            "completed": counts[TaskFilter.COMPLETED],
        }

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: ViewListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def close(self) -> None:
        self._unsubscribe()
        self._listeners.clear()

    def _on_store_changed(self, tasks: Snapshot) -> None:
        self._refresh(tasks)

    def _refresh(self, tasks: Snapshot) -> None:
        self._visible = project(tasks, self._filter)
        for listener in list(self._listeners):
            listener(self._filter, self._visible)


def build_task_service(settings: Settings) -> TaskService:
    store = TaskStore()
    if settings.seed_sample_tasks:
        store.seed(sample_tasks())
    return TaskService(store, default_filter=settings.default_filter)
