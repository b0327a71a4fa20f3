from __future__ import annotations

import pytest

from tasklist.infra.task_store import TaskStore
from tasklist.seed import sample_tasks
from tasklist.services.task_service import TaskService


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def seeded_store() -> TaskStore:
    store = TaskStore()
    store.seed(sample_tasks())
    return store


@pytest.fixture()
def service(seeded_store: TaskStore) -> TaskService:
    return TaskService(seeded_store)
