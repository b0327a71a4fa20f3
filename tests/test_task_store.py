from __future__ import annotations

import pytest

from tasklist.domain.entities import TaskEntity
from tasklist.domain.enums import Priority
from tasklist.domain.errors import NotFoundError, ValidationError
from tasklist.infra.task_store import TaskStore
from tasklist.seed import sample_tasks
from tasklist.services.task_service import TaskService


def test_create_places_new_task_first(seeded_store: TaskStore) -> None:
    before = seeded_store.list_tasks()

    task = seeded_store.create({"title": "Buy milk", "priority": "Normal"})

    after = seeded_store.list_tasks()
    assert len(after) == 6
    assert after[0] == task
    assert after[1:] == before
    assert task.is_completed is False
    assert task.priority is Priority.NORMAL
    assert task.description is None
    assert task.due_date is None


def test_create_generates_distinct_ids_for_rapid_creates(store: TaskStore) -> None:
    ids = [store.create({"title": f"Task {n}", "priority": Priority.LOW}).id for n in range(200)]

    assert len(set(ids)) == len(ids)


def test_create_does_not_collide_with_seeded_ids(seeded_store: TaskStore) -> None:
    task = seeded_store.create({"title": "Sixth", "priority": "high"})

    assert task.id not in {"1", "2", "3", "4", "5"}


def test_ids_are_not_reused_after_delete(seeded_store: TaskStore) -> None:
    first = seeded_store.create({"title": "A", "priority": "Low"})
    seeded_store.delete(first.id)

    second = seeded_store.create({"title": "B", "priority": "Low"})

    assert second.id != first.id


def test_create_parses_iso_due_date_and_strips_text(store: TaskStore) -> None:
    task = store.create({
        "title": "  Report  ",
        "description": "  weekly  ",
        "due_date": "2024-12-18",
        "priority": 3,
    })

    assert task.title == "Report"
    assert task.description == "weekly"
    assert task.due_date.isoformat() == "2024-12-18"
    assert task.priority is Priority.HIGH


@pytest.mark.parametrize(
    ("fields", "field"),
    [
        ({"title": "", "priority": "Normal"}, "title"),
        ({"title": "   ", "priority": "Normal"}, "title"),
        ({"priority": "Normal"}, "title"),
        ({"title": "Buy milk"}, "priority"),
        ({"title": "Buy milk", "priority": "Urgent"}, "priority"),
        ({"title": "Buy milk", "priority": 7}, "priority"),
        ({"title": "Buy milk", "priority": "Normal", "due_date": "18.12.2024"}, "due_date"),
    ],
)
def test_create_rejects_invalid_fields_without_inserting(
    seeded_store: TaskStore, fields: dict, field: str
) -> None:
    before = seeded_store.list_tasks()

    with pytest.raises(ValidationError) as excinfo:
        seeded_store.create(fields)

    assert excinfo.value.field == field
    assert seeded_store.list_tasks() == before


def test_toggle_twice_restores_original(seeded_store: TaskStore) -> None:
    original = seeded_store.get_by_id("3")
    assert original is not None and original.is_completed is False

    toggled = seeded_store.toggle_completion("3")
    assert toggled.is_completed is True
    assert seeded_store.get_by_id("3").is_completed is True

    seeded_store.toggle_completion("3")
    assert seeded_store.get_by_id("3") == original


def test_toggle_keeps_position(seeded_store: TaskStore) -> None:
    ids_before = [task.id for task in seeded_store.list_tasks()]

    seeded_store.toggle_completion("4")

    assert [task.id for task in seeded_store.list_tasks()] == ids_before


def test_toggle_unknown_id_raises_and_leaves_collection(seeded_store: TaskStore) -> None:
    before = seeded_store.list_tasks()

    with pytest.raises(NotFoundError) as excinfo:
        seeded_store.toggle_completion("nonexistent")

    assert excinfo.value.task_id == "nonexistent"
    assert seeded_store.list_tasks() == before


def test_delete_removes_task_and_keeps_order(seeded_store: TaskStore) -> None:
    removed = seeded_store.delete("2")

    assert removed.id == "2"
    assert seeded_store.get_by_id("2") is None
    assert "2" not in seeded_store
    assert [task.id for task in seeded_store.list_tasks()] == ["1", "3", "4", "5"]


def test_delete_unknown_id_raises(seeded_store: TaskStore) -> None:
    before = seeded_store.list_tasks()

    with pytest.raises(NotFoundError):
        seeded_store.delete("42")

    assert seeded_store.list_tasks() == before


def test_get_by_id_missing_returns_none(store: TaskStore) -> None:
    assert store.get_by_id("missing") is None


def test_list_returns_immutable_snapshot(seeded_store: TaskStore) -> None:
    snapshot = seeded_store.list_tasks()
    copy = list(snapshot)
    copy.clear()

    assert isinstance(snapshot, tuple)
    assert len(seeded_store) == 5

    seeded_store.create({"title": "New", "priority": "Low"})
    assert len(snapshot) == 5


def test_observers_receive_committed_snapshot(store: TaskStore) -> None:
    received: list[tuple[TaskEntity, ...]] = []
    store.subscribe(received.append)

    task = store.create({"title": "Observe", "priority": "Normal"})
    store.toggle_completion(task.id)
    store.delete(task.id)

    assert len(received) == 3
    assert received[0] == (task,)
    assert received[1][0].is_completed is True
    assert received[2] == ()


def test_failed_mutation_does_not_notify(seeded_store: TaskStore) -> None:
    calls: list[object] = []
    seeded_store.subscribe(calls.append)

    with pytest.raises(ValidationError):
        seeded_store.create({"title": "", "priority": "Normal"})
    with pytest.raises(NotFoundError):
        seeded_store.delete("nope")

    assert calls == []


def test_failing_observer_does_not_block_others(store: TaskStore) -> None:
    received: list[int] = []

    def broken(_snapshot) -> None:
        raise RuntimeError("boom")

    store.subscribe(broken)
    store.subscribe(lambda snapshot: received.append(len(snapshot)))

    store.create({"title": "Still works", "priority": "Low"})

    assert received == [1]
    assert len(store) == 1


def test_unsubscribe_stops_notifications(store: TaskStore) -> None:
    calls: list[object] = []
    unsubscribe = store.subscribe(calls.append)

    unsubscribe()
    store.create({"title": "Quiet", "priority": "Low"})

    assert calls == []


def test_seed_rejects_duplicate_ids(store: TaskStore) -> None:
    task = TaskEntity(id="1", title="One", description=None, due_date=None, priority=Priority.LOW)

    with pytest.raises(ValidationError):
        store.seed([task, task])

    assert store.list_tasks() == ()


def test_seed_only_when_empty(seeded_store: TaskStore) -> None:
    with pytest.raises(RuntimeError):
        seeded_store.seed([])


def test_custom_id_factory_collision_is_rejected() -> None:
    store = TaskStore(id_factory=lambda: "same")
    store.create({"title": "First", "priority": "Low"})

    with pytest.raises(RuntimeError):
        store.create({"title": "Second", "priority": "Low"})

    assert [task.title for task in store.list_tasks()] == ["First"]


def test_close_drops_observers_and_tasks(seeded_store: TaskStore) -> None:
    calls: list[object] = []
    seeded_store.subscribe(calls.append)

    seeded_store.close()
    seeded_store.create({"title": "After close", "priority": "Low"})

    assert calls == []
    assert len(seeded_store) == 1


def test_observer_mutation_leaves_later_observers_current(store: TaskStore) -> None:
    received: list[tuple[TaskEntity, ...]] = []

    def add_follow_up(snapshot: tuple[TaskEntity, ...]) -> None:
        if len(snapshot) == 1:
            store.create({"title": "Follow-up", "priority": "Low"})

    store.subscribe(add_follow_up)
    view = TaskService(store, default_filter="all")
    store.subscribe(received.append)

    store.create({"title": "First", "priority": "Normal"})

    assert [task.title for task in store.list_tasks()] == ["Follow-up", "First"]
    assert view.visible_tasks() == store.list_tasks()
    assert received[-1] == store.list_tasks()
    assert all(len(snapshot) == 2 for snapshot in received)


def test_reseed_after_emptying_does_not_reuse_ids(store: TaskStore) -> None:
    issued = [store.create({"title": f"Task {n}", "priority": "Low"}).id for n in range(8)]
    for task_id in issued:
        store.delete(task_id)
    store.seed(sample_tasks())

    task = store.create({"title": "Fresh", "priority": "Low"})

    assert task.id not in issued
    assert task.id not in {"1", "2", "3", "4", "5"}


def test_seed_rejects_non_string_id(store: TaskStore) -> None:
    task = TaskEntity(id=7, title="Seven", description=None, due_date=None, priority=Priority.LOW)

    with pytest.raises(ValidationError) as excinfo:
        store.seed([task])

    assert excinfo.value.field == "id"
    assert store.list_tasks() == ()
