"""
Tests for the in-memory task store.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from task_cache.entities import IdPolicy, Task, TaskPatch
from task_cache.errors import MalformedInputError, TaskNotFoundError
from task_cache.protocols import TaskStore
from task_cache.repositories import InMemoryTaskStore


def test_satisfies_protocol():
    assert isinstance(InMemoryTaskStore(), TaskStore)


def test_server_policy_assigns_increasing_ids(store):
    first = store.create(Task(id=None, name="A"))
    second = store.create(Task(id=None, name="B"))

    assert first == Task(id=1, name="A", completed=False)
    assert second == Task(id=2, name="B", completed=False)


def test_server_policy_ignores_caller_id(store):
    task = store.create(Task(id=99, name="A"))
    assert task.id == 1


def test_concurrent_creates_get_unique_ids(store):
    with ThreadPoolExecutor(max_workers=16) as pool:
        created = list(pool.map(lambda i: store.create(Task(id=None, name=f"t{i}")), range(500)))

    ids = [task.id for task in created]
    assert len(set(ids)) == 500
    assert sorted(ids) == list(range(1, 501))
    assert store.count() == 500


def test_ids_are_not_reused_after_delete(store):
    store.create(Task(id=None, name="A"))
    second = store.create(Task(id=None, name="B"))
    store.delete(second.id)

    third = store.create(Task(id=None, name="C"))
    assert third.id == 3


def test_update_replaces_fields_and_keeps_id(store):
    created = store.create(Task(id=None, name="A"))

    updated = store.update(created.id, TaskPatch(name="A2", completed=True))

    assert updated == Task(id=1, name="A2", completed=True)
    assert store.list_tasks() == [updated]


def test_update_unknown_id_raises(store):
    with pytest.raises(TaskNotFoundError) as exc_info:
        store.update(42, TaskPatch(name="x"))
    assert exc_info.value.task_id == 42


def test_delete_removes_and_second_delete_raises(store):
    created = store.create(Task(id=None, name="A"))

    store.delete(created.id)
    assert store.list_tasks() == []

    with pytest.raises(TaskNotFoundError):
        store.delete(created.id)


def test_list_is_a_snapshot(store):
    store.create(Task(id=None, name="A"))
    snapshot = store.list_tasks()

    store.create(Task(id=None, name="B"))
    snapshot.clear()

    assert len(store.list_tasks()) == 2


def test_client_policy_uses_supplied_id():
    store = InMemoryTaskStore(IdPolicy.CLIENT)

    task = store.create(Task(id="abc", name="A"))
    replaced = store.create(Task(id="abc", name="A again", completed=True))

    assert task.id == "abc"
    assert store.list_tasks() == [replaced]
    assert store.update("abc", TaskPatch(name="B")) == Task(id="abc", name="B", completed=False)


def test_client_policy_requires_string_id():
    store = InMemoryTaskStore(IdPolicy.CLIENT)

    with pytest.raises(MalformedInputError):
        store.create(Task(id=None, name="A"))
    with pytest.raises(MalformedInputError):
        store.create(Task(id=7, name="A"))
    assert store.count() == 0
