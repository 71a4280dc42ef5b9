"""
Tests for wiring the application context.
"""

import json

from task_cache.context import AppContext
from task_cache.entities import Task
from task_cache.repositories import InMemoryTaskStore
from task_cache.services import TaskService

from .conftest import make_settings
from .fakes import FakeCacheProvider


def test_create_wires_a_working_service():
    cache = FakeCacheProvider()
    context = AppContext.create(settings=make_settings(cache_key="tasks:v1", cache_ttl=30), cache=cache)

    assert isinstance(context.service, TaskService)
    assert isinstance(context.store, InMemoryTaskStore)
    assert context.service.cache_key == "tasks:v1"
    assert context.service.ttl == 30

    assert context.service.create(Task(id=None, name="A")).task == Task(id=1, name="A")
    body = context.service.get_all().body
    assert json.loads(body) == [{"id": 1, "name": "A", "completed": False}]
    assert cache.peek("tasks:v1") == body


def test_create_uses_text_field_and_id_policy_from_settings():
    context = AppContext.create(
        settings=make_settings(id_policy="client", text_field="title"),
        cache=FakeCacheProvider(),
    )

    context.service.create(Task(id="x", name="A"))

    assert json.loads(context.service.get_all().body) == [{"id": "x", "title": "A", "completed": False}]
