import pytest
from fastapi.testclient import TestClient

from task_cache.api.app import create_app
from task_cache.codec import TaskCodec
from task_cache.config import Settings
from task_cache.context import AppContext
from task_cache.entities import IdPolicy
from task_cache.repositories import InMemoryTaskStore
from task_cache.services import TaskService

from .fakes import FakeCacheProvider, FakeClock

CACHE_KEY = "tasks"
TTL = 600


def make_settings(**overrides) -> Settings:
    values = {
        "redis_url": "redis://localhost:6379",
        "redis_password": None,
        "redis_db": 0,
        "redis_socket_timeout": 1.0,
        "cache_key": CACHE_KEY,
        "cache_ttl": TTL,
        "id_policy": "server",
        "text_field": "name",
        "api_host": "127.0.0.1",
        "api_port": 0,
        "log_level": "INFO",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def cache(clock: FakeClock) -> FakeCacheProvider:
    return FakeCacheProvider(clock=clock)


@pytest.fixture()
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore(IdPolicy.SERVER)


@pytest.fixture()
def codec() -> TaskCodec:
    return TaskCodec(text_field="name", id_policy=IdPolicy.SERVER)


@pytest.fixture()
def service(store: InMemoryTaskStore, cache: FakeCacheProvider, codec: TaskCodec) -> TaskService:
    return TaskService(store=store, cache=cache, codec=codec, cache_key=CACHE_KEY, ttl=TTL)


@pytest.fixture()
def settings() -> Settings:
    return make_settings()


@pytest.fixture()
def context(settings: Settings, cache: FakeCacheProvider) -> AppContext:
    """AppContext wired with the fake cache instead of Redis."""
    return AppContext.create(settings=settings, cache=cache)


@pytest.fixture()
def client(context: AppContext):
    with TestClient(create_app(context)) as test_client:
        yield test_client
