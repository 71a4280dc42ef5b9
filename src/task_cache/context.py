"""Application context.

Everything the request path needs is built once at startup and handed
around explicitly; nothing lives in module globals.
"""

from dataclasses import dataclass

from task_cache.codec import TaskCodec
from task_cache.config import Settings, get_settings
from task_cache.entities import IdPolicy
from task_cache.handlers import TaskHandler
from task_cache.protocols import CacheProvider, TaskStore
from task_cache.repositories import InMemoryTaskStore, RedisCacheProvider
from task_cache.services import TaskService


@dataclass(frozen=True)
class AppContext:
    """Wired service graph for one running process."""

    settings: Settings
    store: TaskStore
    cache: CacheProvider
    service: TaskService
    handler: TaskHandler

    @classmethod
    def create(
        cls,
        settings: Settings | None = None,
        cache: CacheProvider | None = None,
        store: TaskStore | None = None,
    ) -> "AppContext":
        """Build the full graph.

        Args:
            settings: Settings to use. If None, uses the global settings.
            cache: Cache provider. If None, connects to Redis.
            store: Task store. If None, creates an empty in-memory store.

        Raises:
            CacheUnavailableError: If no cache is given and Redis is unreachable
        """
        settings = settings or get_settings()
        id_policy = IdPolicy(settings.id_policy)

        if cache is None:
            cache = RedisCacheProvider.create(settings)
        if store is None:
            store = InMemoryTaskStore(id_policy)

        codec = TaskCodec(text_field=settings.text_field, id_policy=id_policy)
        service = TaskService(
            store=store,
            cache=cache,
            codec=codec,
            cache_key=settings.cache_key,
            ttl=settings.cache_ttl,
        )
        handler = TaskHandler(task_service=service, codec=codec)
        return cls(settings=settings, store=store, cache=cache, service=service, handler=handler)
