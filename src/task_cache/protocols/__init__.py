"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the cache backend (Redis, an in-process fake in tests, ...)
- Unit testing the coordinator with fake implementations
- Keeping the service independent of concrete storage classes

Usage:
    ```python
    from task_cache.protocols import CacheProvider, TaskStore

    cache: CacheProvider = RedisCacheProvider.create(settings)
    store: TaskStore = InMemoryTaskStore(IdPolicy.SERVER)
    ```
"""

from .cache_provider import CacheProvider
from .task_store import TaskStore

__all__ = [
    "CacheProvider",
    "TaskStore",
]
