"""Task Cache - task CRUD over an in-memory store with a Redis cache-aside layer.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (TaskStore, CacheProvider)
    - repositories: InMemoryTaskStore, RedisCacheProvider
    - services: Cache-aside coordination (TaskService)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from task_cache import AppContext

    context = AppContext.create()
    context.service.create(Task(id=None, name="A"))
    ```

For HTTP API:
    ```python
    from task_cache.api.app import create_app, run
    ```
"""

__version__ = "0.1.0"

from task_cache.codec import TaskCodec  # noqa: E402
from task_cache.config import Settings, get_redis_client, get_settings  # noqa: E402
from task_cache.context import AppContext  # noqa: E402
from task_cache.entities import IdPolicy, Task, TaskPatch  # noqa: E402
from task_cache.errors import (  # noqa: E402
    CacheOperationError,
    CacheUnavailableError,
    MalformedInputError,
    TaskCacheError,
    TaskNotFoundError,
)
from task_cache.handlers import TaskHandler  # noqa: E402
from task_cache.protocols import CacheProvider, TaskStore  # noqa: E402
from task_cache.repositories import InMemoryTaskStore, RedisCacheProvider  # noqa: E402
from task_cache.services import TaskService  # noqa: E402

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    "get_redis_client",
    # Protocols (interfaces)
    "CacheProvider",
    "TaskStore",
    # Services (business logic)
    "TaskService",
    # Handlers (HTTP)
    "TaskHandler",
    # Repositories (data access)
    "InMemoryTaskStore",
    "RedisCacheProvider",
    # Entities (domain models)
    "IdPolicy",
    "Task",
    "TaskPatch",
    # Wire format
    "TaskCodec",
    # Wiring
    "AppContext",
    # Errors
    "TaskCacheError",
    "MalformedInputError",
    "TaskNotFoundError",
    "CacheUnavailableError",
    "CacheOperationError",
]
