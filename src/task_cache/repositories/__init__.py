"""Repository layer for data access.

This layer hides storage details behind protocol-based interfaces:
- InMemoryTaskStore: the authoritative, lock-guarded task collection
- RedisCacheProvider: the Redis-backed cache for the serialized task list

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from task_cache.protocols import CacheProvider, TaskStore

from .memory_task_store import InMemoryTaskStore
from .redis_cache_provider import RedisCacheProvider

__all__ = [
    "CacheProvider",
    "TaskStore",
    "InMemoryTaskStore",
    "RedisCacheProvider",
]
