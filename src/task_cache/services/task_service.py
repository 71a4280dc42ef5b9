"""Task service: cache-aside coordination.

Reads go cache first and rebuild the cached list from the store on a
miss. Writes go to the store first and then delete the cached list.

No lock spans both the store and the cache. A reader that missed can
write its snapshot to the cache after a concurrent writer invalidated
it, leaving a stale list until the next write or until the TTL expires.
"""

import logging
from dataclasses import dataclass

from task_cache.codec import TaskCodec
from task_cache.config import get_settings
from task_cache.entities import Task, TaskId, TaskPatch
from task_cache.errors import CacheOperationError
from task_cache.protocols import CacheProvider, TaskStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskListResult:
    """Outcome of get_all.

    Attributes:
        body: JSON array of tasks, ready to send
        cache_hit: True if body came verbatim from the cache
        cache_populated: True if the cache holds body after the call
    """

    body: bytes
    cache_hit: bool
    cache_populated: bool


@dataclass(frozen=True)
class TaskWriteResult:
    """Outcome of a successful write.

    Attributes:
        task: The stored task (None for delete)
        cache_invalidated: False if the cache delete failed; the write stands anyway
    """

    task: Task | None
    cache_invalidated: bool


class TaskService:
    """Cache-aside coordinator over a TaskStore and a CacheProvider.

    Example:
        ```python
        service = TaskService(
            store=InMemoryTaskStore(IdPolicy.SERVER),
            cache=RedisCacheProvider.create(settings),
            codec=TaskCodec(),
        )
        result = service.create(Task(id=None, name="A"))
        listing = service.get_all()
        ```
    """

    def __init__(
        self,
        store: TaskStore,
        cache: CacheProvider,
        codec: TaskCodec,
        cache_key: str | None = None,
        ttl: int | None = None,
    ) -> None:
        """Initialize the task service.

        Args:
            store: Authoritative task store (required).
            cache: Cache backend for the serialized task list (required).
            codec: Wire encoder for task lists (required).
            cache_key: Key of the cached list. Defaults to settings.
            ttl: Cache entry lifetime in seconds. Defaults to settings.
        """
        self._store = store
        self._cache = cache
        self._codec = codec
        self._cache_key = cache_key or get_settings().cache_key
        self._ttl = ttl or get_settings().cache_ttl

    def get_all(self) -> TaskListResult:
        """Return every task as a JSON array.

        Business logic:
        1. Look up the cached list
        2. On a hit, return the cached bytes unchanged
        3. On a miss, snapshot the store, encode, cache, return
        4. A failing cache set is logged; the fresh body is still returned

        Raises:
            CacheOperationError: If the cache lookup itself fails
        """
        cached = self._cache.get(self._cache_key)
        if cached is not None:
            logger.debug("Cache hit key=%s", self._cache_key)
            return TaskListResult(body=cached, cache_hit=True, cache_populated=True)

        logger.debug("Cache miss key=%s", self._cache_key)
        body = self._codec.encode_list(self._store.list_tasks())

        try:
            self._cache.set(self._cache_key, body, self._ttl)
        except CacheOperationError as e:
            logger.error("Failed to populate task list cache: %s", e)
            return TaskListResult(body=body, cache_hit=False, cache_populated=False)

        return TaskListResult(body=body, cache_hit=False, cache_populated=True)

    def create(self, candidate: Task) -> TaskWriteResult:
        """Store a new task and invalidate the cached list."""
        task = self._store.create(candidate)
        return TaskWriteResult(task=task, cache_invalidated=self._invalidate("create", task.id))

    def update(self, task_id: TaskId, patch: TaskPatch) -> TaskWriteResult:
        """Replace a task's fields and invalidate the cached list.

        Raises:
            TaskNotFoundError: If the task does not exist; the cache is left alone
        """
        task = self._store.update(task_id, patch)
        return TaskWriteResult(task=task, cache_invalidated=self._invalidate("update", task_id))

    def delete(self, task_id: TaskId) -> TaskWriteResult:
        """Remove a task and invalidate the cached list.

        Raises:
            TaskNotFoundError: If the task does not exist; the cache is left alone
        """
        self._store.delete(task_id)
        return TaskWriteResult(task=None, cache_invalidated=self._invalidate("delete", task_id))

    def is_cache_healthy(self) -> bool:
        return self._cache.ping()

    def task_count(self) -> int:
        return self._store.count()

    def _invalidate(self, operation: str, task_id: TaskId | None) -> bool:
        # The store mutation has committed; a failed delete never undoes it.
        try:
            self._cache.delete(self._cache_key)
        except CacheOperationError as e:
            logger.error(
                "Cache invalidation failed after %s of task %r, list may be stale for up to %ss: %s",
                operation,
                task_id,
                self._ttl,
                e,
            )
            return False
        return True

    @property
    def cache_key(self) -> str:
        return self._cache_key

    @property
    def ttl(self) -> int:
        return self._ttl
