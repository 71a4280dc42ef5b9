"""In-memory implementation of TaskStore.

A dict keyed by task identifier, guarded by one mutex. The lock covers
only the dict and the id counter; callers never hold it while talking to
the cache.
"""

import logging
import threading
from dataclasses import replace

from task_cache.entities import IdPolicy, Task, TaskId, TaskPatch
from task_cache.errors import MalformedInputError, TaskNotFoundError

logger = logging.getLogger(__name__)


class InMemoryTaskStore:
    """Map-backed task store.

    This class satisfies the TaskStore protocol through structural
    typing - no explicit inheritance needed.

    Thread-safety:
    - every public method holds the lock for its full duration
    - list_tasks copies under the lock, so readers never see a torn write
    """

    def __init__(self, id_policy: IdPolicy = IdPolicy.SERVER) -> None:
        """Initialize an empty store.

        Args:
            id_policy: Whether identifiers are assigned here or by the caller.
        """
        self._id_policy = IdPolicy(id_policy)
        self._tasks: dict[TaskId, Task] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        logger.info("InMemoryTaskStore ready id_policy=%s", self._id_policy.value)

    def list_tasks(self) -> list[Task]:
        with self._lock:
            return list(self._tasks.values())

    def create(self, candidate: Task) -> Task:
        with self._lock:
            if self._id_policy is IdPolicy.SERVER:
                task = replace(candidate, id=self._next_id)
                self._next_id += 1
            else:
                if not isinstance(candidate.id, str) or not candidate.id:
                    raise MalformedInputError("Client-supplied task id must be a non-empty string")
                task = candidate
            self._tasks[task.id] = task
            return task

    def update(self, task_id: TaskId, patch: TaskPatch) -> Task:
        with self._lock:
            current = self._tasks.get(task_id)
            if current is None:
                raise TaskNotFoundError(task_id)
            task = replace(current, name=patch.name, completed=patch.completed)
            self._tasks[task_id] = task
            return task

    def delete(self, task_id: TaskId) -> None:
        with self._lock:
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)
            del self._tasks[task_id]

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)
