"""Error taxonomy for the task service.

The handler layer maps these onto HTTP status codes:

    MalformedInputError   -> 400
    TaskNotFoundError     -> 404
    CacheOperationError   -> 500 on reads, reported on writes
    CacheUnavailableError -> startup aborts
"""


class TaskCacheError(Exception):
    """Base class for all task service errors."""


class MalformedInputError(TaskCacheError):
    """Request body or path identifier could not be decoded."""


class TaskNotFoundError(TaskCacheError):
    """No task is stored under the given identifier."""

    def __init__(self, task_id: int | str) -> None:
        super().__init__(f"Task not found: {task_id!r}")
        self.task_id = task_id


class CacheUnavailableError(TaskCacheError):
    """The cache backend could not be reached at startup."""


class CacheOperationError(TaskCacheError):
    """A single get/set/delete against the cache backend failed."""

    def __init__(self, operation: str, key: str, cause: Exception) -> None:
        super().__init__(f"Cache {operation} failed for key {key!r}: {cause}")
        self.operation = operation
        self.key = key
