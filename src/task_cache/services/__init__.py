"""Service layer for business logic.

This layer holds the cache-aside coordination between the task store
and the cache provider. It depends on protocols, not concrete classes.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .task_service import TaskListResult, TaskService, TaskWriteResult

__all__ = [
    "TaskListResult",
    "TaskService",
    "TaskWriteResult",
]
