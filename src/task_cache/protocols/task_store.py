"""Task store protocol.

The store is the single source of truth for task records. Every operation
is atomic with respect to the others.
"""

from typing import Protocol, runtime_checkable

from task_cache.entities import Task, TaskId, TaskPatch


@runtime_checkable
class TaskStore(Protocol):
    """Protocol for the authoritative task collection."""

    def list_tasks(self) -> list[Task]:
        """Return a snapshot of all tasks, in no particular order."""
        ...

    def create(self, candidate: Task) -> Task:
        """Insert a task, assigning its identifier per the store's policy.

        Returns:
            The stored task, including its identifier
        """
        ...

    def update(self, task_id: TaskId, patch: TaskPatch) -> Task:
        """Replace the mutable fields of an existing task.

        Raises:
            TaskNotFoundError: If no task has this identifier
        """
        ...

    def delete(self, task_id: TaskId) -> None:
        """Remove a task.

        Raises:
            TaskNotFoundError: If no task has this identifier
        """
        ...

    def count(self) -> int:
        """Number of stored tasks."""
        ...
