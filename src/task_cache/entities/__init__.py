"""Domain entities for internal representation.

These are pure frozen dataclasses used by the store and the service.
They are NOT used for API contracts - use DTOs from the dto package
and the codec for the wire format.
"""

from .task import IdPolicy, Task, TaskId, TaskPatch

__all__ = ["IdPolicy", "Task", "TaskId", "TaskPatch"]
