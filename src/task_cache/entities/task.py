"""Task domain entity."""

from dataclasses import dataclass
from enum import Enum

TaskId = int | str


class IdPolicy(str, Enum):
    """Who assigns task identifiers.

    SERVER: the store hands out increasing integers starting at 1.
    CLIENT: the caller supplies a string identifier in the payload.
    """

    SERVER = "server"
    CLIENT = "client"


@dataclass(frozen=True)
class Task:
    """Domain entity for a single task record.

    Attributes:
        id: Identifier, an int under the server policy or a str under the
            client policy. None only for a candidate that has not been stored.
        name: Free text describing the task
        completed: Whether the task is done
    """

    id: TaskId | None
    name: str = ""
    completed: bool = False


@dataclass(frozen=True)
class TaskPatch:
    """Replacement values for the mutable fields of a task."""

    name: str = ""
    completed: bool = False
