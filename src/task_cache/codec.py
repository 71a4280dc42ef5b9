"""Wire format for tasks.

A task travels as ``{"id": ..., "<text_field>": ..., "completed": ...}``
where the text field is "name" or "title" depending on configuration.
The list encoding is the exact byte string stored in the cache and sent
as the GET /tasks body.
"""

import json
import re
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from task_cache.dto import TaskPayload
from task_cache.entities import IdPolicy, Task, TaskId, TaskPatch
from task_cache.errors import MalformedInputError

_INT_ID = re.compile(r"[+-]?[0-9]+")


class TaskCodec:
    """Encode tasks to JSON bytes and decode request input into entities."""

    def __init__(self, text_field: str = "name", id_policy: IdPolicy = IdPolicy.SERVER) -> None:
        self._text_field = text_field
        self._id_policy = IdPolicy(id_policy)

    def to_dict(self, task: Task) -> dict[str, Any]:
        return {"id": task.id, self._text_field: task.name, "completed": task.completed}

    def encode_task(self, task: Task) -> bytes:
        return self._dumps(self.to_dict(task))

    def encode_list(self, tasks: Iterable[Task]) -> bytes:
        return self._dumps([self.to_dict(task) for task in tasks])

    def decode_create(self, raw: bytes) -> Task:
        """Decode a POST body into a candidate task.

        Under the server policy any supplied id is dropped; the store
        assigns one. Under the client policy the id is required.

        Raises:
            MalformedInputError: If the body is not a valid task object
        """
        payload = self._validate(raw)
        if self._id_policy is IdPolicy.SERVER:
            return Task(id=None, name=payload.name, completed=payload.completed)

        if not isinstance(payload.id, str) or not payload.id:
            raise MalformedInputError("Task id must be a non-empty string")
        return Task(id=payload.id, name=payload.name, completed=payload.completed)

    def decode_patch(self, raw: bytes) -> TaskPatch:
        """Decode a PUT body. Any id in the body is ignored; the path wins.

        Raises:
            MalformedInputError: If the body is not a valid task object
        """
        payload = self._validate(raw)
        return TaskPatch(name=payload.name, completed=payload.completed)

    def parse_id(self, raw: str) -> TaskId:
        """Parse an identifier taken from the URL path.

        Raises:
            MalformedInputError: If it is not valid for the active policy
        """
        if self._id_policy is IdPolicy.SERVER:
            if not _INT_ID.fullmatch(raw):
                raise MalformedInputError(f"Invalid task ID: {raw!r}")
            return int(raw)

        if not raw:
            raise MalformedInputError("Invalid task ID: empty")
        return raw

    @staticmethod
    def _validate(raw: bytes) -> TaskPayload:
        try:
            return TaskPayload.model_validate_json(raw)
        except ValidationError as e:
            raise MalformedInputError(f"Invalid request payload: {e.error_count()} error(s)") from e

    @staticmethod
    def _dumps(obj: Any) -> bytes:
        return json.dumps(obj, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
