"""HTTP handlers for task operations.

Handlers decode raw request input with the codec, call the service, and
turn the outcome into a response. Domain errors become HTTPExceptions
with the matching status code.
"""

from fastapi import HTTPException, Response, status

from task_cache.codec import TaskCodec
from task_cache.dto import HealthCheckResponse
from task_cache.errors import CacheOperationError, MalformedInputError, TaskNotFoundError
from task_cache.services import TaskService

JSON_MEDIA_TYPE = "application/json"
CACHE_HEADER = "X-Cache"
INVALIDATED_HEADER = "X-Cache-Invalidated"


class TaskHandler:
    """HTTP handlers for /tasks.

    The methods are synchronous; routes run them in the thread pool so
    that each request gets its own worker.

    Example:
        ```python
        handler = TaskHandler(task_service=service, codec=TaskCodec())

        @app.get("/tasks")
        async def list_tasks():
            return await run_in_threadpool(handler.list_tasks)
        ```
    """

    def __init__(self, task_service: TaskService, codec: TaskCodec) -> None:
        """Initialize the task handler.

        Args:
            task_service: The task service for business logic (required).
            codec: Wire format encoder/decoder (required).
        """
        self._tasks = task_service
        self._codec = codec

    def list_tasks(self) -> Response:
        """Handle GET /tasks requests.

        Raises:
            HTTPException: 500 if the cache lookup fails
        """
        try:
            result = self._tasks.get_all()
        except CacheOperationError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            ) from e

        return Response(
            content=result.body,
            media_type=JSON_MEDIA_TYPE,
            headers={CACHE_HEADER: "HIT" if result.cache_hit else "MISS"},
        )

    def create_task(self, raw_body: bytes) -> Response:
        """Handle POST /tasks requests.

        Raises:
            HTTPException: 400 if the body is malformed
        """
        try:
            candidate = self._codec.decode_create(raw_body)
            result = self._tasks.create(candidate)
        except MalformedInputError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

        return Response(
            content=self._codec.encode_task(result.task),
            status_code=status.HTTP_201_CREATED,
            media_type=JSON_MEDIA_TYPE,
            headers={INVALIDATED_HEADER: _flag(result.cache_invalidated)},
        )

    def update_task(self, raw_id: str, raw_body: bytes) -> Response:
        """Handle PUT /tasks/{id} requests.

        The id and body are both decoded before the store is touched.

        Raises:
            HTTPException: 400 on malformed id or body, 404 if the task is unknown
        """
        try:
            task_id = self._codec.parse_id(raw_id)
            patch = self._codec.decode_patch(raw_body)
            result = self._tasks.update(task_id, patch)
        except MalformedInputError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        except TaskNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found") from e

        return Response(
            content=self._codec.encode_task(result.task),
            media_type=JSON_MEDIA_TYPE,
            headers={INVALIDATED_HEADER: _flag(result.cache_invalidated)},
        )

    def delete_task(self, raw_id: str) -> Response:
        """Handle DELETE /tasks/{id} requests.

        Raises:
            HTTPException: 400 on malformed id, 404 if the task is unknown
        """
        try:
            task_id = self._codec.parse_id(raw_id)
            result = self._tasks.delete(task_id)
        except MalformedInputError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        except TaskNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found") from e

        return Response(
            status_code=status.HTTP_204_NO_CONTENT,
            headers={INVALIDATED_HEADER: _flag(result.cache_invalidated)},
        )

    def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        cache_healthy = self._tasks.is_cache_healthy()
        return HealthCheckResponse(
            status="healthy" if cache_healthy else "unhealthy",
            cache_healthy=cache_healthy,
            task_count=self._tasks.task_count(),
        )


def _flag(value: bool) -> str:
    return "true" if value else "false"
