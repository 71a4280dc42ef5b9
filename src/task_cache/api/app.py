import logging
import socket

import uvicorn
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from task_cache import __version__
from task_cache.api.dependencies import HandlerDep, lifespan
from task_cache.config import get_settings
from task_cache.context import AppContext
from task_cache.dto import HealthCheckResponse, ServiceInfoResponse
from task_cache.errors import CacheUnavailableError
from task_cache.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def create_app(context: AppContext | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        context: Pre-built service graph. If None, the lifespan builds one
            from settings on startup.

    Returns:
        The configured application
    """
    app = FastAPI(
        title="Task Cache API",
        description="Task CRUD service with a Redis cache-aside layer",
        version=__version__,
        lifespan=lifespan,
    )
    if context is not None:
        app.state.context = context

    @app.get("/", response_model=ServiceInfoResponse)
    async def root(request: Request) -> ServiceInfoResponse:
        """Root endpoint with API information."""
        settings = request.app.state.context.settings
        return ServiceInfoResponse(
            name="Task Cache API",
            version=__version__,
            id_policy=settings.id_policy,
            text_field=settings.text_field,
            endpoints={
                "tasks": "/tasks",
                "task": "/tasks/{id}",
                "health": "/health",
                "docs": "/docs",
            },
        )

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep):
        """Health check endpoint."""
        result = await run_in_threadpool(handler.health_check)
        if not result.cache_healthy:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content=result.model_dump(),
            )
        return result

    @app.get("/tasks")
    async def list_tasks(handler: HandlerDep) -> Response:
        """List all tasks, served from the cache when possible."""
        return await run_in_threadpool(handler.list_tasks)

    @app.post("/tasks", status_code=status.HTTP_201_CREATED)
    async def create_task(request: Request, handler: HandlerDep) -> Response:
        """Create a task."""
        body = await request.body()
        return await run_in_threadpool(handler.create_task, body)

    @app.put("/tasks/{task_id}")
    async def update_task(task_id: str, request: Request, handler: HandlerDep) -> Response:
        """Replace a task's name and completion flag."""
        body = await request.body()
        return await run_in_threadpool(handler.update_task, task_id, body)

    @app.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_task(task_id: str, handler: HandlerDep) -> Response:
        """Delete a task."""
        return await run_in_threadpool(handler.delete_task, task_id)

    return app


def run() -> None:
    """Start the server.

    Connects to Redis first and exits if it is unreachable. The listening
    socket is bound here so that API_PORT=0 can pick a free port and the
    real port is logged.
    """
    settings = get_settings()
    setup_logging(settings.log_level.upper())

    try:
        context = AppContext.create(settings)
    except CacheUnavailableError as e:
        logger.critical("Refusing to start: %s", e)
        raise SystemExit(1) from e

    app = create_app(context)

    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    sock.bind((settings.api_host, settings.api_port))
    host, port = sock.getsockname()[:2]
    logger.info("Server listening on %s:%d", host, port)

    config = uvicorn.Config(app, log_config=None)
    uvicorn.Server(config).run(sockets=[sock])


if __name__ == "__main__":
    run()
