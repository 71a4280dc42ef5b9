"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - AppContext stored in app.state during lifespan (or before it, by tests)
    - Dependency functions retrieve from request.app.state
    - No global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from task_cache.context import AppContext
from task_cache.handlers import TaskHandler

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> TaskHandler:
    """Dependency injection for TaskHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The TaskHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "task_handler", None)
    if handler is None:
        raise RuntimeError("TaskHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Uses the AppContext already placed on app.state by create_app, or
    builds one from settings. Building connects to Redis, so an
    unreachable cache aborts startup with CacheUnavailableError.

    Args:
        app: The FastAPI application instance

    Yields:
        None
    """
    context: AppContext | None = getattr(app.state, "context", None)
    owned = context is None
    if context is None:
        context = AppContext.create()
        app.state.context = context

    app.state.task_handler = context.handler

    logger.info(
        "Task service initialized id_policy=%s cache_key=%s ttl=%ss",
        context.settings.id_policy,
        context.settings.cache_key,
        context.settings.cache_ttl,
    )

    yield

    del app.state.task_handler
    if owned:
        del app.state.context
    logger.info("Task service shut down")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[TaskHandler, Depends(get_handler)]
