"""Global dependencies for the application."""

import httpx
from fastapi import Request

from tasklist.tasks.store import TaskStore


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """Dependency to get the gateway's shared HTTP client.

    The client is created in the gateway lifespan and shared across requests
    to enable connection pooling (keep-alive).

    Args:
        request: The FastAPI request object.

    Returns:
        The shared httpx.AsyncClient instance.
    """
    return request.app.state.http_client


async def get_task_store(request: Request) -> TaskStore:
    """Dependency to get the task service's shared store handle."""
    return request.app.state.task_store
