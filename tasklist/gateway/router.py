"""FastAPI router for the public task list routes."""

import uuid
from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, Header, Request, Response
from fastapi.responses import JSONResponse

from tasklist.config import Settings, get_settings
from tasklist.dependencies import get_http_client

from .proxy import forward_to_backend


router = APIRouter(tags=["gateway"])

# Public route -> task service endpoint
LIST_TASKS_PATH = "/get-task"
ADD_TASK_PATH = "/add-task"
DELETE_TASK_PATH = "/delete-task"


async def relay(
    request: Request,
    client: httpx.AsyncClient,
    settings: Settings,
    backend_path: str,
    request_id: str | None,
) -> Response:
    """Forward the inbound request and return the backend body as JSON."""
    request_id = request_id or str(uuid.uuid4())
    request.state.request_id = request_id
    
    body = await request.body()
    backend_url = f"{settings.TODO_SERVICE_URL.rstrip('/')}{backend_path}"
    
    result = await forward_to_backend(
        client=client,
        method=request.method,
        backend_url=backend_url,
        body=body,
        content_type=request.headers.get("content-type"),
        timeout=settings.BACKEND_TIMEOUT_SECONDS,
        request_id=request_id,
    )
    
    return JSONResponse(
        content=result.body,
        status_code=result.status_code,
        headers={"X-Request-ID": request_id},
    )


@router.get("/get")
async def list_tasks(
    request: Request,
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
    settings: Annotated[Settings, Depends(get_settings)],
    x_request_id: Annotated[str | None, Header()] = None,
) -> Response:
    """Return the task list from the task service."""
    return await relay(request, client, settings, LIST_TASKS_PATH, x_request_id)


@router.post("/add")
async def add_task(
    request: Request,
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
    settings: Annotated[Settings, Depends(get_settings)],
    x_request_id: Annotated[str | None, Header()] = None,
) -> Response:
    """Forward a ``{"task": ...}`` body to the task service's add endpoint."""
    return await relay(request, client, settings, ADD_TASK_PATH, x_request_id)


@router.delete("/delete")
async def delete_task(
    request: Request,
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
    settings: Annotated[Settings, Depends(get_settings)],
    x_request_id: Annotated[str | None, Header()] = None,
) -> Response:
    """Forward a ``{"task": ...}`` body to the task service's delete endpoint."""
    return await relay(request, client, settings, DELETE_TASK_PATH, x_request_id)
