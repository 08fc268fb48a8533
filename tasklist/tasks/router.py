"""FastAPI router for the internal task endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from tasklist.dependencies import get_task_store

from .schemas import TaskRequest
from .service import list_tasks, add_task, delete_task
from .store import TaskStore

router = APIRouter(tags=["tasks"])


@router.get("/get-task", response_model=list[str])
async def get_tasks_endpoint(
    store: Annotated[TaskStore, Depends(get_task_store)],
) -> list[str]:
    """Return the task list in insertion order."""
    return await list_tasks(store)


@router.post("/add-task", response_class=PlainTextResponse)
async def add_task_endpoint(
    request: TaskRequest,
    store: Annotated[TaskStore, Depends(get_task_store)],
) -> PlainTextResponse:
    """Append ``request.task`` to the list."""
    return PlainTextResponse(await add_task(store, request.task))


@router.delete("/delete-task", response_class=PlainTextResponse)
async def delete_task_endpoint(
    request: TaskRequest,
    store: Annotated[TaskStore, Depends(get_task_store)],
) -> PlainTextResponse:
    """Remove every occurrence of ``request.task`` from the list."""
    return PlainTextResponse(await delete_task(store, request.task))
