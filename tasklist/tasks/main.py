"""Task service application: task list endpoints over the shared store."""

from contextlib import asynccontextmanager
from typing import Annotated

import structlog
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from tasklist.config import get_settings
from tasklist.dependencies import get_task_store
from tasklist.logging_config import configure_logging

from .exceptions import StorageUnavailableError
from .router import router as tasks_router
from .store import TaskStore, create_redis_client

settings = get_settings()
configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One store connection for the whole process, shared by every request
    app.state.task_store = TaskStore(create_redis_client(settings), key=settings.TASKS_KEY)
    if await app.state.task_store.ping():
        logger.info("task_service_started", tasks_key=settings.TASKS_KEY)
    else:
        logger.warning("task_store_unreachable_at_startup", tasks_key=settings.TASKS_KEY)
    
    yield
    
    await app.state.task_store.close()
    logger.info("task_service_stopped")

app = FastAPI(
    title=f"{settings.APP_NAME} Service",
    lifespan=lifespan,
    debug=settings.DEBUG
)


@app.exception_handler(StorageUnavailableError)
async def storage_exception_handler(request: Request, exc: StorageUnavailableError):
    logger.warning(
        "storage_failure",
        code=exc.code,
        kind=exc.kind.value,
        error=exc.message,
        path=request.url.path,
    )
    return PlainTextResponse(exc.message, status_code=500)


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    # Unusable bodies fail like any other request, with a plain-text 500
    logger.warning("invalid_request_body", path=request.url.path, errors=len(exc.errors()))
    return PlainTextResponse(f"Invalid request body for {request.url.path}", status_code=500)


@app.get("/health")
async def health_check(store: Annotated[TaskStore, Depends(get_task_store)]):
    store_ok = await store.ping()
    return JSONResponse(
        status_code=200 if store_ok else 503,
        content={
            "status": "ok" if store_ok else "degraded",
            "app": settings.APP_NAME,
            "store": "ok" if store_ok else "unreachable",
        },
    )

app.include_router(tasks_router)
