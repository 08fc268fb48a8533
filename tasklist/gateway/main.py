"""Gateway application: public entry point relaying to the task service."""

from contextlib import asynccontextmanager

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from tasklist.config import get_settings
from tasklist.logging_config import configure_logging

from .exceptions import GatewayError
from .router import router as gateway_router

settings = get_settings()
configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Shared HTTP client for connection pooling to the task service
    app.state.http_client = httpx.AsyncClient(timeout=settings.BACKEND_TIMEOUT_SECONDS)
    logger.info("gateway_started", todo_service_url=settings.TODO_SERVICE_URL)
    
    yield
    
    await app.state.http_client.aclose()
    logger.info("gateway_stopped")

app = FastAPI(
    title=f"{settings.APP_NAME} Gateway",
    lifespan=lifespan,
    debug=settings.DEBUG
)


@app.exception_handler(GatewayError)
async def gateway_exception_handler(request: Request, exc: GatewayError):
    logger.warning(
        "upstream_failure",
        code=exc.code,
        kind=exc.kind.value,
        error=exc.message,
        path=request.url.path,
    )
    headers = {}
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        headers["X-Request-ID"] = request_id
    return PlainTextResponse(exc.message, status_code=500, headers=headers)


@app.get("/health")
async def health_check():
    return {"status": "ok", "app": settings.APP_NAME}

app.include_router(gateway_router)
