"""Console entry points running each service under uvicorn."""

import uvicorn

from tasklist.config import get_settings


def run_gateway() -> None:
    settings = get_settings()
    uvicorn.run(
        "tasklist.gateway.main:app",
        host=settings.GATEWAY_HOST,
        port=settings.GATEWAY_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


def run_task_service() -> None:
    settings = get_settings()
    uvicorn.run(
        "tasklist.tasks.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
