"""Task service module - task list endpoints backed by Redis."""

from .exceptions import StorageUnavailableError
from .schemas import TaskRequest
from .store import TaskStore, create_redis_client


__all__ = [
    "StorageUnavailableError",
    "TaskRequest",
    "TaskStore",
    "create_redis_client",
]
