"""Ordered task list backed by a Redis list."""

import redis.asyncio as aioredis
from redis.exceptions import RedisError
from structlog import get_logger

from tasklist.config import Settings

from .exceptions import StorageUnavailableError

logger = get_logger(__name__)

DEFAULT_TASKS_KEY = "tasks"


def create_redis_client(settings: Settings) -> aioredis.Redis:
    """Build the async Redis client from settings.

    The client connects lazily, so an unreachable server only surfaces on
    the first command.
    """
    return aioredis.from_url(
        settings.REDIS_URL,
        decode_responses=True,
        socket_timeout=settings.REDIS_SOCKET_TIMEOUT_SECONDS,
        socket_connect_timeout=settings.REDIS_SOCKET_TIMEOUT_SECONDS,
        socket_keepalive=True,
        health_check_interval=30,
    )


class TaskStore:
    """Task list operations mapped onto atomic Redis list commands.
    
    Every operation is a single command, so concurrent callers are
    serialized by Redis itself.
    
    Attributes:
        client: Shared async Redis client.
        key: Name of the Redis list holding the tasks.
    """
    
    def __init__(self, client: aioredis.Redis, key: str = DEFAULT_TASKS_KEY):
        self.client = client
        self.key = key
    
    async def list_tasks(self) -> list[str]:
        """Return every task in insertion order (empty if the list is missing)."""
        try:
            return await self.client.lrange(self.key, 0, -1)
        except RedisError as e:
            logger.error("store_error", operation="list", key=self.key, error=str(e))
            raise StorageUnavailableError(operation="list", reason=str(e))
    
    async def add_task(self, task: str) -> int:
        """Append a task to the end of the list.
        
        Returns:
            The list length after the append.
        """
        try:
            return await self.client.rpush(self.key, task)
        except RedisError as e:
            logger.error("store_error", operation="add", key=self.key, error=str(e))
            raise StorageUnavailableError(operation="add", reason=str(e))
    
    async def remove_task(self, task: str) -> int:
        """Remove every occurrence of ``task``.
        
        Returns:
            Number of entries removed (0 when the task was absent).
        """
        try:
            # count=0 removes all matches, not only the first
            return await self.client.lrem(self.key, 0, task)
        except RedisError as e:
            logger.error("store_error", operation="remove", key=self.key, error=str(e))
            raise StorageUnavailableError(operation="remove", reason=str(e))
    
    async def ping(self) -> bool:
        """Check whether the store answers."""
        try:
            return bool(await self.client.ping())
        except RedisError as e:
            logger.warning("store_ping_failed", error=str(e))
            return False
    
    async def close(self) -> None:
        await self.client.aclose()
