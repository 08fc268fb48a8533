# tests/fakes.py

from __future__ import annotations

import asyncio

from redis.exceptions import ConnectionError as RedisConnectionError


class FakeRedis:
    """
    In-memory stand-in for the Redis list commands used by TaskStore.

    - Keeps one Python list per key
    - Yields to the event loop on every command, like a network round trip
    """

    def __init__(self) -> None:
        self.lists: dict[str, list[str]] = {}
        self.closed = False

    async def lrange(self, key: str, start: int, end: int) -> list[str]:
        await asyncio.sleep(0)
        items = self.lists.get(key, [])
        stop = None if end == -1 else end + 1
        return list(items[start:stop])

    async def rpush(self, key: str, *values: str) -> int:
        await asyncio.sleep(0)
        items = self.lists.setdefault(key, [])
        items.extend(values)
        return len(items)

    async def lrem(self, key: str, count: int, value: str) -> int:
        await asyncio.sleep(0)
        assert count == 0, "only remove-all is modelled"
        items = self.lists.get(key, [])
        kept = [item for item in items if item != value]
        removed = len(items) - len(kept)
        if kept:
            self.lists[key] = kept
        else:
            self.lists.pop(key, None)
        return removed

    async def ping(self) -> bool:
        return True

    async def aclose(self) -> None:
        self.closed = True


class UnreachableRedis:
    """
    Redis client whose every command fails as if the server were down.
    """

    def __init__(self, reason: str = "Error 111 connecting to localhost:6379. Connection refused.") -> None:
        self.reason = reason

    async def _fail(self, *args, **kwargs):
        raise RedisConnectionError(self.reason)

    lrange = _fail
    rpush = _fail
    lrem = _fail
    ping = _fail

    async def aclose(self) -> None:
        return None
