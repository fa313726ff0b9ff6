"""Key-value storage abstractions and the Redis-backed implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod

import redis.asyncio as redis

from cocoacrest.config import settings

_redis_client: redis.Redis | None = None


def get_redis_client() -> redis.Redis:
    """Return a singleton Redis client for the current process."""

    global _redis_client
    if _redis_client is None:
        _redis_client = redis.from_url(
            settings.REDIS_URL,
            encoding="utf-8",
            decode_responses=True,
        )
    return _redis_client


class KeyValueStorage(ABC):
    """Minimal persistent string storage, the server-side local storage."""

    @abstractmethod
    async def get(self, key: str) -> str | bytes | None:
        """Return the stored value or None when the key is absent."""

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store the value under the key, replacing any previous one."""


class RedisKeyValueStorage(KeyValueStorage):
    """Storage backed by plain Redis string keys."""

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    async def get(self, key: str) -> str | bytes | None:
        return await self._client.get(key)

    async def set(self, key: str, value: str) -> None:
        await self._client.set(key, value)

    async def ping(self) -> bool:
        return bool(await self._client.ping())
