"""Redis implementation of the cache backend.

Thin adapter over redis.asyncio: values are raw bytes with an optional
TTL, misses are reported as CacheMissError, and every other driver error
propagates so the coordinator can classify it.
"""

from __future__ import annotations

import logging

import redis.asyncio as redis

from elemo.core.constants import CACHE_SCAN_COUNT, DEFAULT_CACHE_TTL
from elemo.infrastructure.cache.cache_protocol import CacheMissError
from elemo.infrastructure.exceptions import NoClientException

logger = logging.getLogger(__name__)


class RedisCacheBackend:
    """Async Redis cache backend with TTL support.

    The client (and its connection pool) is owned by the caller; this
    class never opens or closes it.
    """

    def __init__(
        self, redis_client: redis.Redis | None, ttl: int = DEFAULT_CACHE_TTL
    ) -> None:
        """Initialize the backend.

        Args:
            redis_client: Connected redis.asyncio client.
            ttl: Entry lifetime in seconds; 0 stores without expiry.

        Raises:
            NoClientException: If redis_client is None.
        """
        if redis_client is None:
            raise NoClientException()
        self.redis = redis_client
        self.ttl = ttl

    async def set(self, key: str, value: bytes) -> None:
        if self.ttl > 0:
            await self.redis.set(key, value, ex=self.ttl)
        else:
            await self.redis.set(key, value)

    async def get(self, key: str) -> bytes:
        value = await self.redis.get(key)
        if value is None:
            raise CacheMissError(key)
        if isinstance(value, str):
            return value.encode()
        return value

    async def delete(self, key: str) -> None:
        deleted = await self.redis.delete(key)
        if not deleted:
            raise CacheMissError(key)

    async def keys(self, pattern: str) -> list[str]:
        """Return keys matching pattern using SCAN (non-blocking).

        Args:
            pattern: Redis glob pattern (e.g. Document:GetAllBelongsTo:*).

        Returns:
            Matching keys as strings, in scan order.
        """
        found: list[str] = []
        async for key in self.redis.scan_iter(match=pattern, count=CACHE_SCAN_COUNT):
            found.append(key.decode() if isinstance(key, bytes) else key)
        return found
