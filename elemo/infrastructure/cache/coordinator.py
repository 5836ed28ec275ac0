"""Cache coordinator: the four cache primitives used by cached repositories.

Translates backend outcomes into the cache error taxonomy. A miss is never
an error; every other backend failure becomes CacheReadException,
CacheWriteException or CacheDeleteException with the backend error kept
as ``__cause__``. Each primitive runs in its own span.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from elemo.infrastructure.cache.cache_protocol import CacheBackend, CacheMissError
from elemo.infrastructure.exceptions import (
    CacheDeleteException,
    CacheReadException,
    CacheWriteException,
    NoClientException,
)
from elemo.shared.telemetry.tracing import TracedOperation

logger = logging.getLogger(__name__)

T = TypeVar("T")

SPAN_PREFIX = "repository.redis.CacheCoordinator"


class CacheCoordinator:
    """Typed front end over a CacheBackend.

    Values are stored as JSON produced by pydantic, so entity dataclasses,
    lists of them, and plain scalars round-trip through ``get`` with the
    matching TypeAdapter.
    """

    def __init__(self, backend: CacheBackend | None) -> None:
        """Initialize with a cache backend.

        Raises:
            NoClientException: If backend is None.
        """
        if backend is None:
            raise NoClientException()
        self.backend = backend

    async def set(self, key: str, value: Any) -> None:
        """Store value under key.

        Raises:
            CacheWriteException: If serialization or the backend write fails.
        """
        async with TracedOperation(f"{SPAN_PREFIX}/Set", {"cache.key": key}):
            try:
                payload = to_json(value)
            except PydanticSerializationError as e:
                raise CacheWriteException(key, "value is not serializable") from e
            try:
                await self.backend.set(key, payload)
            except CacheMissError:
                return
            except Exception as e:
                raise CacheWriteException(key, str(e)) from e
            logger.debug("Cache SET: %s", key)

    async def get(self, key: str, adapter: TypeAdapter[T]) -> T | None:
        """Return the cached value decoded with adapter, or None on a miss.

        Args:
            key: Cache key.
            adapter: TypeAdapter of the expected value type.

        Returns:
            Decoded value, or None if the key is absent.

        Raises:
            CacheReadException: If the backend read fails or the payload
                cannot be decoded.
        """
        async with TracedOperation(f"{SPAN_PREFIX}/Get", {"cache.key": key}):
            try:
                raw = await self.backend.get(key)
            except CacheMissError:
                logger.debug("Cache MISS: %s", key)
                return None
            except Exception as e:
                raise CacheReadException(key, str(e)) from e
            try:
                value = adapter.validate_json(raw)
            except ValidationError as e:
                raise CacheReadException(key, "payload could not be decoded") from e
            logger.debug("Cache HIT: %s", key)
            return value

    async def delete(self, key: str) -> None:
        """Delete a single key; deleting an absent key is a no-op.

        Raises:
            CacheDeleteException: If the backend delete fails.
        """
        async with TracedOperation(f"{SPAN_PREFIX}/Delete", {"cache.key": key}):
            await self._delete(key)

    async def delete_pattern(self, pattern: str) -> None:
        """Delete every key matching pattern, one key at a time.

        A failure listing keys propagates unchanged. Deletion stops at the
        first failing key; keys deleted before it stay deleted.

        Raises:
            CacheDeleteException: If deleting a resolved key fails.
        """
        async with TracedOperation(
            f"{SPAN_PREFIX}/DeletePattern", {"cache.pattern": pattern}
        ):
            keys = await self.backend.keys(pattern)
            for key in keys:
                await self._delete(key)
            if keys:
                logger.info("Cache INVALIDATE: %s (%s keys)", pattern, len(keys))

    async def _delete(self, key: str) -> None:
        try:
            await self.backend.delete(key)
        except CacheMissError:
            return
        except Exception as e:
            raise CacheDeleteException(key, str(e)) from e
        logger.debug("Cache DELETE: %s", key)
