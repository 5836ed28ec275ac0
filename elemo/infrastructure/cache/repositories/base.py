"""Base for cached repository decorators: read-through and invalidation walk."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import ClassVar, Generic, TypeVar

from pydantic import TypeAdapter

from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.cache.coordinator import CacheCoordinator
from elemo.infrastructure.cache.invalidation import (
    InvalidationStep,
    Key,
    Pattern,
    Refresh,
    describe,
)
from elemo.infrastructure.cache.keys import (
    family_pattern,
    point_key,
    query_key,
    query_pattern,
)
from elemo.infrastructure.exceptions import (
    InvalidRepositoryException,
    NoClientException,
)
from elemo.shared.telemetry.tracing import add_span_attributes, get_trace_id

logger = logging.getLogger(__name__)

SPAN_PREFIX = "repository.redis"

RepoT = TypeVar("RepoT")
T = TypeVar("T")


class CachedRepository(Generic[RepoT]):
    """Decorator over a storage repository that keeps a coherent cache.

    Reads go through the cache and fill it on a miss. Writes go to storage
    first; only on success are the declared invalidation steps applied, in
    order. Errors from storage and from the cache are raised unchanged.
    Subclasses declare ``resource_type`` and implement the family contract.
    """

    resource_type: ClassVar[ResourceType]

    def __init__(self, repo: RepoT | None, cache: CacheCoordinator | None) -> None:
        """Initialize the decorator.

        Args:
            repo: Storage repository to wrap.
            cache: Cache coordinator shared across decorators.

        Raises:
            InvalidRepositoryException: If repo is None.
            NoClientException: If cache is None.
        """
        if repo is None:
            raise InvalidRepositoryException()
        if cache is None:
            raise NoClientException()
        self.repo = repo
        self.cache = cache

    def _point(self, id: ID) -> str:
        return point_key(id)

    def _query(self, op: str, *params: object) -> str:
        return query_key(self.resource_type, op, *params)

    def _query_pattern(self, op: str, *params: object) -> Pattern:
        return Pattern(query_pattern(self.resource_type, op, *params))

    @staticmethod
    def _family(resource_type: ResourceType) -> Pattern:
        return Pattern(family_pattern(resource_type))

    async def _read_through(
        self,
        key: str,
        adapter: TypeAdapter[T],
        load: Callable[[], Awaitable[T]],
    ) -> T:
        """Return the cached value for key, or load it from storage and cache it.

        Args:
            key: Cache key of the read.
            adapter: TypeAdapter decoding the cached payload.
            load: Zero-argument coroutine factory calling storage.

        Returns:
            Cached or freshly loaded value.
        """
        cached = await self.cache.get(key, adapter)
        add_span_attributes(**{"cache.hit": cached is not None})
        if cached is not None:
            return cached
        result = await load()
        await self.cache.set(key, result)
        return result

    async def _invalidate(self, *steps: InvalidationStep) -> None:
        """Apply invalidation steps in order; stop at and raise the first failure.

        Steps applied before the failure stay applied.
        """
        for step in steps:
            try:
                match step:
                    case Key(key=key):
                        await self.cache.delete(key)
                    case Pattern(pattern=pattern):
                        await self.cache.delete_pattern(pattern)
                    case Refresh(key=key, value=value):
                        await self.cache.set(key, value)
            except Exception:
                logger.warning(
                    "%s cache invalidation failed at step: %s (trace_id=%s)",
                    self.resource_type.value,
                    describe(step),
                    get_trace_id(),
                )
                raise
