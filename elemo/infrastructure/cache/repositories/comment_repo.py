"""Cached comment repository."""

from __future__ import annotations

from pydantic import TypeAdapter

from elemo.application.interfaces.repositories import ICommentRepository
from elemo.domain.entities import Comment
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.cache.invalidation import Key, Refresh
from elemo.infrastructure.cache.repositories.base import SPAN_PREFIX, CachedRepository
from elemo.shared.telemetry.tracing import traced

_SPAN = f"{SPAN_PREFIX}.CachedCommentRepository"

_COMMENT = TypeAdapter(Comment)
_COMMENTS = TypeAdapter(list[Comment])


class CachedCommentRepository(CachedRepository[ICommentRepository]):
    """Comment repository with read-through caching."""

    resource_type = ResourceType.COMMENT

    @traced(f"{_SPAN}/Create")
    async def create(self, belongs_to: ID, comment: Comment) -> None:
        await self.repo.create(belongs_to, comment)
        await self._invalidate(
            self._query_pattern("GetAllBelongsTo", belongs_to),
            self._family(ResourceType.DOCUMENT),
            self._family(ResourceType.ISSUE),
        )

    @traced(f"{_SPAN}/Get")
    async def get(self, id: ID) -> Comment:
        return await self._read_through(
            self._point(id), _COMMENT, lambda: self.repo.get(id)
        )

    @traced(f"{_SPAN}/GetAllBelongsTo")
    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Comment]:
        return await self._read_through(
            self._query("GetAllBelongsTo", belongs_to, offset, limit),
            _COMMENTS,
            lambda: self.repo.get_all_belongs_to(belongs_to, offset, limit),
        )

    @traced(f"{_SPAN}/Update")
    async def update(self, id: ID, content: str) -> Comment:
        comment = await self.repo.update(id, content)
        await self._invalidate(
            Refresh(self._point(id), comment),
            self._query_pattern("GetAllBelongsTo"),
        )
        return comment

    @traced(f"{_SPAN}/Delete")
    async def delete(self, id: ID) -> None:
        await self.repo.delete(id)
        await self._invalidate(
            Key(self._point(id)),
            self._query_pattern("GetAllBelongsTo"),
            self._family(ResourceType.DOCUMENT),
            self._family(ResourceType.ISSUE),
        )
