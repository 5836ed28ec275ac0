"""Cached attachment repository."""

from __future__ import annotations

from pydantic import TypeAdapter

from elemo.application.interfaces.repositories import IAttachmentRepository
from elemo.domain.entities import Attachment
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.cache.invalidation import Key, Refresh
from elemo.infrastructure.cache.repositories.base import SPAN_PREFIX, CachedRepository
from elemo.shared.telemetry.tracing import traced

_SPAN = f"{SPAN_PREFIX}.CachedAttachmentRepository"

_ATTACHMENT = TypeAdapter(Attachment)
_ATTACHMENTS = TypeAdapter(list[Attachment])


class CachedAttachmentRepository(CachedRepository[IAttachmentRepository]):
    """Attachment repository with read-through caching.

    Attachments are embedded in documents and issues, so creating or
    deleting one drops every cached document and issue view.
    """

    resource_type = ResourceType.ATTACHMENT

    @traced(f"{_SPAN}/Create")
    async def create(self, belongs_to: ID, attachment: Attachment) -> None:
        await self.repo.create(belongs_to, attachment)
        await self._invalidate(
            self._query_pattern("GetAllBelongsTo", belongs_to),
            self._family(ResourceType.ISSUE),
            self._family(ResourceType.DOCUMENT),
        )

    @traced(f"{_SPAN}/Get")
    async def get(self, id: ID) -> Attachment:
        return await self._read_through(
            self._point(id), _ATTACHMENT, lambda: self.repo.get(id)
        )

    @traced(f"{_SPAN}/GetAllBelongsTo")
    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Attachment]:
        return await self._read_through(
            self._query("GetAllBelongsTo", belongs_to, offset, limit),
            _ATTACHMENTS,
            lambda: self.repo.get_all_belongs_to(belongs_to, offset, limit),
        )

    @traced(f"{_SPAN}/Update")
    async def update(self, id: ID, name: str) -> Attachment:
        attachment = await self.repo.update(id, name)
        await self._invalidate(
            Refresh(self._point(id), attachment),
            self._query_pattern("GetAllBelongsTo"),
        )
        return attachment

    @traced(f"{_SPAN}/Delete")
    async def delete(self, id: ID) -> None:
        await self.repo.delete(id)
        await self._invalidate(
            Key(self._point(id)),
            self._query_pattern("GetAllBelongsTo"),
            self._family(ResourceType.DOCUMENT),
            self._family(ResourceType.ISSUE),
        )
