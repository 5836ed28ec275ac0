"""Cached label repository."""

from __future__ import annotations

from pydantic import TypeAdapter

from elemo.application.interfaces.repositories import ILabelRepository
from elemo.domain.entities import Label, LabelPatch
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.cache.invalidation import Key, Refresh
from elemo.infrastructure.cache.repositories.base import SPAN_PREFIX, CachedRepository
from elemo.shared.telemetry.tracing import traced

_SPAN = f"{SPAN_PREFIX}.CachedLabelRepository"

_LABEL = TypeAdapter(Label)
_LABELS = TypeAdapter(list[Label])


class CachedLabelRepository(CachedRepository[ILabelRepository]):
    """Label repository with read-through caching.

    Attaching, detaching or deleting a label changes the label lists
    embedded in documents and issues.
    """

    resource_type = ResourceType.LABEL

    @traced(f"{_SPAN}/Create")
    async def create(self, label: Label) -> None:
        await self.repo.create(label)
        await self._invalidate(self._query_pattern("GetAll"))

    @traced(f"{_SPAN}/Get")
    async def get(self, id: ID) -> Label:
        return await self._read_through(
            self._point(id), _LABEL, lambda: self.repo.get(id)
        )

    @traced(f"{_SPAN}/GetAll")
    async def get_all(self, offset: int, limit: int) -> list[Label]:
        return await self._read_through(
            self._query("GetAll", offset, limit),
            _LABELS,
            lambda: self.repo.get_all(offset, limit),
        )

    @traced(f"{_SPAN}/Update")
    async def update(self, id: ID, patch: LabelPatch) -> Label:
        label = await self.repo.update(id, patch)
        await self._invalidate(
            Refresh(self._point(id), label),
            self._query_pattern("GetAll"),
        )
        return label

    @traced(f"{_SPAN}/AttachTo")
    async def attach_to(self, label_id: ID, attach_to: ID) -> None:
        await self.repo.attach_to(label_id, attach_to)
        await self._invalidate(
            Key(self._point(label_id)),
            self._query_pattern("GetAll"),
            self._family(ResourceType.DOCUMENT),
            self._family(ResourceType.ISSUE),
        )

    @traced(f"{_SPAN}/DetachFrom")
    async def detach_from(self, label_id: ID, detach_from: ID) -> None:
        await self.repo.detach_from(label_id, detach_from)
        await self._invalidate(
            Key(self._point(label_id)),
            self._query_pattern("GetAll"),
            self._family(ResourceType.DOCUMENT),
            self._family(ResourceType.ISSUE),
        )

    @traced(f"{_SPAN}/Delete")
    async def delete(self, id: ID) -> None:
        await self.repo.delete(id)
        await self._invalidate(
            Key(self._point(id)),
            self._query_pattern("GetAll"),
            self._family(ResourceType.DOCUMENT),
            self._family(ResourceType.ISSUE),
        )
