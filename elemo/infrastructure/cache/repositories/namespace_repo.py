"""Cached namespace repository."""

from __future__ import annotations

from pydantic import TypeAdapter

from elemo.application.interfaces.repositories import INamespaceRepository
from elemo.domain.entities import Namespace, NamespacePatch
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.cache.invalidation import Key, Refresh
from elemo.infrastructure.cache.repositories.base import SPAN_PREFIX, CachedRepository
from elemo.shared.telemetry.tracing import traced

_SPAN = f"{SPAN_PREFIX}.CachedNamespaceRepository"

_NAMESPACE = TypeAdapter(Namespace)
_NAMESPACES = TypeAdapter(list[Namespace])


class CachedNamespaceRepository(CachedRepository[INamespaceRepository]):
    """Namespace repository with read-through caching.

    Update and delete know only the namespace id, not its organization,
    so they drop the GetAll lists of every organization. Organizations
    embed their namespace ids, so create and delete drop them too.
    """

    resource_type = ResourceType.NAMESPACE

    @traced(f"{_SPAN}/Create")
    async def create(self, org_id: ID, namespace: Namespace) -> None:
        await self.repo.create(org_id, namespace)
        await self._invalidate(
            self._query_pattern("GetAll", org_id),
            self._family(ResourceType.ORGANIZATION),
        )

    @traced(f"{_SPAN}/Get")
    async def get(self, id: ID) -> Namespace:
        return await self._read_through(
            self._point(id), _NAMESPACE, lambda: self.repo.get(id)
        )

    @traced(f"{_SPAN}/GetAll")
    async def get_all(self, org_id: ID, offset: int, limit: int) -> list[Namespace]:
        return await self._read_through(
            self._query("GetAll", org_id, offset, limit),
            _NAMESPACES,
            lambda: self.repo.get_all(org_id, offset, limit),
        )

    @traced(f"{_SPAN}/Update")
    async def update(self, id: ID, patch: NamespacePatch) -> Namespace:
        namespace = await self.repo.update(id, patch)
        await self._invalidate(
            Refresh(self._point(id), namespace),
            self._query_pattern("GetAll"),
        )
        return namespace

    @traced(f"{_SPAN}/Delete")
    async def delete(self, id: ID) -> None:
        await self.repo.delete(id)
        await self._invalidate(
            Key(self._point(id)),
            self._query_pattern("GetAll"),
            self._family(ResourceType.ORGANIZATION),
        )
