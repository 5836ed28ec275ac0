"""Cached project repository."""

from __future__ import annotations

from pydantic import TypeAdapter

from elemo.application.interfaces.repositories import IProjectRepository
from elemo.domain.entities import Project, ProjectPatch
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.cache.invalidation import Key, Refresh
from elemo.infrastructure.cache.repositories.base import SPAN_PREFIX, CachedRepository
from elemo.shared.telemetry.tracing import traced

_SPAN = f"{SPAN_PREFIX}.CachedProjectRepository"

_PROJECT = TypeAdapter(Project)
_PROJECTS = TypeAdapter(list[Project])


class CachedProjectRepository(CachedRepository[IProjectRepository]):
    """Project repository with read-through caching.

    Projects are also cached by key (``Project:GetByKey:<key>``). An update
    may change the key, and an update or delete does not know the old key
    or the parent namespace, so those drop every GetByKey and GetAll entry.
    Namespaces embed project summaries and are dropped on every mutation.
    """

    resource_type = ResourceType.PROJECT

    @traced(f"{_SPAN}/Create")
    async def create(self, namespace_id: ID, project: Project) -> None:
        await self.repo.create(namespace_id, project)
        await self._invalidate(
            Key(self._query("GetByKey", project.key)),
            self._query_pattern("GetAll", namespace_id),
            self._family(ResourceType.NAMESPACE),
        )

    @traced(f"{_SPAN}/Get")
    async def get(self, id: ID) -> Project:
        return await self._read_through(
            self._point(id), _PROJECT, lambda: self.repo.get(id)
        )

    @traced(f"{_SPAN}/GetByKey")
    async def get_by_key(self, key: str) -> Project:
        return await self._read_through(
            self._query("GetByKey", key), _PROJECT, lambda: self.repo.get_by_key(key)
        )

    @traced(f"{_SPAN}/GetAll")
    async def get_all(self, namespace_id: ID, offset: int, limit: int) -> list[Project]:
        return await self._read_through(
            self._query("GetAll", namespace_id, offset, limit),
            _PROJECTS,
            lambda: self.repo.get_all(namespace_id, offset, limit),
        )

    @traced(f"{_SPAN}/Update")
    async def update(self, id: ID, patch: ProjectPatch) -> Project:
        project = await self.repo.update(id, patch)
        await self._invalidate(
            Refresh(self._point(id), project),
            self._query_pattern("GetByKey"),
            self._query_pattern("GetAll"),
            self._family(ResourceType.NAMESPACE),
        )
        return project

    @traced(f"{_SPAN}/Delete")
    async def delete(self, id: ID) -> None:
        await self.repo.delete(id)
        await self._invalidate(
            Key(self._point(id)),
            self._query_pattern("GetByKey"),
            self._query_pattern("GetAll"),
            self._family(ResourceType.NAMESPACE),
        )
