"""Cached role repository."""

from __future__ import annotations

from pydantic import TypeAdapter

from elemo.application.interfaces.repositories import IRoleRepository
from elemo.domain.entities import Role, RolePatch
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.cache.invalidation import InvalidationStep, Key, Refresh
from elemo.infrastructure.cache.keys import compose_cache_key, query_key
from elemo.infrastructure.cache.repositories.base import SPAN_PREFIX, CachedRepository
from elemo.shared.telemetry.tracing import traced

_SPAN = f"{SPAN_PREFIX}.CachedRoleRepository"

_ROLE = TypeAdapter(Role)
_ROLES = TypeAdapter(list[Role])


class CachedRoleRepository(CachedRepository[IRoleRepository]):
    """Role repository with read-through caching.

    Roles are scoped to an organization, so the point key carries both:
    ``Role:<id>:<orgId>``. Organization member listings carry role names
    and are dropped whenever a role or its membership changes.
    """

    resource_type = ResourceType.ROLE

    def _role_key(self, id: ID, belongs_to: ID) -> str:
        return compose_cache_key(self.resource_type, id, belongs_to)

    def _steps(
        self, belongs_to: ID, *head: InvalidationStep
    ) -> tuple[InvalidationStep, ...]:
        return (
            *head,
            self._query_pattern("GetAllBelongsTo", belongs_to),
            Key(query_key(ResourceType.ORGANIZATION, "GetMembers", belongs_to)),
        )

    @traced(f"{_SPAN}/Create")
    async def create(self, created_by: ID, belongs_to: ID, role: Role) -> None:
        await self.repo.create(created_by, belongs_to, role)
        await self._invalidate(*self._steps(belongs_to))

    @traced(f"{_SPAN}/Get")
    async def get(self, id: ID, belongs_to: ID) -> Role:
        return await self._read_through(
            self._role_key(id, belongs_to), _ROLE, lambda: self.repo.get(id, belongs_to)
        )

    @traced(f"{_SPAN}/GetAllBelongsTo")
    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Role]:
        return await self._read_through(
            self._query("GetAllBelongsTo", belongs_to, offset, limit),
            _ROLES,
            lambda: self.repo.get_all_belongs_to(belongs_to, offset, limit),
        )

    @traced(f"{_SPAN}/Update")
    async def update(self, id: ID, belongs_to: ID, patch: RolePatch) -> Role:
        role = await self.repo.update(id, belongs_to, patch)
        await self._invalidate(
            *self._steps(belongs_to, Refresh(self._role_key(id, belongs_to), role))
        )
        return role

    @traced(f"{_SPAN}/AddMember")
    async def add_member(self, role_id: ID, member_id: ID, belongs_to: ID) -> None:
        await self.repo.add_member(role_id, member_id, belongs_to)
        await self._invalidate(
            *self._steps(belongs_to, Key(self._role_key(role_id, belongs_to)))
        )

    @traced(f"{_SPAN}/RemoveMember")
    async def remove_member(self, role_id: ID, member_id: ID, belongs_to: ID) -> None:
        await self.repo.remove_member(role_id, member_id, belongs_to)
        await self._invalidate(
            *self._steps(belongs_to, Key(self._role_key(role_id, belongs_to)))
        )

    @traced(f"{_SPAN}/Delete")
    async def delete(self, id: ID, belongs_to: ID) -> None:
        await self.repo.delete(id, belongs_to)
        await self._invalidate(
            *self._steps(belongs_to, Key(self._role_key(id, belongs_to)))
        )
