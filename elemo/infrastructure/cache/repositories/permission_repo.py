"""Permission repository decorator without caching.

Permission checks must never observe a stale grant, so every operation
goes straight to storage and the cache is never touched.
"""

from __future__ import annotations

from elemo.application.interfaces.repositories import IPermissionRepository
from elemo.domain.entities import Permission
from elemo.domain.enums import PermissionKind, ResourceType, SystemRole
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.cache.repositories.base import SPAN_PREFIX, CachedRepository
from elemo.shared.telemetry.tracing import traced

_SPAN = f"{SPAN_PREFIX}.CachedPermissionRepository"


class CachedPermissionRepository(CachedRepository[IPermissionRepository]):
    """Pass-through permission repository sharing the cached decorators' wiring."""

    resource_type = ResourceType.PERMISSION

    @traced(f"{_SPAN}/Create")
    async def create(self, permission: Permission) -> None:
        await self.repo.create(permission)

    @traced(f"{_SPAN}/Get")
    async def get(self, id: ID) -> Permission:
        return await self.repo.get(id)

    @traced(f"{_SPAN}/GetBySubject")
    async def get_by_subject(self, subject: ID) -> list[Permission]:
        return await self.repo.get_by_subject(subject)

    @traced(f"{_SPAN}/GetByTarget")
    async def get_by_target(self, target: ID) -> list[Permission]:
        return await self.repo.get_by_target(target)

    @traced(f"{_SPAN}/GetBySubjectAndTarget")
    async def get_by_subject_and_target(
        self, subject: ID, target: ID
    ) -> list[Permission]:
        return await self.repo.get_by_subject_and_target(subject, target)

    @traced(f"{_SPAN}/Update")
    async def update(self, id: ID, kind: PermissionKind) -> Permission:
        return await self.repo.update(id, kind)

    @traced(f"{_SPAN}/Delete")
    async def delete(self, id: ID) -> None:
        await self.repo.delete(id)

    @traced(f"{_SPAN}/HasPermission")
    async def has_permission(
        self, subject: ID, target: ID, *kinds: PermissionKind
    ) -> bool:
        return await self.repo.has_permission(subject, target, *kinds)

    @traced(f"{_SPAN}/HasAnyRelation")
    async def has_any_relation(self, source: ID, target: ID) -> bool:
        return await self.repo.has_any_relation(source, target)

    @traced(f"{_SPAN}/HasSystemRole")
    async def has_system_role(self, source: ID, *roles: SystemRole) -> bool:
        return await self.repo.has_system_role(source, *roles)
