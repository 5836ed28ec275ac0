"""Cached organization repository."""

from __future__ import annotations

from pydantic import TypeAdapter

from elemo.application.interfaces.repositories import IOrganizationRepository
from elemo.domain.entities import (
    Organization,
    OrganizationMember,
    OrganizationPatch,
    User,
)
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.cache.invalidation import InvalidationStep, Key, Refresh
from elemo.infrastructure.cache.keys import WILDCARD
from elemo.infrastructure.cache.repositories.base import SPAN_PREFIX, CachedRepository
from elemo.shared.telemetry.tracing import traced

_SPAN = f"{SPAN_PREFIX}.CachedOrganizationRepository"

_ORGANIZATION = TypeAdapter(Organization)
_ORGANIZATIONS = TypeAdapter(list[Organization])
_MEMBERS = TypeAdapter(list[OrganizationMember])
_USERS = TypeAdapter(list[User])


class CachedOrganizationRepository(CachedRepository[IOrganizationRepository]):
    """Organization repository with read-through caching.

    Organization lists are keyed ``Organization:GetAll:<userId>:<offset>:<limit>``;
    every mutation drops all of them with ``Organization:GetAll:*:*``.
    Members and invitations are cached per organization and dropped
    whenever membership or invitations change.
    """

    resource_type = ResourceType.ORGANIZATION

    def _all_lists(self) -> InvalidationStep:
        return self._query_pattern("GetAll", WILDCARD)

    def _membership(self, org_id: ID) -> tuple[InvalidationStep, ...]:
        return (
            Key(self._point(org_id)),
            self._all_lists(),
            Key(self._query("GetMembers", org_id)),
            Key(self._query("GetInvitations", org_id)),
        )

    @traced(f"{_SPAN}/Create")
    async def create(self, owner: ID, organization: Organization) -> None:
        await self.repo.create(owner, organization)
        await self._invalidate(self._all_lists())

    @traced(f"{_SPAN}/Get")
    async def get(self, id: ID) -> Organization:
        return await self._read_through(
            self._point(id), _ORGANIZATION, lambda: self.repo.get(id)
        )

    @traced(f"{_SPAN}/GetAll")
    async def get_all(self, user_id: ID, offset: int, limit: int) -> list[Organization]:
        return await self._read_through(
            self._query("GetAll", user_id, offset, limit),
            _ORGANIZATIONS,
            lambda: self.repo.get_all(user_id, offset, limit),
        )

    @traced(f"{_SPAN}/Update")
    async def update(self, id: ID, patch: OrganizationPatch) -> Organization:
        organization = await self.repo.update(id, patch)
        # Point key is refreshed before the lists are dropped.
        await self._invalidate(
            Refresh(self._point(id), organization),
            self._all_lists(),
        )
        return organization

    @traced(f"{_SPAN}/AddMember")
    async def add_member(self, org_id: ID, member_id: ID) -> None:
        await self.repo.add_member(org_id, member_id)
        await self._invalidate(*self._membership(org_id))

    @traced(f"{_SPAN}/RemoveMember")
    async def remove_member(self, org_id: ID, member_id: ID) -> None:
        await self.repo.remove_member(org_id, member_id)
        await self._invalidate(*self._membership(org_id))

    @traced(f"{_SPAN}/GetMembers")
    async def get_members(self, org_id: ID) -> list[OrganizationMember]:
        return await self._read_through(
            self._query("GetMembers", org_id),
            _MEMBERS,
            lambda: self.repo.get_members(org_id),
        )

    @traced(f"{_SPAN}/AddInvitation")
    async def add_invitation(self, org_id: ID, user_id: ID) -> None:
        await self.repo.add_invitation(org_id, user_id)
        await self._invalidate(*self._membership(org_id))

    @traced(f"{_SPAN}/RemoveInvitation")
    async def remove_invitation(self, org_id: ID, user_id: ID) -> None:
        await self.repo.remove_invitation(org_id, user_id)
        await self._invalidate(*self._membership(org_id))

    @traced(f"{_SPAN}/GetInvitations")
    async def get_invitations(self, org_id: ID) -> list[User]:
        return await self._read_through(
            self._query("GetInvitations", org_id),
            _USERS,
            lambda: self.repo.get_invitations(org_id),
        )

    @traced(f"{_SPAN}/Delete")
    async def delete(self, id: ID) -> None:
        await self.repo.delete(id)
        await self._invalidate(*self._membership(id))
