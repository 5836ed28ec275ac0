"""Memory role repository."""

from elemo.domain.entities import Role, RolePatch
from elemo.domain.enums import ResourceType
from elemo.domain.exceptions import ResourceNotFoundException
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.exceptions import (
    RoleAddMemberException,
    RoleCreateException,
)
from elemo.infrastructure.persistence.memory.base import MemoryRepository
from elemo.infrastructure.persistence.memory.graph import Edge, paginate


class MemoryRoleRepository(MemoryRepository):
    """Role storage. A role is ROLE_OF one organization; members are HAS_MEMBER edges."""

    resource_type = ResourceType.ROLE

    def _get(self, id: ID, belongs_to: ID) -> Role:
        role = self.graph.get(id, ResourceType.ROLE)
        if not self.graph.linked(id, Edge.ROLE_OF, belongs_to):
            raise ResourceNotFoundException(ResourceType.ROLE.value, str(id))
        return role

    def _hydrate(self, role: Role) -> Role:
        role.members = self.graph.targets(role.id, Edge.HAS_MEMBER)
        role.permissions = [
            p.id
            for p in self.graph.nodes(ResourceType.PERMISSION)
            if p.subject == role.id
        ]
        return role

    async def create(self, created_by: ID, belongs_to: ID, role: Role) -> None:
        self._require(created_by, ResourceType.USER, RoleCreateException)
        self._require(belongs_to, ResourceType.ORGANIZATION, RoleCreateException)
        self._assign(role, RoleCreateException)
        self.graph.put(role.id, role)
        self.graph.link(role.id, Edge.ROLE_OF, belongs_to)
        self.graph.link(role.id, Edge.HAS_MEMBER, created_by)

    async def get(self, id: ID, belongs_to: ID) -> Role:
        return self._hydrate(self._get(id, belongs_to))

    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Role]:
        roles = [
            self._hydrate(self.graph.get(rid, ResourceType.ROLE))
            for rid in self.graph.sources(Edge.ROLE_OF, belongs_to)
        ]
        return paginate(roles, offset, limit)

    async def update(self, id: ID, belongs_to: ID, patch: RolePatch) -> Role:
        role = self._patched(self._get(id, belongs_to), patch.changes())
        self.graph.put(id, role)
        return self._hydrate(role)

    async def add_member(self, role_id: ID, member_id: ID, belongs_to: ID) -> None:
        self._get(role_id, belongs_to)
        self._require(member_id, ResourceType.USER, RoleAddMemberException)
        if not self.graph.linked(member_id, Edge.MEMBER_OF, belongs_to):
            raise RoleAddMemberException(
                "user is not a member of the organization", id=str(role_id)
            )
        self.graph.link(role_id, Edge.HAS_MEMBER, member_id)

    async def remove_member(self, role_id: ID, member_id: ID, belongs_to: ID) -> None:
        self._get(role_id, belongs_to)
        self.graph.unlink(role_id, Edge.HAS_MEMBER, member_id)

    async def delete(self, id: ID, belongs_to: ID) -> None:
        self._get(id, belongs_to)
        self.graph.remove(id)
