"""Memory organization repository."""

from elemo.domain.entities import (
    Organization,
    OrganizationMember,
    OrganizationPatch,
    User,
)
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.exceptions import (
    OrganizationAddInvitationException,
    OrganizationAddMemberException,
    OrganizationCreateException,
)
from elemo.infrastructure.persistence.memory.base import MemoryRepository
from elemo.infrastructure.persistence.memory.graph import Edge, paginate


class MemoryOrganizationRepository(MemoryRepository):
    """Organization storage.

    Membership and invitations are MEMBER_OF / INVITED_TO edges from the
    user. Accepting membership clears a pending invitation.
    """

    resource_type = ResourceType.ORGANIZATION

    def _hydrate(self, org: Organization) -> Organization:
        org.namespaces = self.graph.targets(org.id, Edge.HAS_NAMESPACE)
        org.members = self.graph.sources(Edge.MEMBER_OF, org.id)
        return org

    async def create(self, owner: ID, organization: Organization) -> None:
        self._require(owner, ResourceType.USER, OrganizationCreateException)
        self._assign(organization, OrganizationCreateException)
        self.graph.put(organization.id, organization)
        self.graph.link(owner, Edge.MEMBER_OF, organization.id)

    async def get(self, id: ID) -> Organization:
        return self._hydrate(self.graph.get(id, ResourceType.ORGANIZATION))

    async def get_all(self, user_id: ID, offset: int, limit: int) -> list[Organization]:
        orgs = [
            self._hydrate(self.graph.get(org_id, ResourceType.ORGANIZATION))
            for org_id in self.graph.targets(user_id, Edge.MEMBER_OF)
        ]
        return paginate(orgs, offset, limit)

    async def update(self, id: ID, patch: OrganizationPatch) -> Organization:
        org = self._patched(self.graph.get(id, ResourceType.ORGANIZATION), patch.changes())
        self.graph.put(id, org)
        return self._hydrate(org)

    async def add_member(self, org_id: ID, member_id: ID) -> None:
        self.graph.get(org_id, ResourceType.ORGANIZATION)
        self._require(member_id, ResourceType.USER, OrganizationAddMemberException)
        self.graph.unlink(member_id, Edge.INVITED_TO, org_id)
        self.graph.link(member_id, Edge.MEMBER_OF, org_id)

    async def remove_member(self, org_id: ID, member_id: ID) -> None:
        self.graph.get(org_id, ResourceType.ORGANIZATION)
        self.graph.unlink(member_id, Edge.MEMBER_OF, org_id)
        for role_id in self.graph.sources(Edge.ROLE_OF, org_id):
            self.graph.unlink(role_id, Edge.HAS_MEMBER, member_id)

    async def get_members(self, org_id: ID) -> list[OrganizationMember]:
        self.graph.get(org_id, ResourceType.ORGANIZATION)
        roles = [
            self.graph.get(role_id, ResourceType.ROLE)
            for role_id in self.graph.sources(Edge.ROLE_OF, org_id)
        ]
        members = []
        for user_id in self.graph.sources(Edge.MEMBER_OF, org_id):
            user: User = self.graph.get(user_id, ResourceType.USER)
            members.append(
                OrganizationMember(
                    id=user.id,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    email=user.email,
                    picture=user.picture,
                    status=user.status,
                    roles=[
                        r.name
                        for r in roles
                        if self.graph.linked(r.id, Edge.HAS_MEMBER, user.id)
                    ],
                )
            )
        return members

    async def add_invitation(self, org_id: ID, user_id: ID) -> None:
        self.graph.get(org_id, ResourceType.ORGANIZATION)
        self._require(user_id, ResourceType.USER, OrganizationAddInvitationException)
        if self.graph.linked(user_id, Edge.MEMBER_OF, org_id):
            raise OrganizationAddInvitationException(
                "user is already a member", id=str(org_id)
            )
        self.graph.link(user_id, Edge.INVITED_TO, org_id)

    async def remove_invitation(self, org_id: ID, user_id: ID) -> None:
        self.graph.get(org_id, ResourceType.ORGANIZATION)
        self.graph.unlink(user_id, Edge.INVITED_TO, org_id)

    async def get_invitations(self, org_id: ID) -> list[User]:
        self.graph.get(org_id, ResourceType.ORGANIZATION)
        return [
            self.graph.get(user_id, ResourceType.USER)
            for user_id in self.graph.sources(Edge.INVITED_TO, org_id)
        ]

    async def delete(self, id: ID) -> None:
        self.graph.get(id, ResourceType.ORGANIZATION)
        self.graph.remove(id)
