"""Memory permission repository."""

from elemo.domain.entities import Permission
from elemo.domain.enums import PermissionKind, ResourceType, SystemRole
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.exceptions import PermissionCreateException
from elemo.infrastructure.persistence.memory.base import MemoryRepository
from elemo.infrastructure.persistence.memory.graph import Edge


class MemoryPermissionRepository(MemoryRepository):
    """Permission storage and checks.

    A subject holds a permission directly or through a role it is a member
    of. PermissionKind.ALL satisfies any requested kind.
    """

    resource_type = ResourceType.PERMISSION

    def _all(self) -> list[Permission]:
        return self.graph.nodes(ResourceType.PERMISSION)

    def _subjects_of(self, subject: ID) -> set[ID]:
        """Return subject plus every role that has it as a member."""
        return {subject, *self.graph.sources(Edge.HAS_MEMBER, subject)}

    async def create(self, permission: Permission) -> None:
        for id in (permission.subject, permission.target):
            if not self.graph.has(id):
                raise PermissionCreateException(f"{id} does not exist", id=str(id))
        for existing in self._all():
            if (
                existing.subject == permission.subject
                and existing.target == permission.target
                and existing.kind is permission.kind
            ):
                raise PermissionCreateException("permission already granted")
        self._assign(permission, PermissionCreateException)
        self.graph.put(permission.id, permission)

    async def get(self, id: ID) -> Permission:
        return self.graph.get(id, ResourceType.PERMISSION)

    async def get_by_subject(self, subject: ID) -> list[Permission]:
        return [p for p in self._all() if p.subject == subject]

    async def get_by_target(self, target: ID) -> list[Permission]:
        return [p for p in self._all() if p.target == target]

    async def get_by_subject_and_target(
        self, subject: ID, target: ID
    ) -> list[Permission]:
        return [p for p in self._all() if p.subject == subject and p.target == target]

    async def update(self, id: ID, kind: PermissionKind) -> Permission:
        permission = self._patched(
            self.graph.get(id, ResourceType.PERMISSION), {"kind": kind}
        )
        self.graph.put(id, permission)
        return permission

    async def delete(self, id: ID) -> None:
        self.graph.get(id, ResourceType.PERMISSION)
        self.graph.remove(id)

    async def has_permission(
        self, subject: ID, target: ID, *kinds: PermissionKind
    ) -> bool:
        subjects = self._subjects_of(subject)
        for p in self._all():
            if p.subject in subjects and p.target == target:
                if not kinds or any(p.grants(k) for k in kinds):
                    return True
        return False

    async def has_any_relation(self, source: ID, target: ID) -> bool:
        if self.graph.connected(source, target):
            return True
        return any(
            {p.subject, p.target} == {source, target} for p in self._all()
        )

    async def has_system_role(self, source: ID, *roles: SystemRole) -> bool:
        held = self.graph.system_roles(source)
        return bool(held.intersection(roles))
