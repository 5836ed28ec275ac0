"""Memory user repository."""

from elemo.domain.entities import User, UserPatch
from elemo.domain.enums import ResourceType
from elemo.domain.exceptions import ResourceNotFoundException
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.exceptions import UserCreateException, UserUpdateException
from elemo.infrastructure.persistence.memory.base import MemoryRepository
from elemo.infrastructure.persistence.memory.graph import paginate


class MemoryUserRepository(MemoryRepository):
    """User storage. Emails are unique across users."""

    resource_type = ResourceType.USER

    def _hydrate(self, user: User) -> User:
        user.documents = [
            d.id
            for d in self.graph.nodes(ResourceType.DOCUMENT)
            if d.created_by == user.id
        ]
        user.permissions = [
            p.id
            for p in self.graph.nodes(ResourceType.PERMISSION)
            if p.subject == user.id
        ]
        return user

    def _find_by_email(self, email: str) -> User | None:
        for user in self.graph.nodes(ResourceType.USER):
            if user.email == email:
                return user
        return None

    async def create(self, user: User) -> None:
        if self._find_by_email(user.email) is not None:
            raise UserCreateException("email already registered", email=user.email)
        self._assign(user, UserCreateException)
        self.graph.put(user.id, user)

    async def get(self, id: ID) -> User:
        return self._hydrate(self.graph.get(id, ResourceType.USER))

    async def get_by_email(self, email: str) -> User:
        user = self._find_by_email(email)
        if user is None:
            raise ResourceNotFoundException(ResourceType.USER.value, email)
        return self._hydrate(user)

    async def get_all(self, offset: int, limit: int) -> list[User]:
        users = paginate(self.graph.nodes(ResourceType.USER), offset, limit)
        return [self._hydrate(u) for u in users]

    async def update(self, id: ID, patch: UserPatch) -> User:
        user = self.graph.get(id, ResourceType.USER)
        if patch.email is not None and patch.email != user.email:
            if self._find_by_email(patch.email) is not None:
                raise UserUpdateException("email already registered", id=str(id))
        user = self._patched(user, patch.changes())
        self.graph.put(id, user)
        return self._hydrate(user)

    async def delete(self, id: ID) -> None:
        self.graph.get(id, ResourceType.USER)
        self.graph.remove(id)
