"""Cached user repository."""

from __future__ import annotations

from pydantic import TypeAdapter

from elemo.application.interfaces.repositories import IUserRepository
from elemo.domain.entities import User, UserPatch
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.cache.invalidation import InvalidationStep, Key, Pattern, Refresh
from elemo.infrastructure.cache.keys import query_pattern
from elemo.infrastructure.cache.repositories.base import SPAN_PREFIX, CachedRepository
from elemo.shared.telemetry.tracing import traced

_SPAN = f"{SPAN_PREFIX}.CachedUserRepository"

_USER = TypeAdapter(User)
_USERS = TypeAdapter(list[User])


class CachedUserRepository(CachedRepository[IUserRepository]):
    """User repository with read-through caching.

    Users are also cached by email (``User:GetByEmail:<email>``). Update
    and delete cannot name the previous email, so they drop every
    GetByEmail entry. Organizations, roles and issue watcher lists embed
    user data and are dropped on every mutation. Deleting a user also
    removes its WATCHES edges, so delete drops every issue view.
    """

    resource_type = ResourceType.USER

    def _embedding_views(
        self, issue_views: Pattern | None = None
    ) -> tuple[InvalidationStep, ...]:
        return (
            self._family(ResourceType.ORGANIZATION),
            self._family(ResourceType.ROLE),
            issue_views or Pattern(query_pattern(ResourceType.ISSUE, "GetWatchers")),
        )

    @traced(f"{_SPAN}/Create")
    async def create(self, user: User) -> None:
        await self.repo.create(user)
        await self._invalidate(
            Key(self._query("GetByEmail", user.email)),
            self._query_pattern("GetAll"),
            *self._embedding_views(),
        )

    @traced(f"{_SPAN}/Get")
    async def get(self, id: ID) -> User:
        return await self._read_through(self._point(id), _USER, lambda: self.repo.get(id))

    @traced(f"{_SPAN}/GetByEmail")
    async def get_by_email(self, email: str) -> User:
        return await self._read_through(
            self._query("GetByEmail", email), _USER, lambda: self.repo.get_by_email(email)
        )

    @traced(f"{_SPAN}/GetAll")
    async def get_all(self, offset: int, limit: int) -> list[User]:
        return await self._read_through(
            self._query("GetAll", offset, limit),
            _USERS,
            lambda: self.repo.get_all(offset, limit),
        )

    @traced(f"{_SPAN}/Update")
    async def update(self, id: ID, patch: UserPatch) -> User:
        user = await self.repo.update(id, patch)
        await self._invalidate(
            Refresh(self._point(id), user),
            self._query_pattern("GetByEmail"),
            self._query_pattern("GetAll"),
            *self._embedding_views(),
        )
        return user

    @traced(f"{_SPAN}/Delete")
    async def delete(self, id: ID) -> None:
        await self.repo.delete(id)
        await self._invalidate(
            Key(self._point(id)),
            self._query_pattern("GetByEmail"),
            self._query_pattern("GetAll"),
            *self._embedding_views(self._family(ResourceType.ISSUE)),
        )
