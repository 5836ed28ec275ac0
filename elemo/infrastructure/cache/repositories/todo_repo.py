"""Cached todo repository."""

from __future__ import annotations

from pydantic import TypeAdapter

from elemo.application.interfaces.repositories import ITodoRepository
from elemo.domain.entities import Todo, TodoPatch
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.cache.invalidation import Key, Refresh
from elemo.infrastructure.cache.repositories.base import SPAN_PREFIX, CachedRepository
from elemo.shared.telemetry.tracing import traced

_SPAN = f"{SPAN_PREFIX}.CachedTodoRepository"

_TODO = TypeAdapter(Todo)
_TODOS = TypeAdapter(list[Todo])


class CachedTodoRepository(CachedRepository[ITodoRepository]):
    """Todo repository with read-through caching.

    Owner lists are keyed ``Todo:GetByOwner:<owner>:<offset>:<limit>:<completed>``
    where an unset completed filter is rendered as ``nil``.
    """

    resource_type = ResourceType.TODO

    @traced(f"{_SPAN}/Create")
    async def create(self, todo: Todo) -> None:
        await self.repo.create(todo)
        await self._invalidate(self._query_pattern("GetByOwner", todo.owned_by))

    @traced(f"{_SPAN}/Get")
    async def get(self, id: ID) -> Todo:
        return await self._read_through(
            self._point(id), _TODO, lambda: self.repo.get(id)
        )

    @traced(f"{_SPAN}/GetByOwner")
    async def get_by_owner(
        self, owner_id: ID, offset: int, limit: int, completed: bool | None = None
    ) -> list[Todo]:
        return await self._read_through(
            self._query("GetByOwner", owner_id, offset, limit, completed),
            _TODOS,
            lambda: self.repo.get_by_owner(owner_id, offset, limit, completed),
        )

    @traced(f"{_SPAN}/Update")
    async def update(self, id: ID, patch: TodoPatch) -> Todo:
        todo = await self.repo.update(id, patch)
        # A reassigned todo leaves the previous owner's lists stale too.
        owner_lists = (
            self._query_pattern("GetByOwner")
            if patch.owned_by is not None
            else self._query_pattern("GetByOwner", todo.owned_by)
        )
        await self._invalidate(Refresh(self._point(id), todo), owner_lists)
        return todo

    @traced(f"{_SPAN}/Delete")
    async def delete(self, id: ID) -> None:
        await self.repo.delete(id)
        await self._invalidate(
            Key(self._point(id)),
            self._query_pattern("GetByOwner"),
        )
