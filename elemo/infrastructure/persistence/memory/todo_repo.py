"""Memory todo repository."""

from elemo.domain.entities import Todo, TodoPatch
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.exceptions import TodoCreateException, TodoUpdateException
from elemo.infrastructure.persistence.memory.base import MemoryRepository
from elemo.infrastructure.persistence.memory.graph import paginate


class MemoryTodoRepository(MemoryRepository):
    resource_type = ResourceType.TODO

    async def create(self, todo: Todo) -> None:
        self._require(todo.owned_by, ResourceType.USER, TodoCreateException)
        self._require(todo.created_by, ResourceType.USER, TodoCreateException)
        self._assign(todo, TodoCreateException)
        self.graph.put(todo.id, todo)

    async def get(self, id: ID) -> Todo:
        return self.graph.get(id, ResourceType.TODO)

    async def get_by_owner(
        self, owner_id: ID, offset: int, limit: int, completed: bool | None = None
    ) -> list[Todo]:
        todos = [
            t
            for t in self.graph.nodes(ResourceType.TODO)
            if t.owned_by == owner_id and (completed is None or t.completed == completed)
        ]
        return paginate(todos, offset, limit)

    async def update(self, id: ID, patch: TodoPatch) -> Todo:
        todo = self.graph.get(id, ResourceType.TODO)
        if patch.owned_by is not None:
            self._require(patch.owned_by, ResourceType.USER, TodoUpdateException)
        todo = self._patched(todo, patch.changes())
        self.graph.put(id, todo)
        return todo

    async def delete(self, id: ID) -> None:
        self.graph.get(id, ResourceType.TODO)
        self.graph.remove(id)
