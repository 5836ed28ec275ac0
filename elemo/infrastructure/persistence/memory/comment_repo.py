"""Memory comment repository."""

from elemo.domain.entities import Comment
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.exceptions import CommentCreateException
from elemo.infrastructure.persistence.memory.base import MemoryRepository
from elemo.infrastructure.persistence.memory.graph import Edge, paginate


class MemoryCommentRepository(MemoryRepository):
    resource_type = ResourceType.COMMENT

    async def create(self, belongs_to: ID, comment: Comment) -> None:
        self._require_any(
            belongs_to, CommentCreateException, ResourceType.DOCUMENT, ResourceType.ISSUE
        )
        self._require(comment.created_by, ResourceType.USER, CommentCreateException)
        self._assign(comment, CommentCreateException)
        self.graph.put(comment.id, comment)
        self.graph.link(comment.id, Edge.BELONGS_TO, belongs_to)

    async def get(self, id: ID) -> Comment:
        return self.graph.get(id, ResourceType.COMMENT)

    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Comment]:
        ids = [
            i
            for i in self.graph.sources(Edge.BELONGS_TO, belongs_to)
            if i.type is ResourceType.COMMENT
        ]
        return [
            self.graph.get(i, ResourceType.COMMENT) for i in paginate(ids, offset, limit)
        ]

    async def update(self, id: ID, content: str) -> Comment:
        comment = self._patched(
            self.graph.get(id, ResourceType.COMMENT), {"content": content}
        )
        self.graph.put(id, comment)
        return comment

    async def delete(self, id: ID) -> None:
        self.graph.get(id, ResourceType.COMMENT)
        self.graph.remove(id)
