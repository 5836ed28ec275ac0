"""Memory attachment repository."""

from elemo.domain.entities import Attachment
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.exceptions import (
    AttachmentCreateException,
    AttachmentUpdateException,
)
from elemo.infrastructure.persistence.memory.base import MemoryRepository
from elemo.infrastructure.persistence.memory.graph import Edge, paginate


class MemoryAttachmentRepository(MemoryRepository):
    """Attachment metadata storage; attachments belong to documents or issues."""

    resource_type = ResourceType.ATTACHMENT

    async def create(self, belongs_to: ID, attachment: Attachment) -> None:
        self._require_any(
            belongs_to,
            AttachmentCreateException,
            ResourceType.DOCUMENT,
            ResourceType.ISSUE,
        )
        self._assign(attachment, AttachmentCreateException)
        self.graph.put(attachment.id, attachment)
        self.graph.link(attachment.id, Edge.BELONGS_TO, belongs_to)

    async def get(self, id: ID) -> Attachment:
        return self.graph.get(id, ResourceType.ATTACHMENT)

    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Attachment]:
        ids = [
            i
            for i in self.graph.sources(Edge.BELONGS_TO, belongs_to)
            if i.type is ResourceType.ATTACHMENT
        ]
        return [
            self.graph.get(i, ResourceType.ATTACHMENT)
            for i in paginate(ids, offset, limit)
        ]

    async def update(self, id: ID, name: str) -> Attachment:
        if not name:
            raise AttachmentUpdateException("name must not be empty", id=str(id))
        attachment = self._patched(
            self.graph.get(id, ResourceType.ATTACHMENT), {"name": name}
        )
        self.graph.put(id, attachment)
        return attachment

    async def delete(self, id: ID) -> None:
        self.graph.get(id, ResourceType.ATTACHMENT)
        self.graph.remove(id)
