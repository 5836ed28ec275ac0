"""Memory label repository."""

from elemo.domain.entities import Label, LabelPatch
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.exceptions import (
    LabelAttachException,
    LabelCreateException,
)
from elemo.infrastructure.persistence.memory.base import MemoryRepository
from elemo.infrastructure.persistence.memory.graph import Edge, paginate


class MemoryLabelRepository(MemoryRepository):
    """Label storage. Labels attach to documents and issues via HAS_LABEL edges."""

    resource_type = ResourceType.LABEL

    async def create(self, label: Label) -> None:
        self._assign(label, LabelCreateException)
        self.graph.put(label.id, label)

    async def get(self, id: ID) -> Label:
        return self.graph.get(id, ResourceType.LABEL)

    async def get_all(self, offset: int, limit: int) -> list[Label]:
        return paginate(self.graph.nodes(ResourceType.LABEL), offset, limit)

    async def update(self, id: ID, patch: LabelPatch) -> Label:
        label = self._patched(self.graph.get(id, ResourceType.LABEL), patch.changes())
        self.graph.put(id, label)
        return label

    async def attach_to(self, label_id: ID, attach_to: ID) -> None:
        self.graph.get(label_id, ResourceType.LABEL)
        self._require_any(
            attach_to, LabelAttachException, ResourceType.DOCUMENT, ResourceType.ISSUE
        )
        self.graph.link(attach_to, Edge.HAS_LABEL, label_id)

    async def detach_from(self, label_id: ID, detach_from: ID) -> None:
        self.graph.get(label_id, ResourceType.LABEL)
        self.graph.unlink(detach_from, Edge.HAS_LABEL, label_id)

    async def delete(self, id: ID) -> None:
        self.graph.get(id, ResourceType.LABEL)
        self.graph.remove(id)
