"""Memory document repository."""

from elemo.domain.entities import Document, DocumentPatch
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.exceptions import DocumentCreateException
from elemo.infrastructure.persistence.memory.base import MemoryRepository
from elemo.infrastructure.persistence.memory.graph import Edge, paginate

# Nodes a document can belong to
_OWNER_TYPES = (ResourceType.USER, ResourceType.NAMESPACE, ResourceType.PROJECT)


class MemoryDocumentRepository(MemoryRepository):
    """Document storage.

    A document BELONGS_TO a user, namespace or project. Labels, comments
    and attachments are read from edges on every get.
    """

    resource_type = ResourceType.DOCUMENT

    def _hydrate(self, document: Document) -> Document:
        document.labels = self.graph.targets(document.id, Edge.HAS_LABEL)
        owned = self.graph.sources(Edge.BELONGS_TO, document.id)
        document.comments = [i for i in owned if i.type is ResourceType.COMMENT]
        document.attachments = [i for i in owned if i.type is ResourceType.ATTACHMENT]
        return document

    async def create(self, belongs_to: ID, document: Document) -> None:
        self._require_any(belongs_to, DocumentCreateException, *_OWNER_TYPES)
        self._require(document.created_by, ResourceType.USER, DocumentCreateException)
        self._assign(document, DocumentCreateException)
        self.graph.put(document.id, document)
        self.graph.link(document.id, Edge.BELONGS_TO, belongs_to)

    async def get(self, id: ID) -> Document:
        return self._hydrate(self.graph.get(id, ResourceType.DOCUMENT))

    async def get_by_creator(
        self, created_by: ID, offset: int, limit: int
    ) -> list[Document]:
        documents = [
            d
            for d in self.graph.nodes(ResourceType.DOCUMENT)
            if d.created_by == created_by
        ]
        return [self._hydrate(d) for d in paginate(documents, offset, limit)]

    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Document]:
        ids = [
            i
            for i in self.graph.sources(Edge.BELONGS_TO, belongs_to)
            if i.type is ResourceType.DOCUMENT
        ]
        return [
            self._hydrate(self.graph.get(i, ResourceType.DOCUMENT))
            for i in paginate(ids, offset, limit)
        ]

    async def update(self, id: ID, patch: DocumentPatch) -> Document:
        document = self._patched(
            self.graph.get(id, ResourceType.DOCUMENT), patch.changes()
        )
        self.graph.put(id, document)
        return self._hydrate(document)

    async def delete(self, id: ID) -> None:
        self.graph.get(id, ResourceType.DOCUMENT)
        self.graph.remove(id)
