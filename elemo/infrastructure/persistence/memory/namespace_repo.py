"""Memory namespace repository."""

from elemo.domain.entities import (
    Document,
    Namespace,
    NamespaceDocument,
    NamespacePatch,
    NamespaceProject,
    Project,
)
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.exceptions import NamespaceCreateException
from elemo.infrastructure.persistence.memory.base import MemoryRepository
from elemo.infrastructure.persistence.memory.graph import Edge, paginate


class MemoryNamespaceRepository(MemoryRepository):
    resource_type = ResourceType.NAMESPACE

    def _hydrate(self, namespace: Namespace) -> Namespace:
        projects: list[Project] = [
            self.graph.get(pid, ResourceType.PROJECT)
            for pid in self.graph.targets(namespace.id, Edge.HAS_PROJECT)
        ]
        namespace.projects = [
            NamespaceProject(
                id=p.id,
                key=p.key,
                name=p.name,
                description=p.description,
                logo=p.logo,
                status=p.status,
            )
            for p in projects
        ]
        documents: list[Document] = [
            self.graph.get(did, ResourceType.DOCUMENT)
            for did in self.graph.sources(Edge.BELONGS_TO, namespace.id)
            if did.type is ResourceType.DOCUMENT
        ]
        namespace.documents = [
            NamespaceDocument(
                id=d.id,
                name=d.name,
                excerpt=d.excerpt,
                created_by=d.created_by,
                created_at=d.created_at,
            )
            for d in documents
        ]
        return namespace

    async def create(self, org_id: ID, namespace: Namespace) -> None:
        self._require(org_id, ResourceType.ORGANIZATION, NamespaceCreateException)
        self._assign(namespace, NamespaceCreateException)
        self.graph.put(namespace.id, namespace)
        self.graph.link(org_id, Edge.HAS_NAMESPACE, namespace.id)

    async def get(self, id: ID) -> Namespace:
        return self._hydrate(self.graph.get(id, ResourceType.NAMESPACE))

    async def get_all(self, org_id: ID, offset: int, limit: int) -> list[Namespace]:
        namespaces = [
            self._hydrate(self.graph.get(nid, ResourceType.NAMESPACE))
            for nid in self.graph.targets(org_id, Edge.HAS_NAMESPACE)
        ]
        return paginate(namespaces, offset, limit)

    async def update(self, id: ID, patch: NamespacePatch) -> Namespace:
        namespace = self._patched(
            self.graph.get(id, ResourceType.NAMESPACE), patch.changes()
        )
        self.graph.put(id, namespace)
        return self._hydrate(namespace)

    async def delete(self, id: ID) -> None:
        self.graph.get(id, ResourceType.NAMESPACE)
        self.graph.remove(id)
