"""Memory project repository."""

from elemo.domain.entities import Project, ProjectPatch
from elemo.domain.enums import ResourceType
from elemo.domain.exceptions import ResourceNotFoundException
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.exceptions import (
    ProjectCreateException,
    ProjectUpdateException,
)
from elemo.infrastructure.persistence.memory.base import MemoryRepository
from elemo.infrastructure.persistence.memory.graph import Edge, paginate


class MemoryProjectRepository(MemoryRepository):
    """Project storage. Project keys are unique across all projects."""

    resource_type = ResourceType.PROJECT

    def _hydrate(self, project: Project) -> Project:
        project.issues = self.graph.targets(project.id, Edge.HAS_ISSUE)
        project.documents = [
            d
            for d in self.graph.sources(Edge.BELONGS_TO, project.id)
            if d.type is ResourceType.DOCUMENT
        ]
        return project

    def _find_by_key(self, key: str) -> Project | None:
        for project in self.graph.nodes(ResourceType.PROJECT):
            if project.key == key:
                return project
        return None

    async def create(self, namespace_id: ID, project: Project) -> None:
        self._require(namespace_id, ResourceType.NAMESPACE, ProjectCreateException)
        if self._find_by_key(project.key) is not None:
            raise ProjectCreateException("key already in use", key=project.key)
        self._assign(project, ProjectCreateException)
        self.graph.put(project.id, project)
        self.graph.link(namespace_id, Edge.HAS_PROJECT, project.id)

    async def get(self, id: ID) -> Project:
        return self._hydrate(self.graph.get(id, ResourceType.PROJECT))

    async def get_by_key(self, key: str) -> Project:
        project = self._find_by_key(key)
        if project is None:
            raise ResourceNotFoundException(ResourceType.PROJECT.value, key)
        return self._hydrate(project)

    async def get_all(self, namespace_id: ID, offset: int, limit: int) -> list[Project]:
        projects = [
            self._hydrate(self.graph.get(pid, ResourceType.PROJECT))
            for pid in self.graph.targets(namespace_id, Edge.HAS_PROJECT)
        ]
        return paginate(projects, offset, limit)

    async def update(self, id: ID, patch: ProjectPatch) -> Project:
        project = self.graph.get(id, ResourceType.PROJECT)
        if patch.key is not None and patch.key != project.key:
            if self._find_by_key(patch.key) is not None:
                raise ProjectUpdateException("key already in use", id=str(id))
        project = self._patched(project, patch.changes())
        self.graph.put(id, project)
        return self._hydrate(project)

    async def delete(self, id: ID) -> None:
        self.graph.get(id, ResourceType.PROJECT)
        self.graph.remove(id)
