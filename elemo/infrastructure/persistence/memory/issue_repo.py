"""Memory issue repository."""

from elemo.domain.entities import Issue, IssuePatch, IssueRelation, User
from elemo.domain.enums import IssueRelationKind, ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.exceptions import (
    IssueAddRelationException,
    IssueAddWatcherException,
    IssueCreateException,
)
from elemo.infrastructure.persistence.memory.base import MemoryRepository
from elemo.infrastructure.persistence.memory.graph import Edge, MemoryGraph, paginate


class MemoryIssueRepository(MemoryRepository):
    """Issue storage.

    Issues are HAS_ISSUE targets of a project and get a per-project
    numeric_id on create. Relations are kept as (source, target, kind)
    triples beside the graph edges.
    """

    resource_type = ResourceType.ISSUE

    def __init__(self, graph: MemoryGraph | None) -> None:
        super().__init__(graph)
        self._relations: dict[tuple[ID, ID, IssueRelationKind], None] = {}

    def _relations_of(self, issue_id: ID) -> list[IssueRelation]:
        return [
            IssueRelation(source=s, target=t, kind=k)
            for s, t, k in self._relations
            if issue_id in (s, t)
        ]

    def _hydrate(self, issue: Issue) -> Issue:
        issue.labels = self.graph.targets(issue.id, Edge.HAS_LABEL)
        owned = self.graph.sources(Edge.BELONGS_TO, issue.id)
        issue.comments = [i for i in owned if i.type is ResourceType.COMMENT]
        issue.attachments = [i for i in owned if i.type is ResourceType.ATTACHMENT]
        issue.watchers = self.graph.sources(Edge.WATCHES, issue.id)
        issue.relations = self._relations_of(issue.id)
        return issue

    async def create(self, project_id: ID, issue: Issue) -> None:
        self._require(project_id, ResourceType.PROJECT, IssueCreateException)
        self._require(issue.reported_by, ResourceType.USER, IssueCreateException)
        if issue.parent is not None:
            self._require(issue.parent, ResourceType.ISSUE, IssueCreateException)
        self._assign(issue, IssueCreateException)
        numbers = [
            self.graph.get(i, ResourceType.ISSUE).numeric_id
            for i in self.graph.targets(project_id, Edge.HAS_ISSUE)
        ]
        issue.numeric_id = max(numbers, default=0) + 1
        self.graph.put(issue.id, issue)
        self.graph.link(project_id, Edge.HAS_ISSUE, issue.id)

    async def get(self, id: ID) -> Issue:
        return self._hydrate(self.graph.get(id, ResourceType.ISSUE))

    async def get_all_for_project(
        self, project_id: ID, offset: int, limit: int
    ) -> list[Issue]:
        ids = self.graph.targets(project_id, Edge.HAS_ISSUE)
        return [
            self._hydrate(self.graph.get(i, ResourceType.ISSUE))
            for i in paginate(ids, offset, limit)
        ]

    async def get_all_for_issue(
        self, issue_id: ID, offset: int, limit: int
    ) -> list[Issue]:
        children = [
            i for i in self.graph.nodes(ResourceType.ISSUE) if i.parent == issue_id
        ]
        return [self._hydrate(i) for i in paginate(children, offset, limit)]

    async def add_watcher(self, issue_id: ID, user_id: ID) -> None:
        self.graph.get(issue_id, ResourceType.ISSUE)
        self._require(user_id, ResourceType.USER, IssueAddWatcherException)
        self.graph.link(user_id, Edge.WATCHES, issue_id)

    async def get_watchers(self, issue_id: ID) -> list[User]:
        self.graph.get(issue_id, ResourceType.ISSUE)
        return [
            self.graph.get(u, ResourceType.USER)
            for u in self.graph.sources(Edge.WATCHES, issue_id)
        ]

    async def remove_watcher(self, issue_id: ID, user_id: ID) -> None:
        self.graph.get(issue_id, ResourceType.ISSUE)
        self.graph.unlink(user_id, Edge.WATCHES, issue_id)

    async def add_relation(self, relation: IssueRelation) -> None:
        for id in (relation.source, relation.target):
            self._require(id, ResourceType.ISSUE, IssueAddRelationException)
        triple = (relation.source, relation.target, relation.kind)
        if triple in self._relations:
            raise IssueAddRelationException("relation already exists")
        self._relations[triple] = None

    async def get_relations(self, issue_id: ID) -> list[IssueRelation]:
        self.graph.get(issue_id, ResourceType.ISSUE)
        return self._relations_of(issue_id)

    async def remove_relation(
        self, source: ID, target: ID, kind: IssueRelationKind
    ) -> None:
        self.graph.get(source, ResourceType.ISSUE)
        self._relations.pop((source, target, kind), None)

    async def update(self, id: ID, patch: IssuePatch) -> Issue:
        issue = self._patched(self.graph.get(id, ResourceType.ISSUE), patch.changes())
        self.graph.put(id, issue)
        return self._hydrate(issue)

    async def delete(self, id: ID) -> None:
        self.graph.get(id, ResourceType.ISSUE)
        self.graph.remove(id)
        for triple in [t for t in self._relations if id in (t[0], t[1])]:
            del self._relations[triple]
