"""Cached issue repository."""

from __future__ import annotations

from pydantic import TypeAdapter

from elemo.application.interfaces.repositories import IIssueRepository
from elemo.domain.entities import Issue, IssuePatch, IssueRelation, User
from elemo.domain.enums import IssueRelationKind, ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.cache.invalidation import InvalidationStep, Key, Refresh
from elemo.infrastructure.cache.repositories.base import SPAN_PREFIX, CachedRepository
from elemo.shared.telemetry.tracing import traced

_SPAN = f"{SPAN_PREFIX}.CachedIssueRepository"

_ISSUE = TypeAdapter(Issue)
_ISSUES = TypeAdapter(list[Issue])
_USERS = TypeAdapter(list[User])
_RELATIONS = TypeAdapter(list[IssueRelation])


class CachedIssueRepository(CachedRepository[IIssueRepository]):
    """Issue repository with read-through caching.

    Issues are listed per project (GetAllForProject) and per parent issue
    (GetAllForIssue). Both list families embed whole issues, so any change
    to an issue drops all of them. Projects embed their issue ids and are
    dropped when issues are created or deleted.
    """

    resource_type = ResourceType.ISSUE

    def _all_lists(self) -> tuple[InvalidationStep, ...]:
        return (
            self._query_pattern("GetAllForProject"),
            self._query_pattern("GetAllForIssue"),
        )

    def _relation_steps(self, source: ID, target: ID) -> tuple[InvalidationStep, ...]:
        return (
            Key(self._point(source)),
            Key(self._point(target)),
            Key(self._query("GetRelations", source)),
            Key(self._query("GetRelations", target)),
            *self._all_lists(),
        )

    def _watcher_steps(self, issue_id: ID) -> tuple[InvalidationStep, ...]:
        return (
            Key(self._point(issue_id)),
            Key(self._query("GetWatchers", issue_id)),
            *self._all_lists(),
        )

    @traced(f"{_SPAN}/Create")
    async def create(self, project_id: ID, issue: Issue) -> None:
        await self.repo.create(project_id, issue)
        steps: list[InvalidationStep] = [
            self._query_pattern("GetAllForProject", project_id)
        ]
        if issue.parent is not None:
            steps.append(self._query_pattern("GetAllForIssue", issue.parent))
        steps.append(self._family(ResourceType.PROJECT))
        await self._invalidate(*steps)

    @traced(f"{_SPAN}/Get")
    async def get(self, id: ID) -> Issue:
        return await self._read_through(self._point(id), _ISSUE, lambda: self.repo.get(id))

    @traced(f"{_SPAN}/GetAllForProject")
    async def get_all_for_project(
        self, project_id: ID, offset: int, limit: int
    ) -> list[Issue]:
        return await self._read_through(
            self._query("GetAllForProject", project_id, offset, limit),
            _ISSUES,
            lambda: self.repo.get_all_for_project(project_id, offset, limit),
        )

    @traced(f"{_SPAN}/GetAllForIssue")
    async def get_all_for_issue(
        self, issue_id: ID, offset: int, limit: int
    ) -> list[Issue]:
        return await self._read_through(
            self._query("GetAllForIssue", issue_id, offset, limit),
            _ISSUES,
            lambda: self.repo.get_all_for_issue(issue_id, offset, limit),
        )

    @traced(f"{_SPAN}/AddWatcher")
    async def add_watcher(self, issue_id: ID, user_id: ID) -> None:
        await self.repo.add_watcher(issue_id, user_id)
        await self._invalidate(*self._watcher_steps(issue_id))

    @traced(f"{_SPAN}/GetWatchers")
    async def get_watchers(self, issue_id: ID) -> list[User]:
        return await self._read_through(
            self._query("GetWatchers", issue_id),
            _USERS,
            lambda: self.repo.get_watchers(issue_id),
        )

    @traced(f"{_SPAN}/RemoveWatcher")
    async def remove_watcher(self, issue_id: ID, user_id: ID) -> None:
        await self.repo.remove_watcher(issue_id, user_id)
        await self._invalidate(*self._watcher_steps(issue_id))

    @traced(f"{_SPAN}/AddRelation")
    async def add_relation(self, relation: IssueRelation) -> None:
        await self.repo.add_relation(relation)
        await self._invalidate(*self._relation_steps(relation.source, relation.target))

    @traced(f"{_SPAN}/GetRelations")
    async def get_relations(self, issue_id: ID) -> list[IssueRelation]:
        return await self._read_through(
            self._query("GetRelations", issue_id),
            _RELATIONS,
            lambda: self.repo.get_relations(issue_id),
        )

    @traced(f"{_SPAN}/RemoveRelation")
    async def remove_relation(
        self, source: ID, target: ID, kind: IssueRelationKind
    ) -> None:
        await self.repo.remove_relation(source, target, kind)
        await self._invalidate(*self._relation_steps(source, target))

    @traced(f"{_SPAN}/Update")
    async def update(self, id: ID, patch: IssuePatch) -> Issue:
        issue = await self.repo.update(id, patch)
        await self._invalidate(Refresh(self._point(id), issue), *self._all_lists())
        return issue

    @traced(f"{_SPAN}/Delete")
    async def delete(self, id: ID) -> None:
        # Storage drops every relation touching the issue, so the other
        # ends must be known before the delete.
        relations = await self.repo.get_relations(id)
        await self.repo.delete(id)
        counterparts = dict.fromkeys(
            r.target if r.source == id else r.source for r in relations
        )
        await self._invalidate(
            Key(self._point(id)),
            Key(self._query("GetRelations", id)),
            Key(self._query("GetWatchers", id)),
            *(
                step
                for other in counterparts
                for step in (
                    Key(self._point(other)),
                    Key(self._query("GetRelations", other)),
                )
            ),
            *self._all_lists(),
            self._family(ResourceType.PROJECT),
        )
