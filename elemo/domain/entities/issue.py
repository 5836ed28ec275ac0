"""Issue domain entity and issue relations."""

from dataclasses import dataclass, field
from datetime import datetime

from elemo.domain.enums import (
    IssueKind,
    IssuePriority,
    IssueRelationKind,
    IssueResolution,
    IssueStatus,
    ResourceType,
)
from elemo.domain.entities.patch import Patch
from elemo.domain.exceptions import ValidationException
from elemo.domain.value_objects.core import ID
from elemo.shared.utils.datetime import ensure_utc


@dataclass(kw_only=True)
class IssueRelation:
    """A typed, directed relation between two issues."""

    source: ID
    target: ID
    kind: IssueRelationKind

    def __post_init__(self) -> None:
        if self.source == self.target:
            raise ValidationException(
                "An issue cannot be related to itself", field="target"
            )


@dataclass(kw_only=True)
class Issue:
    """An issue tracked within a project.

    ``numeric_id`` is the per-project sequence number assigned on create.
    ``parent`` is set for sub-issues; get_all_for_issue lists an issue's
    children. Labels, comments, attachments, watchers and relations are
    derived from graph edges.
    """

    id: ID = field(default_factory=lambda: ID.nil(ResourceType.ISSUE))
    numeric_id: int = 0
    parent: ID | None = None
    kind: IssueKind = IssueKind.TASK
    title: str
    description: str | None = None
    status: IssueStatus = IssueStatus.OPEN
    priority: IssuePriority = IssuePriority.MEDIUM
    resolution: IssueResolution = IssueResolution.NONE
    reported_by: ID
    assignees: list[ID] = field(default_factory=list)
    labels: list[ID] = field(default_factory=list)
    comments: list[ID] = field(default_factory=list)
    attachments: list[ID] = field(default_factory=list)
    watchers: list[ID] = field(default_factory=list)
    relations: list[IssueRelation] = field(default_factory=list)
    links: list[str] = field(default_factory=list)
    due_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.title:
            raise ValidationException("Issue title is required", field="title")
        self.due_date = ensure_utc(self.due_date)


@dataclass(kw_only=True)
class IssuePatch(Patch):
    kind: IssueKind | None = None
    title: str | None = None
    description: str | None = None
    status: IssueStatus | None = None
    priority: IssuePriority | None = None
    resolution: IssueResolution | None = None
    assignees: list[ID] | None = None
    links: list[str] | None = None
    due_date: datetime | None = None
