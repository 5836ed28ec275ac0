"""Project domain entity."""

import re
from dataclasses import dataclass, field
from datetime import datetime

from elemo.domain.enums import ProjectStatus, ResourceType
from elemo.domain.entities.patch import Patch
from elemo.domain.exceptions import ValidationException
from elemo.domain.value_objects.core import ID

# Project keys are short uppercase tokens used as issue prefixes (e.g. ELEMO).
_PROJECT_KEY_RE = re.compile(r"^[A-Z][A-Z0-9]{2,14}$")


@dataclass(kw_only=True)
class Project:
    """A project within a namespace.

    ``key`` is unique platform-wide and addressable through get_by_key.
    ``issues`` and ``documents`` are derived from graph edges.
    """

    id: ID = field(default_factory=lambda: ID.nil(ResourceType.PROJECT))
    key: str
    name: str
    description: str | None = None
    logo: str | None = None
    status: ProjectStatus = ProjectStatus.ACTIVE
    teams: list[ID] = field(default_factory=list)
    issues: list[ID] = field(default_factory=list)
    documents: list[ID] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not _PROJECT_KEY_RE.match(self.key):
            raise ValidationException(
                "Project key must be 3-15 uppercase alphanumeric characters",
                field="key",
            )
        if not self.name:
            raise ValidationException("Project name is required", field="name")


@dataclass(kw_only=True)
class ProjectPatch(Patch):
    key: str | None = None
    name: str | None = None
    description: str | None = None
    logo: str | None = None
    status: ProjectStatus | None = None
