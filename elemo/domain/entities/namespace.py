"""Namespace domain entity.

A namespace groups projects and documents inside an organization. The
embedded project and document summaries are read from graph edges.
"""

from dataclasses import dataclass, field
from datetime import datetime

from elemo.domain.enums import ProjectStatus, ResourceType
from elemo.domain.entities.patch import Patch
from elemo.domain.exceptions import ValidationException
from elemo.domain.value_objects.core import ID


@dataclass(kw_only=True)
class NamespaceProject:
    """Summary of a project embedded in its namespace."""

    id: ID
    key: str
    name: str
    description: str | None = None
    logo: str | None = None
    status: ProjectStatus = ProjectStatus.ACTIVE


@dataclass(kw_only=True)
class NamespaceDocument:
    """Summary of a document embedded in its namespace."""

    id: ID
    name: str
    excerpt: str | None = None
    created_by: ID
    created_at: datetime | None = None


@dataclass(kw_only=True)
class Namespace:
    id: ID = field(default_factory=lambda: ID.nil(ResourceType.NAMESPACE))
    name: str
    description: str | None = None
    projects: list[NamespaceProject] = field(default_factory=list)
    documents: list[NamespaceDocument] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationException("Namespace name is required", field="name")


@dataclass(kw_only=True)
class NamespacePatch(Patch):
    name: str | None = None
    description: str | None = None
