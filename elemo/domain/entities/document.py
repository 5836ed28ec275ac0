"""Document domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from elemo.domain.enums import ResourceType
from elemo.domain.entities.patch import Patch
from elemo.domain.exceptions import ValidationException
from elemo.domain.value_objects.core import ID


@dataclass(kw_only=True)
class Document:
    """A document attached to a user, namespace, or project.

    ``labels``, ``comments`` and ``attachments`` are derived from graph
    edges, so label, comment, and attachment mutations change a cached
    document without touching the document itself.
    """

    id: ID = field(default_factory=lambda: ID.nil(ResourceType.DOCUMENT))
    name: str
    excerpt: str | None = None
    file_id: str | None = None
    created_by: ID
    labels: list[ID] = field(default_factory=list)
    comments: list[ID] = field(default_factory=list)
    attachments: list[ID] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationException("Document name is required", field="name")


@dataclass(kw_only=True)
class DocumentPatch(Patch):
    name: str | None = None
    excerpt: str | None = None
    file_id: str | None = None
