"""Attachment domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID


@dataclass(kw_only=True)
class Attachment:
    """A file attached to a document or issue; the blob lives in object storage."""

    id: ID = field(default_factory=lambda: ID.nil(ResourceType.ATTACHMENT))
    name: str
    file_id: str
    created_by: ID
    created_at: datetime | None = None
    updated_at: datetime | None = None
