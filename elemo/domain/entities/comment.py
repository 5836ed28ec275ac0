"""Comment domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from elemo.domain.enums import ResourceType
from elemo.domain.exceptions import ValidationException
from elemo.domain.value_objects.core import ID


@dataclass(kw_only=True)
class Comment:
    id: ID = field(default_factory=lambda: ID.nil(ResourceType.COMMENT))
    content: str
    created_by: ID
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.content:
            raise ValidationException("Comment content is required", field="content")
