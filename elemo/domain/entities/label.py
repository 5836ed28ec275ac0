"""Label domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from elemo.domain.enums import ResourceType
from elemo.domain.entities.patch import Patch
from elemo.domain.exceptions import ValidationException
from elemo.domain.value_objects.core import ID


@dataclass(kw_only=True)
class Label:
    """A label that can be attached to documents and issues."""

    id: ID = field(default_factory=lambda: ID.nil(ResourceType.LABEL))
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationException("Label name is required", field="name")


@dataclass(kw_only=True)
class LabelPatch(Patch):
    name: str | None = None
    description: str | None = None
