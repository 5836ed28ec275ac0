"""Role domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from elemo.domain.enums import ResourceType
from elemo.domain.entities.patch import Patch
from elemo.domain.exceptions import ValidationException
from elemo.domain.value_objects.core import ID


@dataclass(kw_only=True)
class Role:
    """A named set of members within an organization.

    Roles are always addressed together with the organization they
    belong to. ``members`` and ``permissions`` are derived from graph edges.
    """

    id: ID = field(default_factory=lambda: ID.nil(ResourceType.ROLE))
    name: str
    description: str | None = None
    members: list[ID] = field(default_factory=list)
    permissions: list[ID] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationException("Role name is required", field="name")


@dataclass(kw_only=True)
class RolePatch(Patch):
    name: str | None = None
    description: str | None = None
