"""Permission domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from elemo.domain.enums import PermissionKind, ResourceType
from elemo.domain.exceptions import ValidationException
from elemo.domain.value_objects.core import ID


@dataclass(kw_only=True)
class Permission:
    """Grants ``subject`` a kind of access on ``target``.

    Subject and target may be of any resource type; a subject cannot hold
    a permission on itself.
    """

    id: ID = field(default_factory=lambda: ID.nil(ResourceType.PERMISSION))
    kind: PermissionKind
    subject: ID
    target: ID
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.subject == self.target:
            raise ValidationException(
                "Permission subject and target must differ", field="target"
            )

    def grants(self, kind: PermissionKind) -> bool:
        """Return whether this permission allows the given kind of access."""
        return self.kind in (PermissionKind.ALL, kind)
