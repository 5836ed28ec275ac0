"""Organization domain entity and its member read model."""

from dataclasses import dataclass, field
from datetime import datetime

from elemo.domain.enums import OrganizationStatus, ResourceType, UserStatus
from elemo.domain.entities.patch import Patch
from elemo.domain.exceptions import ValidationException
from elemo.domain.value_objects.core import ID


@dataclass(kw_only=True)
class Organization:
    """An organization owning namespaces, teams, and members.

    ``namespaces`` and ``members`` are derived from graph edges.
    """

    id: ID = field(default_factory=lambda: ID.nil(ResourceType.ORGANIZATION))
    name: str
    email: str
    logo: str | None = None
    website: str | None = None
    status: OrganizationStatus = OrganizationStatus.ACTIVE
    namespaces: list[ID] = field(default_factory=list)
    teams: list[ID] = field(default_factory=list)
    members: list[ID] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationException("Organization name is required", field="name")


@dataclass(kw_only=True)
class OrganizationMember:
    """A member of an organization as listed by get_members.

    Carries the user's public profile and the names of the roles the
    user holds within the organization.
    """

    id: ID
    first_name: str | None = None
    last_name: str | None = None
    email: str
    picture: str | None = None
    status: UserStatus = UserStatus.ACTIVE
    roles: list[str] = field(default_factory=list)


@dataclass(kw_only=True)
class OrganizationPatch(Patch):
    name: str | None = None
    email: str | None = None
    logo: str | None = None
    website: str | None = None
    status: OrganizationStatus | None = None
