"""User domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from elemo.domain.enums import ResourceType, UserStatus
from elemo.domain.entities.patch import Patch
from elemo.domain.exceptions import ValidationException
from elemo.domain.value_objects.core import ID


@dataclass(kw_only=True)
class User:
    """A platform user.

    ``documents`` and ``permissions`` are derived from graph edges: they
    change when a document is created by the user or a permission is
    granted to them, not through a user update.
    """

    id: ID = field(default_factory=lambda: ID.nil(ResourceType.USER))
    username: str
    email: str
    password: str = ""
    status: UserStatus = UserStatus.ACTIVE
    first_name: str | None = None
    last_name: str | None = None
    picture: str | None = None
    title: str | None = None
    bio: str | None = None
    phone: str | None = None
    address: str | None = None
    links: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    documents: list[ID] = field(default_factory=list)
    permissions: list[ID] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate user invariants. Raises ValidationException if invalid."""
        if not self.username:
            raise ValidationException("Username is required", field="username")
        if not self.email or "@" not in self.email:
            raise ValidationException("A valid email is required", field="email")


@dataclass(kw_only=True)
class UserPatch(Patch):
    username: str | None = None
    email: str | None = None
    password: str | None = None
    status: UserStatus | None = None
    first_name: str | None = None
    last_name: str | None = None
    picture: str | None = None
    title: str | None = None
    bio: str | None = None
    phone: str | None = None
    address: str | None = None
    links: list[str] | None = None
    languages: list[str] | None = None
