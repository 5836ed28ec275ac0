"""Todo domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from elemo.domain.enums import ResourceType, TodoPriority
from elemo.domain.entities.patch import Patch
from elemo.domain.exceptions import ValidationException
from elemo.domain.value_objects.core import ID
from elemo.shared.utils.datetime import ensure_utc


@dataclass(kw_only=True)
class Todo:
    """A personal todo item owned by a user.

    ``owned_by`` may differ from ``created_by`` when a todo is created on
    someone else's behalf; get_by_owner lists by owner.
    """

    id: ID = field(default_factory=lambda: ID.nil(ResourceType.TODO))
    title: str
    description: str | None = None
    priority: TodoPriority = TodoPriority.NORMAL
    completed: bool = False
    owned_by: ID
    created_by: ID
    due_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.title:
            raise ValidationException("Todo title is required", field="title")
        self.due_date = ensure_utc(self.due_date)


@dataclass(kw_only=True)
class TodoPatch(Patch):
    title: str | None = None
    description: str | None = None
    priority: TodoPriority | None = None
    completed: bool | None = None
    owned_by: ID | None = None
    due_date: datetime | None = None
