"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure. Used by the application and
infrastructure layers.
"""

from elemo.domain.enums import PermissionKind, ResourceType, SystemRole
from elemo.domain.exceptions import (
    ElemoException,
    InvalidIDException,
    ResourceNotFoundException,
    ValidationException,
)
from elemo.domain.value_objects import ID

__all__ = [
    "ElemoException",
    "ID",
    "InvalidIDException",
    "PermissionKind",
    "ResourceNotFoundException",
    "ResourceType",
    "SystemRole",
    "ValidationException",
]
