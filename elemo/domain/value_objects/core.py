"""Domain value objects for elemo.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass

from elemo.core.constants import (
    CACHE_KEY_GLOB_CHARS,
    CACHE_KEY_SEP,
    MAX_ID_LENGTH,
    NIL_ID_VALUE,
)
from elemo.domain.enums import ResourceType
from elemo.domain.exceptions import InvalidIDException
from elemo.shared.utils.generators import generate_cuid


@dataclass(frozen=True)
class ID:
    """Typed identifier: a unique string tagged with its resource type.

    Two IDs are equal iff both the value and the type agree. The string
    form (``str(id)``) is the bare value; the type is carried separately
    and becomes the first component of cache keys.
    """

    value: str
    type: ResourceType

    def __post_init__(self) -> None:
        if not self.value:
            raise InvalidIDException(self.value, "must be a non-empty string")
        if len(self.value) > MAX_ID_LENGTH:
            raise InvalidIDException(
                self.value, f"must not exceed {MAX_ID_LENGTH} characters"
            )
        if CACHE_KEY_SEP in self.value:
            raise InvalidIDException(
                self.value, f"must not contain '{CACHE_KEY_SEP}'"
            )
        if CACHE_KEY_GLOB_CHARS.intersection(self.value):
            raise InvalidIDException(
                self.value, "must not contain glob characters (* ? [ ] \\)"
            )

    def __str__(self) -> str:
        return self.value

    @classmethod
    def new(cls, resource_type: ResourceType) -> "ID":
        """Return a fresh CUID2-backed ID of the given type."""
        return cls(generate_cuid(), resource_type)

    @classmethod
    def nil(cls, resource_type: ResourceType) -> "ID":
        """Return the nil sentinel ID of the given type."""
        return cls(NIL_ID_VALUE, resource_type)

    @classmethod
    def from_string(cls, value: str, resource_type: ResourceType) -> "ID":
        """Parse an ID from its string form.

        Args:
            value: The bare identifier string.
            resource_type: Resource type the ID belongs to.

        Returns:
            Validated ID.

        Raises:
            InvalidIDException: If the value is empty, too long, or contains
                the key separator or a glob character.
        """
        return cls(value, resource_type)

    def is_nil(self) -> bool:
        return self.value == NIL_ID_VALUE
