"""Domain value objects."""

from elemo.domain.value_objects.core import ID

__all__ = ["ID"]
