"""Base for partial-update records.

Every ``<Entity>Patch`` is a dataclass whose fields are all optional; a
field left as None means "leave untouched".
"""

from dataclasses import dataclass, fields
from typing import Any


@dataclass(kw_only=True)
class Patch:
    """Base class for entity patches."""

    def changes(self) -> dict[str, Any]:
        """Return the fields that were set (not None), by attribute name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def is_empty(self) -> bool:
        return not self.changes()
