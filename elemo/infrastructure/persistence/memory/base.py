"""Base for memory storage repositories."""

from dataclasses import replace
from typing import Any

from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.exceptions import (
    InvalidDatabaseException,
    StorageOperationException,
)
from elemo.infrastructure.persistence.memory.graph import MemoryGraph
from elemo.shared.utils.datetime import utc_now


class MemoryRepository:
    """Shared helpers for repositories backed by a MemoryGraph."""

    resource_type: ResourceType

    def __init__(self, graph: MemoryGraph | None) -> None:
        if graph is None:
            raise InvalidDatabaseException("no memory graph provided")
        self.graph = graph

    def _require(
        self, id: ID, resource_type: ResourceType, error: type[StorageOperationException]
    ) -> None:
        """Raise error if id does not name an existing node of resource_type."""
        if id.type is not resource_type or not self.graph.has(id):
            raise error(f"{resource_type.value} {id} does not exist", id=str(id))

    def _require_any(
        self, id: ID, error: type[StorageOperationException], *types: ResourceType
    ) -> None:
        if id.type not in types or not self.graph.has(id):
            raise error(f"{id.type.value} {id} does not exist", id=str(id))

    def _assign(self, entity: Any, error: type[StorageOperationException]) -> None:
        """Give a new entity its id and creation timestamp, in place."""
        if entity.id.is_nil():
            entity.id = ID.new(self.resource_type)
        elif self.graph.has(entity.id):
            raise error(f"{entity.id} already exists", id=str(entity.id))
        entity.created_at = utc_now()
        entity.updated_at = None

    def _patched(self, entity: Any, changes: dict[str, Any]) -> Any:
        """Return a copy of entity with changes applied and updated_at stamped.

        Entity validation runs again on the patched copy.
        """
        return replace(entity, **changes, updated_at=utc_now())
