"""In-memory graph shared by the memory storage repositories.

Entities are nodes keyed by ID; relationships are typed, directed edges.
Nodes are stored and returned as deep copies so callers never share
state with the store. Data is lost when the process exits.
"""

import copy
from enum import Enum
from typing import Any, TypeVar

from elemo.domain.enums import ResourceType, SystemRole
from elemo.domain.exceptions import ResourceNotFoundException
from elemo.domain.value_objects.core import ID


class Edge(str, Enum):
    """Relationship types between nodes (source -> target)."""

    BELONGS_TO = "BELONGS_TO"  # document/attachment/comment -> owner
    HAS_LABEL = "HAS_LABEL"  # document/issue -> label
    MEMBER_OF = "MEMBER_OF"  # user -> organization
    INVITED_TO = "INVITED_TO"  # user -> organization
    HAS_NAMESPACE = "HAS_NAMESPACE"  # organization -> namespace
    HAS_PROJECT = "HAS_PROJECT"  # namespace -> project
    HAS_ISSUE = "HAS_ISSUE"  # project -> issue
    WATCHES = "WATCHES"  # user -> issue
    ROLE_OF = "ROLE_OF"  # role -> organization
    HAS_MEMBER = "HAS_MEMBER"  # role -> user


class MemoryGraph:
    """Nodes and typed edges with insertion-ordered iteration.

    Operations are synchronous and never await, so a single event loop
    sees each repository call as atomic.
    """

    def __init__(self) -> None:
        self._nodes: dict[ID, Any] = {}
        self._edges: dict[tuple[ID, Edge, ID], None] = {}
        self._system_roles: dict[ID, set[SystemRole]] = {}

    # Nodes

    def has(self, id: ID) -> bool:
        return id in self._nodes

    def put(self, id: ID, node: Any) -> None:
        self._nodes[id] = copy.deepcopy(node)

    def get(self, id: ID, resource_type: ResourceType) -> Any:
        """Return a copy of the node, or raise ResourceNotFoundException."""
        if id.type is not resource_type or id not in self._nodes:
            raise ResourceNotFoundException(resource_type.value, str(id))
        return copy.deepcopy(self._nodes[id])

    def nodes(self, resource_type: ResourceType) -> list[Any]:
        """Return copies of every node of a type, in insertion order."""
        return [
            copy.deepcopy(node)
            for id, node in self._nodes.items()
            if id.type is resource_type
        ]

    def remove(self, id: ID) -> None:
        """Remove a node and every edge touching it."""
        self._nodes.pop(id, None)
        self._system_roles.pop(id, None)
        for edge in [e for e in self._edges if id in (e[0], e[2])]:
            del self._edges[edge]

    # Edges

    def link(self, source: ID, edge: Edge, target: ID) -> None:
        self._edges[(source, edge, target)] = None

    def unlink(self, source: ID, edge: Edge, target: ID) -> None:
        self._edges.pop((source, edge, target), None)

    def linked(self, source: ID, edge: Edge, target: ID) -> bool:
        return (source, edge, target) in self._edges

    def targets(self, source: ID, edge: Edge) -> list[ID]:
        return [t for s, e, t in self._edges if s == source and e is edge]

    def sources(self, edge: Edge, target: ID) -> list[ID]:
        return [s for s, e, t in self._edges if t == target and e is edge]

    def connected(self, a: ID, b: ID) -> bool:
        """Return whether any edge joins a and b, in either direction."""
        return any({s, t} == {a, b} for s, _, t in self._edges)

    # System roles

    def grant_system_role(self, id: ID, role: SystemRole) -> None:
        self._system_roles.setdefault(id, set()).add(role)

    def system_roles(self, id: ID) -> set[SystemRole]:
        return set(self._system_roles.get(id, set()))


T = TypeVar("T")


def paginate(items: list[T], offset: int, limit: int) -> list[T]:
    """Return the page of items starting at offset."""
    return items[offset : offset + limit]
