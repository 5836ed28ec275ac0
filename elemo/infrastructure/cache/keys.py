"""Cache key composition. Single place for key format (DRY).

Keys are ``:``-joined canonical components:

- point key: ``<RT>:<id>``
- secondary-point key: ``<RT>:<field>:<value>``
- query key: ``<RT>:<Op>:<a1>:...:<an>``
- pattern key: any of the above with ``*`` components

Separators are never escaped; atomic components (ids, emails, project
keys) must not contain ``:``. IDs enforce this on construction.
"""

from collections.abc import Sequence
from enum import Enum
from typing import Any

from elemo.core.constants import (
    CACHE_KEY_FALSE,
    CACHE_KEY_NIL,
    CACHE_KEY_SEP,
    CACHE_KEY_TRUE,
    CACHE_KEY_WILDCARD,
)
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID

WILDCARD = CACHE_KEY_WILDCARD


def _canonical(param: Any) -> str:
    """Return the canonical key component for a single argument.

    Raises:
        TypeError: If the argument has no canonical form.
    """
    if param is None:
        return CACHE_KEY_NIL
    if isinstance(param, ID):
        return str(param)
    # Enum before str: str-mixin enums would otherwise format as Class.MEMBER
    if isinstance(param, Enum):
        return str(param.value)
    if isinstance(param, str):
        return param
    # bool before int: bool is an int subclass
    if isinstance(param, bool):
        return CACHE_KEY_TRUE if param else CACHE_KEY_FALSE
    if isinstance(param, int):
        return str(param)
    if isinstance(param, Sequence) and all(isinstance(p, str) for p in param):
        return CACHE_KEY_SEP.join(param)
    raise TypeError(f"Unsupported cache key component type: {type(param).__name__}")


def compose_cache_key(*params: Any) -> str:
    """Compose a deterministic cache key from heterogeneous arguments.

    Args:
        *params: str, int, bool, ID, Enum, sequence of str, or None
            (rendered as ``nil``).

    Returns:
        Components joined with ``:``.

    Raises:
        TypeError: If an argument has no canonical form.
    """
    return CACHE_KEY_SEP.join(_canonical(p) for p in params)


def point_key(id: ID) -> str:
    """Point key of an entity: ``<RT>:<id>``."""
    return compose_cache_key(id.type, id)


def query_key(resource_type: ResourceType, op: str, *params: Any) -> str:
    """Query key: ``<RT>:<Op>:<params...>``."""
    return compose_cache_key(resource_type, op, *params)


def query_pattern(resource_type: ResourceType, op: str, *params: Any) -> str:
    """Pattern matching every query key of op that starts with params.

    ``query_pattern(RT.TODO, "GetByOwner", owner)`` gives
    ``Todo:GetByOwner:<owner>:*``; with no params, ``Todo:GetByOwner:*``.
    """
    return compose_cache_key(resource_type, op, *params, WILDCARD)


def family_pattern(resource_type: ResourceType) -> str:
    """Pattern matching every key of a resource family: ``<RT>:*``."""
    return compose_cache_key(resource_type, WILDCARD)
