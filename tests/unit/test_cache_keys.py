"""Cache key composition: canonical forms and key/pattern helpers."""

import pytest

from elemo.domain.enums import PermissionKind, ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.cache.keys import (
    compose_cache_key,
    family_pattern,
    point_key,
    query_key,
    query_pattern,
)

U1 = ID("U1", ResourceType.USER)


def test_compose_canonical_forms() -> None:
    """None, bools, ints, enums, IDs and string sequences have fixed forms."""
    key = compose_cache_key(
        ResourceType.TODO, "GetByOwner", U1, 0, 10, None, True, False, PermissionKind.READ
    )
    assert key == "Todo:GetByOwner:U1:0:10:nil:true:false:read"


def test_compose_joins_string_sequences() -> None:
    assert compose_cache_key("Label", ["a", "b"], ("c",)) == "Label:a:b:c"


def test_compose_rejects_unsupported_types() -> None:
    with pytest.raises(TypeError, match="float"):
        compose_cache_key("Todo", 1.5)
    with pytest.raises(TypeError):
        compose_cache_key("Todo", [1, 2])


def test_point_key_uses_id_type() -> None:
    assert point_key(ID("D1", ResourceType.DOCUMENT)) == "Document:D1"


def test_query_key_and_pattern() -> None:
    assert query_key(ResourceType.USER, "GetByEmail", "a@b.io") == "User:GetByEmail:a@b.io"
    assert query_pattern(ResourceType.TODO, "GetByOwner", U1) == "Todo:GetByOwner:U1:*"
    assert query_pattern(ResourceType.TODO, "GetByOwner") == "Todo:GetByOwner:*"


def test_family_pattern() -> None:
    assert family_pattern(ResourceType.ISSUE) == "Issue:*"


def test_keys_are_deterministic() -> None:
    """Equal arguments always give byte-identical keys."""
    first = query_key(ResourceType.DOCUMENT, "GetAllBelongsTo", U1, 0, 10)
    second = query_key(
        ResourceType.DOCUMENT, "GetAllBelongsTo", ID("U1", ResourceType.USER), 0, 10
    )
    assert first == second
