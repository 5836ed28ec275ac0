"""Tests for the typed ID value object."""

import pytest

from elemo.core.constants import MAX_ID_LENGTH, NIL_ID_VALUE
from elemo.domain.enums import ResourceType
from elemo.domain.exceptions import InvalidIDException
from elemo.domain.value_objects.core import ID


def test_id_str_is_bare_value() -> None:
    assert str(ID("D1", ResourceType.DOCUMENT)) == "D1"


def test_ids_equal_only_when_value_and_type_match() -> None:
    assert ID("X", ResourceType.DOCUMENT) == ID("X", ResourceType.DOCUMENT)
    assert ID("X", ResourceType.DOCUMENT) != ID("X", ResourceType.ISSUE)


def test_new_ids_are_unique_and_typed() -> None:
    a, b = ID.new(ResourceType.TODO), ID.new(ResourceType.TODO)
    assert a != b
    assert a.type is ResourceType.TODO
    assert not a.is_nil()


def test_nil_id() -> None:
    nil = ID.nil(ResourceType.USER)
    assert nil.value == NIL_ID_VALUE
    assert nil.is_nil()


@pytest.mark.parametrize(
    "value",
    ["", "a:b", "x" * (MAX_ID_LENGTH + 1), "a*", "a?", "X[1]", "a\\b"],
    ids=["empty", "separator", "too-long", "star", "question", "bracket", "backslash"],
)
def test_from_string_rejects_invalid_values(value: str) -> None:
    with pytest.raises(InvalidIDException):
        ID.from_string(value, ResourceType.DOCUMENT)


def test_id_is_hashable() -> None:
    assert len({ID("A", ResourceType.USER), ID("A", ResourceType.USER)}) == 1
