"""CacheCoordinator unit tests: error taxonomy, miss handling, pattern deletes."""

from unittest.mock import AsyncMock

import pytest
from pydantic import TypeAdapter

from elemo.domain.entities import Label
from elemo.domain.enums import ResourceType
from elemo.domain.value_objects.core import ID
from elemo.infrastructure.cache.cache_protocol import CacheMissError
from elemo.infrastructure.cache.coordinator import CacheCoordinator
from elemo.infrastructure.exceptions import (
    CacheDeleteException,
    CacheReadException,
    CacheWriteException,
    NoClientException,
)

_LABEL = TypeAdapter(Label)


def _label() -> Label:
    return Label(id=ID("L1", ResourceType.LABEL), name="bug")


def test_requires_backend() -> None:
    with pytest.raises(NoClientException):
        CacheCoordinator(None)


async def test_set_then_get_returns_equal_value(coordinator, backend) -> None:
    await coordinator.set("Label:L1", _label())
    assert await coordinator.get("Label:L1", _LABEL) == _label()
    assert backend.ops("set") == ["Label:L1"]


async def test_get_miss_returns_none(coordinator) -> None:
    assert await coordinator.get("Label:missing", _LABEL) is None


async def test_get_empty_list_is_a_hit(coordinator) -> None:
    """An empty cached list is a value, not a miss."""
    await coordinator.set("Label:GetAll:0:10", [])
    assert await coordinator.get("Label:GetAll:0:10", TypeAdapter(list[Label])) == []


async def test_get_backend_error_becomes_cache_read(coordinator, backend) -> None:
    error = ConnectionError("reset")
    backend.fail("get", "*", error)
    with pytest.raises(CacheReadException) as exc_info:
        await coordinator.get("Label:L1", _LABEL)
    assert exc_info.value.__cause__ is error
    assert exc_info.value.key == "Label:L1"


async def test_get_undecodable_payload_becomes_cache_read(coordinator, backend) -> None:
    backend.store["Label:L1"] = b'{"unexpected": true}'
    with pytest.raises(CacheReadException):
        await coordinator.get("Label:L1", _LABEL)


async def test_set_backend_error_becomes_cache_write(coordinator, backend) -> None:
    backend.fail("set", "Label:*")
    with pytest.raises(CacheWriteException) as exc_info:
        await coordinator.set("Label:L1", _label())
    assert isinstance(exc_info.value.__cause__, ConnectionError)


async def test_set_unserializable_value_becomes_cache_write(coordinator) -> None:
    with pytest.raises(CacheWriteException):
        await coordinator.set("Label:L1", object())


async def test_set_miss_is_not_an_error() -> None:
    backend = AsyncMock()
    backend.set = AsyncMock(side_effect=CacheMissError("Label:L1"))
    await CacheCoordinator(backend).set("Label:L1", _label())


async def test_delete_absent_key_is_noop(coordinator, backend) -> None:
    await coordinator.delete("Label:missing")
    assert backend.ops("delete") == ["Label:missing"]


async def test_delete_backend_error_becomes_cache_delete(coordinator, backend) -> None:
    backend.store["Label:L1"] = b"{}"
    backend.fail("delete", "Label:L1")
    with pytest.raises(CacheDeleteException):
        await coordinator.delete("Label:L1")


async def test_delete_pattern_removes_every_match(coordinator, backend) -> None:
    for key in (
        "Todo:GetByOwner:U1:0:10:nil",
        "Todo:GetByOwner:U1:0:10:true",
        "Todo:GetByOwner:U2:0:10:nil",
        "Todo:T1",
    ):
        backend.store[key] = b"[]"
    await coordinator.delete_pattern("Todo:GetByOwner:*")
    assert list(backend.store) == ["Todo:T1"]


async def test_delete_pattern_stops_at_first_failing_key(coordinator, backend) -> None:
    backend.store.update({"Issue:A": b"{}", "Issue:B": b"{}", "Issue:C": b"{}"})
    backend.fail("delete", "Issue:B")
    with pytest.raises(CacheDeleteException) as exc_info:
        await coordinator.delete_pattern("Issue:*")
    assert exc_info.value.key == "Issue:B"
    assert "Issue:A" not in backend.store
    assert "Issue:C" in backend.store


async def test_delete_pattern_listing_error_propagates_raw(coordinator, backend) -> None:
    error = TimeoutError("scan timed out")
    backend.fail("keys", "*", error)
    with pytest.raises(TimeoutError):
        await coordinator.delete_pattern("Issue:*")
