"""RedisCacheBackend unit tests with a mocked redis.asyncio client."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from elemo.infrastructure.cache.cache_protocol import CacheMissError
from elemo.infrastructure.cache.redis_cache import RedisCacheBackend
from elemo.infrastructure.exceptions import NoClientException


def _client() -> MagicMock:
    client = MagicMock()
    client.set = AsyncMock(return_value=True)
    client.get = AsyncMock(return_value=None)
    client.delete = AsyncMock(return_value=1)
    return client


def test_requires_client() -> None:
    with pytest.raises(NoClientException):
        RedisCacheBackend(None)


async def test_set_uses_ttl() -> None:
    client = _client()
    await RedisCacheBackend(client, ttl=60).set("User:U1", b"{}")
    client.set.assert_awaited_once_with("User:U1", b"{}", ex=60)


async def test_set_without_expiry_when_ttl_is_zero() -> None:
    client = _client()
    await RedisCacheBackend(client, ttl=0).set("User:U1", b"{}")
    client.set.assert_awaited_once_with("User:U1", b"{}")


async def test_get_missing_key_raises_miss() -> None:
    with pytest.raises(CacheMissError):
        await RedisCacheBackend(_client()).get("User:U1")


async def test_get_returns_bytes() -> None:
    client = _client()
    client.get = AsyncMock(return_value="{}")
    assert await RedisCacheBackend(client).get("User:U1") == b"{}"


async def test_delete_missing_key_raises_miss() -> None:
    client = _client()
    client.delete = AsyncMock(return_value=0)
    with pytest.raises(CacheMissError):
        await RedisCacheBackend(client).delete("User:U1")


async def test_keys_scans_and_decodes() -> None:
    client = _client()

    async def scan_iter(match: str, count: int):
        for key in (b"Issue:A", "Issue:B"):
            yield key

    client.scan_iter = MagicMock(side_effect=scan_iter)
    keys = await RedisCacheBackend(client).keys("Issue:*")
    assert keys == ["Issue:A", "Issue:B"]
    assert client.scan_iter.call_args.kwargs["match"] == "Issue:*"


async def test_client_errors_propagate() -> None:
    client = _client()
    client.get = AsyncMock(side_effect=ConnectionError("refused"))
    with pytest.raises(ConnectionError):
        await RedisCacheBackend(client).get("User:U1")
