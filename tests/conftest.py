"""Pytest configuration and fixtures for the elemo persistence layer.

End-to-end fixtures run the cached decorators over in-memory graph storage
and a recording in-memory cache backend. Tests that need a live Redis use
the ``redis_client`` fixture and ``@pytest.mark.requires_redis``; they are
skipped when REDIS_URL is not set.
"""

import os
from fnmatch import fnmatchcase

import pytest

from elemo.core.config import get_settings
from elemo.infrastructure.cache.cache_protocol import CacheMissError
from elemo.infrastructure.cache.coordinator import CacheCoordinator
from elemo.infrastructure.container import (
    CachedRepositories,
    StorageRepositories,
    build_cached_repositories,
    build_memory_storage,
)


class RecordingCacheBackend:
    """In-memory CacheBackend that records calls and can inject failures.

    ``keys`` uses glob matching where ``*`` also matches ``:``, like Redis
    SCAN MATCH.
    """

    def __init__(self) -> None:
        self.store: dict[str, bytes] = {}
        self.calls: list[tuple[str, str]] = []
        self._failures: list[tuple[str, str, BaseException]] = []

    def fail(
        self, op: str, pattern: str, error: BaseException | None = None
    ) -> None:
        """Make op raise error for every key matching pattern."""
        self._failures.append((op, pattern, error or ConnectionError("backend down")))

    def ops(self, op: str) -> list[str]:
        return [key for name, key in self.calls if name == op]

    def _call(self, op: str, key: str) -> None:
        self.calls.append((op, key))
        for name, pattern, error in self._failures:
            if name == op and fnmatchcase(key, pattern):
                raise error

    async def set(self, key: str, value: bytes) -> None:
        self._call("set", key)
        self.store[key] = value

    async def get(self, key: str) -> bytes:
        self._call("get", key)
        if key not in self.store:
            raise CacheMissError(key)
        return self.store[key]

    async def delete(self, key: str) -> None:
        self._call("delete", key)
        if key not in self.store:
            raise CacheMissError(key)
        del self.store[key]

    async def keys(self, pattern: str) -> list[str]:
        self._call("keys", pattern)
        return [key for key in self.store if fnmatchcase(key, pattern)]


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Drop cached settings so env overrides in one test do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def backend() -> RecordingCacheBackend:
    return RecordingCacheBackend()


@pytest.fixture
def coordinator(backend: RecordingCacheBackend) -> CacheCoordinator:
    return CacheCoordinator(backend)


@pytest.fixture
def storage() -> StorageRepositories:
    """Memory storage repositories sharing one fresh graph."""
    return build_memory_storage()


@pytest.fixture
def repos(
    storage: StorageRepositories, coordinator: CacheCoordinator
) -> CachedRepositories:
    """Cached decorators over the memory storage."""
    return build_cached_repositories(storage, coordinator)


@pytest.fixture
async def redis_client():
    """Live Redis client from REDIS_URL, flushed after the test.

    Skips (pytest.skip) when REDIS_URL is not set. Use
    @pytest.mark.requires_redis on tests that need this fixture; run without
    Redis via: pytest -m 'not requires_redis'.
    """
    url = os.environ.get("REDIS_URL")
    if not url:
        pytest.skip("Redis not configured: set REDIS_URL, e.g. redis://localhost:6379/15")
    import redis.asyncio as redis

    client = redis.Redis.from_url(url)
    yield client
    await client.flushdb()
    await client.aclose()
