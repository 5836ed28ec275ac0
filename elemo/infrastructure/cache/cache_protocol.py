"""Cache backend protocol consumed by the cache coordinator."""

from typing import Protocol


class CacheMissError(Exception):
    """Raised by a backend when the requested key does not exist.

    This is the backend-level miss signal; the coordinator turns it into
    a ``None`` result (get) or a no-op (delete). It never escapes the
    coordinator.
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"cache miss: {key}")
        self.key = key


class CacheBackend(Protocol):
    """Keyed blob store (e.g. Redis) behind the cache coordinator."""

    async def set(self, key: str, value: bytes) -> None:
        """Store value under key, replacing any existing entry."""
        ...

    async def get(self, key: str) -> bytes:
        """Return the stored value. Raises CacheMissError if absent."""
        ...

    async def delete(self, key: str) -> None:
        """Remove key. Raises CacheMissError if it did not exist."""
        ...

    async def keys(self, pattern: str) -> list[str]:
        """Return every key matching the glob-style pattern."""
        ...
