"""Cache: coordinator, Redis backend, key composition, and invalidation steps.

Cached repository decorators live in elemo.infrastructure.cache.repositories.
"""

from elemo.infrastructure.cache.cache_protocol import CacheBackend, CacheMissError
from elemo.infrastructure.cache.coordinator import CacheCoordinator
from elemo.infrastructure.cache.invalidation import Key, Pattern, Refresh
from elemo.infrastructure.cache.keys import (
    WILDCARD,
    compose_cache_key,
    family_pattern,
    point_key,
    query_key,
    query_pattern,
)
from elemo.infrastructure.cache.redis_cache import RedisCacheBackend

__all__ = [
    "CacheBackend",
    "CacheCoordinator",
    "CacheMissError",
    "Key",
    "Pattern",
    "RedisCacheBackend",
    "Refresh",
    "WILDCARD",
    "compose_cache_key",
    "family_pattern",
    "point_key",
    "query_key",
    "query_pattern",
]
