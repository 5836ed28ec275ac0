"""Infrastructure: cache coordination, storage backends and wiring."""

from elemo.infrastructure.container import (
    CachedRepositories,
    StorageRepositories,
    build_cached_repositories,
    build_memory_storage,
    create_redis_client,
)

__all__ = [
    "CachedRepositories",
    "StorageRepositories",
    "build_cached_repositories",
    "build_memory_storage",
    "create_redis_client",
]
