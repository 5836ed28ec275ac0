"""Process lifespan for the persistence layer: startup and shutdown.

Single place for startup/shutdown logic. Callers embed cache_lifespan in
their own application lifespan and build repositories from the yielded
coordinator.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from elemo.core.config import Settings, get_settings
from elemo.infrastructure.cache.coordinator import CacheCoordinator
from elemo.infrastructure.cache.redis_cache import RedisCacheBackend
from elemo.infrastructure.container import create_redis_client
from elemo.shared.telemetry.logging import get_logger, setup_logging
from elemo.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)

logger = get_logger(__name__)


@asynccontextmanager
async def cache_lifespan(
    settings: Settings | None = None,
) -> AsyncIterator[CacheCoordinator]:
    """Run startup then yield the coordinator; on exit run shutdown.

    Startup order: logging, telemetry (if enabled), Redis client and ping.
    Shutdown order: Redis client close, telemetry shutdown. A failed ping
    propagates; there is no cache-disabled fallback.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    if settings.telemetry_enabled:
        telemetry = TelemetryConfig.from_settings(settings)
        telemetry.setup_telemetry()
        telemetry.instrument()
        set_telemetry(telemetry)
        logger.info("Telemetry initialized")

    client = create_redis_client(settings)
    try:
        await client.ping()
        logger.info(
            "Redis cache connected: %s:%s", settings.redis_host, settings.redis_port
        )
        yield CacheCoordinator(
            RedisCacheBackend(client, ttl=settings.cache_ttl_seconds)
        )
    finally:
        await client.aclose()
        logger.info("Redis cache disconnected")

        telemetry_instance = get_telemetry()
        if telemetry_instance is not None:
            telemetry_instance.shutdown()
            set_telemetry(None)
