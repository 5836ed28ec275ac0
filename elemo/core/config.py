"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Connection and cache settings are validated at load
time so misconfiguration fails at wiring, not on the first cache call.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from elemo.core.constants import DEFAULT_CACHE_TTL


class Settings(BaseSettings):
    """Settings loaded from environment and .env.

    All settings have defaults; validate_ranges rejects values that would
    produce a broken Redis client or tracer provider.
    """

    # App
    app_name: str = "elemo"
    app_version: str = "1.0.0"
    debug: bool = False

    # Redis cache
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_username: str | None = None
    redis_password: SecretStr | None = None
    redis_is_secure: bool = False
    redis_pool_size: int = 10
    redis_max_retries: int = 3
    redis_dial_timeout: float = 5.0
    redis_read_timeout: float = 3.0
    redis_write_timeout: float = 3.0
    cache_ttl_seconds: int = DEFAULT_CACHE_TTL

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_ranges(self) -> "Settings":
        """Validate connection, cache, and telemetry settings.

        - Redis port in 1-65535, database index and retries non-negative.
        - Pool size at least 1; timeouts and TTL non-negative.
        - Telemetry sample rate in [0, 1]; OTLP exporter needs an endpoint.
        """
        if not 1 <= self.redis_port <= 65535:
            raise ValueError(
                f"redis_port must be between 1 and 65535, got: {self.redis_port}"
            )
        if self.redis_db < 0:
            raise ValueError(f"redis_db must not be negative, got: {self.redis_db}")
        if self.redis_max_retries < 0:
            raise ValueError(
                f"redis_max_retries must not be negative, got: {self.redis_max_retries}"
            )
        if self.redis_pool_size < 1:
            raise ValueError(
                f"redis_pool_size must be at least 1, got: {self.redis_pool_size}"
            )
        for name in ("redis_dial_timeout", "redis_read_timeout", "redis_write_timeout"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        if self.cache_ttl_seconds < 0:
            raise ValueError(
                "cache_ttl_seconds must not be negative (use 0 to disable expiry)"
            )
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError(
                f"telemetry_sample_rate must be between 0 and 1, got: {self.telemetry_sample_rate}"
            )
        if self.telemetry_exporter not in ("console", "otlp", "none"):
            raise ValueError(
                f"Invalid telemetry_exporter '{self.telemetry_exporter}'. "
                "Must be one of: 'console', 'otlp', 'none'"
            )
        if self.telemetry_exporter == "otlp" and not self.telemetry_otlp_endpoint:
            raise ValueError(
                "telemetry_otlp_endpoint is required when telemetry_exporter is 'otlp'. "
                "Set TELEMETRY_OTLP_ENDPOINT environment variable or update .env file."
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
