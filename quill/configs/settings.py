"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Quill blogging backend.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
AUTH_USER_KEY_PREFIX = "auth:user:"
DEFAULT_AUTH_CACHE_TTL = 300  # 5 minutes


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Quill Backend"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/quill.log"

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./quill.db"
    DATABASE_ECHO: bool = False

    # Redis Configuration (optional)
    REDIS_ENABLED: bool = False
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0
    REDIS_PASSWORD: str | None = None


settings = Settings()


class RedisCacheConfig(BaseSettings):
    """Redis cache configuration."""

    model_config = SettingsConfigDict(env_prefix="REDIS_", case_sensitive=False, extra="ignore")

    host: str = settings.REDIS_HOST
    port: int = settings.REDIS_PORT
    db: int = settings.REDIS_DB
    password: str | None = settings.REDIS_PASSWORD
    socket_timeout: float = 5.0
    socket_connect_timeout: float = 5.0
    socket_keepalive: bool = True
    health_check_interval: int = 30
    max_connections: int = 50
    decode_responses: bool = True
    encoding: str = "utf-8"

    def pool_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``redis.asyncio.ConnectionPool``."""
        return self.model_dump()


class CacheConfig(BaseSettings):
    """Cache configuration."""

    model_config = SettingsConfigDict(env_prefix="CACHE_", case_sensitive=False, extra="ignore")

    default_store: str = "redis" if settings.REDIS_ENABLED else "memory"
    default_ttl: int = 3600  # 1 hour
    max_ttl: int = 86400  # 24 hours
    key_prefix: str = ""
    memory_max_entries: int = 100_000
    cleanup_interval: int = 60  # seconds


class AuthProviderConfig(BaseSettings):
    """
    User provider configuration.

    ``cache_store`` names the cache store used for user lookups; ``None``
    selects the cache manager's default store.
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    driver: Literal["cached", "database"] = "cached"
    cache_store: str | None = None
    cache_ttl: PositiveInt = DEFAULT_AUTH_CACHE_TTL


pool_kwargs = RedisCacheConfig().pool_kwargs()
