from quill.configs.logger import file_logger
from quill.configs.settings import (
    AUTH_USER_KEY_PREFIX,
    DEFAULT_AUTH_CACHE_TTL,
    AuthProviderConfig,
    CacheConfig,
    RedisCacheConfig,
    pool_kwargs,
    settings,
)

__all__ = [
    "AUTH_USER_KEY_PREFIX",
    "DEFAULT_AUTH_CACHE_TTL",
    "AuthProviderConfig",
    "CacheConfig",
    "RedisCacheConfig",
    "file_logger",
    "pool_kwargs",
    "settings",
]
