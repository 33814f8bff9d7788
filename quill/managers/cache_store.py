"""A named cache store: serialization, TTL policy and error translation over one client."""

from collections.abc import Awaitable, Callable
from logging import DEBUG, getLogger
from typing import Final

from redis.exceptions import RedisError

from quill.clients.protocols import CacheClientProtocol
from quill.configs import file_logger
from quill.errors import BASE_EXCEPTION, CacheConnectionError, CacheDeserializationError
from quill.utils.cache_serializer import deserialize, serialize

logger = file_logger(getLogger(__name__))

# ValueError covers replies redis-py cannot decode (UnicodeDecodeError).
CLIENT_FAILURES = (RedisError, ValueError, *BASE_EXCEPTION)

# Returned by CacheStore.get on a miss; None is a legitimate cached value.
MISSING: Final = object()

type CacheLoader = Callable[[], Awaitable[object]]


class CacheStore:
    """
    Cache store bound to a single client.

    Every client failure surfaces as a ``CacheBackendError`` subclass:
    ``CacheConnectionError`` for I/O, ``CacheSerializationError`` and
    ``CacheDeserializationError`` for payloads.
    """

    def __init__(
        self,
        name: str,
        client: CacheClientProtocol,
        *,
        key_prefix: str = "",
        default_ttl: int = 3600,
        max_ttl: int = 86400,
    ) -> None:
        self.name = name
        self.client = client
        self.key_prefix = key_prefix
        self.default_ttl = default_ttl
        self.max_ttl = max_ttl

    def __repr__(self) -> str:
        return f"CacheStore(name={self.name!r}, client={type(self.client).__name__})"

    def _build_key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    def _expiry(self, ttl: int | None) -> int:
        ex = ttl if ttl is not None else self.default_ttl
        return min(ex, self.max_ttl)

    def _failure(self, operation: str, key: object, error: Exception) -> CacheConnectionError:
        mssg = f"Cache store '{self.name}' {operation} failed for {key}: {error}"
        return CacheConnectionError(mssg)

    async def get(self, key: str) -> object:
        """Return the cached value, or ``MISSING`` when the key is absent or expired."""
        full_key = self._build_key(key)
        try:
            raw = await self.client.get(full_key)
        except UnicodeDecodeError as e:
            mssg = f"Cache store '{self.name}' returned undecodable bytes for {full_key}: {e}"
            raise CacheDeserializationError(mssg) from e
        except CLIENT_FAILURES as e:
            raise self._failure("get", full_key, e) from e

        if raw is None:
            if logger.isEnabledFor(DEBUG):
                logger.debug("Cache miss on '%s': %s", self.name, full_key)
            return MISSING

        if logger.isEnabledFor(DEBUG):
            logger.debug("Cache hit on '%s': %s", self.name, full_key)
        return deserialize(raw)

    async def set(self, key: str, value: object, ttl: int | None = None) -> bool:
        """Store ``value`` under ``key`` for ``ttl`` seconds (capped at ``max_ttl``)."""
        full_key = self._build_key(key)
        payload = serialize(value)
        try:
            return await self.client.set(full_key, payload, ex=self._expiry(ttl))
        except CLIENT_FAILURES as e:
            raise self._failure("set", full_key, e) from e

    async def delete(self, *keys: str) -> int:
        """Delete keys; absent keys are ignored."""
        full_keys = [self._build_key(key) for key in keys]
        try:
            return await self.client.delete(*full_keys)
        except CLIENT_FAILURES as e:
            raise self._failure("delete", full_keys, e) from e

    async def remember(self, key: str, ttl: int | None, loader: CacheLoader) -> object:
        """
        Return the cached value for ``key`` or load, store and return it.

        Whatever ``loader`` returns is cached, ``None`` included. Exceptions
        raised by ``loader`` propagate untouched and nothing is written.
        """
        cached = await self.get(key)
        if cached is not MISSING:
            return cached

        value = await loader()
        await self.set(key, value, ttl)
        return value

    async def ping(self) -> bool:
        try:
            return await self.client.ping()
        except CLIENT_FAILURES:
            logger.exception("Cache ping failed for store '%s'", self.name)
            return False
