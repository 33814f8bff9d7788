"""Redis client module for cache operations."""

from collections.abc import Awaitable
from logging import getLogger
from typing import Any

from redis.asyncio import ConnectionPool, Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError

from quill.configs import file_logger, pool_kwargs

logger = file_logger(getLogger(__name__))


class RedisClient:
    """Async Redis client wrapper with connection pooling."""

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        """Initialize Redis client with ConnectionPool keyword arguments."""
        self.config = config if config is not None else pool_kwargs
        self._pool: ConnectionPool | None = None
        self._redis: Redis | None = None

    @property
    def is_connected(self) -> bool:
        return self._redis is not None

    async def connect(self) -> None:
        """Establish Redis connection pool and verify it with a ping."""
        try:
            self._pool = ConnectionPool(**self.config)
            self._redis = Redis(connection_pool=self._pool)
            ping_result = self._redis.ping()
            result = await ping_result if isinstance(ping_result, Awaitable) else ping_result
            if not result:
                mssg = "Redis ping returned False"
                raise RedisConnectionError(mssg)
            logger.info("Redis connection successful.")
        except (ConnectionError, RedisError) as e:
            self._redis = None
            self._pool = None
            logger.exception("Failed to connect to Redis")
            mssg = f"Cannot connect to Redis at {self.config.get('host')}:{self.config.get('port')}"
            raise RedisConnectionError(mssg) from e

    async def disconnect(self) -> None:
        """Close Redis connection pool."""
        if self._redis is not None:
            await self._redis.aclose()
            self._redis = None
            self._pool = None
            logger.info("Redis connection closed.")

    @property
    def client(self) -> Redis:
        """Get Redis client instance."""
        if self._redis is None:
            mssg = "Redis client not initialized. Call connect() first."
            raise RuntimeError(mssg)
        return self._redis

    async def _run[T](self, operation: str, target: object, command: Awaitable[T]) -> T:
        """Await a Redis command, re-raising any Redis failure as a connection error."""
        try:
            return await command
        except RedisError as e:
            mssg = f"Redis {operation} failed for {target}: {e}"
            raise RedisConnectionError(mssg) from e

    async def get(self, key: str) -> str | None:
        return await self._run("GET", key, self.client.get(key))

    async def set(self, key: str, value: str, ex: int | None = None) -> bool:
        return bool(await self._run("SET", key, self.client.set(key, value, ex=ex)))

    async def delete(self, *keys: str) -> int:
        """Delete keys; calling it without keys is a no-op."""
        if not keys:
            return 0
        return await self._run("DEL", keys, self.client.delete(*keys))

    async def ttl(self, key: str) -> int:
        return await self._run("TTL", key, self.client.ttl(key))

    async def ping(self) -> bool:
        return bool(await self._run("PING", self.config.get("host"), self.client.ping()))

    async def info(self) -> dict[str, Any]:
        info = await self._run("INFO", self.config.get("host"), self.client.info())
        return info if isinstance(info, dict) else {}
