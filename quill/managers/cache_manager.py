"""Registry of named cache stores with Redis-to-memory fallback at startup."""

from logging import getLogger
from typing import Any

from redis.exceptions import ConnectionError as RedisConnectionError

from quill.clients.memory_client import MemoryClient
from quill.clients.protocols import CacheClientProtocol
from quill.clients.redis_client import RedisClient
from quill.configs import CacheConfig, file_logger
from quill.errors import CacheStoreNotFoundError
from quill.managers.cache_store import CLIENT_FAILURES, CacheStore

logger = file_logger(getLogger(__name__))

REDIS_STORE = "redis"
MEMORY_STORE = "memory"


class CacheManager:
    """
    Main cache manager holding the application's named cache stores.

    Two stores are always registered: ``redis`` and ``memory``. The default
    store name comes from ``CacheConfig.default_store``; if that is Redis and
    the connection fails on ``initialize``, the default switches to memory.
    """

    def __init__(
        self,
        cache_config: CacheConfig | None = None,
        redis_config: dict[str, Any] | None = None,
    ) -> None:
        self.cache_config = cache_config or CacheConfig()
        self.redis_client = RedisClient(redis_config)
        self.memory_client = MemoryClient(
            max_entries=self.cache_config.memory_max_entries,
            cleanup_interval=self.cache_config.cleanup_interval,
        )
        self.default_store = self.cache_config.default_store
        self._stores: dict[str, CacheStore] = {}

        self.register(REDIS_STORE, self.redis_client)
        self.register(MEMORY_STORE, self.memory_client)

    @property
    def is_redis_available(self) -> bool:
        return self.redis_client.is_connected

    @property
    def store_names(self) -> list[str]:
        return list(self._stores)

    def register(self, name: str, client: CacheClientProtocol) -> CacheStore:
        """Register (or replace) a store backed by ``client``."""
        store = CacheStore(
            name,
            client,
            key_prefix=self.cache_config.key_prefix,
            default_ttl=self.cache_config.default_ttl,
            max_ttl=self.cache_config.max_ttl,
        )
        self._stores[name] = store
        return store

    def store(self, name: str | None = None) -> CacheStore:
        """
        Return the store registered under ``name``, or the default store.

        Raises:
            CacheStoreNotFoundError: If no store is registered under ``name``.
        """
        store_name = name or self.default_store
        try:
            return self._stores[store_name]
        except KeyError:
            mssg = f"Cache store '{store_name}' is not configured"
            raise CacheStoreNotFoundError(mssg) from None

    async def initialize(self) -> None:
        """Start the memory store and connect Redis when it is the default store."""
        await self.memory_client.start_lifecycle()

        if self.default_store != REDIS_STORE:
            logger.info("Redis is not the default store. Using '%s' cache.", self.default_store)
            return

        try:
            await self.redis_client.connect()
        except RedisConnectionError as e:
            logger.warning(f"Redis connection failed: {e}. Falling back to in-memory cache.")
            self.default_store = MEMORY_STORE
        logger.info("Cache manager initialized with default store '%s'.", self.default_store)

    async def shutdown(self) -> None:
        """Disconnect Redis and stop the memory client."""
        await self.redis_client.disconnect()
        await self.memory_client.close()
        logger.info("Cache manager shutdown successfully.")

    async def health_check(self) -> dict[str, Any]:
        """Ping every store and report the default store's status."""
        stores: dict[str, str] = {}
        for name, store in self._stores.items():
            if name == REDIS_STORE and not self.is_redis_available:
                stores[name] = "disconnected"
                continue
            stores[name] = "healthy" if await store.ping() else "unhealthy"

        result: dict[str, Any] = {
            "default_store": self.default_store,
            "status": stores.get(self.default_store, "unknown"),
            "stores": stores,
        }
        try:
            result["info"] = await self.store().client.info()
        except CLIENT_FAILURES as e:
            result["error"] = str(e)
        return result
