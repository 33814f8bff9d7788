"""Tests for the cache manager's store registry and startup fallback."""

from unittest.mock import AsyncMock, patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from quill.clients.memory_client import MemoryClient
from quill.configs import CacheConfig
from quill.errors import CacheBackendError, CacheStoreNotFoundError
from quill.managers import MEMORY_STORE, REDIS_STORE, CacheManager


def test_builtin_stores_are_registered() -> None:
    manager = CacheManager(CacheConfig(default_store=MEMORY_STORE))
    assert set(manager.store_names) == {REDIS_STORE, MEMORY_STORE}


def test_store_without_name_returns_default(cache_manager: CacheManager) -> None:
    assert cache_manager.store().name == MEMORY_STORE
    assert cache_manager.store(None) is cache_manager.store(MEMORY_STORE)


def test_unknown_store_name_raises_backend_error(cache_manager: CacheManager) -> None:
    with pytest.raises(CacheStoreNotFoundError, match="'memcached'"):
        cache_manager.store("memcached")
    assert issubclass(CacheStoreNotFoundError, CacheBackendError)


def test_register_replaces_store(cache_manager: CacheManager) -> None:
    client = MemoryClient()
    store = cache_manager.register("sessions", client)
    assert cache_manager.store("sessions") is store
    assert store.client is client


def test_store_inherits_cache_config() -> None:
    config = CacheConfig(default_store=MEMORY_STORE, key_prefix="quill:", default_ttl=5, max_ttl=50)
    store = CacheManager(config).store()
    assert (store.key_prefix, store.default_ttl, store.max_ttl) == ("quill:", 5, 50)


@pytest.mark.asyncio
async def test_initialize_with_memory_default_skips_redis() -> None:
    manager = CacheManager(CacheConfig(default_store=MEMORY_STORE))
    with patch.object(manager.redis_client, "connect", new=AsyncMock()) as connect:
        await manager.initialize()
    try:
        connect.assert_not_awaited()
        assert manager.default_store == MEMORY_STORE
    finally:
        await manager.shutdown()


@pytest.mark.asyncio
async def test_initialize_falls_back_to_memory_when_redis_is_down() -> None:
    manager = CacheManager(CacheConfig(default_store=REDIS_STORE))
    failing_connect = AsyncMock(side_effect=RedisConnectionError("Connection refused"))
    with patch.object(manager.redis_client, "connect", new=failing_connect):
        await manager.initialize()
    try:
        assert manager.default_store == MEMORY_STORE
        assert manager.is_redis_available is False
    finally:
        await manager.shutdown()


@pytest.mark.asyncio
async def test_redis_store_fails_loudly_before_connect() -> None:
    """A store whose client never connected raises a backend error, not a crash."""
    manager = CacheManager(CacheConfig(default_store=MEMORY_STORE))
    with pytest.raises(CacheBackendError):
        await manager.store(REDIS_STORE).get("auth:user:1")


@pytest.mark.asyncio
async def test_health_check(cache_manager: CacheManager) -> None:
    result = await cache_manager.health_check()

    assert result["default_store"] == MEMORY_STORE
    assert result["status"] == "healthy"
    assert result["stores"][REDIS_STORE] == "disconnected"
    assert result["info"]["server"] == "In-Memory Cache"
