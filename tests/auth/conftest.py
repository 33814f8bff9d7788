"""Pytest configuration and fixtures for authentication tests."""

from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

from pytest import fixture

from quill.auth import CachedUserProvider
from quill.clients.protocols import CacheClientProtocol
from quill.managers import CacheManager
from quill.models import UserDB
from quill.repositories import UserRepository

USER_ID = UUID("5f0c6a52-7d1e-4c4b-9a55-1f3a2b8d9e10")


@fixture
def stored_user() -> UserDB:
    return UserDB(uuid=USER_ID, username="ada", email="ada@example.com", first_name="Ada")


@fixture
def users(stored_user: UserDB) -> MagicMock:
    """Persistent user store double that counts lookups."""
    repository = MagicMock(spec=UserRepository)
    repository.get_by_id = AsyncMock(return_value=stored_user)
    return repository


@fixture
def diagnostics() -> MagicMock:
    return MagicMock()


@fixture
def provider(
    users: MagicMock,
    cache_manager: CacheManager,
    diagnostics: MagicMock,
) -> CachedUserProvider:
    return CachedUserProvider(users, cache_manager, ttl_seconds=300, diagnostics=diagnostics)


@fixture
def broken_client() -> MagicMock:
    """Cache client that fails like an unreachable Redis on every call."""
    client = MagicMock(spec=CacheClientProtocol)
    error = ConnectionRefusedError("Redis connection refused")
    client.get = AsyncMock(side_effect=error)
    client.set = AsyncMock(side_effect=error)
    client.delete = AsyncMock(side_effect=error)
    return client


@fixture
def broken_provider(
    users: MagicMock,
    cache_manager: CacheManager,
    broken_client: MagicMock,
    diagnostics: MagicMock,
) -> CachedUserProvider:
    cache_manager.register("broken", broken_client)
    return CachedUserProvider(
        users,
        cache_manager,
        cache_store="broken",
        diagnostics=diagnostics,
    )
