"""Builds the user provider selected by ``AuthProviderConfig``."""

from sqlalchemy.ext.asyncio import AsyncSession

from quill.auth.cached_user_provider import CachedUserProvider
from quill.auth.protocols import StoreResolver, UserProvider
from quill.configs import AuthProviderConfig
from quill.repositories.user import UserRepository


def create_user_provider(
    session: AsyncSession,
    stores: StoreResolver,
    config: AuthProviderConfig,
) -> UserProvider:
    """
    Return the user provider for a request.

    The ``database`` driver queries the repository directly; the ``cached``
    driver wraps it in a ``CachedUserProvider`` using the configured store and TTL.
    """
    repository = UserRepository(session)
    if config.driver == "database":
        return repository
    return CachedUserProvider(
        repository,
        stores,
        cache_store=config.cache_store,
        ttl_seconds=config.cache_ttl,
    )
