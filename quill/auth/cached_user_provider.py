"""Read-through cache in front of the persistent user store."""

from pydantic import ValidationError
from sqlmodel import SQLModel

from quill.auth.protocols import DiagnosticsSink, StoreResolver, UserProvider
from quill.configs import DEFAULT_AUTH_CACHE_TTL
from quill.errors import CacheBackendError
from quill.models.user import UserDB
from quill.monitoring import get_logger
from quill.utils.cache_keys import UserIdentifier, auth_user_key

CACHE_FAILURE_EVENT = "Cache failure in CachedUserProvider, falling back to database"


class CachedUserProvider:
    """
    User provider that caches ``get_by_id`` lookups of another provider.

    Users are cached as JSON under ``auth:user:<identifier>`` for ``ttl_seconds``,
    and a missing user is cached as ``null`` just like a found one. When the
    cache store fails in any way the lookup goes straight to the wrapped
    provider and a warning is emitted; errors of the wrapped provider always
    propagate. Each call queries the wrapped provider at most once.

    The instance holds no mutable state and can be shared between requests.
    """

    def __init__(
        self,
        users: UserProvider,
        stores: StoreResolver,
        *,
        cache_store: str | None = None,
        ttl_seconds: int = DEFAULT_AUTH_CACHE_TTL,
        model: type[SQLModel] = UserDB,
        diagnostics: DiagnosticsSink | None = None,
    ) -> None:
        if ttl_seconds <= 0:
            mssg = f"ttl_seconds must be a positive number of seconds, got {ttl_seconds}"
            raise ValueError(mssg)
        self.users = users
        self.stores = stores
        self.cache_store = cache_store
        self.ttl_seconds = ttl_seconds
        self.model = model
        self.diagnostics = diagnostics or get_logger(__name__)

    @property
    def store_name(self) -> str:
        return self.cache_store or self.stores.default_store

    def cache_key(self, identifier: UserIdentifier) -> str:
        return auth_user_key(identifier)

    async def get_by_id(self, user_id: UserIdentifier) -> UserDB | None:
        """Resolve ``user_id`` through the cache, falling back to the wrapped provider."""
        loaded: list[UserDB | None] = []

        async def load() -> dict | None:
            user = await self.users.get_by_id(user_id)
            loaded.append(user)
            return None if user is None else user.model_dump(mode="json")

        try:
            store = self.stores.store(self.cache_store)
            payload = await store.remember(self.cache_key(user_id), self.ttl_seconds, load)
            return None if payload is None else self.model.model_validate(payload)
        except (CacheBackendError, ValidationError) as e:
            self.diagnostics.warning(
                CACHE_FAILURE_EVENT,
                identifier=str(user_id),
                error=str(e),
                cache_store=self.store_name,
            )

        # The cache write may have failed after the wrapped provider answered.
        if loaded:
            return loaded[0]
        return await self.users.get_by_id(user_id)

    async def invalidate(self, user_id: UserIdentifier) -> int:
        """
        Drop the cached entry for ``user_id``.

        Returns the number of deleted entries (0 when nothing was cached).

        Raises:
            CacheBackendError: If the cache store cannot be reached.
        """
        store = self.stores.store(self.cache_store)
        return await store.delete(self.cache_key(user_id))
