"""Capabilities the auth layer depends on."""

from typing import Any, Protocol, runtime_checkable

from quill.managers.cache_store import CacheStore
from quill.models.user import UserDB
from quill.utils.cache_keys import UserIdentifier


@runtime_checkable
class UserProvider(Protocol):
    """Anything that can look a user up by identifier."""

    async def get_by_id(self, user_id: UserIdentifier) -> UserDB | None: ...


class StoreResolver(Protocol):
    """Resolves a cache store by name; ``None`` selects the default store."""

    default_store: str

    def store(self, name: str | None = None) -> CacheStore: ...


class DiagnosticsSink(Protocol):
    """Fire-and-forget warning channel. A structlog ``BoundLogger`` satisfies it."""

    def warning(self, event: str, **context: Any) -> Any: ...  # noqa: ANN401
