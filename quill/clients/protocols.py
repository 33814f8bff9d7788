"""Interface shared by the Redis and in-memory cache clients."""

from collections.abc import Awaitable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheClientProtocol(Protocol):
    """
    String key/value client a ``CacheStore`` sits on.

    Values are already-serialized strings. Expiry is the client's job: a key
    set with ``ex`` must stop being returned once ``ex`` seconds have elapsed,
    and a non-positive ``ex`` is an error.
    """

    def get(self, key: str) -> Awaitable[str | None]: ...

    def set(self, key: str, value: str, ex: int | None = None) -> Awaitable[bool]:
        """Write ``value``; without ``ex`` the key has no expiry."""
        ...

    def delete(self, *keys: str) -> Awaitable[int]:
        """Return how many of ``keys`` existed."""
        ...

    def ttl(self, key: str) -> Awaitable[int]:
        """Seconds left, -1 for no expiry, -2 for a missing key."""
        ...

    def ping(self) -> Awaitable[bool]: ...

    def info(self) -> Awaitable[dict[str, Any]]: ...
