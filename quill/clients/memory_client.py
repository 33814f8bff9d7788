"""In-memory cache client, used when Redis is disabled or unreachable."""

from asyncio import CancelledError, Lock, Task, create_task
from asyncio import sleep as asyncio_sleep
from collections import OrderedDict
from collections.abc import Callable
from contextlib import suppress
from logging import DEBUG, getLogger
from time import monotonic

from quill.configs import file_logger

logger = file_logger(getLogger(__name__))


class MemoryClient:
    """
    Asynchronous in-memory cache client that mimics RedisClient.

    Entries expire lazily on access and eagerly through a background purge
    task. When ``max_entries`` is reached the least recently used entry is
    evicted. ``clock`` returns seconds and can be swapped out to drive expiry
    deterministically.
    """

    DEFAULT_MAX_ENTRIES: int = 100_000
    DEFAULT_CLEANUP_INTERVAL: int = 60  # seconds

    def __init__(
        self,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        cleanup_interval: int = DEFAULT_CLEANUP_INTERVAL,
        clock: Callable[[], float] = monotonic,
    ) -> None:
        self._cache: OrderedDict[str, str] = OrderedDict()
        self._expires_at: dict[str, float] = {}
        self._max_entries = max_entries
        self._cleanup_interval = cleanup_interval
        self._clock = clock
        self._cleanup_task: Task[None] | None = None
        self._lock = Lock()
        self.is_connected: bool = True

    async def start_lifecycle(self) -> None:
        """Start the background purge task."""
        async with self._lock:
            self.is_connected = True
            if self._cleanup_task is None:
                self._cleanup_task = create_task(self._cleanup_loop())
                logger.info("MemoryClient expiration task started.")

    async def _cleanup_loop(self) -> None:
        while self.is_connected:
            try:
                await asyncio_sleep(self._cleanup_interval)
                await self.purge_expired()
            except CancelledError:
                break
            except Exception:
                logger.exception("Error in memory cleanup loop")

    async def purge_expired(self) -> int:
        """Remove every expired entry and return how many were dropped."""
        async with self._lock:
            expired = [key for key in self._expires_at if self._expired(key)]
            count = self._drop(*expired)
        if count and logger.isEnabledFor(DEBUG):
            logger.debug("Memory cleanup: removed %d expired keys.", count)
        return count

    def _expired(self, key: str) -> bool:
        deadline = self._expires_at.get(key)
        return deadline is not None and self._clock() >= deadline

    def _drop(self, *keys: str) -> int:
        count = 0
        for key in keys:
            if key in self._cache:
                del self._cache[key]
                count += 1
            self._expires_at.pop(key, None)
        return count

    def _live(self, key: str) -> bool:
        if self._expired(key):
            self._drop(key)
            return False
        return key in self._cache

    async def get(self, key: str) -> str | None:
        async with self._lock:
            if not self._live(key):
                return None
            self._cache.move_to_end(key)
            return self._cache[key]

    async def set(self, key: str, value: str, ex: int | None = None) -> bool:
        """Store ``value``; like Redis SET, a write without ``ex`` clears any TTL."""
        if ex is not None and ex <= 0:
            mssg = f"invalid expire time {ex} for key {key}"
            raise ValueError(mssg)
        async with self._lock:
            if key not in self._cache:
                while len(self._cache) >= self._max_entries:
                    oldest, _ = self._cache.popitem(last=False)
                    self._expires_at.pop(oldest, None)
            self._cache[key] = value
            self._cache.move_to_end(key)
            if ex is not None:
                self._expires_at[key] = self._clock() + ex
            else:
                self._expires_at.pop(key, None)
            return True

    async def delete(self, *keys: str) -> int:
        async with self._lock:
            return self._drop(*keys)

    async def ttl(self, key: str) -> int:
        """Remaining TTL in seconds, -1 without expiry, -2 when absent."""
        async with self._lock:
            if not self._live(key):
                return -2
            if key not in self._expires_at:
                return -1
            return int(self._expires_at[key] - self._clock())

    async def ping(self) -> bool:
        return self.is_connected

    async def info(self) -> dict[str, str | int]:
        async with self._lock:
            return {
                "server": "In-Memory Cache",
                "total_keys": len(self._cache),
                "keys_with_ttl": len(self._expires_at),
                "max_entries": self._max_entries,
            }

    async def close(self) -> None:
        """Stop the purge task."""
        async with self._lock:
            self.is_connected = False
            task, self._cleanup_task = self._cleanup_task, None
        if task is not None:
            task.cancel()
            with suppress(CancelledError):
                await task
