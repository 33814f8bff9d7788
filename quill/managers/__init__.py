from quill.managers.cache_manager import MEMORY_STORE, REDIS_STORE, CacheManager
from quill.managers.cache_store import MISSING, CacheStore

__all__ = [
    "MEMORY_STORE",
    "MISSING",
    "REDIS_STORE",
    "CacheManager",
    "CacheStore",
]
