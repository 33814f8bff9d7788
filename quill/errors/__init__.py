from quill.errors.base import BASE_EXCEPTION, BaseAppError, create_exception_handler
from quill.errors.cache import (
    CacheBackendError,
    CacheConnectionError,
    CacheDeserializationError,
    CacheSerializationError,
    CacheStoreNotFoundError,
    cache_exception_handler,
)
from quill.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)

__all__ = [
    "BASE_EXCEPTION",
    "BaseAppError",
    "CacheBackendError",
    "CacheConnectionError",
    "CacheDeserializationError",
    "CacheSerializationError",
    "CacheStoreNotFoundError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DuplicateEntryError",
    "RecordNotFoundError",
    "cache_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
]
