"""Custom exceptions for the cache layer."""

from logging import getLogger

from starlette import status

from quill.configs import file_logger
from quill.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class CacheBackendError(BaseAppError):
    """Base exception for failures of a cache backend."""

    def __init__(self, detail: str = "Cache backend error") -> None:
        super().__init__(
            detail=detail,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


class CacheConnectionError(CacheBackendError):
    """Raised when the cache backend cannot be reached or times out."""

    def __init__(self, detail: str = "Cache backend unavailable") -> None:
        super().__init__(detail)


class CacheSerializationError(CacheBackendError):
    """Raised when cache serialization fails."""

    def __init__(self, detail: str = "Cannot serialize value") -> None:
        super().__init__(detail)


class CacheDeserializationError(CacheBackendError):
    """Raised when cache deserialization fails."""

    def __init__(self, detail: str = "Cannot deserialize value") -> None:
        super().__init__(detail)


class CacheStoreNotFoundError(CacheBackendError):
    """Raised when a cache store is requested by an unknown name."""

    def __init__(self, detail: str = "Cache store not configured") -> None:
        super().__init__(detail)


cache_exception_handler = create_exception_handler(logger)
