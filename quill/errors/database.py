"""
Errors raised by the persistent user store.

Unlike cache errors these are never absorbed by the auth cache: they reach
the caller, and the HTTP layer renders them with ``database_exception_handler``.
"""

from logging import getLogger

from starlette.status import (
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from quill.configs import file_logger
from quill.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class DatabaseError(BaseAppError):
    """Base exception for persistent store failures."""

    def __init__(
        self,
        detail: str = "Database Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail, status_code)


class DatabaseConnectionError(DatabaseError):
    """The database could not be reached or dropped the connection mid-query."""

    def __init__(self, detail: str = "Failed to connect to the database") -> None:
        super().__init__(detail)


class DuplicateEntryError(DatabaseError):
    """A unique column (username, email) already holds the value."""

    def __init__(self, detail: str = "A record with this value already exists") -> None:
        super().__init__(detail, HTTP_409_CONFLICT)


class RecordNotFoundError(DatabaseError):
    def __init__(self, detail: str = "Record not found") -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


database_exception_handler = create_exception_handler(logger)
