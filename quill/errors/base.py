"""Application error base class and the JSON exception handler factory."""

from collections.abc import Awaitable, Callable
from logging import Logger

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from quill.utils.helpers import host

# Low-level failures a cache client may raise besides its own library errors.
BASE_EXCEPTION = (
    OSError,
    PermissionError,
    MemoryError,
    RuntimeError,
    ConnectionError,
    TimeoutError,
)

type ErrorHandler = Callable[[Request, Exception], Awaitable[ORJSONResponse]]


class BaseAppError(Exception):
    """Error carrying the HTTP status and the ``detail`` shown to clients."""

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


def create_exception_handler(logger: Logger) -> ErrorHandler:
    """
    Build a FastAPI handler rendering a ``BaseAppError`` as ``{"detail": ...}``.

    Extra attributes set on the error are merged into the body. Each handled
    error is logged at warning level on ``logger`` with the client address.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        status_code = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
        detail = getattr(exc, "detail", "Internal Server Error")
        logger.warning(f"{detail} for ip: {host(request)} for endpoint {request.url.path}")

        extra = {k: v for k, v in vars(exc).items() if k not in ("status_code", "detail")}
        return ORJSONResponse(content={"detail": detail, **extra}, status_code=status_code)

    return handler
