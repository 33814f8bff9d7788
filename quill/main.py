# quill/main.py

"""Quill Backend - blogging platform API with cached authentication lookups."""

from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse

from quill.configs import settings
from quill.errors import (
    CacheBackendError,
    DatabaseError,
    cache_exception_handler,
    database_exception_handler,
)
from quill.middleware import LoggingMiddleware, lifespan
from quill.routes import auth_router
from quill.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Quill blogging platform backend",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)
app.include_router(auth_router)

errors = [
    (CacheBackendError, cache_exception_handler),
    (DatabaseError, database_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_class=ORJSONResponse,
    operation_id="health_check",
)
async def health_check(request: Request) -> ORJSONResponse:
    """Report application status and the health of the cache stores."""
    cache_manager = request.app.state.cache_manager
    return ORJSONResponse(
        content={
            "status": "ok",
            "version": app.version,
            "timestamp": today_str(),
            "cache": await cache_manager.health_check(),
        },
    )
