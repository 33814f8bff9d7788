"""
Application middleware and lifespan.

This module contains the request logging middleware and the lifespan event
handler for service initialization and cleanup.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from quill.configs import CacheConfig, file_logger
from quill.db import close_db, init_db
from quill.managers import CacheManager
from quill.monitoring import bind_request_id, clear_context, configure_logging
from quill.utils.helpers import host

logger = file_logger(getLogger(__name__))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events with service initialization."""
    configure_logging()
    logger.info(f"Starting {app.title}...")

    try:
        await init_db()
        cache_manager = CacheManager(CacheConfig())
        await cache_manager.initialize()
        app.state.cache_manager = cache_manager
        logger.info("Services initialized successfully")
    except Exception:
        logger.exception("Failed to initialize services")
        raise

    yield

    logger.info(f"Shutting down {app.title}...")
    try:
        await cache_manager.shutdown()
        await close_db()
        logger.info("Services cleaned up successfully")
    except Exception:
        logger.exception("Error during service cleanup")


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request line and timing, tagging the logging context with a request ID."""
        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        bind_request_id(request_id)
        start_time = perf_counter()
        logger.info(f"Request: {request.method} {request.url.path}, from ip: {host(request)}")

        try:
            response = await call_next(request)
            duration = perf_counter() - start_time
            logger.info(
                f"Response: {response.status_code} for {request.method} {request.url.path} "
                f"in {duration:.2f}s",
            )
        finally:
            clear_context()

        response.headers["X-Request-ID"] = request_id
        return response
