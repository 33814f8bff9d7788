"""Tests for the cache error hierarchy and its HTTP handler."""

from unittest.mock import MagicMock

import orjson
import pytest

from quill.errors import (
    BaseAppError,
    CacheBackendError,
    CacheConnectionError,
    CacheDeserializationError,
    CacheSerializationError,
    CacheStoreNotFoundError,
    RecordNotFoundError,
    cache_exception_handler,
)


@pytest.mark.parametrize(
    "error_cls",
    [
        CacheConnectionError,
        CacheSerializationError,
        CacheDeserializationError,
        CacheStoreNotFoundError,
    ],
)
def test_cache_errors_share_backend_base(error_cls: type[CacheBackendError]) -> None:
    error = error_cls()
    assert isinstance(error, CacheBackendError)
    assert isinstance(error, BaseAppError)
    assert error.status_code == 500


def test_detail_is_the_message() -> None:
    error = CacheConnectionError("Redis connection refused")
    assert error.detail == "Redis connection refused"
    assert str(error) == "Redis connection refused"


def test_record_not_found_is_404() -> None:
    assert RecordNotFoundError().status_code == 404


@pytest.mark.asyncio
async def test_handler_renders_detail() -> None:
    request = MagicMock()
    request.client.host = "127.0.0.1"

    response = await cache_exception_handler(request, CacheConnectionError("down"))

    assert response.status_code == 500
    assert orjson.loads(response.body)["detail"] == "down"
