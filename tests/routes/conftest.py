"""Fixtures for HTTP tests against the FastAPI application."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from quill.db import get_session
from quill.dependencies import get_cache_manager
from quill.main import app
from quill.managers import CacheManager


@pytest.fixture
async def client(
    session_maker: async_sessionmaker[AsyncSession],
    cache_manager: CacheManager,
) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to the test database and the fake-clock cache."""

    async def override_session() -> AsyncGenerator[AsyncSession]:
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_cache_manager] = lambda: cache_manager
    app.state.cache_manager = cache_manager

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
    del app.state.cache_manager
