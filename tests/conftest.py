# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# These must be set before quill.configs is imported anywhere.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["REDIS_ENABLED"] = "false"
os.environ["LOG_TO_FILE"] = "false"

from collections.abc import AsyncGenerator, Callable

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from quill.clients.memory_client import MemoryClient
from quill.configs import CacheConfig
from quill.managers import MEMORY_STORE, CacheManager
from quill.models import UserDB
from quill.repositories import UserRepository
from quill.schemas import UserCreate


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def advance(clock: FakeClock) -> Callable[[float], None]:
    """Move the cache clock forward by a number of seconds."""
    return clock.advance


@pytest.fixture
def memory_client(clock: FakeClock) -> MemoryClient:
    """In-memory cache client driven by the fake clock."""
    return MemoryClient(max_entries=100, clock=clock)


@pytest.fixture
def cache_manager(memory_client: MemoryClient) -> CacheManager:
    """Cache manager whose default store is the fake-clock memory client."""
    manager = CacheManager(CacheConfig(default_store=MEMORY_STORE))
    manager.register(MEMORY_STORE, memory_client)
    return manager


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory SQLite database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    async with session_maker() as session:
        yield session


@pytest.fixture
async def ada(session: AsyncSession) -> UserDB:
    """A persisted, unverified user."""
    user = await UserRepository(session).create(
        UserCreate(username="ada", email="ada@example.com", first_name="Ada"),
    )
    await session.commit()
    return user
