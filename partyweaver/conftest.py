from contextlib import asynccontextmanager
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine as create_sync_engine
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from partyweaver.auth.dtos import UserDTO
from partyweaver.auth.repository import orm_models as auth_models  # noqa: F401
from partyweaver.config import database
from partyweaver.events.repository import orm_models as event_models  # noqa: F401
from partyweaver.main import app
from partyweaver.models import BaseModel

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def client_factory():
    """Build a test client with the given dependency overrides applied."""

    @asynccontextmanager
    async def factory(overrides: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest_asyncio.fixture
async def client(client_factory):
    async with client_factory() as ac:
        yield ac


@pytest.fixture
def host() -> UserDTO:
    return UserDTO(id=uuid4(), email="host@example.com")


@pytest.fixture
def cohost() -> UserDTO:
    return UserDTO(id=uuid4(), email="cohost@example.com")


@pytest.fixture
def stranger() -> UserDTO:
    return UserDTO(id=uuid4(), email="stranger@example.com")


@pytest_asyncio.fixture
async def db_session():
    """An AsyncSession bound to a fresh in-memory SQLite database."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def sqlite_file_database(tmp_path, monkeypatch) -> str:
    """Point the default session maker at a file-backed SQLite database.

    Each session opens its own connection, so concurrent unit-of-work calls
    and the CLI (which runs its own event loop) see the same data.
    Returns the synchronous URL of the database for assertions.
    """
    path = tmp_path / "partyweaver.db"
    sync_url = f"sqlite:///{path}"
    sync_engine = create_sync_engine(sync_url)
    BaseModel.metadata.create_all(sync_engine)
    sync_engine.dispose()

    engine = create_async_engine(
        f"sqlite+aiosqlite:///{path}",
        poolclass=NullPool,
        connect_args={"timeout": 15},
    )
    monkeypatch.setattr(
        database,
        "async_session_maker",
        async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False),
    )
    return sync_url
