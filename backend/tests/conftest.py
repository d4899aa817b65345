"""
Pytest fixtures for test database, client, and seeded webinars.

Each test gets a fresh schema on its own engine (in-memory SQLite unless
TEST_DATABASE_URL points elsewhere). The HTTP client runs against the real
app with the session, clock and id source overridden.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["REDIS_ENABLED"] = "false"
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import datetime, timezone, timedelta
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from webinar_api.main import app
from webinar_api.db.base import Base
from webinar_api.db.session import enable_sqlite_savepoints, get_db
from webinar_api.infrastructure.generators import FixedDateGenerator, FixedIdGenerator
from webinar_api.models.webinar import WebinarModel
from webinar_api.services.use_case_factory import get_date_generator, get_id_generator

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

# "now" as seen by the use cases in every test
NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _engine_options() -> dict:
    if TEST_DATABASE_URL.startswith("sqlite"):
        # One shared connection so every session sees the same in-memory database
        return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return {}


@pytest_asyncio.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create tables, yield engine, then drop tables for isolation."""
    test_engine = create_async_engine(TEST_DATABASE_URL, echo=False, **_engine_options())
    if TEST_DATABASE_URL.startswith("sqlite"):
        enable_sqlite_savepoints(test_engine)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def date_generator() -> FixedDateGenerator:
    return FixedDateGenerator(NOW)


@pytest.fixture
def id_generator() -> FixedIdGenerator:
    return FixedIdGenerator()


@pytest_asyncio.fixture(scope="function")
async def client(
    db_session: AsyncSession,
    date_generator: FixedDateGenerator,
    id_generator: FixedIdGenerator,
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client with the DB session, clock and id source overridden."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_date_generator] = lambda: date_generator
    app.dependency_overrides[get_id_generator] = lambda: id_generator

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def _insert_webinar(db_session: AsyncSession, **overrides) -> WebinarModel:
    now = datetime.now(timezone.utc)
    values = {
        "id": "test-webinar",
        "organizer_id": "test-user",
        "title": "Webinar Test",
        "start_date": now + timedelta(days=7),
        "end_date": now + timedelta(days=7, hours=1),
        "seats": 10,
        "version": 1,
    }
    values.update(overrides)
    webinar = WebinarModel(**values)
    db_session.add(webinar)
    await db_session.commit()
    await db_session.refresh(webinar)
    return webinar


@pytest_asyncio.fixture
async def test_webinar(db_session: AsyncSession) -> WebinarModel:
    """A 10-seat webinar organized by the default test user."""
    return await _insert_webinar(db_session)


@pytest_asyncio.fixture
async def foreign_webinar(db_session: AsyncSession) -> WebinarModel:
    """A 10-seat webinar organized by somebody else."""
    return await _insert_webinar(db_session, organizer_id="different-user")
