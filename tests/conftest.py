from pathlib import Path

from dotenv import load_dotenv

env_file = Path(__file__).parent.parent / ".env.test"
load_dotenv(env_file)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.admin.repositories import AnalyticsRepositories  # noqa: E402
from app.admin.services.statistics_service import StatisticsService  # noqa: E402
from app.db.base import Base  # noqa: E402
from app.db.session import get_session_factory  # noqa: E402
from app.main import app  # noqa: E402


@pytest.fixture
async def test_engine(tmp_path):
    """File-backed SQLite so concurrent queries get separate connections."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'analytics.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    return async_sessionmaker(
        bind=test_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest.fixture
async def db_session(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def repositories(test_session_factory):
    return AnalyticsRepositories.from_session_factory(test_session_factory)


@pytest.fixture
def statistics_service(repositories):
    return StatisticsService(repositories)


@pytest.fixture
async def test_app(test_session_factory):
    app.dependency_overrides[get_session_factory] = lambda: test_session_factory

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
async def test_client(test_app):
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        yield client
