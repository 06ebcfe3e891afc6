from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from movie_api.app import app
from movie_api.domain.ports.repositories.movie_repository import MovieRepository
from movie_api.domain.ports.services.logger import LoggerPort
from movie_api.infrastructure.adapters.repositories.in_memory_movie_repository import InMemoryMovieRepository
from movie_api.infrastructure.persistence.database import get_session
from movie_api.infrastructure.persistence.models import table_registry


@pytest.fixture
def client():
    return TestClient(app)


class BaseIntegrationTest:
    """Base class for integration tests with common setup"""

    @pytest_asyncio.fixture
    async def sqlite_engine(self):
        """Create an in-memory test database engine"""
        engine = create_async_engine(
            "sqlite+aiosqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.create_all)

        yield engine

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.drop_all)
        await engine.dispose()

    @pytest_asyncio.fixture
    async def test_session(self, sqlite_engine):
        """Create test database session"""
        async with AsyncSession(sqlite_engine, expire_on_commit=False) as session:
            yield session

    @pytest_asyncio.fixture
    async def client(self, test_session):
        """Create test HTTP client with database override"""

        async def override_get_session():
            yield test_session

        app.dependency_overrides[get_session] = override_get_session

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()


# Shared fixtures for service testing
@pytest.fixture
def mock_movie_repository():
    """Mock movie repository for service testing"""
    return AsyncMock(spec=MovieRepository)


@pytest.fixture
def in_memory_movie_repository():
    return InMemoryMovieRepository()


@pytest.fixture
def mock_logger():
    return MagicMock(spec=LoggerPort)
