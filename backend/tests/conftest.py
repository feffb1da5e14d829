"""
Shared pytest fixtures.

Every test gets a fresh in-memory SQLite database with foreign keys enabled.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from opsboard.api.deps import get_milestone_repository, get_todo_repository
from opsboard.infrastructure.local.database import create_engine_for_url, init_db
from opsboard.infrastructure.local.milestone_repository import SqliteMilestoneRepository
from opsboard.infrastructure.local.todo_repository import SqliteTodoRepository


@pytest_asyncio.fixture
async def session_factory():
    """Session factory bound to a throwaway in-memory database."""
    engine = create_engine_for_url(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(engine)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
def milestone_repo(session_factory):
    return SqliteMilestoneRepository(session_factory=session_factory)


@pytest.fixture
def todo_repo(session_factory):
    return SqliteTodoRepository(session_factory=session_factory)


@pytest_asyncio.fixture
async def client(milestone_repo, todo_repo):
    """HTTP client against the app with repositories bound to the test database."""
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_milestone_repository] = lambda: milestone_repo
    app.dependency_overrides[get_todo_repository] = lambda: todo_repo

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
