"""Integration fixtures: in-memory SQLite database and an HTTP client.

Every test gets a fresh database. StaticPool keeps the single in-memory
connection alive across sessions.
"""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from app.config import Settings
from app.infrastructure.db import DatabaseSessionManager
from app.infrastructure.repositories.task_repository import SQLAlchemyTaskRepository
from app.main import create_application


@pytest_asyncio.fixture
async def db_manager():
    manager = DatabaseSessionManager(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    await manager.create_tables()
    yield manager
    await manager.drop_tables()
    await manager.close()


@pytest_asyncio.fixture
async def task_repository(db_manager):
    async with db_manager.session() as session:
        yield SQLAlchemyTaskRepository(session)


@pytest_asyncio.fixture
async def client(db_manager):
    """HTTP client against a fresh application wired to the test database."""
    settings = Settings(
        environment="testing",
        debug=False,
        database_url="sqlite+aiosqlite:///:memory:",
    )
    app = create_application(settings)
    # ASGITransport does not run the lifespan, so wire the manager directly
    app.state.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
