"""Service test fixtures — in-memory stores, async DB, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The app's db_manager is swapped for the test manager and restored afterwards
    - Seeded users mirror the roster the integration tests expect (ids 1-4)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Assertions read through fresh sessions (read_user) so no identity map
      from the seeding session can hide what the routes wrote
"""

import asyncio

import pytest
from httpx import ASGITransport, AsyncClient

from roster.core.domain_types import User, UserId
from roster.infrastructure.database import DatabaseSessionManager
from roster.infrastructure.user_repository import SqlUserRepository
from roster.main import app
from roster.services.user_handler import UserHandler
from tests.services.fake_store import InMemoryUserRepository


SEED_USERS = [
    User(UserId(1), "Rokas", "Marcinkevičius", "+37061957933", "Rokas.m97@gmail.com"),
    User(UserId(2), "Michael", "Scott", "+37012345678", "Mscott@gmail.com"),
    User(UserId(3), "Dwight", "Schrute", "+37012345678", "Dschrute@gmail.com"),
    User(UserId(4), "Jim", "Halpert", "+37012345678", "Jhalpert@gmail.com"),
]


@pytest.fixture
def fake_repository():
    return InMemoryUserRepository(list(SEED_USERS))


@pytest.fixture
def handler(fake_repository):
    return UserHandler(fake_repository, asyncio.Lock())


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
async def seeded(db_manager):
    """Insert the integration roster through the SQL store."""
    async with db_manager.session() as db:
        repository = SqlUserRepository(db)
        for user in SEED_USERS:
            await repository.insert(user)
    return SEED_USERS


@pytest.fixture
def read_user(db_manager):
    """Read a user through a fresh session."""
    async def _read(user_id: int) -> User | None:
        async with db_manager.session() as db:
            return await SqlUserRepository(db).find_by_id(UserId(user_id))
    return _read


@pytest.fixture
async def client(db_manager):
    """FastAPI test client bound to the test database."""
    original_manager = getattr(app.state, "db_manager", None)
    app.state.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.db_manager = original_manager
