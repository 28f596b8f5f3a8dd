"""Service test fixtures — async DB, both storage backends, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - `storage` runs each test against DatabaseStorage and InMemoryStorage
    - `client` talks to the real app with app.state.storage pointed at the test storage
    - `fake_notifier` records notifications instead of sending email
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

import app.models  # noqa: F401
from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.memory_storage import InMemoryStorage
from app.infrastructure.sql_storage import DatabaseStorage
from app.main import app as fastapi_app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
def sql_storage(db_manager):
    return DatabaseStorage(db_manager)


@pytest.fixture(params=["database", "memory"])
def storage(request, sql_storage):
    """Each test using this fixture runs once per storage backend."""
    if request.param == "memory":
        return InMemoryStorage()
    return sql_storage


class FakeNotifier:
    """Stands in for EmailNotifier; records what would have been sent."""

    def __init__(self, enabled: bool = True, fail: bool = False):
        self.enabled = enabled
        self.fail = fail
        self.sent = []

    def notify_new_message(self, message) -> bool:
        self.sent.append(message)
        return not self.fail


@pytest.fixture
def fake_notifier():
    return FakeNotifier()


@pytest.fixture
async def client(storage, fake_notifier):
    """FastAPI test client with storage/notifier injected through app.state."""
    original = {
        key: getattr(fastapi_app.state, key, None)
        for key in ("storage", "notifier")
    }
    fastapi_app.state.storage = storage
    fastapi_app.state.notifier = fake_notifier

    async with AsyncClient(
        transport=ASGITransport(app=fastapi_app), base_url="http://test",
    ) as c:
        yield c

    for key, value in original.items():
        setattr(fastapi_app.state, key, value)
