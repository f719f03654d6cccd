"""
Pytest configuration and fixtures.

Integration and API tests run against an in-memory SQLite database shared
through a StaticPool, so every session in a test sees the same data.
"""

from typing import AsyncGenerator
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from flashdeck.application.services import CardStore, DeckStore, EventLog
from flashdeck.application.unit_of_work import UnitOfWork
from flashdeck.data import Base
from flashdeck.infra.config.database import build_engine
from flashdeck.infra.config.settings import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Every test starts from default settings with auth enabled."""
    monkeypatch.delenv("DISABLE_AUTH", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
async def engine():
    engine = build_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def uow(session) -> UnitOfWork:
    return UnitOfWork.for_session(session)


@pytest.fixture
def deck_store(uow) -> DeckStore:
    return DeckStore(uow)


@pytest.fixture
def card_store(uow) -> CardStore:
    return CardStore(uow)


@pytest.fixture
def event_log(uow) -> EventLog:
    return EventLog(uow)


@pytest.fixture
def owner_id():
    return uuid4()


@pytest.fixture
def other_owner_id():
    return uuid4()


@pytest.fixture
async def deck(deck_store, owner_id):
    return await deck_store.create(owner_id, "Biology", "Cell structure")


# ---------- API TESTING FIXTURES ----------


@pytest.fixture
def app(session_factory):
    """FastAPI application wired to the test database."""
    from flashdeck.infra.config.database import get_db_session
    from flashdeck.main import create_app

    app = create_app()

    async def _test_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _test_session
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as ac:
        yield ac


@pytest.fixture
def auth_headers_for():
    """Build bearer headers for any owner id."""
    from flashdeck.infra.auth.jwt_auth import JWTAuth

    def _headers(user_id):
        token = JWTAuth().create_access_token(user_id)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def auth_headers(auth_headers_for, owner_id):
    return auth_headers_for(owner_id)
