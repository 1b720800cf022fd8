"""
Centralized Test Configuration.

Each test gets a fresh in-memory SQLite database and a fake token verifier
that knows three drivers: alice, bob and carol (no profile claims).
"""

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from backend.app.main import app
from backend.app.core.dependencies import get_token_verifier
from backend.app.core.exceptions import InvalidTokenError
from backend.app.db.session import get_db, Base
from backend.app.schemas.driver import DriverIdentity

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TOKENS = {
    "token-alice": DriverIdentity(uid="driver-alice", email="alice@example.com", name="Alice"),
    "token-bob": DriverIdentity(uid="driver-bob", email="bob@example.com", name="Bob"),
    # A token without profile claims
    "token-carol": DriverIdentity(uid="driver-carol"),
}


class FakeTokenVerifier:
    """Stands in for Firebase: known tokens map to fixed identities."""

    def __init__(self, tokens):
        self.tokens = tokens
        self.calls = []

    async def verify(self, token: str) -> DriverIdentity:
        self.calls.append(token)
        identity = self.tokens.get(token)
        if identity is None:
            raise InvalidTokenError()
        return identity


def enable_foreign_keys(dbapi_conn, connection_record):
    """Enable foreign key constraints (and ON DELETE CASCADE) for SQLite."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine.sync_engine, "connect", enable_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def db_access():
    """Records every database session handed to a request."""
    return []


@pytest.fixture
def token_verifier():
    return FakeTokenVerifier(TOKENS)


@pytest.fixture
async def client(session_factory, db_access, token_verifier):
    """Async client for testing."""

    async def override_get_db():
        db_access.append(True)
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_token_verifier] = lambda: token_verifier

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def alice_headers():
    return {"Authorization": "Bearer token-alice"}


@pytest.fixture
def bob_headers():
    return {"Authorization": "Bearer token-bob"}


@pytest.fixture
def carol_headers():
    return {"Authorization": "Bearer token-carol"}


@pytest.fixture
async def alice_vehicle(client, alice_headers):
    """A vehicle owned by alice."""
    response = await client.post(
        "/api/vehicles",
        json={"make": "Toyota", "model": "Corolla", "plate": "AA-00-BB", "year": 2020,
              "vehicle_type": "hybrid", "fuel_price": 1.75, "fuel_efficiency_km_per_l": 20},
        headers=alice_headers,
    )
    assert response.status_code == 201
    return response.json()
