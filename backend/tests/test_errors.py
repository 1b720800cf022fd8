"""
Tests for error handling and configuration.
"""

import logging
import pytest
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool
from backend.app.main import app
from backend.app.core.config import Settings
from backend.app.db.session import get_db, build_connect_args


@pytest.mark.asyncio
async def test_database_error_is_generic_500(client, alice_headers):
    """Database failures answer 500 without leaking the driver's message."""
    broken_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    broken_sessions = async_sessionmaker(broken_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        # No tables were created
        async with broken_sessions() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    response = await client.get("/api/costs", headers=alice_headers)
    await broken_engine.dispose()

    assert response.status_code == 500
    body = response.json()
    assert body["error_code"] == "ERR_INTERNAL_SERVER"
    assert "no such table" not in body["message"]


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client, alice_headers):
    response = await client.get("/api/unknown", headers=alice_headers)

    assert response.status_code == 404
    assert response.json()["error_code"] == "ERR_NOT_FOUND"


def test_mysql_uri_gets_async_driver():
    config = Settings(_env_file=None, database_url="mysql://u:p@db.example.com:3306/costs")
    assert config.sqlalchemy_url == "mysql+aiomysql://u:p@db.example.com:3306/costs"


def test_discrete_database_settings():
    config = Settings(_env_file=None, db_host="db.example.com", db_user="u", db_password="p",
                      db_database="costs", db_port=3307)
    url = config.sqlalchemy_url

    assert url.drivername == "mysql+aiomysql"
    assert url.host == "db.example.com"
    assert url.port == 3307
    assert url.database == "costs"


def test_tls_without_verification():
    args = build_connect_args("mysql+aiomysql://u:p@db/costs", use_ssl=True, verify=False)

    assert args["ssl"].check_hostname is False
    assert args["ssl"].verify_mode.name == "CERT_NONE"


def test_no_tls_arguments_for_sqlite():
    assert build_connect_args("sqlite+aiosqlite:///:memory:", use_ssl=True, verify=False) == {}


@pytest.mark.asyncio
async def test_failed_request_is_logged_with_correlation_id(client, alice_headers, caplog):
    broken_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    broken_sessions = async_sessionmaker(broken_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with broken_sessions() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    headers = {**alice_headers, "X-Correlation-ID": "req-500"}
    with caplog.at_level(logging.ERROR, logger="drivercosts"):
        response = await client.get("/api/costs", headers=headers)
    await broken_engine.dispose()

    assert response.status_code == 500
    assert response.headers["X-Correlation-ID"] == "req-500"
    failures = [r for r in caplog.records if r.name == "drivercosts" and r.message == "Request failed"]
    assert len(failures) == 1
    assert failures[0].correlation_id == "req-500"
    assert failures[0].status_code == 500
    assert failures[0].path == "/api/costs"


def test_cors_origins_comma_separated(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://app.example.com, https://admin.example.com")
    config = Settings(_env_file=None)
    assert config.cors_origins == ["https://app.example.com", "https://admin.example.com"]


def test_cors_origins_single_value(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://app.example.com")
    assert Settings(_env_file=None).cors_origins == ["https://app.example.com"]


def test_cors_origins_json_list(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["https://app.example.com", "*"]')
    assert Settings(_env_file=None).cors_origins == ["https://app.example.com", "*"]
