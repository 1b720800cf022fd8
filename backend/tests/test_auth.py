"""
Integration tests for bearer token authentication.

Protected routes reject missing and invalid tokens before touching the database.
"""

import pytest

PROTECTED_ROUTES = [
    ("GET", "/api/vehicles"),
    ("GET", "/api/vehicles/1"),
    ("POST", "/api/vehicles"),
    ("PUT", "/api/vehicles/1"),
    ("DELETE", "/api/vehicles/1"),
    ("GET", "/api/logs"),
    ("GET", "/api/logs/1"),
    ("POST", "/api/logs/1"),
    ("GET", "/api/costs"),
    ("POST", "/api/costs"),
    ("PUT", "/api/custofixo/1"),
    ("DELETE", "/api/costs/1"),
    ("POST", "/api/motoristas"),
    ("GET", "/api/drivers/me"),
]


@pytest.mark.asyncio
async def test_root_is_public(client):
    """Liveness route needs no token."""
    response = await client.get("/")
    assert response.status_code == 200
    assert "running" in response.text


@pytest.mark.asyncio
async def test_health_is_public(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
@pytest.mark.parametrize("method,path", PROTECTED_ROUTES)
async def test_missing_token_is_unauthenticated(client, db_access, method, path):
    """No Authorization header -> 401, and no session is opened."""
    response = await client.request(method, path, json={})

    assert response.status_code == 401
    assert response.json()["error_code"] == "ERR_UNAUTHORIZED"
    assert response.headers["WWW-Authenticate"] == "Bearer"
    assert db_access == []


@pytest.mark.asyncio
@pytest.mark.parametrize("method,path", PROTECTED_ROUTES)
async def test_rejected_token_is_forbidden(client, db_access, method, path):
    """A token the verifier rejects -> 403, and no session is opened."""
    response = await client.request(
        method, path, json={}, headers={"Authorization": "Bearer forged-token"}
    )

    assert response.status_code == 403
    assert response.json()["error_code"] == "ERR_FORBIDDEN"
    assert db_access == []


@pytest.mark.asyncio
async def test_non_bearer_scheme_is_unauthenticated(client, token_verifier):
    response = await client.get("/api/vehicles", headers={"Authorization": "Basic dXNlcjpwYXNz"})

    assert response.status_code == 401
    assert token_verifier.calls == []


@pytest.mark.asyncio
async def test_token_verified_once_per_request(client, alice_headers, token_verifier):
    """Router and endpoint share the cached identity."""
    response = await client.get("/api/vehicles", headers=alice_headers)

    assert response.status_code == 200
    assert token_verifier.calls == ["token-alice"]


@pytest.mark.asyncio
async def test_identity_scopes_created_rows(client, alice_headers):
    """The verified uid is the driver id stored on new rows."""
    response = await client.post("/api/vehicles", json={"plate": "11-AA-22"}, headers=alice_headers)

    assert response.status_code == 201
    assert response.json()["driver_id"] == "driver-alice"


@pytest.mark.asyncio
async def test_response_carries_correlation_id(client, alice_headers):
    response = await client.get(
        "/api/vehicles", headers={**alice_headers, "X-Correlation-ID": "abc-123"}
    )

    assert response.headers["X-Correlation-ID"] == "abc-123"
    assert "X-Process-Time" in response.headers
