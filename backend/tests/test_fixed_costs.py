"""
Integration tests for fixed costs.

Tests CRUD, the /custofixo alias and ownership enforcement.
"""

import pytest


@pytest.fixture
async def alice_cost(client, alice_headers):
    response = await client.post(
        "/api/costs",
        json={"description": "Phone plan", "amount": 25.99, "due_date": "2024-06-01", "cost_type": "monthly"},
        headers=alice_headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_create_cost(alice_cost):
    assert alice_cost["description"] == "Phone plan"
    assert alice_cost["amount"] == 25.99
    assert alice_cost["due_date"] == "2024-06-01"
    assert alice_cost["driver_id"] == "driver-alice"


@pytest.mark.asyncio
async def test_create_cost_requires_description_and_amount(client, alice_headers):
    response = await client.post("/api/costs", json={"description": "", "amount": ""}, headers=alice_headers)

    assert response.status_code == 422
    fields = {e["loc"][-1] for e in response.json()["details"]["errors"]}
    assert fields == {"description", "amount"}


@pytest.mark.asyncio
async def test_blank_optional_fields_stored_as_null(client, alice_headers):
    response = await client.post(
        "/api/costs",
        json={"description": "Licence", "amount": 120, "due_date": "", "cost_type": ""},
        headers=alice_headers,
    )

    assert response.status_code == 201
    assert response.json()["due_date"] is None
    assert response.json()["cost_type"] is None


@pytest.mark.asyncio
async def test_legacy_path_alias(client, alice_headers, alice_cost):
    response = await client.get("/api/custofixo", headers=alice_headers)

    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [alice_cost["id"]]


@pytest.mark.asyncio
async def test_list_only_own_costs(client, bob_headers, alice_cost):
    response = await client.get("/api/costs", headers=bob_headers)
    assert response.json() == []


@pytest.mark.asyncio
async def test_update_cost(client, alice_headers, alice_cost):
    response = await client.put(
        f"/api/costs/{alice_cost['id']}", json={"amount": 30}, headers=alice_headers
    )

    assert response.status_code == 200
    assert response.json()["amount"] == 30
    assert response.json()["description"] == "Phone plan"


@pytest.mark.asyncio
async def test_update_other_drivers_cost_not_found(client, bob_headers, alice_cost):
    response = await client.put(
        f"/api/custofixo/{alice_cost['id']}", json={"amount": 0}, headers=bob_headers
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_cost(client, alice_headers, alice_cost):
    response = await client.delete(f"/api/costs/{alice_cost['id']}", headers=alice_headers)
    assert response.status_code == 204

    response = await client.get("/api/costs", headers=alice_headers)
    assert response.json() == []


@pytest.mark.asyncio
async def test_delete_other_drivers_cost_not_found(client, alice_headers, bob_headers, alice_cost):
    response = await client.delete(f"/api/costs/{alice_cost['id']}", headers=bob_headers)
    assert response.status_code == 404

    response = await client.get("/api/costs", headers=alice_headers)
    assert len(response.json()) == 1
