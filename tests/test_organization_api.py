"""Tests for the organization HTTP routes.

Covers:
- POST /organizations creates an org with a generated orgId
- duplicate names, validation failures and malformed JSON return 400
- PUT /organizations updates, rejects empty updates, 404s unknown orgs
- GET /organizations/{org_id}
- unexpected store failures map to 500
"""

import pytest

from orgdir.repositories.organization_repo import OrganizationRepository


@pytest.mark.asyncio
async def test_create_organization(client):
    r = await client.post("/api/v1/organizations", json={"name": " Acme ", "description": "desc"})
    assert r.status_code == 200
    data = r.json()
    assert data["orgId"].startswith("org_")
    assert data["name"] == "Acme"
    assert data["description"] == "desc"


@pytest.mark.asyncio
async def test_create_organization_duplicate_name(client, acme):
    r = await client.post("/api/v1/organizations", json={"name": "Acme", "description": "other"})
    assert r.status_code == 400
    assert r.json() == {"message": "Organization with this name already exists"}


@pytest.mark.asyncio
async def test_create_organization_validation(client):
    r = await client.post("/api/v1/organizations", json={"name": ""})
    assert r.status_code == 400
    assert r.json() == {"message": "Name must not be empty Description is required"}


@pytest.mark.asyncio
async def test_create_organization_invalid_json(client):
    r = await client.post(
        "/api/v1/organizations",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid Json body"}


@pytest.mark.asyncio
async def test_update_organization(client, acme):
    r = await client.put(
        "/api/v1/organizations",
        json={"orgId": acme["orgId"], "description": "new description"},
    )
    assert r.status_code == 200
    assert r.json() == {"orgId": acme["orgId"], "name": "Acme", "description": "new description"}


@pytest.mark.asyncio
async def test_update_organization_unchanged_name(client, acme):
    r = await client.put("/api/v1/organizations", json={"orgId": acme["orgId"], "name": "Acme"})
    assert r.status_code == 200
    assert r.json()["name"] == "Acme"


@pytest.mark.asyncio
async def test_update_organization_empty(client, acme):
    r = await client.put("/api/v1/organizations", json={"orgId": acme["orgId"]})
    assert r.status_code == 400
    assert r.json() == {"message": "At least one of name or description must be provided"}


@pytest.mark.asyncio
async def test_update_organization_not_found(client):
    r = await client.put("/api/v1/organizations", json={"orgId": "org_missing", "name": "x"})
    assert r.status_code == 404
    assert r.json() == {"message": "Organization not found"}


@pytest.mark.asyncio
async def test_update_organization_name_conflict(client, acme):
    other = await client.post("/api/v1/organizations", json={"name": "Globex", "description": "d"})
    r = await client.put("/api/v1/organizations", json={"orgId": other.json()["orgId"], "name": "Acme"})
    assert r.status_code == 400
    assert r.json() == {"message": "Organization with this name already exists"}


@pytest.mark.asyncio
async def test_get_organization(client, acme):
    r = await client.get(f"/api/v1/organizations/{acme['orgId']}")
    assert r.status_code == 200
    assert r.json() == acme

    missing = await client.get("/api/v1/organizations/org_missing")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_store_failure_returns_500(client, monkeypatch):
    async def broken(self, name, exclude_id=None):
        raise RuntimeError("store unavailable")

    monkeypatch.setattr(OrganizationRepository, "exists_by_name", broken)
    r = await client.post("/api/v1/organizations", json={"name": "Acme", "description": "d"})
    assert r.status_code == 500
    assert r.json() == {"message": "store unavailable"}


@pytest.mark.asyncio
async def test_overlong_name_is_a_validation_error(client, acme):
    r = await client.post("/api/v1/organizations", json={"name": "a" * 201, "description": "d"})
    assert r.status_code == 400
    assert r.json() == {"message": "Name must be at most 200 characters"}

    r = await client.put("/api/v1/organizations", json={"orgId": acme["orgId"], "name": "a" * 201})
    assert r.status_code == 400
