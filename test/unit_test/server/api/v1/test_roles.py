from httpx import AsyncClient


async def test_list_roles(client: AsyncClient):
    response = await client.get("/api/roles")
    assert response.status_code == 200
    roles = {r["id"]: r for r in response.json()}
    assert set(roles) == {"Administrator", "Manager", "Technician"}
    assert "system:admin" in roles["Administrator"]["permissions"]
    assert roles["Technician"]["description"] == "Can view and update assigned service jobs."


async def test_create_role(client: AsyncClient):
    response = await client.post(
        "/api/roles",
        json={"id": "Auditor", "name": "Auditor", "permissions": ["users:read", "users:read"]},
    )
    assert response.status_code == 201
    assert response.json()["permissions"] == ["users:read"]


async def test_create_role_missing_fields(client: AsyncClient):
    response = await client.post("/api/roles", json={"permissions": []})
    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required fields: id, name"


async def test_create_role_unknown_permission(client: AsyncClient):
    response = await client.post("/api/roles", json={"id": "X", "name": "X", "permissions": ["launch:rockets"]})
    assert response.status_code == 400
    assert "launch:rockets" in response.json()["detail"]


async def test_create_role_conflict(client: AsyncClient):
    response = await client.post("/api/roles", json={"id": "Manager", "name": "Manager"})
    assert response.status_code == 409
    assert response.json()["detail"] == "Role with ID 'Manager' already exists."


async def test_update_role_permissions(client: AsyncClient):
    response = await client.put("/api/roles/Technician", json={"permissions": ["users:read", "jobs:assign", "finance:approve"]})
    assert response.status_code == 200
    assert response.json()["permissions"] == ["users:read", "jobs:assign", "finance:approve"]


async def test_update_role_requires_array(client: AsyncClient):
    response = await client.put("/api/roles/Technician", json={})
    assert response.status_code == 400
    assert response.json()["detail"] == "Permissions must be an array."


async def test_update_unknown_role(client: AsyncClient):
    assert (await client.put("/api/roles/Pilot", json={"permissions": []})).status_code == 404


async def test_bulk_replace(client: AsyncClient):
    response = await client.put(
        "/api/roles",
        json=[
            {"id": "Manager", "permissions": ["users:read"]},
            {"id": "Auditor", "name": "Auditor", "permissions": ["finance:approve"]},
        ],
    )
    assert response.status_code == 200
    roles = {r["id"]: r for r in (await client.get("/api/roles")).json()}
    assert roles["Manager"]["permissions"] == ["users:read"]
    assert roles["Auditor"]["permissions"] == ["finance:approve"]


async def test_cannot_delete_system_role(client: AsyncClient):
    response = await client.delete("/api/roles/Administrator")
    assert response.status_code == 403
    assert response.json()["detail"] == "Cannot delete default system roles."


async def test_delete_role_reassigns_users(client: AsyncClient):
    await client.post("/api/roles", json={"id": "Auditor", "name": "Auditor", "permissions": ["users:read"]})
    user = (await client.post("/api/users", json={"name": "Ann", "email": "ann@tabdeel.com", "roleId": "Auditor"})).json()

    assert (await client.delete("/api/roles/Auditor")).status_code == 204
    assert (await client.get(f"/api/users/{user['id']}")).json()["roleId"] == "Technician"
    assert (await client.delete("/api/roles/Auditor")).status_code == 404
