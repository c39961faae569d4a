from httpx import AsyncClient


async def test_project_crud(client: AsyncClient):
    created = await client.post("/api/projects", json={"name": "Marina Tower", "status": "Active"})
    assert created.status_code == 201
    project = created.json()
    assert project["name"] == "Marina Tower"

    await client.post("/api/projects", json={"name": "Airport Annex", "status": "On Hold"})
    names = [p["name"] for p in (await client.get("/api/projects")).json()]
    assert names == ["Airport Annex", "Marina Tower"]

    updated = await client.put(f"/api/projects/{project['id']}", json={"name": "Marina Tower", "status": "Completed"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "Completed"

    assert (await client.delete(f"/api/projects/{project['id']}")).status_code == 204
    assert (await client.delete(f"/api/projects/{project['id']}")).status_code == 404


async def test_create_project_missing_fields(client: AsyncClient):
    response = await client.post("/api/projects", json={"name": "Only name"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required fields: status"


async def test_create_project_invalid_status(client: AsyncClient):
    response = await client.post("/api/projects", json={"name": "X", "status": "Paused"})
    assert response.status_code == 422


async def test_update_unknown_project(client: AsyncClient):
    response = await client.put("/api/projects/999", json={"name": "X", "status": "Active"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Project 999 not found"
