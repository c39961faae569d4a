from httpx import AsyncClient


async def test_root_banner(client: AsyncClient):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.text == "Tabdeel Pulse Backend API is running."


async def test_health(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_version(client: AsyncClient):
    response = await client.get("/version")
    assert response.status_code == 200
    assert response.json() == {"version": "0.1.0", "schema_version": "v1"}


async def test_openapi_served_under_api(client: AsyncClient):
    response = await client.get("/api/openapi.json")
    assert response.status_code == 200
    paths = response.json()["paths"]
    assert "/api/login" in paths
    assert "/api/threads/{thread_id}/summary" in paths
