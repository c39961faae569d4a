from httpx import AsyncClient

AUTHOR = {"name": "Admin User", "avatarUrl": "https://picsum.photos/seed/admin/100/100"}


async def test_post_and_list(client: AsyncClient):
    created = await client.post("/api/announcements", json={"title": "Holiday", "content": "Office closed.", "author": AUTHOR})
    assert created.status_code == 201
    assert created.json()["author"] == AUTHOR
    assert created.json()["timestamp"] == "Just now"

    await client.post("/api/announcements", json={"title": "Newer", "content": "Text", "author": AUTHOR})
    titles = [a["title"] for a in (await client.get("/api/announcements")).json()]
    assert titles == ["Newer", "Holiday"]


async def test_missing_fields(client: AsyncClient):
    response = await client.post("/api/announcements", json={"content": "Office closed."})
    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required fields: title, author.name"


async def test_delete(client: AsyncClient):
    created = (await client.post("/api/announcements", json={"title": "T", "content": "C", "author": AUTHOR})).json()
    assert (await client.delete(f"/api/announcements/{created['id']}")).status_code == 204
    assert (await client.delete(f"/api/announcements/{created['id']}")).status_code == 404
