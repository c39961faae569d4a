from httpx import AsyncClient


async def _thread_with_message(client: AsyncClient) -> int:
    response = await client.post(
        "/api/threads",
        json={"title": "Ops", "creatorId": 1, "participantIds": [2], "initialMessage": "Hello"},
    )
    return response.json()["threadId"]


async def test_unread_count_counts_messages_from_others(client: AsyncClient):
    await _thread_with_message(client)

    assert (await client.get("/api/messages/unread-count", params={"userId": 2})).json() == {"count": 1}
    assert (await client.get("/api/messages/unread-count", params={"userId": 1})).json() == {"count": 0}
    assert (await client.get("/api/messages/unread-count", params={"userId": 3})).json() == {"count": 0}


async def test_unread_count_without_user(client: AsyncClient):
    response = await client.get("/api/messages/unread-count")
    assert response.status_code == 200
    assert response.json() == {"count": 0}


async def test_delete_message(client: AsyncClient):
    thread_id = await _thread_with_message(client)
    message = (
        await client.post(f"/api/threads/{thread_id}/messages", json={"text": "Oops", "userId": 2})
    ).json()

    assert (await client.delete(f"/api/messages/{message['id']}")).status_code == 204
    thread = (await client.get("/api/threads", params={"userId": 1})).json()[0]
    assert [m["text"] for m in thread["messages"]] == ["Hello"]
    assert (await client.delete(f"/api/messages/{message['id']}")).status_code == 404
