from httpx import AsyncClient


async def _create_thread(client: AsyncClient, title: str = "Ops", initial: str | None = None, members=(2,)) -> int:
    body = {"title": title, "creatorId": 1, "participantIds": list(members)}
    if initial is not None:
        body["initialMessage"] = initial
    response = await client.post("/api/threads", json=body)
    assert response.status_code == 201
    assert response.json()["success"] is True
    return response.json()["threadId"]


async def test_list_requires_user_id(client: AsyncClient):
    response = await client.get("/api/threads")
    assert response.status_code == 400


async def test_create_thread_includes_creator(client: AsyncClient):
    thread_id = await _create_thread(client, initial="  Hello team  ")

    threads = (await client.get("/api/threads", params={"userId": 2})).json()
    assert [t["id"] for t in threads] == [thread_id]
    thread = threads[0]
    assert {p["id"] for p in thread["participants"]} == {1, 2}
    assert thread["lastMessage"] == "Hello team"
    assert thread["messages"][0]["user"]["name"] == "Admin User"
    assert thread["unreadCount"] == 0

    assert (await client.get("/api/threads", params={"userId": 3})).json() == []


async def test_empty_thread_preview(client: AsyncClient):
    await _create_thread(client, initial="   ")
    thread = (await client.get("/api/threads", params={"userId": 1})).json()[0]
    assert thread["messages"] == []
    assert thread["lastMessage"] == "No messages yet."


async def test_threads_sorted_by_last_activity(client: AsyncClient):
    older = await _create_thread(client, title="Older", initial="first")
    newer = await _create_thread(client, title="Newer", initial="second")
    await client.post(f"/api/threads/{older}/messages", json={"text": "bump", "userId": 2})

    ids = [t["id"] for t in (await client.get("/api/threads", params={"userId": 1})).json()]
    assert ids == [older, newer]


async def test_post_message(client: AsyncClient):
    thread_id = await _create_thread(client)
    response = await client.post(f"/api/threads/{thread_id}/messages", json={"text": "Status?", "userId": 2})
    assert response.status_code == 201
    body = response.json()
    assert body["text"] == "Status?"
    assert body["user"]["name"] == "Manager Mike"
    assert len(body["timestamp"]) == 5


async def test_post_blank_message(client: AsyncClient):
    thread_id = await _create_thread(client)
    response = await client.post(f"/api/threads/{thread_id}/messages", json={"text": "  ", "userId": 2})
    assert response.status_code == 400
    assert response.json()["detail"] == "Message text cannot be empty."


async def test_post_to_unknown_thread(client: AsyncClient):
    response = await client.post("/api/threads/999/messages", json={"text": "Hi", "userId": 2})
    assert response.status_code == 404


async def test_replace_participants_keeps_current_user(client: AsyncClient):
    thread_id = await _create_thread(client)
    response = await client.put(
        f"/api/threads/{thread_id}/participants", json={"participantIds": [3], "currentUserId": 1}
    )
    assert response.status_code == 200
    assert [p["id"] for p in response.json()["participants"]] == [1, 3]
    assert (await client.get("/api/threads", params={"userId": 2})).json() == []


async def test_replace_participants_missing_fields(client: AsyncClient):
    thread_id = await _create_thread(client)
    response = await client.put(f"/api/threads/{thread_id}/participants", json={"participantIds": [3]})
    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required fields: currentUserId"


async def test_delete_thread(client: AsyncClient):
    thread_id = await _create_thread(client, initial="Hi")
    assert (await client.delete(f"/api/threads/{thread_id}")).status_code == 204
    assert (await client.get("/api/threads", params={"userId": 1})).json() == []
    assert (await client.delete(f"/api/threads/{thread_id}")).status_code == 404


class TestSummary:
    async def test_summarize(self, client: AsyncClient, summary_text):
        thread_id = await _create_thread(client, initial="We need to agree on the release date for the portal.")
        await client.post(f"/api/threads/{thread_id}/messages", json={"text": "Friday works for me.", "userId": 2})

        response = await client.post(f"/api/threads/{thread_id}/summary")
        assert response.status_code == 200
        assert response.json() == {"threadId": thread_id, "summary": summary_text}

    async def test_too_short(self, client: AsyncClient):
        thread_id = await _create_thread(client, initial="ok")
        response = await client.post(f"/api/threads/{thread_id}/summary")
        assert response.status_code == 400
        assert response.json()["detail"] == "Conversation is too short to summarize."

    async def test_unavailable_without_model(self, client: AsyncClient):
        from tabdeel_pulse.server.main import app
        from tabdeel_pulse.server.services.summarizer import ThreadSummarizer, get_summarizer

        app.dependency_overrides[get_summarizer] = lambda: ThreadSummarizer(None)
        thread_id = await _create_thread(client, initial="We need to agree on the release date for the portal.")
        response = await client.post(f"/api/threads/{thread_id}/summary")
        assert response.status_code == 503

    async def test_unknown_thread(self, client: AsyncClient):
        assert (await client.post("/api/threads/999/summary")).status_code == 404
