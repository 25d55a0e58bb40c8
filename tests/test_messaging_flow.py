"""Alice (investor) contacts Bob (agent) and Bob reads the message, all over HTTP."""


def register(client, **body):
    response = client.post("/api/auth/register", json={"password": "password123", **body})
    assert response.status_code == 201, response.get_json()
    return response.get_json()["data"]


def test_contact_send_notify_open(app):
    alice_client = app.test_client()
    bob_client = app.test_client()

    bob = register(bob_client, email="bob@harbor.example", role="agent", name="Bob", firm="Harbor")
    register(alice_client, email="alice@example.com", role="investor", name="Alice")

    # Alice clicks "contact agent"
    resolved = alice_client.post("/api/conversations/resolve", json={"agent_id": bob["user_id"]})
    conversation_id = resolved.get_json()["data"]["conversation_id"]

    sent = alice_client.post(f"/api/conversations/{conversation_id}/messages", json={"content": "Hello"})
    assert sent.status_code == 201
    assert sent.get_json()["data"]["content"] == "Hello"

    # Bob's badge
    unread = bob_client.get("/api/notifications/unread").get_json()["data"]
    assert unread["total_unread"] >= 1
    assert len(unread["conversations"]) == 1
    entry = unread["conversations"][0]
    assert entry["id"] == conversation_id
    assert entry["other_participant_name"] == "Alice"
    assert entry["unread_count"] == 1

    # Alice never sees her own message as unread
    alice_unread = alice_client.get("/api/notifications/unread").get_json()["data"]
    assert alice_unread["total_unread"] == 0

    # Bob opens it from the notification list
    opened = bob_client.post(f"/api/notifications/open/{conversation_id}")
    assert opened.status_code == 200
    data = opened.get_json()["data"]
    assert data["agent_last_read"] is not None
    assert data["other_participant"]["name"] == "Alice"
    assert [m["content"] for m in data["messages"]] == ["Hello"]

    after = bob_client.get("/api/notifications/unread").get_json()["data"]
    assert after["conversations"][0]["unread_count"] == 0
    assert after["total_unread"] == 0


def test_conversation_access_is_limited_to_participants(client, login_as, make_agent, make_investor, make_conversation):
    agent, investor = make_agent(), make_investor()
    outsider = make_investor(name="Mallory")
    conversation = make_conversation(investor, agent)

    login_as(outsider.investor_id, "investor")
    assert client.get(f"/api/conversations/{conversation.conversation_id}").status_code == 403
    assert client.post(
        f"/api/conversations/{conversation.conversation_id}/messages", json={"content": "hi"}
    ).status_code == 403

    login_as(investor.investor_id, "investor")
    assert client.get("/api/conversations/does-not-exist").status_code == 404

    detail = client.get(f"/api/conversations/{conversation.conversation_id}").get_json()["data"]
    assert detail["other_participant"] == {"id": agent.agent_id, "name": "Bob", "role": "agent"}


def test_message_validation_and_listing(client, login_as, make_agent, make_investor, make_conversation):
    agent, investor = make_agent(), make_investor()
    conversation = make_conversation(investor, agent)
    login_as(investor.investor_id, "investor")
    url = f"/api/conversations/{conversation.conversation_id}/messages"

    empty = client.post(url, json={"content": "   "})
    assert empty.status_code == 400
    assert empty.get_json()["message"] == "Message content is required."

    for text in ("one", "two", "three"):
        client.post(url, json={"content": text})

    listed = client.get(f"{url}?limit=2").get_json()["data"]
    assert [m["content"] for m in listed["messages"]] == ["two", "three"]


def test_mark_read_endpoint_only_touches_own_field(client, login_as, make_agent, make_investor, make_conversation):
    agent, investor = make_agent(), make_investor()
    conversation = make_conversation(investor, agent)
    login_as(agent.agent_id, "agent")

    marked = client.post(f"/api/conversations/{conversation.conversation_id}/read")
    assert marked.status_code == 200
    assert "agent_last_read" in marked.get_json()["data"]

    detail = client.get(f"/api/conversations/{conversation.conversation_id}").get_json()["data"]
    assert detail["agent_last_read"] is not None
    assert detail["investor_last_read"] is None


def test_notification_stream_sends_current_summary(client, login_as, make_agent, make_investor, make_conversation, add_message):
    agent, investor = make_agent(), make_investor()
    conversation = make_conversation(investor, agent)
    add_message(conversation, investor.investor_id, "ping")
    login_as(agent.agent_id, "agent")

    response = client.get("/api/notifications/stream?once=true")

    assert response.status_code == 200
    assert response.mimetype == "text/event-stream"
    body = response.get_data(as_text=True)
    assert body.startswith("event: unread\ndata: ")
    assert '"total_unread": 1' in body


def test_notification_endpoints_require_session(client):
    assert client.get("/api/notifications/unread").status_code == 401
    assert client.get("/api/notifications/stream").status_code == 401


def test_message_listing_limit_is_capped(client, login_as, make_agent, make_investor, make_conversation, monkeypatch):
    from fundconnect.base import constants

    monkeypatch.setattr(constants, "CONVERSATION_MESSAGES_LIMIT", 2)
    agent, investor = make_agent(), make_investor()
    conversation = make_conversation(investor, agent)
    login_as(investor.investor_id, "investor")
    url = f"/api/conversations/{conversation.conversation_id}/messages"

    for text in ("one", "two", "three"):
        client.post(url, json={"content": text})

    listed = client.get(f"{url}?limit=1000000").get_json()["data"]
    assert [m["content"] for m in listed["messages"]] == ["two", "three"]
    assert client.get(f"{url}?limit=0").status_code == 400


def test_notification_stream_releases_its_session(app, make_agent, make_investor, make_conversation, add_message):
    from fundconnect.config.database import db
    from fundconnect.notifications.controller import NotificationController

    agent, investor = make_agent(), make_investor()
    conversation = make_conversation(investor, agent)
    add_message(conversation, investor.investor_id, "ping")
    user = {"user_id": agent.agent_id, "role": "agent", "email": "bob@harbor.example"}

    with app.test_request_context("/api/notifications/stream"):
        frames = NotificationController().stream(user)
        first = next(frames)

        assert first.startswith("event: unread\n")
        assert '"total_unread": 1' in first
        assert not db.session().in_transaction()

        frames.close()
