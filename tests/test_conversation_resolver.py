import pytest

from fundconnect.messaging.services.conversation_resolver import ConversationResolver
from fundconnect.models import Conversation
from fundconnect.util.exceptions import InvalidAgentException


def test_resolve_creates_then_reuses_conversation(db_session, make_agent, make_investor):
    agent = make_agent()
    investor = make_investor()
    resolver = ConversationResolver()

    first = resolver.resolve(investor.investor_id, agent.agent_id)
    second = resolver.resolve(investor.investor_id, agent.agent_id)

    assert first == second
    assert db_session.query(Conversation).count() == 1


def test_resolve_separates_pairs(db_session, make_agent, make_investor):
    agent = make_agent()
    other_agent = make_agent(name="Carol")
    investor = make_investor()
    resolver = ConversationResolver()

    a = resolver.resolve(investor.investor_id, agent.agent_id)
    b = resolver.resolve(investor.investor_id, other_agent.agent_id)

    assert a != b
    assert db_session.query(Conversation).count() == 2


@pytest.mark.parametrize("agent_id", ["", None])
def test_resolve_rejects_empty_agent(app, make_investor, agent_id):
    investor = make_investor()

    with pytest.raises(InvalidAgentException) as exc:
        ConversationResolver().resolve(investor.investor_id, agent_id)

    assert exc.value.message == "No agent ID provided"
    assert exc.value.status_code == 400


def test_resolve_rejects_unknown_agent(app, make_investor):
    investor = make_investor()

    with pytest.raises(InvalidAgentException):
        ConversationResolver().resolve(investor.investor_id, "not-an-agent")


def test_resolve_race_returns_winning_row(monkeypatch, db_session, make_agent, make_investor, make_conversation):
    """A concurrent resolve inserted the pair between our lookup and our insert."""
    agent = make_agent()
    investor = make_investor()
    winner = make_conversation(investor, agent)

    resolver = ConversationResolver()
    real_find = resolver._find
    calls = {"n": 0}

    def stale_find(investor_id, agent_id):
        calls["n"] += 1
        if calls["n"] == 1:
            return None
        return real_find(investor_id, agent_id)

    monkeypatch.setattr(resolver, "_find", stale_find)

    resolved = resolver.resolve(investor.investor_id, agent.agent_id)

    assert resolved == winner.conversation_id
    assert db_session.query(Conversation).count() == 1


def test_resolve_endpoint(client, login_as, make_agent, make_investor):
    agent = make_agent()
    investor = make_investor()
    login_as(investor.investor_id, "investor")

    first = client.post("/api/conversations/resolve", json={"agent_id": agent.agent_id})
    second = client.post("/api/conversations/resolve", json={"agent_id": agent.agent_id})

    assert first.status_code == 200
    assert first.get_json()["status"] == "success"
    assert first.get_json()["data"]["conversation_id"] == second.get_json()["data"]["conversation_id"]


def test_resolve_endpoint_errors(client, login_as, make_agent, make_investor):
    agent = make_agent()

    unauthenticated = client.post("/api/conversations/resolve", json={"agent_id": agent.agent_id})
    assert unauthenticated.status_code == 401
    assert unauthenticated.get_json()["error_code"] == "UNAUTHORIZED"

    login_as(agent.agent_id, "agent")
    wrong_role = client.post("/api/conversations/resolve", json={"agent_id": agent.agent_id})
    assert wrong_role.status_code == 403

    investor = make_investor()
    login_as(investor.investor_id, "investor")
    missing = client.post("/api/conversations/resolve", json={})
    assert missing.status_code == 400
    assert missing.get_json()["error_code"] == "INVALID_AGENT"
