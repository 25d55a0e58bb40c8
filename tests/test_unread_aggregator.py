from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from fundconnect.messaging.services.message_service import MessageService
from fundconnect.notifications.services.unread_aggregator import (
    ConversationUnread,
    UnreadAggregator,
)
from fundconnect.util.cancellation import CancellationToken
from fundconnect.util.exceptions import OperationCancelled, TransientBackendException

T = datetime(2024, 3, 1, 9, 0, 0, tzinfo=timezone.utc)


def at(minutes):
    return T + timedelta(minutes=minutes)


def test_three_unread_when_never_read(app, make_agent, make_investor, make_conversation, add_message):
    agent, investor = make_agent(), make_investor()
    conversation = make_conversation(investor, agent)
    for i in range(3):
        add_message(conversation, agent.agent_id, f"m{i}", at=at(i))

    summary = UnreadAggregator().compute(investor.investor_id, "investor")

    assert summary.total_unread == 3
    assert len(summary.conversations) == 1
    entry = summary.conversations[0]
    assert entry.unread_count == 3
    assert entry.other_participant_name == "Bob"
    assert entry.last_message["content"] == "m2"


def test_only_messages_after_last_read_from_other_count(app, make_agent, make_investor, make_conversation, add_message):
    agent, investor = make_agent(), make_investor()
    conversation = make_conversation(investor, agent, investor_last_read=T)
    add_message(conversation, agent.agent_id, "before", at=at(-1))
    add_message(conversation, agent.agent_id, "after", at=at(1))
    add_message(conversation, investor.investor_id, "my reply", at=at(2))

    summary = UnreadAggregator().compute(investor.investor_id, "investor")

    assert summary.conversations[0].unread_count == 1
    assert summary.total_unread == 1


def test_self_reply_shortcut_is_opt_in(app, make_agent, make_investor, make_conversation, add_message):
    agent, investor = make_agent(), make_investor()
    conversation = make_conversation(investor, agent, investor_last_read=T)
    add_message(conversation, agent.agent_id, "after", at=at(1))
    add_message(conversation, investor.investor_id, "my reply", at=at(2))

    summary = UnreadAggregator(self_reply_clears=True).compute(investor.investor_id, "investor")

    assert summary.conversations[0].unread_count == 0


def test_mark_read_then_compute_is_zero(app, make_agent, make_investor, make_conversation, add_message):
    agent, investor = make_agent(), make_investor()
    conversation = make_conversation(investor, agent)
    add_message(conversation, investor.investor_id, "hello", at=at(0))

    MessageService().mark_read(conversation.conversation_id, agent.agent_id, "agent")
    summary = UnreadAggregator().compute(agent.agent_id, "agent")

    assert summary.conversations[0].unread_count == 0
    assert summary.total_unread == 0


def test_conversations_without_messages_are_left_out(app, make_agent, make_investor, make_conversation):
    agent, investor = make_agent(), make_investor()
    make_conversation(investor, agent)

    summary = UnreadAggregator().compute(investor.investor_id, "investor")

    assert summary.total_unread == 0
    assert summary.conversations == []


def test_sort_order():
    def entry(cid, unread, minute):
        return ConversationUnread(cid, "x", {}, unread, at(minute))

    a = entry("A", 2, 5)
    b = entry("B", 2, 10)
    c = entry("C", 0, 50)

    summary = UnreadAggregator._summarise([c, a, b])

    assert [e.id for e in summary.conversations] == ["B", "A", "C"]
    assert summary.total_unread == 4


def test_window_limits_count_and_exact_mode_does_not(app, make_agent, make_investor, make_conversation, add_message):
    agent, investor = make_agent(), make_investor()
    conversation = make_conversation(investor, agent)
    for i in range(8):
        add_message(conversation, agent.agent_id, f"m{i}", at=at(i))

    windowed = UnreadAggregator(window=5, count_mode="window").compute(investor.investor_id, "investor")
    exact = UnreadAggregator(window=5, count_mode="exact").compute(investor.investor_id, "investor")

    assert windowed.total_unread == 5
    assert exact.total_unread == 8


def test_participant_name_falls_back(app, db_session, make_agent, make_investor, make_conversation, add_message):
    agent, investor = make_agent(name=""), make_investor()
    conversation = make_conversation(investor, agent)
    add_message(conversation, agent.agent_id, "hi", at=at(0))

    summary = UnreadAggregator().compute(investor.investor_id, "investor")

    assert summary.conversations[0].other_participant_name == "Agent"


def test_failed_conversation_is_skipped(monkeypatch, app, make_agent, make_investor, make_conversation, add_message):
    agent, investor = make_agent(), make_investor()
    other_agent = make_agent(name="Carol")
    good = make_conversation(investor, agent)
    bad = make_conversation(investor, other_agent)
    add_message(good, agent.agent_id, "hi", at=at(0))
    add_message(bad, other_agent.agent_id, "hi", at=at(1))

    aggregator = UnreadAggregator()
    real_entry = aggregator._conversation_entry

    def flaky_entry(conversation, user_id, role):
        if conversation.conversation_id == bad.conversation_id:
            return None
        return real_entry(conversation, user_id, role)

    monkeypatch.setattr(aggregator, "_conversation_entry", flaky_entry)

    summary = aggregator.compute(investor.investor_id, "investor")

    assert [e.id for e in summary.conversations] == [good.conversation_id]


def test_message_query_error_is_logged_and_skipped(monkeypatch, app, caplog, make_agent, make_investor, make_conversation, add_message):
    agent, investor = make_agent(), make_investor()
    conversation = make_conversation(investor, agent)
    add_message(conversation, agent.agent_id, "hi", at=at(0))

    aggregator = UnreadAggregator()

    def broken(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection reset"))

    monkeypatch.setattr(aggregator, "count_unread", broken)

    summary = aggregator.compute(investor.investor_id, "investor")

    assert summary.conversations == []
    assert "connection reset" in caplog.text


def test_listing_failure_raises_transient_error(monkeypatch, app, db_session, make_investor):
    investor = make_investor()

    def broken_query(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("backend down"))

    monkeypatch.setattr(db_session, "query", broken_query)

    with pytest.raises(TransientBackendException) as exc:
        UnreadAggregator(session=db_session).compute(investor.investor_id, "investor")

    assert "Error fetching conversations" in exc.value.message
    assert exc.value.status_code == 500


def test_cancelled_token_aborts(app, make_agent, make_investor, make_conversation, add_message):
    agent, investor = make_agent(), make_investor()
    conversation = make_conversation(investor, agent)
    add_message(conversation, agent.agent_id, "hi", at=at(0))

    token = CancellationToken()
    token.cancel()

    with pytest.raises(OperationCancelled):
        UnreadAggregator().compute(investor.investor_id, "investor", cancel_token=token)


def test_refresh_conversation_matches_full_compute(app, make_agent, make_investor, make_conversation, add_message):
    agent, investor = make_agent(), make_investor()
    other_agent = make_agent(name="Carol")
    first = make_conversation(investor, agent)
    second = make_conversation(investor, other_agent)
    add_message(first, agent.agent_id, "a", at=at(0))
    add_message(second, other_agent.agent_id, "b", at=at(1))

    aggregator = UnreadAggregator()
    cached = aggregator.compute(investor.investor_id, "investor")

    add_message(first, agent.agent_id, "c", at=at(2))
    add_message(first, agent.agent_id, "d", at=at(3))

    incremental = aggregator.refresh_conversation(cached, first.conversation_id, investor.investor_id, "investor")
    full = aggregator.compute(investor.investor_id, "investor")

    assert incremental.to_dict() == full.to_dict()
    assert incremental.conversations[0].id == first.conversation_id
