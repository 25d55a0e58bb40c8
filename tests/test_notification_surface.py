import threading
import time
from datetime import datetime, timezone

from fundconnect.messaging.services.message_service import MessageService
from fundconnect.notifications.services.message_events import MessageEvent
from fundconnect.notifications.services.notification_surface import (
    STATE_NO_MESSAGES,
    STATE_READ,
    STATE_UNREAD,
    NotificationSurface,
)
from fundconnect.notifications.services.unread_aggregator import UnreadSummary
from fundconnect.util.exceptions import TransientBackendException

T = datetime(2024, 3, 1, 9, 0, 0, tzinfo=timezone.utc)


class CountingAggregator:
    """Stands in for UnreadAggregator; records how often a full compute runs."""

    def __init__(self):
        self.calls = 0
        self.fail_next = False
        self.computed = threading.Event()

    def compute(self, user_id, role, cancel_token=None):
        self.calls += 1
        self.computed.set()
        if self.fail_next:
            self.fail_next = False
            raise TransientBackendException("Error fetching conversations: backend down")
        return UnreadSummary(total_unread=self.calls)

    def refresh_conversation(self, summary, conversation_id, user_id, role):
        return summary


def insert_event(sender_id, conversation_id="c-1"):
    return MessageEvent(
        table="messages",
        operation="INSERT",
        record={"conversation_id": conversation_id, "sender_id": sender_id, "content": "hi"},
    )


def make_surface(app, events, aggregator, **kwargs):
    kwargs.setdefault("debounce_seconds", 0)
    return NotificationSurface("user-1", "agent", aggregator=aggregator, events=events, app=app, **kwargs)


def test_start_subscribes_and_computes(app, events):
    aggregator = CountingAggregator()
    surface = make_surface(app, events, aggregator).start()

    assert aggregator.calls == 1
    assert events.subscriber_count() == 1
    assert surface.snapshot() == {"total_unread": 1, "conversations": [], "error": None}

    surface.close()


def test_own_messages_are_ignored(app, events):
    aggregator = CountingAggregator()
    surface = make_surface(app, events, aggregator).start()

    events.publish(insert_event("user-1"))
    assert aggregator.calls == 1

    events.publish(insert_event("someone-else"))
    assert aggregator.calls == 2

    surface.close()


def test_other_tables_and_operations_are_ignored(app, events):
    aggregator = CountingAggregator()
    surface = make_surface(app, events, aggregator).start()

    events.publish(MessageEvent(table="interests", operation="INSERT", record={"sender_id": "x"}))
    events.publish(MessageEvent(table="messages", operation="UPDATE", record={"sender_id": "x"}))

    assert aggregator.calls == 1
    surface.close()


def test_burst_of_inserts_is_debounced_into_one_recompute(app, events):
    aggregator = CountingAggregator()
    surface = make_surface(app, events, aggregator, debounce_seconds=0.05).start()
    aggregator.computed.clear()

    for _ in range(5):
        events.publish(insert_event("someone-else"))

    assert aggregator.computed.wait(timeout=2)
    time.sleep(0.2)

    assert aggregator.calls == 2
    surface.close()


def test_close_stops_updates(app, events):
    aggregator = CountingAggregator()
    seen = []
    surface = make_surface(app, events, aggregator).start()
    surface.add_listener(seen.append)

    surface.close()
    surface.close()
    events.publish(insert_event("someone-else"))

    assert aggregator.calls == 1
    assert seen == []
    assert events.subscriber_count() == 0
    assert surface.refresh() is None


def test_close_cancels_pending_debounce(app, events):
    aggregator = CountingAggregator()
    surface = make_surface(app, events, aggregator, debounce_seconds=0.1).start()

    events.publish(insert_event("someone-else"))
    surface.close()
    time.sleep(0.3)

    assert aggregator.calls == 1
    assert surface._token.cancelled


def test_refresh_failure_keeps_last_state_and_exposes_error(app, events):
    aggregator = CountingAggregator()
    seen = []
    surface = make_surface(app, events, aggregator).start()
    surface.add_listener(seen.append)

    aggregator.fail_next = True
    surface.refresh()

    assert surface.summary.total_unread == 1
    assert surface.error == "Error fetching conversations: backend down"
    assert seen[-1]["error"] == surface.error

    surface.refresh()
    assert surface.error is None
    assert surface.summary.total_unread == 3

    surface.close()


def test_states_and_open_conversation(app, events, make_agent, make_investor, make_conversation, add_message):
    agent, investor = make_agent(), make_investor()
    other_agent = make_agent(name="Carol")
    conversation = make_conversation(investor, agent)
    empty = make_conversation(investor, other_agent)
    add_message(conversation, agent.agent_id, "Welcome", at=T)

    surface = NotificationSurface(investor.investor_id, "investor", events=events, app=app, debounce_seconds=0)
    surface.start()

    assert surface.state_of(conversation.conversation_id) == STATE_UNREAD
    assert surface.state_of(empty.conversation_id) == STATE_NO_MESSAGES

    opened = surface.open_conversation(conversation.conversation_id)

    assert opened["investor_last_read"] is not None
    assert [m["content"] for m in opened["messages"]] == ["Welcome"]
    assert surface.state_of(conversation.conversation_id) == STATE_READ
    assert surface.summary.total_unread == 0

    # Persisted: a fresh recompute agrees
    surface.refresh()
    assert surface.state_of(conversation.conversation_id) == STATE_READ

    surface.close()


def test_live_insert_updates_state(app, events, make_agent, make_investor, make_conversation):
    agent, investor = make_agent(), make_investor()
    conversation = make_conversation(investor, agent)
    updates = []

    surface = NotificationSurface(agent.agent_id, "agent", events=events, app=app, debounce_seconds=0)
    surface.add_listener(updates.append)
    surface.start()
    assert surface.state_of(conversation.conversation_id) == STATE_NO_MESSAGES

    MessageService(events=events).send_message(
        conversation.conversation_id, investor.investor_id, "investor", "Hello"
    )

    assert surface.state_of(conversation.conversation_id) == STATE_UNREAD
    assert updates[-1]["total_unread"] == 1
    assert updates[-1]["conversations"][0]["other_participant_name"] == "Alice"

    surface.close()


def test_incremental_mode_matches_full_recompute(app, events, make_agent, make_investor, make_conversation, add_message):
    agent, investor = make_agent(), make_investor()
    carol = make_investor(name="Carol")
    first = make_conversation(investor, agent)
    second = make_conversation(carol, agent)
    add_message(second, carol.investor_id, "earlier", at=T)

    full = NotificationSurface(agent.agent_id, "agent", events=events, app=app, debounce_seconds=0, incremental=False)
    incremental = NotificationSurface(agent.agent_id, "agent", events=events, app=app, debounce_seconds=0, incremental=True)
    full.start()
    incremental.start()

    service = MessageService(events=events)
    service.send_message(first.conversation_id, investor.investor_id, "investor", "one")
    service.send_message(first.conversation_id, investor.investor_id, "investor", "two")
    service.send_message(second.conversation_id, carol.investor_id, "investor", "three")

    assert incremental.snapshot() == full.snapshot()
    assert full.summary.total_unread == 4

    full.close()
    incremental.close()
