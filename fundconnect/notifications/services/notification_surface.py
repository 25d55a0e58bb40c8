"""
Service: NotificationSurface

Live unread state for one signed-in user. Owns:
  - the latest UnreadSummary (and the last error text, if any)
  - a subscription to messages/INSERT events
  - a debounce timer that coalesces bursts of inserts
  - the cancellation token of the running aggregation

Per conversation state is one of: unread / read / no-messages.
unread → read only happens through open_conversation(), which commits the
new last-read mark before the conversation is returned.

Lifecycle:
    surface = NotificationSurface(user_id, role)
    surface.start()          # subscribe + first refresh
    ...
    surface.close()          # unsubscribe, cancel, stop timers
After close() nothing updates the surface's state or calls its listeners.
"""

# Python Packages
import threading
from typing import Callable, Dict, List, Optional, Set

# Flask
from flask import current_app

# Services
from .unread_aggregator import UnreadAggregator, UnreadSummary
from .message_events import MessageEvent, get_message_events
from ...messaging.services.message_service import MessageService

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import AppException, OperationCancelled

# Helpers
from ...util.cancellation import CancellationToken
from ...util.logger import get_logger

logger = get_logger("notifications.surface")


STATE_UNREAD = "unread"
STATE_READ = "read"
STATE_NO_MESSAGES = "no-messages"





class NotificationSurface:

    def __init__(
        self,
        user_id: str,
        role: str,
        aggregator: Optional[UnreadAggregator] = None,
        events = None,
        message_service: Optional[MessageService] = None,
        debounce_seconds: Optional[float] = None,
        incremental: Optional[bool] = None,
        app = None
    ):
        self.user_id = user_id
        self.role = role

        self.aggregator = aggregator or UnreadAggregator()
        self.events = events if events is not None else get_message_events()
        self.message_service = message_service or MessageService(events = self.events)

        self.debounce_seconds = (
            constants.NOTIFICATION_DEBOUNCE_SECONDS if debounce_seconds is None else debounce_seconds
        )
        self.incremental = constants.NOTIFICATION_INCREMENTAL if incremental is None else incremental

        # Timer callbacks run outside the request; they need the app context
        self.app = app or current_app._get_current_object()

        self.summary: Optional[UnreadSummary] = None
        self.error: Optional[str] = None
        self.closed = False

        self._lock = threading.RLock()
        self._subscription = None
        self._token: Optional[CancellationToken] = None
        self._timer: Optional[threading.Timer] = None
        self._pending_conversations: Set[str] = set()
        self._listeners: List[Callable[[Dict], None]] = []


    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def start(self) -> "NotificationSurface":
        """ Subscribe to message inserts and load the first summary... """

        if self._subscription is None:
            self._subscription = self.events.subscribe(self._on_event, table = "messages", operation = "INSERT")

        self.refresh()
        return self


    def close(self):
        """ Tear down. Idempotent... """

        with self._lock:
            if self.closed:
                return

            self.closed = True

            if self._subscription is not None:
                self._subscription.unsubscribe()
                self._subscription = None

            if self._token is not None:
                self._token.cancel()

            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

            self._pending_conversations.clear()
            self._listeners.clear()


    def add_listener(self, callback: Callable[[Dict], None]):
        """ callback(snapshot) after every state change... """

        with self._lock:
            self._listeners.append(callback)


    # ── State ─────────────────────────────────────────────────────────────────

    def refresh(self) -> Optional[UnreadSummary]:
        """
        Full recomputation. A newer refresh cancels an older one still in
        flight. On failure the previous summary is kept and `error` holds
        the backend message.
        """

        with self._lock:
            if self.closed:
                return None

            if self._token is not None:
                self._token.cancel()

            token = CancellationToken()
            self._token = token

        try:
            summary = self.aggregator.compute(self.user_id, self.role, cancel_token = token)

        except OperationCancelled:
            return self.summary

        except AppException as error:
            logger.warning("Error fetching unread messages for %s: %s", self.user_id, error.message)
            with self._lock:
                if self.closed or token.cancelled:
                    return self.summary
                self.error = error.message
            self._notify()
            return self.summary

        with self._lock:
            if self.closed or token.cancelled:
                return self.summary

            self.summary = summary
            self.error = None

        self._notify()
        return summary


    def state_of(self, conversation_id: str) -> str:
        summary = self.summary
        entry = summary.find(conversation_id) if summary else None

        if entry is None:
            return STATE_NO_MESSAGES

        return STATE_UNREAD if entry.unread_count > 0 else STATE_READ


    def snapshot(self) -> Dict:
        summary = self.summary or UnreadSummary()

        return {
            **summary.to_dict(),
            "error": self.error
        }


    # ── Actions ───────────────────────────────────────────────────────────────

    def open_conversation(self, conversation_id: str) -> Dict:
        """
        Persist the read mark, then return the conversation with messages.
        """

        conversation = self.message_service.open_conversation(conversation_id, self.user_id, self.role)

        with self._lock:
            if self.closed:
                return conversation

            entry = self.summary.find(conversation_id) if self.summary else None
            if entry is not None:
                entry.unread_count = 0
                self.summary = UnreadAggregator._summarise(self.summary.conversations)

        self._notify()
        return conversation


    # ── Events ────────────────────────────────────────────────────────────────

    def _on_event(self, event: MessageEvent):
        if self.closed:
            return

        if event.record.get("sender_id") == self.user_id:
            return

        with self._lock:
            if self.closed:
                return

            conversation_id = event.record.get("conversation_id")
            if conversation_id:
                self._pending_conversations.add(conversation_id)

            if self.debounce_seconds <= 0:
                run_now = True
            else:
                run_now = False
                if self._timer is not None:
                    self._timer.cancel()

                self._timer = threading.Timer(self.debounce_seconds, self._flush_in_context)
                self._timer.daemon = True
                self._timer.start()

        if run_now:
            self._flush()


    def _flush_in_context(self):
        with self.app.app_context():
            self._flush()


    def _flush(self):
        with self._lock:
            if self.closed:
                return

            self._timer = None
            pending = set(self._pending_conversations)
            self._pending_conversations.clear()

        if self.incremental and self.summary is not None and pending:
            summary = self.summary
            for conversation_id in pending:
                summary = self.aggregator.refresh_conversation(summary, conversation_id, self.user_id, self.role)

            with self._lock:
                if self.closed:
                    return
                self.summary = summary
                self.error = None

            self._notify()
            return

        self.refresh()


    def _notify(self):
        with self._lock:
            if self.closed:
                return
            listeners = list(self._listeners)

        snapshot = self.snapshot()
        for callback in listeners:
            try:
                callback(snapshot)

            except Exception:
                logger.exception("Notification listener failed for %s", self.user_id)
