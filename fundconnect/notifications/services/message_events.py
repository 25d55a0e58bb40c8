"""
Service: MessageEventChannel

In-process change feed for committed rows. MessageService publishes a
MessageEvent after every message INSERT commits; notification surfaces
subscribe to it, filtered by table and operation.

Design:
  - One channel per Flask app, kept in app.extensions.
  - Subscriptions are explicit objects; a consumer must call
    unsubscribe() when it is torn down.
  - Callbacks run on the publisher's thread. A failing callback is logged
    and does not affect the publisher or the other subscribers.
"""

# Python Packages
import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, List

# Flask
from flask import current_app

# Logging
from ...util.logger import get_logger

logger = get_logger("notifications.events")

EXTENSION_KEY = "fundconnect_message_events"





@dataclass(frozen = True)
class MessageEvent:
    """ A committed change: table name, operation and the new row... """

    table: str
    operation: str
    record: Dict = field(default_factory = dict)



class Subscription:

    def __init__(self, channel, table: str, operation: str, callback: Callable):
        self.channel = channel
        self.table = table
        self.operation = operation
        self.callback = callback
        self.active = True


    def matches(self, event: MessageEvent) -> bool:
        return self.active and event.table == self.table and event.operation == self.operation


    def unsubscribe(self):
        """ Detach from the channel. Safe to call more than once... """

        if self.active:
            self.active = False
            self.channel._remove(self)



class MessageEventChannel:

    def __init__(self):
        self._lock = threading.Lock()
        self._subscriptions: List[Subscription] = []


    def subscribe(
        self,
        callback: Callable[[MessageEvent], None],
        table: str = "messages",
        operation: str = "INSERT"
    ) -> Subscription:
        """
        Register a callback for one table/operation pair.

        Returns:
            Subscription: call unsubscribe() on teardown.
        """

        subscription = Subscription(self, table, operation.upper(), callback)

        with self._lock:
            self._subscriptions.append(subscription)

        logger.info("Subscribed to %s %s (%d active)", table, operation, len(self._subscriptions))
        return subscription


    def publish(self, event: MessageEvent) -> int:
        """
        Deliver an event to every matching subscription.

        Returns:
            int: number of callbacks invoked
        """

        with self._lock:
            targets = [s for s in self._subscriptions if s.matches(event)]

        for subscription in targets:
            try:
                subscription.callback(event)

            except Exception:
                logger.exception("Subscriber failed for %s %s", event.table, event.operation)

        return len(targets)


    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)


    def _remove(self, subscription: Subscription):
        with self._lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

        logger.info("Unsubscribed from %s %s", subscription.table, subscription.operation)





def init_message_events(app) -> MessageEventChannel:
    """ Attach a fresh channel to the app... """

    channel = MessageEventChannel()
    app.extensions[EXTENSION_KEY] = channel
    return channel


def get_message_events() -> MessageEventChannel:
    """ Channel of the current app... """

    return current_app.extensions[EXTENSION_KEY]
