"""
Notification Controller

Handles:
    - Unread summary for the signed-in user
    - Open a conversation from the notification list
    - Server-sent event stream backed by a NotificationSurface
"""

# Python Packages
import json
import queue
from typing import Iterator

# Database
from ..config.database import db

# Services
from .services.unread_aggregator import UnreadAggregator
from .services.notification_surface import NotificationSurface
from ..messaging.services.message_service import MessageService

# Constants
from ..base import constants

# Helpers
from ..util.logger import get_logger

logger = get_logger("notifications.controller")





class NotificationController:

    def unread_summary(self, user: dict) -> dict:
        """
        Full unread recomputation

        Args:
            user (dict): session payload

        Returns:
            dict: {"total_unread": int, "conversations": [...]}
        """

        summary = UnreadAggregator().compute(user["user_id"], user["role"])
        return summary.to_dict()



    def open_conversation(self, user: dict, conversation_id: str) -> dict:
        """
        Mark read (committed) and return the conversation with messages
        """

        return MessageService().open_conversation(
            conversation_id = conversation_id,
            user_id = user["user_id"],
            role = user["role"]
        )



    def stream(self, user: dict, once: bool = False) -> Iterator[str]:
        """
        Yield SSE frames: one "unread" event per surface state change and a
        comment line every NOTIFICATION_STREAM_KEEPALIVE seconds of silence.
        The surface is closed when the client disconnects.

        Args:
            user (dict): session payload
            once (bool): emit the first snapshot and stop
        """

        updates = queue.Queue()

        surface = NotificationSurface(user["user_id"], user["role"])
        surface.add_listener(updates.put)

        logger.info("Notification stream opened for %s", user["user_id"])

        try:
            surface.start()

            # Release the pooled connection before idling on the queue
            db.session.remove()

            while True:
                try:
                    snapshot = updates.get(timeout = constants.NOTIFICATION_STREAM_KEEPALIVE)

                except queue.Empty:
                    yield ": keepalive\n\n"
                    continue

                yield self.format_event("unread", snapshot)

                if once:
                    break

        finally:
            surface.close()
            logger.info("Notification stream closed for %s", user["user_id"])



    @staticmethod
    def format_event(event: str, data: dict) -> str:
        return f"event: {event}\ndata: {json.dumps(data)}\n\n"
