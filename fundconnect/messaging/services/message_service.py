"""
Service: MessageService

Reads and writes messages inside an existing conversation, and moves the
caller's last-read mark.

Data tables:
  fc_conversations → investor_last_read / agent_last_read
  fc_messages      → one row per message, insert-only

Design:
  - Every entry point checks that the caller is the conversation's
    participant for their role (403 otherwise).
  - send_message() publishes a messages/INSERT event only after the
    commit succeeds.
  - mark_read() commits before returning, so a page refresh right after
    opening never shows the badge again.
"""

# Python Packages
from typing import Dict, List, Optional

# SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

# Database
from ...config.database import db

# Models
from ...models.fc_conversation import Conversation
from ...models.fc_message import Message

# Events
from ...notifications.services.message_events import MessageEvent, get_message_events

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import (
    NotFoundException,
    PolicyDeniedException,
    TransientBackendException
)

# App Messages
from ...util import messages

# Helpers
from ...util.timeutil import utc_now, format_datetime
from ...util.logger import get_logger

logger = get_logger("messaging.messages")


PARTICIPANT_FIELDS = {
    constants.ROLE_INVESTOR: ("investor_id", "investor_last_read"),
    constants.ROLE_AGENT: ("agent_id", "agent_last_read"),
}





class MessageService:

    def __init__(self, session = None, events = None):
        self.session = session or db.session
        self._events = events


    @property
    def events(self):
        if self._events is None:
            self._events = get_message_events()
        return self._events


    # ── Access ────────────────────────────────────────────────────────────────

    def get_conversation(self, conversation_id: str, user_id: str, role: str) -> Conversation:
        """
        Load a conversation the caller participates in.

        Raises:
            NotFoundException: no such conversation
            PolicyDeniedException: caller is not its participant for role
        """

        id_field, _ = self._fields(role)

        try:
            conversation = self.session.get(Conversation, conversation_id)

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = f"Error fetching conversation: {error}",
                details = str(error)
            )

        if not conversation:
            raise NotFoundException(messages.ERROR["CONVERSATION_NOT_FOUND"])

        if str(getattr(conversation, id_field)) != str(user_id):
            raise PolicyDeniedException(messages.ERROR["CONVERSATION_ACCESS_DENIED"])

        return conversation


    # ── Messages ──────────────────────────────────────────────────────────────

    def list_messages(
        self,
        conversation_id: str,
        user_id: str,
        role: str,
        limit: int = constants.CONVERSATION_MESSAGES_LIMIT
    ) -> List[Dict]:
        """
        Return the newest *limit* messages, oldest first.
        """

        self.get_conversation(conversation_id, user_id, role)

        try:
            rows = (
                self.session.query(Message)
                .filter(Message.conversation_id == conversation_id)
                .order_by(Message.timestamp.desc())
                .limit(limit)
                .all()
            )

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = f"Error fetching messages: {error}",
                details = str(error)
            )

        return [row.to_dict() for row in reversed(rows)]


    def send_message(self, conversation_id: str, user_id: str, role: str, content: str) -> Dict:
        """
        Append a message from the caller and publish the INSERT event.

        Returns:
            dict: the stored message
        """

        self.get_conversation(conversation_id, user_id, role)

        message = Message(
            conversation_id = conversation_id,
            sender_id = user_id,
            content = content.strip(),
            timestamp = utc_now()
        )

        try:
            self.session.add(message)
            self.session.commit()

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = f"{messages.ERROR['MESSAGE_SEND_FAILED']}: {error}",
                details = str(error)
            )

        record = message.to_dict()
        self.events.publish(MessageEvent(table = "messages", operation = "INSERT", record = record))

        return record


    # ── Read marks ────────────────────────────────────────────────────────────

    def mark_read(self, conversation_id: str, user_id: str, role: str) -> Dict:
        """
        Move the caller's own last-read mark to now. Only the caller's
        field is touched.
        """

        conversation = self.get_conversation(conversation_id, user_id, role)
        _, last_read_field = self._fields(role)

        read_at = utc_now()

        try:
            setattr(conversation, last_read_field, read_at)
            self.session.commit()

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = f"{messages.ERROR['MARK_READ_FAILED']}: {error}",
                details = str(error)
            )

        return {
            "conversation_id": conversation_id,
            last_read_field: format_datetime(read_at)
        }


    def open_conversation(self, conversation_id: str, user_id: str, role: str) -> Dict:
        """
        Mark the conversation read, then return it with its messages.
        """

        read_state = self.mark_read(conversation_id, user_id, role)
        conversation = self.get_conversation(conversation_id, user_id, role)

        return {
            **self.serialize_conversation(conversation, role),
            "last_read": read_state,
            "messages": self.list_messages(conversation_id, user_id, role)
        }


    # ── Helpers ───────────────────────────────────────────────────────────────

    def serialize_conversation(self, conversation: Conversation, role: Optional[str] = None) -> Dict:
        data = {
            "conversation_id": conversation.conversation_id,
            "investor_id": conversation.investor_id,
            "agent_id": conversation.agent_id,
            "created_at": format_datetime(conversation.created_at),
            "investor_last_read": format_datetime(conversation.investor_last_read),
            "agent_last_read": format_datetime(conversation.agent_last_read),
        }

        if role == constants.ROLE_INVESTOR:
            agent = conversation.agent
            data["other_participant"] = {
                "id": conversation.agent_id,
                "name": agent.name if agent and agent.name else "Agent",
                "role": constants.ROLE_AGENT
            }

        elif role == constants.ROLE_AGENT:
            investor = conversation.investor
            data["other_participant"] = {
                "id": conversation.investor_id,
                "name": investor.name if investor and investor.name else "Investor",
                "role": constants.ROLE_INVESTOR
            }

        return data


    def _fields(self, role: str):
        if role not in PARTICIPANT_FIELDS:
            raise PolicyDeniedException(messages.ERROR["CONVERSATION_ACCESS_DENIED"])
        return PARTICIPANT_FIELDS[role]
