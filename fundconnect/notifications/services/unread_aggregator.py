"""
Service: UnreadAggregator

Computes per-conversation and total unread counts for one user.

Counting rules (per conversation the user takes part in, for their role):
  - Only the newest `window` messages are inspected. Unread backlogs
    deeper than the window under-report; UNREAD_COUNT_MODE=exact switches
    to a COUNT query over the whole conversation instead.
  - Messages sent by the user never count.
  - Newest message sent by the user         → 0 unread, only with
                                              UNREAD_SELF_REPLY_CLEARS=true.
  - <role>_last_read unset                  → every fetched message from the
                                              other participant is unread.
  - <role>_last_read set                    → fetched messages from the other
                                              participant newer than it.
  - No messages                             → conversation left out.

Result order: unread count desc, then last message time desc.

Failures:
  - Listing the user's conversations fails → TransientBackendException.
  - One conversation's messages fail       → logged, conversation skipped.
"""

# Python Packages
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

# SQLAlchemy
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

# Database
from ...config.database import db

# Models
from ...models.fc_conversation import Conversation
from ...models.fc_message import Message

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import PolicyDeniedException, TransientBackendException

# App Messages
from ...util import messages

# Helpers
from ...util.cancellation import CancellationToken
from ...util.timeutil import as_utc
from ...util.logger import get_logger

logger = get_logger("notifications.unread")


ROLE_FIELDS = {
    constants.ROLE_INVESTOR: ("investor_id", "investor_last_read"),
    constants.ROLE_AGENT: ("agent_id", "agent_last_read"),
}

FALLBACK_NAMES = {
    constants.ROLE_INVESTOR: "Agent",
    constants.ROLE_AGENT: "Investor",
}





@dataclass
class ConversationUnread:
    id: str
    other_participant_name: str
    last_message: Dict
    unread_count: int
    last_message_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "other_participant_name": self.other_participant_name,
            "last_message": self.last_message,
            "unread_count": self.unread_count
        }



@dataclass
class UnreadSummary:
    total_unread: int = 0
    conversations: List[ConversationUnread] = field(default_factory = list)

    def find(self, conversation_id: str) -> Optional[ConversationUnread]:
        for entry in self.conversations:
            if entry.id == conversation_id:
                return entry
        return None

    def to_dict(self) -> dict:
        return {
            "total_unread": self.total_unread,
            "conversations": [entry.to_dict() for entry in self.conversations]
        }





class UnreadAggregator:

    def __init__(
        self,
        session = None,
        window: int = None,
        count_mode: str = None,
        self_reply_clears: bool = None
    ):
        self.session = session or db.session
        self.window = window or constants.UNREAD_MESSAGE_WINDOW
        self.count_mode = count_mode or constants.UNREAD_COUNT_MODE
        self.self_reply_clears = (
            constants.UNREAD_SELF_REPLY_CLEARS if self_reply_clears is None else self_reply_clears
        )


    def compute(
        self,
        user_id: str,
        role: str,
        cancel_token: Optional[CancellationToken] = None
    ) -> UnreadSummary:
        """
        Full recomputation for one user.

        Args:
            user_id:      Current user
            role:         'investor' or 'agent'
            cancel_token: Checked between conversations

        Returns:
            UnreadSummary
        """

        id_field, _ = self._fields(role)

        try:
            conversations = (
                self.session.query(Conversation)
                .filter(getattr(Conversation, id_field) == user_id)
                .all()
            )

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = f"{messages.ERROR['CONVERSATIONS_FETCH_FAILED']}: {error}",
                details = str(error)
            )

        entries = []
        for conversation in conversations:
            if cancel_token:
                cancel_token.raise_if_cancelled()

            entry = self._conversation_entry(conversation, user_id, role)
            if entry:
                entries.append(entry)

        if cancel_token:
            cancel_token.raise_if_cancelled()

        return self._summarise(entries)


    def refresh_conversation(
        self,
        summary: UnreadSummary,
        conversation_id: str,
        user_id: str,
        role: str
    ) -> UnreadSummary:
        """
        Incremental update: recount one conversation after a new message and
        merge it into an existing summary. Conversations the user is not part
        of leave the summary untouched.
        """

        id_field, _ = self._fields(role)

        try:
            conversation = self.session.get(Conversation, conversation_id)

        except SQLAlchemyError as error:
            self.session.rollback()
            logger.warning("Could not load conversation %s: %s", conversation_id, error)
            return summary

        if not conversation or str(getattr(conversation, id_field)) != str(user_id):
            return summary

        entries = [entry for entry in summary.conversations if entry.id != conversation_id]

        entry = self._conversation_entry(conversation, user_id, role)
        if entry:
            entries.append(entry)

        return self._summarise(entries)


    # ── Per conversation ──────────────────────────────────────────────────────

    def _conversation_entry(self, conversation, user_id: str, role: str) -> Optional[ConversationUnread]:
        """ None when the conversation has no messages or its fetch failed... """

        _, last_read_field = self._fields(role)

        try:
            recent = (
                self.session.query(Message)
                .filter(Message.conversation_id == conversation.conversation_id)
                .order_by(Message.timestamp.desc())
                .limit(self.window)
                .all()
            )

            if not recent:
                return None

            last_read = as_utc(getattr(conversation, last_read_field))

            if self.self_reply_clears and recent[0].sender_id == user_id:
                unread = 0
            elif self.count_mode == "exact":
                unread = self._count_exact(conversation.conversation_id, user_id, last_read)
            else:
                unread = self.count_unread(recent, user_id, last_read)

        except SQLAlchemyError as error:
            self.session.rollback()
            logger.warning(
                "Error fetching messages for conversation %s: %s",
                conversation.conversation_id, error
            )
            return None

        newest = recent[0]

        return ConversationUnread(
            id = conversation.conversation_id,
            other_participant_name = self._other_participant_name(conversation, role),
            last_message = newest.to_dict(),
            unread_count = unread,
            last_message_at = as_utc(newest.timestamp)
        )


    @staticmethod
    def count_unread(recent: List[Message], user_id: str, last_read: Optional[datetime]) -> int:
        """
        Unread count over a newest-first message window.
        """

        from_other = [msg for msg in recent if msg.sender_id != user_id]

        if last_read is None:
            return len(from_other)

        return len([msg for msg in from_other if as_utc(msg.timestamp) > last_read])


    def _count_exact(self, conversation_id: str, user_id: str, last_read) -> int:
        query = (
            self.session.query(func.count(Message.message_id))
            .filter(
                Message.conversation_id == conversation_id,
                Message.sender_id != user_id
            )
        )

        if last_read is not None:
            query = query.filter(Message.timestamp > last_read)

        return query.scalar() or 0


    def _other_participant_name(self, conversation, role: str) -> str:
        fallback = FALLBACK_NAMES[role]

        try:
            if role == constants.ROLE_INVESTOR:
                profile = conversation.agent
            else:
                profile = conversation.investor

        except SQLAlchemyError as error:
            self.session.rollback()
            logger.warning("Error extracting participant name: %s", error)
            return fallback

        name = getattr(profile, "name", None) if profile else None
        return str(name) if name else fallback


    # ── Helpers ───────────────────────────────────────────────────────────────

    @staticmethod
    def _summarise(entries: List[ConversationUnread]) -> UnreadSummary:
        ordered = sorted(
            entries,
            key = lambda entry: (entry.unread_count, entry.last_message_at),
            reverse = True
        )

        return UnreadSummary(
            total_unread = sum(entry.unread_count for entry in ordered),
            conversations = ordered
        )


    @staticmethod
    def _fields(role: str):
        if role not in ROLE_FIELDS:
            raise PolicyDeniedException(messages.ERROR["CONVERSATION_ACCESS_DENIED"])
        return ROLE_FIELDS[role]
