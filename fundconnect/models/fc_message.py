"""
Model: Message
Table: fc_messages

One message in a conversation. Messages are insert-only: never updated.
Order within a conversation is by timestamp.
"""

# Python Packages
import uuid

# Database
from ..config.database import db

# Helpers
from ..util.timeutil import utc_now, format_datetime





class Message(db.Model):
    """ A message sent by one conversation participant... """

    # Table Name
    __tablename__ = "fc_messages"

    __table_args__ = (
        db.Index("ix_fc_messages_conversation_timestamp", "conversation_id", "timestamp"),
    )

    message_id = db.Column(
        db.String(36),
        primary_key = True,
        default = lambda: str(uuid.uuid4())
    )

    conversation_id = db.Column(
        db.String(36),
        db.ForeignKey("fc_conversations.conversation_id", ondelete = "CASCADE"),
        nullable = False
    )

    sender_id = db.Column(db.String(36), nullable = False)

    content = db.Column(db.Text, nullable = False)

    timestamp = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now
    )

    # Relationship
    conversation = db.relationship(
        "Conversation",
        backref = db.backref("messages", cascade = "all, delete-orphan")
    )

    def to_dict(self) -> dict:
        return {
            "id": self.message_id,
            "conversation_id": self.conversation_id,
            "sender_id": self.sender_id,
            "content": self.content,
            "timestamp": format_datetime(self.timestamp)
        }

    def __repr__(self):
        return f"<Message {self.message_id} sender={self.sender_id}>"
