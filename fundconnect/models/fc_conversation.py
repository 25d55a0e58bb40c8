"""
Model: Conversation
Table: fc_conversations

The single messaging channel between one investor and one agent.
UNIQUE(investor_id, agent_id) backs the find-or-create in
ConversationResolver.

investor_last_read / agent_last_read are per-participant high-water marks;
each is written only by its own participant.
"""

# Python Packages
import uuid

# Database
from ..config.database import db

# Helpers
from ..util.timeutil import utc_now





class Conversation(db.Model):
    """ An investor <-> agent conversation... """

    # Table Name
    __tablename__ = "fc_conversations"

    __table_args__ = (
        db.UniqueConstraint("investor_id", "agent_id", name = "uq_fc_conversations_pair"),
    )

    conversation_id = db.Column(
        db.String(36),
        primary_key = True,
        default = lambda: str(uuid.uuid4())
    )

    investor_id = db.Column(
        db.String(36),
        db.ForeignKey("fc_investors.investor_id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    agent_id = db.Column(
        db.String(36),
        db.ForeignKey("fc_agents.agent_id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now
    )

    investor_last_read = db.Column(db.DateTime(timezone = True), nullable = True)

    agent_last_read = db.Column(db.DateTime(timezone = True), nullable = True)

    # Relationships
    investor = db.relationship("Investor")
    agent = db.relationship("Agent")

    def __repr__(self):
        return f"<Conversation {self.conversation_id}>"
