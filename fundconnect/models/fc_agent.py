"""
Model: Agent
Table: fc_agents

Placement agent profile, 1:1 with a user whose role is 'agent'.
agent_id is the user's id.
"""

# Database
from ..config.database import db

# Helpers
from ..util.timeutil import utc_now





class Agent(db.Model):
    """ A placement agent who uploads funds... """

    # Table Name
    __tablename__ = "fc_agents"

    agent_id = db.Column(
        db.String(36),
        db.ForeignKey("fc_users.user_id", ondelete = "CASCADE"),
        primary_key = True
    )

    name = db.Column(db.String(255), nullable = False)

    firm = db.Column(db.String(255), nullable = True)

    verified = db.Column(
        db.Boolean,
        nullable = False,
        default = False,
        doc = "Set by an admin once the agent's firm has been checked."
    )

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now
    )

    # Relationship
    user = db.relationship("User", backref = db.backref("agent", uselist = False))

    def __repr__(self):
        return f"<Agent {self.name}>"
