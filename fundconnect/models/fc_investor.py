"""
Model: Investor
Table: fc_investors

Investor profile, 1:1 with a user whose role is 'investor'.
An investor may have been introduced by an agent.
"""

# Database
from ..config.database import db

# Helpers
from ..util.timeutil import utc_now





class Investor(db.Model):
    """ An investor who browses funds and messages agents... """

    # Table Name
    __tablename__ = "fc_investors"

    investor_id = db.Column(
        db.String(36),
        db.ForeignKey("fc_users.user_id", ondelete = "CASCADE"),
        primary_key = True
    )

    name = db.Column(db.String(255), nullable = False)

    introducing_agent_id = db.Column(
        db.String(36),
        db.ForeignKey("fc_agents.agent_id", ondelete = "SET NULL"),
        nullable = True,
        index = True
    )

    approved = db.Column(db.Boolean, nullable = False, default = False)

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now
    )

    # Relationship
    user = db.relationship("User", backref = db.backref("investor", uselist = False))

    def __repr__(self):
        return f"<Investor {self.name}>"
