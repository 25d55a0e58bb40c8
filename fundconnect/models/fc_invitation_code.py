"""
Model: InvitationCode
Table: fc_invitation_codes

A code an agent hands to a prospective investor. Registering with it links
the investor to the agent (introducing_agent_id) and approves the account.
Codes are single use and expire.
"""

# Database
from ..config.database import db

# Helpers
from ..util.timeutil import utc_now, as_utc, format_datetime





class InvitationCode(db.Model):
    """ Agent -> investor invitation... """

    # Table Name
    __tablename__ = "fc_invitation_codes"

    code = db.Column(db.String(16), primary_key = True)

    agent_id = db.Column(
        db.String(36),
        db.ForeignKey("fc_agents.agent_id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    # Who the invitation is meant for
    investor_name = db.Column(db.String(255), nullable = False)
    investor_email = db.Column(db.String(255), nullable = False)

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now
    )

    expires_at = db.Column(db.DateTime(timezone = True), nullable = False)

    used_at = db.Column(db.DateTime(timezone = True), nullable = True)

    used_by_investor_id = db.Column(
        db.String(36),
        db.ForeignKey("fc_investors.investor_id", ondelete = "SET NULL"),
        nullable = True
    )

    # Relationship
    agent = db.relationship("Agent", backref = "invitation_codes")

    def is_expired(self, now) -> bool:
        return as_utc(self.expires_at) <= now

    def to_dict(self):
        return {
            "code": self.code,
            "agent_id": self.agent_id,
            "investor_name": self.investor_name,
            "investor_email": self.investor_email,
            "created_at": format_datetime(self.created_at),
            "expires_at": format_datetime(self.expires_at),
            "used_at": format_datetime(self.used_at),
            "used_by_investor_id": self.used_by_investor_id
        }

    def __repr__(self):
        return f"<InvitationCode {self.code} agent={self.agent_id}>"
