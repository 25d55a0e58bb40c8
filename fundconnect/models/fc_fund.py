"""
Model: Fund
Table: fc_funds

A fund profile uploaded by exactly one agent. Track record metrics
(IRR, MOIC) are optional.
"""

# Database
from ..config.database import db

# Helpers
from ..util.timeutil import utc_now





class Fund(db.Model):
    """ A fund offered through a placement agent... """

    # Table Name
    __tablename__ = "fc_funds"

    fund_id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    uploaded_by_agent_id = db.Column(
        db.String(36),
        db.ForeignKey("fc_agents.agent_id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    name = db.Column(db.String(255), nullable = False)

    size = db.Column(db.Numeric(18, 2), nullable = True, doc = "Target fund size in USD.")

    minimum_investment = db.Column(db.Numeric(18, 2), nullable = True)

    strategy = db.Column(db.String(255), nullable = True)

    sector_focus = db.Column(db.String(255), nullable = True)

    geography = db.Column(db.String(255), nullable = True)

    track_record_irr = db.Column(db.Float, nullable = True, doc = "Net IRR in percent.")

    track_record_moic = db.Column(db.Float, nullable = True)

    fee_structure = db.Column(db.String(255), nullable = True, doc = "e.g. '2/20'")

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now
    )

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        onupdate = utc_now
    )

    # Relationships
    agent = db.relationship("Agent", backref = "funds")
    documents = db.relationship(
        "FundDocument",
        back_populates = "fund",
        cascade = "all, delete-orphan"
    )
    interests = db.relationship(
        "Interest",
        back_populates = "fund",
        cascade = "all, delete-orphan"
    )

    def __repr__(self):
        return f"<Fund {self.name}>"
