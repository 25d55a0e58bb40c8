"""
Model: Interest
Table: fc_interests

An investor's expressed interest in a fund. There is no unique constraint
on (investor_id, fund_id); the duplicate policy is a ledger setting.
dedupe_key is filled only under the reject policy and is unique, so a
concurrent duplicate fails at the database. NULL keys never collide.
"""

# Database
from ..config.database import db

# Helpers
from ..util.timeutil import utc_now





class Interest(db.Model):
    """ Investor -> fund interest record... """

    # Table Name
    __tablename__ = "fc_interests"

    interest_id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    investor_id = db.Column(
        db.String(36),
        db.ForeignKey("fc_investors.investor_id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    fund_id = db.Column(
        db.Integer,
        db.ForeignKey("fc_funds.fund_id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    timestamp = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now
    )

    dedupe_key = db.Column(db.String(80), nullable = True, unique = True)

    # Relationships
    fund = db.relationship("Fund", back_populates = "interests")
    investor = db.relationship("Investor", backref = "interests")

    def __repr__(self):
        return f"<Interest investor={self.investor_id} fund={self.fund_id}>"
