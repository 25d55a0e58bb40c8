"""
Model: User
Table: fc_users

Identity record. Every agent and investor profile hangs off one user row
and shares its id. Role is one of agent / investor / admin.
"""

# Python Packages
import uuid

# Database
from ..config.database import db

# Helpers
from ..util.timeutil import utc_now





class User(db.Model):
    """ A Fund Connect account... """

    # Table Name
    __tablename__ = "fc_users"

    user_id = db.Column(
        db.String(36),
        primary_key = True,
        default = lambda: str(uuid.uuid4())
    )

    email = db.Column(
        db.String(255),
        nullable = False,
        unique = True,
        index = True
    )

    password_hash = db.Column(db.String(255), nullable = False)

    role = db.Column(
        db.String(20),
        nullable = False,
        doc = "One of: agent / investor / admin"
    )

    email_verified = db.Column(db.Boolean, nullable = False, default = False)

    verification_sent_at = db.Column(db.DateTime(timezone = True), nullable = True)

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now
    )

    def __repr__(self):
        return f"<User {self.email} role={self.role}>"
