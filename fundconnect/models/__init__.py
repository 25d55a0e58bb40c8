"""
Models Package
Registers all SQLAlchemy ORM models so they are discoverable by Flask-SQLAlchemy.

Import order matters: models with foreign keys must be imported after
the models they reference.
"""

from .fc_user import User
from .fc_agent import Agent
from .fc_investor import Investor
from .fc_invitation_code import InvitationCode

from .fc_fund import Fund
from .fc_fund_document import FundDocument
from .fc_interest import Interest

from .fc_conversation import Conversation
from .fc_message import Message

__all__ = [
    "User",
    "Agent",
    "Investor",
    "InvitationCode",
    "Fund",
    "FundDocument",
    "Interest",
    "Conversation",
    "Message",
]
