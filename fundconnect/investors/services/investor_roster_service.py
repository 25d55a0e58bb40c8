"""
Service: InvestorRosterService

The agent's view of investors.

  - list_for_agent   → investors the agent introduced (introducing_agent_id)
  - get_for_agent    → one investor profile plus their interests in the
                       agent's funds

An agent may open an investor they introduced, one who has expressed
interest in one of their funds, or one they share a conversation with.
"""

# Python Packages
from typing import Dict, List

# SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

# Database
from ...config.database import db

# Models
from ...models.fc_conversation import Conversation
from ...models.fc_fund import Fund
from ...models.fc_interest import Interest
from ...models.fc_investor import Investor

# Serializers
from ...funds.services.list_fund_service import serialize_fund

# Exceptions
from ...util.exceptions import (
    NotFoundException,
    PolicyDeniedException,
    TransientBackendException
)

# App Messages
from ...util import messages

# Helpers
from ...util.timeutil import format_datetime





class InvestorRosterService:

    def __init__(self, session = None):
        self.session = session or db.session


    def list_for_agent(self, agent_id: str) -> List[Dict]:
        try:
            rows = (
                self.session.query(Investor)
                .filter(Investor.introducing_agent_id == agent_id)
                .order_by(Investor.name.asc())
                .all()
            )

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = messages.ERROR["INVESTORS_FETCH_FAILED"],
                details = str(error)
            )

        return [self._serialize(row) for row in rows]


    def get_for_agent(self, agent_id: str, investor_id: str) -> Dict:
        """
        Raises:
            NotFoundException: no such investor
            PolicyDeniedException: the investor is not connected to the agent
        """

        investor = self.session.get(Investor, investor_id)
        if not investor:
            raise NotFoundException(messages.ERROR["INVESTOR_NOT_FOUND"])

        try:
            interests = (
                self.session.query(Interest)
                .join(Fund, Interest.fund_id == Fund.fund_id)
                .filter(
                    Interest.investor_id == investor_id,
                    Fund.uploaded_by_agent_id == agent_id
                )
                .order_by(Interest.timestamp.desc(), Interest.interest_id.desc())
                .all()
            )

            in_conversation = (
                self.session.query(Conversation.conversation_id)
                .filter(
                    Conversation.investor_id == investor_id,
                    Conversation.agent_id == agent_id
                )
                .first()
            ) is not None

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = messages.ERROR["INVESTORS_FETCH_FAILED"],
                details = str(error)
            )

        introduced = investor.introducing_agent_id == agent_id

        if not (introduced or interests or in_conversation):
            raise PolicyDeniedException(messages.ERROR["INVESTOR_ACCESS_DENIED"])

        return {
            **self._serialize(investor),
            "introduced_by_you": introduced,
            "interests": [
                {
                    "interest_id": row.interest_id,
                    "timestamp": format_datetime(row.timestamp),
                    "fund": serialize_fund(row.fund)
                }
                for row in interests
            ]
        }


    @staticmethod
    def _serialize(investor: Investor) -> Dict:
        return {
            "investor_id": investor.investor_id,
            "name": investor.name,
            "approved": investor.approved,
            "introducing_agent_id": investor.introducing_agent_id,
            "created_at": format_datetime(investor.created_at)
        }
