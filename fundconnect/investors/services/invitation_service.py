"""
Service: InvitationService

Agent-issued invitation codes:
  - create  → 8 character code, expires after INVITATION_CODE_TTL_DAYS
  - list    → the agent's codes, newest first
  - find_claimable → the code row if it can still be used at registration

Claiming (setting used_at / used_by_investor_id) happens inside the
registration transaction, see SessionService.register.
"""

# Python Packages
import secrets
import string
from datetime import timedelta
from typing import Dict, List

# SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

# Database
from ...config.database import db

# Models
from ...models.fc_agent import Agent
from ...models.fc_invitation_code import InvitationCode

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import (
    NotFoundException,
    ServiceException,
    TransientBackendException
)

# App Messages
from ...util import messages

# Helpers
from ...util.timeutil import utc_now
from ...util.logger import get_logger

logger = get_logger("investors.invitations")

CODE_LENGTH = 8
CODE_ALPHABET = string.ascii_uppercase + string.digits
MAX_CODE_ATTEMPTS = 5





class InvitationService:

    def __init__(self, session = None):
        self.session = session or db.session


    def create_invitation(self, agent_id: str, investor_name: str, investor_email: str) -> Dict:
        """
        Issue a new code for a prospective investor.

        Args:
            agent_id (str): inviting agent
            investor_name (str)
            investor_email (str)

        Returns:
            dict: the invitation
        """

        if not self.session.get(Agent, agent_id):
            raise NotFoundException(messages.ERROR["AGENT_NOT_FOUND"])

        now = utc_now()
        invitation = InvitationCode(
            code = self._unused_code(),
            agent_id = agent_id,
            investor_name = investor_name.strip(),
            investor_email = investor_email.strip().lower(),
            created_at = now,
            expires_at = now + timedelta(days = constants.INVITATION_CODE_TTL_DAYS)
        )

        try:
            self.session.add(invitation)
            self.session.commit()

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = messages.ERROR["INVITATION_CREATE_FAILED"],
                details = str(error)
            )

        logger.info("Agent %s created invitation %s", agent_id, invitation.code)
        return invitation.to_dict()


    def list_for_agent(self, agent_id: str) -> List[Dict]:
        try:
            rows = (
                self.session.query(InvitationCode)
                .filter(InvitationCode.agent_id == agent_id)
                .order_by(InvitationCode.created_at.desc())
                .all()
            )

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = messages.ERROR["INVESTORS_FETCH_FAILED"],
                details = str(error)
            )

        return [row.to_dict() for row in rows]


    def find_claimable(self, code: str) -> InvitationCode:
        """
        The invitation for *code* (case-insensitive) if it is unused and not
        expired; ServiceException (400) otherwise.
        """

        invitation = self.session.get(InvitationCode, str(code).strip().upper())

        if not invitation:
            raise ServiceException(
                error_code = "INVITATION_CODE_INVALID",
                message = messages.ERROR["INVITATION_CODE_INVALID"]
            )

        if invitation.used_at is not None:
            raise ServiceException(
                error_code = "INVITATION_CODE_USED",
                message = messages.ERROR["INVITATION_CODE_USED"]
            )

        if invitation.is_expired(utc_now()):
            raise ServiceException(
                error_code = "INVITATION_CODE_EXPIRED",
                message = messages.ERROR["INVITATION_CODE_EXPIRED"]
            )

        return invitation


    def _unused_code(self) -> str:
        for _ in range(MAX_CODE_ATTEMPTS):
            code = "".join(secrets.choice(CODE_ALPHABET) for _ in range(CODE_LENGTH))
            if not self.session.get(InvitationCode, code):
                return code

        raise TransientBackendException(message = messages.ERROR["INVITATION_CREATE_FAILED"])
