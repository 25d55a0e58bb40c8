"""
Service: InterestLedger

Investor → fund expressions of interest.

Data table:
  fc_interests (interest_id, investor_id, fund_id, timestamp)

Rules:
  - The fund must exist.
  - Duplicates follow INTEREST_DUPLICATE_POLICY:
        allow  → every add creates a new row (no uniqueness)
        reject → a second add for the same pair fails; a concurrent second
                 add is stopped by the unique dedupe_key
  - Only the owning investor may remove an interest, and only with an
    explicit confirmation.
"""

# Python Packages
from typing import Dict, List, Optional

# SQLAlchemy
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import joinedload

# Database
from ...config.database import db

# Models
from ...models.fc_fund import Fund
from ...models.fc_interest import Interest

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import (
    NotFoundException,
    PolicyDeniedException,
    ServiceException,
    TransientBackendException,
    ValidationException
)

# App Messages
from ...util import messages

# Helpers
from ...util.timeutil import utc_now, format_datetime
from ...util.logger import get_logger

logger = get_logger("interests.ledger")

DUPLICATE_ALLOW = "allow"
DUPLICATE_REJECT = "reject"
UNKNOWN_INVESTOR = "Unknown Investor"





class InterestLedger:

    def __init__(self, session = None, duplicate_policy: str = None):
        self.session = session or db.session
        self.duplicate_policy = duplicate_policy or constants.INTEREST_DUPLICATE_POLICY


    # ── Writes ────────────────────────────────────────────────────────────────

    def add_interest(self, investor_id: str, fund_id: int) -> Dict:
        """
        Record that the investor is interested in the fund.

        Returns:
            dict: the new interest row
        """

        fund = self.session.get(Fund, fund_id)
        if not fund:
            raise NotFoundException(messages.ERROR["FUND_NOT_FOUND"])

        rejecting = self.duplicate_policy == DUPLICATE_REJECT

        if rejecting and self.has_interest(investor_id, fund_id):
            raise self._already_exists()

        interest = Interest(
            investor_id = investor_id,
            fund_id = fund_id,
            timestamp = utc_now(),
            dedupe_key = f"{investor_id}:{fund_id}" if rejecting else None
        )

        try:
            self.session.add(interest)
            self.session.commit()

        except IntegrityError as error:
            self.session.rollback()

            if rejecting:
                logger.info("Duplicate interest blocked for %s on fund %s", investor_id, fund_id)
                raise self._already_exists()

            raise TransientBackendException(
                message = messages.ERROR["INTEREST_CREATE_FAILED"],
                details = str(error)
            )

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = messages.ERROR["INTEREST_CREATE_FAILED"],
                details = str(error)
            )

        logger.info("Investor %s expressed interest in fund %s", investor_id, fund_id)
        return self._serialize(interest)


    def remove_interest(self, interest_id: int, investor_id: str, confirmed: bool = False) -> Dict:
        """
        Withdraw an interest. Requires confirmed=True.
        """

        if not confirmed:
            raise ValidationException(
                message = messages.ERROR["INTEREST_CONFIRM_REQUIRED"]
            )

        interest = self.session.get(Interest, interest_id)
        if not interest:
            raise NotFoundException(messages.ERROR["INTEREST_NOT_FOUND"])

        if str(interest.investor_id) != str(investor_id):
            raise PolicyDeniedException(messages.ERROR["INTEREST_NOT_OWNED"])

        try:
            self.session.delete(interest)
            self.session.commit()

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = messages.ERROR["INTEREST_DELETE_FAILED"],
                details = str(error)
            )

        logger.info("Investor %s removed interest %s", investor_id, interest_id)

        return {
            "interest_id": interest_id,
            "message": messages.SUCCESS["INTEREST_REMOVED"]
        }


    # ── Reads ─────────────────────────────────────────────────────────────────

    def has_interest(self, investor_id: str, fund_id: int) -> bool:
        return (
            self.session.query(Interest.interest_id)
            .filter(Interest.investor_id == investor_id, Interest.fund_id == fund_id)
            .first()
        ) is not None


    def list_for_investor(self, investor_id: str) -> List[Dict]:
        """
        The investor's interests, newest first, with fund and agent details.
        """

        try:
            rows = (
                self.session.query(Interest)
                .options(joinedload(Interest.fund).joinedload(Fund.agent))
                .filter(Interest.investor_id == investor_id)
                .order_by(Interest.timestamp.desc(), Interest.interest_id.desc())
                .all()
            )

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = messages.ERROR["INTERESTS_FETCH_FAILED"],
                details = str(error)
            )

        return [self._serialize(row, include_fund = True) for row in rows]


    def list_for_agent(self, agent_id: str, fund_id: Optional[int] = None) -> List[Dict]:
        """
        Interests on funds the agent uploaded, optionally for one fund.
        """

        try:
            query = (
                self.session.query(Interest)
                .join(Fund, Interest.fund_id == Fund.fund_id)
                .options(joinedload(Interest.investor))
                .filter(Fund.uploaded_by_agent_id == agent_id)
            )

            if fund_id is not None:
                query = query.filter(Interest.fund_id == fund_id)

            rows = query.order_by(Interest.timestamp.desc(), Interest.interest_id.desc()).all()

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = messages.ERROR["INTERESTS_FETCH_FAILED"],
                details = str(error)
            )

        return [
            {
                **self._serialize(row),
                "investor_name": row.investor.name if row.investor and row.investor.name else UNKNOWN_INVESTOR,
                "fund_name": row.fund.name if row.fund else None
            }
            for row in rows
        ]


    # ── Helpers ───────────────────────────────────────────────────────────────

    @staticmethod
    def _already_exists() -> ServiceException:
        return ServiceException(
            error_code = "INTEREST_ALREADY_EXISTS",
            message = messages.ERROR["INTEREST_ALREADY_EXISTS"]
        )


    @staticmethod
    def _serialize(interest: Interest, include_fund: bool = False) -> Dict:
        data = {
            "interest_id": interest.interest_id,
            "investor_id": interest.investor_id,
            "fund_id": interest.fund_id,
            "timestamp": format_datetime(interest.timestamp)
        }

        if include_fund:
            fund = interest.fund
            agent = fund.agent if fund else None

            data["fund"] = {
                "fund_id": fund.fund_id,
                "name": fund.name,
                "strategy": fund.strategy,
                "sector_focus": fund.sector_focus,
                "geography": fund.geography,
                "agent": {
                    "agent_id": agent.agent_id if agent else None,
                    "name": agent.name if agent else None,
                    "firm": agent.firm if agent else None
                }
            } if fund else None

        return data
