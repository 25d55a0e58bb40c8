"""
Add Fund Service

Handles:
    - Create Fund profile for the signed-in agent
"""

# Database
from ...config.database import db

# Models
from ...models.fc_fund import Fund

# Services
from .list_fund_service import serialize_fund, FUND_NUMBER_FIELDS, FUND_TEXT_FIELDS

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages

# Logging
from ...util.logger import get_logger

logger = get_logger("funds.add")





class AddFundService:

    def create_fund(self, agent_id: str, args: dict) -> dict:
        """
        Create fund

        Args:
            agent_id (str): uploading agent
            args (dict):
                {
                    "name": str,
                    "size": float (optional),
                    "minimum_investment": float (optional),
                    "strategy": str (optional),
                    ...
                }

        Returns:
            dict
        """

        try:
            fund = Fund(
                uploaded_by_agent_id = agent_id,
                name = args["name"].strip()
            )

            for field in FUND_NUMBER_FIELDS + FUND_TEXT_FIELDS:
                if args.get(field) is not None:
                    setattr(fund, field, args[field])

            db.session.add(fund)
            db.session.commit()

        except Exception as errors:
            # Rollback DB changes
            db.session.rollback()

            raise ServiceException(
                error_code = "FUND_CREATE_FAILED",
                message = messages.ERROR["FUND_CREATE_FAILED"],
                details = str(errors)
            )

        logger.info("Fund %s created by agent %s", fund.fund_id, agent_id)
        return serialize_fund(fund)
