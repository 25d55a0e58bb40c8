"""
Edit Fund Service

Handles:
    - Update fund profile fields (owning agent only)
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


EDITABLE_FIELDS = ("name",) + FUND_NUMBER_FIELDS + FUND_TEXT_FIELDS





class EditFundService:

    def edit_fund(self, args: dict) -> dict:
        """
        Update only the fields present in args

        Args:
            args (dict): {"fund_id": int, ...fields}

        Returns:
            dict
        """

        fund_id = args.get("fund_id")

        try:
            fund = db.session.get(Fund, fund_id)

            for field in EDITABLE_FIELDS:
                if field in args:
                    value = args[field]
                    setattr(fund, field, value.strip() if isinstance(value, str) else value)

            db.session.commit()

            return {
                **serialize_fund(fund),
                "message": messages.SUCCESS["FUND_UPDATE_SUCCESS"]
            }

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "FUND_UPDATE_FAILED",
                message = messages.ERROR["FUND_UPDATE_FAILED"],
                details = str(errors)
            )
