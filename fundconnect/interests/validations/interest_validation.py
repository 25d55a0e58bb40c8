"""
Interest Validation

Checks:
    - fund_id is provided and is an integer
"""

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class InterestValidation:

    @staticmethod
    def validate_fund_id(args: dict, required: bool = True):
        """
        Normalises args["fund_id"] to int in place.
        """

        fund_id = args.get("fund_id")

        if fund_id in (None, ""):
            if required:
                raise ValidationException(
                    message = messages.ERROR["INVALID_FUND_ID"]
                )
            args["fund_id"] = None
            return True

        if isinstance(fund_id, bool):
            raise ValidationException(
                message = messages.ERROR["INVALID_FUND_ID"]
            )

        try:
            args["fund_id"] = int(fund_id)

        except (TypeError, ValueError):
            raise ValidationException(
                message = messages.ERROR["INVALID_FUND_ID"]
            )

        return True
