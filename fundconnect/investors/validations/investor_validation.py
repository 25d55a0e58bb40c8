"""
Investor Validation

Checks:
    - invitation name / email present
"""

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class InvestorValidation:

    @staticmethod
    def validate_invitation(args: dict):
        name = args.get("name")
        if not name or not isinstance(name, str) or not name.strip():
            raise ValidationException(
                message = messages.ERROR["INVESTOR_NAME_REQUIRED"]
            )

        email = args.get("email")
        if not email or not isinstance(email, str) or "@" not in email:
            raise ValidationException(
                message = messages.ERROR["INVESTOR_EMAIL_REQUIRED"]
            )

        return True
