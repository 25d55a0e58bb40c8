"""
Auth Validation

Checks:
    - email / password present
    - password minimum length (register)
    - role is agent or investor (register)
    - name present (register)
    - invitation code only for investors (register)
    - verification token present
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException


PASSWORD_MIN_LENGTH = 8
SELF_REGISTER_ROLES = (constants.ROLE_AGENT, constants.ROLE_INVESTOR)





class AuthValidation:

    @staticmethod
    def validate_email(args: dict):
        email = args.get("email")

        if not email or not isinstance(email, str) or "@" not in email:
            raise ValidationException(
                message = messages.ERROR["EMAIL_REQUIRED"]
            )

        return True


    @staticmethod
    def validate_sign_in(args: dict):
        AuthValidation.validate_email(args)

        if not args.get("password"):
            raise ValidationException(
                message = messages.ERROR["PASSWORD_REQUIRED"]
            )

        return True


    @staticmethod
    def validate_register(args: dict):
        AuthValidation.validate_sign_in(args)

        # -----------------------------------------
        # 🔹 Password
        # -----------------------------------------

        if len(args.get("password")) < PASSWORD_MIN_LENGTH:
            raise ValidationException(
                message = messages.ERROR["PASSWORD_MIN"].format(PASSWORD_MIN_LENGTH)
            )

        # -----------------------------------------
        # 🔹 Role
        # -----------------------------------------

        if args.get("role") not in SELF_REGISTER_ROLES:
            raise ValidationException(
                message = messages.ERROR["INVALID_ROLE"].format(
                    roles = ", ".join(SELF_REGISTER_ROLES)
                )
            )

        # -----------------------------------------
        # 🔹 Name
        # -----------------------------------------

        name = args.get("name")
        if not name or not str(name).strip():
            raise ValidationException(
                message = messages.ERROR["NAME_REQUIRED"]
            )

        if args.get("invitation_code") and args.get("role") != constants.ROLE_INVESTOR:
            raise ValidationException(
                message = messages.ERROR["INVITATION_CODE_AGENTS"]
            )

        return True


    @staticmethod
    def validate_token(args: dict):
        token = args.get("token")

        if not token or not isinstance(token, str) or not token.strip():
            raise ValidationException(
                message = messages.ERROR["VERIFICATION_TOKEN_REQUIRED"]
            )

        return True
