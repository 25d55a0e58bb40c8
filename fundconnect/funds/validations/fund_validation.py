"""
Fund Validation

Checks:
    - fund name provided, minimum length
    - numeric fields are non-negative numbers (normalised to float)
    - fund exists and belongs to the signed-in agent (edit / delete / upload)
"""

# Models
from ...models.fc_fund import Fund

# Services
from ..services.list_fund_service import FUND_NUMBER_FIELDS

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import NotFoundException, PolicyDeniedException, ValidationException


FUND_NAME_MIN_LENGTH = 3





class FundValidation:

    def validate_create(self, args: dict):
        """
        Validate full arguments
        """

        self._validate_name(args.get("name"))
        self._validate_numbers(args)

        return True


    def validate_edit(self, args: dict, agent_id: str):
        fund_id = args.get("fund_id")

        # -----------------------------------------
        # 🔹 Fund ID Validation
        # -----------------------------------------

        if not fund_id or isinstance(fund_id, bool) or not isinstance(fund_id, int):
            raise ValidationException(
                message = messages.ERROR["INVALID_FUND_ID"]
            )

        # -----------------------------------------
        # 🔹 Field Validation (only the ones sent)
        # -----------------------------------------

        if "name" in args:
            self._validate_name(args.get("name"))

        self._validate_numbers(args)

        # -----------------------------------------
        # 🔹 Ownership
        # -----------------------------------------

        self.validate_owner(fund_id, agent_id)

        return True


    @staticmethod
    def validate_owner(fund_id: int, agent_id: str) -> Fund:
        fund = Fund.query.filter_by(fund_id = fund_id).first()

        if not fund:
            raise NotFoundException(messages.ERROR["FUND_NOT_FOUND"])

        if str(fund.uploaded_by_agent_id) != str(agent_id):
            raise PolicyDeniedException(messages.ERROR["FUND_NOT_OWNED"])

        return fund


    @staticmethod
    def _validate_name(name):
        if not name or not isinstance(name, str):
            raise ValidationException(
                message = messages.ERROR["FUND_NAME_REQUIRED"]
            )

        if len(name.strip()) < FUND_NAME_MIN_LENGTH:
            raise ValidationException(
                message = messages.ERROR["FUND_NAME_MIN"].format(FUND_NAME_MIN_LENGTH)
            )


    @staticmethod
    def _validate_numbers(args: dict):
        for field in FUND_NUMBER_FIELDS:
            if field not in args:
                continue

            value = args[field]
            if value in (None, ""):
                args[field] = None
                continue

            try:
                number = float(value)

            except (TypeError, ValueError):
                number = -1

            if isinstance(value, bool) or number < 0:
                raise ValidationException(
                    message = messages.ERROR["FUND_NUMBER_INVALID"].format(field = field)
                )

            args[field] = number
