"""
Fund Document Validation
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class FundDocumentValidation:

    def validate(self, args):
        file = args.get("file")
        document_type = args.get("document_type") or "other"
        args["document_type"] = document_type

        # -----------------------------------------
        # 🔹 Document Type Validation
        # -----------------------------------------

        if document_type not in constants.FUND_DOCUMENT_TYPES:
            raise ValidationException(
                message = messages.ERROR["DOCUMENT_INVALID_TYPE"].format(
                    types = ", ".join(constants.FUND_DOCUMENT_TYPES)
                )
            )

        # -----------------------------------------
        # 🔹 File Validation
        # -----------------------------------------

        if not file:
            raise ValidationException(
                message = messages.ERROR["DOCUMENT_FILE_REQUIRED"]
            )

        filename = file.filename

        if not filename or "." not in filename:
            raise ValidationException(
                message = messages.ERROR["DOCUMENT_INVALID_FILE"]
            )

        ext = filename.rsplit('.', 1)[-1].lower()

        if ext not in constants.FUND_DOCUMENT_EXTENSIONS:
            raise ValidationException(
                message = messages.ERROR["UNSUPPORTED_FILE_FORMAT"].format(
                    file_extension = ext.upper()
                )
            )

        return True
