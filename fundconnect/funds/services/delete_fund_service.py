"""
Delete Fund Service

Handles:
    - Delete Fund (documents and interests cascade)
    - Delete the fund's S3 folder
"""

# Database
from ...config.database import db

# Models
from ...models.fc_fund import Fund

# Services
from ...vendors.aws.s3_delete import S3DeleteService

# Exceptions
from ...util.exceptions import AppException, ServiceException

# App Messages
from ...util import messages

# Logging
from ...util.logger import get_logger

logger = get_logger("funds.delete")


def fund_storage_prefix(fund_id: int) -> str:
    return f"fundconnect/funds/{fund_id}/"





class DeleteFundService:

    def delete_fund(self, fund_id: int) -> dict:
        """
        Delete fund and related documents + S3 folder

        Args:
            fund_id (int)

        Returns:
            dict
        """

        try:
            # 🔹 Fetch Fund
            fund = db.session.get(Fund, fund_id)

            if not fund:
                raise ServiceException(
                    error_code = "FUND_NOT_FOUND",
                    message = messages.ERROR["FUND_NOT_FOUND"]
                )

            # 🔹 Delete S3 Folder FIRST (only when something was uploaded)
            if fund.documents:
                S3DeleteService().delete_folder(fund_storage_prefix(fund_id))

            # 🔹 Delete Fund (DB)
            db.session.delete(fund)
            db.session.commit()

            logger.info("Fund %s deleted", fund_id)

            return {
                "fund_id": fund_id,
                "message": messages.SUCCESS["FUND_DELETE_SUCCESS"]
            }

        except AppException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "FUND_DELETE_FAILED",
                message = messages.ERROR["FUND_DELETE_FAILED"],
                details = str(errors)
            )
