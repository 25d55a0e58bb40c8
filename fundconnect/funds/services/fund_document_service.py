"""
Fund Document Service

Handles:
    - Upload a document to S3 under fundconnect/funds/<fund_id>/
    - Store document metadata (and public URL when the bucket is public)
"""

# Python Packages
from werkzeug.utils import secure_filename

# Database
from ...config.database import db

# Models
from ...models.fc_fund_document import FundDocument

# Vendors
from ...vendors.aws.s3_uploader import S3Uploader

# Services
from .delete_fund_service import fund_storage_prefix

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import AppException, ServiceException

# App Messages
from ...util import messages

# Helpers
from ...util.timeutil import format_datetime
from ...util.logger import get_logger

logger = get_logger("funds.documents")





class FundDocumentService:

    def __init__(self, uploader: S3Uploader = None):
        self.uploader = uploader or S3Uploader()


    def upload_document(self, fund_id: int, args: dict) -> dict:
        """
        Upload a fund document

        Args:
            fund_id (int)
            args (dict):
                {
                    "document_type": str,
                    "file": FileStorage
                }

        Returns:
            dict
        """

        file = args["file"]
        file_name = secure_filename(file.filename)
        s3_key = f"{fund_storage_prefix(fund_id)}{file_name}"

        try:
            # 1️⃣ Upload File to S3
            storage_path = self.uploader.upload_file(
                file_obj = file,
                s3_key = s3_key,
                content_type = file.mimetype
            )

            # 2️⃣ Store Document Metadata
            document = FundDocument(
                fund_id = fund_id,
                document_type = args["document_type"],
                file_name = file_name,
                storage_path = storage_path,
                public_url = self.uploader.public_url(s3_key) if constants.AWS_S3_PUBLIC_BUCKET else None
            )
            db.session.add(document)
            db.session.commit()

        except AppException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "DOCUMENT_UPLOAD_FAILED",
                message = messages.ERROR["DOCUMENT_UPLOAD_FAILED"],
                details = str(errors)
            )

        logger.info("Document %s uploaded for fund %s", document.doc_id, fund_id)

        return {
            "doc_id": document.doc_id,
            "fund_id": fund_id,
            "document_type": document.document_type,
            "file_name": document.file_name,
            "storage_path": document.storage_path,
            "public_url": document.public_url,
            "uploaded_at": format_datetime(document.uploaded_at)
        }
