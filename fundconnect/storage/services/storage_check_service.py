"""
Service: StorageCheckService

Verifies that the document bucket exists and that the server can write to
and delete from it, by round-tripping a 1x1 PNG.

Result shape (also the HTTP body):
    {"success": bool, "message": str, "error"?: str, "details"?: str, "path"?: str}
"""

# Python Packages
import base64
import time
from typing import Tuple

# AWS
from botocore.exceptions import BotoCoreError, ClientError

# Vendors
from ...vendors.aws.s3_bucket import S3BucketService
from ...vendors.aws.s3_uploader import S3Uploader
from ...vendors.aws.s3_delete import S3DeleteService

# Exceptions
from ...util.exceptions import AppException

# App Messages
from ...util import messages

# Logging
from ...util.logger import get_logger

logger = get_logger("storage.check")

# 1x1 transparent PNG
TEST_PIXEL = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)





class StorageCheckService:

    def __init__(self, bucket_service = None, uploader = None, deleter = None):
        self.bucket_service = bucket_service or S3BucketService()
        self.uploader = uploader or S3Uploader()
        self.deleter = deleter or S3DeleteService()


    def check(self) -> Tuple[dict, int]:
        """
        Returns:
            (body, status_code): 200 ok, 404 bucket missing,
            403 upload/delete refused, 500 anything else
        """

        bucket = self.bucket_service.bucket_name

        try:
            if not self.bucket_service.bucket_exists():
                logger.warning("Storage check: bucket %s missing", bucket)
                return {
                    "success": False,
                    "error": "Bucket does not exist",
                    "message": messages.ERROR["STORAGE_BUCKET_MISSING"].format(bucket = bucket)
                }, 404

            last_error = None
            stamp = int(time.time() * 1000)

            for path in (f"test_{stamp}.png", f"public/test_{stamp}.png"):
                try:
                    self.uploader.upload_bytes(TEST_PIXEL, path, content_type = "image/png")
                    self.deleter.delete_file(path)

                except (BotoCoreError, ClientError, AppException) as error:
                    last_error = error
                    continue

                logger.info("Storage check passed for %s (%s)", bucket, path)
                return {
                    "success": True,
                    "message": messages.SUCCESS["STORAGE_POLICIES_OK"],
                    "path": path
                }, 200

            logger.warning("Storage check: policy failure on %s: %s", bucket, last_error)
            return {
                "success": False,
                "error": "Policy check failed",
                "message": messages.ERROR["STORAGE_POLICY_FAILED"],
                "details": str(last_error)
            }, 403

        except Exception as error:
            logger.exception("Storage check failed unexpectedly")
            return {
                "success": False,
                "error": "Unexpected error",
                "message": str(error) or messages.ERROR["STORAGE_UNEXPECTED"]
            }, 500
