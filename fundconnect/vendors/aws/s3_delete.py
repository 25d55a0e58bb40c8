"""
S3 Delete Service

Handles:
    - Delete single object
    - Delete entire folder (prefix), e.g. every document of a fund
    - Safe pagination (more than 1000 objects)
"""

# Python Packages
import boto3
from botocore.exceptions import BotoCoreError, ClientError

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import TransientBackendException

# Logging
from ...util.logger import get_logger

logger = get_logger("vendors.s3.delete")





class S3DeleteService:
    """
    AWS S3 Delete Operations
    """

    def __init__(self, bucket_name: str = None):
        """
        Initialize S3 client using environment constants
        """

        self.s3_client = boto3.client(
            "s3",
            aws_access_key_id = constants.AWS_ACCESS_KEY_ID,
            aws_secret_access_key = constants.AWS_SECRET_ACCESS_KEY,
            region_name = constants.AWS_REGION
        )

        self.bucket_name = bucket_name or constants.AWS_S3_BUCKET_NAME


    # ---------------------------------------------------------
    # 🔹 Delete Single File
    # ---------------------------------------------------------
    def delete_file(self, s3_key: str):
        """
        Delete a single file from S3

        Args:
            s3_key (str): Full S3 object key
        """

        try:
            self.s3_client.delete_object(
                Bucket = self.bucket_name,
                Key = s3_key
            )

        except (BotoCoreError, ClientError) as error:
            raise TransientBackendException(
                message = f"S3 file delete failed: {error}",
                details = str(error)
            )


    # ---------------------------------------------------------
    # 🔹 Delete Folder (Prefix)
    # ---------------------------------------------------------
    def delete_folder(self, prefix: str) -> int:
        """
        Delete all objects under a given prefix (folder)

        Args:
            prefix (str): e.g. fundconnect/funds/10/

        Returns:
            int: number of objects deleted
        """

        deleted = 0

        try:
            paginator = self.s3_client.get_paginator("list_objects_v2")

            for page in paginator.paginate(Bucket = self.bucket_name, Prefix = prefix):
                contents = page.get("Contents") or []
                if not contents:
                    continue

                self.s3_client.delete_objects(
                    Bucket = self.bucket_name,
                    Delete = {"Objects": [{"Key": obj["Key"]} for obj in contents]}
                )
                deleted += len(contents)

        except (BotoCoreError, ClientError) as error:
            raise TransientBackendException(
                message = f"S3 folder delete failed: {error}",
                details = str(error)
            )

        logger.info("Deleted %d objects under s3://%s/%s", deleted, self.bucket_name, prefix)
        return deleted
