"""
S3 Bucket Service

Handles:
    - Bucket exists check
    - Create bucket when missing
    - Public-read policy on / off (AWS_S3_PUBLIC_BUCKET)
    - Max upload size recorded as a bucket tag

Used by `flask setup-storage` and the storage check endpoint.
"""

# Python Packages
import json
import boto3
from botocore.exceptions import ClientError

# Constants
from ...base import constants

# Logging
from ...util.logger import get_logger

logger = get_logger("vendors.s3.bucket")

MISSING_BUCKET_CODES = {"404", "NoSuchBucket", "NotFound"}
MAX_UPLOAD_TAG = "fundconnect:max-upload-bytes"





class S3BucketService:

    def __init__(self, bucket_name: str = None):
        self.bucket_name = bucket_name or constants.AWS_S3_BUCKET_NAME
        self.region = constants.AWS_REGION
        self.client = boto3.client(
            's3',
            aws_access_key_id = constants.AWS_ACCESS_KEY_ID,
            aws_secret_access_key = constants.AWS_SECRET_ACCESS_KEY,
            region_name = self.region
        )


    def bucket_exists(self) -> bool:
        """
        HEAD the bucket. Missing → False; any other client error propagates.
        """

        try:
            self.client.head_bucket(Bucket = self.bucket_name)
            return True

        except ClientError as error:
            code = str(error.response.get("Error", {}).get("Code"))
            if code in MISSING_BUCKET_CODES:
                return False
            raise


    def ensure_bucket(self, public: bool = None, max_upload_bytes: int = None) -> dict:
        """
        Create the bucket if needed, then bring its settings up to date.

        Returns:
            dict: {"bucket", "created", "public", "max_upload_bytes"}
        """

        public = constants.AWS_S3_PUBLIC_BUCKET if public is None else public
        max_upload_bytes = max_upload_bytes or constants.STORAGE_MAX_UPLOAD_BYTES

        created = False
        if not self.bucket_exists():
            params = {"Bucket": self.bucket_name}

            # us-east-1 rejects an explicit LocationConstraint
            if self.region and self.region != "us-east-1":
                params["CreateBucketConfiguration"] = {"LocationConstraint": self.region}

            self.client.create_bucket(**params)
            created = True
            logger.info("Created bucket %s", self.bucket_name)

        self.set_public(public)
        self.client.put_bucket_tagging(
            Bucket = self.bucket_name,
            Tagging = {"TagSet": [{"Key": MAX_UPLOAD_TAG, "Value": str(max_upload_bytes)}]}
        )

        return {
            "bucket": self.bucket_name,
            "created": created,
            "public": public,
            "max_upload_bytes": max_upload_bytes
        }


    def set_public(self, public: bool):
        """ Attach or remove the public-read bucket policy... """

        if public:
            self.client.put_public_access_block(
                Bucket = self.bucket_name,
                PublicAccessBlockConfiguration = {
                    "BlockPublicAcls": True,
                    "IgnorePublicAcls": True,
                    "BlockPublicPolicy": False,
                    "RestrictPublicBuckets": False
                }
            )
            self.client.put_bucket_policy(
                Bucket = self.bucket_name,
                Policy = json.dumps(self.public_read_policy())
            )
            return

        try:
            self.client.delete_bucket_policy(Bucket = self.bucket_name)

        except ClientError as error:
            if error.response.get("Error", {}).get("Code") != "NoSuchBucketPolicy":
                raise


    def public_read_policy(self) -> dict:
        return {
            "Version": "2012-10-17",
            "Statement": [
                {
                    "Sid": "PublicReadGetObject",
                    "Effect": "Allow",
                    "Principal": "*",
                    "Action": "s3:GetObject",
                    "Resource": f"arn:aws:s3:::{self.bucket_name}/*"
                }
            ]
        }
