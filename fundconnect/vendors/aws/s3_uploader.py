""" File: S3 Uploader Service """

# Python Packages
import os
import boto3
from urllib.parse import quote

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import ValidationException

# Logging
from ...util.logger import get_logger

logger = get_logger("vendors.s3.upload")





class S3Uploader:

    def __init__(self, bucket_name: str = None):
        self.bucket_name = bucket_name or constants.AWS_S3_BUCKET_NAME
        self.max_bytes = constants.STORAGE_MAX_UPLOAD_BYTES
        self.client = boto3.client(
            's3',
            aws_access_key_id = constants.AWS_ACCESS_KEY_ID,
            aws_secret_access_key = constants.AWS_SECRET_ACCESS_KEY,
            region_name = constants.AWS_REGION
        )


    def upload_file(self, file_obj, s3_key, content_type: str = None):
        """
        Upload file object to S3

        Rejects files above STORAGE_MAX_UPLOAD_BYTES before any bytes are sent.

        Returns:
            str: s3://bucket/key
        """

        size = self._size_of(file_obj)
        if size is not None and size > self.max_bytes:
            raise ValidationException(
                message = f"File exceeds the {self.max_bytes // (1024 * 1024)} MB upload limit."
            )

        extra_args = {"ContentType": content_type} if content_type else None

        self.client.upload_fileobj(
            Fileobj = file_obj,
            Bucket = self.bucket_name,
            Key = s3_key,
            ExtraArgs = extra_args
        )

        logger.info("Uploaded s3://%s/%s (%s bytes)", self.bucket_name, s3_key, size)
        return f"s3://{self.bucket_name}/{s3_key}"


    def upload_bytes(self, body: bytes, s3_key: str, content_type: str = None):
        """ Small in-memory payloads (storage checks)... """

        params = {
            "Bucket": self.bucket_name,
            "Key": s3_key,
            "Body": body
        }
        if content_type:
            params["ContentType"] = content_type

        self.client.put_object(**params)
        return f"s3://{self.bucket_name}/{s3_key}"


    def public_url(self, s3_key: str) -> str:
        """
        Virtual-hosted style URL. Only readable when the bucket is public.
        """

        return f"https://{self.bucket_name}.s3.{constants.AWS_REGION}.amazonaws.com/{quote(s3_key)}"


    @staticmethod
    def _size_of(file_obj):
        """ Byte size of a seekable stream, None when unknown... """

        stream = getattr(file_obj, "stream", file_obj)

        try:
            position = stream.tell()
            stream.seek(0, os.SEEK_END)
            size = stream.tell()
            stream.seek(position)
            return size

        except (AttributeError, OSError):
            return None
