"""
Object Storage Client

Uploads and deletes media on an S3-compatible bucket (DigitalOcean Spaces in
production) through boto3.

Objects are written with a public-read ACL and addressed by their public
URL:

    https://{AWS_BUCKET_NAME}.{AWS_ENDPOINT}/{key}

Keys are generated by the media service ({AWS_FOLDER_NAME}/{uuid}{ext}).
"""

import logging
from typing import Any, Optional, Protocol

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from emur.core.config import Settings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Exception raised when the object store rejects an operation."""
    def __init__(self, message: str, key: Optional[str] = None, details: Any = None):
        self.message = message
        self.key = key
        self.details = details
        super().__init__(self.message)


class ObjectStorage(Protocol):
    """Protocol for object storage backends."""

    def upload(self, data: bytes, key: str, content_type: str) -> str:
        """Store an object and return its public URL."""
        ...

    def delete(self, url: str) -> None:
        """Delete the object behind a public URL returned by upload()."""
        ...

    def presigned_url(self, key: str, expires: Optional[int] = None) -> str:
        """Time-limited download URL (PRESIGNED_URL_EXPIRY seconds by default)."""
        ...


class SpacesStorage:
    """
    boto3-backed implementation of ObjectStorage.

    Attributes:
        bucket (str): Bucket name (AWS_BUCKET_NAME)
        endpoint (str): Endpoint host (AWS_ENDPOINT), without scheme
    """

    def __init__(self, settings: Settings, client: Any = None):
        self.bucket = settings.AWS_BUCKET_NAME
        self.endpoint = settings.AWS_ENDPOINT
        self.presigned_expiry = settings.PRESIGNED_URL_EXPIRY
        self.client = client or boto3.client(
            "s3",
            region_name=settings.AWS_REGION_NAME or None,
            endpoint_url=f"https://{self.endpoint}" if self.endpoint else None,
            aws_access_key_id=settings.AWS_ACCESS_KEY or None,
            aws_secret_access_key=settings.AWS_SECRET_KEY or None,
        )

    def public_url(self, key: str) -> str:
        return f"https://{self.bucket}.{self.endpoint}/{key}"

    def key_from_url(self, url: str) -> str:
        prefix = f"https://{self.bucket}.{self.endpoint}/"
        if url.startswith(prefix):
            return url[len(prefix):]
        return url

    def upload(self, data: bytes, key: str, content_type: str) -> str:
        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ACL="public-read",
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"[Storage] Upload of {key} to {self.bucket} failed: {e}")
            raise StorageError(f"unable to upload {key}", key=key, details=str(e)) from e

        logger.debug(f"[Storage] Uploaded {key} ({len(data)} bytes)")
        return self.public_url(key)

    def delete(self, url: str) -> None:
        key = self.key_from_url(url)
        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"[Storage] Delete of {key} failed: {e}")
            raise StorageError(f"unable to delete {key}", key=key, details=str(e)) from e

    def presigned_url(self, key: str, expires: Optional[int] = None) -> str:
        try:
            return self.client.generate_presigned_url(
                "get_object",
                Params={"Bucket": self.bucket, "Key": key},
                ExpiresIn=expires or self.presigned_expiry,
            )
        except (BotoCoreError, ClientError) as e:
            raise StorageError(f"unable to get presigned link for {key}", key=key, details=str(e)) from e
