"""
S3 client manager for uploads, listing, deletion and presigned URLs.
"""
from typing import Iterator

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger

from ..models.config import S3Config
from ..models.errors import InvalidConfig, TransferError


DEFAULT_URL_EXPIRY = 60 * 5


class S3Object:
    """Represents an S3 object with metadata."""

    def __init__(self, key: str, size: int, last_modified, etag: str = ''):
        self.key = key
        self.size = size
        self.last_modified = last_modified
        self.etag = etag


class S3Manager:
    """Manages S3 operations for a single bucket."""

    def __init__(self, config: S3Config):
        """Initialize S3Manager with bucket configuration."""
        self.config = config
        self.bucket = config.bucket
        self.client = self._create_s3_client(config)

        logger.info(f"S3Manager initialized for bucket: {config.bucket}")

    def _create_s3_client(self, config: S3Config):
        """Create an S3 client from configuration."""
        try:
            client = boto3.client(
                's3',
                endpoint_url=config.endpoint,
                aws_access_key_id=config.access_key,
                aws_secret_access_key=config.secret_key,
                region_name=config.region or 'us-east-1'
            )
            logger.debug(f"Created S3 client for region {config.region}, endpoint: {config.endpoint or 'default'}")
            return client
        except (ValueError, BotoCoreError) as e:
            logger.error(f"Failed to create S3 client for {config.endpoint or config.region}: {e}")
            raise InvalidConfig(f"Cannot create S3 client: {e}") from e

    def put(self, key: str, body: bytes, content_type: str) -> None:
        """
        Upload bytes to the bucket.

        Args:
            key: Object key
            body: Object content
            content_type: MIME type stored with the object

        Raises:
            TransferError: If S3 rejects or fails the upload
        """
        try:
            self.client.put_object(Bucket=self.bucket, Key=key, Body=body, ContentType=content_type)
            logger.debug(f"Uploaded {len(body)} bytes to {key}")
        except (ClientError, BotoCoreError) as e:
            raise TransferError(f"S3 rejected upload of {key}: {e}") from e

    def list_objects(self, prefix: str = '') -> Iterator[S3Object]:
        """
        List objects in the bucket, optionally below a key prefix.

        Yields:
            S3Object: Objects in the bucket
        """
        paginator = self.client.get_paginator('list_objects_v2')
        try:
            for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix or ''):
                for obj in page.get('Contents', []):
                    yield S3Object(
                        key=obj['Key'],
                        size=obj['Size'],
                        last_modified=obj['LastModified'],
                        etag=obj.get('ETag', '').strip('"')
                    )
        except Exception as e:
            logger.error(f"Failed to list objects with prefix '{prefix}': {e}")
            raise

    def delete_object(self, key: str) -> None:
        """Delete an object from the bucket."""
        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
            logger.info(f"Deleted object: {key}")
        except Exception as e:
            logger.error(f"Failed to delete object {key}: {e}")
            raise

    def generate_upload_url(self, key: str, content_type: str,
                            expires_in: int = DEFAULT_URL_EXPIRY) -> str:
        """
        Create a presigned URL allowing a single PUT of key.

        Args:
            key: Object key the URL is scoped to
            content_type: Content-Type the uploader must send
            expires_in: URL lifetime in seconds

        Returns:
            The presigned URL
        """
        try:
            return self.client.generate_presigned_url(
                'put_object',
                Params={'Bucket': self.bucket, 'Key': key, 'ContentType': content_type},
                ExpiresIn=expires_in
            )
        except Exception as e:
            logger.error(f"Failed to create upload URL for {key}: {e}")
            raise

    def generate_download_url(self, key: str, expires_in: int = DEFAULT_URL_EXPIRY) -> str:
        """Create a presigned URL allowing a GET of key."""
        try:
            return self.client.generate_presigned_url(
                'get_object',
                Params={'Bucket': self.bucket, 'Key': key},
                ExpiresIn=expires_in
            )
        except Exception as e:
            logger.error(f"Failed to create download URL for {key}: {e}")
            raise

    def test_connection(self) -> bool:
        """
        Test connection to the bucket.

        Returns:
            bool: True if connection successful, False otherwise
        """
        try:
            self.client.head_bucket(Bucket=self.bucket)
            logger.info("S3 connection test successful")
            return True
        except Exception as e:
            logger.error(f"S3 connection test failed: {e}")
            return False
