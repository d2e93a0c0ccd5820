"""S3 I/O operations."""

import json

import boto3
from botocore.exceptions import ClientError
from tenacity import (
    retry,
    retry_if_exception_type,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from dataset_publisher.domain.errors import StorageError
from dataset_publisher.domain.types import JsonValue
from dataset_publisher.infrastructure.config.settings import Settings


class S3ObjectNotFound(StorageError):
    """Requested S3 key does not exist."""


class S3IO:
    """JSON document storage on S3."""

    def __init__(self, settings: Settings) -> None:
        """Initialize S3 client."""
        if not settings.aws_s3_bucket:
            raise StorageError("aws_s3_bucket must be set for the s3 storage backend")
        self.settings = settings
        self.s3_client = boto3.client("s3", region_name=settings.aws_region)
        self.bucket = settings.aws_s3_bucket

    @retry(
        retry=retry_if_exception_type(StorageError) & retry_if_not_exception_type(S3ObjectNotFound),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True,
    )
    async def get_json(self, key: str) -> dict[str, JsonValue]:
        """Get JSON object from S3."""
        try:
            response = self.s3_client.get_object(Bucket=self.bucket, Key=key)
            content = response["Body"].read().decode("utf-8")
            return json.loads(content)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in ("NoSuchKey", "404"):
                raise S3ObjectNotFound(f"S3 object {key} does not exist") from e
            raise StorageError(f"Failed to read S3 object {key}: {e}") from e

    @retry(
        retry=retry_if_exception_type(StorageError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True,
    )
    async def put_json(self, key: str, data: dict[str, JsonValue]) -> None:
        """Put JSON object to S3."""
        try:
            content = json.dumps(data, default=str, indent=2)
            self.s3_client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=content.encode("utf-8"),
                ContentType="application/json",
            )
        except ClientError as e:
            raise StorageError(f"Failed to write S3 object {key}: {e}") from e
