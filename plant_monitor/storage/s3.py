"""
Object store access for telemetry batches.

The pipeline only needs two operations from the store: list one page of
objects and fetch an object body. ``ObjectStore`` names that interface so
components can be tested against an in-memory store, and ``S3ObjectStore``
implements it with boto3.
"""

from abc import ABC, abstractmethod
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError

from plant_monitor.config import StorageSettings
from plant_monitor.models import ObjectListing, TelemetryObject
from plant_monitor.utils import get_logger, ConfigurationError


class ObjectStore(ABC):
    """Narrow object store interface consumed by the pipeline."""

    @abstractmethod
    def list(self, bucket: str, page_size: int) -> ObjectListing:
        """
        List a single page of objects.

        Args:
            bucket: Bucket name
            page_size: Maximum number of objects returned

        Returns:
            The first page of objects, in store order
        """
        pass

    @abstractmethod
    def get(self, bucket: str, key: str) -> bytes:
        """Return the raw body of one object."""
        pass


class S3ObjectStore(ObjectStore):
    """ObjectStore backed by a boto3 S3 client."""

    def __init__(self, client: Any):
        """
        Args:
            client: A boto3 S3 client (or anything with the same methods)
        """
        self.client = client
        self.logger = get_logger(__name__)

    @classmethod
    def from_config(cls, settings: StorageSettings) -> "S3ObjectStore":
        """Build a client from region, profile and endpoint settings."""
        try:
            session = boto3.session.Session(
                profile_name=settings.profile_name,
                region_name=settings.region
            )
            client = session.client('s3', endpoint_url=settings.endpoint_url)
        except BotoCoreError as e:
            raise ConfigurationError(f"Cannot create S3 client: {str(e)}") from e
        return cls(client)

    def list(self, bucket: str, page_size: int) -> ObjectListing:
        response = self.client.list_objects_v2(Bucket=bucket, MaxKeys=page_size)
        contents = response.get('Contents', [])

        objects = [
            TelemetryObject(
                key=item['Key'],
                last_modified=item['LastModified'],
                size=item.get('Size', 0)
            )
            for item in contents
        ]
        self.logger.debug(f"Listed {len(objects)} objects in s3://{bucket}")

        return ObjectListing(
            objects=objects,
            is_truncated=bool(response.get('IsTruncated', False))
        )

    def get(self, bucket: str, key: str) -> bytes:
        response = self.client.get_object(Bucket=bucket, Key=key)
        body = response['Body']
        try:
            return body.read()
        finally:
            body.close()
