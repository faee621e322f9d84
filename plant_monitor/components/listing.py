"""
Object listing component for the plant moisture dashboard.

Selects the most recently modified telemetry objects from a single listing
page of the bucket.
"""

from typing import List, Optional

from plant_monitor.components.base import ListingComponent
from plant_monitor.config import PipelineConfig
from plant_monitor.models import TelemetryObject
from plant_monitor.storage import ObjectStore
from plant_monitor.utils import get_logger, log_stats, ListingError, ConfigurationError


class S3ObjectListingComponent(ListingComponent):
    """Lists one page of telemetry objects and keeps the newest ``max_keys``."""

    def __init__(self, config: PipelineConfig, store: ObjectStore):
        """
        Initialize listing component.

        Args:
            config: Pipeline configuration
            store: Object store collaborator
        """
        super().__init__(config)
        self.store = store
        self.logger = get_logger(__name__)

        self.stats = {
            "objects_on_page": 0,
            "objects_selected": 0,
            "listing_truncated": False
        }

    def execute(self, bucket: Optional[str] = None, max_keys: Optional[int] = None) -> List[TelemetryObject]:
        """
        List the bucket and return the newest objects.

        Only the first page (``storage.page_size`` objects) is considered.
        Buckets holding more objects than one page may therefore miss their
        most recent uploads.

        Args:
            bucket: Bucket name, otherwise ``storage.bucket``
            max_keys: Number of objects to keep, otherwise ``storage.max_keys``

        Returns:
            At most ``max_keys`` objects sorted by last_modified, newest first

        Raises:
            ListingError: If the listing call fails
            ConfigurationError: If max_keys is not positive
        """
        bucket = bucket or self.config.storage.bucket
        max_keys = self.config.storage.max_keys if max_keys is None else max_keys

        if max_keys < 1:
            raise ConfigurationError(f"max_keys must be at least 1, got {max_keys}")

        self.logger.info(f"Listing objects in bucket {bucket}")

        try:
            listing = self.store.list(bucket, self.config.storage.page_size)
        except Exception as e:
            self.logger.error(f"Listing failed for bucket {bucket}: {str(e)}")
            raise ListingError(f"Object listing failed for bucket {bucket}: {str(e)}") from e

        self.stats["objects_on_page"] = len(listing.objects)
        self.stats["listing_truncated"] = listing.is_truncated

        if listing.is_truncated:
            self.logger.warning(
                f"Bucket {bucket} holds more than {self.config.storage.page_size} objects; "
                f"only the first page is considered"
            )

        recent_objects = select_recent(listing.objects, max_keys)
        self.stats["objects_selected"] = len(recent_objects)

        self.logger.info(
            f"Selected {len(recent_objects)} of {len(listing.objects)} objects (max_keys={max_keys})"
        )
        log_stats(self.logger, "Listing", self.stats)
        return recent_objects


def select_recent(objects: List[TelemetryObject], max_keys: int) -> List[TelemetryObject]:
    """Sort by last_modified descending and keep the first ``max_keys``."""
    ordered = sorted(objects, key=lambda obj: obj.last_modified, reverse=True)
    return ordered[:max_keys]
