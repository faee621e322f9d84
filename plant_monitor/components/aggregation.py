"""
Series aggregation component for the plant moisture dashboard.

Merges the rows of every selected object into a records table and three
index-aligned series. Objects are processed one at a time in listing order
(newest first); each object's rows are appended before the next object is
fetched, so the output order is deterministic.
"""

from typing import List, Optional

from plant_monitor.components.base import AggregationComponent
from plant_monitor.components.parsing import CsvRecordParserComponent
from plant_monitor.config import PipelineConfig
from plant_monitor.models import AggregationResult, SeriesState, TelemetryObject
from plant_monitor.utils import get_logger, log_stats


class SeriesAggregationComponent(AggregationComponent):
    """Builds a fresh SeriesState and records table per fetch cycle."""

    def __init__(self, config: PipelineConfig, parser: CsvRecordParserComponent):
        """
        Initialize aggregation component.

        Args:
            config: Pipeline configuration
            parser: Component used to fetch and parse each object
        """
        super().__init__(config)
        self.parser = parser
        self.logger = get_logger(__name__)

        self.stats = {
            "objects_received": 0,
            "objects_processed": 0,
            "rows_parsed": 0,
            "parse_issues": 0,
            "readings_with_issues": 0
        }

    def execute(self, objects: List[TelemetryObject], bucket: Optional[str] = None) -> AggregationResult:
        """
        Fetch, parse and merge all objects.

        Args:
            objects: Objects in listing order (newest first)
            bucket: Bucket name, otherwise ``storage.bucket``

        Returns:
            AggregationResult with series, records and parse issues

        Raises:
            FetchError: If any object cannot be fetched; nothing is returned
        """
        bucket = bucket or self.config.storage.bucket
        self._reset_stats()
        self.stats["objects_received"] = len(objects)

        self.logger.info(f"Aggregating {len(objects)} objects from bucket {bucket}")

        result = AggregationResult(series=SeriesState())

        for obj in objects:
            rows = self.parser.execute(bucket, obj.key)

            for row in rows:
                converted = self.parser.to_reading(row, key=obj.key)
                result.series.append(converted.reading)
                result.records.append(row)

                if not converted.ok:
                    result.issues.extend(converted.issues)
                    self.stats["readings_with_issues"] += 1

            result.objects_processed += 1
            self.stats["objects_processed"] += 1
            self.stats["rows_parsed"] += len(rows)
            self.logger.info(f"Aggregated {obj.key}: {len(rows)} rows")

        self.stats["parse_issues"] = len(result.issues)

        if result.issues:
            self.logger.warning(
                f"{len(result.issues)} fields in {self.stats['readings_with_issues']} rows "
                f"could not be converted; the readings were kept with NaN values"
            )

        if len(result.series):
            frame = result.series.to_frame()
            self.logger.debug(
                f"Moisture distribution:\n{frame[['moisture_a', 'moisture_b']].describe()}"
            )

        log_stats(self.logger, "Aggregation", self.stats)
        return result

    def _reset_stats(self) -> None:
        for key in self.stats:
            self.stats[key] = 0
