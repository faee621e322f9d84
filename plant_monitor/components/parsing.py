"""
Record parsing component for the plant moisture dashboard.

Fetches a telemetry object, decodes it and parses the CSV body into rows.
Rows are positional: timestamp, plant 1 moisture, an unused column and plant
2 moisture. No schema is enforced here; ``to_reading`` performs the typed
conversion and reports fields it could not convert.
"""

import csv
import io
from typing import List, Optional

import numpy as np

from plant_monitor.components.base import ParsingComponent
from plant_monitor.config import CsvSettings, PipelineConfig
from plant_monitor.models import ParseIssue, Reading, ReadingResult, Row
from plant_monitor.storage import ObjectStore
from plant_monitor.utils import get_logger, FetchError


class CsvRecordParserComponent(ParsingComponent):
    """Fetches one CSV object and returns its rows in file order."""

    def __init__(self, config: PipelineConfig, store: ObjectStore):
        """
        Initialize parsing component.

        Args:
            config: Pipeline configuration
            store: Object store collaborator
        """
        super().__init__(config)
        self.store = store
        self.logger = get_logger(__name__)

    def execute(self, bucket: str, key: str) -> List[Row]:
        """
        Fetch and parse one object.

        Args:
            bucket: Bucket name
            key: Object key

        Returns:
            Parsed rows; ragged rows are returned unchanged

        Raises:
            FetchError: If the object cannot be fetched or its body cannot
                be split into rows
        """
        try:
            body = self.store.get(bucket, key)
            # Undecodable bytes become U+FFFD and surface later as not_a_number issues
            text = body.decode(self.config.csv_layout.encoding, errors="replace") \
                if isinstance(body, bytes) else str(body)
        except Exception as e:
            self.logger.error(f"Failed to fetch {key}: {str(e)}")
            raise FetchError(f"Failed to fetch object {key}: {str(e)}") from e

        try:
            rows = parse_csv(text)
        except csv.Error as e:
            self.logger.error(f"Failed to parse {key}: {str(e)}")
            raise FetchError(f"Failed to parse object {key}: {str(e)}") from e

        self.logger.debug(f"Parsed {len(rows)} rows from {key}")
        return rows

    def to_reading(self, row: Row, key: Optional[str] = None) -> ReadingResult:
        """Convert a row using the configured column layout."""
        return to_reading(row, self.config.csv_layout, key=key)


def parse_csv(text: str) -> List[Row]:
    """
    Parse CSV text into rows.

    ``\\n``, ``\\r\\n`` and a lone ``\\r`` all terminate a row.

    Raises:
        csv.Error: If a field exceeds the csv module's field size limit
    """
    # Empty lines, the trailing newline included, yield no row at all
    # rather than a single empty field.
    return [row for row in csv.reader(io.StringIO(text, newline="")) if row]


def to_reading(row: Row, layout: CsvSettings, key: Optional[str] = None) -> ReadingResult:
    """
    Project a positional row onto a Reading.

    A missing or non-numeric moisture field becomes NaN and a missing
    timestamp becomes an empty string. Each such field is reported as a
    ParseIssue; the conversion itself never raises.

    Args:
        row: Parsed CSV fields
        layout: Column indices for timestamp and moisture values
        key: Optional object key recorded on issues

    Returns:
        The reading together with any conversion issues
    """
    issues: List[ParseIssue] = []

    if layout.timestamp_index < len(row):
        timestamp = row[layout.timestamp_index]
    else:
        timestamp = ""
        issues.append(ParseIssue(
            field="timestamp", index=layout.timestamp_index, raw=None, reason="missing", key=key
        ))

    moisture_a = _to_float(row, layout.moisture_a_index, "moisture_a", issues, key)
    moisture_b = _to_float(row, layout.moisture_b_index, "moisture_b", issues, key)

    return ReadingResult(
        reading=Reading(timestamp=timestamp, moisture_a=moisture_a, moisture_b=moisture_b),
        issues=issues
    )


def _to_float(row: Row, index: int, field: str, issues: List[ParseIssue], key: Optional[str]) -> float:
    if index >= len(row):
        issues.append(ParseIssue(field=field, index=index, raw=None, reason="missing", key=key))
        return np.nan

    raw = row[index]
    try:
        return float(raw.strip())
    except ValueError:
        issues.append(ParseIssue(field=field, index=index, raw=raw, reason="not_a_number", key=key))
        return np.nan
