"""
Pydantic models for data structures used throughout the pipeline.

These models ensure type safety and validation for data flowing between components.
"""

from datetime import datetime
from typing import List, Optional
import pandas as pd
from pydantic import BaseModel, Field, ConfigDict


# One parsed CSV line; positional schema, no named columns
Row = List[str]


class TelemetryObject(BaseModel):
    """One stored CSV batch of sensor readings."""
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Object key in the bucket")
    last_modified: datetime = Field(..., description="Last modification time reported by the store")
    size: int = Field(0, description="Object size in bytes")


class ObjectListing(BaseModel):
    """A single page returned by the object store listing call."""
    objects: List[TelemetryObject] = Field(default_factory=list, description="Objects on this page")
    is_truncated: bool = Field(False, description="Whether the store holds more objects than this page")


class Reading(BaseModel):
    """Typed projection of one Row. Moisture values may be NaN."""
    timestamp: str = Field(..., description="Reading timestamp as written by the sensor host")
    moisture_a: float = Field(..., description="Plant 1 soil moisture")
    moisture_b: float = Field(..., description="Plant 2 soil moisture")


class ParseIssue(BaseModel):
    """A positional field that could not be converted."""
    field: str = Field(..., description="Reading field name")
    index: int = Field(..., description="Column index in the row")
    raw: Optional[str] = Field(None, description="Raw text, None when the column is missing")
    reason: str = Field(..., description="'missing' or 'not_a_number'")
    key: Optional[str] = Field(None, description="Object key the row came from")


class ReadingResult(BaseModel):
    """Outcome of converting a Row into a Reading."""
    reading: Reading
    issues: List[ParseIssue] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


class SeriesState(BaseModel):
    """
    Three index-aligned series built during one fetch cycle.

    Readings are appended newest object first, so index 0 belongs to the most
    recently modified object. Charts use ``reversed()`` to plot oldest first.
    """
    timestamps: List[str] = Field(default_factory=list)
    moisture_a: List[float] = Field(default_factory=list)
    moisture_b: List[float] = Field(default_factory=list)

    def append(self, reading: Reading) -> None:
        self.timestamps.append(reading.timestamp)
        self.moisture_a.append(reading.moisture_a)
        self.moisture_b.append(reading.moisture_b)

    def __len__(self) -> int:
        return len(self.timestamps)

    def is_aligned(self) -> bool:
        return len(self.timestamps) == len(self.moisture_a) == len(self.moisture_b)

    def reversed(self) -> "SeriesState":
        """Return a new state in chronological (oldest first) order."""
        return SeriesState(
            timestamps=self.timestamps[::-1],
            moisture_a=self.moisture_a[::-1],
            moisture_b=self.moisture_b[::-1]
        )

    def timestamp_for_display_index(self, index: int) -> str:
        """
        Map a 0-based index on the reversed (chronological) chart back to
        the original timestamp.

        Args:
            index: Position of the point on the chart

        Returns:
            ``timestamps[len - 1 - index]``
        """
        if not 0 <= index < len(self):
            raise IndexError(f"Display index {index} out of range for {len(self)} readings")
        return self.timestamps[len(self) - 1 - index]

    def to_frame(self) -> pd.DataFrame:
        """Series as a DataFrame, one row per reading, in stored order."""
        return pd.DataFrame({
            "timestamp": pd.Series(self.timestamps, dtype="object"),
            "moisture_a": pd.Series(self.moisture_a, dtype="float64"),
            "moisture_b": pd.Series(self.moisture_b, dtype="float64")
        })


class AggregationResult(BaseModel):
    """Everything produced by one aggregation pass."""
    series: SeriesState = Field(default_factory=SeriesState, description="Aggregated moisture series")
    records: List[Row] = Field(default_factory=list, description="All parsed rows in object/row order")
    issues: List[ParseIssue] = Field(default_factory=list, description="Conversion issues found")
    objects_processed: int = Field(0, description="Number of objects fetched and parsed")


class CycleResult(BaseModel):
    """Overall result of one fetch-and-display cycle."""
    success: bool = Field(..., description="Whether the cycle completed successfully")
    objects_listed: int = Field(0, description="Number of objects selected by the lister")
    objects_processed: int = Field(0, description="Number of objects aggregated")
    records_aggregated: int = Field(0, description="Number of rows aggregated")
    parse_issues: int = Field(0, description="Number of fields that degraded to NaN or empty")
    execution_time_seconds: float = Field(..., description="Total execution time")
    errors: List[str] = Field(default_factory=list, description="Any errors encountered")
