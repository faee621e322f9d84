"""Data models for the plant moisture dashboard."""

from .data import (
    Row,
    TelemetryObject,
    ObjectListing,
    Reading,
    ParseIssue,
    ReadingResult,
    SeriesState,
    AggregationResult,
    CycleResult
)

__all__ = [
    "Row",
    "TelemetryObject",
    "ObjectListing",
    "Reading",
    "ParseIssue",
    "ReadingResult",
    "SeriesState",
    "AggregationResult",
    "CycleResult"
]
