"""Pipeline components for the plant moisture dashboard."""

from .base import (
    PipelineComponent,
    ListingComponent,
    ParsingComponent,
    AggregationComponent,
    RenderingComponent
)

from .listing import S3ObjectListingComponent
from .parsing import CsvRecordParserComponent
from .aggregation import SeriesAggregationComponent
from .table import RecordsTableRenderer
from .charts import MoistureChartRenderer
from .classification import MoistureState, classify
from .display import DashboardSurface, TableSurface

__all__ = [
    "PipelineComponent",
    "ListingComponent",
    "ParsingComponent",
    "AggregationComponent",
    "RenderingComponent",
    "S3ObjectListingComponent",
    "CsvRecordParserComponent",
    "SeriesAggregationComponent",
    "RecordsTableRenderer",
    "MoistureChartRenderer",
    "MoistureState",
    "classify",
    "DashboardSurface",
    "TableSurface"
]
