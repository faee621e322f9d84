"""
Main pipeline orchestrator for the plant moisture dashboard.

This module coordinates one fetch-and-display cycle:
listing -> parsing/aggregation -> table and chart rendering
"""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from plant_monitor.config import PipelineConfig
from plant_monitor.models import CycleResult
from plant_monitor.components import (
    DashboardSurface,
    S3ObjectListingComponent,
    CsvRecordParserComponent,
    SeriesAggregationComponent,
    RecordsTableRenderer,
    MoistureChartRenderer
)
from plant_monitor.storage import S3ObjectStore
from plant_monitor.utils import get_logger, setup_logging, PipelineError


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "default.yaml"

logger = get_logger(__name__)


class MoistureDashboardPipeline:
    """Main pipeline orchestrator that coordinates all components."""

    def __init__(self, config: PipelineConfig):
        """
        Initialize pipeline with configuration.

        Args:
            config: Pipeline configuration loaded from YAML
        """
        self.config = config

        # Components will be injected (dependency injection pattern)
        self.listing: Optional[S3ObjectListingComponent] = None
        self.aggregation: Optional[SeriesAggregationComponent] = None
        self.table_renderer: Optional[RecordsTableRenderer] = None
        self.chart_renderer: Optional[MoistureChartRenderer] = None

    def set_components(
        self,
        listing: S3ObjectListingComponent,
        aggregation: SeriesAggregationComponent,
        table_renderer: RecordsTableRenderer,
        chart_renderer: MoistureChartRenderer
    ):
        """
        Set pipeline components (dependency injection).

        Args:
            listing: Object listing component
            aggregation: Series aggregation component
            table_renderer: Records table renderer
            chart_renderer: Moisture chart renderer
        """
        self.listing = listing
        self.aggregation = aggregation
        self.table_renderer = table_renderer
        self.chart_renderer = chart_renderer

    def execute(
        self,
        surface: DashboardSurface,
        bucket: Optional[str] = None,
        max_keys: Optional[int] = None
    ) -> CycleResult:
        """
        Run one fetch-and-display cycle.

        Rendering starts only after every object has been aggregated. If
        listing or any fetch fails the cycle aborts before rendering, and
        the surface keeps whatever it held before.

        Args:
            surface: Dashboard surface to render into
            bucket: Optional bucket override
            max_keys: Optional number of objects to aggregate

        Returns:
            Cycle execution results
        """
        if not all([self.listing, self.aggregation, self.table_renderer, self.chart_renderer]):
            raise ValueError("All pipeline components must be set before execution")

        start_time = time.time()
        errors = []
        objects_listed = 0

        try:
            logger.info(f"Starting fetch cycle: {self.config.pipeline.name}")

            logger.info("Step 1: Object Listing")
            recent_objects = self.listing.execute(bucket=bucket, max_keys=max_keys)
            objects_listed = len(recent_objects)

            logger.info("Step 2: Series Aggregation")
            aggregated = self.aggregation.execute(recent_objects, bucket=bucket)

            logger.info("Step 3: Rendering")
            self.table_renderer.execute(aggregated.records, surface.table)
            self.chart_renderer.execute(aggregated.series, surface)

            return CycleResult(
                success=True,
                objects_listed=objects_listed,
                objects_processed=aggregated.objects_processed,
                records_aggregated=len(aggregated.records),
                parse_issues=len(aggregated.issues),
                execution_time_seconds=time.time() - start_time,
                errors=errors
            )

        except PipelineError as e:
            error_msg = f"Error fetching or displaying records: {str(e)}"
            errors.append(error_msg)
            logger.error(error_msg)

            return CycleResult(
                success=False,
                objects_listed=objects_listed,
                execution_time_seconds=time.time() - start_time,
                errors=errors
            )


def build_pipeline(config: PipelineConfig, store=None) -> MoistureDashboardPipeline:
    """Wire all components against an object store (S3 from config by default)."""
    if store is None:
        store = S3ObjectStore.from_config(config.storage)

    parser = CsvRecordParserComponent(config, store)

    pipeline = MoistureDashboardPipeline(config)
    pipeline.set_components(
        S3ObjectListingComponent(config, store),
        SeriesAggregationComponent(config, parser),
        RecordsTableRenderer(config),
        MoistureChartRenderer(config)
    )
    return pipeline


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch recent soil-moisture telemetry from S3 and render a dashboard"
    )
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to YAML configuration")
    parser.add_argument("--bucket", help="Override storage.bucket")
    parser.add_argument("--max-keys", type=int, help="Override storage.max_keys")
    parser.add_argument("--output", type=Path, help="Override display.output_path")
    parser.add_argument("--log-level", help="Override logging.level")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for one dashboard refresh."""
    args = parse_args(argv)

    try:
        config = PipelineConfig.from_yaml(args.config)
    except Exception as e:
        print(f"Failed to load configuration: {e}")
        return 2

    if args.bucket:
        config.storage.bucket = args.bucket
    if args.max_keys is not None:
        config.storage.max_keys = args.max_keys
    if args.output:
        config.display.output_path = str(args.output.resolve())

    log_file = Path(config.logging.log_file) if config.logging.log_file else None
    setup_logging(level=args.log_level or config.logging.level, log_file=log_file)

    try:
        pipeline = build_pipeline(config)
        surface = DashboardSurface.from_config(config)
        result = pipeline.execute(surface)

        if result.success:
            surface.write_html(config.display.output_path)

    except PipelineError as e:
        logger.error(f"Dashboard refresh failed: {e}")
        return 1

    print(f"\n📊 Fetch Cycle Summary:")
    print(f"   Success: {result.success}")
    print(f"   Objects listed: {result.objects_listed}")
    print(f"   Records aggregated: {result.records_aggregated}")
    print(f"   Parse issues: {result.parse_issues}")
    print(f"   Execution time: {result.execution_time_seconds:.2f} seconds")

    if result.errors:
        print(f"   Errors: {', '.join(result.errors)}")
    else:
        print(f"   Dashboard: {config.display.output_path}")

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
