"""
Abstract base classes for pipeline components.

These define the interfaces that all pipeline components must implement,
ensuring consistency and enabling easy testing through dependency injection.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from plant_monitor.config import PipelineConfig
from plant_monitor.models import AggregationResult, Row, TelemetryObject


class PipelineComponent(ABC):
    """Base class for all pipeline components."""

    def __init__(self, config: PipelineConfig):
        """Initialize component with pipeline configuration."""
        self.config = config

    @abstractmethod
    def execute(self, *args, **kwargs) -> Any:
        """Execute the component's main functionality."""
        pass


class ListingComponent(PipelineComponent):
    """Abstract base for object listing components."""

    @abstractmethod
    def execute(self, bucket: Optional[str] = None, max_keys: Optional[int] = None) -> List[TelemetryObject]:
        """
        Select the most recently modified telemetry objects.

        Args:
            bucket: Bucket name, otherwise uses config
            max_keys: Number of objects to keep, otherwise uses config

        Returns:
            Objects ordered newest first
        """
        pass


class ParsingComponent(PipelineComponent):
    """Abstract base for record parsing components."""

    @abstractmethod
    def execute(self, bucket: str, key: str) -> List[Row]:
        """
        Fetch one object and parse it into rows.

        Args:
            bucket: Bucket name
            key: Object key

        Returns:
            Rows in file order
        """
        pass


class AggregationComponent(PipelineComponent):
    """Abstract base for series aggregation components."""

    @abstractmethod
    def execute(self, objects: List[TelemetryObject], bucket: Optional[str] = None) -> AggregationResult:
        """
        Merge the rows of all objects into series and a records table.

        Args:
            objects: Objects in listing order
            bucket: Bucket name, otherwise uses config

        Returns:
            Aggregated series, records and parse issues
        """
        pass


class RenderingComponent(PipelineComponent):
    """Abstract base for components that draw onto the dashboard surface."""

    @abstractmethod
    def execute(self, data: Any, surface: Any) -> Optional[Dict[str, Any]]:
        """
        Render aggregated data onto a display surface.

        Args:
            data: Records or series produced by aggregation
            surface: Target display surface

        Returns:
            Optional mapping of rendered artifacts
        """
        pass
