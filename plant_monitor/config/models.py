"""
Pydantic models for dashboard configuration.

These models provide type-safe parsing and validation of the YAML configuration file.
They ensure all required settings are present and have the correct types.
"""

from pathlib import Path
from typing import List, Optional, Union
import yaml
from pydantic import BaseModel, Field, field_validator, ConfigDict

from plant_monitor.utils.exceptions import ConfigurationError


PROJECT_ROOT = Path(__file__).parent.parent.parent


class PipelineInfo(BaseModel):
    """Basic pipeline metadata."""
    name: str = Field(..., description="Pipeline name")
    version: str = Field(..., description="Pipeline version")


class StorageSettings(BaseModel):
    """Object store location and listing limits."""
    bucket: str = Field(..., description="S3 bucket holding telemetry CSV objects")
    region: str = Field("eu-central-1", description="AWS region of the bucket")
    profile_name: Optional[str] = Field(None, description="Optional AWS profile for credentials")
    endpoint_url: Optional[str] = Field(None, description="Optional S3-compatible endpoint override")
    max_keys: int = Field(10, ge=1, description="Number of most recent objects to aggregate")
    page_size: int = Field(1000, ge=1, le=1000, description="Listing page size; only one page is read")


class CsvSettings(BaseModel):
    """Positional layout of the telemetry CSV rows."""
    encoding: str = Field("utf-8", description="Text encoding of object bodies")
    timestamp_index: int = Field(0, ge=0, description="Column holding the reading timestamp")
    moisture_a_index: int = Field(1, ge=0, description="Column holding plant 1 moisture")
    moisture_b_index: int = Field(3, ge=0, description="Column holding plant 2 moisture")


class ChannelSettings(BaseModel):
    """One moisture chart."""
    container_id: str = Field(..., description="Stable id of the chart container")
    label: str = Field(..., description="Dataset label")
    color: str = Field(..., description="Line color")


def _default_channels() -> List[ChannelSettings]:
    return [
        ChannelSettings(
            container_id="plant1MoistureChart",
            label="Plant 1 Moisture",
            color="rgba(75, 192, 192, 1)"
        ),
        ChannelSettings(
            container_id="plant2MoistureChart",
            label="Plant 2 Moisture",
            color="rgba(153, 102, 255, 1)"
        ),
    ]


class ChartSettings(BaseModel):
    """Shared chart configuration for both moisture charts."""
    threshold: float = Field(20000, description="Wet/dry threshold; values above are Dry")
    y_min: float = Field(0, description="Lower y-axis bound")
    y_max: float = Field(30000, description="Upper y-axis bound")
    threshold_color: str = Field("red", description="Reference line color")
    threshold_width: int = Field(2, description="Reference line width")
    dry_color: str = Field("red", description="Hover label color for Dry readings")
    wet_color: str = Field("blue", description="Hover label color for Wet readings")
    channels: List[ChannelSettings] = Field(default_factory=_default_channels, description="Plant 1 and plant 2 charts")

    @field_validator('channels')
    @classmethod
    def require_two_channels(cls, v):
        """Exactly one chart per moisture series."""
        if len(v) != 2:
            raise ValueError(f"Expected 2 chart channels, got {len(v)}")
        return v


class DisplaySettings(BaseModel):
    """Dashboard page output."""
    title: str = Field("Plant Moisture Dashboard", description="Page title")
    table_id: str = Field("recordsTable", description="Stable id of the records table")
    output_path: str = Field("output/dashboard.html", description="Where the dashboard page is written")

    @field_validator('output_path', mode='before')
    @classmethod
    def resolve_output_path(cls, v):
        """Convert relative paths to absolute paths."""
        if isinstance(v, str):
            path = Path(v)
            if not path.is_absolute():
                path = (PROJECT_ROOT / v).resolve()
            return str(path)
        return v


class LoggingSettings(BaseModel):
    """Logging configuration."""
    level: str = Field("INFO", description="Root log level")
    log_file: Optional[str] = Field(None, description="Optional log file path")


class PipelineConfig(BaseModel):
    """Complete dashboard configuration model."""
    model_config = ConfigDict(
        # Allow population by alias so YAML can use "csv"
        populate_by_name=True,
        extra='forbid'
    )

    pipeline: PipelineInfo = Field(..., description="Pipeline metadata")
    storage: StorageSettings = Field(..., description="Object store settings")
    csv_layout: CsvSettings = Field(default_factory=CsvSettings, description="CSV row layout", alias="csv")
    charts: ChartSettings = Field(default_factory=ChartSettings, description="Chart settings")
    display: DisplaySettings = Field(default_factory=DisplaySettings, description="Dashboard output settings")
    logging: LoggingSettings = Field(default_factory=LoggingSettings, description="Logging settings")

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "PipelineConfig":
        """Load configuration from YAML file."""
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        return cls(**config_data)
