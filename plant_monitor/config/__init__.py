"""Configuration models for the plant moisture dashboard."""

from .models import (
    PipelineConfig,
    PipelineInfo,
    StorageSettings,
    CsvSettings,
    ChartSettings,
    ChannelSettings,
    DisplaySettings,
    LoggingSettings
)

__all__ = [
    "PipelineConfig",
    "PipelineInfo",
    "StorageSettings",
    "CsvSettings",
    "ChartSettings",
    "ChannelSettings",
    "DisplaySettings",
    "LoggingSettings"
]
