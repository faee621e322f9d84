"""Utility modules for the plant moisture dashboard."""

from .logging import setup_logging, get_logger, log_stats
from .exceptions import (
    PipelineError,
    ListingError,
    FetchError,
    RenderError,
    ConfigurationError
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_stats",
    "PipelineError",
    "ListingError",
    "FetchError",
    "RenderError",
    "ConfigurationError"
]
