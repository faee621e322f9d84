"""
Custom exceptions for the plant moisture dashboard.

Listing and fetch failures abort a whole fetch cycle; malformed CSV content
never raises and is reported as parse issues instead.
"""


class PipelineError(Exception):
    """Base exception for all pipeline-related errors."""
    pass


class ListingError(PipelineError):
    """Raised when the object store listing call fails."""
    pass


class FetchError(PipelineError):
    """Raised when a telemetry object cannot be retrieved or decoded."""
    pass


class RenderError(PipelineError):
    """Raised when the table or charts cannot be rendered."""
    pass


class ConfigurationError(PipelineError):
    """Raised when configuration is invalid or missing."""
    pass
