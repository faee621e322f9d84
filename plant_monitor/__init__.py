"""
Plant Moisture Telemetry Dashboard

Fetches soil-moisture telemetry batches stored as CSV objects in S3, merges
them into ordered time series and renders a records table plus
threshold-annotated moisture charts.
"""

__version__ = "1.0.0"
