"""
Pytest configuration and shared fixtures for testing.

Provides common test fixtures and an in-memory object store for all test modules.
"""

import tempfile
import pytest
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Dict, List, Optional

from plant_monitor.config import PipelineConfig
from plant_monitor.models import ObjectListing, TelemetryObject
from plant_monitor.storage import ObjectStore


class InMemoryObjectStore(ObjectStore):
    """ObjectStore fake that records every call."""

    def __init__(self, bucket: str = "test-bucket", is_truncated: bool = False):
        self.bucket = bucket
        self.is_truncated = is_truncated
        self.objects: Dict[str, TelemetryObject] = {}
        self.bodies: Dict[str, bytes] = {}
        self.calls: List[tuple] = []
        self.list_error: Optional[Exception] = None
        self.get_errors: Dict[str, Exception] = {}

    def put(self, key: str, body, last_modified: datetime) -> TelemetryObject:
        if isinstance(body, str):
            body = body.encode("utf-8")
        obj = TelemetryObject(key=key, last_modified=last_modified, size=len(body))
        self.objects[key] = obj
        self.bodies[key] = body
        return obj

    def list(self, bucket: str, page_size: int) -> ObjectListing:
        self.calls.append(("list", bucket, page_size))
        if self.list_error is not None:
            raise self.list_error
        page = list(self.objects.values())[:page_size]
        return ObjectListing(objects=page, is_truncated=self.is_truncated)

    def get(self, bucket: str, key: str) -> bytes:
        self.calls.append(("get", bucket, key))
        if key in self.get_errors:
            raise self.get_errors[key]
        return self.bodies[key]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_config_data(temp_dir):
    """Raw configuration mapping as it would appear in YAML."""
    return {
        "pipeline": {
            "name": "test_plant_moisture_dashboard",
            "version": "1.0.0"
        },
        "storage": {
            "bucket": "test-bucket",
            "region": "eu-central-1",
            "max_keys": 10,
            "page_size": 1000
        },
        "csv": {
            "encoding": "utf-8",
            "timestamp_index": 0,
            "moisture_a_index": 1,
            "moisture_b_index": 3
        },
        "charts": {
            "threshold": 20000,
            "y_min": 0,
            "y_max": 30000
        },
        "display": {
            "title": "Test Dashboard",
            "table_id": "recordsTable",
            "output_path": str(temp_dir / "output" / "dashboard.html")
        },
        "logging": {
            "level": "DEBUG",
            "log_file": None
        }
    }


@pytest.fixture
def sample_config(sample_config_data):
    """Create a test configuration with temporary paths."""
    return PipelineConfig(**sample_config_data)


@pytest.fixture
def base_time():
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def empty_store():
    return InMemoryObjectStore()


@pytest.fixture
def scenario_store(base_time):
    """
    Two objects, the second modified later than the first.

    The older object holds a wet plant 1 reading, the newer one a dry
    plant 1 reading.
    """
    store = InMemoryObjectStore()
    store.put("obj1.csv", "2024-01-01T00:00,15000,x,25000\n", base_time)
    store.put("obj2.csv", "2024-01-01T00:01,30000,x,10000\n", base_time + timedelta(minutes=5))
    return store


@pytest.fixture
def multi_row_store(base_time):
    """Three objects with several rows each, inserted oldest first."""
    store = InMemoryObjectStore()
    store.put(
        "2024-01-01T10-00.csv",
        "2024-01-01T10:00,11000,1,12000\n2024-01-01T10:10,11500,2,12500\n",
        base_time - timedelta(hours=2)
    )
    store.put(
        "2024-01-01T11-00.csv",
        "2024-01-01T11:00,21000,3,22000\n2024-01-01T11:10,21500,4,22500\n2024-01-01T11:20,22000,5,23000\n",
        base_time - timedelta(hours=1)
    )
    store.put(
        "2024-01-01T12-00.csv",
        "2024-01-01T12:00,9000,6,8000\n",
        base_time
    )
    return store
