"""Pytest configuration and fixtures for Storefront Catalog tests."""

import sys
from pathlib import Path

import duckdb
import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.catalog.schema import initialize_catalog
from src.filters.debounce import PolledTimer


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingNavigator:
    """Navigate callback that records every URL it is given."""

    def __init__(self):
        self.urls = []

    def __call__(self, url: str) -> None:
        self.urls.append(url)


@pytest.fixture
def clock():
    """Fake clock starting at zero."""
    return FakeClock()


@pytest.fixture
def timer_factory(clock):
    """Timer factory producing PolledTimers on the fake clock."""

    def factory(interval, function):
        return PolledTimer(interval, function, clock=clock)

    return factory


@pytest.fixture
def navigator():
    """Recording URL navigator."""
    return RecordingNavigator()


@pytest.fixture
def catalog_db():
    """Create in-memory DuckDB seeded with the sample catalog."""
    conn = duckdb.connect(":memory:")
    initialize_catalog(conn)
    yield conn
    conn.close()
