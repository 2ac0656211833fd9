"""
Pytest configuration and fixtures for http-client-telemetry tests.
"""

import pytest
import responses as responses_lib

from http_client_telemetry import telemetry
from http_client_telemetry.core.http_client import HTTPClient


@pytest.fixture(autouse=True)
def clean_telemetry():
    """Every test starts and ends with an empty handler registry."""
    telemetry.reset()
    yield
    telemetry.reset()


@pytest.fixture
def base_url():
    """Base URL for testing."""
    return "https://api.example.com"


@pytest.fixture
def mock_responses():
    """Mock HTTP responses using responses library."""
    with responses_lib.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def client(base_url):
    """HTTP client instance for testing."""
    client = HTTPClient(base_url=base_url, timeout=10)
    yield client
    client.close()


@pytest.fixture
def captured_events():
    """Record every request start/stop event as (event, measurements, metadata)."""
    events = []

    def record(event, measurements, metadata, config):
        events.append((event, dict(measurements), dict(metadata)))

    telemetry.attach_many(
        "tests.captured_events",
        [("http_client", "request", "start"), ("http_client", "request", "stop")],
        record,
    )
    return events
