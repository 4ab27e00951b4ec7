"""Shared test fixtures for all test modules."""

from pathlib import Path

import pytest

from metricbatch.adapters.clients.in_memory import InMemoryMetricsClient
from metricbatch.core.config import OutputConfig
from metricbatch.core.models import Metric
from metricbatch.core.writer import MetricsWriter


@pytest.fixture
def datums_db_path(tmp_path: Path) -> str:
    """Provide a temporary database path for SQLite client tests."""
    return str(tmp_path / "datums.db")


@pytest.fixture
def client() -> InMemoryMetricsClient:
    """Fixture providing an empty in-memory client."""
    return InMemoryMetricsClient()


@pytest.fixture
def make_writer(client: InMemoryMetricsClient):
    """Factory fixture creating a MetricsWriter around the in-memory client.

    Usage:
        async def test_something(make_writer, client):
            writer = make_writer(write_statistics=True)
            await writer.write([...])
    """

    def _make(
        namespace: str = "Test/Namespace",
        high_resolution_metrics: bool = False,
        write_statistics: bool = False,
    ) -> MetricsWriter:
        config = OutputConfig(
            namespace=namespace,
            high_resolution_metrics=high_resolution_metrics,
            write_statistics=write_statistics,
        )
        return MetricsWriter(client, config)

    return _make


@pytest.fixture
def statistic_metric() -> Metric:
    """Metric carrying a complete statistic set plus one plain field."""
    return Metric(
        name="http",
        fields={
            "latency_min": 1.0,
            "latency_max": 9.0,
            "latency_sum": 30.0,
            "latency_count": 6,
            "status": 200,
        },
        tags={"host": "web-1", "region": "eu-west-1"},
        timestamp=1702300000.0,
    )
