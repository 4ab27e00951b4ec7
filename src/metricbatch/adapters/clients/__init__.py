"""Client adapters implementing MetricsClientPort."""

from metricbatch.adapters.clients.in_memory import InMemoryMetricsClient
from metricbatch.adapters.clients.sqlite import SQLiteMetricsClient

__all__ = [
    "InMemoryMetricsClient",
    "SQLiteMetricsClient",
]
