"""Convert tagged multi-field metrics into size-bounded ingestion API batches."""

from metricbatch.adapters.clients.in_memory import InMemoryMetricsClient
from metricbatch.adapters.clients.sqlite import SQLiteMetricsClient
from metricbatch.core.aggregate import build_datums_for_metrics, build_metric_datums
from metricbatch.core.classify import classify_field
from metricbatch.core.config import OutputConfig
from metricbatch.core.convert import convert_value
from metricbatch.core.dimensions import MAX_DIMENSIONS, build_dimensions
from metricbatch.core.exceptions import MetricBatchError, TransportError
from metricbatch.core.metrics import metric
from metricbatch.core.models import (
    Datum,
    Dimension,
    Metric,
    StatisticKind,
    StatisticSet,
)
from metricbatch.core.partition import MAX_DATUMS_PER_CALL, partition_datums
from metricbatch.core.ports import MetricsClientPort
from metricbatch.core.writer import MetricsWriter

__all__ = [
    "MAX_DATUMS_PER_CALL",
    "MAX_DIMENSIONS",
    "Datum",
    "Dimension",
    "InMemoryMetricsClient",
    "Metric",
    "MetricBatchError",
    "MetricsClientPort",
    "MetricsWriter",
    "OutputConfig",
    "SQLiteMetricsClient",
    "StatisticKind",
    "StatisticSet",
    "TransportError",
    "build_datums_for_metrics",
    "build_dimensions",
    "build_metric_datums",
    "classify_field",
    "convert_value",
    "metric",
    "partition_datums",
]
