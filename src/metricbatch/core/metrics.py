"""Metric helper function for creating Metric objects."""

import time
from collections.abc import Mapping

from metricbatch.core.models import Metric


def metric(
    name: str,
    fields: Mapping[str, object],
    tags: Mapping[str, str] | None = None,
    timestamp: float | None = None,
) -> Metric:
    """Create a metric with an automatic timestamp.

    Args:
        name: Metric name (e.g., "http")
        fields: Field values (e.g., {"latency": 42.0})
        tags: Optional tags, used as datum dimensions
        timestamp: Unix timestamp in seconds (default: current time)

    Returns:
        Metric holding copies of the given fields and tags
    """
    return Metric(
        name=name,
        fields=dict(fields),
        tags=dict(tags or {}),
        timestamp=time.time() if timestamp is None else timestamp,
    )
