"""Encoder for the ingestion API's PutMetricData request shape."""

import datetime
from collections.abc import Iterable
from typing import Any

from metricbatch.core.models import Datum


def encode_datum(datum: Datum) -> dict[str, Any]:
    """Encode a datum as a MetricDatum mapping.

    Args:
        datum: The datum to encode.

    Returns:
        Mapping with MetricName, Dimensions, Timestamp, StorageResolution and
        either Value or StatisticValues.
    """
    obj: dict[str, Any] = {
        "MetricName": datum.metric_name,
        "Dimensions": [{"Name": d.name, "Value": d.value} for d in datum.dimensions],
        "Timestamp": datetime.datetime.fromtimestamp(
            datum.timestamp, tz=datetime.timezone.utc
        ),
        "StorageResolution": datum.storage_resolution,
    }
    if datum.statistic_values is not None:
        stats = datum.statistic_values
        obj["StatisticValues"] = {
            "Minimum": stats.minimum,
            "Maximum": stats.maximum,
            "Sum": stats.sum,
            "SampleCount": stats.sample_count,
        }
    else:
        obj["Value"] = datum.value
    return obj


def encode_request(namespace: str, datums: Iterable[Datum]) -> dict[str, Any]:
    """Encode one partition as a PutMetricData request body.

    Args:
        namespace: Target namespace.
        datums: Datums of a single partition.

    Returns:
        Mapping with Namespace and MetricData.
    """
    return {
        "Namespace": namespace,
        "MetricData": [encode_datum(d) for d in datums],
    }
