"""Conversion of metrics into ingestion API datums."""

import logging
from collections.abc import Iterable

from metricbatch.core.classify import classify_field
from metricbatch.core.convert import convert_value
from metricbatch.core.dimensions import build_dimensions
from metricbatch.core.fields import (
    FieldAccumulator,
    StatisticField,
    ValueField,
    build_datums,
)
from metricbatch.core.models import Datum, Metric, StatisticKind

logger = logging.getLogger(__name__)

HIGH_RESOLUTION = 1
STANDARD_RESOLUTION = 60


def build_metric_datums(
    metric: Metric,
    write_statistics: bool = False,
    high_resolution: bool = False,
) -> list[Datum]:
    """Convert one metric into datums.

    Fields whose values cannot be converted are skipped. With
    ``write_statistics`` enabled, fields suffixed ``_min``, ``_max``,
    ``_sum`` and ``_count`` are grouped by base name and emitted as a single
    statistic-set datum when all four are present.

    A plain field named like a statistic base (``latency`` next to
    ``latency_min``...) keeps its own datum, so two datums can share the
    name ``<metric>_latency``: one with a value, one with a statistic set.

    Args:
        metric: Source metric.
        write_statistics: Group statistic-suffixed fields into statistic sets.
        high_resolution: Use 1-second storage resolution instead of 60.

    Returns:
        All datums for the metric, sharing its timestamp and dimensions.
    """
    storage_resolution = HIGH_RESOLUTION if high_resolution else STANDARD_RESOLUTION
    dimensions = build_dimensions(metric.tags)
    # Plain fields and statistic bases are keyed apart so a plain field never
    # collides with the base name of a statistic field.
    accumulators: dict[tuple[bool, str], FieldAccumulator] = {}

    for name, raw in metric.fields.items():
        value = convert_value(raw)
        if value is None:
            logger.debug(
                "Dropping field %s of metric %s: unsupported or out of range",
                name,
                metric.name,
            )
            continue

        kind, base_name = classify_field(name)

        if not write_statistics or kind is StatisticKind.NONE:
            accumulators[(False, name)] = ValueField(
                metric_name=metric.name,
                field_name=name,
                value=value,
                dimensions=dimensions,
                timestamp=metric.timestamp,
                storage_resolution=storage_resolution,
            )
            continue

        acc = accumulators.get((True, base_name))
        if not isinstance(acc, StatisticField):
            acc = StatisticField(
                metric_name=metric.name,
                field_name=base_name,
                dimensions=dimensions,
                timestamp=metric.timestamp,
                storage_resolution=storage_resolution,
            )
            accumulators[(True, base_name)] = acc
        acc.add_value(kind, value)

    datums: list[Datum] = []
    for acc in accumulators.values():
        datums.extend(build_datums(acc))
    return datums


def build_datums_for_metrics(
    metrics: Iterable[Metric],
    write_statistics: bool = False,
    high_resolution: bool = False,
) -> list[Datum]:
    """Convert a batch of metrics into one flat datum list."""
    datums: list[Datum] = []
    for metric in metrics:
        datums.extend(build_metric_datums(metric, write_statistics, high_resolution))
    return datums
