"""Per-field accumulators and datum construction.

A field accumulator is either a ValueField (one plain value) or a
StatisticField (a sparse statistic kind to value mapping). Both are turned
into datums by build_datums().
"""

import logging
from dataclasses import dataclass, field

from metricbatch.core.models import Datum, Dimension, StatisticKind, StatisticSet

logger = logging.getLogger(__name__)

_REQUIRED_KINDS = frozenset(
    {
        StatisticKind.MINIMUM,
        StatisticKind.MAXIMUM,
        StatisticKind.SUM,
        StatisticKind.COUNT,
    }
)


def _join_name(*parts: str) -> str:
    return "_".join(parts)


@dataclass
class ValueField:
    """Accumulator holding a single plain value."""

    metric_name: str
    field_name: str
    value: float
    dimensions: tuple[Dimension, ...]
    timestamp: float
    storage_resolution: int


@dataclass
class StatisticField:
    """Accumulator collecting statistic components of one base field."""

    metric_name: str
    field_name: str
    dimensions: tuple[Dimension, ...]
    timestamp: float
    storage_resolution: int
    values: dict[StatisticKind, float] = field(default_factory=dict)

    def add_value(self, kind: StatisticKind, value: float) -> None:
        """Record a statistic component, overwriting any previous value.

        Args:
            kind: Statistic component. StatisticKind.NONE is ignored.
            value: Converted field value.
        """
        if kind is StatisticKind.NONE:
            return
        self.values[kind] = value

    def has_all_kinds(self) -> bool:
        """Return True if minimum, maximum, sum and count are all present."""
        return _REQUIRED_KINDS.issubset(self.values)


FieldAccumulator = ValueField | StatisticField


def _build_value_datums(acc: ValueField) -> list[Datum]:
    return [
        Datum(
            metric_name=_join_name(acc.metric_name, acc.field_name),
            dimensions=acc.dimensions,
            timestamp=acc.timestamp,
            storage_resolution=acc.storage_resolution,
            value=acc.value,
        )
    ]


def _build_statistic_datums(acc: StatisticField) -> list[Datum]:
    if acc.has_all_kinds():
        statistics = StatisticSet(
            minimum=acc.values[StatisticKind.MINIMUM],
            maximum=acc.values[StatisticKind.MAXIMUM],
            sum=acc.values[StatisticKind.SUM],
            sample_count=acc.values[StatisticKind.COUNT],
        )
        return [
            Datum(
                metric_name=_join_name(acc.metric_name, acc.field_name),
                dimensions=acc.dimensions,
                timestamp=acc.timestamp,
                storage_resolution=acc.storage_resolution,
                statistic_values=statistics,
            )
        ]

    logger.debug(
        "Incomplete statistic set for %s_%s, emitting %d independent datums",
        acc.metric_name,
        acc.field_name,
        len(acc.values),
    )
    return [
        Datum(
            metric_name=_join_name(acc.metric_name, acc.field_name, kind.value),
            dimensions=acc.dimensions,
            timestamp=acc.timestamp,
            storage_resolution=acc.storage_resolution,
            value=value,
        )
        for kind, value in acc.values.items()
    ]


def build_datums(acc: FieldAccumulator) -> list[Datum]:
    """Build the datums for one field accumulator.

    A ValueField yields one datum named ``<metric>_<field>``. A StatisticField
    with all four components yields one statistic-set datum with the same
    naming; otherwise it yields one plain datum per present component, named
    ``<metric>_<field>_<kind>``.

    Args:
        acc: Accumulator built while processing one metric.

    Returns:
        List of datums.
    """
    if isinstance(acc, StatisticField):
        return _build_statistic_datums(acc)
    return _build_value_datums(acc)
