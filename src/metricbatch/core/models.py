"""Core domain models for metric conversion."""

from dataclasses import dataclass, field
from enum import Enum


class StatisticKind(Enum):
    """Statistic component a field name refers to, derived from its suffix."""

    NONE = "none"
    MINIMUM = "min"
    MAXIMUM = "max"
    SUM = "sum"
    COUNT = "count"


@dataclass(frozen=True)
class Metric:
    """A multi-field, tagged, timestamped measurement.

    Attributes:
        name: Metric name (e.g., http).
        fields: Field name to scalar value.
        tags: Key-value pairs describing the source of the measurement.
        timestamp: Unix timestamp in seconds.
    """

    name: str
    fields: dict[str, object]
    tags: dict[str, str] = field(default_factory=dict)
    timestamp: float = 0.0


@dataclass(frozen=True)
class Dimension:
    """A named tag attached to a datum."""

    name: str
    value: str


@dataclass(frozen=True)
class StatisticSet:
    """Pre-aggregated minimum/maximum/sum/count bundle."""

    minimum: float
    maximum: float
    sum: float
    sample_count: float


@dataclass(frozen=True)
class Datum:
    """One measurement record in the ingestion API's schema.

    Exactly one of ``value`` and ``statistic_values`` is set.

    Attributes:
        metric_name: Name joined from metric, field and optional statistic.
        dimensions: At most ten dimensions, host first when present.
        timestamp: Unix timestamp in seconds, copied from the source metric.
        storage_resolution: 1 for high resolution, 60 otherwise.
        value: Plain scalar value.
        statistic_values: Statistic set replacing four plain values.
    """

    metric_name: str
    dimensions: tuple[Dimension, ...]
    timestamp: float
    storage_resolution: int = 60
    value: float | None = None
    statistic_values: StatisticSet | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.statistic_values is None):
            raise ValueError(
                "Datum requires exactly one of value or statistic_values"
            )
