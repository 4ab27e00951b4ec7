"""Field name classification by statistic suffix."""

from metricbatch.core.models import StatisticKind

# Checked in order; the first matching suffix wins.
_SUFFIXES: tuple[tuple[str, StatisticKind], ...] = (
    ("_max", StatisticKind.MAXIMUM),
    ("_min", StatisticKind.MINIMUM),
    ("_sum", StatisticKind.SUM),
    ("_count", StatisticKind.COUNT),
)


def classify_field(name: str) -> tuple[StatisticKind, str]:
    """Split a field name into its statistic kind and base field name.

    Args:
        name: Field name (e.g., "latency_max").

    Returns:
        Tuple of (kind, base_name). Names without a recognized suffix
        return (StatisticKind.NONE, name).
    """
    for suffix, kind in _SUFFIXES:
        if name.endswith(suffix):
            return kind, name[: -len(suffix)]
    return StatisticKind.NONE, name
