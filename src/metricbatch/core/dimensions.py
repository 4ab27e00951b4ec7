"""Dimension selection from metric tags."""

from collections.abc import Mapping

from metricbatch.core.models import Dimension

MAX_DIMENSIONS = 10
HOST_TAG = "host"


def build_dimensions(tags: Mapping[str, str]) -> tuple[Dimension, ...]:
    """Build a bounded, deterministic dimension list from tags.

    The ``host`` tag always comes first when it has a value. Remaining tags
    follow in ascending key order, skipping empty values, until
    MAX_DIMENSIONS is reached.

    Args:
        tags: Metric tags.

    Returns:
        Tuple of at most MAX_DIMENSIONS dimensions.
    """
    dimensions: list[Dimension] = []

    host = tags.get(HOST_TAG)
    if host:
        dimensions.append(Dimension(name=HOST_TAG, value=host))

    for key in sorted(k for k in tags if k != HOST_TAG):
        if len(dimensions) >= MAX_DIMENSIONS:
            break
        value = tags[key]
        if value == "":
            continue
        dimensions.append(Dimension(name=key, value=value))

    return tuple(dimensions)
