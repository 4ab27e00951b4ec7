"""Partitioning of datum lists into API-sized batches."""

from collections.abc import Sequence
from typing import TypeVar

# PutMetricData accepts at most 20 datums per call.
MAX_DATUMS_PER_CALL = 20

T = TypeVar("T")


def partition_datums(
    datums: Sequence[T], size: int = MAX_DATUMS_PER_CALL
) -> list[list[T]]:
    """Split datums into contiguous chunks of at most ``size`` items.

    Args:
        datums: Items to split, order is preserved.
        size: Maximum chunk length (default: MAX_DATUMS_PER_CALL).

    Returns:
        List of chunks; empty when ``datums`` is empty.

    Raises:
        ValueError: If size is not positive.
    """
    if size <= 0:
        raise ValueError(f"partition size must be positive, got {size}")
    return [list(datums[i : i + size]) for i in range(0, len(datums), size)]
