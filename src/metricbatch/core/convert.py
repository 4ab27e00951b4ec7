"""Conversion of raw field values into API-safe floats."""

import datetime
import math

# Numeric domain accepted by the ingestion API. The lower bound only applies
# to positive values; zero and negative values are never underflow-rejected.
MIN_POSITIVE_VALUE = 8.515920e-109
MAX_VALUE = 1.174271e108


def _to_float(value: object) -> float | None:
    """Widen a supported scalar to float, or return None for other types."""
    # bool must be checked before int: bool is an int subclass.
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return None
    if isinstance(value, float):
        return value
    if isinstance(value, datetime.datetime):
        return float(math.floor(value.timestamp()))
    return None


def in_range(value: float) -> bool:
    """Check a float against the API's numeric domain.

    Args:
        value: Converted field value.

    Returns:
        False for NaN, infinities, positive values below
        MIN_POSITIVE_VALUE and values above MAX_VALUE.
    """
    if math.isnan(value) or math.isinf(value):
        return False
    if 0 < value < MIN_POSITIVE_VALUE:
        return False
    return value <= MAX_VALUE


def convert_value(value: object) -> float | None:
    """Convert a field value into a float accepted by the ingestion API.

    Integers (any width), floats, booleans and datetimes are supported.
    Booleans become 1.0/0.0 and datetimes become whole Unix epoch seconds.

    Args:
        value: Raw field value from a metric.

    Returns:
        The converted float, or None when the type is unsupported or the
        result falls outside the accepted range.
    """
    converted = _to_float(value)
    if converted is None or not in_range(converted):
        return None
    return converted
