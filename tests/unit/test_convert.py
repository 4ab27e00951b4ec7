"""Tests for field value conversion."""

import datetime
import math
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from metricbatch.core.convert import (
    MAX_VALUE,
    MIN_POSITIVE_VALUE,
    convert_value,
    in_range,
)


class TestConvertValueTypes:
    """Tests for convert_value() type handling."""

    @pytest.mark.core
    def test_true_converts_to_one(self) -> None:
        """Boolean True becomes 1.0."""
        assert convert_value(True) == 1.0

    @pytest.mark.core
    def test_false_converts_to_zero(self) -> None:
        """Boolean False becomes 0.0."""
        assert convert_value(False) == 0.0

    @pytest.mark.core
    def test_bool_result_is_float(self) -> None:
        """Booleans are widened to float, not kept as bool."""
        result = convert_value(True)
        assert type(result) is float

    @pytest.mark.core
    def test_int_widens_to_float(self) -> None:
        """Integers are widened to float."""
        result = convert_value(42)
        assert result == 42.0
        assert type(result) is float

    @pytest.mark.core
    def test_unsigned_64_bit_max_converts(self) -> None:
        """The largest unsigned 64-bit integer is accepted."""
        assert convert_value(2**64 - 1) == float(2**64 - 1)

    @pytest.mark.core
    def test_negative_int_converts(self) -> None:
        """Negative integers are accepted."""
        assert convert_value(-(2**63)) == float(-(2**63))

    @pytest.mark.core
    def test_float_passes_through(self) -> None:
        """Floats within range are returned unchanged."""
        assert convert_value(3.25) == 3.25

    @pytest.mark.core
    def test_datetime_converts_to_epoch_seconds(self) -> None:
        """Datetimes become whole Unix epoch seconds."""
        value = datetime.datetime(
            2023, 12, 11, 13, 6, 40, 500000, tzinfo=datetime.timezone.utc
        )
        assert convert_value(value) == 1702300000.0

    @pytest.mark.core
    @pytest.mark.parametrize(
        "value",
        ["42", b"42", None, Decimal("1.5"), [1], {"a": 1}, 1 + 2j],
    )
    def test_unsupported_types_are_rejected(self, value: object) -> None:
        """Values without a numeric conversion return None."""
        assert convert_value(value) is None

    @pytest.mark.core
    def test_int_too_large_for_float_is_rejected(self) -> None:
        """Integers that overflow float are dropped, not raised."""
        assert convert_value(10**400) is None


class TestConvertValueRange:
    """Tests for the numeric range check."""

    @pytest.mark.core
    def test_zero_is_accepted(self) -> None:
        """Zero is not excluded by the positive underflow rule."""
        assert convert_value(0) == 0.0
        assert convert_value(0.0) == 0.0

    @pytest.mark.core
    def test_tiny_positive_value_is_rejected(self) -> None:
        """Positive values below the lower bound are dropped."""
        assert convert_value(1e-200) is None

    @pytest.mark.core
    def test_tiny_negative_value_is_accepted(self) -> None:
        """Negative values are never rejected by the lower bound."""
        assert convert_value(-1e-200) == -1e-200

    @pytest.mark.core
    def test_large_negative_value_is_accepted(self) -> None:
        """Only positive values are checked against the upper bound."""
        assert convert_value(-1e200) == -1e200

    @pytest.mark.core
    @pytest.mark.parametrize("value", [1.0, 1e100])
    def test_values_in_range_are_accepted(self, value: float) -> None:
        """Ordinary values pass the range check."""
        assert convert_value(value) == value

    @pytest.mark.core
    def test_value_above_upper_bound_is_rejected(self) -> None:
        """Values above the upper bound are dropped."""
        assert convert_value(2e108) is None

    @pytest.mark.core
    def test_bounds_themselves_are_accepted(self) -> None:
        """The bounds are inclusive."""
        assert convert_value(MIN_POSITIVE_VALUE) == MIN_POSITIVE_VALUE
        assert convert_value(MAX_VALUE) == MAX_VALUE

    @pytest.mark.core
    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_values_are_rejected(self, value: float) -> None:
        """NaN and infinities are dropped."""
        assert convert_value(value) is None

    @pytest.mark.core
    def test_in_range_rejects_nan(self) -> None:
        """in_range() is False for NaN."""
        assert in_range(math.nan) is False

    @given(st.floats(min_value=MIN_POSITIVE_VALUE, max_value=MAX_VALUE))
    def test_positive_values_within_bounds_round_trip(self, value: float) -> None:
        """Any positive float within bounds converts to itself."""
        assert convert_value(value) == value

    @given(st.floats(max_value=0.0, allow_nan=False, allow_infinity=False))
    def test_finite_non_positive_values_are_accepted(self, value: float) -> None:
        """Zero and every finite negative value are accepted."""
        assert convert_value(value) == value

    @given(st.floats(min_value=MAX_VALUE, exclude_min=True))
    def test_values_above_upper_bound_are_rejected(self, value: float) -> None:
        """Every value above the upper bound, including +inf, is dropped."""
        assert convert_value(value) is None
