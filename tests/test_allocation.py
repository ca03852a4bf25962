"""
test_allocation.py — Tests for the Largest Remainder Method

Unit tests pin down concrete splits and the error cases; property tests
check the two invariants for any input:

    sum(allocate(A, W)) == A
    |allocate(A, W)[i] - A * W[i] / sum(W)| < 1
"""

from decimal import Decimal
from fractions import Fraction

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from exactmoney import (
    MAX_ALLOCATION_PARTS,
    EmptyWeightsError,
    InvalidArgumentError,
    NegativeWeightError,
    ZeroTotalWeightError,
    allocate,
    split,
)
from exactmoney.allocation import normalize_weights


# ==============================================================================
# UNIT TESTS
# ==============================================================================

class TestAllocate:

    def test_three_equal_weights(self):
        assert allocate(10000, [1, 1, 1]) == [3334, 3333, 3333]

    def test_exact_split(self):
        assert allocate(100, [70, 30]) == [70, 30]

    def test_leftover_goes_to_largest_remainder(self):
        # 100 * [1, 2, 3] / 6 = 16.67, 33.33, 50  -> remainder goes to first
        assert allocate(100, [1, 2, 3]) == [17, 33, 50]

    def test_ties_broken_by_original_index(self):
        assert allocate(2, [1, 1, 1]) == [1, 1, 0]
        assert allocate(1, [1, 1, 1, 1]) == [1, 0, 0, 0]

    def test_result_keeps_input_order(self):
        # 5 * [2, 1] / 3 = 3.33, 1.67: the second part gets the leftover unit
        assert allocate(5, [2, 1]) == [3, 2]

    def test_float_weights_read_as_decimals(self):
        assert allocate(10, [1, 1, 1.5]) == [3, 3, 4]

    def test_decimal_weights_are_aligned(self):
        assert allocate(100000, ["33.33", "33.33", "33.34"]) == [33330, 33330, 33340]
        assert normalize_weights(["0.5", "0.25", 1]) == [50, 25, 100]

    def test_mixed_weight_types(self):
        parts = allocate(1000, [Decimal("0.5"), Fraction(1, 4), "0.25"])
        assert parts == [500, 250, 250]

    def test_zero_weight_gets_nothing(self):
        assert allocate(100, [1, 0, 1]) == [50, 0, 50]

    def test_zero_amount(self):
        assert allocate(0, [1, 2, 3]) == [0, 0, 0]

    def test_negative_amount(self):
        parts = allocate(-100, [1, 1, 1])
        assert sum(parts) == -100
        assert sorted(parts) == [-34, -33, -33]

    def test_single_weight(self):
        assert allocate(12345, [7]) == [12345]

    def test_huge_amount(self):
        amount = 10**30 + 1
        parts = allocate(amount, [1, 1])
        assert parts == [5 * 10**29 + 1, 5 * 10**29]


class TestAllocateErrors:

    def test_empty_weights(self):
        with pytest.raises(EmptyWeightsError) as exc_info:
            allocate(100, [])
        assert exc_info.value.code == "EMPTY_WEIGHTS"

    def test_zero_total_weight(self):
        with pytest.raises(ZeroTotalWeightError) as exc_info:
            allocate(100, [0, "0.00", 0])
        assert exc_info.value.code == "ZERO_TOTAL_WEIGHT"

    def test_negative_weight(self):
        with pytest.raises(NegativeWeightError) as exc_info:
            allocate(100, [1, -1, 2])
        assert exc_info.value.index == 1
        assert exc_info.value.weight == -1

    def test_too_many_parts(self):
        with pytest.raises(InvalidArgumentError):
            allocate(100, [1] * (MAX_ALLOCATION_PARTS + 1))


class TestSplit:

    def test_split_with_remainder(self):
        assert split(100, 3) == [34, 33, 33]

    def test_split_2026_euro_in_12_months(self):
        parts = split(202600, 12)
        assert sum(parts) == 202600
        assert parts.count(16884) == 4
        assert parts.count(16883) == 8

    def test_more_parts_than_units(self):
        parts = split(5, 10)
        assert parts == [1] * 5 + [0] * 5

    @pytest.mark.parametrize("n", [0, -1])
    def test_invalid_parts(self, n):
        with pytest.raises(InvalidArgumentError):
            split(100, n)

    def test_non_int_parts(self):
        with pytest.raises(TypeError):
            split(100, 2.0)


# ==============================================================================
# PROPERTY-BASED TESTS
# ==============================================================================

weights_strategy = st.lists(
    st.integers(min_value=0, max_value=10_000), min_size=1, max_size=50
).filter(lambda ws: sum(ws) > 0)

decimal_weights_strategy = st.lists(
    st.decimals(min_value=0, max_value=1000, places=3, allow_nan=False, allow_infinity=False),
    min_size=1,
    max_size=20,
).filter(lambda ws: sum(ws) > 0)


class TestAllocationProperties:

    @given(amount=st.integers(min_value=-10**12, max_value=10**12), weights=weights_strategy)
    @settings(max_examples=1000)
    def test_sum_equals_amount(self, amount, weights):
        assert sum(allocate(amount, weights)) == amount

    @given(amount=st.integers(min_value=-10**12, max_value=10**12), weights=weights_strategy)
    @settings(max_examples=500)
    def test_each_part_within_one_unit(self, amount, weights):
        total = sum(weights)
        for part, weight in zip(allocate(amount, weights), weights):
            assert abs(part - Fraction(amount * weight, total)) < 1

    @given(amount=st.integers(min_value=0, max_value=10**12), weights=decimal_weights_strategy)
    @settings(max_examples=300)
    def test_decimal_weights_conserve_amount(self, amount, weights):
        parts = allocate(amount, weights)
        assert len(parts) == len(weights)
        assert sum(parts) == amount

    @given(amount=st.integers(min_value=-10**12, max_value=10**12), n=st.integers(min_value=1, max_value=100))
    @settings(max_examples=500)
    def test_split_parts_differ_by_at_most_one(self, amount, n):
        parts = split(amount, n)
        assert len(parts) == n
        assert max(parts) - min(parts) <= 1

    @given(amount=st.integers(min_value=-10**12, max_value=10**12), weights=weights_strategy)
    @settings(max_examples=200)
    def test_deterministic(self, amount, weights):
        assert allocate(amount, weights) == allocate(amount, list(weights))
