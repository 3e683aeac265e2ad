"""
Tests for the accumulation primitives.

Reference values come from math.fsum, which is correctly rounded, so
pairwise summation is held to its O(eps log n) bound rather than to a
naive loop.
"""

import math

import numpy as np
import pytest

import staz
from staz.core.exceptions import ErrorKind, ValidationError, ZeroDivisionStatError
from staz.core.tolerances import MEAN_REFERENCE
from staz.descriptive._accumulators import (
    kahan_reciprocal_sum,
    pairwise_sum,
    pairwise_sum_of_squares,
    product,
)


class TestPairwiseSum:

    def test_single_element(self):
        assert pairwise_sum(np.array([7.5])) == 7.5

    def test_two_elements(self):
        assert pairwise_sum(np.array([1.5, 2.25])) == 3.75

    @pytest.mark.parametrize("n", [3, 5, 7, 8, 9, 1023, 1025])
    def test_small_integers_exact(self, n):
        x = np.arange(1, n + 1, dtype=np.float64)
        assert pairwise_sum(x) == n * (n + 1) / 2

    def test_does_not_mutate(self):
        x = np.array([3.0, 1.0, 2.0])
        pairwise_sum(x)
        np.testing.assert_array_equal(x, [3.0, 1.0, 2.0])

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="empty"):
            pairwise_sum(np.array([]))

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="None"):
            pairwise_sum(None)

    def test_repeated_tenth(self):
        """Summing 0.1 a million times: pairwise stays within a few ulps."""
        x = np.full(1_000_000, 0.1)
        exact = math.fsum(x)
        assert abs(pairwise_sum(x) - exact) / exact < 1e-14

    def test_nan_propagates(self):
        assert math.isnan(pairwise_sum(np.array([1.0, np.nan, 2.0])))

    def test_inf(self):
        assert pairwise_sum(np.array([1.0, np.inf])) == np.inf

    def test_large_input_no_recursion_limit(self):
        x = np.ones(2**20 + 3)
        assert pairwise_sum(x) == 2**20 + 3


class TestSumOfSquares:

    def test_values(self):
        assert pairwise_sum_of_squares(np.array([1.0, 2.0, 3.0])) == 14.0

    def test_does_not_mutate(self):
        x = np.array([-2.0, 3.0])
        pairwise_sum_of_squares(x)
        np.testing.assert_array_equal(x, [-2.0, 3.0])


class TestKahanReciprocalSum:

    def test_values(self):
        assert kahan_reciprocal_sum(np.array([1.0, 2.0, 4.0])) == 1.75

    def test_zero_fails_immediately(self):
        with pytest.raises(ZeroDivisionStatError) as exc_info:
            kahan_reciprocal_sum(np.array([1.0, 2.0, 0.0, 4.0]))
        assert exc_info.value.index == 2

    def test_negative_zero_fails(self):
        with pytest.raises(ZeroDivisionStatError):
            kahan_reciprocal_sum(np.array([1.0, -0.0]))

    def test_compensation_accuracy(self, rng):
        x = rng.uniform(1e-3, 1e3, size=100_000)
        exact = math.fsum(1.0 / x)
        assert abs(kahan_reciprocal_sum(x) - exact) / exact < 1e-14


class TestProduct:

    def test_values(self):
        assert product(np.array([2.0, 3.0, 4.0])) == 24.0

    def test_zero_is_absorbing(self):
        """Early exit: a later inf cannot turn the zero into NaN."""
        assert product(np.array([2.0, 0.0, np.inf])) == 0.0

    def test_negative(self):
        assert product(np.array([-1.0, 2.0, 3.0])) == -6.0

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            product(np.array([]))


class TestPublicSumProd:

    def test_sum(self):
        assert staz.sum([1, 2, 3, 4]) == 10.0
        assert staz.last_error() is ErrorKind.NONE

    def test_prod(self):
        assert staz.prod([1, 2, 3, 4]) == 24.0

    def test_sum_empty(self):
        assert math.isnan(staz.sum([]))
        assert staz.last_error() is ErrorKind.INVALID_INPUT

    def test_prod_none(self):
        assert math.isnan(staz.prod(None))
        assert staz.last_error() is ErrorKind.INVALID_INPUT


class TestArithmeticMeanPrecision:
    """arithmetic_mean stays within 1e-9 of a correctly rounded reference."""

    @pytest.mark.parametrize("n", [10, 1_000, 100_000, 1_000_000])
    def test_mixed_scales(self, rng, n):
        # Magnitudes spread from 1e-300 to 1e300, all positive
        exponents = rng.integers(-300, 300, size=n)
        x = rng.uniform(1.0, 9.0, size=n) * 10.0 ** exponents.astype(np.float64)
        x[: n // 2] = 10.0 ** rng.integers(-300, -250, size=n // 2).astype(np.float64)
        reference = math.fsum(x) / n
        result = staz.arithmetic_mean(x)
        np.testing.assert_allclose(result, reference, rtol=MEAN_REFERENCE.rtol)

    def test_wide_spread(self, rng):
        x = rng.normal(loc=1e7, scale=1e6, size=1_000_000)
        reference = math.fsum(x) / x.shape[0]
        np.testing.assert_allclose(staz.arithmetic_mean(x), reference, rtol=MEAN_REFERENCE.rtol)
