"""
Tests for mode(), min_value() and max_value().

mode() breaks ties by first occurrence in the original order; these
tests pin that rule down because it decides reproducibility.
"""

import math

import numpy as np
import pytest

import staz
from staz.core.exceptions import AllocationError, ErrorKind
from staz.descriptive import _order


def _reference_mode(x):
    values, inverse, counts = np.unique(x, return_inverse=True, return_counts=True)
    per_element = counts[inverse.ravel()]
    return x[int(np.argmax(per_element))]


class TestMode:

    def test_clear_winner(self):
        assert staz.mode([4, 1, 4, 2, 4, 1]) == 4.0

    def test_tie_goes_to_first_occurrence(self):
        assert staz.mode([1, 2, 2, 3, 3]) == 2.0
        assert staz.mode([3, 3, 2, 2]) == 3.0

    def test_tie_uses_original_not_sorted_order(self):
        """Sorted order would pick 1; original order picks 9."""
        assert staz.mode([9, 1, 9, 1]) == 9.0

    def test_all_distinct_returns_first(self):
        assert staz.mode([5, 3, 8]) == 5.0

    def test_single(self):
        assert staz.mode([2.5]) == 2.5

    def test_exact_equality(self):
        """0.1 + 0.2 is not 0.3; the two values are counted separately."""
        assert staz.mode([0.1 + 0.2, 0.3, 0.3]) == 0.3

    def test_nan_never_counts(self):
        assert staz.mode([np.nan, 1.0, np.nan, 2.0, 1.0]) == 1.0

    def test_signed_zero_equal(self):
        assert staz.mode([1.0, -0.0, 0.0]) == 0.0

    def test_empty(self):
        assert math.isnan(staz.mode([]))
        assert staz.last_error() is ErrorKind.INVALID_INPUT

    def test_many_blocks(self, rng, monkeypatch):
        """Block-wise counting agrees with a direct count."""
        monkeypatch.setattr(_order, '_MODE_BLOCK_ELEMENTS', 5000)
        x = rng.integers(0, 40, size=3000).astype(np.float64)
        assert staz.mode(x) == _reference_mode(x)

    def test_allocation_failure(self, monkeypatch):
        def no_memory(*args, **kwargs):
            raise MemoryError

        monkeypatch.setattr(_order.np, 'count_nonzero', no_memory)
        assert math.isnan(staz.mode([1.0, 2.0]))
        assert staz.last_error() is ErrorKind.ALLOCATION_FAILURE


class TestSortedCopy:

    def test_is_a_copy(self):
        x = np.array([3.0, 1.0, 2.0])
        s = _order.sorted_copy(x)
        s[0] = 100.0
        np.testing.assert_array_equal(x, [3.0, 1.0, 2.0])

    def test_nan_sorts_last(self):
        s = _order.sorted_copy(np.array([np.nan, 1.0, np.inf]))
        assert s[0] == 1.0
        assert s[1] == np.inf
        assert np.isnan(s[2])

    def test_allocation_failure(self, monkeypatch):
        def no_memory(*args, **kwargs):
            raise MemoryError

        monkeypatch.setattr(_order.np, 'sort', no_memory)
        with pytest.raises(AllocationError) as exc_info:
            _order.sorted_copy(np.array([2.0, 1.0]))
        assert exc_info.value.n_elements == 2

    def test_public_median_reports_allocation_failure(self, monkeypatch):
        def no_memory(*args, **kwargs):
            raise MemoryError

        monkeypatch.setattr(_order.np, 'sort', no_memory)
        assert math.isnan(staz.median([2.0, 1.0]))
        assert staz.last_error() is ErrorKind.ALLOCATION_FAILURE


class TestExtremes:

    def test_min_max(self):
        assert staz.min_value([3, -1, 2]) == -1.0
        assert staz.max_value([3, -1, 2]) == 3.0

    def test_single(self):
        assert staz.min_value([4]) == 4.0
        assert staz.max_value([4]) == 4.0

    def test_infinite(self):
        assert staz.max_value([1.0, np.inf]) == np.inf
        assert staz.min_value([1.0, -np.inf]) == -np.inf

    def test_empty(self):
        assert math.isnan(staz.min_value([]))
        assert staz.last_error() is ErrorKind.INVALID_INPUT

    def test_design_input(self):
        design = staz.SampleDesign.from_array([5, 6, 7])
        assert staz.min_value(design) == 5.0
        assert staz.max_value(design) == 7.0
