"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, rejection of None/object/strings
    - check_1d: dimensionality
    - check_min_samples: minimum sample count
    - check_consistent_length: multi-array length matching
    - check_sample: combined single-sample validation
    - check_integer: integral arguments
"""

import numpy as np
import pytest

from staz.core.exceptions import DimensionError, ValidationError
from staz.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_integer,
    check_min_samples,
    check_sample,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to a float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted(self):
        result = check_array(np.array([1, 2, 3], dtype=np.int32), "x")
        assert result.dtype == np.float64

    def test_float32_promoted(self):
        result = check_array(np.array([1.5, 2.5], dtype=np.float32), "x")
        assert result.dtype == np.float64

    def test_float64_not_copied(self):
        arr = np.array([1.0, 2.0])
        assert check_array(arr, "x") is arr

    def test_nan_and_inf_accepted(self):
        result = check_array([np.nan, np.inf, -np.inf], "x")
        assert np.isnan(result[0])
        assert np.isinf(result[1])

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="x: sample is None"):
            check_array(None, "x")

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "x")

    def test_mixed_object_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1, "a", None], "x")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "x")

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError):
            check_array([[1, 2], [3]], "x")


# ═══════════════════════════════════════════════════════════════════════
# Shape and size checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheck1d:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "x")

    def test_0d_rejected(self):
        with pytest.raises(DimensionError):
            check_1d(np.asarray(1.0), "x")


class TestCheckMinSamples:

    def test_enough(self):
        check_min_samples(np.zeros(2), 2, "x")

    def test_too_few(self):
        with pytest.raises(ValidationError, match="at least 2 samples, got 1"):
            check_min_samples(np.zeros(1), 2, "x")


class TestCheckConsistentLength:

    def test_same_length(self):
        check_consistent_length(np.zeros(3), np.ones(3), names=("x", "y"))

    def test_different_length(self):
        with pytest.raises(DimensionError, match="x=3, y=2"):
            check_consistent_length(np.zeros(3), np.ones(2), names=("x", "y"))

    def test_names_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.ones(3), names=("x",))

    def test_single_array(self):
        check_consistent_length(np.zeros(3), names=("x",))


class TestCheckSample:

    def test_valid(self):
        result = check_sample([3, 1, 2], "x")
        np.testing.assert_array_equal(result, [3.0, 1.0, 2.0])

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="at least 1"):
            check_sample([], "x")

    def test_scalar_rejected(self):
        with pytest.raises(DimensionError):
            check_sample(5.0, "x")


class TestCheckInteger:

    @pytest.mark.parametrize("value", [4, np.int64(4), np.int32(4)])
    def test_integers(self, value):
        assert check_integer(value, "division") == 4

    @pytest.mark.parametrize("value", [4.0, "4", None, True])
    def test_non_integers(self, value):
        with pytest.raises(ValidationError, match="division: expected an integer"):
            check_integer(value, "division")
