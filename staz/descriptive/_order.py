"""
Order statistics: median, quantiles, mode and extremes.

Sorting policy
--------------
Copy-on-read, for every function in this module and everything built on
it. Order statistics work on a sorted scratch copy owned by the call
(``sorted_copy``); the caller's array is never reordered. Functions whose
name ends in ``_sorted`` take that scratch copy directly, so a composer
that needs several order statistics sorts once.

NaN sorts after +inf (numpy ordering), so a sample containing NaN has a
NaN maximum and NaN upper quantiles.

Quantile convention
-------------------
Position p of division d has continuous 1-based rank

    index = p * (n + 1) / d

which is linearly interpolated between the two bracketing order
statistics (Hyndman & Fan type 6, the "expected order statistic"
method). numpy.quantile and R default to type 7 and give different
values for small samples; that difference is expected and must not be
reconciled by changing the rank formula.
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np
from numpy.typing import NDArray

from staz.core.exceptions import AllocationError, OutOfRangeError, ValidationError
from staz.core.validation import check_integer
from staz.descriptive._accumulators import _require_nonempty

# Upper bound on the boolean comparison matrix built per block in mode()
_MODE_BLOCK_ELEMENTS = 1 << 22


def sorted_copy(x: NDArray[np.floating[Any]], name: str = 'x') -> NDArray[np.float64]:
    """
    Ascending sorted copy of x. The input is left untouched.

    Raises
    ------
    AllocationError
        If the scratch array cannot be allocated.
    """
    _require_nonempty(x, name)
    try:
        return np.sort(x, kind='stable')
    except MemoryError as e:
        raise AllocationError(
            f"{name}: cannot allocate sorted copy of {x.shape[0]} elements",
            n_elements=x.shape[0],
        ) from e


def check_quantile_args(division: Any, position: Any) -> tuple[int, int]:
    """
    Validate a (division, position) pair.

    Raises
    ------
    ValidationError
        If either argument is not an integer or division < 2.
    OutOfRangeError
        If position is outside [1, division - 1].
    """
    d = check_integer(division, 'division')
    p = check_integer(position, 'position')
    if d < 2:
        raise ValidationError(f"division: must be >= 2, got {d}")
    if not 1 <= p <= d - 1:
        raise OutOfRangeError(
            f"position: must be in [1, {d - 1}] for division {d}, got {p}",
            position=p,
            division=d,
        )
    return d, p


def median_sorted(s: NDArray[np.floating[Any]]) -> float:
    """Median of an already sorted, non-empty sample."""
    n = s.shape[0]
    if n == 1:
        return float(s[0])
    middle = n // 2
    if n % 2:
        return float(s[middle])
    return (float(s[middle - 1]) + float(s[middle])) / 2.0


def quantile_sorted(s: NDArray[np.floating[Any]], division: int, position: int) -> float:
    """
    Quantile of an already sorted, non-empty sample.

    Arguments must have been checked with check_quantile_args().
    """
    n = s.shape[0]
    index = position * (n + 1) / division
    lower = math.floor(index)

    if lower >= n:
        return float(s[n - 1])
    if lower <= 0:
        return float(s[0])

    h = index - lower
    if h == 0.0:
        return float(s[lower - 1])
    # lower is 1-based: s[lower - 1] and s[lower] bracket the rank
    return (1.0 - h) * float(s[lower - 1]) + h * float(s[lower])


def median(x: NDArray[np.floating[Any]], name: str = 'x') -> float:
    """
    Median of x.

    Odd n returns the middle order statistic, even n the mean of the two
    middle ones. Works on a sorted copy.
    """
    return median_sorted(sorted_copy(x, name))


def quantile(x: NDArray[np.floating[Any]], division: int, position: int, name: str = 'x') -> float:
    """
    Quantile ``position`` of ``division`` equal groups.

    quantile(x, 4, 1) is the first quartile, quantile(x, 100, 90) the
    90th percentile. Ranks below 1 clamp to the minimum and ranks at or
    beyond n clamp to the maximum.
    """
    d, p = check_quantile_args(division, position)
    return quantile_sorted(sorted_copy(x, name), d, p)


def mode(x: NDArray[np.floating[Any]], name: str = 'x') -> float:
    """
    Most frequent value of x under exact equality.

    Every element is compared against every other one (O(n^2) comparisons,
    done in row blocks so memory stays bounded). Ties go to the value that
    occurs first in the original order, not the sorted order, so the result
    is reproducible for a given input sequence. NaN never equals anything
    and therefore only wins when every element is NaN.
    """
    _require_nonempty(x, name)

    n = x.shape[0]
    block = max(1, _MODE_BLOCK_ELEMENTS // n)
    try:
        counts = np.empty(n, dtype=np.intp)
        for start in range(0, n, block):
            rows = x[start:start + block]
            counts[start:start + rows.shape[0]] = np.count_nonzero(
                rows[:, np.newaxis] == x[np.newaxis, :], axis=1
            )
    except MemoryError as e:
        raise AllocationError(
            f"{name}: cannot allocate comparison block for {n} elements",
            n_elements=n,
        ) from e

    # argmax returns the first index reaching the maximum
    return float(x[int(np.argmax(counts))])


def min_value(x: NDArray[np.floating[Any]], name: str = 'x') -> float:
    """Smallest element of x (NaN if x contains NaN)."""
    _require_nonempty(x, name)
    return float(np.min(x))


def max_value(x: NDArray[np.floating[Any]], name: str = 'x') -> float:
    """Largest element of x (NaN if x contains NaN)."""
    _require_nonempty(x, name)
    return float(np.max(x))
