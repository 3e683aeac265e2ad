"""
Numerically stable accumulation primitives.

Every aggregate in staz is built on these functions. None of them mutates
its input, and all of them reject an absent or empty sample with
ValidationError.

Error bounds (n samples, unit roundoff eps):
    pairwise_sum            O(eps * log n)
    kahan_reciprocal_sum    O(eps), independent of n
    product                 O(eps * n)
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from staz.core.exceptions import ValidationError, ZeroDivisionStatError


def _require_nonempty(x: NDArray[np.floating[Any]] | None, name: str) -> None:
    if x is None:
        raise ValidationError(f"{name}: sample is None")
    if x.shape[0] == 0:
        raise ValidationError(f"{name}: sample is empty")


def pairwise_sum(x: NDArray[np.floating[Any]], name: str = 'x') -> float:
    """
    Pairwise (cascade) summation.

    Adjacent elements are added in pairs, then adjacent pair sums are
    added, and so on until one value remains; an odd element out is
    carried unchanged to the next level. This is the divide-and-conquer
    summation tree evaluated bottom-up, so the depth is ceil(log2 n) and
    no recursion is involved however large the sample.

    Parameters
    ----------
    x : NDArray
        1D float64 sample, may contain non-finite values.

    Returns
    -------
    float
        Sum of x. A single element is returned unchanged; two elements
        cost exactly one addition.
    """
    _require_nonempty(x, name)

    level = x
    while level.shape[0] > 1:
        n = level.shape[0]
        # Slicing allocates, the caller's array is only read.
        paired = level[0:n - 1:2] + level[1:n:2]
        if n % 2:
            paired = np.append(paired, level[n - 1])
        level = paired

    return float(level[0])


def pairwise_sum_of_squares(x: NDArray[np.floating[Any]], name: str = 'x') -> float:
    """Pairwise sum of x**2."""
    _require_nonempty(x, name)
    return pairwise_sum(np.square(x), name)


def kahan_reciprocal_sum(x: NDArray[np.floating[Any]], name: str = 'x') -> float:
    """
    Kahan-compensated sum of reciprocals, sum(1 / x_i).

    Used by the harmonic mean. The compensation term carries the low-order
    bits lost by each addition into the next one.

    Raises
    ------
    ZeroDivisionStatError
        As soon as an element is exactly zero (including -0.0). No partial
        sum is returned.
    """
    _require_nonempty(x, name)

    total = 0.0
    compensation = 0.0
    for i, value in enumerate(x.tolist()):
        if value == 0.0:
            raise ZeroDivisionStatError(
                f"{name}: element {i} is zero, reciprocal is undefined",
                operation='reciprocal_sum',
                index=i,
            )
        y = 1.0 / value - compensation
        t = total + y
        compensation = (t - total) - y
        total = t

    return total


def product(x: NDArray[np.floating[Any]], name: str = 'x') -> float:
    """
    Left-to-right product of all elements.

    Stops at the first exactly-zero running product: zero is absorbing,
    so the remaining factors cannot change the result.

    Notes
    -----
    The running product is not rescaled. It overflows to +/-inf or
    underflows to 0 once the magnitudes leave the float64 range, which is
    why the geometric mean warns in those cases.
    """
    _require_nonempty(x, name)

    result = 1.0
    for value in x.tolist():
        result *= value
        if result == 0.0:
            break

    return result
