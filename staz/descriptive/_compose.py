"""
Composed statistics: mean family, dispersion, ranges and bivariate fits.

Stateless functions over validated 1D float64 arrays, built from the
accumulators and the order-statistics engine. They raise StazError
subclasses; the public solvers turn those into sentinels.

A composed statistic checks every intermediate it builds on. If an
intermediate is NaN it raises NaNPropagationError naming that
intermediate, instead of handing back a NaN whose cause is lost.
"""

from __future__ import annotations

import math
import warnings
from typing import Any, Callable
import numpy as np
from numpy.typing import NDArray

from staz.core.exceptions import (
    MathDomainError,
    NaNPropagationError,
    ValidationError,
    ZeroDivisionStatError,
)
from staz.descriptive._accumulators import (
    kahan_reciprocal_sum,
    pairwise_sum,
    pairwise_sum_of_squares,
    product,
)
from staz.descriptive._order import (
    max_value,
    median,
    median_sorted,
    min_value,
    quantile_sorted,
    sorted_copy,
)
from staz.descriptive.kinds import DeviationKind, MeanKind, RangeKind
from staz.descriptive.solution import BoxplotSummary, LineEquation

Sample = NDArray[np.floating[Any]]

# Tukey's fence multiplier for the boxplot whiskers
WHISKER_FACTOR = 1.5


def _defined(value: float, source: str) -> float:
    """Return value, or raise NaNPropagationError if it is NaN."""
    if math.isnan(value):
        raise NaNPropagationError(f"{source} is NaN", source=source)
    return value


def _scale(x: Sample) -> float:
    """max|x_i| when it is finite and nonzero, otherwise 1.0."""
    scale = float(np.max(np.abs(x)))
    if scale == 0.0 or not math.isfinite(scale):
        return 1.0
    return scale


# --- Mean family ---

def arithmetic_mean(x: Sample) -> float:
    return pairwise_sum(x) / x.shape[0]


def geometric_mean(x: Sample) -> float:
    """n-th root of the product. A zero product gives 0."""
    p = product(x)
    if p < 0.0:
        raise MathDomainError(
            f"geometric mean: product of the sample is negative ({p!r})",
            value=p,
        )
    if p == 0.0:
        if not np.any(x == 0.0):
            warnings.warn(
                "geometric mean: product underflowed to 0 without a zero element",
                RuntimeWarning,
                stacklevel=3,
            )
        return 0.0
    if math.isinf(p) and np.all(np.isfinite(x)):
        warnings.warn(
            "geometric mean: product overflowed to inf with finite elements",
            RuntimeWarning,
            stacklevel=3,
        )
    return p ** (1.0 / x.shape[0])


def harmonic_mean(x: Sample) -> float:
    """n divided by the compensated sum of reciprocals."""
    reciprocal_sum = kahan_reciprocal_sum(x)
    if reciprocal_sum == 0.0:
        raise ZeroDivisionStatError(
            "harmonic mean: reciprocals sum to zero",
            operation='harmonic_mean',
        )
    return x.shape[0] / reciprocal_sum


def quadratic_mean(x: Sample) -> float:
    """
    Root mean square.

    Squares are taken after scaling by max|x_i|, so values near 1e200 do
    not overflow and values near 1e-200 do not underflow.
    """
    scale = _scale(x)
    return scale * math.sqrt(pairwise_sum_of_squares(x / scale) / x.shape[0])


def extremes_mean(x: Sample) -> float:
    """Midrange, (min + max) / 2."""
    if x.shape[0] < 2:
        raise ValidationError(
            f"extremes mean: requires at least 2 samples, got {x.shape[0]}"
        )
    return (min_value(x) + max_value(x)) / 2.0


def _quartiles(s: Sample) -> tuple[float, float, float]:
    q1 = _defined(quantile_sorted(s, 4, 1), 'first quartile')
    q2 = _defined(quantile_sorted(s, 4, 2), 'second quartile')
    q3 = _defined(quantile_sorted(s, 4, 3), 'third quartile')
    return q1, q2, q3


def trimean(x: Sample) -> float:
    """Tukey's trimean, (Q1 + 2*Q2 + Q3) / 4."""
    q1, q2, q3 = _quartiles(sorted_copy(x))
    return (q1 + 2.0 * q2 + q3) / 4.0


def midhinge(x: Sample) -> float:
    """(Q1 + Q3) / 2."""
    q1, _, q3 = _quartiles(sorted_copy(x))
    return (q1 + q3) / 2.0


MEAN_DISPATCH: dict[MeanKind, Callable[[Sample], float]] = {
    MeanKind.ARITHMETIC: arithmetic_mean,
    MeanKind.GEOMETRIC: geometric_mean,
    MeanKind.HARMONIC: harmonic_mean,
    MeanKind.QUADRATIC: quadratic_mean,
    MeanKind.EXTREMES: extremes_mean,
    MeanKind.TRIMEAN: trimean,
    MeanKind.MIDHINGE: midhinge,
}


# --- Dispersion ---

def variance(x: Sample) -> float:
    """
    Population variance (divides by n), two passes.

    The first pass computes the mean, the second the mean of squared
    deviations from it. Both passes use pairwise summation.
    """
    m = _defined(arithmetic_mean(x), 'mean')
    return _defined(pairwise_sum(np.square(x - m)) / x.shape[0], 'squared deviations')


def std_deviation(x: Sample) -> float:
    return math.sqrt(_defined(variance(x), 'variance'))


def relative_deviation(x: Sample) -> float:
    """Coefficient of variation, standard deviation / mean."""
    sd = std_deviation(x)
    m = _defined(arithmetic_mean(x), 'mean')
    if m == 0.0:
        raise ZeroDivisionStatError(
            "relative deviation: mean is zero",
            operation='relative_deviation',
        )
    return sd / m


def mean_absolute_deviation(x: Sample) -> float:
    """Mean of |x_i - mean|."""
    m = _defined(arithmetic_mean(x), 'mean')
    return arithmetic_mean(np.abs(x - m))


def median_absolute_deviation(x: Sample) -> float:
    """Median of |x_i - median|, unscaled."""
    med = _defined(median(x), 'median')
    return median(np.abs(x - med))


DEVIATION_DISPATCH: dict[DeviationKind, Callable[[Sample], float]] = {
    DeviationKind.STANDARD: std_deviation,
    DeviationKind.RELATIVE: relative_deviation,
    DeviationKind.MAD_AVG: mean_absolute_deviation,
    DeviationKind.MAD_MED: median_absolute_deviation,
}


# --- Ranges ---

def standard_range(x: Sample) -> float:
    return max_value(x) - min_value(x)


def _quantile_range(x: Sample, division: int, low: int, high: int, label: str) -> float:
    s = sorted_copy(x)
    q_low = _defined(quantile_sorted(s, division, low), f'{label} lower bound')
    q_high = _defined(quantile_sorted(s, division, high), f'{label} upper bound')
    return q_high - q_low


def interquartile_range(x: Sample) -> float:
    """Q3 - Q1."""
    return _quantile_range(x, 4, 1, 3, 'interquartile range')


def percentile_range(x: Sample) -> float:
    """P90 - P10."""
    return _quantile_range(x, 100, 10, 90, 'percentile range')


RANGE_DISPATCH: dict[RangeKind, Callable[[Sample], float]] = {
    RangeKind.STANDARD: standard_range,
    RangeKind.INTERQUARTILE: interquartile_range,
    RangeKind.PERCENTILE: percentile_range,
}


def boxplot(x: Sample) -> BoxplotSummary:
    """
    Quartiles, median, whisker bounds and extremes from one sorted copy.

    Whisker bounds are Tukey's fences, Q1 - 1.5*IQR and Q3 + 1.5*IQR.
    """
    s = sorted_copy(x)
    q1 = _defined(quantile_sorted(s, 4, 1), 'first quartile')
    q3 = _defined(quantile_sorted(s, 4, 3), 'third quartile')
    med = _defined(median_sorted(s), 'median')
    iqr = q3 - q1
    return BoxplotSummary(
        q3=q3,
        median=med,
        q1=q1,
        upper_whisker=q3 + WHISKER_FACTOR * iqr,
        lower_whisker=q1 - WHISKER_FACTOR * iqr,
        max=float(s[-1]),
        min=float(s[0]),
    )


# --- Bivariate ---

def covariance(x: Sample, y: Sample) -> float:
    """Population covariance, mean of (x_i - mean x)(y_i - mean y)."""
    mx = _defined(arithmetic_mean(x), 'mean of x')
    my = _defined(arithmetic_mean(y), 'mean of y')
    return arithmetic_mean((x - mx) * (y - my))


def correlation(x: Sample, y: Sample) -> float:
    """
    Pearson correlation, cov(x, y) / (sd(x) * sd(y)).

    Both samples are scaled by their largest magnitude first. Correlation
    is scale-free, and the moments of values near 1e-170 would otherwise
    underflow to zero. Clipped to [-1, 1] to absorb rounding.
    """
    xs = x / _scale(x)
    ys = y / _scale(y)
    cov = _defined(covariance(xs, ys), 'covariance')
    sd_x = std_deviation(xs)
    sd_y = std_deviation(ys)
    if sd_x == 0.0 or sd_y == 0.0:
        which = 'x' if sd_x == 0.0 else 'y'
        raise ZeroDivisionStatError(
            f"correlation: standard deviation of {which} is zero (constant sample)",
            operation='correlation',
        )
    return float(np.clip((cov / sd_x) / sd_y, -1.0, 1.0))


def linear_regression(x: Sample, y: Sample) -> LineEquation:
    """
    Closed-form least-squares line y = slope * x + intercept.

        slope     = (n*Sxy - Sx*Sy) / (n*Sxx - Sx^2)
        intercept = (Sy - slope*Sx) / n

    The sums are taken over x / max|x| and y / max|y| and the coefficients
    scaled back afterwards, so inputs near 1e200 do not overflow Sxx.
    """
    n = x.shape[0]
    scale_x = _scale(x)
    scale_y = _scale(y)
    xs = x / scale_x
    ys = y / scale_y

    sum_x = _defined(pairwise_sum(xs), 'sum of x')
    sum_y = _defined(pairwise_sum(ys), 'sum of y')
    sum_xy = _defined(pairwise_sum(xs * ys), 'sum of x*y')
    sum_xx = _defined(pairwise_sum_of_squares(xs), 'sum of x^2')

    denominator = _defined(n * sum_xx - sum_x * sum_x, 'denominator')
    # A constant x can leave a rounding residue instead of an exact zero
    if denominator == 0.0 or np.all(x == x[0]):
        raise ZeroDivisionStatError(
            "linear regression: all x values are identical (vertical line)",
            operation='linear_regression',
        )

    slope = _defined((n * sum_xy - sum_x * sum_y) / denominator, 'slope')
    intercept = _defined(scale_y * (sum_y - slope * sum_x) / n, 'intercept')
    return LineEquation(slope=slope * scale_y / scale_x, intercept=intercept)
