"""
Public API for descriptive statistics.

Every function here resets the last-error slot of the calling context
on entry. On failure it records an ErrorKind and returns a sentinel:
NaN for scalars, LineEquation.nan() or BoxplotSummary.nan() for the
composites. Check staz.last_error() to tell a failure from a NaN that
the data itself produced, or use ``with staz.raise_errors():`` to get
the exception instead.

Samples are never reordered. Order statistics sort a private copy.

Provides describe() as the comprehensive entry point, plus the
individual statistics.
"""

from __future__ import annotations

import math

from numpy.typing import ArrayLike

from staz.core.errors import signals_errors
from staz.core.validation import check_sample
from staz.descriptive import _accumulators, _compose, _order
from staz.descriptive.design import PairedDesign, SampleDesign
from staz.descriptive.kinds import (
    DeviationKind,
    MeanKind,
    RangeKind,
    coerce_kind,
)
from staz.descriptive.solution import (
    BoxplotSummary,
    DescriptiveSolution,
    LineEquation,
)
from staz.descriptive.backends.cpu import CPUDescriptiveBackend

SampleLike = ArrayLike | SampleDesign


def _nan() -> float:
    return math.nan


def _ensure_sample(data: SampleLike, name: str = 'x'):
    """Validated 1D float64 view of ``data``; designs are unwrapped."""
    if isinstance(data, SampleDesign):
        return data.data
    return check_sample(data, name)


def _ensure_pair(x: SampleLike, y: SampleLike) -> PairedDesign:
    return PairedDesign.from_arrays(x, y)


# --- Accumulators ---

@signals_errors(_nan)
def sum(x: SampleLike) -> float:
    """Pairwise sum of the sample."""
    return _accumulators.pairwise_sum(_ensure_sample(x))


@signals_errors(_nan)
def prod(x: SampleLike) -> float:
    """Product of the sample, left to right, stopping at the first zero."""
    return _accumulators.product(_ensure_sample(x))


# --- Order statistics ---

@signals_errors(_nan)
def min_value(x: SampleLike) -> float:
    return _order.min_value(_ensure_sample(x))


@signals_errors(_nan)
def max_value(x: SampleLike) -> float:
    return _order.max_value(_ensure_sample(x))


@signals_errors(_nan)
def median(x: SampleLike) -> float:
    """
    Median of the sample.

    Examples
    --------
    >>> median([1, 2, 3, 4])
    2.5
    >>> median([3, 1, 2])
    2.0
    """
    return _order.median(_ensure_sample(x))


@signals_errors(_nan)
def quantile(x: SampleLike, division: int, position: int) -> float:
    """
    Quantile ``position`` of ``division`` equal groups.

    Parameters
    ----------
    x : array-like or SampleDesign
        Sample, in any order.
    division : int
        Number of groups, >= 2 (4 = quartiles, 100 = percentiles).
    position : int
        Which cut point, in [1, division - 1]. Anything else records
        ErrorKind.OUT_OF_RANGE.

    Returns
    -------
    float
        Linear interpolation at rank position * (n + 1) / division
        (Hyndman & Fan type 6). This is not numpy.quantile's default
        convention; expect different values for small samples.

    Examples
    --------
    >>> quantile([1, 2, 3, 4], 4, 1)
    1.25
    >>> quantile([1, 2, 3, 4], 4, 3)
    3.75
    """
    d, p = _order.check_quantile_args(division, position)
    return _order.quantile(_ensure_sample(x), d, p)


@signals_errors(_nan)
def mode(x: SampleLike) -> float:
    """Most frequent value; ties go to the earliest occurrence in x."""
    return _order.mode(_ensure_sample(x))


# --- Mean family ---

@signals_errors(_nan)
def mean(x: SampleLike, kind: MeanKind | str = MeanKind.ARITHMETIC) -> float:
    """
    Mean of the sample, selected by ``kind``.

    Parameters
    ----------
    x : array-like or SampleDesign
    kind : MeanKind or str
        'arithmetic', 'geometric', 'harmonic', 'quadratic', 'extremes',
        'trimean' or 'midhinge'.

    Failure kinds
    -------------
    geometric:  MATH_DOMAIN when the product is negative (a zero
                product returns 0.0 without error)
    harmonic:   ZERO_DIVISION when any element is zero
    extremes:   INVALID_INPUT for fewer than two elements
    trimean, midhinge:  NAN_PROPAGATION when a quartile is NaN
    """
    kind = coerce_kind(kind, MeanKind)
    return _compose.MEAN_DISPATCH[kind](_ensure_sample(x))


@signals_errors(_nan)
def arithmetic_mean(x: SampleLike) -> float:
    return _compose.arithmetic_mean(_ensure_sample(x))


@signals_errors(_nan)
def geometric_mean(x: SampleLike) -> float:
    return _compose.geometric_mean(_ensure_sample(x))


@signals_errors(_nan)
def harmonic_mean(x: SampleLike) -> float:
    return _compose.harmonic_mean(_ensure_sample(x))


@signals_errors(_nan)
def quadratic_mean(x: SampleLike) -> float:
    return _compose.quadratic_mean(_ensure_sample(x))


@signals_errors(_nan)
def extremes_mean(x: SampleLike) -> float:
    return _compose.extremes_mean(_ensure_sample(x))


@signals_errors(_nan)
def trimean(x: SampleLike) -> float:
    return _compose.trimean(_ensure_sample(x))


@signals_errors(_nan)
def midhinge(x: SampleLike) -> float:
    return _compose.midhinge(_ensure_sample(x))


# --- Dispersion ---

@signals_errors(_nan)
def variance(x: SampleLike) -> float:
    """Population variance (divides by n), computed in two passes."""
    return _compose.variance(_ensure_sample(x))


@signals_errors(_nan)
def std_deviation(x: SampleLike) -> float:
    """Population standard deviation."""
    return _compose.std_deviation(_ensure_sample(x))


@signals_errors(_nan)
def deviation(x: SampleLike, kind: DeviationKind | str = DeviationKind.STANDARD) -> float:
    """
    Spread of the sample, selected by ``kind``.

    Parameters
    ----------
    kind : DeviationKind or str
        'standard'  sqrt(variance)
        'relative'  standard deviation / mean (ZERO_DIVISION if mean == 0)
        'mad_avg'   mean of |x_i - mean|
        'mad_med'   median of |x_i - median|
    """
    kind = coerce_kind(kind, DeviationKind)
    return _compose.DEVIATION_DISPATCH[kind](_ensure_sample(x))


@signals_errors(_nan)
def range(x: SampleLike, kind: RangeKind | str = RangeKind.STANDARD) -> float:
    """
    Range of the sample, selected by ``kind``.

    Parameters
    ----------
    kind : RangeKind or str
        'standard'       max - min
        'interquartile'  Q3 - Q1
        'percentile'     P90 - P10
    """
    kind = coerce_kind(kind, RangeKind)
    return _compose.RANGE_DISPATCH[kind](_ensure_sample(x))


@signals_errors(BoxplotSummary.nan)
def boxplot(x: SampleLike) -> BoxplotSummary:
    """
    Boxplot summary: quartiles, median, whisker bounds and extremes.

    Whisker bounds are Q1 - 1.5*IQR and Q3 + 1.5*IQR. On failure every
    field of the returned summary is NaN.
    """
    return _compose.boxplot(_ensure_sample(x))


# --- Bivariate ---

@signals_errors(_nan)
def covariance(x: SampleLike, y: SampleLike) -> float:
    """Population covariance of two equal-length samples."""
    pair = _ensure_pair(x, y)
    return _compose.covariance(pair.x, pair.y)


@signals_errors(_nan)
def correlation(x: SampleLike, y: SampleLike) -> float:
    """
    Pearson correlation of two equal-length samples.

    Records ZERO_DIVISION when either sample is constant and
    NAN_PROPAGATION when a mean or deviation is NaN.
    """
    pair = _ensure_pair(x, y)
    return _compose.correlation(pair.x, pair.y)


@signals_errors(LineEquation.nan)
def linear_regression(x: SampleLike, y: SampleLike) -> LineEquation:
    """
    Least-squares line through (x_i, y_i).

    Examples
    --------
    >>> linear_regression([1, 2, 3], [2, 4, 6])
    LineEquation(slope=2.0, intercept=0.0)
    """
    pair = _ensure_pair(x, y)
    return _compose.linear_regression(pair.x, pair.y)


# --- Everything at once ---

@signals_errors(lambda: None)
def describe(data: SampleLike) -> DescriptiveSolution | None:
    """
    Compute every statistic for one sample.

    Statistics that fail are NaN in the solution and the reason is listed
    in ``solution.warnings``; describe() itself records an error (and
    returns None) only when the sample is absent, empty or not 1D.

    Parameters
    ----------
    data : array-like or SampleDesign

    Returns
    -------
    DescriptiveSolution
    """
    design = data if isinstance(data, SampleDesign) else SampleDesign.from_array(data)
    result = CPUDescriptiveBackend().solve(design)
    return DescriptiveSolution(_result=result, _design=design)
