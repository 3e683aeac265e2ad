"""
Descriptive statistics module.

Provides numerically robust descriptive statistics over 1D samples.

Public API:
    describe(x)               - All statistics at once
    mean(x, kind)             - Arithmetic, geometric, harmonic, quadratic,
                                extremes, trimean, midhinge
    median(x), mode(x)        - Order statistics
    quantile(x, d, p)         - p-th of d equal groups, linear interpolation
    variance(x), std_deviation(x), deviation(x, kind)
    range(x, kind)            - max-min, IQR, P90-P10
    boxplot(x)                - Quartiles, median, whisker bounds, extremes
    covariance(x, y), correlation(x, y), linear_regression(x, y)
"""

from staz.descriptive.design import SampleDesign, PairedDesign
from staz.descriptive.kinds import MeanKind, DeviationKind, RangeKind
from staz.descriptive.solution import (
    BoxplotSummary,
    DescriptiveParams,
    DescriptiveSolution,
    LineEquation,
)
from staz.descriptive.solvers import (
    arithmetic_mean,
    boxplot,
    correlation,
    covariance,
    describe,
    deviation,
    extremes_mean,
    geometric_mean,
    harmonic_mean,
    linear_regression,
    max_value,
    mean,
    median,
    midhinge,
    min_value,
    mode,
    prod,
    quadratic_mean,
    quantile,
    range,
    std_deviation,
    sum,
    trimean,
    variance,
)

__all__ = [
    "describe",
    "sum",
    "prod",
    "min_value",
    "max_value",
    "mean",
    "arithmetic_mean",
    "geometric_mean",
    "harmonic_mean",
    "quadratic_mean",
    "extremes_mean",
    "trimean",
    "midhinge",
    "median",
    "quantile",
    "mode",
    "variance",
    "std_deviation",
    "deviation",
    "range",
    "boxplot",
    "covariance",
    "correlation",
    "linear_regression",
    "MeanKind",
    "DeviationKind",
    "RangeKind",
    "LineEquation",
    "BoxplotSummary",
    "SampleDesign",
    "PairedDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]
