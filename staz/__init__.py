"""
staz: numerically robust descriptive statistics for Python.

Central tendency, dispersion, order statistics and linear association
over one-dimensional samples, computed in double precision with
pairwise and compensated summation.

Public operations return NaN (or an all-NaN composite) on failure and
record the reason in a per-context error slot:

    >>> import staz
    >>> staz.harmonic_mean([1, 2, 0, 4])
    nan
    >>> staz.last_error()
    <ErrorKind.ZERO_DIVISION: 'zero_division'>

Submodules:
    core: exceptions, error slot, validation, result envelope
    descriptive: the statistics themselves
"""

__version__ = "0.1.0"

from staz.core.errors import error_message, last_error, raise_errors
from staz.core.exceptions import ErrorKind
from staz.descriptive import (
    BoxplotSummary,
    DeviationKind,
    LineEquation,
    MeanKind,
    RangeKind,
    SampleDesign,
    PairedDesign,
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
    "__version__",
    # Error reporting
    "ErrorKind",
    "last_error",
    "error_message",
    "raise_errors",
    # Kinds and composites
    "MeanKind",
    "DeviationKind",
    "RangeKind",
    "LineEquation",
    "BoxplotSummary",
    "SampleDesign",
    "PairedDesign",
    # Statistics
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
    "describe",
]
