"""
Tolerance tiers for numerical validation.

Precision expectations for each accumulation path, as relative and
absolute tolerances. Order statistics are exact, pairwise and Kahan sums
grow their error logarithmically or not at all, and chained statistics
such as correlation get a looser bound.

The test suite uses these tiers when comparing against math.fsum, numpy
and scipy.stats references.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EPS = float(np.finfo(np.float64).eps)

# Correctly rounded or single-rounding results
EXACT = ToleranceTier(
    rtol=4 * EPS,
    atol=0.0,
    name='exact',
    description='Single rounding, matches the correctly rounded value',
)

# Pairwise and Kahan summation against a correctly rounded reference
COMPENSATED = ToleranceTier(
    rtol=1e-12,
    atol=0.0,
    name='compensated',
    description='Pairwise or Kahan accumulation, logarithmic error growth',
)

# Composed statistics that chain several accumulations
COMPOSED = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='composed',
    description='Chained accumulations (variance, correlation, regression)',
)

# Required agreement between the arithmetic mean and a high-precision reference
MEAN_REFERENCE = ToleranceTier(
    rtol=1e-9,
    atol=0.0,
    name='mean_reference',
    description='Arithmetic mean vs. math.fsum reference, up to 1e6 samples',
)


def select_tolerance(statistic: str) -> ToleranceTier:
    """Select the tolerance tier for a named statistic."""
    if statistic in ('median', 'quantile', 'mode', 'min', 'max', 'range'):
        return EXACT
    if statistic in ('sum', 'arithmetic_mean', 'harmonic_mean', 'quadratic_mean'):
        return COMPENSATED
    return COMPOSED
