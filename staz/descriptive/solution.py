"""
Descriptive statistics solution types.

Contains the small immutable composites returned by single operations
(LineEquation, BoxplotSummary), the parameter payload produced by the
backend for describe(), and the user-facing solution wrapper.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, TYPE_CHECKING

from staz.core.result import Result

if TYPE_CHECKING:
    from staz.descriptive.design import SampleDesign


@dataclass(frozen=True)
class LineEquation:
    """Least-squares line y = slope * x + intercept."""
    slope: float
    intercept: float

    @classmethod
    def nan(cls) -> LineEquation:
        """Failure sentinel: both coefficients NaN."""
        return cls(slope=math.nan, intercept=math.nan)

    def is_nan(self) -> bool:
        return math.isnan(self.slope) and math.isnan(self.intercept)

    def predict(self, x: float) -> float:
        """Value of the line at x."""
        return self.slope * x + self.intercept


@dataclass(frozen=True)
class BoxplotSummary:
    """
    Five-number summary plus whisker bounds.

    Field order follows the box from top to bottom: upper quartile,
    median, lower quartile, upper and lower whisker bounds, then the
    sample extremes.
    """
    q3: float
    median: float
    q1: float
    upper_whisker: float
    lower_whisker: float
    max: float
    min: float

    @classmethod
    def nan(cls) -> BoxplotSummary:
        """Failure sentinel: every field NaN."""
        return cls(*(math.nan for _ in fields(cls)))

    def is_nan(self) -> bool:
        return all(math.isnan(getattr(self, f.name)) for f in fields(self))

    @property
    def iqr(self) -> float:
        """Interquartile range, q3 - q1."""
        return self.q3 - self.q1


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for describe().

    Every statistic is a float; a statistic that could not be computed is
    NaN and the reason is recorded in Result.warnings.
    """
    n: int

    # Mean family
    arithmetic_mean: float = math.nan
    geometric_mean: float = math.nan
    harmonic_mean: float = math.nan
    quadratic_mean: float = math.nan
    extremes_mean: float = math.nan
    trimean: float = math.nan
    midhinge: float = math.nan

    # Order statistics
    median: float = math.nan
    mode: float = math.nan
    min: float = math.nan
    max: float = math.nan

    # Dispersion
    variance: float = math.nan
    std_deviation: float = math.nan
    relative_deviation: float = math.nan
    mad_avg: float = math.nan
    mad_med: float = math.nan

    # Ranges
    range: float = math.nan
    interquartile_range: float = math.nan
    percentile_range: float = math.nan

    boxplot: BoxplotSummary | None = None


# Rows of DescriptiveSolution.summary(), in display order
_SUMMARY_ROWS = (
    ('n', 'n'),
    ('Min.', 'min'),
    ('1st Qu.', None),
    ('Median', 'median'),
    ('Mean', 'arithmetic_mean'),
    ('3rd Qu.', None),
    ('Max.', 'max'),
    ('Mode', 'mode'),
    ('Geometric mean', 'geometric_mean'),
    ('Harmonic mean', 'harmonic_mean'),
    ('Quadratic mean', 'quadratic_mean'),
    ('Trimean', 'trimean'),
    ('Midhinge', 'midhinge'),
    ('Variance', 'variance'),
    ('Std. deviation', 'std_deviation'),
    ('Rel. deviation', 'relative_deviation'),
    ('MAD (mean)', 'mad_avg'),
    ('MAD (median)', 'mad_med'),
    ('Range', 'range'),
    ('IQR', 'interquartile_range'),
    ('P90 - P10', 'percentile_range'),
)


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'SampleDesign'

    @property
    def params(self) -> DescriptiveParams:
        return self._result.params

    # --- Sample size ---

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._result.params.n

    # --- Mean family ---

    @property
    def arithmetic_mean(self) -> float:
        """Arithmetic mean (pairwise summation)."""
        return self._result.params.arithmetic_mean

    @property
    def geometric_mean(self) -> float:
        """Geometric mean."""
        return self._result.params.geometric_mean

    @property
    def harmonic_mean(self) -> float:
        """Harmonic mean."""
        return self._result.params.harmonic_mean

    @property
    def quadratic_mean(self) -> float:
        """Root mean square."""
        return self._result.params.quadratic_mean

    @property
    def extremes_mean(self) -> float:
        """Midrange, (min + max) / 2."""
        return self._result.params.extremes_mean

    @property
    def trimean(self) -> float:
        """Tukey's trimean."""
        return self._result.params.trimean

    @property
    def midhinge(self) -> float:
        """Mean of the first and third quartiles."""
        return self._result.params.midhinge

    # --- Order statistics ---

    @property
    def median(self) -> float:
        """Median."""
        return self._result.params.median

    @property
    def mode(self) -> float:
        """Most frequent value, first occurrence on ties."""
        return self._result.params.mode

    @property
    def min(self) -> float:
        """Smallest value."""
        return self._result.params.min

    @property
    def max(self) -> float:
        """Largest value."""
        return self._result.params.max

    # --- Dispersion ---

    @property
    def variance(self) -> float:
        """Population variance (divides by n)."""
        return self._result.params.variance

    @property
    def std_deviation(self) -> float:
        """Population standard deviation."""
        return self._result.params.std_deviation

    @property
    def relative_deviation(self) -> float:
        """Standard deviation divided by the mean."""
        return self._result.params.relative_deviation

    @property
    def mad_avg(self) -> float:
        """Mean absolute deviation around the mean."""
        return self._result.params.mad_avg

    @property
    def mad_med(self) -> float:
        """Median absolute deviation around the median."""
        return self._result.params.mad_med

    # --- Ranges ---

    @property
    def range(self) -> float:
        """max - min."""
        return self._result.params.range

    @property
    def interquartile_range(self) -> float:
        """Q3 - Q1."""
        return self._result.params.interquartile_range

    @property
    def percentile_range(self) -> float:
        """P90 - P10."""
        return self._result.params.percentile_range

    # --- Boxplot ---

    @property
    def boxplot(self) -> BoxplotSummary | None:
        return self._result.params.boxplot

    @property
    def q1(self) -> float:
        box = self._result.params.boxplot
        return box.q1 if box is not None else math.nan

    @property
    def q3(self) -> float:
        box = self._result.params.boxplot
        return box.q3 if box is not None else math.nan

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Two-column text table of every statistic."""
        label_width = max(len(label) for label, _ in _SUMMARY_ROWS)
        lines = []
        for label, attr in _SUMMARY_ROWS:
            if attr is None:
                value = self.q1 if label == '1st Qu.' else self.q3
            else:
                value = getattr(self._result.params, attr)
            if attr == 'n':
                text = str(value)
            else:
                text = f"{value:.6g}"
            lines.append(f"{label.ljust(label_width)}  {text}")
        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"  {w}" for w in self.warnings)
        return "\n".join(lines)

    def __repr__(self) -> str:
        params = self._result.params
        n_failed = sum(
            1 for f in fields(params)
            if isinstance(getattr(params, f.name), float)
            and math.isnan(getattr(params, f.name))
        )
        failed = f", failed={n_failed}" if n_failed else ""
        return f"DescriptiveSolution(n={params.n}{failed})"
