"""
Closed enumerations selecting a composition strategy.

Each member maps to exactly one algorithm in the composer's dispatch
tables. Public functions accept either a member or its string value;
anything else is rejected with ValidationError.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from staz.core.exceptions import ValidationError

K = TypeVar('K', bound=Enum)


class MeanKind(Enum):
    """Which mean to compute."""
    ARITHMETIC = 'arithmetic'
    GEOMETRIC = 'geometric'
    HARMONIC = 'harmonic'
    QUADRATIC = 'quadratic'
    EXTREMES = 'extremes'
    TRIMEAN = 'trimean'
    MIDHINGE = 'midhinge'


class DeviationKind(Enum):
    """Which measure of spread around the centre to compute."""
    STANDARD = 'standard'
    RELATIVE = 'relative'
    MAD_AVG = 'mad_avg'
    MAD_MED = 'mad_med'


class RangeKind(Enum):
    """Which range to compute."""
    STANDARD = 'standard'
    INTERQUARTILE = 'interquartile'
    PERCENTILE = 'percentile'


def coerce_kind(kind: K | str, enum_cls: type[K]) -> K:
    """
    Resolve a member or string value of ``enum_cls``.

    Raises
    ------
    ValidationError
        If ``kind`` is neither a member nor a valid value.
    """
    if isinstance(kind, enum_cls):
        return kind
    if isinstance(kind, str):
        try:
            return enum_cls(kind.lower())
        except ValueError:
            pass
    valid = ", ".join(repr(m.value) for m in enum_cls)
    raise ValidationError(
        f"Unknown {enum_cls.__name__}: {kind!r}. Must be one of {valid}."
    )
