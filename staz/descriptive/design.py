"""
SampleDesign / PairedDesign: data wrappers for descriptive statistics.

Wrap one sample (or two paired samples) and provide validation and
metadata for the descriptive statistics pipeline. Every public operation
accepts a design in place of a raw array, which lets a caller validate
once and compute many statistics.
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np
from numpy.typing import ArrayLike, NDArray

from staz.core.validation import check_consistent_length, check_sample


def _values(data):
    # pandas Series / DataFrame column and anything else exposing .values
    if hasattr(data, 'values') and not isinstance(data, np.ndarray):
        return data.values
    return data


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for a single sample.

    Wraps a 1D float64 array of at least one observation. The array may
    contain NaN or Inf; how those propagate is up to each statistic.
    Immutable after construction, and the wrapped array is read-only.

    Construction:
        SampleDesign.from_array(data)
    """
    _data: NDArray[np.float64]
    _name: str

    @classmethod
    def from_array(cls, data: ArrayLike, *, name: str = 'x') -> SampleDesign:
        """
        Build SampleDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D sequence of numbers, numpy array, or pandas Series.
        name : str
            Name used in error messages.
        """
        array = check_sample(_values(data), name)
        # Own a private read-only copy so later writes by the caller are
        # not observed through the design.
        array = np.array(array, dtype=np.float64, copy=True)
        array.setflags(write=False)
        return cls(_data=array, _name=name)

    @property
    def data(self) -> NDArray[np.float64]:
        """The sample (read-only)."""
        return self._data

    @property
    def name(self) -> str:
        return self._name

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._data.shape[0]

    @property
    def n_missing(self) -> int:
        """Number of NaN values."""
        return int(np.sum(np.isnan(self._data)))

    @property
    def has_missing(self) -> bool:
        return bool(np.any(np.isnan(self._data)))

    @property
    def has_infinite(self) -> bool:
        return bool(np.any(np.isinf(self._data)))

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        missing = f", missing={self.n_missing}" if self.has_missing else ""
        return f"SampleDesign(n={self.n}{missing})"


@dataclass(frozen=True)
class PairedDesign:
    """
    Design for two paired samples of equal length.

    Construction:
        PairedDesign.from_arrays(x, y)
    """
    _x: SampleDesign
    _y: SampleDesign

    @classmethod
    def from_arrays(cls, x: ArrayLike | SampleDesign, y: ArrayLike | SampleDesign) -> PairedDesign:
        x_design = x if isinstance(x, SampleDesign) else SampleDesign.from_array(x, name='x')
        y_design = y if isinstance(y, SampleDesign) else SampleDesign.from_array(y, name='y')
        check_consistent_length(x_design.data, y_design.data, names=('x', 'y'))
        return cls(_x=x_design, _y=y_design)

    @property
    def x(self) -> NDArray[np.float64]:
        return self._x.data

    @property
    def y(self) -> NDArray[np.float64]:
        return self._y.data

    @property
    def n(self) -> int:
        """Number of pairs."""
        return self._x.n

    def __repr__(self) -> str:
        return f"PairedDesign(n={self.n})"
