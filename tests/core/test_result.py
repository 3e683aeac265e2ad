"""
Tests for the Result[P] envelope, the section timer and tolerance tiers.

Validates:
    - Generic payload, frozen immutability
    - Default factories (warnings, provenance)
    - has_warning()
    - Timer sections and misuse
    - Tolerance tier selection
"""

import time
from dataclasses import FrozenInstanceError, dataclass

import pytest

from staz.core.result import Result, _default_provenance
from staz.core.timing import Timer
from staz.core.tolerances import COMPENSATED, COMPOSED, EXACT, select_tolerance


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _make(**kwargs):
    defaults = dict(
        params=FakeParams(value=1.0),
        info={"n": 3},
        timing=None,
        backend_name="cpu_descriptive",
    )
    defaults.update(kwargs)
    return Result(**defaults)


class TestResult:

    def test_fields(self):
        result = _make()
        assert result.params.value == 1.0
        assert result.info["n"] == 3
        assert result.timing is None
        assert result.backend_name == "cpu_descriptive"

    def test_frozen(self):
        result = _make()
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "other"

    def test_default_warnings_empty(self):
        assert _make().warnings == ()

    def test_has_warning(self):
        result = _make(warnings=("harmonic_mean: zero_division: element 2 is zero",))
        assert result.has_warning("zero_division")
        assert not result.has_warning("math_domain")

    def test_provenance_keys(self):
        prov = _make().provenance
        assert set(prov) == {'staz_version', 'numpy_version', 'python_version'}
        assert prov == _default_provenance()


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('a'):
            time.sleep(0.001)
        with timer.section('a'):
            time.sleep(0.001)
        timer.stop()
        result = timer.result()
        assert result['a'] > 0.0
        assert result['total_seconds'] >= result['a']

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()


class TestTolerances:

    def test_order_statistics_are_exact(self):
        assert select_tolerance('quantile') is EXACT

    def test_sums_are_compensated(self):
        assert select_tolerance('arithmetic_mean') is COMPENSATED

    def test_fallback_is_composed(self):
        assert select_tolerance('correlation') is COMPOSED
