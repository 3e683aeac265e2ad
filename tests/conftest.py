"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from staz.core.errors import clear_error


@pytest.fixture(autouse=True)
def _fresh_error_slot():
    """Every test starts with ErrorKind.NONE."""
    clear_error()
    yield


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def normal_sample(rng):
    """Moderately sized normal sample with nonzero mean."""
    return rng.normal(loc=10.0, scale=2.0, size=1000)


@pytest.fixture
def positive_sample(rng):
    """Strictly positive sample for geometric and harmonic means."""
    return rng.uniform(0.5, 20.0, size=100)


@pytest.fixture
def paired_sample(rng):
    """Linearly related pair with noise."""
    x = rng.uniform(-5.0, 5.0, size=200)
    y = 3.0 * x - 1.5 + rng.standard_normal(200) * 0.5
    return x, y
