"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def line_table():
    """Points on y = 2 + 3x for x in 0..4."""
    x = np.arange(5, dtype=np.float64)
    return np.column_stack([x, 2.0 + 3.0 * x])


@pytest.fixture
def power_table():
    """Points on y = 5 x^2 for x in 1..4."""
    x = np.arange(1, 5, dtype=np.float64)
    return np.column_stack([x, 5.0 * x ** 2])


@pytest.fixture
def quadratic_table():
    """Points on y = 1 + 2x + 3x^2 for x in 0..4."""
    x = np.arange(5, dtype=np.float64)
    return np.column_stack([x, 1.0 + 2.0 * x + 3.0 * x ** 2])


@pytest.fixture
def noisy_cubic(rng):
    """Noisy cubic on [0, 2] for comparison against reference fitters."""
    x = np.sort(rng.uniform(0.0, 2.0, 60))
    y = 0.5 - 1.5 * x + 0.8 * x ** 2 + 0.3 * x ** 3 + rng.standard_normal(60) * 0.05
    return x, y
