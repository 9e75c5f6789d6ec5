"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np
import scipy.sparse as sp


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def small_sparse():
    """4x4 matrix with three nonzero entries, including a negative value."""
    row = np.array([0, 2, 3])
    col = np.array([0, 3, 3])
    data = np.array([1.5, -2.0, 4.0])
    return sp.csc_matrix((data, (row, col)), shape=(4, 4))


@pytest.fixture
def random_sparse(rng):
    """200x150 random sparse matrix with roughly 3000 nonzero entries."""
    return sp.random(200, 150, density=0.1, format='csc', random_state=rng)


@pytest.fixture
def empty_sparse():
    """5x7 matrix with no stored entries."""
    return sp.csc_matrix((5, 7))
