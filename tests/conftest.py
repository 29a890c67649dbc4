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
def textbook_qr_matrix():
    """3x3 example from the Householder QR literature."""
    return np.array([
        [12.0, -51.0, 4.0],
        [6.0, 167.0, -68.0],
        [-4.0, 24.0, -41.0],
    ])


@pytest.fixture
def textbook_spd_matrix():
    """Symmetric positive definite matrix with integer Cholesky factor."""
    return np.array([
        [4.0, 12.0, -16.0],
        [12.0, 37.0, -43.0],
        [-16.0, -43.0, 98.0],
    ])


@pytest.fixture
def spd_matrix(rng):
    """Random 6x6 symmetric positive definite matrix."""
    X = rng.standard_normal((10, 6))
    return X.T @ X + 6.0 * np.eye(6)


@pytest.fixture
def tall_matrix(rng):
    """Random 8x3 matrix (full column rank with probability 1)."""
    return rng.standard_normal((8, 3))


@pytest.fixture
def wide_matrix(rng):
    """Random 3x7 matrix."""
    return rng.standard_normal((3, 7))
