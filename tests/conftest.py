"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def generic_examples():
    """Two 2x3 matrices and one 4x2 matrix (non-square shapes)."""
    return (
        Matrix.from_rows([[7.2, 13.8, 5.1], [9.3, 2.7, 6.4]]),
        Matrix.from_rows([[1.5, 8.9, 3.2], [6.7, 11.3, 4.8]]),
        Matrix.from_rows([
            [5.6, 9.8],
            [2.9, 7.4],
            [11.2, 3.1],
            [6.3, 8.7],
        ]),
    )


@pytest.fixture
def square_examples():
    """1x1, 2x2, 3x3 and 5x5 reference matrices."""
    return (
        Matrix.from_rows([[2.5]]),
        Matrix.from_rows([[4.5, 2.8], [1.3, 6.7]]),
        Matrix.from_rows([
            [2.1, 9.7, 3.5],
            [8.4, 1.6, 7.2],
            [5.9, 12.3, 0.8],
        ]),
        Matrix.from_rows([
            [0.0, 7.1, 0.5, 9.3, 2.8],
            [6.4, 1.9, 8.7, 4.2, 5.6],
            [0.3, 9.8, 2.1, 7.5, 3.9],
            [5.7, 3.6, 8.2, 1.4, 6.0],
            [9.1, 4.5, 2.6, 7.8, 0.7],
        ]),
    )


@pytest.fixture
def random_square(rng):
    """Factory for well-conditioned random square matrices."""
    def make(n):
        # diagonal shift keeps the determinant far from zero
        return Matrix.from_rows(rng.standard_normal((n, n)) + n * np.eye(n))
    return make
