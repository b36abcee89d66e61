"""
Property predicates.

Every predicate is total: it never raises for a well-formed Matrix.
Predicates that only make sense for square matrices return False for
non-square input. All value comparisons use the shared tolerance
(SINGULAR_TOL), so e.g. a matrix that is symmetric up to rounding is
reported as symmetric, and is_singular agrees with inverse().
"""

from __future__ import annotations

import numpy as np

from pymatrix.core.tolerances import allclose, is_close, is_negligible
from pymatrix.determinant import determinant
from pymatrix.matrix import Matrix


def is_square(a: Matrix) -> bool:
    return a.rows == a.cols


def is_zero(a: Matrix) -> bool:
    """All entries within tolerance of 0."""
    return allclose(a.data, np.zeros(a.shape))


def is_diagonal(a: Matrix) -> bool:
    """Square, and every off-diagonal entry within tolerance of 0."""
    if not is_square(a):
        return False
    off_diagonal = a.data - np.diag(np.diag(a.data))
    return allclose(off_diagonal, np.zeros(a.shape))


def is_scalar(a: Matrix) -> bool:
    """Diagonal, with every diagonal entry equal to the first."""
    if not is_diagonal(a):
        return False
    diag = np.diag(a.data)
    return allclose(diag, np.full(diag.shape, diag[0]))


def is_identity(a: Matrix) -> bool:
    """Scalar matrix whose diagonal value is 1."""
    return is_scalar(a) and is_close(a.data[0, 0], 1.0)


def is_symmetric(a: Matrix) -> bool:
    """A == A^T within tolerance."""
    if not is_square(a):
        return False
    return allclose(a.data, a.data.T)


def is_skew_symmetric(a: Matrix) -> bool:
    """A == -A^T within tolerance (forces a zero diagonal)."""
    if not is_square(a):
        return False
    return allclose(a.data, -a.data.T)


def is_upper_triangular(a: Matrix) -> bool:
    """Square, and every entry below the diagonal within tolerance of 0."""
    if not is_square(a):
        return False
    return allclose(np.tril(a.data, k=-1), np.zeros(a.shape))


def is_lower_triangular(a: Matrix) -> bool:
    """Square, and every entry above the diagonal within tolerance of 0."""
    if not is_square(a):
        return False
    return allclose(np.triu(a.data, k=1), np.zeros(a.shape))


def is_singular(a: Matrix) -> bool:
    """
    Square with |det| below SINGULAR_TOL.

    Uses the same determinant and threshold as inverse(), so
    is_singular(a) is True exactly when inverse(a) raises
    SingularMatrixError.
    """
    if not is_square(a):
        return False
    return is_negligible(determinant(a))
