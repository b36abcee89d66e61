"""
Adjoint (adjugate) and inverse.

inverse(A) = adjoint(A) * (1 / det(A)). Division happens once, at the
end; the adjoint itself is built from cofactors only.

A matrix is refused as singular when |det(A)| < SINGULAR_TOL (1e-9).
"""

from __future__ import annotations

import numpy as np

from pymatrix._minors import DetMethod, resolve_method, signed_minor_det
from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.core.tolerances import SINGULAR_TOL, is_negligible
from pymatrix.core.validation import check_square
from pymatrix.determinant import determinant
from pymatrix.matrix import Matrix
from pymatrix.operations import scalar_multiply, transpose


def cofactor_matrix(a: Matrix, method: DetMethod = 'auto') -> Matrix:
    """
    Matrix C with C[i, j] = cofactor(a, i, j).

    Raises
    ------
    NotSquareError
        If `a` is not square.
    """
    check_square(a.shape, "cofactor_matrix")
    n = a.rows
    if n == 1:
        return Matrix._build(np.ones((1, 1), dtype=np.float64))
    method = resolve_method(n - 1, method)
    c = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            c[i, j] = signed_minor_det(a.data, i, j, method)
    return Matrix._build(c)


def adjoint(a: Matrix, method: DetMethod = 'auto') -> Matrix:
    """
    Adjoint (adjugate): transpose of the cofactor matrix.

    Entry (i, j) of the result is cofactor(a, j, i). A 1x1 matrix has
    adjoint [[1]] by convention; a 2x2 matrix [[a, b], [c, d]] has
    adjoint [[d, -b], [-c, a]].

    Raises
    ------
    NotSquareError
        If `a` is not square.
    """
    check_square(a.shape, "adjoint")
    n = a.rows
    if n == 1:
        return Matrix._build(np.ones((1, 1), dtype=np.float64))
    if n == 2:
        (p, q), (r, s) = a.data.tolist()
        return Matrix._build(np.array([[s, -q], [-r, p]], dtype=np.float64))
    return transpose(cofactor_matrix(a, method))


def inverse(a: Matrix, method: DetMethod = 'auto') -> Matrix:
    """
    Inverse of a square, non-singular matrix.

    Parameters
    ----------
    a : Matrix
        Square matrix.
    method : str
        Determinant kernel, see determinant().

    Raises
    ------
    NotSquareError
        If `a` is not square.
    SingularMatrixError
        If |det(a)| < SINGULAR_TOL. The error carries the determinant
        and the tolerance.
    """
    check_square(a.shape, "inverse")
    det = determinant(a, method)
    if is_negligible(det):
        raise SingularMatrixError(
            f"inverse: matrix is singular (|det| = {abs(det):.3e} < {SINGULAR_TOL:g})",
            determinant=det,
            tolerance=SINGULAR_TOL,
        )
    return scalar_multiply(adjoint(a, method), 1.0 / det)
