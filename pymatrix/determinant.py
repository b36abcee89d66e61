"""
Determinant, minors and cofactors.

determinant(A) expands along the first row for matrices up to
COFACTOR_MAX_ORDER (8) and switches to Gaussian elimination above that.
Cofactor expansion is O(n!) and is only practical for small matrices;
this is a deliberate performance boundary, not a defect. Pass
method='elimination' to force the O(n^3) kernel, or method='cofactor'
to force expansion (a RuntimeWarning is emitted above order 8).

Both kernels agree to well within SINGULAR_TOL on well-scaled input.
"""

from __future__ import annotations

import numpy as np

from pymatrix._minors import DetMethod, resolve_method, selection_det, signed_minor_det
from pymatrix.core.exceptions import ShapeError
from pymatrix.core.validation import check_index, check_square
from pymatrix.matrix import Matrix


def determinant(a: Matrix, method: DetMethod = 'auto') -> float:
    """
    Determinant of a square matrix.

    Parameters
    ----------
    a : Matrix
        Square matrix.
    method : str
        'auto' (cofactor expansion up to order 8, elimination above),
        'cofactor', or 'elimination'. 1x1 and 2x2 matrices always use the
        closed forms a and ad - bc.

    Returns
    -------
    float

    Raises
    ------
    NotSquareError
        If `a` is not square.
    ValidationError
        If `method` is not recognised.
    """
    check_square(a.shape, "determinant")
    n = a.rows
    method = resolve_method(n, method)
    full = tuple(range(n))
    return selection_det(a.data, full, full, method)


def minor(a: Matrix, i: int, j: int) -> Matrix:
    """
    The (n-1) x (n-1) matrix left after deleting row i and column j.

    Raises
    ------
    NotSquareError
        If `a` is not square.
    ShapeError
        If `a` is 1x1 (the minor would be empty).
    IndexOutOfBoundsError
        If i or j is outside [0, n).
    """
    check_square(a.shape, "minor")
    i = check_index(i, a.rows, "row")
    j = check_index(j, a.cols, "column")
    if a.rows < 2:
        raise ShapeError("minor: a 1x1 matrix has no minor (result would be empty)")
    data = np.delete(np.delete(a.data, i, axis=0), j, axis=1)
    return Matrix._build(data)


def cofactor(a: Matrix, i: int, j: int, method: DetMethod = 'auto') -> float:
    """
    Signed minor (-1)^(i+j) * det(minor(a, i, j)).

    The cofactor of the single entry of a 1x1 matrix is 1.0 by convention
    (the determinant of the empty minor).

    Raises
    ------
    NotSquareError
        If `a` is not square.
    IndexOutOfBoundsError
        If i or j is outside [0, n).
    """
    check_square(a.shape, "cofactor")
    n = a.rows
    i = check_index(i, n, "row")
    j = check_index(j, n, "column")
    if n == 1:
        return 1.0
    method = resolve_method(n - 1, method)
    return signed_minor_det(a.data, i, j, method)

