"""
Elementwise and linear operations on Matrix values.

add(A, B), subtract(A, B)  - elementwise, shapes must match
scalar_multiply(A, k)      - every entry times k
negate(A)                  - scalar_multiply(A, -1)
multiply(A, B)             - matrix product, A.cols must equal B.rows
transpose(A)               - A.cols x A.rows
trace(A)                   - sum of the diagonal, square only

Every function returns a new Matrix; operands are never modified.
"""

from __future__ import annotations

import numpy as np

from pymatrix.core.validation import (
    check_conformable,
    check_finite_scalar,
    check_same_shape,
    check_square,
)
from pymatrix.matrix import Matrix


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise sum.

    Raises
    ------
    DimensionMismatchError
        If a.shape != b.shape.
    """
    check_same_shape(a.shape, b.shape, "add")
    return Matrix._build(a.data + b.data)


def subtract(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise difference a - b.

    Raises
    ------
    DimensionMismatchError
        If a.shape != b.shape.
    """
    check_same_shape(a.shape, b.shape, "subtract")
    return Matrix._build(a.data - b.data)


def scalar_multiply(a: Matrix, k: float) -> Matrix:
    """Every entry of `a` multiplied by the real scalar `k`."""
    k = check_finite_scalar(k, "k")
    return Matrix._build(a.data * k)


def negate(a: Matrix) -> Matrix:
    return scalar_multiply(a, -1.0)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product.

    Result is a.rows x b.cols with entry (i, j) = sum_k a[i, k] * b[k, j].

    Raises
    ------
    DimensionMismatchError
        If a.cols != b.rows.
    """
    check_conformable(a.shape, b.shape, "multiply")
    return Matrix._build(a.data @ b.data)


def transpose(a: Matrix) -> Matrix:
    """Result entry (i, j) is a[j, i]."""
    # .T is a view; copy so the result owns its buffer
    return Matrix._build(np.array(a.data.T, dtype=np.float64))


def trace(a: Matrix) -> float:
    """
    Sum of the diagonal entries.

    Raises
    ------
    NotSquareError
        If `a` is not square.
    """
    check_square(a.shape, "trace")
    return float(np.trace(a.data))
