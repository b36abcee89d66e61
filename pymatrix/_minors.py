"""
Determinant kernels over index selections.

A minor is never materialized: it is described by the tuple of parent
row indices and the tuple of parent column indices that survive the
deletion. Cofactor expansion recurses by dropping the first surviving
row and one surviving column at each level, so recursion depth equals
the order of the matrix.

Two kernels:
    cofactor_expansion    Laplace expansion along the first row, O(n!)
    elimination_det       Gaussian elimination with partial pivoting, O(n^3)
"""

from __future__ import annotations

import warnings
from typing import Any, Literal, Sequence

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.tolerances import COFACTOR_MAX_ORDER

DetMethod = Literal['auto', 'cofactor', 'elimination']

_METHODS = ('auto', 'cofactor', 'elimination')


def resolve_method(order: int, method: str) -> str:
    """
    Map 'auto' to a concrete kernel for a determinant of the given order.

    Warns (RuntimeWarning) when cofactor expansion is requested explicitly
    above COFACTOR_MAX_ORDER.
    """
    if method not in _METHODS:
        raise ValidationError(
            f"Unknown determinant method: {method!r}. "
            f"Must be 'auto', 'cofactor', or 'elimination'."
        )
    if method == 'auto':
        return 'cofactor' if order <= COFACTOR_MAX_ORDER else 'elimination'
    if method == 'cofactor' and order > COFACTOR_MAX_ORDER:
        warnings.warn(
            f"Cofactor expansion of a {order}x{order} matrix costs O(n!) "
            f"operations; consider method='elimination'.",
            RuntimeWarning,
            stacklevel=3,
        )
    return method


def without(indices: tuple[int, ...], position: int) -> tuple[int, ...]:
    """Drop the element at `position` from an index tuple."""
    return indices[:position] + indices[position + 1:]


def cofactor_expansion(
    grid: Sequence[Sequence[float]],
    rows: tuple[int, ...],
    cols: tuple[int, ...],
) -> float:
    """
    Determinant of the square selection grid[rows][cols] by expansion
    along its first row.

    `grid` is a list of row lists (plain floats are much faster to index
    than numpy scalars in this hot loop).
    """
    n = len(rows)
    if n == 1:
        return grid[rows[0]][cols[0]]
    if n == 2:
        top, bottom = grid[rows[0]], grid[rows[1]]
        return top[cols[0]] * bottom[cols[1]] - top[cols[1]] * bottom[cols[0]]

    first = grid[rows[0]]
    rest = rows[1:]
    total = 0.0
    for k, c in enumerate(cols):
        entry = first[c]
        if entry == 0.0:
            continue
        term = entry * cofactor_expansion(grid, rest, without(cols, k))
        total += term if k % 2 == 0 else -term
    return total


def elimination_det(data: NDArray[np.floating[Any]]) -> float:
    """
    Determinant by reduction to upper-triangular form.

    Partial pivoting: at each column the entry of largest magnitude on or
    below the diagonal is swapped into the pivot position, and the sign
    flips once per swap. Works on a private copy of `data`.
    """
    u = np.array(data, dtype=np.float64)
    n = u.shape[0]
    sign = 1.0
    for col in range(n):
        pivot_row = col + int(np.argmax(np.abs(u[col:, col])))
        if u[pivot_row, col] == 0.0:
            return 0.0
        if pivot_row != col:
            u[[col, pivot_row]] = u[[pivot_row, col]]
            sign = -sign
        factors = u[col + 1:, col] / u[col, col]
        u[col + 1:, col:] -= np.outer(factors, u[col, col:])
    return float(sign * np.prod(np.diag(u)))


def selection_det(
    data: NDArray[np.floating[Any]],
    rows: tuple[int, ...],
    cols: tuple[int, ...],
    method: str,
) -> float:
    """Determinant of data[rows][cols] with an already-resolved method."""
    if method == 'cofactor' or len(rows) <= 2:
        return float(cofactor_expansion(data.tolist(), rows, cols))
    return elimination_det(data[np.ix_(rows, cols)])


def signed_minor_det(
    data: NDArray[np.floating[Any]],
    i: int,
    j: int,
    method: str,
) -> float:
    """(-1)^(i+j) times the determinant of data with row i and column j removed."""
    full = tuple(range(data.shape[0]))
    value = selection_det(data, without(full, i), without(full, j), method)
    return value if (i + j) % 2 == 0 else -value
