"""
Numerical tolerance for value comparisons.

Every place PyMatrix compares floating-point values for equality (zero
tests, symmetry, identity, singularity) goes through the helpers in this
module so that all predicates agree with each other.

The tolerance is absolute. SINGULAR_TOL = 1e-9 is part of the public
contract: a matrix whose determinant satisfies |det| < 1e-9 is singular
and inverse() refuses it. Tighter values let ill-conditioned matrices
through with garbage inverses; looser values start rejecting matrices
with legitimately small determinants (e.g. entries of order 1e-3 in a
3x3 matrix).
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    atol: float
    name: str
    description: str


DEFAULT = ToleranceTier(
    atol=1e-9,
    name='default',
    description='Absolute tolerance shared by every value comparison',
)

# Public constant; identical to DEFAULT.atol.
SINGULAR_TOL = DEFAULT.atol

# Largest order for which determinant(method='auto') uses cofactor
# expansion. 8! = 40320 leaf products; 9! is already ~0.4M.
COFACTOR_MAX_ORDER = 8


def is_negligible(value: float, tol: ToleranceTier = DEFAULT) -> bool:
    """True if |value| is strictly below the tolerance."""
    return abs(float(value)) < tol.atol


def is_close(a: float, b: float, tol: ToleranceTier = DEFAULT) -> bool:
    """True if two scalars differ by less than the tolerance."""
    return is_negligible(float(a) - float(b), tol)


def allclose(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    tol: ToleranceTier = DEFAULT,
) -> bool:
    """
    Elementwise is_close over two arrays of identical shape.

    Arrays of different shape are never close.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != b.shape:
        return False
    return bool(np.all(np.abs(a - b) < tol.atol))
