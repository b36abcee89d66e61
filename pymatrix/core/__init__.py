"""
Core infrastructure for PyMatrix.

Shared abstractions used by the matrix type and every operation module.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: The single shared numerical tolerance and comparison helpers
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    ShapeError,
    DimensionError,
    DimensionMismatchError,
    NotSquareError,
    IndexOutOfBoundsError,
    NumericalError,
    SingularMatrixError,
)
from pymatrix.core.tolerances import (
    ToleranceTier,
    DEFAULT,
    SINGULAR_TOL,
    COFACTOR_MAX_ORDER,
)

__all__ = [
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "ShapeError",
    "DimensionError",
    "DimensionMismatchError",
    "NotSquareError",
    "IndexOutOfBoundsError",
    "NumericalError",
    "SingularMatrixError",
    # Tolerances
    "ToleranceTier",
    "DEFAULT",
    "SINGULAR_TOL",
    "COFACTOR_MAX_ORDER",
]
