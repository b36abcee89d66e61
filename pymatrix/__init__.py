"""
PyMatrix: dense real matrix arithmetic for Python.

An immutable Matrix value type with construction helpers, elementwise and
linear operations, determinant / adjoint / inverse, and property
predicates. Intended for small-to-medium matrices where exact cofactor
semantics matter more than raw speed.

Submodules:
    matrix: The Matrix type and constructors
    operations: add, subtract, scalar_multiply, negate, multiply, transpose, trace
    determinant: determinant, minor, cofactor
    inverse: cofactor_matrix, adjoint, inverse
    properties: is_square, is_zero, is_diagonal, ..., is_singular
    core: Exceptions, validation, tolerances
"""

__version__ = "0.1.0"

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
from pymatrix.core.tolerances import SINGULAR_TOL, COFACTOR_MAX_ORDER
from pymatrix.matrix import Matrix, from_rows, zero, identity, scalar, diagonal
from pymatrix.operations import (
    add,
    subtract,
    scalar_multiply,
    negate,
    multiply,
    transpose,
    trace,
)
from pymatrix.determinant import determinant, minor, cofactor
from pymatrix.inverse import cofactor_matrix, adjoint, inverse
from pymatrix.properties import (
    is_square,
    is_zero,
    is_diagonal,
    is_scalar,
    is_identity,
    is_symmetric,
    is_skew_symmetric,
    is_upper_triangular,
    is_lower_triangular,
    is_singular,
)

__all__ = [
    "__version__",
    # Data model
    "Matrix",
    "from_rows",
    "zero",
    "identity",
    "scalar",
    "diagonal",
    # Operations
    "add",
    "subtract",
    "scalar_multiply",
    "negate",
    "multiply",
    "transpose",
    "trace",
    "determinant",
    "minor",
    "cofactor",
    "cofactor_matrix",
    "adjoint",
    "inverse",
    # Predicates
    "is_square",
    "is_zero",
    "is_diagonal",
    "is_scalar",
    "is_identity",
    "is_symmetric",
    "is_skew_symmetric",
    "is_upper_triangular",
    "is_lower_triangular",
    "is_singular",
    # Constants
    "SINGULAR_TOL",
    "COFACTOR_MAX_ORDER",
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
]
