"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Shape and index problems are ValidationErrors
(the caller passed something unusable); singularity is a NumericalError
(the input is well-formed but the requested value does not exist).

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class ShapeError(ValidationError):
    """
    Construction input is malformed.

    Raised when the rows handed to a constructor are empty or have
    inconsistent lengths.
    """
    pass


class DimensionError(ValidationError):
    """
    A requested matrix dimension is not a positive integer.

    Raised by the zero/identity/scalar/diagonal constructors.
    """
    pass


class DimensionMismatchError(ValidationError):
    """
    Operand shapes are incompatible for the requested operation.

    Attributes:
        operation: Name of the operation that rejected the operands
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand, or expected length
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(ValidationError):
    """
    Operation requires a square matrix.

    Attributes:
        operation: Name of the operation that required squareness
        shape: (rows, cols) of the offending matrix
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Row or column index outside the matrix.

    Also an IndexError so that plain Python indexing code can catch it.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound the index had to stay below
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when an inverse is requested but the determinant lies within
    the singularity tolerance of zero.

    Attributes:
        determinant: The determinant that was computed
        tolerance: The absolute tolerance it was compared against
    """

    def __init__(
        self,
        message: str,
        determinant: float | None = None,
        tolerance: float | None = None,
    ):
        super().__init__(message)
        self.determinant = determinant
        self.tolerance = tolerance
