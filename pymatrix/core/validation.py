"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except float conversion of numeric input)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
    NotSquareError,
    ShapeError,
    ValidationError,
)


def check_rectangular(rows: Sequence[Sequence[Any]], name: str) -> None:
    """
    Verify a sequence of rows is non-empty and every row has the same length.

    Runs before numpy conversion so that ragged input is reported as a
    shape problem instead of surfacing as an object-dtype array.

    Args:
        rows: Candidate row sequence
        name: Parameter name for error messages

    Raises:
        ShapeError: If there are no rows, the rows are empty, or lengths differ
    """
    if isinstance(rows, np.ndarray):
        if rows.ndim != 2:
            raise ShapeError(
                f"{name}: expected 2D array, got {rows.ndim}D with shape {rows.shape}"
            )
        if rows.size == 0:
            raise ShapeError(f"{name}: empty input, got shape {rows.shape}")
        return

    try:
        lengths = [len(row) for row in rows]
    except TypeError as e:
        raise ShapeError(f"{name}: expected a sequence of rows: {e}") from e

    if not lengths:
        raise ShapeError(f"{name}: empty input, need at least one row")
    if lengths[0] == 0:
        raise ShapeError(f"{name}: rows are empty, need at least one column")
    if len(set(lengths)) > 1:
        bad = next(i for i, n in enumerate(lengths) if n != lengths[0])
        raise ShapeError(
            f"{name}: inconsistent row lengths, row 0 has {lengths[0]} "
            f"entries but row {bad} has {lengths[bad]}"
        )


def check_array(array: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (mixed types) or any
    non-numeric dtype. Complex input is rejected; PyMatrix is real-only.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64 (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        ShapeError: If array is not 2D
    """
    if array.ndim != 2:
        raise ShapeError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_finite_scalar(value: Any, name: str) -> float:
    """
    Validate a real, finite scalar and return it as float.

    Raises:
        ValidationError: If value is not a finite real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    value = float(value)
    if not np.isfinite(value):
        raise ValidationError(f"{name}: expected a finite number, got {value}")
    return value


def check_positive_dimension(value: Any, name: str) -> int:
    """
    Validate a requested matrix dimension.

    Args:
        value: Requested number of rows/columns
        name: Parameter name for error messages

    Returns:
        The dimension as int

    Raises:
        DimensionError: If value is not an integer >= 1
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise DimensionError(
            f"{name}: dimension must be an integer, got {type(value).__name__}"
        )
    if value < 1:
        raise DimensionError(f"{name}: dimension must be at least 1, got {value}")
    return int(value)


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Validate a 0-based row or column index.

    Negative indices are out of bounds; there is no wraparound.

    Raises:
        IndexOutOfBoundsError: If index is not an integer in [0, bound)
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, numbers.Integral):
        raise IndexOutOfBoundsError(
            f"{name}: index must be an integer, got {type(index).__name__}",
            index=None,
            bound=bound,
        )
    if not 0 <= index < bound:
        raise IndexOutOfBoundsError(
            f"{name}: index {index} out of bounds, expected 0 <= {name} < {bound}",
            index=int(index),
            bound=bound,
        )
    return int(index)


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix shape is square.

    Args:
        shape: (rows, cols) of the operand
        operation: Operation name for error messages

    Raises:
        NotSquareError: If rows != cols
    """
    if shape[0] != shape[1]:
        raise NotSquareError(
            f"{operation}: requires a square matrix, got {shape[0]}x{shape[1]}",
            operation=operation,
            shape=shape,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shape (elementwise operations).

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: shapes must match, got {left[0]}x{left[1]} "
            f"and {right[0]}x{right[1]}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_conformable(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify left.cols == right.rows (matrix product).

    Raises:
        DimensionMismatchError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"{operation}: left has {left[1]} columns but right has {right[0]} rows "
            f"({left[0]}x{left[1]} times {right[0]}x{right[1]})",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )
