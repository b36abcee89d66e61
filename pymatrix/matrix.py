"""
Matrix: immutable dense real matrix.

The single data model of PyMatrix. A Matrix wraps a read-only float64
array of shape (rows, cols) with rows >= 1 and cols >= 1. Every operation
in the library takes Matrix values and returns a new Matrix (or a scalar /
boolean); nothing mutates an operand.

Construction:
    Matrix.from_rows([[1, 2], [3, 4]])
    Matrix.zero(2, 3)
    Matrix.identity(3)
    Matrix.scalar(3, 2.5)
    Matrix.diagonal([1, 2, 3])

The same constructors are available as module-level functions.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import DimensionError, DimensionMismatchError, ShapeError
from pymatrix.core.tolerances import DEFAULT, ToleranceTier, allclose
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_finite_scalar,
    check_index,
    check_positive_dimension,
    check_rectangular,
)


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Immutable rectangular grid of real scalars.

    Entries are addressed 0-based, row-major: m[i, j] is row i, column j.
    Equality (==) is exact; use approx_equal() for tolerance-based
    comparison.
    """
    _data: NDArray[np.float64]
    _rows: int
    _cols: int

    # --- Construction ---

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]] | ArrayLike) -> Matrix:
        """
        Build a Matrix from a sequence of equally long rows.

        Parameters
        ----------
        rows : sequence of sequences of numbers, or 2D array-like
            Row-major entries. The input is copied.

        Raises
        ------
        ShapeError
            If there are no rows, rows are empty, or row lengths differ.
        ValidationError
            If entries are not real numbers or are not finite.
        """
        if not isinstance(rows, np.ndarray):
            try:
                rows = [list(row) if not isinstance(row, np.ndarray) else row
                        for row in rows]
            except TypeError as e:
                raise ShapeError(f"rows: expected a sequence of rows: {e}") from e
        check_rectangular(rows, "rows")
        data = check_array(rows, "rows")
        check_2d(data, "rows")
        return cls._build(data)

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Matrix:
        """Build a Matrix from a 2D array-like. Same rules as from_rows()."""
        return cls.from_rows(array)

    @classmethod
    def zero(cls, rows: int, cols: int) -> Matrix:
        """rows x cols matrix of zeros."""
        rows = check_positive_dimension(rows, "rows")
        cols = check_positive_dimension(cols, "cols")
        return cls._build(np.zeros((rows, cols), dtype=np.float64))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        return cls.scalar(n, 1.0)

    @classmethod
    def scalar(cls, n: int, k: float) -> Matrix:
        """n x n matrix with k on the diagonal and 0 elsewhere."""
        n = check_positive_dimension(n, "n")
        k = check_finite_scalar(k, "k")
        return cls._build(np.eye(n, dtype=np.float64) * k)

    @classmethod
    def diagonal(cls, values: Sequence[float] | ArrayLike) -> Matrix:
        """
        Square matrix with `values` on the diagonal and 0 elsewhere.

        Raises
        ------
        DimensionError
            If `values` is empty.
        ShapeError
            If `values` is not one-dimensional.
        """
        diag = check_array(values, "values")
        if diag.ndim != 1:
            raise ShapeError(
                f"values: expected 1D sequence, got {diag.ndim}D with shape {diag.shape}"
            )
        if diag.size == 0:
            raise DimensionError("values: dimension must be at least 1, got 0")
        return cls._build(np.diag(diag))

    @classmethod
    def _build(cls, data: NDArray[np.float64]) -> Matrix:
        """Internal builder: takes ownership of `data` and freezes it."""
        check_finite(data, "data")
        rows, cols = data.shape
        if rows < 1 or cols < 1:
            raise ShapeError(f"data: empty matrix, got shape {data.shape}")
        data.setflags(write=False)
        return cls(_data=data, _rows=rows, _cols=cols)

    # --- Shape ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._rows, self._cols)

    # --- Entry access ---

    @property
    def data(self) -> NDArray[np.float64]:
        """Read-only view of the entries, shape (rows, cols)."""
        return self._data

    def to_list(self) -> list[list[float]]:
        """Entries as a fresh list of row lists."""
        return self._data.tolist()

    def to_numpy(self) -> NDArray[np.float64]:
        """Entries as a fresh, writable array."""
        return self._data.copy()

    def row(self, i: int) -> tuple[float, ...]:
        """Row i as a tuple."""
        i = check_index(i, self._rows, "row")
        return tuple(self._data[i].tolist())

    def column(self, j: int) -> tuple[float, ...]:
        """Column j as a tuple."""
        j = check_index(j, self._cols, "column")
        return tuple(self._data[:, j].tolist())

    def element(self, i: int, j: int) -> float:
        """Entry at row i, column j."""
        i = check_index(i, self._rows, "row")
        j = check_index(j, self._cols, "column")
        return float(self._data[i, j])

    def __getitem__(self, key: tuple[int, int]) -> float:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError(
                f"Matrix indices must be a (row, column) pair, got {key!r}"
            )
        return self.element(*key)

    # --- Copy-on-write updates ---

    def with_row(self, i: int, values: Sequence[float] | ArrayLike) -> Matrix:
        """Copy of this matrix with row i replaced by `values`."""
        i = check_index(i, self._rows, "row")
        new_row = self._replacement(values, self._cols, "with_row")
        data = self._data.copy()
        data[i, :] = new_row
        return Matrix._build(data)

    def with_column(self, j: int, values: Sequence[float] | ArrayLike) -> Matrix:
        """Copy of this matrix with column j replaced by `values`."""
        j = check_index(j, self._cols, "column")
        new_col = self._replacement(values, self._rows, "with_column")
        data = self._data.copy()
        data[:, j] = new_col
        return Matrix._build(data)

    def with_element(self, i: int, j: int, value: float) -> Matrix:
        """Copy of this matrix with entry (i, j) replaced by `value`."""
        i = check_index(i, self._rows, "row")
        j = check_index(j, self._cols, "column")
        value = check_finite_scalar(value, "value")
        data = self._data.copy()
        data[i, j] = value
        return Matrix._build(data)

    def _replacement(self, values: Any, length: int, operation: str) -> NDArray[np.float64]:
        arr = check_array(values, "values")
        if arr.ndim != 1 or arr.shape[0] != length:
            raise DimensionMismatchError(
                f"{operation}: expected {length} values, got shape {arr.shape}",
                operation=operation,
                left_shape=self.shape,
                right_shape=arr.shape,
            )
        check_finite(arr, "values")
        return arr

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        # + 0.0 folds -0.0 into 0.0 so hash agrees with ==
        return hash((self.shape, (self._data + 0.0).tobytes()))

    def approx_equal(self, other: Matrix, tol: ToleranceTier = DEFAULT) -> bool:
        """Same shape and every entry within the shared tolerance."""
        return allclose(self._data, other._data, tol)

    # --- Operators ---

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.operations import add
        return add(self, other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.operations import subtract
        return subtract(self, other)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.operations import multiply
        return multiply(self, other)

    def __mul__(self, other: object) -> Matrix:
        from pymatrix.operations import multiply, scalar_multiply
        if isinstance(other, Matrix):
            return multiply(self, other)
        if _is_real_scalar(other):
            return scalar_multiply(self, other)
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix:
        if not _is_real_scalar(other):
            return NotImplemented
        from pymatrix.operations import scalar_multiply
        return scalar_multiply(self, other)

    def __neg__(self) -> Matrix:
        from pymatrix.operations import negate
        return negate(self)

    @property
    def T(self) -> Matrix:
        """Transpose."""
        from pymatrix.operations import transpose
        return transpose(self)

    # --- Rendering ---

    def __str__(self) -> str:
        cells = [[_format_entry(x) for x in row] for row in self._data.tolist()]
        widths = [max(len(cells[i][j]) for i in range(self._rows))
                  for j in range(self._cols)]
        lines = []
        for row in cells:
            parts = []
            for j, text in enumerate(row):
                pad = widths[j] - len(text)
                right = pad // 2
                left = pad - right + 1
                parts.append(" " * left + text + " " * right)
            lines.append("".join(parts))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, data={self.to_list()})"


def _is_real_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _format_entry(value: float) -> str:
    """Shortest round-trip text; integral values lose the trailing '.0'."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


# --- Module-level constructors ---

def from_rows(rows: Sequence[Sequence[float]] | ArrayLike) -> Matrix:
    """Build a Matrix from a sequence of equally long rows."""
    return Matrix.from_rows(rows)


def zero(rows: int, cols: int) -> Matrix:
    """rows x cols matrix of zeros."""
    return Matrix.zero(rows, cols)


def identity(n: int) -> Matrix:
    """n x n identity matrix."""
    return Matrix.identity(n)


def scalar(n: int, k: float) -> Matrix:
    """n x n matrix with k on the diagonal."""
    return Matrix.scalar(n, k)


def diagonal(values: Sequence[float] | ArrayLike) -> Matrix:
    """Square matrix with `values` on the diagonal."""
    return Matrix.diagonal(values)
