"""
Tests for PyMatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatrixError)
    - Diagnostic attributes on DimensionMismatchError, NotSquareError,
      IndexOutOfBoundsError, SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
    NotSquareError,
    NumericalError,
    PyMatrixError,
    ShapeError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatrixError."""

    @pytest.mark.parametrize("exc_type", [
        ShapeError, DimensionError, DimensionMismatchError,
        NotSquareError, IndexOutOfBoundsError,
    ])
    def test_input_errors_are_validation_errors(self, exc_type):
        with pytest.raises(ValidationError):
            raise exc_type("bad input")

    @pytest.mark.parametrize("exc_type", [
        ValidationError, ShapeError, DimensionError, DimensionMismatchError,
        NotSquareError, IndexOutOfBoundsError, NumericalError,
        SingularMatrixError,
    ])
    def test_everything_is_pymatrix_error(self, exc_type):
        with pytest.raises(PyMatrixError):
            raise exc_type("failed")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_not_validation_error(self):
        """Singularity is a property of valid input, not an input error."""
        assert not isinstance(SingularMatrixError("singular"), ValidationError)

    def test_index_error_is_builtin_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfBoundsError("row 5 out of bounds")

    def test_kinds_are_distinguishable(self):
        assert not issubclass(ShapeError, DimensionError)
        assert not issubclass(DimensionError, DimensionMismatchError)
        assert not issubclass(DimensionMismatchError, NotSquareError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionMismatchError:

    def test_all_attributes(self):
        err = DimensionMismatchError(
            "add: shapes must match",
            operation="add",
            left_shape=(1, 2),
            right_shape=(2, 2),
        )
        assert str(err) == "add: shapes must match"
        assert err.operation == "add"
        assert err.left_shape == (1, 2)
        assert err.right_shape == (2, 2)

    def test_defaults_are_none(self):
        err = DimensionMismatchError("mismatch")
        assert err.operation is None
        assert err.left_shape is None
        assert err.right_shape is None


class TestNotSquareError:

    def test_all_attributes(self):
        err = NotSquareError("trace: requires square", operation="trace", shape=(2, 3))
        assert err.operation == "trace"
        assert err.shape == (2, 3)

    def test_defaults_are_none(self):
        err = NotSquareError("not square")
        assert err.operation is None
        assert err.shape is None


class TestIndexOutOfBoundsError:

    def test_all_attributes(self):
        err = IndexOutOfBoundsError("row: index 3 out of bounds", index=3, bound=2)
        assert err.index == 3
        assert err.bound == 2

    def test_defaults_are_none(self):
        err = IndexOutOfBoundsError("out of bounds")
        assert err.index is None
        assert err.bound is None


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError("singular", determinant=1e-12, tolerance=1e-9)
        assert str(err) == "singular"
        assert err.determinant == 1e-12
        assert err.tolerance == 1e-9

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.determinant is None
        assert err.tolerance is None

    def test_catchable_with_attributes(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", determinant=0.0, tolerance=1e-9)
        assert exc_info.value.determinant == 0.0
