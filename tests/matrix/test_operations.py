"""
Tests for elementwise and linear operations.

Expected values are hand-computed for the shared example matrices.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pymatrix import (
    DimensionMismatchError,
    NotSquareError,
    ValidationError,
    add,
    from_rows,
    multiply,
    negate,
    scalar_multiply,
    subtract,
    trace,
    transpose,
)


class TestAdd:

    def test_add(self, generic_examples):
        a, b, _ = generic_examples
        assert_allclose(
            add(a, b).data,
            [[8.7, 22.7, 8.3], [16.0, 14.0, 11.2]],
            atol=1e-12,
        )

    def test_shape_mismatch(self, generic_examples):
        a, _, c = generic_examples
        with pytest.raises(DimensionMismatchError):
            add(a, c)

    def test_row_vector_plus_square(self):
        """1x2 + 2x2 is rejected."""
        with pytest.raises(DimensionMismatchError) as exc_info:
            add(from_rows([[1, 1]]), from_rows([[1, 1], [1, 1]]))
        assert exc_info.value.left_shape == (1, 2)
        assert exc_info.value.right_shape == (2, 2)
        assert exc_info.value.operation == "add"

    def test_operator(self, generic_examples):
        a, b, _ = generic_examples
        assert a + b == add(a, b)

    def test_operands_unchanged(self, generic_examples):
        a, b, _ = generic_examples
        before_a, before_b = a.to_list(), b.to_list()
        add(a, b)
        assert a.to_list() == before_a
        assert b.to_list() == before_b


class TestSubtract:

    def test_subtract(self, generic_examples):
        a, b, _ = generic_examples
        assert_allclose(
            subtract(a, b).data,
            [[5.7, 4.9, 1.9], [2.6, -8.6, 1.6]],
            atol=1e-12,
        )

    def test_shape_mismatch(self, generic_examples):
        a, _, c = generic_examples
        with pytest.raises(DimensionMismatchError):
            subtract(a, c)

    def test_operator(self, generic_examples):
        a, b, _ = generic_examples
        assert a - b == subtract(a, b)


class TestScalarMultiply:

    def test_scale(self, generic_examples):
        a = generic_examples[0]
        assert_allclose(
            scalar_multiply(a, 2.0).data,
            [[14.4, 27.6, 10.2], [18.6, 5.4, 12.8]],
            atol=1e-12,
        )
        assert_allclose(
            scalar_multiply(a, 0.5).data,
            [[3.6, 6.9, 2.55], [4.65, 1.35, 3.2]],
            atol=1e-12,
        )

    def test_operators(self, generic_examples):
        a = generic_examples[0]
        assert 2.0 * a == scalar_multiply(a, 2.0)
        assert a * 2 == scalar_multiply(a, 2.0)
        assert np.float64(3.0) * a == scalar_multiply(a, 3.0)

    def test_rejects_non_finite(self, generic_examples):
        with pytest.raises(ValidationError):
            scalar_multiply(generic_examples[0], float("inf"))

    def test_unsupported_operand(self, generic_examples):
        with pytest.raises(TypeError):
            generic_examples[0] * "2"
        with pytest.raises(TypeError):
            True * generic_examples[0]


class TestNegate:

    def test_negative(self, generic_examples):
        a = generic_examples[0]
        expected = [[-7.2, -13.8, -5.1], [-9.3, -2.7, -6.4]]
        assert negate(a).to_list() == expected
        assert (-a).to_list() == expected


class TestMultiply:

    def test_multiplication(self, generic_examples):
        a, _, c = generic_examples
        assert_allclose(
            multiply(c, a).data,
            [
                [131.46, 103.74, 91.28],
                [89.7, 60.0, 62.15],
                [109.47, 162.93, 76.96],
                [126.27, 110.43, 87.81],
            ],
            atol=1e-10,
        )

    def test_result_shape(self, generic_examples):
        a, _, c = generic_examples
        assert multiply(c, a).shape == (4, 3)
        assert multiply(a, transpose(a)).shape == (2, 2)

    def test_inner_dimension_mismatch(self, generic_examples):
        a, _, c = generic_examples
        with pytest.raises(DimensionMismatchError):
            multiply(a, c)

    def test_operators(self, generic_examples):
        a, _, c = generic_examples
        assert c @ a == multiply(c, a)
        assert c * a == multiply(c, a)

    def test_matmul_with_non_matrix(self, generic_examples):
        with pytest.raises(TypeError):
            generic_examples[0] @ 2.0


class TestTranspose:

    def test_transpose(self, generic_examples):
        a = generic_examples[0]
        assert transpose(a).to_list() == [[7.2, 9.3], [13.8, 2.7], [5.1, 6.4]]
        assert a.T == transpose(a)

    def test_owns_its_data(self, generic_examples):
        a = generic_examples[0]
        t = transpose(a)
        assert not np.shares_memory(t.data, a.data)
        assert not t.data.flags.writeable

    def test_1x1(self):
        assert transpose(from_rows([[3.0]])) == from_rows([[3.0]])


class TestTrace:

    def test_not_square(self, generic_examples):
        with pytest.raises(NotSquareError):
            trace(generic_examples[0])

    def test_trace(self, square_examples):
        m1, m2, m3, m5 = square_examples
        assert trace(m1) == pytest.approx(2.5)
        assert trace(m2) == pytest.approx(11.2)
        assert trace(m3) == pytest.approx(4.5)
        assert trace(m5) == pytest.approx(6.1)

    def test_returns_python_float(self, square_examples):
        assert type(trace(square_examples[1])) is float
