"""
Test Suite for the Matrix Engine
================================

Integer and curve-group instantiations of matrix–vector multiplication,
dimension checks and evaluation order.
"""

import numpy as np
import pytest

from ecverify import (
    ECOps, G, IDENTITY, IntegerOps, IntegerOverflow, InvalidDimensions, check_dimensions,
    ec_mul, matrix_mul_basic, matrix_mul_ec
)


class RecordingOps:
    """Symbolic ops that record the expression tree and every call."""

    def __init__(self):
        self.calls = 0

    def multiply(self, x, y):
        self.calls += 1
        return f"{x}*{y}"

    def add(self, x, y):
        self.calls += 1
        return f"({x}+{y})"


# ============================================================================
# matrix_mul_basic with IntegerOps
# ============================================================================

def test_multiply_2x2():
    result = matrix_mul_basic([1, 2, 3, 4], 2, [5, 6], IntegerOps())
    assert result == [17, 39]  # [1*5 + 2*6, 3*5 + 4*6]


def test_multiply_3x3():
    matrix = [
        1, 2, 3,
        4, 5, 6,
        7, 8, 9,
    ]
    result = matrix_mul_basic(matrix, 3, [2, 1, 3], IntegerOps())
    assert result == [13, 31, 49]


def test_multiply_identity_matrix():
    n = 4
    identity = [1 if i == j else 0 for i in range(n) for j in range(n)]
    vector = [9, 8, 7, 6]
    assert matrix_mul_basic(identity, n, vector, IntegerOps()) == vector


def test_multiply_1x1():
    assert matrix_mul_basic([7], 1, [6], IntegerOps()) == [42]


def test_multiply_empty():
    assert matrix_mul_basic([], 0, [], IntegerOps()) == []


def test_multiply_accepts_tuples_and_arrays():
    expected = [17, 39]
    assert matrix_mul_basic((1, 2, 3, 4), 2, (5, 6), IntegerOps()) == expected
    assert matrix_mul_basic(np.array([1, 2, 3, 4]), np.int64(2), [5, 6], IntegerOps()) == expected


def test_multiply_results_are_python_ints():
    result = matrix_mul_basic(np.array([1, 2, 3, 4]), 2, [5, 6], IntegerOps())
    assert all(type(v) is int for v in result)


def test_multiply_big_integers():
    big = 2 ** 100
    assert matrix_mul_basic([big, 1, 1, big], 2, [big, 1], IntegerOps()) == [big * big + 1, 2 * big]


def test_multiply_overflow_propagates():
    with pytest.raises(IntegerOverflow):
        matrix_mul_basic([200, 0, 0, 1], 2, [2, 1], IntegerOps(bits=8))


def test_matrix_not_mutated():
    matrix = [1, 2, 3, 4]
    vector = [5, 6]
    matrix_mul_basic(matrix, 2, vector, IntegerOps())
    assert matrix == [1, 2, 3, 4]
    assert vector == [5, 6]


def test_left_to_right_accumulation():
    ops = RecordingOps()
    result = matrix_mul_basic([1, 2, 3, 4, 5, 6, 7, 8, 9], 3, ['a', 'b', 'c'], ops)
    assert result == [
        "((1*a+2*b)+3*c)",
        "((4*a+5*b)+6*c)",
        "((7*a+8*b)+9*c)",
    ]


# ============================================================================
# Dimension checks
# ============================================================================

@pytest.mark.parametrize("matrix, n, vector", [
    ([1, 2, 3], 2, [5, 6]),
    ([1, 2, 3, 4, 5], 2, [5, 6]),
    ([1, 2, 3, 4], 2, [5]),
    ([1, 2, 3, 4], 2, [5, 6, 7]),
    ([1, 2, 3, 4], 3, [5, 6, 7]),
    ([1], -1, []),
    ([], 0, [1]),
])
def test_invalid_dimensions(matrix, n, vector):
    with pytest.raises(InvalidDimensions, match="Invalid"):
        matrix_mul_basic(matrix, n, vector, IntegerOps())


def test_invalid_dimensions_before_arithmetic():
    ops = RecordingOps()
    with pytest.raises(InvalidDimensions):
        matrix_mul_basic([1, 2, 3], 2, ['a', 'b'], ops)
    assert ops.calls == 0


@pytest.mark.parametrize("n", [2.0, "2", True, None])
def test_non_integer_dimension(n):
    with pytest.raises(InvalidDimensions):
        check_dimensions([1, 2, 3, 4], n, [5, 6])


def test_check_dimensions_several_vectors():
    check_dimensions([1, 2, 3, 4], 2, [1, 2], [3, 4])
    with pytest.raises(InvalidDimensions):
        check_dimensions([1, 2, 3, 4], 2, [1, 2], [3])


# ============================================================================
# matrix_mul_ec
# ============================================================================

def test_multiply_ec_2x2():
    result = matrix_mul_ec([1, 2, 3, 4], 2, [G, ec_mul(G, 2)], ECOps())
    assert result == [ec_mul(G, 5), ec_mul(G, 11)]


def test_multiply_ec_default_ops():
    assert matrix_mul_ec([1, 2, 3, 4], 2, [G, ec_mul(G, 2)]) == [ec_mul(G, 5), ec_mul(G, 11)]


def test_multiply_ec_matches_integer_product(small_multiples):
    matrix = [2, 0, 1, 1, 3, 2, 0, 1, 1]
    scalars = [1, 2, 3]
    points = [small_multiples[k] for k in scalars]
    expected = matrix_mul_basic(matrix, 3, scalars, IntegerOps())
    result = matrix_mul_ec(matrix, 3, points)
    assert result == [ec_mul(G, e) for e in expected]


def test_multiply_ec_zero_matrix():
    assert matrix_mul_ec([0, 0, 0, 0], 2, [G, G]) == [IDENTITY, IDENTITY]


def test_multiply_ec_identity_vector():
    assert matrix_mul_ec([1, 2, 3, 4], 2, [IDENTITY, G]) == [ec_mul(G, 2), ec_mul(G, 4)]


def test_multiply_ec_invalid_dimensions():
    with pytest.raises(InvalidDimensions):
        matrix_mul_ec([1, 2, 3], 2, [G, G])


def test_numpy_vector_does_not_wrap():
    with pytest.raises(IntegerOverflow):
        matrix_mul_basic([4, 0, 0, 1], 2, np.array([2 ** 62, 1]), IntegerOps(bits=64))


def test_numpy_vector_exact_product():
    result = matrix_mul_basic([4, 0, 0, 1], 2, np.array([2 ** 62, 1]), IntegerOps())
    assert result == [2 ** 64, 1]
    assert all(type(v) is int for v in result)


@pytest.mark.parametrize("matrix", [
    [1.9, 0, 0, 1],
    [1, 0, 0, 1.0],
    np.array([1.5, 0.0, 0.0, 1.0]),
])
def test_non_integer_matrix_entries_rejected(matrix):
    with pytest.raises(TypeError):
        matrix_mul_basic(matrix, 2, [5, 6], IntegerOps())
