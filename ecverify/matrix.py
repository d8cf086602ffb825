"""
Matrix Engine
=============

Matrix–vector multiplication over a pluggable domain.

Formula:
--------
result_i = Σ_{j=0}^{n-1} M_{ij} · v_j

where · is ``ops.multiply`` and Σ is a left fold with ``ops.add`` starting at
column 0:

    result_i = add(...add(multiply(M_i0, v_0), multiply(M_i1, v_1))..., multiply(M_i(n-1), v_(n-1)))

The matrix is always a row-major sequence of n·n integers. The vector holds
elements of the ops domain: integers for IntegerOps, curve points for ECOps.
"""

import logging
import operator
from typing import Any, List, Sequence

import numpy as np

from .exceptions import InvalidDimensions
from .operations import ArithmeticOps, ECOps

logger = logging.getLogger(__name__)


def check_dimensions(matrix: Sequence[int], n: int, *vectors: Sequence[Any]):
    """
    Check that matrix has n·n entries and every vector has n entries.

    Raises
    ------
    InvalidDimensions
        On any mismatch, or if n is not a non-negative integer
    """
    if not isinstance(n, (int, np.integer)) or isinstance(n, bool) or n < 0:
        raise InvalidDimensions(f"Invalid dimension n={n!r}")
    if len(matrix) != n * n or any(len(v) != n for v in vectors):
        logger.debug("dimension check failed: n=%d, len(matrix)=%d, vector lengths=%s",
                     n, len(matrix), [len(v) for v in vectors])
        raise InvalidDimensions("Invalid matrix or vector dimensions")


def _as_rows(matrix: Sequence[int], n: int) -> np.ndarray:
    # dtype=object keeps arbitrary-precision Python ints; non-integers raise TypeError
    return np.array([operator.index(m) for m in matrix], dtype=object).reshape(n, n)


def matrix_mul_basic(matrix: Sequence[int], n: int, vector: Sequence[Any],
                     ops: ArithmeticOps) -> List[Any]:
    """
    Multiply the n×n matrix by a vector using the given operations.

    Parameters
    ----------
    matrix : Sequence[int]
        Row-major matrix entries, length n·n
    n : int
        The dimension
    vector : Sequence
        The vector (v_0, ..., v_{n-1}) over the ops domain
    ops : ArithmeticOps
        Provides multiply(scalar, element) and add(element, element)

    Returns
    -------
    List
        [result_0, ..., result_{n-1}]

    Raises
    ------
    InvalidDimensions
        If len(matrix) != n·n or len(vector) != n; checked before any
        arithmetic runs

    Examples
    --------
    >>> from ecverify import IntegerOps
    >>> matrix_mul_basic([1, 2, 3, 4], 2, [5, 6], IntegerOps())
    [17, 39]
    """
    check_dimensions(matrix, n, vector)
    if n == 0:
        return []

    rows = _as_rows(matrix, n)
    result = []
    for i in range(n):
        acc = ops.multiply(rows[i, 0], vector[0])
        for j in range(1, n):
            acc = ops.add(acc, ops.multiply(rows[i, j], vector[j]))
        result.append(acc)

    return result


def matrix_mul_ec(matrix: Sequence[int], n: int, vector: Sequence[Any],
                  ops: ArithmeticOps = None) -> List[Any]:
    """
    Multiply an integer matrix by a vector of curve points.

    result_i = Σ_j [M_ij] v_j computed in the curve group. Same dimension
    contract as ``matrix_mul_basic``.

    Parameters
    ----------
    ops : ArithmeticOps, optional
        Curve operations; defaults to ``ECOps()``
    """
    if ops is None:
        ops = ECOps()
    return matrix_mul_basic(matrix, n, vector, ops)
