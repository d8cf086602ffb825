"""
Claim Verification
==================

Check a claimed matrix–vector product by exact recomputation.

Given M (n×n), s and a claimed output y, accept iff M·s == y element-wise
over the integers. The work is O(n^2).
"""

import logging
from typing import Sequence

from .groups import Point
from .matrix import check_dimensions, matrix_mul_basic
from .operations import IntegerOps

logger = logging.getLogger(__name__)


def verify_matrix_mult_claim(matrix: Sequence[int], n: int, s: Sequence[int], G: Point,
                             claimed_output: Sequence[int], rational_module=None) -> bool:
    """
    Verify the claim ``matrix · s == claimed_output``.

    Parameters
    ----------
    matrix : Sequence[int]
        Row-major matrix entries, length n·n
    n : int
        The dimension
    s : Sequence[int]
        The input vector, length n
    G : Point
        The curve generator; accepted but not used by exact recomputation
    claimed_output : Sequence[int]
        The purported product, length n
    rational_module : RationalCommitment, optional
        Commitment module; accepted but not used by exact recomputation

    Returns
    -------
    bool
        True if every entry of the recomputed product equals the claim

    Raises
    ------
    InvalidDimensions
        If any of matrix, s, claimed_output has the wrong length
    IntegerOverflow
        If the recomputation leaves the configured integer width

    Notes
    -----
    A mismatch is a normal False result, not an error.

    G and rational_module are the hook for a cheaper randomized check
    (aggregating row checks through commitments). Whether that check should
    replace exact recomputation is undecided, so both are ignored here.

    Examples
    --------
    >>> from ecverify import G
    >>> verify_matrix_mult_claim([2, 3, 1, 4], 2, [5, 7], G, [31, 33])
    True
    """
    check_dimensions(matrix, n, s, claimed_output)

    if rational_module is not None:
        logger.debug("rational_module %r ignored by exact recomputation", rational_module)

    expected = matrix_mul_basic(matrix, n, s, IntegerOps())
    result = all(e == c for e, c in zip(expected, claimed_output))
    logger.debug("matrix claim for n=%d verified: %s", n, result)
    return result
