"""
ecverify
========

Verification primitives over the BN254 (alt_bn128) G1 curve group.

Modules:
--------
- field: Modular inverse by Fermat's little theorem
- groups: Curve points, membership test, addition, scalar multiplication
- commit: Additively homomorphic commitments to rationals
- operations: Pluggable multiply / add (IntegerOps, ECOps)
- matrix: Matrix–vector multiplication over any ArithmeticOps
- verify: Exact verification of matrix multiplication claims
- config: Environment driven options
- exceptions: Error types

Usage:
------
    from ecverify import G, commit, verify_rational_sum

    A = commit(1, 2, G)
    B = commit(1, 3, G)
    assert verify_rational_sum(A, B, 5, 6, G)
"""

__version__ = "0.1.0"

from .exceptions import (
    ECVerifyError, IntegerOverflow, InvalidDimensions, InvalidInverse, InvalidPoint
)
from .field import fermat_inv, mod_div
from .groups import (
    CURVE_B, CURVE_ORDER, FIELD_MODULUS, G, IDENTITY, Point, ec_add, ec_mul, ec_neg, is_on_curve
)
from .operations import ArithmeticOps, ECOps, IntegerOps
from .commit import (
    RationalCommitment, RationalCommitmentPair, commit, construct_pair, verify_rational_sum
)
from .matrix import check_dimensions, matrix_mul_basic, matrix_mul_ec
from .verify import verify_matrix_mult_claim

__all__ = [
    'ECVerifyError', 'IntegerOverflow', 'InvalidDimensions', 'InvalidInverse', 'InvalidPoint',
    'fermat_inv', 'mod_div',
    'CURVE_B', 'CURVE_ORDER', 'FIELD_MODULUS', 'G', 'IDENTITY', 'Point',
    'ec_add', 'ec_mul', 'ec_neg', 'is_on_curve',
    'ArithmeticOps', 'ECOps', 'IntegerOps',
    'RationalCommitment', 'RationalCommitmentPair', 'commit', 'construct_pair',
    'verify_rational_sum',
    'check_dimensions', 'matrix_mul_basic', 'matrix_mul_ec',
    'verify_matrix_mult_claim',
]
