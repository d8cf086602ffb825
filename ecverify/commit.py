"""
Rational Commitments
====================

Commitments to rational numbers as points of the curve group.

Formula (Rational commitment):
------------------------------
commit(n/d) := [n · d^{-1} mod r] G

The map n/d ↦ commit(n/d) is a group homomorphism from Z_r into the curve
group, so

    commit(a/da) + commit(b/db) = commit(a/da + b/db)

whenever the rationals are reduced mod r. A verifier holding only the two
points can therefore check a claimed sum without learning numerators or
denominators. The check is exact equality of coordinates.
"""

import logging
from typing import NamedTuple

from .field import mod_div
from .groups import CURVE_ORDER, G, Point, ec_add, ec_mul

logger = logging.getLogger(__name__)


class RationalCommitmentPair(NamedTuple):
    """Commitments (A, B) to two rationals."""
    A: Point
    B: Point


def commit(n: int, d: int, G: Point = G) -> Point:
    """
    Commit to the rational n/d.

    Formula:
    --------
    s = n · d^{-1} mod r,   commit = [s] G

    Parameters
    ----------
    n : int
        The numerator
    d : int
        The denominator; must not be ≡ 0 (mod r)
    G : Point, optional
        The generator (defaults to the canonical G1 generator)

    Returns
    -------
    Point
        The commitment [s] G

    Raises
    ------
    InvalidInverse
        If d ≡ 0 (mod r)

    Examples
    --------
    >>> commit(2, 4) == commit(1, 2)
    True
    """
    s = mod_div(n, d, CURVE_ORDER)
    return ec_mul(G, s)


def construct_pair(a: int, da: int, b: int, db: int, G: Point = G) -> RationalCommitmentPair:
    """
    Commit to a/da and b/db.

    Both denominators are inverted before anything is returned; a zero
    denominator in either position fails the whole call.
    """
    A = commit(a, da, G)
    B = commit(b, db, G)
    return RationalCommitmentPair(A, B)


def verify_rational_sum(A: Point, B: Point, num: int, den: int, G: Point = G) -> bool:
    """
    Verify that the rationals committed in A and B sum to num/den.

    Formula:
    --------
    A + B  ==  [num · den^{-1} mod r] G

    Parameters
    ----------
    A, B : Point
        Commitments to the two summands
    num, den : int
        The claimed sum num/den
    G : Point, optional
        The generator used to build A and B

    Returns
    -------
    bool
        True if the equation holds, False otherwise

    Raises
    ------
    InvalidInverse
        If den ≡ 0 (mod r)
    InvalidPoint
        If A or B is not a curve point
    """
    C = ec_add(A, B)
    D = commit(num, den, G)
    result = C == D
    logger.debug("rational sum %d/%d verified: %s", num, den, result)
    return result


class RationalCommitment:
    """
    Stateless rational commitment module bound to a generator.

    Parameters
    ----------
    generator : Point, optional
        The generator G (defaults to the canonical G1 generator)

    Examples
    --------
    >>> rc = RationalCommitment()
    >>> A, B = rc.construct_pair(1, 2, 1, 3)
    >>> rc.verify_rational_sum(A, B, 5, 6)
    True
    """

    def __init__(self, generator: Point = G):
        self.generator = Point(*generator)

    def __repr__(self):
        return f"RationalCommitment(generator={tuple(self.generator)})"

    def commit(self, n: int, d: int) -> Point:
        return commit(n, d, self.generator)

    def construct_pair(self, a: int, da: int, b: int, db: int) -> RationalCommitmentPair:
        return construct_pair(a, da, b, db, self.generator)

    def verify_rational_sum(self, A: Point, B: Point, num: int, den: int) -> bool:
        return verify_rational_sum(A, B, num, den, self.generator)
