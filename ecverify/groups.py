"""
Curve Group
===========

Arithmetic in the prime-order group G1 of the BN254 (alt_bn128) curve

    E : y^2 = x^3 + 3  over  F_p

the curve behind the EVM ecAdd / ecMul precompiles.

According to py_ecc (py_ecc.bn128):
- Points are tuples (FQ, FQ); the point at infinity is None
- add(p1, p2) implements the affine group law, doubling included
- multiply(pt, n) is recursive double-and-add
- is_on_curve(pt, b) tests y^2 == x^3 + b

This module exposes points as plain integer pairs (Point) instead. The pair
(0, 0) is a reserved sentinel: it is never "on the curve", and it is what
ec_add / ec_mul return for the point at infinity (same encoding as the
precompiles).
"""

from typing import NamedTuple

from py_ecc.bn128 import FQ, add, b, curve_order, field_modulus, multiply, neg
from py_ecc.bn128 import is_on_curve as _bn128_is_on_curve

from .config import config
from .exceptions import InvalidPoint


# Fixed curve parameters
FIELD_MODULUS = field_modulus  # p, base field
CURVE_ORDER = curve_order      # r, order of G1
CURVE_B = int(b.n)             # 3


class Point(NamedTuple):
    """An affine point (x, y) with coordinates in [0, p)."""
    x: int
    y: int


IDENTITY = Point(0, 0)

# Canonical generator of G1
G = Point(1, 2)


def _to_bn128(P: Point):
    if P == IDENTITY:
        return None
    return (FQ(P[0]), FQ(P[1]))


def _from_bn128(pt) -> Point:
    if pt is None:
        return IDENTITY
    return Point(int(pt[0].n), int(pt[1].n))


def _require_point(P: Point, name: str):
    if not config.validate_points:
        return
    if P == IDENTITY or is_on_curve(P):
        return
    raise InvalidPoint(f"{name}={tuple(P)} is not a point on the curve")


def is_on_curve(P: Point) -> bool:
    """
    Check membership of P in the curve group.

    Formula:
    --------
    P ≠ (0, 0)  ∧  0 ≤ x, y < p  ∧  y^2 ≡ x^3 + b (mod p)

    Parameters
    ----------
    P : Point
        Candidate point (any pair of ints is accepted)

    Returns
    -------
    bool
        True if P is a valid non-sentinel curve point

    Notes
    -----
    The sentinel (0, 0) is always rejected, before the curve equation is
    evaluated.
    """
    x, y = P
    if x == 0 and y == 0:
        return False
    if not (0 <= x < FIELD_MODULUS and 0 <= y < FIELD_MODULUS):
        return False
    return bool(_bn128_is_on_curve((FQ(x), FQ(y)), b))


def ec_add(P: Point, Q: Point) -> Point:
    """
    Add two curve points: P + Q.

    Parameters
    ----------
    P, Q : Point
        Curve points or IDENTITY

    Returns
    -------
    Point
        The sum; IDENTITY if Q = -P

    Raises
    ------
    InvalidPoint
        If an operand is neither IDENTITY nor on the curve (unless point
        validation is disabled in the configuration)
    """
    _require_point(P, 'P')
    _require_point(Q, 'Q')
    return _from_bn128(add(_to_bn128(P), _to_bn128(Q)))


def ec_mul(P: Point, k: int) -> Point:
    """
    Scalar multiplication [k]P by double-and-add.

    Parameters
    ----------
    P : Point
        Curve point or IDENTITY
    k : int
        Non-negative scalar; reduced mod r

    Returns
    -------
    Point
        [k mod r]P; IDENTITY when k ≡ 0 (mod r) or P is IDENTITY

    Raises
    ------
    InvalidPoint
        If P is neither IDENTITY nor on the curve
    ValueError
        If k is negative

    Examples
    --------
    >>> ec_mul(G, 2) == ec_add(G, G)
    True
    """
    if k < 0:
        raise ValueError(f"Scalar must be non-negative, got {k}")
    _require_point(P, 'P')

    k = k % CURVE_ORDER
    if k == 0 or P == IDENTITY:
        return IDENTITY

    return _from_bn128(multiply(_to_bn128(P), k))


def ec_neg(P: Point) -> Point:
    """Return -P = (x, p - y); IDENTITY is its own negation."""
    _require_point(P, 'P')
    if P == IDENTITY:
        return IDENTITY
    return _from_bn128(neg(_to_bn128(P)))
