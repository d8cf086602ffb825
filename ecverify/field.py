"""
Modular Arithmetic
==================

Inversion modulo a prime via Fermat's little theorem.

For prime p and a not divisible by p:

    a^{p-1} ≡ 1 (mod p)   ⟹   a^{-1} ≡ a^{p-2} (mod p)

The same routine serves the base field p of the curve and the scalar field
r used by rational commitments.
"""

from .exceptions import InvalidInverse


def fermat_inv(a: int, p: int) -> int:
    """
    Compute the multiplicative inverse of a modulo the prime p.

    Formula:
    --------
    a^{-1} = a^{p-2} mod p

    Parameters
    ----------
    a : int
        The value to invert; reduced mod p first
    p : int
        A prime modulus (primality is not checked)

    Returns
    -------
    int
        The unique b in [1, p) with a * b ≡ 1 (mod p)

    Raises
    ------
    InvalidInverse
        If a ≡ 0 (mod p)
    ValueError
        If p < 2

    Examples
    --------
    >>> fermat_inv(2, 17)
    9
    """
    if p < 2:
        raise ValueError(f"Modulus must be at least 2, got {p}")

    a = a % p
    if a == 0:
        raise InvalidInverse("No inverse exists for 0")

    return pow(a, p - 2, p)


def mod_div(n: int, d: int, p: int) -> int:
    """
    Reduce the rational n/d into Z_p: n * d^{-1} mod p.

    Raises ``InvalidInverse`` when d ≡ 0 (mod p).
    """
    return (n % p) * fermat_inv(d, p) % p
