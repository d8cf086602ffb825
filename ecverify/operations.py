"""
Arithmetic Operations
=====================

The two-operation capability the matrix engine is written against:

    multiply(scalar, element) -> element
    add(element, element)     -> element

The first operand of ``multiply`` is always a plain integer matrix entry and
the second is always an element of the domain being accumulated. Any object
with these two side-effect free methods can be passed to
``ecverify.matrix.matrix_mul_basic``.

Implementations:
- IntegerOps: unsigned checked integer arithmetic of a fixed bit width
- ECOps: curve group arithmetic (scalar multiplication and point addition)
"""

import operator
from typing import Any, Protocol, runtime_checkable

from .config import config
from .exceptions import IntegerOverflow
from .groups import Point, ec_add, ec_mul


@runtime_checkable
class ArithmeticOps(Protocol):
    """Pluggable multiply / add over some domain D."""

    def multiply(self, x: int, y: Any) -> Any:
        ...

    def add(self, x: Any, y: Any) -> Any:
        ...


class IntegerOps:
    """
    Checked unsigned integer arithmetic.

    Every operand and result must lie in [0, 2^bits); anything outside
    raises ``IntegerOverflow`` instead of wrapping.

    Parameters
    ----------
    bits : int, optional
        The integer width. Defaults to ``config.integer_bits`` (256).

    Examples
    --------
    >>> ops = IntegerOps()
    >>> ops.add(ops.multiply(2, 5), 3)
    13
    """

    def __init__(self, bits: int = None):
        if bits is None:
            bits = config.integer_bits
        if bits < 1:
            raise ValueError(f"Integer width must be positive, got {bits}")
        self.bits = bits
        self.limit = 1 << bits

    def __repr__(self):
        return f"IntegerOps(bits={self.bits})"

    def __eq__(self, other):
        return isinstance(other, IntegerOps) and other.bits == self.bits

    def __hash__(self):
        return hash(('IntegerOps', self.bits))

    def _check(self, value: int, what: str) -> int:
        # numpy scalars become Python ints so nothing wraps at 64 bits
        value = operator.index(value)
        if not 0 <= value < self.limit:
            raise IntegerOverflow(f"{what} {value} outside uint{self.bits} range")
        return value

    def multiply(self, x: int, y: int) -> int:
        x = self._check(x, 'Operand')
        y = self._check(y, 'Operand')
        return self._check(x * y, 'Product')

    def add(self, x: int, y: int) -> int:
        x = self._check(x, 'Operand')
        y = self._check(y, 'Operand')
        return self._check(x + y, 'Sum')


class ECOps:
    """
    Curve group arithmetic.

    ``multiply(scalar, point)`` is [scalar]point and ``add(p, q)`` is p + q.
    Note the operand order of ``multiply``: scalar first, point second, the
    reverse of ``ec_mul``.
    """

    def __repr__(self):
        return "ECOps()"

    def __eq__(self, other):
        return isinstance(other, ECOps)

    def __hash__(self):
        return hash('ECOps')

    def multiply(self, scalar: int, point: Point) -> Point:
        return ec_mul(point, scalar)

    def add(self, p: Point, q: Point) -> Point:
        return ec_add(p, q)
