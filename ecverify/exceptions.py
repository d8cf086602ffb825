"""
Exceptions
==========

Errors raised by the verification library.

All errors derive from ``ValueError``: every failure here is caused by the
arguments of a pure function and retrying with the same input gives the
same result.
"""


class ECVerifyError(ValueError):
    """Base class for all library errors."""


class InvalidDimensions(ECVerifyError):
    """Matrix or vector length does not match the declared dimension n."""


class InvalidInverse(ECVerifyError):
    """Attempted to invert a value congruent to 0 modulo the prime."""


class InvalidPoint(ECVerifyError):
    """A curve operand is neither the identity nor a point on the curve."""


class IntegerOverflow(ECVerifyError):
    """Checked integer arithmetic left the configured unsigned width."""
