"""
Arbitrary-precision real scalars backing every algebra.
"""

import numbers
from contextlib import contextmanager
from decimal import Decimal

from mpmath import mp, mpf

ZERO = mpf(0)
ONE = mpf(1)
HALF = mpf(0.5)


def to_scalar(value) -> mpf:
    """
    Convert a real number to an mpmath scalar.

    Args:
        value: int, float, Fraction, Decimal, decimal string, numbers.Real or mpf

    Returns:
        mpf: The scalar rounded once, at the current working precision.
    """
    if isinstance(value, mpf):
        return value
    if isinstance(value, bool):
        raise TypeError("booleans are not scalars")
    if isinstance(value, (str, Decimal)):
        return mpf(str(value))
    if isinstance(value, numbers.Integral):
        return mpf(int(value))
    if isinstance(value, numbers.Rational):
        return mpf(int(value.numerator)) / int(value.denominator)
    if isinstance(value, numbers.Real):
        return mpf(float(value))
    raise TypeError(f"cannot use {type(value).__name__} as a real scalar")


def is_scalar_like(value) -> bool:
    """True if value can act as a real scaling factor."""
    return isinstance(value, (mpf, Decimal)) or (
        isinstance(value, numbers.Real) and not isinstance(value, bool)
    )


def sign(value) -> int:
    """Sign of a scalar as -1, 0 or +1."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def get_precision() -> int:
    """Current working precision in bits."""
    return mp.prec


@contextmanager
def working_precision(bits: int):
    """Temporarily run with `bits` bits of mantissa precision."""
    if bits <= 0:
        raise ValueError(f"precision must be positive, got {bits}")
    with mp.workprec(bits):
        yield
