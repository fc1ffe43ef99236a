"""
Two-component numbers a + bU over arbitrary-precision reals.

The unit squares to UNIT_SQUARE:
    Complex  U*U = -1  (elliptic, division algebra)
    Perplex  U*U = +1  (hyperbolic, zero divisors on a = ±b)
    Infra    U*U =  0  (parabolic, zero divisors on a = 0)
"""

from .base import HypercomplexNumber
from .scalar import HALF, ONE, ZERO, is_scalar_like, to_scalar


class Rank1Number(HypercomplexNumber):
    """Commutative number a + bU with U*U = UNIT_SQUARE"""
    __slots__ = ()

    UNIT_SQUARE = None
    SYMBOLS = ("", "U")
    DIMENSION = 2

    def __init__(self, a=0, b=0):
        self._l = to_scalar(a)
        self._r = to_scalar(b)

    @classmethod
    def zero(cls):
        return cls(ZERO, ZERO)

    @classmethod
    def one(cls):
        return cls(ONE, ZERO)

    @classmethod
    def unit(cls):
        """The unit U itself."""
        return cls(ZERO, ONE)

    def cartesian(self):
        return (self._l, self._r)

    def conj(self):
        return self._make(self._l, -self._r)

    def _product(self, other):
        # (a + bU)(c + dU) = ac + eps*bd + (ad + bc)U
        a, b = self._l, self._r
        c, d = other._l, other._r
        l = a * c
        if self.UNIT_SQUARE < 0:
            l = l - b * d
        elif self.UNIT_SQUARE > 0:
            l = l + b * d
        return self._make(l, d * a + b * c)

    def quad(self):
        """Quadrance a*a - eps*b*b."""
        a, b = self._l, self._r
        quad = a * a
        if self.UNIT_SQUARE < 0:
            quad = quad + b * b
        elif self.UNIT_SQUARE > 0:
            quad = quad - b * b
        return quad

    def quo(self, other):
        """Quotient self * inv(other); left and right coincide."""
        self._require_same(other, "quo")
        other._check_invertible("quo")
        return self * other.inv()

    def __truediv__(self, other):
        if type(other) is type(self):
            return self.quo(other)
        if is_scalar_like(other):
            return self._unscale(to_scalar(other))
        return NotImplemented


class Complex(Rank1Number):
    """Elliptic numbers a + bi, i*i = -1"""
    __slots__ = ()

    UNIT_SQUARE = -1
    SYMBOLS = ("", "i")
    DIVISION_ALGEBRA = True

    def is_zero_divisor(self):
        return False


class Perplex(Rank1Number):
    """Hyperbolic (split-complex) numbers a + bs, s*s = +1"""
    __slots__ = ()

    UNIT_SQUARE = 1
    SYMBOLS = ("", "s")

    def is_zero_divisor(self):
        """True on the light cone a = b or a = -b."""
        return self._l == self._r or self._l == -self._r

    @classmethod
    def idempotent(cls, sign):
        """
        One of the two nontrivial idempotents (1 ± s) / 2.

        Args:
            sign: negative for (0.5, -0.5), anything else for (0.5, 0.5)
        """
        if sign < 0:
            return cls(HALF, -HALF)
        return cls(HALF, HALF)


class Infra(Rank1Number):
    """Parabolic (dual) numbers a + bα, α*α = 0"""
    __slots__ = ()

    UNIT_SQUARE = 0
    SYMBOLS = ("", "α")

    def is_zero_divisor(self):
        """Equivalent to being nilpotent: a = 0."""
        return self._l == 0
