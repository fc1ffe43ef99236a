"""
Four-component numbers built by doubling a rank 1 base.

A value is a pair (A, B) of BASE numbers. With x = (a, b) and y = (c, d):

    x*y = (a*c + TWIST*conj(d)*b, d*a + b*conj(c))
    quad(x) = quad(A) - TWIST*quad(B)

    Hamilton      Complex base, TWIST = -1   i, j, k   division algebra
    Cockle        Complex base, TWIST = +1   i, t, u   split quaternions
    Supra         Infra base,   TWIST =  0   α, β, γ
    InfraComplex  Complex base, TWIST =  0   i, β, γ

Multiplication is associative but noncommutative, so quotients come in a
left and a right flavour.
"""

from .base import HypercomplexNumber
from .rank1 import Complex, Infra
from .scalar import ONE, ZERO


class Rank2Number(HypercomplexNumber):
    """Doubled number (A, B) over a commutative rank 1 BASE"""
    __slots__ = ()

    BASE = None
    TWIST = None
    SYMBOLS = ("", "U1", "U2", "U3")
    DIMENSION = 4

    def __init__(self, a=0, b=0, c=0, d=0):
        self._l = self.BASE(a, b)
        self._r = self.BASE(c, d)

    @classmethod
    def from_pair(cls, first, second):
        """Build (first, second) from two BASE values."""
        for half in (first, second):
            if type(half) is not cls.BASE:
                raise TypeError(
                    f"{cls.__name__} halves must be {cls.BASE.__name__}, "
                    f"got {type(half).__name__}"
                )
        return cls._make(first, second)

    @classmethod
    def zero(cls):
        return cls(ZERO, ZERO, ZERO, ZERO)

    @classmethod
    def one(cls):
        return cls(ONE, ZERO, ZERO, ZERO)

    @classmethod
    def units(cls):
        """The three structural units, in display order."""
        return (
            cls(ZERO, ONE, ZERO, ZERO),
            cls(ZERO, ZERO, ONE, ZERO),
            cls(ZERO, ZERO, ZERO, ONE),
        )

    def pair(self):
        return self._l, self._r

    def cartesian(self):
        return self._l.cartesian() + self._r.cartesian()

    def conj(self):
        """(conj(A), -B); reverses the order of products."""
        return self._make(self._l.conj(), -self._r)

    def _product(self, other):
        a, b = self._l, self._r
        c, d = other._l, other._r
        l = a * c
        if self.TWIST:
            twist = d.conj() * b
            l = l - twist if self.TWIST < 0 else l + twist
        return self._make(l, d * a + b * c.conj())

    def quad(self):
        quad = self._l.quad()
        if self.TWIST < 0:
            quad = quad + self._r.quad()
        elif self.TWIST > 0:
            quad = quad - self._r.quad()
        return quad

    def quo_left(self, other):
        """Left quotient inv(other) * self."""
        self._require_same(other, "quo_left")
        other._check_invertible("quo_left")
        return other.inv() * self

    def quo_right(self, other):
        """Right quotient self * inv(other)."""
        self._require_same(other, "quo_right")
        other._check_invertible("quo_right")
        return self * other.inv()


class Hamilton(Rank2Number):
    """Hamilton quaternions a + bi + cj + dk"""
    __slots__ = ()

    BASE = Complex
    TWIST = -1
    SYMBOLS = ("", "i", "j", "k")
    DIVISION_ALGEBRA = True

    def is_zero_divisor(self):
        return False


class Cockle(Rank2Number):
    """
    Cockle (split) quaternions a + bi + ct + du.

    i*i = -1, t*t = u*u = +1, i*t = -t*i = u. The quadrance
    a² + b² - c² - d² is indefinite.
    """
    __slots__ = ()

    BASE = Complex
    TWIST = 1
    SYMBOLS = ("", "i", "t", "u")

    def is_zero_divisor(self):
        return self._l.quad() == self._r.quad()


class ParabolicDoubling(Rank2Number):
    """Doubling with a nilpotent second unit; quadrance depends on A only"""
    __slots__ = ()

    TWIST = 0

    def is_zero_divisor(self):
        # A has no inverse in the base
        return self._l.quad() == 0


class Supra(ParabolicDoubling):
    """
    Supra numbers a + bα + cβ + dγ.

    α*α = β*β = γ*γ = 0, α*β = -β*α = γ.
    """
    __slots__ = ()

    BASE = Infra
    SYMBOLS = ("", "α", "β", "γ")


class InfraComplex(ParabolicDoubling):
    """Infra-complex numbers a + bi + cβ + dγ, i*i = -1, β*β = γ*γ = 0"""
    __slots__ = ()

    BASE = Complex
    SYMBOLS = ("", "i", "β", "γ")
