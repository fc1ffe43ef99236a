"""
Shared plumbing for values stored as an ordered (l, r) pair.

Rank 1 numbers hold two scalars, rank 2 numbers hold two rank 1 numbers.
Addition, negation, scaling, equality and display work the same way for
both, so they live here; multiplication, conjugation and quadrance are
supplied by each rank.
"""

from .errors import DivideByZeroError, ZeroDivisorError
from .scalar import is_scalar_like, to_scalar
from ..utils.formatting import format_components, format_scalar


class HypercomplexNumber:
    """Immutable pair (l, r) with componentwise linear structure"""
    __slots__ = ("_l", "_r")

    SYMBOLS = ()
    DIMENSION = 0
    # Only the zero value lacks an inverse
    DIVISION_ALGEBRA = False

    @classmethod
    def _make(cls, l, r):
        z = object.__new__(cls)
        z._l = l
        z._r = r
        return z

    # -- accessors -------------------------------------------------------

    def cartesian(self):
        """All scalar components in order."""
        raise NotImplementedError

    @property
    def real(self):
        return self.cartesian()[0]

    def copy(self):
        return self._make(self._l, self._r)

    def is_zero(self):
        return all(c == 0 for c in self.cartesian())

    # -- equality and display --------------------------------------------

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._l == other._l and self._r == other._r

    def __hash__(self):
        return hash((type(self).__name__, self.cartesian()))

    def __str__(self):
        return format_components(self.cartesian(), self.SYMBOLS)

    def __repr__(self):
        args = ", ".join(repr(format_scalar(c)) for c in self.cartesian())
        return f"{type(self).__name__}({args})"

    # -- linear structure ------------------------------------------------

    def _require_same(self, other, operation):
        if type(other) is not type(self):
            raise TypeError(
                f"{type(self).__name__}.{operation} needs a {type(self).__name__}, "
                f"got {type(other).__name__}"
            )

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._make(self._l + other._l, self._r + other._r)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._make(self._l - other._l, self._r - other._r)

    def __neg__(self):
        return self._make(-self._l, -self._r)

    def __pos__(self):
        return self

    def scal(self, k):
        """Scale every component by the real number k."""
        k = to_scalar(k)
        return self._make(self._l * k, self._r * k)

    def _unscale(self, k):
        return self._make(self._l / k, self._r / k)

    def __mul__(self, other):
        if type(other) is type(self):
            return self._product(other)
        if is_scalar_like(other):
            return self.scal(other)
        return NotImplemented

    def __rmul__(self, other):
        if is_scalar_like(other):
            return self.scal(other)
        return NotImplemented

    # -- algebra ---------------------------------------------------------

    def _product(self, other):
        raise NotImplementedError

    def conj(self):
        raise NotImplementedError

    def quad(self):
        raise NotImplementedError

    def is_zero_divisor(self):
        raise NotImplementedError

    def _check_invertible(self, operation):
        name = type(self).__name__
        if self.DIVISION_ALGEBRA:
            if self.is_zero():
                raise DivideByZeroError(name, operation, self)
        elif self.is_zero_divisor():
            raise ZeroDivisorError(name, operation, self)

    def inv(self):
        """
        Multiplicative inverse conj(self) / quad(self).

        Raises:
            DivideByZeroError: self is zero in a division algebra
            ZeroDivisorError: self is a zero divisor
        """
        self._check_invertible("inv")
        return self.conj()._unscale(self.quad())
