"""
Domain errors raised when an element has no multiplicative inverse.
"""

DIVIDE_BY_ZERO = "divide_by_zero"
ZERO_DIVISOR = "zero_divisor"


class DomainError(ArithmeticError):
    """An operation was applied outside the domain of an algebra"""
    kind = None

    def __init__(self, algebra, operation, value=None):
        self.algebra = algebra
        self.operation = operation
        self.value = value
        super().__init__(self._message())

    def _message(self):
        text = f"{self.algebra}.{self.operation}: {self.kind.replace('_', ' ')}"
        if self.value is not None:
            text += f" {self.value}"
        return text


class DivideByZeroError(DomainError, ZeroDivisionError):
    """Inversion of zero in a division algebra (Complex, Hamilton)"""
    kind = DIVIDE_BY_ZERO


class ZeroDivisorError(DomainError):
    """Inversion of a zero divisor in an algebra that admits them"""
    kind = ZERO_DIVISOR
