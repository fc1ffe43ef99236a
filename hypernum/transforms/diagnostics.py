"""
Diagnostics for noncommutativity and nilpotency.
"""


def commutator(x, y):
    """x*y - y*x; zero exactly when x and y commute."""
    return x * y - y * x


def is_nilpotent(x, n):
    """
    Check whether some power x**k, 1 <= k <= n, vanishes.

    This is a bounded search: False only means no vanishing power was found
    within n steps.

    Args:
        x: Any algebra value
        n: Maximum number of multiplications

    Returns:
        bool: True if x is zero or a power up to x**n is zero
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if x.is_zero():
        return True
    p = type(x).one()
    for _ in range(n):
        p = p * x
        if p.is_zero():
            return True
    return False
