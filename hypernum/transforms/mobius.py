"""
Möbius (fractional linear) transforms.
"""


def mobius_left(y, a, b, c, d):
    """Left transform inv(y*c + d) * (y*a + b)."""
    numerator = y * a + b
    denominator = y * c + d
    return denominator.inv() * numerator


def mobius_right(y, a, b, c, d):
    """Right transform (a*y + b) * inv(c*y + d)."""
    numerator = a * y + b
    denominator = c * y + d
    return numerator * denominator.inv()


def mobius(y, a, b, c, d):
    """Transform of commutative numbers; same as the right form."""
    return mobius_right(y, a, b, c, d)
