"""
Cross-ratios of four points in any of the algebras.

Products are evaluated strictly left to right; for the noncommutative
rank 2 algebras the left and right forms differ in general.
"""


def cross_ratio_left(v, w, x, y):
    """
    Left cross-ratio inv(w - x) * (v - x) * inv(v - y) * (w - y).

    Raises:
        DomainError: w - x or v - y has no inverse
    """
    z = (w - x).inv()
    z = z * (v - x)
    z = z * (v - y).inv()
    return z * (w - y)


def cross_ratio_right(v, w, x, y):
    """
    Right cross-ratio (v - x) * inv(w - x) * (w - y) * inv(v - y).

    Raises:
        DomainError: w - x or v - y has no inverse
    """
    z = v - x
    z = z * (w - x).inv()
    z = z * (w - y)
    return z * (v - y).inv()


def cross_ratio(v, w, x, y):
    """Cross-ratio of commutative numbers; same as the left form."""
    return cross_ratio_left(v, w, x, y)
