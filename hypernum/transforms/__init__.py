# Transforms built from subtraction, multiplication and inversion

from .cross_ratio import cross_ratio, cross_ratio_left, cross_ratio_right
from .mobius import mobius, mobius_left, mobius_right
from .diagnostics import commutator, is_nilpotent

__all__ = [
    'cross_ratio',
    'cross_ratio_left',
    'cross_ratio_right',
    'mobius',
    'mobius_left',
    'mobius_right',
    'commutator',
    'is_nilpotent',
]
