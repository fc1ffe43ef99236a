# hypernum Package
"""
Hypercomplex number algebras over arbitrary-precision reals.

Rank 1: Complex, Perplex, Infra. Rank 2 (doublings): Hamilton, Cockle,
Supra, InfraComplex. Cross-ratios, Möbius transforms and diagnostics are
generic over all of them.
"""

__version__ = '1.0.0'

# Core algebras
from .core import (
    ALGEBRAS,
    DomainError,
    DivideByZeroError,
    ZeroDivisorError,
    HypercomplexNumber,
    Rank1Number,
    Complex,
    Perplex,
    Infra,
    Rank2Number,
    Hamilton,
    Cockle,
    Supra,
    InfraComplex,
    to_scalar,
    working_precision
)

# Transforms
from .transforms import (
    cross_ratio,
    cross_ratio_left,
    cross_ratio_right,
    mobius,
    mobius_left,
    mobius_right,
    commutator,
    is_nilpotent
)

__all__ = [
    # Core
    'ALGEBRAS',
    'DomainError',
    'DivideByZeroError',
    'ZeroDivisorError',
    'HypercomplexNumber',
    'Rank1Number',
    'Complex',
    'Perplex',
    'Infra',
    'Rank2Number',
    'Hamilton',
    'Cockle',
    'Supra',
    'InfraComplex',
    'to_scalar',
    'working_precision',
    # Transforms
    'cross_ratio',
    'cross_ratio_left',
    'cross_ratio_right',
    'mobius',
    'mobius_left',
    'mobius_right',
    'commutator',
    'is_nilpotent'
]
