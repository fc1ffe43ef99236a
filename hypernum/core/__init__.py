# Core algebras: scalars, rank 1 numbers and their doublings

from .scalar import ZERO, ONE, to_scalar, sign, get_precision, working_precision
from .errors import DomainError, DivideByZeroError, ZeroDivisorError
from .base import HypercomplexNumber
from .rank1 import Rank1Number, Complex, Perplex, Infra
from .rank2 import Rank2Number, ParabolicDoubling, Hamilton, Cockle, Supra, InfraComplex

# Name lookup used by the command line
ALGEBRAS = {
    'complex': Complex,
    'perplex': Perplex,
    'infra': Infra,
    'hamilton': Hamilton,
    'cockle': Cockle,
    'supra': Supra,
    'infracomplex': InfraComplex,
}

__all__ = [
    'ZERO',
    'ONE',
    'to_scalar',
    'sign',
    'get_precision',
    'working_precision',
    'DomainError',
    'DivideByZeroError',
    'ZeroDivisorError',
    'HypercomplexNumber',
    'Rank1Number',
    'Complex',
    'Perplex',
    'Infra',
    'Rank2Number',
    'ParabolicDoubling',
    'Hamilton',
    'Cockle',
    'Supra',
    'InfraComplex',
    'ALGEBRAS',
]
