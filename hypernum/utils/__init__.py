# hypernum utility functions

from .formatting import format_scalar, format_components
from .sampling import make_rng, shape, random_value, random_values
from .config import Settings, load_dotenv, get_settings

__all__ = [
    'format_scalar',
    'format_components',
    'make_rng',
    'shape',
    'random_value',
    'random_values',
    'Settings',
    'load_dotenv',
    'get_settings'
]
