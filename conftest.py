import pytest
from mpmath import mp

from hypernum.utils.config import get_settings
from hypernum.utils.sampling import make_rng


@pytest.fixture
def rng():
    """Generator seeded from HYPERNUM_SEED so every property run draws the same values."""
    return make_rng(get_settings().seed)


@pytest.fixture(autouse=True)
def default_precision():
    # Tests assume 53-bit scalars unless they opt into more
    with mp.workprec(53):
        yield
