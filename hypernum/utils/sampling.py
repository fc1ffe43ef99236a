"""
Random algebra values for property-based tests.

Each scalar component is drawn independently and uniformly from
[low, high). The algebra only tells us how many scalars it needs.
"""

import numpy as np


def make_rng(seed: int | None = None) -> np.random.Generator:
    """numpy Generator; a fixed seed gives reproducible draws."""
    return np.random.default_rng(seed)


def shape(cls) -> int:
    """Number of independent scalars in a value of cls."""
    return cls.DIMENSION


def random_value(cls, rng=None, low=0.0, high=1.0):
    """
    Draw one random value of cls.

    Args:
        cls: Algebra class, e.g. Hamilton
        rng: numpy Generator (a fresh unseeded one if None)
        low, high: Bounds of the uniform interval

    Returns:
        A cls value with independent uniform components.
    """
    if high <= low:
        raise ValueError(f"empty interval [{low}, {high})")
    rng = rng if rng is not None else make_rng()
    components = rng.uniform(low, high, size=shape(cls))
    return cls(*[float(c) for c in components])


def random_values(cls, count, rng=None, low=0.0, high=1.0):
    """List of `count` independent random values of cls."""
    rng = rng if rng is not None else make_rng()
    return [random_value(cls, rng, low, high) for _ in range(count)]
