"""
Tests for cross-ratios, Möbius transforms and the diagnostics.
"""

import pytest
from mpmath import almosteq

from hypernum import (
    Cockle,
    Complex,
    DivideByZeroError,
    Hamilton,
    Infra,
    InfraComplex,
    Perplex,
    Supra,
    ZeroDivisorError,
    commutator,
    cross_ratio,
    cross_ratio_left,
    cross_ratio_right,
    is_nilpotent,
    mobius,
    mobius_left,
    mobius_right,
)
from hypernum.utils.sampling import random_value, random_values

RANK2 = [Hamilton, Cockle, Supra, InfraComplex]


def close(x, y, eps=1e-9):
    return all(almosteq(a, b, rel_eps=eps, abs_eps=eps) for a, b in zip(x.cartesian(), y.cartesian()))


def as_builtin(z):
    return complex(float(z.cartesian()[0]), float(z.cartesian()[1]))


# -- cross-ratio ------------------------------------------------------------

def test_complex_cross_ratio_matches_builtin(rng):
    for _ in range(10):
        v, w, x, y = random_values(Complex, 4, rng)
        expected = ((as_builtin(v) - as_builtin(x)) * (as_builtin(w) - as_builtin(y))) / (
            (as_builtin(w) - as_builtin(x)) * (as_builtin(v) - as_builtin(y)))
        got = as_builtin(cross_ratio(v, w, x, y))
        assert abs(got - expected) <= 1e-9 * max(1.0, abs(expected))


def test_cross_ratio_is_left_form():
    v, w, x, y = Perplex(5, 1), Perplex(2, 3), Perplex(1, 0), Perplex(0, 7)
    assert cross_ratio(v, w, x, y) == cross_ratio_left(v, w, x, y)
    assert close(cross_ratio_left(v, w, x, y), cross_ratio_right(v, w, x, y))


def test_cross_ratio_of_real_points():
    # (v - x)(w - y) / ((w - x)(v - y)) with v, w, x, y = 0, 1, 2, -2
    points = [Complex(n, 0) for n in (0, 1, 2, -2)]
    assert cross_ratio(*points) == Complex(3, 0)


@pytest.mark.parametrize("cls", RANK2)
def test_rank2_cross_ratio_left_right_differ(cls, rng):
    v, w, x, y = random_values(cls, 4, rng)
    assert cross_ratio_left(v, w, x, y) != cross_ratio_right(v, w, x, y)


def test_cross_ratio_of_commuting_quaternions():
    # real multiples of one quaternion commute, so both forms agree
    q = Hamilton(1, 2, 3, 4)
    v, w, x, y = (q.scal(k) for k in (1, 3, 5, 8))
    assert close(cross_ratio_left(v, w, x, y), cross_ratio_right(v, w, x, y))


def test_cross_ratio_errors():
    with pytest.raises(DivideByZeroError):
        cross_ratio(Complex(1, 0), Complex(2, 0), Complex(2, 0), Complex(3, 0))
    with pytest.raises(ZeroDivisorError):
        cross_ratio_right(Cockle(5, 0, 0, 0), Cockle(1, 0, 1, 0), Cockle.zero(), Cockle(1, 1, 1, 1))


# -- Möbius -----------------------------------------------------------------

def test_complex_mobius_matches_builtin(rng):
    for _ in range(10):
        y, a, b, c, d = random_values(Complex, 5, rng)
        expected = (as_builtin(a) * as_builtin(y) + as_builtin(b)) / (as_builtin(c) * as_builtin(y) + as_builtin(d))
        got = as_builtin(mobius(y, a, b, c, d))
        assert abs(got - expected) <= 1e-9 * max(1.0, abs(expected))


@pytest.mark.parametrize("cls", RANK2 + [Complex, Perplex, Infra])
def test_mobius_identity(cls, rng):
    y = random_value(cls, rng)
    one, zero = cls.one(), cls.zero()
    assert mobius_left(y, one, zero, zero, one) == y
    assert mobius_right(y, one, zero, zero, one) == y


def test_mobius_translation_and_inversion():
    one, zero = Hamilton.one(), Hamilton.zero()
    y = Hamilton(1, 2, 3, 4)
    shift = Hamilton(0, 1, 0, 0)
    assert mobius_right(y, one, shift, zero, one) == y + shift
    # y -> inv(y)
    assert mobius_left(y, zero, one, one, zero) == y.inv()
    assert mobius_right(y, zero, one, one, zero) == y.inv()


@pytest.mark.parametrize("cls", [Hamilton, Cockle])
def test_rank2_mobius_left_right_differ(cls, rng):
    y, a, b, c, d = random_values(cls, 5, rng)
    assert mobius_left(y, a, b, c, d) != mobius_right(y, a, b, c, d)


def test_mobius_pole():
    one, zero = Perplex.one(), Perplex.zero()
    # c*y + d = y lies on the light cone
    with pytest.raises(ZeroDivisorError):
        mobius(Perplex(2, -2), one, zero, one, zero)


# -- diagnostics ------------------------------------------------------------

def test_commutator_of_commutative_numbers(rng):
    x, y = random_values(Complex, 2, rng)
    assert commutator(x, y) == Complex.zero()


def test_commutator_antisymmetric(rng):
    x, y = random_values(Hamilton, 2, rng)
    assert commutator(x, y) == -commutator(y, x)


@pytest.mark.parametrize("value,steps,expected", [
    (Cockle(0, 1, 1, 0), 2, True),
    (Cockle(0, 1, 1, 0), 1, False),
    (Cockle(0, 1, 0, 0), 8, False),
    (Hamilton(0, 1, 0, 0), 8, False),
    (Supra(0, 1, 0, 0), 2, True),
    (Supra(0, 1, 1, 0), 3, True),
    (Infra(0, 5), 2, True),
    (InfraComplex(0, 0, 1, 1), 2, True),
    (Perplex(1, 1), 8, False),
    (Cockle.zero(), 0, True),
    (Cockle(1, 0, 0, 0), 0, False),
])
def test_is_nilpotent(value, steps, expected):
    assert is_nilpotent(value, steps) is expected


def test_is_nilpotent_rejects_negative_steps():
    with pytest.raises(ValueError):
        is_nilpotent(Cockle.one(), -1)
