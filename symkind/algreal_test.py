from fractions import Fraction

import pytest

from symkind.algreal import AlgPolyRoot, AlgRational, show_rational
from symkind.util import UnsupportedOperation

SQRT2 = AlgPolyRoot(1, ((-2, 0), (1, 2)), "1.41421356237309504880")


def test_rational_arithmetic():
    half = AlgRational.of(Fraction(1, 2))
    assert half + 1 == AlgRational.of(Fraction(3, 2))
    assert 1 - half == half
    assert half * half == AlgRational.of(Fraction(1, 4))
    assert half / 2 == AlgRational.of(Fraction(1, 4))
    assert -half == AlgRational.of(Fraction(-1, 2))
    assert abs(-half) == half


def test_inexactness_is_contagious():
    approx = AlgRational(False, Fraction(1, 3))
    assert not (approx + AlgRational.of(1)).exact
    assert (AlgRational.of(1) + 1).exact


def test_equality_is_structural():
    assert AlgRational(True, Fraction(1)) != AlgRational(False, Fraction(1))
    assert SQRT2 == AlgPolyRoot(1, ((-2, 0), (1, 2)))
    assert SQRT2 != AlgPolyRoot(0, ((-2, 0), (1, 2)))
    assert hash(SQRT2) == hash(AlgPolyRoot(1, ((-2, 0), (1, 2))))


def test_ordering_puts_rationals_before_roots():
    assert AlgRational.of(10**9) < SQRT2
    assert AlgRational.of(1) < AlgRational.of(2)
    assert sorted([SQRT2, AlgRational.of(3), AlgRational.of(-3)]) == [
        AlgRational.of(-3),
        AlgRational.of(3),
        SQRT2,
    ]


def test_roots_do_not_support_arithmetic():
    with pytest.raises(UnsupportedOperation):
        AlgRational.of(1) + SQRT2


def test_show():
    assert str(AlgRational.of(3)) == "3.0"
    assert str(AlgRational.of(Fraction(-1, 8))) == "-0.125"
    assert str(AlgRational.of(Fraction(2, 7))) == "2/7"
    assert show_rational(Fraction(1, 20)) == "0.05"
    assert str(SQRT2) == "root(1, x^2 - 2 = 0) = 1.41421356237309504880..."
    assert str(AlgPolyRoot(0, ((1, 0), (-3, 1)))) == "root(0, -3x + 1 = 0)"
