from fractions import Fraction

import pytest

from symkind.algreal import AlgRational
from symkind.concrete import CW, CWAlgReal, mk_const_cw
from symkind.extended import (
    AddExtCW,
    BoundedCW,
    Epsilon,
    Infinite,
    Interval,
    MulExtCW,
    generalize,
    is_regular_cw,
    show_ext_cw,
    show_generalized_cw,
)
from symkind.haskind import kind_of
from symkind.kind import KBounded, KReal, KUnbounded

INT = KUnbounded()
REAL = KReal()


def integer(n):
    return BoundedCW(mk_const_cw(INT, n))


def real(q):
    return BoundedCW(CW(REAL, CWAlgReal(AlgRational.of(Fraction(q)))))


def test_infinity_and_epsilon():
    assert show_ext_cw(True, Infinite(INT)) == "oo :: Integer"
    assert show_ext_cw(False, Infinite(INT)) == "oo"
    assert show_ext_cw(True, Epsilon(REAL)) == "epsilon :: Real"


def test_negative_infinity_and_epsilon():
    assert show_ext_cw(False, MulExtCW(integer(-1), Infinite(INT))) == "-oo"
    assert show_ext_cw(True, MulExtCW(integer(-1), Infinite(INT))) == "-oo :: Integer"
    assert show_ext_cw(True, MulExtCW(real(-1), Epsilon(REAL))) == "-epsilon :: Real"


def test_other_products_are_not_folded():
    assert show_ext_cw(False, MulExtCW(integer(2), Infinite(INT))) == "2 * oo"
    assert show_ext_cw(False, MulExtCW(Infinite(INT), integer(-1))) == "oo * -1"
    assert show_ext_cw(False, MulExtCW(integer(-1), integer(3))) == "-1 * 3"


def test_sums():
    assert show_ext_cw(True, AddExtCW(integer(3), Epsilon(INT))) == "3 + epsilon :: Integer"
    assert show_ext_cw(False, AddExtCW(integer(3), integer(-2))) == "3 - 2"
    minus_eps = MulExtCW(real(-1), Epsilon(REAL))
    assert show_ext_cw(False, AddExtCW(real(Fraction(1, 2)), minus_eps)) == "0.5 - epsilon"


def test_nested_terms_are_parenthesized():
    inner = AddExtCW(integer(1), Epsilon(INT))
    assert show_ext_cw(False, MulExtCW(integer(2), inner)) == "2 * (1 + epsilon)"
    assert show_ext_cw(True, AddExtCW(inner, inner)) == (
        "(1 + epsilon) + (1 + epsilon) :: Integer"
    )


def test_intervals():
    interval = Interval(integer(0), Infinite(INT))
    assert show_ext_cw(True, interval) == "[0 .. oo] :: [Integer]"
    assert show_ext_cw(False, interval) == "[0 .. oo]"
    low = MulExtCW(integer(-1), Infinite(INT))
    assert show_ext_cw(False, Interval(low, integer(5))) == "[-oo .. 5]"


def test_operators_build_expressions():
    three = mk_const_cw(INT, 3)
    assert three + Epsilon(INT) == AddExtCW(BoundedCW(three), Epsilon(INT))
    assert Epsilon(INT) * three == MulExtCW(Epsilon(INT), BoundedCW(three))
    with pytest.raises(TypeError):
        Epsilon(INT) + 1


def test_kinds():
    word = KBounded(True, 8)
    assert kind_of(Infinite(word)) == word
    assert kind_of(AddExtCW(integer(1), Epsilon(INT))) == INT
    assert kind_of(Interval(real(0), real(1))) == REAL


def test_generalize():
    three = mk_const_cw(INT, 3)
    assert generalize(BoundedCW(three)) is three
    assert is_regular_cw(generalize(BoundedCW(three)))
    eps = Epsilon(INT)
    assert generalize(eps) is eps
    assert not is_regular_cw(eps)
    assert show_generalized_cw(three) == "3 :: Integer"
    assert show_generalized_cw(eps, False) == "epsilon"


def test_only_exact_minus_one_is_folded():
    approx_minus_one = BoundedCW(
        CW(REAL, CWAlgReal(AlgRational(False, Fraction(-1))))
    )
    product = MulExtCW(approx_minus_one, Infinite(REAL))
    assert show_ext_cw(False, product) == "-1.0... * oo"
