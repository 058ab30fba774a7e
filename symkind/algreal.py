"""Infinitely precise real numbers, as they come back from solver models."""
import operator
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Callable, Optional, Tuple, Union

from symkind.util import UnsupportedOperation


class AlgReal:
    """
    An algebraic real: either an exact rational or a root of a polynomial.

    Equality and ordering are structural; two roots are equal only when they
    are the same root of the same polynomial.
    """

    _rank: int = -1

    def _key(self) -> tuple:
        raise NotImplementedError

    def __lt__(self, other):
        if not isinstance(other, AlgReal):
            return NotImplemented
        return (self._rank, self._key()) < (other._rank, other._key())

    def __le__(self, other):
        if not isinstance(other, AlgReal):
            return NotImplemented
        return (self._rank, self._key()) <= (other._rank, other._key())

    def __gt__(self, other):
        if not isinstance(other, AlgReal):
            return NotImplemented
        return (self._rank, self._key()) > (other._rank, other._key())

    def __ge__(self, other):
        if not isinstance(other, AlgReal):
            return NotImplemented
        return (self._rank, self._key()) >= (other._rank, other._key())


def _decimal_places(denominator: int) -> Optional[int]:
    twos = fives = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    return max(twos, fives) if denominator == 1 else None


def show_rational(value: Fraction, exact: bool = True) -> str:
    """
    Render a rational, in decimal notation when it terminates.

    >>> show_rational(Fraction(-5, 4))
    '-1.25'
    >>> show_rational(Fraction(1, 3))
    '1/3'
    >>> show_rational(Fraction(7), exact=False)
    '7.0...'
    """
    places = _decimal_places(value.denominator)
    if places is None:
        text = f"{value.numerator}/{value.denominator}"
    else:
        sign = "-" if value < 0 else ""
        scale = 10**places
        whole, frac = divmod(abs(value.numerator) * scale // value.denominator, scale)
        frac_text = str(frac).rjust(places, "0") if places else "0"
        text = f"{sign}{whole}.{frac_text}"
    return text if exact else text + "..."


def _as_fraction(x: object) -> Fraction:
    if isinstance(x, AlgRational):
        return x.value
    if isinstance(x, (int, Fraction)):
        return Fraction(x)
    if isinstance(x, AlgPolyRoot):
        raise UnsupportedOperation(f"Cannot do arithmetic on algebraic root {x}")
    raise TypeError(f"Not a real number: {x!r}")


def _arith(op: Callable[[Fraction, Fraction], Fraction]):
    def apply(self, other):
        if not isinstance(other, (int, Fraction, AlgReal)):
            return NotImplemented
        exact = self.exact and getattr(other, "exact", True)
        return AlgRational(exact, op(_as_fraction(self), _as_fraction(other)))

    def apply_reflected(self, other):
        if not isinstance(other, (int, Fraction, AlgReal)):
            return NotImplemented
        exact = self.exact and getattr(other, "exact", True)
        return AlgRational(exact, op(_as_fraction(other), _as_fraction(self)))

    return apply, apply_reflected


@dataclass(frozen=True, order=False)
class AlgRational(AlgReal):
    """A rational; ``exact`` is False when it only approximates a solver value."""

    exact: bool
    value: Fraction
    _rank = 0

    def _key(self) -> tuple:
        return (self.exact, self.value)

    @classmethod
    def of(cls, value: Union[int, float, Fraction]) -> "AlgRational":
        return cls(True, Fraction(value))

    def __str__(self):
        return show_rational(self.value, self.exact)

    def __float__(self):
        return float(self.value)

    def __neg__(self):
        return AlgRational(self.exact, -self.value)

    def __abs__(self):
        return AlgRational(self.exact, abs(self.value))

    __add__, __radd__ = _arith(operator.add)
    __sub__, __rsub__ = _arith(operator.sub)
    __mul__, __rmul__ = _arith(operator.mul)
    __truediv__, __rtruediv__ = _arith(operator.truediv)


def _show_poly(coefficients: Tuple[Tuple[int, int], ...]) -> str:
    terms = []
    for (coefficient, power) in sorted(coefficients, key=lambda t: -t[1]):
        if coefficient == 0:
            continue
        magnitude = abs(coefficient)
        if power == 0:
            body = str(magnitude)
        else:
            var = "x" if power == 1 else f"x^{power}"
            body = var if magnitude == 1 else f"{magnitude}{var}"
        if not terms:
            terms.append(body if coefficient > 0 else "-" + body)
        else:
            terms.append(("+ " if coefficient > 0 else "- ") + body)
    return " ".join(terms) if terms else "0"


@dataclass(frozen=True, order=False)
class AlgPolyRoot(AlgReal):
    """
    The ``index``-th root of a polynomial with integer coefficients.

    ``coefficients`` holds (coefficient, power) pairs. The approximation is
    informational only and does not take part in comparisons.
    """

    index: int
    coefficients: Tuple[Tuple[int, int], ...]
    approximation: Optional[str] = field(default=None, compare=False)
    _rank = 1

    def _key(self) -> tuple:
        return (self.index, self.coefficients)

    def __str__(self):
        text = f"root({self.index}, {_show_poly(self.coefficients)} = 0)"
        if self.approximation is not None:
            text += f" = {self.approximation}..."
        return text
