"""
Generalized concrete values, as produced by optimization queries.

An optimum may be unbounded or only approached in the limit, so besides
plain words we need infinity, epsilon, intervals and simple sums and products
of those. Expressions are kept as built; the only simplification is in how a
few of them are displayed (``-1 * oo`` shows as ``-oo``).
"""
from dataclasses import dataclass
from typing import Union

from symkind.algreal import AlgRational
from symkind.concrete import CW, CWAlgReal, CWInteger, show_cw
from symkind.haskind import kind_of
from symkind.kind import Kind, KReal, KUnbounded, show_base_kind


class ExtCW:
    """An expression over extended values."""

    def __kind_of__(self) -> Kind:
        raise NotImplementedError

    def __add__(self, other):
        other = _as_ext(other)
        if other is NotImplemented:
            return NotImplemented
        return AddExtCW(self, other)

    def __radd__(self, other):
        other = _as_ext(other)
        if other is NotImplemented:
            return NotImplemented
        return AddExtCW(other, self)

    def __mul__(self, other):
        other = _as_ext(other)
        if other is NotImplemented:
            return NotImplemented
        return MulExtCW(self, other)

    def __rmul__(self, other):
        other = _as_ext(other)
        if other is NotImplemented:
            return NotImplemented
        return MulExtCW(other, self)

    def __str__(self):
        return show_ext_cw(True, self)


def _as_ext(value: object):
    if isinstance(value, ExtCW):
        return value
    if isinstance(value, CW):
        return BoundedCW(value)
    return NotImplemented


@dataclass(frozen=True)
class Infinite(ExtCW):
    kind: Kind

    def __kind_of__(self) -> Kind:
        return self.kind


@dataclass(frozen=True)
class Epsilon(ExtCW):
    kind: Kind

    def __kind_of__(self) -> Kind:
        return self.kind


@dataclass(frozen=True)
class Interval(ExtCW):
    """A closed interval."""

    lower: ExtCW
    upper: ExtCW

    def __kind_of__(self) -> Kind:
        return kind_of(self.lower)


@dataclass(frozen=True)
class BoundedCW(ExtCW):
    """
    A value that is neither infinite nor infinitesimal.

    It never appears at the top of a result (see ``generalize``), only inside
    other expressions.
    """

    cw: CW

    def __kind_of__(self) -> Kind:
        return self.cw.kind


@dataclass(frozen=True)
class AddExtCW(ExtCW):
    left: ExtCW
    right: ExtCW

    def __kind_of__(self) -> Kind:
        return kind_of(self.left)


@dataclass(frozen=True)
class MulExtCW(ExtCW):
    left: ExtCW
    right: ExtCW

    def __kind_of__(self) -> Kind:
        return kind_of(self.left)


GeneralizedCW = Union[CW, ExtCW]


def generalize(ext: ExtCW) -> GeneralizedCW:
    """Give a result, unwrapping a bounded value at the top."""
    if isinstance(ext, BoundedCW):
        return ext.cw
    return ext


def is_regular_cw(value: GeneralizedCW) -> bool:
    return isinstance(value, CW)


def _is_minus_one(ext: ExtCW) -> bool:
    if not isinstance(ext, BoundedCW):
        return False
    kind, val = ext.cw.kind, ext.cw.val
    if isinstance(kind, KUnbounded):
        return val == CWInteger(-1)
    if isinstance(kind, KReal):
        real = val.value if isinstance(val, CWAlgReal) else None
        return isinstance(real, AlgRational) and real.exact and real.value == -1
    return False


def _add(left: str, right: str) -> str:
    if right.startswith("-"):
        return f"{left} - {right[1:]}"
    return f"{left} + {right}"


def _show(ext: ExtCW, parens: bool, show_kind: bool) -> str:
    def with_kind(text: str, is_interval: bool = False) -> str:
        if not show_kind:
            return text
        base = show_base_kind(kind_of(ext))
        return f"{text} :: [{base}]" if is_interval else f"{text} :: {base}"

    def par(text: str) -> str:
        return f"({text})" if parens else text

    if isinstance(ext, Infinite):
        return with_kind("oo")
    elif isinstance(ext, Epsilon):
        return with_kind("epsilon")
    elif isinstance(ext, Interval):
        bounds = f"{show_ext_cw(False, ext.lower)} .. {show_ext_cw(False, ext.upper)}"
        return with_kind(f"[{bounds}]", is_interval=True)
    elif isinstance(ext, BoundedCW):
        return show_cw(ext.cw, show_kind)
    elif isinstance(ext, AddExtCW):
        left = _show(ext.left, True, False)
        right = _show(ext.right, True, False)
        return par(with_kind(_add(left, right)))
    elif isinstance(ext, MulExtCW):
        # A few niceties to grok -oo and -epsilon:
        if _is_minus_one(ext.left):
            if isinstance(ext.right, Infinite):
                return with_kind("-oo")
            if isinstance(ext.right, Epsilon):
                return with_kind("-epsilon")
        left = _show(ext.left, True, False)
        right = _show(ext.right, True, False)
        return par(with_kind(f"{left} * {right}"))
    raise TypeError(f"Not an extended value: {ext!r}")


def show_ext_cw(show_kind: bool, ext: ExtCW) -> str:
    """
    Render an extended value, with its kind if ``show_kind`` is set.

    >>> from symkind.concrete import mk_const_cw
    >>> minus_one = BoundedCW(mk_const_cw(KUnbounded(), -1))
    >>> show_ext_cw(False, MulExtCW(minus_one, Infinite(KUnbounded())))
    '-oo'
    >>> three = BoundedCW(mk_const_cw(KUnbounded(), 3))
    >>> show_ext_cw(True, three + Epsilon(KUnbounded()))
    '3 + epsilon :: Integer'
    """
    return _show(ext, False, show_kind)


def show_generalized_cw(value: GeneralizedCW, show_kind: bool = True) -> str:
    if isinstance(value, CW):
        return show_cw(value, show_kind)
    return show_ext_cw(show_kind, value)
