"""
Concrete values: what a symbolic value becomes once it has been resolved.

A ``CW`` (concrete word) pairs a kind with a ``CWVal``. Equality and ordering
are defined so that concrete words can serve as dictionary keys, even for
floating point NaNs and zeros, and for infinitely precise reals.
"""
import enum
import functools
import operator
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Callable, Optional, Tuple, TypeVar

from symkind.algreal import AlgReal, AlgRational
from symkind.haskind import kind_of
from symkind.kind import (
    KBool,
    KBounded,
    KChar,
    KDouble,
    KFloat,
    Kind,
    KList,
    KReal,
    KString,
    KUnbounded,
    KUserSort,
    show_base_kind,
)
from symkind.numeric import (
    fp_compare_object,
    fp_hash_object,
    fp_is_equal_object,
    int_to_float,
    show_float32,
    show_float64,
    to_float32,
)
from symkind.util import (
    SYMKIND_EXTRA_ASSERTS,
    ConstructionError,
    MismatchedKind,
    UnsupportedOperation,
)

_R = TypeVar("_R")


@functools.total_ordering
class CWVal:
    """
    Base class of the constant value variants.

    Values of different variants are ordered by ``rank``; that should not
    happen for well-kinded data.
    """

    rank: int = -1
    value: Any

    def _key(self) -> Any:
        return self.value

    def _same_variant_eq(self, other: "CWVal") -> bool:
        return self._key() == other._key()

    def _same_variant_cmp(self, other: "CWVal") -> int:
        a, b = self._key(), other._key()
        return (a > b) - (a < b)

    def __eq__(self, other):
        if not isinstance(other, CWVal):
            return NotImplemented
        return type(self) is type(other) and self._same_variant_eq(other)

    def __lt__(self, other):
        if not isinstance(other, CWVal):
            return NotImplemented
        if type(self) is not type(other):
            return self.rank < other.rank
        return self._same_variant_cmp(other) < 0

    def __hash__(self):
        return hash((self.rank, self._key()))


@dataclass(frozen=True, eq=False)
class CWAlgReal(CWVal):
    value: AlgReal
    rank = 0


@dataclass(frozen=True, eq=False)
class CWInteger(CWVal):
    """Payload of booleans, bit-vectors and unbounded integers."""

    value: int
    rank = 1


class _FloatingCWVal(CWVal):
    def _same_variant_eq(self, other: CWVal) -> bool:
        return fp_is_equal_object(self.value, other.value)

    def _same_variant_cmp(self, other: CWVal) -> int:
        return fp_compare_object(self.value, other.value)

    def __hash__(self):
        return hash((self.rank, fp_hash_object(self.value)))


@dataclass(frozen=True, eq=False)
class CWFloat(_FloatingCWVal):
    value: float
    rank = 2

    def __post_init__(self):
        object.__setattr__(self, "value", to_float32(self.value))


@dataclass(frozen=True, eq=False)
class CWDouble(_FloatingCWVal):
    value: float
    rank = 3


@dataclass(frozen=True, eq=False)
class CWChar(CWVal):
    value: str
    rank = 4


@dataclass(frozen=True, eq=False)
class CWString(CWVal):
    value: str
    rank = 5


@dataclass(frozen=True, eq=False)
class CWList(CWVal):
    value: Tuple[CWVal, ...]
    rank = 6


@dataclass(frozen=True, eq=False)
class CWUserSort(CWVal):
    """
    A value of a user sort: (index, name).

    The index is the constructor position for enumerations and None for
    uninterpreted sorts.
    """

    value: Tuple[Optional[int], str]
    rank = 7

    @property
    def index(self) -> Optional[int]:
        return self.value[0]

    @property
    def name(self) -> str:
        return self.value[1]

    def _key(self) -> Any:
        index, name = self.value
        return (index is not None, -1 if index is None else index, name)


_VARIANT_FOR_KIND = {
    KBool: CWInteger,
    KBounded: CWInteger,
    KUnbounded: CWInteger,
    KReal: CWAlgReal,
    KFloat: CWFloat,
    KDouble: CWDouble,
    KChar: CWChar,
    KString: CWString,
    KList: CWList,
    KUserSort: CWUserSort,
}


def _check_val(kind: Kind, val: CWVal) -> None:
    expected = _VARIANT_FOR_KIND[type(kind)]
    if type(val) is not expected:
        raise MismatchedKind(
            f"A value of kind {kind} needs a {expected.__name__}, not {val!r}"
        )
    if isinstance(kind, KList):
        for element in val.value:
            _check_val(kind.element, element)
    elif isinstance(kind, KChar):
        if len(val.value) != 1:
            raise MismatchedKind(f"Not a single character: {val.value!r}")
        if ord(val.value) > 255:
            raise MismatchedKind(f"Not an 8-bit character: {val.value!r}")


@functools.total_ordering
@dataclass(frozen=True, eq=True)
class CW:
    """
    A concrete word: a value together with its kind.

    For signed bit-vectors the most significant bit is the sign; see
    ``norm_cw``.
    """

    kind: Kind
    val: CWVal

    if SYMKIND_EXTRA_ASSERTS:

        def __post_init__(self):
            _check_val(self.kind, self.val)

    def __lt__(self, other):
        if not isinstance(other, CW):
            return NotImplemented
        return (self.kind, self.val) < (other.kind, other.val)

    def __kind_of__(self) -> Kind:
        return self.kind

    def __str__(self):
        return show_cw(self, True)


def check_cw(cw: CW) -> CW:
    """
    Confirm that the value variant of ``cw`` matches its kind.

    :raises MismatchedKind: if it does not
    """
    _check_val(cw.kind, cw.val)
    return cw


def cw_same_type(x: CW, y: CW) -> bool:
    return x.kind == y.kind


def cw_to_bool(x: CW) -> bool:
    # (assumes the input is well-kinded)
    return x.val != CWInteger(0)


def norm_cw(c: CW) -> CW:
    """
    Normalize a word so that its value fits in its bit-size.

    This is modular arithmetic. Negative values need care, because of the
    asymmetry of the signed range (an 8-bit value ranges over -128 to 127).

    >>> norm_cw(CW(KBounded(True, 8), CWInteger(200))).val
    CWInteger(value=-56)
    >>> norm_cw(CW(KBounded(False, 8), CWInteger(-1))).val
    CWInteger(value=255)
    """
    kind, val = c.kind, c.val
    if isinstance(kind, KBounded) and isinstance(val, CWInteger):
        size, v = kind.size, val.value
        if size == 0:
            norm = 0
        elif kind.signed:
            rg = 2 ** (size - 1)
            quotient, remainder = divmod(v, rg)
            norm = remainder if quotient % 2 == 0 else remainder - rg
        else:
            norm = v % (2**size)
        return c if norm == v else CW(kind, CWInteger(norm))
    if isinstance(kind, KBool) and isinstance(val, CWInteger):
        bit = val.value & 1
        return c if bit == val.value else CW(kind, CWInteger(bit))
    return c


false_cw = CW(KBool(), CWInteger(0))
true_cw = CW(KBool(), CWInteger(1))


def lift_cw(
    cw: CW,
    real: Callable[[AlgReal], _R],
    integer: Callable[[int], _R],
    float_: Callable[[float], _R],
    double: Callable[[float], _R],
    char: Callable[[str], _R],
    string: Callable[[str], _R],
    list_: Callable[[Tuple[CWVal, ...]], _R],
    user_sort: Callable[[Tuple[Optional[int], str]], _R],
) -> _R:
    """Apply the function for the value variant of ``cw`` to its payload."""
    handlers = (real, integer, float_, double, char, string, list_, user_sort)
    return handlers[cw.val.rank](cw.val.value)


def lift_cw2(
    x: CW,
    y: CW,
    real: Callable[[AlgReal, AlgReal], _R],
    integer: Callable[[int, int], _R],
    float_: Callable[[float, float], _R],
    double: Callable[[float, float], _R],
    char: Callable[[str, str], _R],
    string: Callable[[str, str], _R],
    list_: Callable[[Tuple[CWVal, ...], Tuple[CWVal, ...]], _R],
    user_sort: Callable[
        [Tuple[Optional[int], str], Tuple[Optional[int], str]], _R
    ],
) -> _R:
    """
    Apply a binary function to the payloads of two words of the same variant.

    :raises MismatchedKind: if the variants differ
    """
    if type(x.val) is not type(y.val):
        raise MismatchedKind(f"lift_cw2: incompatible args received: {x!r}, {y!r}")
    handlers = (real, integer, float_, double, char, string, list_, user_sort)
    return handlers[x.val.rank](x.val.value, y.val.value)


def map_cw(
    cw: CW,
    real: Callable[[AlgReal], AlgReal],
    integer: Callable[[int], int],
    float_: Callable[[float], float],
    double: Callable[[float], float],
    char: Callable[[str], str],
    string: Callable[[str], str],
    user_sort: Callable[[Tuple[Optional[int], str]], Tuple[Optional[int], str]],
) -> CW:
    """
    Map the payload of a word, keeping its kind; the result is normalized.

    :raises UnsupportedOperation: for lists

    >>> ident = lambda v: v
    >>> inc = lambda v: v + 1
    >>> str(map_cw(CW(KBounded(False, 8), CWInteger(255)),
    ...            ident, inc, ident, ident, ident, ident, ident))
    '0 :: Word8'
    """
    val = cw.val
    if isinstance(val, CWList):
        raise UnsupportedOperation("map_cw: lists cannot be mapped element-wise")
    handlers = (real, integer, float_, double, char, string, None, user_sort)
    handler = handlers[val.rank]
    return norm_cw(CW(cw.kind, type(val)(handler(val.value))))


def map_cw2(
    x: CW,
    y: CW,
    real: Callable[[AlgReal, AlgReal], AlgReal],
    integer: Callable[[int, int], int],
    float_: Callable[[float, float], float],
    double: Callable[[float, float], float],
    char: Callable[[str, str], str],
    string: Callable[[str, str], str],
    user_sort: Callable[
        [Tuple[Optional[int], str], Tuple[Optional[int], str]],
        Tuple[Optional[int], str],
    ],
) -> CW:
    """
    Combine the payloads of two words of the same kind; the result is normalized.

    :raises MismatchedKind: if the kinds or variants differ, or for lists
    """
    xval, yval = x.val, y.val
    if (
        not cw_same_type(x, y)
        or type(xval) is not type(yval)
        or isinstance(xval, CWList)
    ):
        raise MismatchedKind(f"map_cw2: incompatible args received: {x!r}, {y!r}")
    handlers = (real, integer, float_, double, char, string, None, user_sort)
    handler = handlers[xval.rank]
    return norm_cw(CW(x.kind, type(xval)(handler(xval.value, yval.value))))


def _identity(v):
    return v


def show_cw(w: CW, show_kind: bool = True) -> str:
    """
    Render a word, with its kind if ``show_kind`` is set.

    >>> show_cw(CW(KBounded(False, 16), CWInteger(10)))
    '10 :: Word16'
    >>> show_cw(CW(KList(KBool()), CWList((CWInteger(1), CWInteger(0)))), False)
    '[True,False]'
    """
    if isinstance(w.kind, KBool):
        return str(cw_to_bool(w)) + (" :: Bool" if show_kind else "")

    def show_list(elements: Tuple[CWVal, ...]) -> str:
        kind = w.kind
        if not isinstance(kind, KList):
            raise MismatchedKind(f"show_cw: expected a list kind, got {kind}")
        return (
            "["
            + ",".join(show_cw(CW(kind.element, e), False) for e in elements)
            + "]"
        )

    text = lift_cw(
        w,
        real=str,
        integer=str,
        float_=show_float32,
        double=show_float64,
        char=repr,
        string=repr,
        list_=show_list,
        user_sort=operator.itemgetter(1),
    )
    if show_kind:
        text += " :: " + show_base_kind(w.kind)
    return text


def mk_const_cw(kind: Kind, a: int) -> CW:
    """
    Create a constant word from an integral value.

    :raises ConstructionError: for kinds that have no integral literals

    >>> str(mk_const_cw(KBounded(True, 4), 9))
    '-7 :: Int4'
    """
    a = operator.index(a)
    if isinstance(kind, (KBool, KBounded, KUnbounded)):
        return norm_cw(CW(kind, CWInteger(a)))
    if isinstance(kind, KReal):
        return CW(kind, CWAlgReal(AlgRational.of(a)))
    if isinstance(kind, KFloat):
        return CW(kind, CWFloat(int_to_float(a)))
    if isinstance(kind, KDouble):
        return CW(kind, CWDouble(int_to_float(a)))
    raise ConstructionError(f"Unexpected call to mk_const_cw ({kind}) with value: {a}")


def _val_of(kind: Kind, value: Any) -> CWVal:
    if isinstance(kind, KBool):
        return CWInteger(int(bool(value)))
    if isinstance(kind, (KBounded, KUnbounded)):
        return CWInteger(int(value))
    if isinstance(kind, KReal):
        if isinstance(value, AlgReal):
            return CWAlgReal(value)
        return CWAlgReal(AlgRational.of(Fraction(value)))
    if isinstance(kind, KFloat):
        return CWFloat(float(value))
    if isinstance(kind, KDouble):
        return CWDouble(float(value))
    if isinstance(kind, KChar):
        return CWChar(value)
    if isinstance(kind, KString):
        return CWString(value)
    if isinstance(kind, KList):
        return CWList(tuple(_val_of(kind.element, e) for e in value))
    if isinstance(kind, KUserSort):
        name = value.name if isinstance(value, enum.Enum) else str(value)
        if kind.is_enumeration():
            constructors = kind.shape.constructors  # type: ignore
            if name not in constructors:
                raise ConstructionError(f"{name} is not a constructor of {kind}")
            return CWUserSort((constructors.index(name), name))
        return CWUserSort((None, name))
    raise ConstructionError(f"No concrete value for kind {kind}")


def cw_of_value(value: object) -> CW:
    """
    Make a normalized word out of a plain Python value.

    >>> str(cw_of_value([1, 2]))
    '[1,2] :: [SInteger]'
    """
    kind = kind_of(value)
    return norm_cw(CW(kind, _val_of(kind, value)))
