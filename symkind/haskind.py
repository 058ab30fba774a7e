"""Find the kind of Python values and type hints."""
import collections.abc
from fractions import Fraction
from typing import Dict, Type

import numpy

from symkind.algreal import AlgReal
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
    int_size_of,
    kind_has_sign,
)
from symkind.util import UnsupportedOperation, name_of_type, origin_of, type_args_of

_SCALAR_KINDS: Dict[type, Kind] = {
    bool: KBool(),
    numpy.bool_: KBool(),
    int: KUnbounded(),
    numpy.int8: KBounded(True, 8),
    numpy.int16: KBounded(True, 16),
    numpy.int32: KBounded(True, 32),
    numpy.int64: KBounded(True, 64),
    numpy.uint8: KBounded(False, 8),
    numpy.uint16: KBounded(False, 16),
    numpy.uint32: KBounded(False, 32),
    numpy.uint64: KBounded(False, 64),
    numpy.float32: KFloat(),
    numpy.float64: KDouble(),
    float: KDouble(),
    Fraction: KReal(),
    str: KString(),
}

_SEQUENCE_ORIGINS = (list, tuple, collections.abc.Sequence)

# Filled by symkind.usersort:
_USER_KINDS: Dict[type, KUserSort] = {}


def register_kind(typ: type, kind: KUserSort) -> KUserSort:
    """Record the kind of a user type; the first registration wins."""
    return _USER_KINDS.setdefault(typ, kind)


def registered_kind(typ: type):
    return _USER_KINDS.get(typ)


def kind_of_type(typ: Type) -> Kind:
    """
    Give the kind of values of the given type hint.

    >>> from typing import List
    >>> str(kind_of_type(List[numpy.int16]))
    '[SInt16]'
    """
    if typ in _USER_KINDS:
        return _USER_KINDS[typ]
    if typ in _SCALAR_KINDS:
        return _SCALAR_KINDS[typ]
    origin = origin_of(typ)
    if origin in _SEQUENCE_ORIGINS:
        args = [a for a in type_args_of(typ) if a is not Ellipsis]
        if origin is tuple and len(args) != 1:
            raise UnsupportedOperation(f"Tuple kinds are not supported: {typ}")
        if not args:
            raise UnsupportedOperation(f"Missing element type for {typ}")
        return KList(kind_of_type(args[0]))
    if isinstance(typ, type):
        if issubclass(typ, AlgReal):
            return KReal()
        for base in typ.__mro__[1:]:
            if base in _USER_KINDS:
                return _USER_KINDS[base]
            if base in _SCALAR_KINDS:
                return _SCALAR_KINDS[base]
    raise UnsupportedOperation(f"No kind for type {name_of_type(typ)}")


def kind_of(value: object) -> Kind:
    """
    Give the kind of a value.

    Kinds, concrete words and extended values report their own kind through
    a ``__kind_of__`` method.

    >>> kind_of(numpy.uint8(3))
    KBounded(signed=False, size=8)
    """
    own_kind = getattr(type(value), "__kind_of__", None)
    if own_kind is not None:
        return own_kind(value)
    if isinstance(value, (list, tuple)):
        if not value:
            raise UnsupportedOperation("Cannot tell the element kind of an empty list")
        return KList(kind_of(value[0]))
    return kind_of_type(type(value))


def has_sign(x: object) -> bool:
    return kind_has_sign(kind_of(x))


def int_size_of_value(x: object) -> int:
    return int_size_of(kind_of(x))


def show_type(x: object) -> str:
    return str(kind_of(x))


def is_boolean(x: object) -> bool:
    return isinstance(kind_of(x), KBool)


def is_bounded(x: object) -> bool:
    # True for words and ints only; reals and floats test False.
    return isinstance(kind_of(x), KBounded)


def is_real(x: object) -> bool:
    return isinstance(kind_of(x), KReal)


def is_float(x: object) -> bool:
    return isinstance(kind_of(x), KFloat)


def is_double(x: object) -> bool:
    return isinstance(kind_of(x), KDouble)


def is_integer(x: object) -> bool:
    return isinstance(kind_of(x), KUnbounded)


def is_uninterpreted(x: object) -> bool:
    return isinstance(kind_of(x), KUserSort)


def is_char(x: object) -> bool:
    return isinstance(kind_of(x), KChar)


def is_string(x: object) -> bool:
    return isinstance(kind_of(x), KString)


def is_list(x: object) -> bool:
    return isinstance(kind_of(x), KList)
