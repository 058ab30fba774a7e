"""
Random concrete values, for property testing and model search.

Values are drawn from the ``rng`` argument when given. Otherwise they come
from the generator opened with ``RANDOM_SOURCE.open(...)`` in the current
thread, or failing that, from a generator private to the current thread.
Sharing one ``random.Random`` between threads is the caller's business.
"""
import random
import threading
from fractions import Fraction
from typing import Optional

from symkind.algreal import AlgRational
from symkind.concrete import (
    CW,
    CWAlgReal,
    CWChar,
    CWDouble,
    CWFloat,
    CWInteger,
    CWList,
    CWString,
    CWVal,
)
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
)
from symkind.options import DEFAULT_OPTIONS, ValueOptions
from symkind.util import DynamicScopeVar, UnsupportedRandomGeneration, debug

RANDOM_SOURCE: DynamicScopeVar[random.Random] = DynamicScopeVar(
    random.Random, "random source"
)

_THREAD_LOCAL = threading.local()


def _thread_rng() -> random.Random:
    rng = getattr(_THREAD_LOCAL, "rng", None)
    if rng is None:
        rng = random.Random()
        _THREAD_LOCAL.rng = rng
    return rng


def current_rng() -> random.Random:
    scoped = RANDOM_SOURCE.get_if_in_scope()
    return scoped if scoped is not None else _thread_rng()


def bounded_range(signed: bool, size: int):
    """
    Give the inclusive range of a bit-vector.

    >>> bounded_range(True, 8), bounded_range(False, 8)
    ((-128, 127), (0, 255))
    """
    if signed:
        half = 2 ** (size - 1) if size > 0 else 0
        return (-half, max(half - 1, 0))
    return (0, max(2**size - 1, 0))


def _random_char(rng: random.Random, options: ValueOptions) -> str:
    return chr(rng.randint(0, options.max_char_code))


def random_cw_val(
    kind: Kind,
    rng: Optional[random.Random] = None,
    options: ValueOptions = DEFAULT_OPTIONS,
) -> CWVal:
    """
    Generate a random constant value of the given kind.

    :raises UnsupportedRandomGeneration: for user sorts
    """
    if rng is None:
        rng = current_rng()
    if isinstance(kind, KBool):
        return CWInteger(rng.randint(0, 1))
    elif isinstance(kind, KBounded):
        return CWInteger(rng.randint(*bounded_range(kind.signed, kind.size)))
    elif isinstance(kind, KUnbounded):
        return CWInteger(
            rng.randint(*bounded_range(True, options.unbounded_int_bits))
        )
    elif isinstance(kind, KReal):
        return CWAlgReal(AlgRational(True, Fraction(rng.random())))
    elif isinstance(kind, KFloat):
        return CWFloat(rng.random())
    elif isinstance(kind, KDouble):
        return CWDouble(rng.random())
    elif isinstance(kind, KString):
        length = rng.randint(0, options.max_sequence_length)
        return CWString("".join(_random_char(rng, options) for _ in range(length)))
    elif isinstance(kind, KChar):
        return CWChar(_random_char(rng, options))
    elif isinstance(kind, KList):
        length = rng.randint(0, options.max_sequence_length)
        return CWList(
            tuple(random_cw_val(kind.element, rng, options) for _ in range(length))
        )
    elif isinstance(kind, KUserSort):
        raise UnsupportedRandomGeneration(
            f"Unexpected call to random_cw_val with uninterpreted kind: {kind}"
        )
    raise TypeError(f"Not a kind: {kind!r}")


def random_cw(
    kind: Kind,
    rng: Optional[random.Random] = None,
    options: ValueOptions = DEFAULT_OPTIONS,
) -> CW:
    """
    Generate a random word of the given kind.

    The result is not normalized; bit-vectors are already drawn from their
    legal range.
    """
    cw = CW(kind, random_cw_val(kind, rng, options))
    debug("Random value:", cw)
    return cw
