"""
The closed set of kinds (logical sorts) that symbolic values may have.

Every kind has a display name (``str(kind)``) and an SMT-LIB sort name
(``smt_type(kind)``). The display names of user sorts never collide with the
built-in ones; see ``symkind.usersort`` for how that is enforced.
"""
import functools
import re
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from symkind.util import ConstructionError, UnsupportedOperation


@functools.total_ordering
class Kind:
    """Base class for kinds. Kinds are immutable and compare structurally."""

    _rank: int = -1

    def _fields_key(self) -> tuple:
        return ()

    def sort_key(self) -> tuple:
        return (self._rank,) + self._fields_key()

    def __lt__(self, other):
        if not isinstance(other, Kind):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __kind_of__(self) -> "Kind":
        return self


@dataclass(frozen=True)
class KBool(Kind):
    _rank = 0

    def __str__(self):
        return "SBool"


@dataclass(frozen=True)
class KBounded(Kind):
    """A bit-vector of ``size`` bits, interpreted as two's complement if ``signed``."""

    signed: bool
    size: int
    _rank = 1

    def _fields_key(self) -> tuple:
        return (self.signed, self.size)

    def __str__(self):
        return f"SInt{self.size}" if self.signed else f"SWord{self.size}"


@dataclass(frozen=True)
class KUnbounded(Kind):
    _rank = 2

    def __str__(self):
        return "SInteger"


@dataclass(frozen=True)
class KReal(Kind):
    _rank = 3

    def __str__(self):
        return "SReal"


@dataclass(frozen=True)
class Opaque:
    """An uninterpreted user sort; ``reason`` says why it is not an enumeration."""

    reason: str


@dataclass(frozen=True)
class Enumerated:
    constructors: Tuple[str, ...]


UserSortShape = Union[Opaque, Enumerated]


def _shape_key(shape: UserSortShape) -> tuple:
    if isinstance(shape, Opaque):
        return (0, shape.reason)
    return (1, shape.constructors)


@dataclass(frozen=True)
class KUserSort(Kind):
    name: str
    shape: UserSortShape
    _rank = 4

    def _fields_key(self) -> tuple:
        return (self.name, _shape_key(self.shape))

    def __str__(self):
        return self.name

    def is_enumeration(self) -> bool:
        return isinstance(self.shape, Enumerated)


@dataclass(frozen=True)
class KFloat(Kind):
    _rank = 5

    def __str__(self):
        return "SFloat"


@dataclass(frozen=True)
class KDouble(Kind):
    _rank = 6

    def __str__(self):
        return "SDouble"


@dataclass(frozen=True)
class KChar(Kind):
    _rank = 7

    def __str__(self):
        return "SChar"


@dataclass(frozen=True)
class KString(Kind):
    _rank = 8

    def __str__(self):
        return "SString"


@dataclass(frozen=True)
class KList(Kind):
    element: Kind
    _rank = 9

    def _fields_key(self) -> tuple:
        return (self.element.sort_key(),)

    def __str__(self):
        return f"[{self.element}]"


# User sorts must not start with any of these; otherwise they could be
# mistaken for one of our own kinds.
RESERVED_PREFIXES = (
    "SBool",
    "SWord",
    "SInt",
    "SInteger",
    "SReal",
    "SFloat",
    "SDouble",
    "SString",
    "SChar",
    "[",
)


def smt_type(kind: Kind) -> str:
    """
    Give the SMT-LIB name of the sort for ``kind``.

    >>> smt_type(KList(KBounded(True, 16)))
    '(Seq (_ BitVec 16))'
    """
    if isinstance(kind, KBool):
        return "Bool"
    elif isinstance(kind, KBounded):
        return f"(_ BitVec {kind.size})"
    elif isinstance(kind, KUnbounded):
        return "Int"
    elif isinstance(kind, KReal):
        return "Real"
    elif isinstance(kind, KFloat):
        return "(_ FloatingPoint 8 24)"
    elif isinstance(kind, KDouble):
        return "(_ FloatingPoint 11 53)"
    elif isinstance(kind, KString):
        return "String"
    elif isinstance(kind, KChar):
        return "(_ BitVec 8)"
    elif isinstance(kind, KList):
        return f"(Seq {smt_type(kind.element)})"
    elif isinstance(kind, KUserSort):
        return kind.name
    raise TypeError(f"Not a kind: {kind!r}")


def kind_has_sign(kind: Kind) -> bool:
    if isinstance(kind, KBounded):
        return kind.signed
    return isinstance(kind, (KUnbounded, KReal, KFloat, KDouble))


def int_size_of(kind: Kind) -> int:
    """
    Give the bit width of a bit-vector kind.

    Only bit-vectors have a width here; booleans, chars and floats do not,
    even though they have a natural one.
    """
    if isinstance(kind, KBounded):
        return kind.size
    if isinstance(kind, KUserSort):
        raise UnsupportedOperation(f"int_size_of: uninterpreted sort: {kind}")
    raise UnsupportedOperation(f"int_size_of: {kind} has no bit width")


def show_base_kind(kind: Kind) -> str:
    """
    Give the display name without the leading "S" of the built-in kinds.

    >>> show_base_kind(KBounded(False, 16))
    'Word16'
    >>> show_base_kind(KList(KBool()))
    '[SBool]'
    """
    name = str(kind)
    if isinstance(kind, KUserSort):
        return name
    return name[1:] if name.startswith("S") else name


_SIMPLE_KINDS = {
    str(k): k
    for k in (
        KBool(),
        KUnbounded(),
        KReal(),
        KFloat(),
        KDouble(),
        KChar(),
        KString(),
    )
}

_BOUNDED_RE = re.compile(r"S(Word|Int)(\d+)")


def parse_kind(text: str, user_kinds: Iterable[KUserSort] = ()) -> Kind:
    """
    Recover a kind from its display name.

    >>> parse_kind("[SInt8]")
    KList(element=KBounded(signed=True, size=8))
    """
    text = text.strip()
    if text in _SIMPLE_KINDS:
        return _SIMPLE_KINDS[text]
    match = _BOUNDED_RE.fullmatch(text)
    if match:
        flavor, size = match.groups()
        return KBounded(flavor == "Int", int(size))
    if text.startswith("[") and text.endswith("]"):
        return KList(parse_kind(text[1:-1], user_kinds))
    for user_kind in user_kinds:
        if user_kind.name == text:
            return user_kind
    raise ConstructionError(f'Unknown kind: "{text}"')
