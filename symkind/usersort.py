"""
Build kinds for user-defined types.

A user type is described once by its name and constructors. Types whose
constructors all take no fields become enumerations, provided every
constructor name survives a trip through the type's own parser and renderer;
everything else becomes an uninterpreted (opaque) sort.
"""
import enum
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Type

from symkind.haskind import register_kind, registered_kind
from symkind.kind import RESERVED_PREFIXES, Enumerated, KUserSort, Opaque
from symkind.util import ConstructionError, debug, warn


@dataclass(frozen=True)
class Constructor:
    name: str
    field_count: int = 0


def _round_trip_error(
    text: str,
    parse: Optional[Callable[[str], Any]],
    render: Callable[[Any], str],
) -> Optional[str]:
    if parse is None:
        return "not a nullary constructor"
    try:
        rendered = render(parse(text))
    except (ValueError, LookupError, TypeError) as exc:
        debug("Constructor", repr(text), "failed to parse:", exc)
        return "not a nullary constructor"
    if rendered != text:
        return "not a nullary constructor"
    return None


def construct_user_kind(
    name: str,
    constructors: Sequence[Constructor],
    parse: Optional[Callable[[str], Any]] = None,
    render: Callable[[Any], str] = str,
) -> KUserSort:
    """
    Construct an uninterpreted or enumerated kind.

    :raises ConstructionError: if ``name`` could be confused with a built-in kind

    >>> construct_user_kind("Color", [Constructor("R"), Constructor("G")], str)
    KUserSort(name='Color', shape=Enumerated(constructors=('R', 'G')))
    >>> construct_user_kind("Box", [Constructor("Box", 1)]).shape
    Opaque(reason='Box is not a finite non-empty enumeration')
    """
    if any(name.startswith(prefix) for prefix in RESERVED_PREFIXES):
        raise ConstructionError(
            f'Cannot construct user-sort with name: "{name}": '
            f"Must not start with any of {', '.join(RESERVED_PREFIXES)}"
        )
    is_enumeration = bool(constructors) and all(
        c.field_count == 0 for c in constructors
    )
    if not is_enumeration:
        return KUserSort(name, Opaque(f"{name} is not a finite non-empty enumeration"))
    for constructor in constructors:
        problem = _round_trip_error(constructor.name, parse, render)
        if problem is not None:
            warn("User sort", name, "is opaque:", constructor.name, problem)
            return KUserSort(name, Opaque(f"{name}.{constructor.name}: {problem}"))
    return KUserSort(name, Enumerated(tuple(c.name for c in constructors)))


def register_user_sort(
    typ: type,
    constructors: Sequence[Constructor],
    parse: Optional[Callable[[str], Any]] = None,
    render: Callable[[Any], str] = str,
    name: Optional[str] = None,
) -> KUserSort:
    """
    Build the kind of ``typ`` and remember it for ``kind_of``.

    Registering the same type again returns the kind recorded the first time.
    """
    existing = registered_kind(typ)
    if existing is not None:
        return existing
    kind = construct_user_kind(
        typ.__name__ if name is None else name, constructors, parse, render
    )
    debug("Registered user sort", kind.name, "for", typ)
    return register_kind(typ, kind)


def register_enum(enum_cls: Type[enum.Enum]) -> KUserSort:
    """
    Register a Python enumeration; members are parsed and rendered by name.

    >>> class Suit(enum.Enum):
    ...     HEARTS = 1
    ...     SPADES = 2
    >>> register_enum(Suit).shape
    Enumerated(constructors=('HEARTS', 'SPADES'))
    """
    return register_user_sort(
        enum_cls,
        [Constructor(member.name) for member in enum_cls],
        parse=lambda text: enum_cls[text],
        render=lambda member: member.name,
    )
