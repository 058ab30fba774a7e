import contextlib
import functools
import os
import sys
import threading
import time
import traceback
import types
from typing import Generic, Optional, TextIO, Tuple, Type, TypeVar, Union, cast

import typing_inspect  # type: ignore

_DEBUG_STREAM: Optional[TextIO] = None


def memo(f):
    """Decorate a function taking a single argument with a memoization decorator."""
    saved = {}

    @functools.wraps(f)
    def memo_wrapper(a):
        if a not in saved:
            saved[a] = f(a)
        return saved[a]

    return memo_wrapper


def name_of_type(typ: Type) -> str:
    return typ.__name__ if hasattr(typ, "__name__") else str(typ).split(".")[-1]


SYMKIND_EXTRA_ASSERTS = os.environ.get("SYMKIND_EXTRA_ASSERTS", "0") == "1"


def set_debug(new_debug: bool, output: TextIO = sys.stderr):
    global _DEBUG_STREAM
    if new_debug:
        _DEBUG_STREAM = output
    else:
        _DEBUG_STREAM = None


def in_debug() -> bool:
    return bool(_DEBUG_STREAM)


def debug(*a):
    """
    Print debugging information in symkind's nested log output.

    Arguments are serialized with ``str()`` and printed only when debugging has
    been enabled with ``set_debug(True)``.
    """
    if not _DEBUG_STREAM:
        return
    stack = traceback.extract_stack()
    frame = stack[-2]
    indent = len(stack) - 3
    print(
        "{:06.3f}|{}|{}() {}".format(
            time.monotonic(), " " * indent, frame.name, " ".join(map(str, a))
        ),
        file=_DEBUG_STREAM,
    )


def warn(*a):
    """
    Display a warning to the user.

    It currently does not do more than printing `WARNING:`, followed by the arguments
    serialized with `str` to the debug stream.
    """
    debug("WARNING:", *a)


_T = TypeVar("_T")


class DynamicScopeVar(Generic[_T]):
    """
    Manage a hidden value that can get passed through the callstack.

    This has similar downsides to threadlocals/globals; it should be
    used sparingly.

    >>> _VAR = DynamicScopeVar(int)
    >>> with _VAR.open(42):
    ...   _VAR.get()
    42
    """

    def __init__(self, typ: Type[_T], name_for_debugging: str = ""):
        self._local = threading.local()
        self._name = name_for_debugging

    @contextlib.contextmanager
    def open(self, value: _T, reentrant: bool = True):
        _local = self._local
        old_value = getattr(_local, "value", None)
        if not reentrant:
            assert old_value is None, f"Already in a {self._name} context"
        _local.value = value
        try:
            yield value
        finally:
            assert getattr(_local, "value", None) is value
            _local.value = old_value

    def get(self, default: Optional[_T] = None) -> _T:
        ret = getattr(self._local, "value", None)
        if ret is not None:
            return ret
        if default is not None:
            return default
        assert False, f"Not in a {self._name} context"

    def get_if_in_scope(self) -> Optional[_T]:
        return getattr(self._local, "value", None)


class SymKindError(Exception):
    # All of these indicate a defect in the calling layer.
    def __init__(self, *a):
        Exception.__init__(self, *a)
        if in_debug():
            debug(f"{type(self).__name__}:", str(self))
            debug(f"{type(self).__name__} stack trace:")
            for entry in traceback.format_stack()[:-1]:
                for line in entry.splitlines():
                    debug("", line)


class ConstructionError(SymKindError):
    pass


class UnsupportedOperation(SymKindError):
    pass


class MismatchedKind(SymKindError):
    pass


class UnsupportedRandomGeneration(SymKindError):
    pass


ExtraUnionType = getattr(types, "UnionType") if sys.version_info >= (3, 10) else None


def origin_of(typ: Type) -> Type:
    if hasattr(typ, "__origin__"):
        return typ.__origin__
    elif ExtraUnionType and isinstance(typ, ExtraUnionType):
        return cast(Type, Union)
    else:
        return typ


def type_args_of(typ: Type) -> Tuple[Type, ...]:
    if getattr(typ, "__args__", None):
        if ExtraUnionType and isinstance(typ, ExtraUnionType):
            return typ.__args__
        return typing_inspect.get_args(typ, evaluate=True)
    else:
        return ()
