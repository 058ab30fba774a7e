import io

import pytest

from symkind.util import (
    ConstructionError,
    DynamicScopeVar,
    SymKindError,
    UnsupportedOperation,
    debug,
    in_debug,
    memo,
    set_debug,
)


@pytest.fixture
def debug_output():
    was_debugging = in_debug()
    buf = io.StringIO()
    set_debug(True, buf)
    yield buf
    set_debug(was_debugging)


def test_dynamic_scope_var_basic():
    var = DynamicScopeVar(int, "height")
    with var.open(7):
        assert var.get() == 7


def test_dynamic_scope_var_bsic():
    var = DynamicScopeVar(int, "height")
    assert var.get_if_in_scope() is None
    with var.open(7):
        assert var.get_if_in_scope() == 7
    assert var.get_if_in_scope() is None


def test_dynamic_scope_var_error_cases():
    var = DynamicScopeVar(int, "height")
    with var.open(100):
        with pytest.raises(AssertionError, match="Already in a height context"):
            with var.open(500, reentrant=False):
                pass
    with pytest.raises(AssertionError, match="Not in a height context"):
        var.get()


def test_dynamic_scope_var_with_exception():
    var = DynamicScopeVar(int, "height")
    try:
        with var.open(7):
            raise NameError()
    except NameError:
        pass
    assert var.get_if_in_scope() is None


def test_memo():
    calls = []

    @memo
    def square(x):
        calls.append(x)
        return x * x

    assert square(3) == 9
    assert square(3) == 9
    assert calls == [3]


def test_debug_output(debug_output):
    debug("hello", 42)
    line = debug_output.getvalue()
    assert "test_debug_output() hello 42" in line


def test_debug_is_silent_when_off():
    was_debugging = in_debug()
    set_debug(False)
    try:
        debug("nobody hears this")
        assert not in_debug()
    finally:
        set_debug(was_debugging)


def test_errors_are_logged(debug_output):
    with pytest.raises(SymKindError):
        raise ConstructionError("bad literal")
    assert "ConstructionError: bad literal" in debug_output.getvalue()
    assert issubclass(UnsupportedOperation, SymKindError)
