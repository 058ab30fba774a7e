import doctest
import importlib
import pkgutil

import pytest

import symkind

# Runs all the doctests in sibling modules

_MODULE_NAMES = [
    info.name
    for info in pkgutil.iter_modules(symkind.__path__, "symkind.")
    if not info.name.endswith("_test") and info.name != "symkind.__main__"
]


@pytest.mark.parametrize("module_name", _MODULE_NAMES)
def test_doctests(module_name):
    module = importlib.import_module(module_name)
    failures, _tried = doctest.testmod(module)
    assert failures == 0
