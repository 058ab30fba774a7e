"""
Configure settings before running pytest

In this case, we set PYTHONHASHSEED to 0 for uniformity across test runs.
"""

import os

os.environ["PYTHONHASHSEED"] = "0"
import random
from sys import argv

import pytest

from symkind.randomcw import RANDOM_SOURCE
from symkind.util import set_debug


def pytest_configure(config):
    if "-v" in argv or "-vv" in argv:
        set_debug(True)


@pytest.fixture()
def rng():
    with RANDOM_SOURCE.open(random.Random(1234)) as seeded:
        yield seeded
