import math
import struct

import numpy


def fp_is_equal_object(a: float, b: float) -> bool:
    """
    Compare floats the way a solver model does.

    NaN is equal to itself and the two zeros are different:

    >>> fp_is_equal_object(math.nan, math.nan), fp_is_equal_object(0.0, -0.0)
    (True, False)
    """
    if math.isnan(a):
        return math.isnan(b)
    if math.isnan(b):
        return False
    if a == 0.0 and b == 0.0:
        return math.copysign(1.0, a) == math.copysign(1.0, b)
    return a == b


def fp_compare_object(a: float, b: float) -> int:
    """
    Order floats totally: NaN first, then -0.0 before +0.0.

    Returns a negative number, zero or a positive number.
    """
    if fp_is_equal_object(a, b):
        return 0
    if math.isnan(a):
        return -1
    if math.isnan(b):
        return 1
    if a == b:
        # only the zeros get here
        return -1 if math.copysign(1.0, a) < 0 else 1
    return -1 if a < b else 1


def fp_hash_object(a: float) -> int:
    if math.isnan(a):
        return hash("NaN")
    return hash(struct.pack(">d", a))


def to_float32(x: float) -> float:
    """Round to the nearest binary32 value (still held in a Python float)."""
    with numpy.errstate(over="ignore"):
        return float(numpy.float32(x))


def show_float32(x: float) -> str:
    return str(numpy.float32(x))


def show_float64(x: float) -> str:
    return repr(float(x))


def int_to_float(a: int) -> float:
    """
    Convert an integer, going to infinity when it is out of range.

    >>> int_to_float(-10**400)
    -inf
    """
    try:
        return float(a)
    except OverflowError:
        return math.copysign(math.inf, a)
