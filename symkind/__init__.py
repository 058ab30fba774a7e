"""Kinds and concrete values for a symbolic, SMT-backed computation engine."""

import sys

from symkind.concrete import (
    CW,
    CWAlgReal,
    CWChar,
    CWDouble,
    CWFloat,
    CWInteger,
    CWList,
    CWString,
    CWUserSort,
    CWVal,
    cw_of_value,
    cw_same_type,
    cw_to_bool,
    false_cw,
    lift_cw,
    lift_cw2,
    map_cw,
    map_cw2,
    mk_const_cw,
    norm_cw,
    show_cw,
    true_cw,
)
from symkind.extended import (
    AddExtCW,
    BoundedCW,
    Epsilon,
    ExtCW,
    GeneralizedCW,
    Infinite,
    Interval,
    MulExtCW,
    generalize,
    is_regular_cw,
    show_ext_cw,
)
from symkind.haskind import kind_of, kind_of_type
from symkind.kind import (
    Enumerated,
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
    Opaque,
    smt_type,
)
from symkind.randomcw import random_cw
from symkind.usersort import Constructor, construct_user_kind, register_enum
from symkind.util import (
    ConstructionError,
    MismatchedKind,
    SymKindError,
    UnsupportedOperation,
    UnsupportedRandomGeneration,
    debug,
    set_debug,
)

__version__ = "0.1.0"  # Do not forget to update in setup.py!
__license__ = "MIT"
__status__ = "Alpha"


def env_info() -> str:
    python_ver = sys.version.split(" ")[0]
    return f"symkind v{__version__} on {sys.platform}, Python {python_ver}"


__all__ = [
    "AddExtCW",
    "BoundedCW",
    "CW",
    "CWAlgReal",
    "CWChar",
    "CWDouble",
    "CWFloat",
    "CWInteger",
    "CWList",
    "CWString",
    "CWUserSort",
    "CWVal",
    "ConstructionError",
    "Constructor",
    "Enumerated",
    "Epsilon",
    "ExtCW",
    "GeneralizedCW",
    "Infinite",
    "Interval",
    "KBool",
    "KBounded",
    "KChar",
    "KDouble",
    "KFloat",
    "KList",
    "KReal",
    "KString",
    "KUnbounded",
    "KUserSort",
    "Kind",
    "MismatchedKind",
    "MulExtCW",
    "Opaque",
    "SymKindError",
    "UnsupportedOperation",
    "UnsupportedRandomGeneration",
    "construct_user_kind",
    "cw_of_value",
    "cw_same_type",
    "cw_to_bool",
    "debug",
    "false_cw",
    "generalize",
    "is_regular_cw",
    "kind_of",
    "kind_of_type",
    "lift_cw",
    "lift_cw2",
    "map_cw",
    "map_cw2",
    "mk_const_cw",
    "norm_cw",
    "random_cw",
    "register_enum",
    "set_debug",
    "show_cw",
    "show_ext_cw",
    "smt_type",
    "true_cw",
]
