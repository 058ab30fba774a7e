"""Move kinds and concrete words in and out of z3."""
from typing import List

import z3  # type: ignore

from symkind.algreal import AlgPolyRoot, AlgRational
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
    norm_cw,
)
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
)
from symkind.smtlib import parse_smtlib_literal
from symkind.util import (
    ConstructionError,
    MismatchedKind,
    UnsupportedOperation,
    debug,
    memo,
)

ctx = z3.main_ctx()


@memo
def z3_sort(kind: Kind) -> z3.SortRef:
    """
    Give the z3 sort for a kind.

    Enumerated user sorts become z3 enumeration sorts; uninterpreted ones are
    declared as opaque sorts. The result is cached per kind.
    """
    if isinstance(kind, KBool):
        return z3.BoolSort(ctx)
    elif isinstance(kind, KBounded):
        return z3.BitVecSort(kind.size, ctx)
    elif isinstance(kind, KUnbounded):
        return z3.IntSort(ctx)
    elif isinstance(kind, KReal):
        return z3.RealSort(ctx)
    elif isinstance(kind, KFloat):
        return z3.Float32(ctx)
    elif isinstance(kind, KDouble):
        return z3.Float64(ctx)
    elif isinstance(kind, KString):
        return z3.StringSort(ctx)
    elif isinstance(kind, KChar):
        return z3.BitVecSort(8, ctx)
    elif isinstance(kind, KList):
        return z3.SeqSort(z3_sort(kind.element))
    elif isinstance(kind, KUserSort):
        if isinstance(kind.shape, Enumerated):
            sort, _consts = z3.EnumSort(kind.name, list(kind.shape.constructors), ctx)
            return sort
        return z3.DeclareSort(kind.name, ctx)
    raise TypeError(f"Not a kind: {kind!r}")


def _escape_string(text: str) -> str:
    # z3 reads \u{...} escapes in string literals.
    return "".join(
        c if " " <= c <= "~" and c != "\\" else f"\\u{{{ord(c):x}}}" for c in text
    )


def _val_to_z3(kind: Kind, val: CWVal) -> z3.ExprRef:
    if isinstance(kind, KBool):
        return z3.BoolVal(val != CWInteger(0), ctx)
    elif isinstance(kind, KBounded):
        return z3.BitVecVal(val.value, kind.size, ctx)
    elif isinstance(kind, KUnbounded):
        return z3.IntVal(val.value, ctx)
    elif isinstance(kind, KReal):
        real = val.value
        if not isinstance(real, AlgRational):
            raise UnsupportedOperation(f"Cannot write algebraic root {real} to z3")
        return z3.RealVal(str(real.value), ctx)
    elif isinstance(kind, (KFloat, KDouble)):
        return z3.FPVal(val.value, None, z3_sort(kind), ctx)
    elif isinstance(kind, KChar):
        code = ord(val.value)
        if code > 255:
            raise MismatchedKind(f"Not an 8-bit character: {val.value!r}")
        return z3.BitVecVal(code, 8, ctx)
    elif isinstance(kind, KString):
        return z3.StringVal(_escape_string(val.value), ctx)
    elif isinstance(kind, KList):
        units = [z3.Unit(_val_to_z3(kind.element, e)) for e in val.value]
        if not units:
            return z3.Empty(z3_sort(kind))
        return units[0] if len(units) == 1 else z3.Concat(*units)
    elif isinstance(kind, KUserSort):
        sort = z3_sort(kind)
        if isinstance(kind.shape, Enumerated):
            return sort.constructor(val.value[0])()
        return z3.Const(val.value[1], sort)
    raise TypeError(f"Not a kind: {kind!r}")


def cw_to_z3(cw: CW) -> z3.ExprRef:
    """
    Write a concrete word as a z3 literal.

    >>> cw_to_z3(CW(KBounded(True, 8), CWInteger(-1)))
    255
    """
    return _val_to_z3(cw.kind, cw.val)


def _seq_elements(value: z3.ExprRef) -> List[z3.ExprRef]:
    if z3.is_app_of(value, z3.Z3_OP_SEQ_UNIT):
        return [value.arg(0)]
    elif z3.is_app_of(value, z3.Z3_OP_SEQ_CONCAT):
        return [e for child in value.children() for e in _seq_elements(child)]
    elif z3.is_app_of(value, z3.Z3_OP_SEQ_EMPTY):
        return []
    raise ConstructionError(f"Not a sequence literal: {value}")


def _real_from_z3(value: z3.ExprRef):
    if isinstance(value, z3.AlgebraicNumRef):
        coefficients = tuple(
            (c.as_long(), power) for (power, c) in enumerate(value.poly())
        )
        approximation = value.approx(20).as_decimal(20).rstrip("?")
        return AlgPolyRoot(value.index(), coefficients, approximation)
    return AlgRational(True, value.as_fraction())


def _val_from_z3(kind: Kind, value: z3.ExprRef) -> CWVal:
    if isinstance(kind, KBool):
        return CWInteger(1 if z3.is_true(value) else 0)
    elif isinstance(kind, KBounded):
        return norm_cw(CW(kind, CWInteger(value.as_long()))).val
    elif isinstance(kind, KUnbounded):
        return CWInteger(value.as_long())
    elif isinstance(kind, KReal):
        return CWAlgReal(_real_from_z3(value))
    elif isinstance(kind, (KFloat, KDouble)):
        ebits, sbits = (8, 24) if isinstance(kind, KFloat) else (11, 53)
        parsed = parse_smtlib_literal(value.sexpr(), ebits, sbits)
        if parsed is None:
            raise ConstructionError(f"Not a floating point value: {value.sexpr()}")
        return CWFloat(parsed) if isinstance(kind, KFloat) else CWDouble(parsed)
    elif isinstance(kind, KChar):
        return CWChar(chr(value.as_long()))
    elif isinstance(kind, KString):
        return CWString(value.as_string())
    elif isinstance(kind, KList):
        return CWList(
            tuple(_val_from_z3(kind.element, e) for e in _seq_elements(value))
        )
    elif isinstance(kind, KUserSort):
        if isinstance(kind.shape, Enumerated):
            name = value.decl().name()
            return CWUserSort((kind.shape.constructors.index(name), name))
        return CWUserSort((None, str(value)))
    raise TypeError(f"Not a kind: {kind!r}")


def cw_from_z3(kind: Kind, value: z3.ExprRef) -> CW:
    """
    Read a concrete word out of a z3 model value.

    Bit-vectors come back unsigned from z3; the result is normalized, which
    restores the sign of signed bit-vectors.
    """
    debug("Reading", kind, "from z3 value", value)
    return norm_cw(CW(kind, _val_from_z3(kind, value)))


def cw_from_model(model: z3.ModelRef, kind: Kind, expr: z3.ExprRef) -> CW:
    """Evaluate ``expr`` in ``model`` (completing it as needed) into a word."""
    return cw_from_z3(kind, model.eval(expr, model_completion=True))
