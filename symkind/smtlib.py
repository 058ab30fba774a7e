import math
import re
import struct
from fractions import Fraction
from typing import List, Optional, Union

from symkind.algreal import AlgRational
from symkind.concrete import (
    CW,
    CWAlgReal,
    CWChar,
    CWDouble,
    CWFloat,
    CWInteger,
    CWString,
    norm_cw,
)
from symkind.kind import (
    KBool,
    KBounded,
    KChar,
    KDouble,
    KFloat,
    Kind,
    KReal,
    KString,
    KUnbounded,
)
from symkind.util import ConstructionError, UnsupportedOperation

_SL2_PARSE_FLOAT_RE = re.compile(
    r"\(fp #([bx][0-9a-fA-F]+) #([bx][0-9a-fA-F]+) #([bx][0-9a-fA-F]+)\)"
)
_SL2_FLOAT_CONST_RE = re.compile(r"\(_ ([+-]zero|[+-]oo|NaN) (\d+) (\d+)\)")
_SL2_BV_RE = re.compile(r"\(_ bv(\d+) (\d+)\)")

LITERAL_CONSTS = {
    "-zero": -0.0,
    "+zero": 0.0,
    "-oo": -math.inf,
    "+oo": math.inf,
    "NaN": math.nan,
}

# (exponent bits, significand bits) -> (struct format for the bits, for the float)
_FP_FORMATS = {
    (11, 53): ("Q", "d"),
    (8, 24): ("I", "f"),
}


def parse_smtlib_literal(input: str, ebits: int = 11, sbits: int = 53):
    """
    Parse a floating point literal of the given format.

    >>> parse_smtlib_literal("(fp #b0 #b01111111111 #x0000000000000)")
    1.0
    >>> parse_smtlib_literal("(_ -oo 8 24)", 8, 24)
    -inf
    """
    const_match = _SL2_FLOAT_CONST_RE.fullmatch(input)
    if const_match:
        name, _, _ = const_match.groups()
        return LITERAL_CONSTS[name]
    match = _SL2_PARSE_FLOAT_RE.fullmatch(input)
    if match:
        if (ebits, sbits) not in _FP_FORMATS:
            raise UnsupportedOperation(f"No float format with {ebits}/{sbits} bits")
        bits_fmt, float_fmt = _FP_FORMATS[(ebits, sbits)]
        sign, exp, significand = (int("0" + g, base=0) for g in match.groups())
        total = ebits + sbits
        bits = sign << (total - 1) | exp << (sbits - 1) | significand
        return struct.unpack(float_fmt, struct.pack(bits_fmt, bits))[0]
    return None


SExpr = Union[str, List["SExpr"]]


def _tokenize(text: str) -> List[str]:
    return re.findall(r'\(|\)|"(?:[^"]|"")*"|[^\s()]+', text)


def parse_sexpr(text: str) -> SExpr:
    """
    Parse one s-expression into nested lists of atoms.

    >>> parse_sexpr("(- (/ 1.0 3.0))")
    ['-', ['/', '1.0', '3.0']]
    """
    tokens = _tokenize(text)
    stack: List[List[SExpr]] = [[]]
    for token in tokens:
        if token == "(":
            stack.append([])
        elif token == ")":
            if len(stack) < 2:
                raise ConstructionError(f"Unbalanced s-expression: {text}")
            done = stack.pop()
            stack[-1].append(done)
        else:
            stack[-1].append(token)
    if len(stack) != 1 or len(stack[0]) != 1:
        raise ConstructionError(f"Not a single s-expression: {text}")
    return stack[0][0]


def _eval_number(expr: SExpr) -> Fraction:
    if isinstance(expr, str):
        try:
            return Fraction(expr)
        except ValueError:
            raise ConstructionError(f"Not a number: {expr}")
    if len(expr) == 2 and expr[0] == "-":
        return -_eval_number(expr[1])
    if len(expr) == 3 and expr[0] == "/":
        return _eval_number(expr[1]) / _eval_number(expr[2])
    raise ConstructionError(f"Not a numeric literal: {expr}")


def _parse_bitvector(text: str) -> int:
    if text.startswith("#b"):
        return int(text[2:], 2)
    if text.startswith("#x"):
        return int(text[2:], 16)
    match = _SL2_BV_RE.fullmatch(text)
    if match:
        return int(match.group(1))
    raise ConstructionError(f"Not a bit-vector literal: {text}")


_STRING_ESCAPE_RE = re.compile(r"\\u\{([0-9a-fA-F]{1,5})\}|\\u([0-9a-fA-F]{4})")


def _parse_string(text: str) -> str:
    if len(text) < 2 or text[0] != '"' or text[-1] != '"':
        raise ConstructionError(f"Not a string literal: {text}")
    body = text[1:-1].replace('""', '"')
    return _STRING_ESCAPE_RE.sub(
        lambda m: chr(int(m.group(1) or m.group(2), 16)), body
    )


def cw_from_smtlib(kind: Kind, text: str) -> CW:
    """
    Read a concrete word from an SMT-LIB literal of the given kind.

    >>> str(cw_from_smtlib(KBounded(True, 8), "#xff"))
    '-1 :: Int8'
    >>> str(cw_from_smtlib(KReal(), "(- (/ 1 4))"))
    '-0.25 :: Real'
    """
    text = text.strip()
    if isinstance(kind, KBool):
        if text not in ("true", "false"):
            raise ConstructionError(f"Not a boolean literal: {text}")
        return CW(kind, CWInteger(1 if text == "true" else 0))
    elif isinstance(kind, KBounded):
        return norm_cw(CW(kind, CWInteger(_parse_bitvector(text))))
    elif isinstance(kind, KChar):
        return CW(kind, CWChar(chr(_parse_bitvector(text))))
    elif isinstance(kind, KUnbounded):
        value = _eval_number(parse_sexpr(text))
        if value.denominator != 1:
            raise ConstructionError(f"Not an integer literal: {text}")
        return CW(kind, CWInteger(value.numerator))
    elif isinstance(kind, KReal):
        return CW(kind, CWAlgReal(AlgRational(True, _eval_number(parse_sexpr(text)))))
    elif isinstance(kind, (KFloat, KDouble)):
        ebits, sbits = (8, 24) if isinstance(kind, KFloat) else (11, 53)
        parsed: Optional[float] = parse_smtlib_literal(text, ebits, sbits)
        if parsed is None:
            raise ConstructionError(f"Not a floating point literal: {text}")
        if isinstance(kind, KFloat):
            return CW(kind, CWFloat(parsed))
        return CW(kind, CWDouble(parsed))
    elif isinstance(kind, KString):
        return CW(kind, CWString(_parse_string(text)))
    raise UnsupportedOperation(f"Cannot read {kind} values from SMT-LIB literals")
