import pytest

from symkind.kind import (
    RESERVED_PREFIXES,
    Enumerated,
    KBool,
    KBounded,
    KChar,
    KDouble,
    KFloat,
    KList,
    KReal,
    KString,
    KUnbounded,
    KUserSort,
    Opaque,
    int_size_of,
    kind_has_sign,
    parse_kind,
    show_base_kind,
    smt_type,
)
from symkind.util import ConstructionError, UnsupportedOperation

COLOR = KUserSort("Color", Enumerated(("Red", "Green")))
BUILTIN_KINDS = [
    KBool(),
    KBounded(False, 8),
    KBounded(True, 8),
    KBounded(False, 64),
    KUnbounded(),
    KReal(),
    KFloat(),
    KDouble(),
    KChar(),
    KString(),
    KList(KBounded(True, 32)),
    KList(KList(KString())),
]


def test_display_names():
    assert str(KBool()) == "SBool"
    assert str(KBounded(False, 16)) == "SWord16"
    assert str(KBounded(True, 16)) == "SInt16"
    assert str(KUnbounded()) == "SInteger"
    assert str(KReal()) == "SReal"
    assert str(KFloat()) == "SFloat"
    assert str(KDouble()) == "SDouble"
    assert str(KString()) == "SString"
    assert str(KChar()) == "SChar"
    assert str(KList(KBool())) == "[SBool]"
    assert str(COLOR) == "Color"


def test_smt_type():
    assert smt_type(KBool()) == "Bool"
    assert smt_type(KBounded(True, 12)) == "(_ BitVec 12)"
    assert smt_type(KBounded(False, 12)) == "(_ BitVec 12)"
    assert smt_type(KUnbounded()) == "Int"
    assert smt_type(KReal()) == "Real"
    assert smt_type(KFloat()) == "(_ FloatingPoint 8 24)"
    assert smt_type(KDouble()) == "(_ FloatingPoint 11 53)"
    assert smt_type(KString()) == "String"
    assert smt_type(KChar()) == "(_ BitVec 8)"
    assert smt_type(KList(KChar())) == "(Seq (_ BitVec 8))"
    assert smt_type(COLOR) == "Color"


@pytest.mark.parametrize("kind", BUILTIN_KINDS, ids=str)
def test_parse_kind_round_trip(kind):
    assert parse_kind(str(kind)) == kind


def test_parse_kind_user_sorts():
    assert parse_kind("[Color]", [COLOR]) == KList(COLOR)
    with pytest.raises(ConstructionError, match="Unknown kind"):
        parse_kind("Color")


def test_kind_has_sign():
    assert not kind_has_sign(KBool())
    assert kind_has_sign(KBounded(True, 8))
    assert not kind_has_sign(KBounded(False, 8))
    for kind in (KUnbounded(), KReal(), KFloat(), KDouble()):
        assert kind_has_sign(kind)
    for kind in (KChar(), KString(), KList(KUnbounded()), COLOR):
        assert not kind_has_sign(kind)


def test_int_size_of_only_for_bitvectors():
    assert int_size_of(KBounded(True, 24)) == 24
    for kind in (
        KBool(),
        KUnbounded(),
        KReal(),
        KFloat(),
        KDouble(),
        KChar(),
        KString(),
        KList(KBool()),
        COLOR,
    ):
        with pytest.raises(UnsupportedOperation):
            int_size_of(kind)


def test_show_base_kind():
    assert show_base_kind(KBool()) == "Bool"
    assert show_base_kind(KBounded(True, 8)) == "Int8"
    assert show_base_kind(KUnbounded()) == "Integer"
    # user sorts are left alone, even when they start with an "S":
    assert show_base_kind(KUserSort("Suit", Opaque("x"))) == "Suit"


def test_kinds_are_hashable_and_structural():
    assert KBounded(True, 8) == KBounded(True, 8)
    assert KBounded(True, 8) != KBounded(False, 8)
    assert len({KBool(), KBool(), KList(KBool()), KList(KBool())}) == 2
    assert COLOR != KUserSort("Color", Opaque("Color is not an enumeration"))


def test_kind_ordering_follows_declaration_order():
    assert sorted([KList(KBool()), KString(), KBounded(False, 8), KBool()]) == [
        KBool(),
        KBounded(False, 8),
        KString(),
        KList(KBool()),
    ]
    assert KBounded(False, 64) < KBounded(True, 8)
    assert KReal() < COLOR < KFloat()


def test_reserved_prefixes():
    assert "SInteger" in RESERVED_PREFIXES
    assert "[" in RESERVED_PREFIXES
