from symkind.options import (
    DEFAULT_OPTIONS,
    ValueOptionSet,
    ValueOptions,
    option_set_from_dict,
)


def test_ValueOptions_overlay() -> None:
    options = DEFAULT_OPTIONS.overlay(max_sequence_length=3, max_char_code=None)
    assert options.max_sequence_length == 3
    assert options.max_char_code == DEFAULT_OPTIONS.max_char_code
    assert DEFAULT_OPTIONS.max_sequence_length == 100


def test_ValueOptionSet_overlay() -> None:
    base = ValueOptionSet(max_sequence_length=5, max_char_code=127)
    combined = base.overlay(ValueOptionSet(max_char_code=90))
    assert combined == ValueOptionSet(max_sequence_length=5, max_char_code=90)
    options = DEFAULT_OPTIONS.overlay(combined)
    assert isinstance(options, ValueOptions)
    assert (options.max_sequence_length, options.max_char_code) == (5, 90)
    assert options.unbounded_int_bits == 64


def test_parse_field() -> None:
    assert ValueOptionSet.parse_field("max_char_code", "127") == 127
    assert ValueOptionSet.parse_field("max_char_code", "lots") is None
    assert ValueOptionSet.parse_field("no_such_option", "1") is None


def test_option_set_from_dict() -> None:
    source = {"max_sequence_length": 4, "max_char_code": None, "seed": 3}
    assert option_set_from_dict(source) == ValueOptionSet(max_sequence_length=4)
