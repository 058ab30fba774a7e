import re
from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping, Optional, get_type_hints


def _parse_bool(argstr: str) -> Optional[bool]:
    match = re.fullmatch(r"(1|true|y(?:es)?)|(0|false|no?)", argstr, re.I)
    if match:
        yes, _no = match.groups()
        return bool(yes)
    return None


@dataclass
class ValueOptionSet:
    """
    Encodes some set of partially-specified options.

    This class is used while parsing options from various places.
    It is very similar to `ValueOptions` (which is used when generating values)
    but allows None values everywhere so that options can correctly override
    each other.
    """

    max_sequence_length: Optional[int] = None
    max_char_code: Optional[int] = None
    unbounded_int_bits: Optional[int] = None

    def overlay(self, overrides: "ValueOptionSet") -> "ValueOptionSet":
        kw = {k: v for (k, v) in overrides.__dict__.items() if v is not None}
        return replace(self, **kw)

    @classmethod
    def parser_for(cls, field: str) -> Optional[Callable[[str], Any]]:
        hints = get_type_hints(ValueOptions)
        if field not in hints:
            return None
        ctor = hints[field]
        if ctor is bool:
            return _parse_bool
        return ctor

    @classmethod
    def parse_field(cls, field: str, strval: str) -> Any:
        parser = cls.parser_for(field)
        if parser is None:
            return None
        try:
            return parser(strval)
        except ValueError:
            return None


def option_set_from_dict(source: Mapping[str, object]) -> ValueOptionSet:
    options = ValueOptionSet()
    for optname in (
        "max_sequence_length",
        "max_char_code",
        "unbounded_int_bits",
    ):
        arg_val = source.get(optname, None)
        if arg_val is not None:
            setattr(options, optname, arg_val)
    return options


@dataclass
class ValueOptions:
    """Encodes the options for use while generating concrete values."""

    # Strings and lists get a length in [0, max_sequence_length]:
    max_sequence_length: int
    # Characters are drawn from [0, max_char_code]; not the full unicode range.
    max_char_code: int
    # Unbounded integers are drawn from a signed range of this many bits:
    unbounded_int_bits: int

    def overlay(
        self, overrides: Optional[ValueOptionSet] = None, **kw
    ) -> "ValueOptions":
        if overrides is not None:
            assert not kw
            kw = overrides.__dict__
        kw = {k: v for (k, v) in kw.items() if v is not None}
        ret = replace(self, **kw)
        assert type(ret) is ValueOptions
        return ret


DEFAULT_OPTIONS = ValueOptions(
    max_sequence_length=100,
    max_char_code=255,
    unbounded_int_bits=64,
)
