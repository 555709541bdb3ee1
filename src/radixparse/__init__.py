"""radixparse - strict octal, decimal and hex numeral parsing into 32-bit ints."""

import warnings

from .core.model import (                                             # re-export
    ErrorKind, LengthCapWarning, ParseResult, Radix,
    RadixParseError, NullInputError, InvalidRadixError, InvalidCharacterError,
    NegativeNotAllowedError, NumericOverflowError,
)
from .core.registry import _REGISTRY                                  # singleton
from .core.util import INT32_MAX, INT32_MIN, result_asdict

# Import parsers to trigger registration
from . import parsers  # noqa: F401


def parse(source, radix, *, positive: bool = False) -> ParseResult:
    """Parse `source` in `radix`, reporting data errors in the returned ParseResult.

    An unsupported radix raises InvalidRadixError before `source` is looked at.
    """
    parser_cls = _REGISTRY.choose(radix)
    return parser_cls.parse(source, positive=positive)


def _as_tuple(res: ParseResult) -> tuple[bool, int]:
    return res.success, res.value


# --------------------------- throwing ------------------------------ #
def parse_positive_octal(source) -> int:
    """Parse an octal numeral ('0'-'7'); zero is accepted."""
    return parse(source, Radix.OCTAL, positive=True).unwrap()


def parse_positive_decimal(source) -> int:
    """Parse a decimal numeral; zero and negatives raise NegativeNotAllowedError."""
    return parse(source, Radix.DECIMAL, positive=True).unwrap()


def parse_positive_hex(source) -> int:
    """Parse a hex numeral, case-insensitively; zero is accepted."""
    return parse(source, Radix.HEX, positive=True).unwrap()


def parse_positive_by_radix(source, radix) -> int:
    return parse(source, radix, positive=True).unwrap()


def parse_by_radix(source, radix) -> int:
    """Signed parse. Only decimal has a sign token ('-')."""
    return parse(source, radix).unwrap()


# -------------------------- non-throwing --------------------------- #
def try_parse_positive_octal(source) -> tuple[bool, int]:
    return _as_tuple(parse(source, Radix.OCTAL, positive=True))


def try_parse_positive_decimal(source) -> tuple[bool, int]:
    return _as_tuple(parse(source, Radix.DECIMAL, positive=True))


def try_parse_positive_hex(source) -> tuple[bool, int]:
    return _as_tuple(parse(source, Radix.HEX, positive=True))


def try_parse_positive_by_radix(source, radix, *, length_caps: bool = True) -> tuple[bool, int]:
    """Non-throwing positive parse by radix.

    With `length_caps` (the default) the legacy guards stay in force: more than
    10 characters for octal/decimal, more than 8 for hex, and the literal
    "FFF5B198" all return (False, 0) even when the exact range check would
    accept the numeral. Pass ``length_caps=False`` to apply the range check only.
    """
    parser_cls = _REGISTRY.choose(radix)
    res = parser_cls.parse(source, positive=True)
    if length_caps and source is not None and parser_cls.exceeds_legacy_cap(source):
        if res.success:
            warnings.warn(
                f"{source!r} is a valid radix-{int(parser_cls.radix)} numeral but exceeds "
                f"the legacy length cap of {parser_cls.legacy_max_length} characters",
                LengthCapWarning,
                stacklevel=2,
            )
        return False, 0
    return _as_tuple(res)


def try_parse_by_radix(source, radix) -> tuple[bool, int]:
    return _as_tuple(parse(source, radix))


__all__ = [
    "parse", "parse_positive_octal", "parse_positive_decimal", "parse_positive_hex",
    "parse_positive_by_radix", "parse_by_radix",
    "try_parse_positive_octal", "try_parse_positive_decimal", "try_parse_positive_hex",
    "try_parse_positive_by_radix", "try_parse_by_radix",
    "Radix", "ErrorKind", "ParseResult", "result_asdict", "INT32_MIN", "INT32_MAX",
    "RadixParseError", "NullInputError", "InvalidRadixError", "InvalidCharacterError",
    "NegativeNotAllowedError", "NumericOverflowError", "LengthCapWarning",
]
