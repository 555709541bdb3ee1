from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Type


class Radix(IntEnum):
    OCTAL = 8
    DECIMAL = 10
    HEX = 16


class ErrorKind(Enum):
    NULL_INPUT = "null_input"
    INVALID_RADIX = "invalid_radix"
    INVALID_CHARACTER = "invalid_character"
    NEGATIVE_NOT_ALLOWED = "negative_not_allowed"
    OVERFLOW = "overflow"


class RadixParseError(ValueError):
    """Base class for every error raised while parsing a numeral."""
    kind: ErrorKind


class NullInputError(RadixParseError):
    """Raised when the source is None."""
    kind = ErrorKind.NULL_INPUT


class InvalidRadixError(RadixParseError):
    """Raised when the radix is not 8, 10 or 16."""
    kind = ErrorKind.INVALID_RADIX


class InvalidCharacterError(RadixParseError):
    """Raised when the source is empty or holds a character outside the radix alphabet."""
    kind = ErrorKind.INVALID_CHARACTER


class NegativeNotAllowedError(RadixParseError):
    """Raised when a positive-only parse is given a value that is not positive."""
    kind = ErrorKind.NEGATIVE_NOT_ALLOWED


class NumericOverflowError(RadixParseError):
    """Raised when the value does not fit the accepted 32-bit range."""
    kind = ErrorKind.OVERFLOW


class LengthCapWarning(UserWarning):
    """Issued when a legacy length cap rejects an otherwise valid numeral."""


_ERRORS: Dict[ErrorKind, Type[RadixParseError]] = {
    cls.kind: cls
    for cls in (
        NullInputError,
        InvalidRadixError,
        InvalidCharacterError,
        NegativeNotAllowedError,
        NumericOverflowError,
    )
}


def error_for(kind: ErrorKind, message: str | None = None) -> RadixParseError:
    return _ERRORS[kind](message or kind.value.replace("_", " "))


@dataclass(slots=True)
class ParseResult:
    success: bool
    value: int                 # always 0 on failure
    error: ErrorKind | None = None
    message: str | None = None

    @classmethod
    def ok(cls, value: int) -> ParseResult:
        return cls(True, value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> ParseResult:
        return cls(False, 0, kind, message)

    def unwrap(self) -> int:
        """Return the parsed value, or raise the error this result carries."""
        if self.success:
            return self.value
        raise error_for(self.error, self.message)
