from __future__ import annotations
from typing import ClassVar, Literal

from .model import ErrorKind, ParseResult, Radix
from .util import DIGIT_VALUES, INT32_MAX, INT32_MIN, digits_for

OverflowCheck = Literal["early", "final"]


class RadixParser:
    # --- required by subclasses ---
    radix: ClassVar[Radix]
    sign: ClassVar[str | None] = None           # sign token, if the alphabet has one
    overflow_check: ClassVar[OverflowCheck] = "final"
    positive_min: ClassVar[int] = 0             # smallest value a positive-only parse accepts

    # --- legacy guard for try_parse_positive_by_radix ---
    legacy_max_length: ClassVar[int]
    legacy_rejects: ClassVar[frozenset[str]] = frozenset()

    # filled in by __init_subclass__
    alphabet: ClassVar[frozenset[str]]

    @classmethod
    def parse(cls, source: str | None, *, positive: bool = False) -> ParseResult:
        """Parse `source` in this radix into a 32-bit value.

        Never raises for bad data; failures come back as a failed ParseResult.
        Non-string sources other than None are a programming error (TypeError).
        """
        if source is None:
            return ParseResult.fail(ErrorKind.NULL_INPUT, "source is None")
        if not isinstance(source, str):
            raise TypeError(f"source must be str, not {type(source).__name__}")

        negative, digits = cls._split_sign(source)
        offset = len(source) - len(digits)

        # 1) validation pass over the whole string
        if not digits:
            msg = "empty numeral" if not source else "no digits after sign"
            return ParseResult.fail(ErrorKind.INVALID_CHARACTER, msg)
        for pos, ch in enumerate(digits, start=offset):
            if ch not in cls.alphabet:
                return ParseResult.fail(
                    ErrorKind.INVALID_CHARACTER,
                    f"invalid character {ch!r} at position {pos} for radix {int(cls.radix)}",
                )

        # 2) sign policy comes before range checks
        if positive and negative:
            return ParseResult.fail(ErrorKind.NEGATIVE_NOT_ALLOWED, "negative numbers are not allowed")

        # 3) accumulate against the magnitude limit
        limit = -INT32_MIN if negative else INT32_MAX
        magnitude = cls._accumulate(digits, limit)
        if magnitude is None:
            bound = INT32_MIN if negative else INT32_MAX
            return ParseResult.fail(ErrorKind.OVERFLOW, f"{source!r} is out of range (limit {bound})")
        value = -magnitude if negative else magnitude

        if positive and value < cls.positive_min:
            return ParseResult.fail(ErrorKind.NEGATIVE_NOT_ALLOWED, f"{source!r} is not a positive number")
        return ParseResult.ok(value)

    @classmethod
    def _split_sign(cls, source: str) -> tuple[bool, str]:
        if cls.sign is not None and source.startswith(cls.sign):
            return True, source[len(cls.sign):]
        return False, source

    @classmethod
    def _accumulate(cls, digits: str, limit: int) -> int | None:
        """Positional value of `digits`, or None once it passes `limit`."""
        acc = 0
        for ch in digits:
            acc = acc * cls.radix + DIGIT_VALUES[ch]
            if acc > limit:
                if cls.overflow_check == "early":
                    return None
                # final mode: saturate just past the limit so acc stays bounded
                acc = limit + 1
        if acc > limit:
            return None
        return acc

    @classmethod
    def exceeds_legacy_cap(cls, source: str) -> bool:
        return len(source) > cls.legacy_max_length or source in cls.legacy_rejects

    # --- registry hook ---
    def __init_subclass__(cls, register: bool = True, **kw):
        super().__init_subclass__(**kw)
        cls.alphabet = digits_for(cls.radix)
        if register:
            from .registry import _REGISTRY
            _REGISTRY.register(cls)           # noqa: E402
