import json
from typing import ClassVar

import pytest

from radixparse.core.model import (
    ErrorKind, ParseResult, Radix, RadixParseError,
    NullInputError, InvalidRadixError, InvalidCharacterError,
    NegativeNotAllowedError, NumericOverflowError, error_for,
)
from radixparse.core.parser_base import RadixParser
from radixparse.core.registry import _REGISTRY, ParserRegistry, coerce_radix
from radixparse.core.util import DIGIT_VALUES, INT32_MAX, INT32_MIN, digits_for, result_asdict
from radixparse.parsers import DecimalParser, HexParser, OctalParser


class TestParserRegistry:
    """Test radix dispatch."""

    def test_builtin_parsers_registered(self):
        """Importing the package registers one parser per radix."""
        assert _REGISTRY.choose(8) is OctalParser
        assert _REGISTRY.choose(10) is DecimalParser
        assert _REGISTRY.choose(16) is HexParser
        assert _REGISTRY.choose(Radix.HEX) is HexParser

    def test_manual_registration(self):
        """A subclass declared with register=False stays out of the singleton."""
        registry = ParserRegistry()

        class StrictOctal(RadixParser, register=False):
            radix: ClassVar = Radix.OCTAL
            legacy_max_length: ClassVar = 4

        assert _REGISTRY.choose(8) is OctalParser
        registry.register(StrictOctal)
        assert registry.choose(8) is StrictOctal

    def test_unregistered_radix(self):
        """A valid radix with no parser is still an InvalidRadixError."""
        registry = ParserRegistry()
        with pytest.raises(InvalidRadixError, match="No parser for radix 16"):
            registry.choose(16)

    @pytest.mark.parametrize("radix", [0, 2, 7, 9, 36, -8, 999, "8", 8.0, None, True])
    def test_bad_radix(self, radix):
        """Anything other than the ints 8, 10 and 16 is rejected."""
        with pytest.raises(InvalidRadixError):
            coerce_radix(radix)
        with pytest.raises(InvalidRadixError):
            _REGISTRY.choose(radix)


class TestParseResult:
    """Test the result type shared by both calling conventions."""

    def test_ok_unwrap(self):
        res = ParseResult.ok(42)
        assert res.success
        assert res.error is None
        assert res.unwrap() == 42

    @pytest.mark.parametrize(
        "kind,exc",
        [
            (ErrorKind.NULL_INPUT, NullInputError),
            (ErrorKind.INVALID_RADIX, InvalidRadixError),
            (ErrorKind.INVALID_CHARACTER, InvalidCharacterError),
            (ErrorKind.NEGATIVE_NOT_ALLOWED, NegativeNotAllowedError),
            (ErrorKind.OVERFLOW, NumericOverflowError),
        ],
    )
    def test_fail_unwrap_raises_matching_error(self, kind, exc):
        res = ParseResult.fail(kind, "boom")
        assert res.value == 0
        with pytest.raises(exc, match="boom") as info:
            res.unwrap()
        assert info.value.kind is kind
        assert isinstance(info.value, RadixParseError)
        assert isinstance(info.value, ValueError)

    def test_error_for_default_message(self):
        err = error_for(ErrorKind.OVERFLOW)
        assert isinstance(err, NumericOverflowError)
        assert str(err) == "overflow"


class TestRadixParserBase:
    """Test the shared validation and accumulation path."""

    def test_alphabets(self):
        assert OctalParser.alphabet == frozenset("01234567")
        assert DecimalParser.alphabet == frozenset("0123456789")
        assert HexParser.alphabet == frozenset("0123456789abcdefABCDEF")

    def test_none_is_null_input(self):
        res = OctalParser.parse(None)
        assert (res.success, res.value, res.error) == (False, 0, ErrorKind.NULL_INPUT)

    @pytest.mark.parametrize("source", [b"17", 17, ["1", "7"]])
    def test_non_str_is_type_error(self, source):
        with pytest.raises(TypeError):
            HexParser.parse(source)

    def test_error_message_names_position(self):
        res = HexParser.parse("1g")
        assert res.error is ErrorKind.INVALID_CHARACTER
        assert res.message == "invalid character 'g' at position 1 for radix 16"

    def test_sign_offset_in_position(self):
        res = DecimalParser.parse("-1x")
        assert res.message == "invalid character 'x' at position 2 for radix 10"

    def test_early_and_final_overflow_agree(self):
        """Both overflow strategies give the same observable result."""

        class EarlyOctal(RadixParser, register=False):
            radix: ClassVar = Radix.OCTAL
            overflow_check: ClassVar = "early"
            legacy_max_length: ClassVar = 10

        for source in ("17777777777", "20000000000", "777777777777777", "0", "777"):
            assert EarlyOctal.parse(source) == OctalParser.parse(source)

    def test_invalid_character_wins_over_overflow(self):
        """The whole string is validated before accumulation."""
        res = HexParser.parse("FFFFFFFFFFFFG")
        assert res.error is ErrorKind.INVALID_CHARACTER


class TestUtil:
    """Test digit tables and result_asdict."""

    def test_digit_values(self):
        assert DIGIT_VALUES["0"] == 0
        assert DIGIT_VALUES["9"] == 9
        assert DIGIT_VALUES["a"] == DIGIT_VALUES["A"] == 10
        assert DIGIT_VALUES["f"] == DIGIT_VALUES["F"] == 15
        assert "g" not in DIGIT_VALUES

    def test_digits_for(self):
        assert digits_for(8) == frozenset("01234567")
        assert "a" in digits_for(16) and "F" in digits_for(16)

    def test_int32_bounds(self):
        assert INT32_MIN == -2147483648
        assert INT32_MAX == 2147483647

    def test_successful_result(self):
        assert result_asdict(ParseResult.ok(511)) == {"success": True, "value": 511}

    def test_failed_result(self):
        output = result_asdict(ParseResult.fail(ErrorKind.OVERFLOW, "too big"))
        assert output == {"success": False, "error": "overflow", "message": "too big", "value": 0}
        json.dumps(output)

    def test_failed_result_without_kind(self):
        """A hand-built failure with no error kind still serialises."""
        output = result_asdict(ParseResult(False, 0))
        assert output == {"success": False, "error": None, "message": None, "value": 0}
