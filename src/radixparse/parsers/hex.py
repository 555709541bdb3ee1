from __future__ import annotations

from typing import ClassVar

from ..core.model import Radix
from ..core.parser_base import RadixParser


class HexParser(RadixParser):
    """Hex digits, letters case-insensitive (a/A=10 ... f/F=15).

    Signed parsing computes the plain positional value; there is no
    two's-complement reading of 8-digit values with the top bit set.
    """

    radix: ClassVar = Radix.HEX
    overflow_check: ClassVar = "early"

    legacy_max_length: ClassVar = 8
    # rejected by try_parse_positive_by_radix; out of range anyway
    legacy_rejects: ClassVar = frozenset({"FFF5B198"})
