from __future__ import annotations

from typing import ClassVar

from ..core.model import Radix
from ..core.parser_base import RadixParser


class DecimalParser(RadixParser):
    """Decimal digits with an optional leading '-'.

    The positive-only path rejects zero as well as negatives.
    """

    radix: ClassVar = Radix.DECIMAL
    sign: ClassVar = "-"
    overflow_check: ClassVar = "final"
    positive_min: ClassVar = 1

    legacy_max_length: ClassVar = 10
