from __future__ import annotations

from typing import ClassVar

from ..core.model import Radix
from ..core.parser_base import RadixParser


class OctalParser(RadixParser):
    """Octal digits '0'-'7'; no sign token, zero allowed."""

    radix: ClassVar = Radix.OCTAL
    overflow_check: ClassVar = "final"

    legacy_max_length: ClassVar = 10
