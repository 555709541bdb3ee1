from __future__ import annotations
from typing import Dict, Type

from .parser_base import RadixParser
from .model import InvalidRadixError, Radix


def coerce_radix(radix) -> Radix:
    """Return `radix` as a Radix member or raise InvalidRadixError."""
    # bool is an int subclass and 8.0 == 8 would slip through Radix()
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise InvalidRadixError(f"radix must be 8, 10 or 16, got {radix!r}")
    try:
        return Radix(radix)
    except ValueError:
        raise InvalidRadixError(f"radix must be 8, 10 or 16, got {radix!r}") from None


class ParserRegistry:
    def __init__(self) -> None:
        self._by_radix: Dict[Radix, Type[RadixParser]] = {}

    # called from RadixParser.__init_subclass__
    def register(self, parser_cls: Type[RadixParser]) -> None:
        self._by_radix[coerce_radix(parser_cls.radix)] = parser_cls

    def choose(self, radix) -> Type[RadixParser]:
        key = coerce_radix(radix)
        parser = self._by_radix.get(key)
        if parser is None:
            raise InvalidRadixError(f"No parser for radix {int(key)}")
        return parser


# singleton used project-wide
_REGISTRY = ParserRegistry()
