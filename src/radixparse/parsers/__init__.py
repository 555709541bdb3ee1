"""Radix-specific parsers for radixparse."""

from .decimal import DecimalParser
from .hex import HexParser
from .octal import OctalParser
