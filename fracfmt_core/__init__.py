"""
fracfmt - exact fixed-point decimal formatting for token amounts.

Key features:
- Exact rational values (``Fraction``) over Python's unbounded ints
- Bounded long-division expansion with truncation flag, never rounding
- Human formatting with thousands grouping and zero-skip notation
  (``0.₍₇₎1234…``) for tiny values
- Compact two-decimal / three-significant-digit formatting
- Range formatting that factors out a shared digit prefix
- Decimal literal parsing back to exact fractions
"""

__version__ = "1.0.0"

from .compact import format_compact
from .errors import DivisionByZero, MalformedLiteral
from .expander import DecimalParts, to_decimal_parts
from .fraction import Fraction, gcd, simplify
from .human import format_human, format_human_with_decimals, format_integer_grouped
from .options import FORMAT_PRESET_DE, FORMAT_PRESET_EN, FormatOptions, with_preset
from .parser import parse_decimal
from .range_format import format_range

__all__ = [
    "DecimalParts",
    "DivisionByZero",
    "FORMAT_PRESET_DE",
    "FORMAT_PRESET_EN",
    "FormatOptions",
    "Fraction",
    "MalformedLiteral",
    "format_compact",
    "format_human",
    "format_human_with_decimals",
    "format_integer_grouped",
    "format_range",
    "gcd",
    "parse_decimal",
    "simplify",
    "to_decimal_parts",
    "with_preset",
]
