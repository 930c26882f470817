"""
Decimal literal parsing for user-entered amounts.

``parse_decimal("1.5", 6)`` gives ``Fraction(1500000, 10**6)``.  Digits
beyond ``decimals`` are dropped, not rounded: a token cannot represent
them anyway.
"""

from __future__ import annotations

import logging

from .errors import MalformedLiteral
from .fraction import Fraction, digits_to_int

logger = logging.getLogger("fracfmt.parser")


def _is_digits(s: str) -> bool:
    return s.isascii() and s.isdigit()


def parse_decimal(literal: str, decimals: int = 18, decimal_sep: str = ".") -> Fraction:
    """
    Parse *literal* into ``Fraction(n, 10**decimals)``.

    Accepts an optional leading sign, digits and at most one separator;
    either side of the separator may be empty but not both.

    Raises
    ------
    MalformedLiteral
        On any other character, more than one separator, or no digits.
    """
    if decimals < 0:
        raise ValueError("decimals must be non-negative")
    if not isinstance(literal, str):
        raise TypeError(f"literal must be str, not {type(literal).__name__}")

    body = literal
    negative = False
    if body[:1] in ("+", "-"):
        negative = body[0] == "-"
        body = body[1:]

    pieces = body.split(decimal_sep)
    if len(pieces) > 2:
        logger.debug("Rejected literal", extra={"reason": "multiple separators"})
        raise MalformedLiteral(literal, "more than one decimal separator")
    int_str = pieces[0]
    frac_str = pieces[1] if len(pieces) == 2 else ""

    if not int_str and not frac_str:
        raise MalformedLiteral(literal, "no digits")
    for piece in (int_str, frac_str):
        if piece and not _is_digits(piece):
            logger.debug("Rejected literal", extra={"reason": "non-digit characters"})
            raise MalformedLiteral(literal, "non-digit characters")

    padded = frac_str.ljust(decimals, "0")[:decimals]
    num = digits_to_int((int_str or "0") + padded)
    return Fraction(-num if negative else num, 10 ** decimals)
