"""
Exact rational values for fracfmt.

A ``Fraction`` is a plain numerator/denominator pair of Python ints.  It
is deliberately *not* :class:`fractions.Fraction`: values are never
normalised on construction, so an on-chain amount such as
``Fraction(1_500_000, 10**6)`` keeps its denominator and the formatters
can work on it directly.

    >>> simplify(Fraction(6, 4))
    Fraction(num=3, den=2)
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import DivisionByZero, MalformedLiteral


@dataclass(frozen=True)
class Fraction:
    """An exact rational number ``num / den``.  Not required to be reduced."""
    num: int
    den: int = 1

    @property
    def sign(self) -> int:
        """Return -1, 0 or 1 from the combined signs of num and den."""
        if self.num == 0:
            return 0
        return -1 if (self.num < 0) != (self.den < 0) else 1

    @classmethod
    def from_amount(cls, value: int | str, decimals: int = 18) -> Fraction:
        """Build ``value / 10**decimals`` from a raw integer token amount."""
        if decimals < 0:
            raise ValueError("decimals must be non-negative")
        return cls(to_int(value), 10 ** decimals)

    def __str__(self) -> str:
        return f"{int_to_digits(self.num)}/{int_to_digits(self.den)}"


def to_int(value: int | str) -> int:
    """Coerce an amount arriving as an int or a decimal-integer string."""
    if isinstance(value, bool):
        raise TypeError("bool is not a valid amount")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        body = value[1:] if value[:1] in "+-" else value
        if body and body.isascii() and body.isdigit():
            return digits_to_int(value)
        raise MalformedLiteral(value, "expected an integer amount")
    raise TypeError(f"unsupported amount type: {type(value).__name__}")


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of ``|a|`` and ``|b|``; ``gcd(0, x) == |x|``."""
    a = -a if a < 0 else a
    b = -b if b < 0 else b
    while b != 0:
        a, b = b, a % b
    return a


def simplify(f: Fraction) -> Fraction:
    """Reduce *f* to lowest terms.  Sign placement is left as given."""
    if f.den == 0:
        raise DivisionByZero("Denominator cannot be zero")
    divisor = gcd(f.num, f.den)
    return Fraction(f.num // divisor, f.den // divisor)


# Digits per chunk; stays well under the interpreter's int/str
# conversion limit (4300 digits by default on 3.11+).
_CHUNK_DIGITS = 1000
_CHUNK_BASE = 10 ** _CHUNK_DIGITS


def int_to_digits(n: int) -> str:
    """``str(n)`` for ints of any length."""
    if -_CHUNK_BASE < n < _CHUNK_BASE:
        return str(n)
    sign = "-" if n < 0 else ""
    n = -n if n < 0 else n
    chunks: list[str] = []
    while n >= _CHUNK_BASE:
        n, low = divmod(n, _CHUNK_BASE)
        chunks.append(str(low).rjust(_CHUNK_DIGITS, "0"))
    chunks.append(str(n))
    return sign + "".join(reversed(chunks))


def digits_to_int(s: str) -> int:
    """``int(s)`` for decimal strings of any length (optional leading sign)."""
    if len(s) <= _CHUNK_DIGITS:
        return int(s)
    negative = s[0] == "-"
    body = s[1:] if s[0] in "+-" else s
    value = 0
    for i in range(0, len(body), _CHUNK_DIGITS):
        chunk = body[i:i + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return -value if negative else value
