"""
Human-friendly rendering of exact fractions.

  - Thousands grouping for the integer part
  - No scientific notation, no rounding
  - "Zero-skip" notation for tiny values: ``0.₍₇₎1234…`` (or ``0.(7)1234…``
    when ``use_subscript`` is off)

Values with a non-zero integer part show their whole expansion (up to
``max_frac_digits``).  Values below one show at most ``mantissa_digits``
digits after the leading zeros.
"""

from __future__ import annotations

from .errors import DivisionByZero
from .expander import DecimalParts, to_decimal_parts
from .fraction import Fraction, int_to_digits, to_int
from .options import ELLIPSIS, ZERO_SKIP_THRESHOLD, FormatOptions, resolve

_SUBSCRIPT_DIGITS = ("₀", "₁", "₂", "₃", "₄", "₅", "₆", "₇", "₈", "₉")
_SUBSCRIPT_OPEN = "₍"
_SUBSCRIPT_CLOSE = "₎"


def group_thousands(int_str: str, sep: str) -> str:
    """Insert *sep* between groups of three digits.  A leading "-" is kept."""
    if int_str in ("", "-"):
        return int_str
    neg = int_str[0] == "-"
    core = int_str[1:] if neg else int_str
    head = len(core) % 3 or 3
    groups = [core[:head]] + [core[i:i + 3] for i in range(head, len(core), 3)]
    grouped = sep.join(groups)
    return "-" + grouped if neg else grouped


def to_subscript(n: int) -> str:
    """``7`` -> ``₍₇₎``, ``12`` -> ``₍₁₂₎``."""
    return _SUBSCRIPT_OPEN + "".join(_SUBSCRIPT_DIGITS[int(c)] for c in str(n)) + _SUBSCRIPT_CLOSE


def zero_skip_marker(zeros: int, use_subscript: bool) -> str:
    return to_subscript(zeros) if use_subscript else f"({zeros})"


def sign_prefix(parts: DecimalParts) -> str:
    return "-" if parts.sign < 0 else ""


def render_parts(parts: DecimalParts, opts: FormatOptions) -> str:
    """Render an already-expanded value with the rules of :func:`format_human`."""
    if parts.sign == 0:
        return "0"
    sign = sign_prefix(parts)
    frac = parts.frac_digits

    if parts.int_part != "0":
        grouped = group_thousands(parts.int_part, opts.group_sep)
        if not frac:
            return sign + grouped
        return sign + grouped + opts.decimal_sep + frac + (ELLIPSIS if parts.truncated else "")

    zeros = parts.leading_zeros
    tail = frac[zeros:zeros + opts.mantissa_digits]
    more = len(frac) > zeros + len(tail) or parts.truncated
    dots = ELLIPSIS if more else ""

    if zeros >= ZERO_SKIP_THRESHOLD:
        skip = zero_skip_marker(zeros, opts.use_subscript)
        return sign + "0" + opts.decimal_sep + skip + tail + dots
    return sign + "0" + opts.decimal_sep + "0" * zeros + tail + dots


def format_human(f: Fraction, opts: FormatOptions | None = None) -> str:
    """
    Format *f* as a readable decimal string.

    >>> format_human(Fraction(1234567, 1000))
    '1,234.567'
    >>> format_human(Fraction(1234, 10**11))
    '0.₍₇₎1234'
    """
    if f.den == 0:
        raise DivisionByZero()
    if f.num == 0:
        return "0"
    opts = resolve(opts)
    return render_parts(to_decimal_parts(f, opts.max_frac_digits), opts)


def format_human_with_decimals(
    value: int | str,
    decimals: int = 18,
    opts: FormatOptions | None = None,
) -> str:
    """Format a raw token amount scaled by ``10**decimals``."""
    amount = to_int(value)
    if amount == 0:
        return "0"
    return format_human(Fraction.from_amount(amount, decimals), opts)


def format_integer_grouped(value: int | str, group_sep: str = ",") -> str:
    """Group an integer with thousands separators only."""
    return group_thousands(int_to_digits(to_int(value)), group_sep)
