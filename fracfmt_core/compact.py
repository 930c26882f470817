"""
Space-constrained formatting of raw token amounts.

Stricter than :mod:`fracfmt_core.human`:

  - ``|value| >= 1``: exactly two decimal places, truncated (``1.999999``
    becomes ``1.99``, never ``2.00``) and zero-padded (``12`` becomes
    ``12.00``).
  - ``|value| < 1``: three significant digits after the leading zeros,
    which are shown literally up to three and as a zero-skip marker
    beyond that.
"""

from __future__ import annotations

from .expander import to_decimal_parts
from .fraction import Fraction, to_int
from .human import group_thousands, render_parts, sign_prefix
from .options import ZERO_SKIP_THRESHOLD, FormatOptions, resolve

COMPACT_FRAC_DIGITS: int = 2
COMPACT_SIGNIFICANT_DIGITS: int = 3


def format_compact(
    value: int | str,
    decimals: int = 18,
    opts: FormatOptions | None = None,
) -> str:
    """
    Format ``value / 10**decimals`` compactly.

    >>> format_compact(1_999_999, 6)
    '1.99'
    >>> format_compact(1_234_500, 9)
    '0.00123'
    """
    amount = to_int(value)
    if amount == 0:
        return "0"
    opts = resolve(opts)
    frac = Fraction.from_amount(amount, decimals)
    parts = to_decimal_parts(frac, opts.max_frac_digits)
    sign = sign_prefix(parts)

    if abs(amount) >= frac.den:
        shown = parts.frac_digits[:COMPACT_FRAC_DIGITS].ljust(COMPACT_FRAC_DIGITS, "0")
        return sign + group_thousands(parts.int_part, opts.group_sep) + opts.decimal_sep + shown

    zeros = parts.leading_zeros
    if zeros >= ZERO_SKIP_THRESHOLD:
        # The human form is already compact.
        return render_parts(parts, opts)

    significant = parts.frac_digits[zeros:zeros + COMPACT_SIGNIFICANT_DIGITS]
    if not significant:
        return "0"
    return sign + "0" + opts.decimal_sep + "0" * zeros + significant
