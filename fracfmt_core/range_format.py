"""
Compact rendering of a pair of bounds (e.g. a price range).

When both bounds are tiny and share the same run of leading zeros, the
zero-skip marker and the common digit prefix are shown once and only the
diverging tails are bracketed::

    0.₍₆₎1234[56–99]

Anything else is rendered as two independent human strings joined by
:data:`RANGE_SEP`.
"""

from __future__ import annotations

from .expander import to_decimal_parts
from .fraction import Fraction
from .human import format_human, zero_skip_marker
from .options import ELLIPSIS, ZERO_SKIP_THRESHOLD, FormatOptions, resolve

RANGE_SEP: str = " – "
TAIL_SEP: str = "–"
# Shown for a side whose digits are exhausted by the common prefix.
EMPTY_TAIL: str = "∅"


def _common_prefix_len(a: str, b: str) -> int:
    k = 0
    limit = min(len(a), len(b))
    while k < limit and a[k] == b[k]:
        k += 1
    return k


def format_range(a: Fraction, b: Fraction, opts: FormatOptions | None = None) -> str:
    """
    Format the bounds *a* and *b*.  No rounding; a single trailing
    ellipsis marks hidden or truncated digits on either side.
    """
    opts = resolve(opts)
    pa = to_decimal_parts(a, opts.max_frac_digits)
    pb = to_decimal_parts(b, opts.max_frac_digits)

    def separately() -> str:
        return format_human(a, opts) + RANGE_SEP + format_human(b, opts)

    if pa.int_part != pb.int_part or pa.int_part != "0":
        return separately()
    if pa.sign != pb.sign:
        return separately()

    zeros = pa.leading_zeros
    if zeros != pb.leading_zeros or zeros < ZERO_SKIP_THRESHOLD:
        return separately()

    tail_a = pa.frac_digits[zeros:]
    tail_b = pb.frac_digits[zeros:]
    k = _common_prefix_len(tail_a, tail_b)
    common = tail_a[:k]

    width = max(0, opts.mantissa_digits - len(common))
    rest_a = tail_a[k:k + width]
    rest_b = tail_b[k:k + width]
    more_a = len(tail_a) > k + len(rest_a) or pa.truncated
    more_b = len(tail_b) > k + len(rest_b) or pb.truncated

    sign = "-" if pa.sign < 0 else ""
    skip = zero_skip_marker(zeros, opts.use_subscript)
    dots = ELLIPSIS if more_a or more_b else ""
    return (
        f"{sign}0{opts.decimal_sep}{skip}{common}"
        f"[{rest_a or EMPTY_TAIL}{TAIL_SEP}{rest_b or EMPTY_TAIL}]{dots}"
    )
