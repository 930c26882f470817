"""
Long-division decimal expansion of exact fractions.

``to_decimal_parts`` turns a :class:`~fracfmt_core.fraction.Fraction` into
a sign, an integer digit string and a fractional digit string.  Every
digit it produces is exact: there is no rounding.  Expansions that do
not terminate (``1/3``) are cut at ``max_frac_digits`` and flagged with
``truncated=True`` so callers can show an ellipsis.

    >>> to_decimal_parts(Fraction(1, 4))
    DecimalParts(sign=1, int_part='0', frac_digits='25', truncated=False)
    >>> to_decimal_parts(Fraction(1, 3), 5)
    DecimalParts(sign=1, int_part='0', frac_digits='33333', truncated=True)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import DivisionByZero
from .fraction import Fraction, int_to_digits

logger = logging.getLogger("fracfmt.expander")

# Safety cap on long-division iterations.
DEFAULT_MAX_FRAC_DIGITS: int = 200


@dataclass(frozen=True)
class DecimalParts:
    """Decimal expansion of a fraction."""
    sign: int           # -1, 0 or 1
    int_part: str       # no sign, no leading zeros ("0" for |value| < 1)
    frac_digits: str    # may be empty; never longer than the digit budget
    truncated: bool     # remainder was non-zero at the cutoff

    @property
    def leading_zeros(self) -> int:
        """Length of the run of ``'0'`` at the start of ``frac_digits``."""
        return len(self.frac_digits) - len(self.frac_digits.lstrip("0"))

    @property
    def is_integer(self) -> bool:
        return not self.frac_digits and not self.truncated


ZERO_PARTS = DecimalParts(sign=0, int_part="0", frac_digits="", truncated=False)


def to_decimal_parts(
    f: Fraction,
    max_frac_digits: int = DEFAULT_MAX_FRAC_DIGITS,
) -> DecimalParts:
    """
    Expand *f* into decimal digits by long division.

    Parameters
    ----------
    f : Fraction
        Value to expand.  Need not be reduced; ``den`` may be negative.
    max_frac_digits : int
        Maximum number of fractional digits to produce.

    Raises
    ------
    DivisionByZero
        If ``f.den == 0``.
    """
    num, den = f.num, f.den
    if den == 0:
        raise DivisionByZero()
    if max_frac_digits < 0:
        raise ValueError("max_frac_digits must be non-negative")
    if num == 0:
        return ZERO_PARTS

    sign = -1 if (num < 0) != (den < 0) else 1
    n = -num if num < 0 else num
    d = -den if den < 0 else den

    int_value, r = divmod(n, d)
    digits: list[str] = []
    while r != 0 and len(digits) < max_frac_digits:
        digit, r = divmod(r * 10, d)
        digits.append(str(digit))

    truncated = r != 0
    if truncated:
        logger.debug(
            f"Expansion truncated at {max_frac_digits} digits",
            extra={"max_frac_digits": max_frac_digits, "den_bits": d.bit_length()},
        )

    return DecimalParts(
        sign=sign,
        int_part=int_to_digits(int_value),
        frac_digits="".join(digits),
        truncated=truncated,
    )
