"""
Display options and locale presets.

Options are immutable records; formatters take them as an explicit
argument (``None`` means :data:`FORMAT_PRESET_EN`).  There is no global
"current locale".
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .expander import DEFAULT_MAX_FRAC_DIGITS

# Leading fractional zeros at which the zero-skip marker replaces them.
ZERO_SKIP_THRESHOLD: int = 4

# Appended when digits were hidden or the expansion was truncated.
ELLIPSIS: str = "…"


@dataclass(frozen=True)
class FormatOptions:
    """
    Attributes:
        group_sep: Thousands separator, e.g. "," for en-US, "." for de-DE.
        decimal_sep: Decimal separator, e.g. "." for en-US, "," for de-DE.
        use_subscript: Render zero-skip as ``₍7₎`` instead of ``(7)``.
        mantissa_digits: Digits shown after any skipped zeros (truncated,
                         never rounded).
        max_frac_digits: Cap on digits produced by long division.
    """
    group_sep: str = ","
    decimal_sep: str = "."
    use_subscript: bool = True
    mantissa_digits: int = 8
    max_frac_digits: int = DEFAULT_MAX_FRAC_DIGITS

    def __post_init__(self):
        if self.mantissa_digits < 0:
            raise ValueError("mantissa_digits must be non-negative")
        if self.max_frac_digits < 0:
            raise ValueError("max_frac_digits must be non-negative")
        if not self.decimal_sep:
            raise ValueError("decimal_sep must not be empty")


FORMAT_PRESET_EN = FormatOptions(group_sep=",", decimal_sep=".")
FORMAT_PRESET_DE = FormatOptions(group_sep=".", decimal_sep=",")

PRESETS: dict[str, FormatOptions] = {
    "en": FORMAT_PRESET_EN,
    "de": FORMAT_PRESET_DE,
}


def with_preset(preset: FormatOptions = FORMAT_PRESET_EN, **overrides) -> FormatOptions:
    """Return *preset* with the given fields replaced.

    >>> with_preset(FORMAT_PRESET_DE, mantissa_digits=4).decimal_sep
    ','
    """
    return replace(preset, **overrides)


def resolve(opts: FormatOptions | None) -> FormatOptions:
    return FORMAT_PRESET_EN if opts is None else opts
