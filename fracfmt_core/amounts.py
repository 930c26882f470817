"""
Display helpers for token amounts.

Amounts are raw on-chain integers (or their decimal strings, as they
arrive from JSON) scaled by a token's ``decimals`` exponent:

    1 ETH = 10**18 wei

All helpers go through :func:`~fracfmt_core.compact.format_compact`, so
nothing here rounds.
"""

from __future__ import annotations

from dataclasses import dataclass

from .compact import format_compact
from .fraction import Fraction, to_int
from .human import format_human
from .options import FormatOptions

# Most ERC-20 tokens use 18 decimal places.
DEFAULT_DECIMALS: int = 18

CURRENCY_SYMBOL: str = "$"

# Uniswap V3 fee tiers are expressed in hundredths of a basis point.
FEE_TIER_DENOMINATOR: int = 1_000_000


@dataclass(frozen=True)
class PnL:
    """Signed profit/loss text and its direction ("gain", "loss", "flat")."""
    text: str
    direction: str


def format_currency(
    value: int | str,
    decimals: int = DEFAULT_DECIMALS,
    opts: FormatOptions | None = None,
) -> str:
    """``"$12,450.00"`` or ``"$0.₍₇₎1234…"``."""
    return CURRENCY_SYMBOL + format_compact(value, decimals, opts)


def format_fees(
    value: int | str,
    decimals: int = DEFAULT_DECIMALS,
    opts: FormatOptions | None = None,
) -> str:
    """Unclaimed fees are always non-negative; same rendering as currency."""
    return format_currency(value, decimals, opts)


def format_pnl(
    value: int | str,
    decimals: int = DEFAULT_DECIMALS,
    opts: FormatOptions | None = None,
) -> PnL:
    amount = to_int(value)
    if amount == 0:
        return PnL(text=CURRENCY_SYMBOL + "0.00", direction="flat")
    formatted = format_compact(abs(amount), decimals, opts)
    if amount > 0:
        return PnL(text=f"+{CURRENCY_SYMBOL}{formatted}", direction="gain")
    return PnL(text=f"-{CURRENCY_SYMBOL}{formatted}", direction="loss")


def format_token_amount(
    value: int | str,
    symbol: str,
    decimals: int = DEFAULT_DECIMALS,
    opts: FormatOptions | None = None,
) -> str:
    """``"1,234.56 ETH"``."""
    return f"{format_compact(value, decimals, opts)} {symbol}"


def format_fee_tier(fee_tier: int) -> str:
    """
    Render a fee tier as a percentage.

    >>> format_fee_tier(3000)
    '0.3%'
    >>> format_fee_tier(100)
    '0.01%'
    >>> format_fee_tier(10000)
    '1%'
    """
    if fee_tier < 0:
        raise ValueError("fee_tier must be non-negative")
    percent = Fraction(fee_tier * 100, FEE_TIER_DENOMINATOR)
    return format_human(percent) + "%"
