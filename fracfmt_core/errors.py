"""
Error types raised by fracfmt.

Only two conditions are errors: dividing by a zero denominator and a
malformed decimal literal.  Everything else (zero values, repeating
expansions, magnitude boundaries) is reported as data.
"""

from __future__ import annotations


class DivisionByZero(ZeroDivisionError):
    """Raised when an operation that divides receives ``den == 0``."""

    def __init__(self, message: str = "Division by zero") -> None:
        super().__init__(message)


class MalformedLiteral(ValueError):
    """Raised when a decimal or integer literal cannot be parsed."""

    def __init__(self, literal: str, reason: str = "") -> None:
        message = f"Malformed literal: {literal!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.literal = literal
        self.reason = reason
