"""
parsing.py — Decimal literals to scaled integers and exact ratios

================================================================================
GRAMMAR
================================================================================

A decimal literal is:

    [-] digits [. digits]        e.g. "10", "-0.5", ".25", "7."

Rejected as FormatError:
- scientific notation ("1e5", "2E-3")
- any character outside [0-9.-] (grouping separators, spaces, "+", symbols)
- no digits at all ("", "-", ".")
- more than one decimal point
- a minus sign anywhere but first

Locale-specific formats ("1.234,56") must be normalized by the caller.

================================================================================
TWO TARGETS
================================================================================

1. parse_scaled_amount(literal, decimals) -> int
   The literal is an AMOUNT. Its fraction is right-padded to the currency's
   decimals and folded into the integer:

       parse_scaled_amount("12.3", 2)  ->  1230
       parse_scaled_amount("100.001", 2)  ->  PrecisionExceededError

2. parse_ratio(literal) -> Ratio
   The literal is a SCALAR (multiplier, divisor, weight). Digit counting
   gives an exact fraction:

       parse_ratio("1.5")  ->  Ratio(15, 10)

Neither path ever goes through a float.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
import math
import re

from .errors import FormatError, InvalidArgumentError, PrecisionExceededError

# ISO 4217 tops out at 4; 18 covers ERC-20 style tokens.
MAX_DECIMALS: int = 18

_DIGITS = re.compile(r"[0-9]")
_FORBIDDEN = re.compile(r"[^0-9.\-]")


def validate_decimals(decimals: int) -> int:
    """Check that decimals is an int in 0..MAX_DECIMALS and return it."""
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise InvalidArgumentError(f"decimals must be an int, got {type(decimals).__name__}")
    if not 0 <= decimals <= MAX_DECIMALS:
        raise InvalidArgumentError(
            f"decimals must be between 0 and {MAX_DECIMALS}, got {decimals}"
        )
    return decimals


def _split_literal(literal: str) -> tuple[bool, str, str]:
    """Validate a decimal literal and return (negative, integer_digits, fraction_digits)."""
    if not isinstance(literal, str):
        raise TypeError(f"Decimal literal must be str, not {type(literal).__name__}")

    if "e" in literal or "E" in literal:
        raise FormatError(literal, "scientific notation not supported")
    if _FORBIDDEN.search(literal):
        raise FormatError(literal, "invalid characters")
    if not _DIGITS.search(literal):
        raise FormatError(literal, "no digits")

    parts = literal.split(".")
    if len(parts) > 2:
        raise FormatError(literal, "multiple decimal points")

    negative = literal.startswith("-")
    body = literal[1:] if negative else literal
    if "-" in body:
        raise FormatError(literal, "misplaced minus sign")

    integer_part, _, fractional_part = body.partition(".")
    return negative, integer_part, fractional_part


def parse_scaled_amount(literal: str, decimals: int) -> int:
    """
    Parse an amount literal into minor units at the given scale.

    Raises:
        FormatError: malformed literal
        PrecisionExceededError: more fractional digits than decimals
    """
    validate_decimals(decimals)
    negative, integer_part, fractional_part = _split_literal(literal)

    if len(fractional_part) > decimals:
        raise PrecisionExceededError(literal, len(fractional_part), decimals)

    value = int((integer_part or "0") + fractional_part.ljust(decimals, "0"))
    return -value if negative else value


def render_scaled_amount(value: int, decimals: int) -> str:
    """Inverse of parse_scaled_amount: 1230, 2 -> "12.30"."""
    validate_decimals(decimals)
    sign = "-" if value < 0 else ""
    abs_value = abs(value)

    if decimals == 0:
        return f"{sign}{abs_value}"

    major, minor = divmod(abs_value, 10 ** decimals)
    return f"{sign}{major}.{minor:0{decimals}d}"


# ==============================================================================
# RATIO
# ==============================================================================

@dataclass(frozen=True, slots=True)
class Ratio:
    """
    Exact rational scalar: numerator / denominator, denominator > 0.

    Not reduced: Ratio.of("1.50") keeps denominator 100, which is what the
    allocation engine aligns on.
    """
    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        for name in ("numerator", "denominator"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Ratio {name} must be int, not {type(value).__name__}")
        if self.denominator <= 0:
            raise InvalidArgumentError(
                f"Ratio denominator must be positive, got {self.denominator}"
            )

    @classmethod
    def of(cls, value: object) -> Ratio:
        """
        Build a Ratio from int, decimal-literal str, float, Decimal, Fraction or Ratio.

        Floats go through their shortest repr ("0.1", not 0.1000000000000000055...),
        so 1.5 and "1.5" give the same Ratio. A float whose repr uses an
        exponent ("1e-07") is rejected like any scientific literal.
        """
        if isinstance(value, Ratio):
            return value
        if isinstance(value, bool):
            raise TypeError("bool is not a valid scalar")
        if isinstance(value, int):
            return cls(value, 1)
        if isinstance(value, str):
            return parse_ratio(value)
        if isinstance(value, float):
            if not math.isfinite(value):
                raise FormatError(value, "not a finite number")
            return parse_ratio(repr(value))
        if isinstance(value, Decimal):
            if not value.is_finite():
                raise FormatError(value, "not a finite number")
            numerator, denominator = value.as_integer_ratio()
            return cls(numerator, denominator)
        if isinstance(value, Fraction):
            return cls(value.numerator, value.denominator)
        raise TypeError(f"Cannot use {type(value).__name__} as a scalar")

    @property
    def is_zero(self) -> bool:
        return self.numerator == 0

    def as_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


def parse_ratio(literal: str) -> Ratio:
    """
    Parse a scalar literal into an exact Ratio by counting fractional digits.

        "2"     -> Ratio(2, 1)
        "0.555" -> Ratio(555, 1000)
        "-1.50" -> Ratio(-150, 100)
    """
    negative, integer_part, fractional_part = _split_literal(literal)
    numerator = int((integer_part or "0") + fractional_part)
    return Ratio(-numerator if negative else numerator, 10 ** len(fractional_part))
