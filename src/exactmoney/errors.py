"""
errors.py — Typed exception hierarchy

================================================================================
WHY TYPED EXCEPTIONS
================================================================================

Callers must be able to tell a syntax bug ("1,000.00") from a business rule
("100.001" in a two-decimal currency) without parsing messages. Every error
therefore has:

1. its own class (catch by type, not by message)
2. a `code` class attribute (machine-readable, stable)
3. structured attributes (the literal, the digit count, the operation, ...)

================================================================================
HIERARCHY
================================================================================

    MoneyError
    |
    +-- ParseError
    |   +-- FormatError
    |   +-- PrecisionExceededError
    |
    +-- RoundingError
    |   +-- RoundingRequiredError
    |   +-- UnsupportedRoundingModeError
    |
    +-- DivisionByZeroError
    |
    +-- AllocationError
    |   +-- EmptyWeightsError
    |   +-- ZeroTotalWeightError
    |   +-- NegativeWeightError
    |
    +-- CurrencyError
    |   +-- CurrencyMismatchError
    |   +-- UnknownCurrencyError
    |   +-- ExchangeRateNotFoundError
    |
    +-- InvalidArgumentError

Every error is fatal to the operation that raised it. Nothing is retried
internally: RoundingRequiredError carries what the caller needs to retry
with an explicit RoundingMode.

================================================================================
"""

from __future__ import annotations
from fractions import Fraction


class MoneyError(Exception):
    """Base exception for all exactmoney errors."""

    code: str = "MONEY_ERROR"


# ==============================================================================
# PARSING
# ==============================================================================

class ParseError(MoneyError):
    """Base exception for decimal-literal parsing errors."""

    code: str = "PARSE_ERROR"


class FormatError(ParseError):
    """Literal is malformed: exponent, stray characters, no digits, ..."""

    code: str = "INVALID_FORMAT"

    def __init__(self, literal: object, reason: str):
        self.literal = literal
        self.reason = reason
        super().__init__(f"Invalid amount literal {literal!r}: {reason}")


class PrecisionExceededError(ParseError):
    """
    Literal has more fractional digits than the currency allows.

    Kept apart from FormatError: the literal is well formed, and the caller
    may decide to round it away instead of rejecting it.
    """

    code: str = "PRECISION_EXCEEDED"

    def __init__(self, literal: str, digits: int, decimals: int):
        self.literal = literal
        self.digits = digits
        self.decimals = decimals
        super().__init__(
            f"Precision {digits} of {literal!r} exceeds currency decimals {decimals}"
        )


# ==============================================================================
# ROUNDING / DIVISION
# ==============================================================================

class RoundingError(MoneyError):
    """Base exception for rounding errors."""

    code: str = "ROUNDING_ERROR"


class RoundingRequiredError(RoundingError):
    """An inexact operation was attempted without a rounding mode."""

    code: str = "ROUNDING_REQUIRED"

    def __init__(self, operation: str, numerator: int, denominator: int):
        self.operation = operation
        self.numerator = numerator
        self.denominator = denominator
        super().__init__(
            f"Rounding required for {operation}: result {self.result} "
            f"is not an integer. Pass rounding=RoundingMode.<MODE> "
            f"(HALF_UP, HALF_DOWN, HALF_EVEN, FLOOR, CEIL, TRUNCATE)."
        )

    @property
    def result(self) -> Fraction:
        """The exact, unrounded result."""
        return Fraction(self.numerator, self.denominator)


class UnsupportedRoundingModeError(RoundingError):
    code: str = "UNSUPPORTED_ROUNDING_MODE"

    def __init__(self, mode: object):
        self.mode = mode
        super().__init__(f"Unsupported rounding mode: {mode!r}")


class DivisionByZeroError(MoneyError):
    """Divisor is zero. Never coerced to infinity or NaN."""

    code: str = "DIVISION_BY_ZERO"

    def __init__(self, numerator: int | None = None):
        self.numerator = numerator
        super().__init__("Division by zero")


# ==============================================================================
# ALLOCATION
# ==============================================================================

class AllocationError(MoneyError):
    """Base exception for allocation errors."""

    code: str = "ALLOCATION_ERROR"


class EmptyWeightsError(AllocationError):
    code: str = "EMPTY_WEIGHTS"

    def __init__(self):
        super().__init__("Cannot allocate to an empty list of weights")


class ZeroTotalWeightError(AllocationError):
    code: str = "ZERO_TOTAL_WEIGHT"

    def __init__(self):
        super().__init__("Total weight must be greater than zero")


class NegativeWeightError(AllocationError):
    code: str = "NEGATIVE_WEIGHT"

    def __init__(self, index: int, weight: object):
        self.index = index
        self.weight = weight
        super().__init__(f"Weight at index {index} is negative: {weight!r}")


# ==============================================================================
# CURRENCY
# ==============================================================================

class CurrencyError(MoneyError):
    """Base exception for currency errors."""

    code: str = "CURRENCY_ERROR"


class CurrencyMismatchError(CurrencyError):
    """Operation between amounts of different currencies."""

    code: str = "CURRENCY_MISMATCH"

    def __init__(self, expected: str, received: str):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Currency mismatch: expected {expected}, received {received}. "
            f"Use a Converter to convert between currencies first."
        )


class UnknownCurrencyError(CurrencyError):
    code: str = "UNKNOWN_CURRENCY"

    def __init__(self, code: str):
        self.currency_code = code
        super().__init__(f"Currency {code!r} not found in registry")


class ExchangeRateNotFoundError(CurrencyError):
    code: str = "EXCHANGE_RATE_NOT_FOUND"

    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(
            f"Exchange rate missing for conversion from {source} to {target}"
        )


class InvalidArgumentError(MoneyError):
    """An argument has the right type but an unusable value."""

    code: str = "INVALID_ARGUMENT"
