"""
exactmoney — Exact monetary arithmetic on scaled integers

Money is an integer number of minor units plus a currency whose decimals fix
the scale. No operation silently loses precision: scalars are exact ratios,
inexact results require an explicit rounding mode, and allocations always sum
back to the original amount.

================================================================================
QUICK START
================================================================================

Basic usage:

    from exactmoney import Money, RoundingMode

    price = Money.of_major("19.99", "USD")

    # Exact scalar arithmetic
    price.multiply(3)                                  # 59.97 USD
    price.multiply("0.555")                            # RoundingRequiredError
    price.multiply("0.555", RoundingMode.HALF_EVEN)    # 11.09 USD

    # Split without losing a cent
    Money.of_minor(10000, "USD").allocate([1, 1, 1])   # [33.34, 33.33, 33.33]

Pure functions on plain ints (no currency registry involved):

    from exactmoney import parse_scaled_amount, rounded_divide, allocate

    parse_scaled_amount("12.3", 2)                     # 1230
    rounded_divide(5, 2, RoundingMode.HALF_EVEN)       # 2
    allocate(10000, [1, 1, 1])                         # [3334, 3333, 3333]

================================================================================
"""

# Core Money type
from .core import Money, money

# Algorithms
from .parsing import (
    MAX_DECIMALS,
    Ratio,
    parse_ratio,
    parse_scaled_amount,
    render_scaled_amount,
)
from .rounding import DEFAULT_ROUNDING, RoundingMode, rounded_divide
from .arithmetic import divide, multiply
from .allocation import MAX_ALLOCATION_PARTS, allocate, split

# Currencies and tokens
from .currency import (
    Currency,
    get_currency,
    is_currency_registered,
    register_currency,
    registered_currencies,
)
from .tokens import Token, define_token

# Consumers
from .formatting import format_money
from .converter import Converter
from .bag import MoneyBag

# Errors
from .errors import (
    MoneyError,
    ParseError,
    FormatError,
    PrecisionExceededError,
    RoundingError,
    RoundingRequiredError,
    UnsupportedRoundingModeError,
    DivisionByZeroError,
    AllocationError,
    EmptyWeightsError,
    ZeroTotalWeightError,
    NegativeWeightError,
    CurrencyError,
    CurrencyMismatchError,
    UnknownCurrencyError,
    ExchangeRateNotFoundError,
    InvalidArgumentError,
)

from .logging_config import configure_logging, reset_logging

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Core
    "Money",
    "money",
    # Algorithms
    "MAX_DECIMALS",
    "Ratio",
    "parse_ratio",
    "parse_scaled_amount",
    "render_scaled_amount",
    "DEFAULT_ROUNDING",
    "RoundingMode",
    "rounded_divide",
    "multiply",
    "divide",
    "MAX_ALLOCATION_PARTS",
    "allocate",
    "split",
    # Currencies
    "Currency",
    "get_currency",
    "is_currency_registered",
    "register_currency",
    "registered_currencies",
    "Token",
    "define_token",
    # Consumers
    "format_money",
    "Converter",
    "MoneyBag",
    # Errors
    "MoneyError",
    "ParseError",
    "FormatError",
    "PrecisionExceededError",
    "RoundingError",
    "RoundingRequiredError",
    "UnsupportedRoundingModeError",
    "DivisionByZeroError",
    "AllocationError",
    "EmptyWeightsError",
    "ZeroTotalWeightError",
    "NegativeWeightError",
    "CurrencyError",
    "CurrencyMismatchError",
    "UnknownCurrencyError",
    "ExchangeRateNotFoundError",
    "InvalidArgumentError",
    # Logging
    "configure_logging",
    "reset_logging",
]
