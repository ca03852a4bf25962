"""
Exact multiply and divide on scaled integers.

A scalar such as 1.5 is an exact Ratio (15/10), never a float, so chained
operations do not compound rounding error. The result is rounded only when
it is not an integer, and only with a mode the caller chose.
"""

from __future__ import annotations
from typing import Optional

from .errors import DivisionByZeroError, RoundingRequiredError
from .parsing import Ratio
from .rounding import RoundingMode, rounded_divide


def _quotient(
    operation: str,
    product: int,
    denominator: int,
    rounding: Optional[RoundingMode],
) -> int:
    if product % denominator == 0:
        return product // denominator
    if rounding is None:
        raise RoundingRequiredError(operation, product, denominator)
    return rounded_divide(product, denominator, rounding)


def multiply(amount: int, multiplier: object, rounding: Optional[RoundingMode] = None) -> int:
    """
    amount * multiplier, in minor units.

        multiply(100, "0.555")                      -> RoundingRequiredError
        multiply(100, "0.555", RoundingMode.HALF_UP) -> 56
        multiply(100, "0.555", RoundingMode.FLOOR)   -> 55
    """
    ratio = Ratio.of(multiplier)
    return _quotient("multiply", amount * ratio.numerator, ratio.denominator, rounding)


def divide(amount: int, divisor: object, rounding: Optional[RoundingMode] = None) -> int:
    """
    amount / divisor, in minor units.

    Raises:
        DivisionByZeroError: divisor is zero, checked before any rounding
        RoundingRequiredError: inexact result and no rounding mode
    """
    ratio = Ratio.of(divisor)
    if ratio.is_zero:
        raise DivisionByZeroError(amount)
    return _quotient("divide", amount * ratio.denominator, ratio.numerator, rounding)
