"""
rounding.py — Rounding engine over exact integer division

================================================================================
PRINCIPLE
================================================================================

Rounding never sees a float. The value to round is always an exact rational
numerator / denominator, and the engine returns the correctly rounded integer
quotient.

    q = numerator / denominator   (truncated toward zero)
    r = numerator - q * denominator

If r == 0 the result is exact and returned as is: no mode may change it.
Otherwise the fractional part is classified as less than, exactly, or more
than one half by comparing 2*|r| with |denominator|, and the mode decides.

================================================================================
MODES
================================================================================

    Mode        < half      = half                  > half
    ---------   ---------   ---------------------   ---------
    FLOOR       toward -inf toward -inf             toward -inf
    CEIL        toward +inf toward +inf             toward +inf
    TRUNCATE    q           q                       q
    HALF_UP     q           away(q)                 away(q)
    HALF_DOWN   q           q                       away(q)
    HALF_EVEN   q           away(q) if q odd else q away(q)

away(q) moves q one unit further from zero.

    5/2    HALF_UP=3  HALF_DOWN=2  HALF_EVEN=2
    7/2    HALF_EVEN=4
    -35/10 HALF_EVEN=-4

================================================================================
"""

from __future__ import annotations
from enum import Enum
from typing import Callable

from .errors import DivisionByZeroError, UnsupportedRoundingModeError
from .logging_config import get_logger

logger = get_logger("rounding")


class RoundingMode(Enum):
    """
    Rounding strategies for fractional minor units.

    The choice has a real impact:
    - HALF_UP: commercial rounding (2.5 -> 3, -2.5 -> -3)
    - HALF_DOWN: ties toward zero (2.5 -> 2, -2.5 -> -2)
    - HALF_EVEN: banker's rounding (2.5 -> 2, 3.5 -> 4), minimizes bias
    - FLOOR: toward negative infinity (2.9 -> 2, -2.1 -> -3)
    - CEIL: toward positive infinity (2.1 -> 3, -2.9 -> -2)
    - TRUNCATE: toward zero (2.9 -> 2, -2.9 -> -2)

    In financial contexts the applicable regulation often mandates one.
    """
    HALF_UP = "HALF_UP"
    HALF_DOWN = "HALF_DOWN"
    HALF_EVEN = "HALF_EVEN"
    FLOOR = "FLOOR"
    CEIL = "CEIL"
    TRUNCATE = "TRUNCATE"


# Default for percentages, float input and currency conversion.
DEFAULT_ROUNDING = RoundingMode.HALF_EVEN

# Outcome of comparing 2*|r| with |denominator|
_LESS, _HALF, _MORE = -1, 0, 1


def resolve_mode(mode: object) -> RoundingMode:
    """Accept a RoundingMode or its string value."""
    if isinstance(mode, RoundingMode):
        return mode
    if isinstance(mode, str):
        try:
            return RoundingMode(mode.upper())
        except ValueError:
            pass
    raise UnsupportedRoundingModeError(mode)


def _truncated_divmod(numerator: int, denominator: int) -> tuple[int, int]:
    """divmod with the quotient truncated toward zero (Python's // floors)."""
    q = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        q = -q
    return q, numerator - q * denominator


def rounded_divide(numerator: int, denominator: int, mode: RoundingMode) -> int:
    """
    Divide two integers and round the exact quotient with the given mode.

    Args:
        numerator: dividend, any sign
        denominator: divisor, any sign, not zero
        mode: RoundingMode (or its string value)

    Returns:
        The rounded integer quotient.

    Raises:
        DivisionByZeroError: if denominator == 0
        UnsupportedRoundingModeError: if mode is not one of the six modes
    """
    if denominator == 0:
        raise DivisionByZeroError(numerator)
    mode = resolve_mode(mode)

    q, r = _truncated_divmod(numerator, denominator)
    if r == 0:
        return q

    positive = (numerator < 0) == (denominator < 0)
    twice_r, abs_den = 2 * abs(r), abs(denominator)
    if twice_r < abs_den:
        half = _LESS
    elif twice_r == abs_den:
        half = _HALF
    else:
        half = _MORE

    away = q + 1 if positive else q - 1

    def _floor() -> int:
        return q if positive else q - 1

    def _ceil() -> int:
        return q + 1 if positive else q

    def _truncate() -> int:
        return q

    def _half_up() -> int:
        return away if half >= _HALF else q

    def _half_down() -> int:
        return away if half == _MORE else q

    def _half_even() -> int:
        if half == _MORE or (half == _HALF and q % 2 != 0):
            return away
        return q

    strategies: dict[RoundingMode, Callable[[], int]] = {
        RoundingMode.FLOOR: _floor,
        RoundingMode.CEIL: _ceil,
        RoundingMode.TRUNCATE: _truncate,
        RoundingMode.HALF_UP: _half_up,
        RoundingMode.HALF_DOWN: _half_down,
        RoundingMode.HALF_EVEN: _half_even,
    }

    strategy = strategies.get(mode)
    if strategy is None:
        raise UnsupportedRoundingModeError(mode)

    result = strategy()
    logger.debug(
        "rounded %d/%d with %s -> %d", numerator, denominator, mode.value, result
    )
    return result
