"""
allocation.py — Largest Remainder Method

================================================================================
ALGORITHM
================================================================================

Split an integer amount A by weights w_1..w_n so that the parts sum to A
exactly.

1. Every weight becomes an exact Ratio and is scaled to an integer over the
   weights' common denominator ("0.5", "0.25" -> 50, 25). total = sum(w_i).
2. share_i     = floor(A * w_i / total)
   remainder_i = (A * w_i) mod total
3. leftover = A - sum(share_i)
4. The `leftover` shares with the largest remainders get one extra unit
   (ties: lower index first). Parts are returned in input order.

================================================================================
PROOF OF CONSERVATION
================================================================================

Floor division gives 0 <= remainder_i < total for any sign of A, and

    sum(remainder_i) = A * total - total * sum(share_i) = leftover * total

so 0 <= leftover < n: there are always enough shares to receive the leftover
units, and sum(parts) == A.

Since sum(remainder_i) = leftover * total with each remainder_i < total, at
least leftover + 1 remainders are non-zero when leftover > 0. Only shares
with a positive remainder are bumped, hence

    |part_i - A * w_i / total| < 1    (one minor unit)

================================================================================
"""

from __future__ import annotations
import math
from typing import Sequence

from .errors import (
    EmptyWeightsError,
    InvalidArgumentError,
    NegativeWeightError,
    ZeroTotalWeightError,
)
from .logging_config import get_logger
from .parsing import Ratio

logger = get_logger("allocation")

# Upper bound on parts per call (DoS protection)
MAX_ALLOCATION_PARTS: int = 10_000


def normalize_weights(weights: Sequence[object]) -> list[int]:
    """
    Scale weights to integers sharing one implicit denominator.

        ["1", "1.5", 2]       -> [10, 15, 20]
        [Fraction(1, 3), 1]   -> [1, 3]
    """
    if len(weights) == 0:
        raise EmptyWeightsError()
    if len(weights) > MAX_ALLOCATION_PARTS:
        raise InvalidArgumentError(
            f"Cannot allocate to more than {MAX_ALLOCATION_PARTS} parts, got {len(weights)}"
        )

    ratios = []
    for index, weight in enumerate(weights):
        ratio = Ratio.of(weight)
        if ratio.numerator < 0:
            raise NegativeWeightError(index, weight)
        ratios.append(ratio)

    common = math.lcm(*(r.denominator for r in ratios))
    return [r.numerator * (common // r.denominator) for r in ratios]


def allocate(amount: int, weights: Sequence[object]) -> list[int]:
    """
    Allocate amount (minor units) proportionally to weights.

    Args:
        amount: integer amount, any sign
        weights: non-empty sequence of non-negative scalars (int, str, float,
            Decimal, Fraction, Ratio) with a positive sum

    Returns:
        One integer part per weight, in input order, with sum == amount.

    Raises:
        EmptyWeightsError: no weights
        NegativeWeightError: a weight below zero
        ZeroTotalWeightError: all weights zero

    Example:
        allocate(10000, [1, 1, 1]) -> [3334, 3333, 3333]
    """
    normalized = normalize_weights(weights)
    total = sum(normalized)
    if total == 0:
        raise ZeroTotalWeightError()

    shares: list[int] = []
    remainders: list[int] = []
    for weight in normalized:
        share, remainder = divmod(amount * weight, total)
        shares.append(share)
        remainders.append(remainder)

    leftover = amount - sum(shares)
    if leftover:
        order = sorted(range(len(shares)), key=lambda i: (-remainders[i], i))
        for i in order[:leftover]:
            shares[i] += 1
        logger.debug(
            "allocated %d over %d weights, %d leftover unit(s) by largest remainder",
            amount, len(shares), leftover,
        )

    return shares


def split(amount: int, parts: int) -> list[int]:
    """
    Split amount into `parts` near-equal integers (differing by at most one).

        split(100, 3) -> [34, 33, 33]
    """
    if isinstance(parts, bool) or not isinstance(parts, int):
        raise TypeError(f"parts must be int, not {type(parts).__name__}")
    if parts < 1:
        raise InvalidArgumentError(f"parts must be > 0, got {parts}")
    return allocate(amount, [1] * parts)
