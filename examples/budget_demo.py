#!/usr/bin/env python3
"""
budget_demo.py — exactmoney walkthrough

================================================================================
THE BUG
================================================================================

    >>> 2026.0 / 12 * 12
    2025.9999999999998

    >>> 100 * 0.555
    55.50000000000001

Float is binary. Money is decimal. Every float amount is an approximation,
and every operation on it can drift.

================================================================================
THE FIX
================================================================================

Store an integer count of minor units. Read scalars as exact ratios. Round
only when the result is not a whole unit, and only in the mode the caller
picked. Split with the Largest Remainder Method so nothing is lost:

    budget = Money.of_major("2026", "EUR")
    assert sum(budget.split(12), Money.zero("EUR")) == budget

Run with: python examples/budget_demo.py (after pip install -e .)

================================================================================
"""

import logging

from exactmoney import (
    Converter,
    CurrencyMismatchError,
    Money,
    MoneyBag,
    PrecisionExceededError,
    RoundingMode,
    RoundingRequiredError,
    configure_logging,
)


def demonstrate_bug():
    """Show the floating-point drift."""
    print("=" * 60)
    print("THE BUG")
    print("=" * 60)
    print()
    result = 2026.0 / 12 * 12
    print(">>> 2026.0 / 12 * 12")
    print(f"{result}")
    print(f"Diff: {2026.0 - result}")
    print()


def demonstrate_split():
    """Split a yearly budget into months without losing a cent."""
    print("=" * 60)
    print("SPLIT")
    print("=" * 60)
    print()

    # 202600 = 12 * 16883 + 4: four months get the leftover cent
    budget = Money.of_major("2026", "EUR")
    monthly = budget.split(12)
    for i, m in enumerate(monthly, 1):
        print(f"  Month {i:2d}: {m.format()}")
    print()

    total = sum(monthly, Money.zero("EUR"))
    print(f"Sum of parts: {total}")
    print(f"Equal?        {total == budget}")
    print()

    print("Weighted: 100.00 USD by [1, 1, 1]")
    print(f"  {[str(p) for p in Money.of_minor(10000, 'USD').allocate([1, 1, 1])]}")
    print()


def demonstrate_rounding():
    """Inexact results need an explicit mode."""
    print("=" * 60)
    print("ROUNDING")
    print("=" * 60)
    print()

    base = Money.of_minor(100, "USD")
    print(f">>> {base}.multiply('0.555')")
    try:
        base.multiply("0.555")
    except RoundingRequiredError as e:
        print(f"RoundingRequiredError: exact result is {e.result} cents")
    print()

    for mode in RoundingMode:
        print(f"  {mode.value:<10} -> {base.multiply('0.555', mode)}")
    print()

    print(">>> Money.of_major('100.001', 'USD')")
    try:
        Money.of_major("100.001", "USD")
    except PrecisionExceededError as e:
        print(f"PrecisionExceededError: {e}")
    print()


def demonstrate_currencies():
    """Currencies never mix implicitly."""
    print("=" * 60)
    print("CURRENCIES")
    print("=" * 60)
    print()

    eur = Money.euro(100)
    usd = Money.usd(100)
    print(">>> eur + usd")
    try:
        eur + usd
    except CurrencyMismatchError as e:
        print(f"CurrencyMismatchError: {e}")
    print()

    converter = Converter("USD", {"EUR": "0.85", "JPY": "150"})
    print(f"{usd} -> {converter.convert(usd, 'EUR')}")
    print(f"{usd} -> {converter.convert(usd, 'JPY').format()}")
    print()

    wallet = MoneyBag([usd, eur, Money.of_major("0.5", "ETH")])
    print(f"Wallet: {wallet}")
    print(f"Fiat total in USD: {MoneyBag([usd, eur]).total('USD', converter)}")
    print()


def demonstrate_serialization():
    """Minor units travel as int, never as float."""
    print("=" * 60)
    print("SERIALIZATION")
    print("=" * 60)
    print()

    original = Money.of_major("2026.00", "EUR")
    data = original.to_dict()
    print(f"Serialized: {data}")
    print(f"Restored:   {Money.from_dict(data)}")
    print()


def main():
    configure_logging(level=logging.WARNING)
    demonstrate_bug()
    demonstrate_split()
    demonstrate_rounding()
    demonstrate_currencies()
    demonstrate_serialization()


if __name__ == "__main__":
    main()
