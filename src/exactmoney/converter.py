"""
Currency conversion with exact rates.

Rates are exact Ratios relative to a base currency ("1 USD = 0.85 EUR" is
{"EUR": "0.85"} with base "USD"). The conversion factor, including the
difference in decimals between the two currencies, is computed as an exact
fraction and rounded once, at the end.
"""

from __future__ import annotations
from fractions import Fraction
from typing import Mapping

from .core import Money
from .currency import Currency, resolve_currency
from .errors import ExchangeRateNotFoundError, InvalidArgumentError
from .logging_config import get_logger
from .parsing import Ratio
from .rounding import DEFAULT_ROUNDING, RoundingMode, rounded_divide

logger = get_logger("converter")


def _code(currency: Currency | str) -> str:
    return currency.code if isinstance(currency, Currency) else currency.strip().upper()


class Converter:
    """
    Converts Money between currencies using rates against a base.

    INVARIANT: exactly one rounding per conversion.
    """

    def __init__(self, base: Currency | str, rates: Mapping[str, object]):
        self._base = _code(base)
        self._rates: dict[str, Fraction] = {}
        for code, rate in rates.items():
            ratio = Ratio.of(rate)
            if ratio.numerator <= 0:
                raise InvalidArgumentError(
                    f"Exchange rate for {code} must be positive, got {rate!r}"
                )
            self._rates[_code(code)] = ratio.as_fraction()
        self._rates.setdefault(self._base, Fraction(1))

    @property
    def base(self) -> str:
        return self._base

    def rate(self, source: Currency | str, target: Currency | str) -> Fraction:
        """Exact major-unit rate: 1 source = rate target."""
        source_code = _code(source)
        target_code = _code(target)
        from_rate = self._rates.get(source_code)
        to_rate = self._rates.get(target_code)
        if from_rate is None or to_rate is None:
            raise ExchangeRateNotFoundError(source_code, target_code)
        return to_rate / from_rate

    def convert(
        self,
        money: Money,
        target: Currency | str,
        rounding: RoundingMode = DEFAULT_ROUNDING,
    ) -> Money:
        """
        Convert to target currency.

            Converter("USD", {"EUR": "0.85"}).convert(Money.usd(10), "EUR") -> 8.50 EUR

        Raises:
            ExchangeRateNotFoundError: no rate for source or target
        """
        target = resolve_currency(target)
        if money.currency.code == target.code:
            return money

        # target_minor = source_minor * rate * 10^(target_decimals - source_decimals)
        factor = self.rate(money.currency, target) * Fraction(
            target.multiplier, money.currency.multiplier
        )
        minor = rounded_divide(
            money.minor_units * factor.numerator, factor.denominator, rounding
        )
        logger.debug(
            "converted %s to %s %s at %s", money, minor, target.code, factor
        )
        return Money.of_minor(minor, target)
