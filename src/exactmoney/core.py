"""
core.py — Money domain primitive

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   Integer minor units (cents for EUR/USD, satoshi for BTC, wei for ETH).
   Never floating point.

2. TYPE SAFETY
   Arithmetic between different currencies raises CurrencyMismatchError.
   Money + int / Money + float raises TypeError (explicit conversion required).

3. IMMUTABILITY
   Frozen dataclass. Every operation returns a new instance.
   No side effects, safe to share between threads.

4. VARIABLE PRECISION
   Every currency has its own scale (EUR=2, JPY=0, KWD=3, ETH=18).

5. EXPLICIT ROUNDING
   No implicit rounding. When a result is not a whole number of minor units,
   the caller chooses a RoundingMode or gets RoundingRequiredError.

6. VERIFIABLE INVARIANTS
   allocate(weights) and split(n) guarantee sum(parts) == original
   (see allocation.py for the proof).

================================================================================
DOMAIN PRIMITIVE PATTERN
================================================================================

When a domain concept has rules, wrap it in a type that makes breaking them
impossible. Compared to a bare int or Decimal:
- Domain errors become type errors (early, at runtime)
- Passing EUR where USD is expected is impossible
- 0.1 + 0.2 never happens: scalars are exact ratios

The algorithms live in pure modules taking plain ints (parsing, rounding,
arithmetic, allocation). Money is the thin layer that binds them to a
Currency.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Sequence

from . import allocation, arithmetic
from .currency import Currency, EUR, USD, get_currency, resolve_currency
from .errors import CurrencyMismatchError, InvalidArgumentError
from .logging_config import get_logger
from .parsing import Ratio, parse_scaled_amount, render_scaled_amount
from .rounding import DEFAULT_ROUNDING, RoundingMode, rounded_divide

logger = get_logger("money")


@dataclass(frozen=True, slots=True, order=False)
class Money:
    """
    Domain Primitive for monetary amounts.

    INVARIANTS:
    1. _minor_units is always int (no floating point)
    2. _currency is always a Currency
    3. Ordering and arithmetic across currencies raise CurrencyMismatchError
    4. allocate()/split() guarantee sum(parts) == self

    USAGE:
        price = Money.of_major("19.99", "USD")
        total = price.multiply("1.0825", rounding=RoundingMode.HALF_UP)
        parts = total.split(3)

    SERIALIZATION:
        to_dict() / from_dict(): {"minor_units": int, "currency": str, "decimals": int}
        NEVER serialize as float.
    """
    _minor_units: int
    _currency: Currency

    def __post_init__(self) -> None:
        if isinstance(self._minor_units, bool) or not isinstance(self._minor_units, int):
            raise TypeError(
                f"minor units must be int, not {type(self._minor_units).__name__}"
            )
        if not isinstance(self._currency, Currency):
            raise TypeError(
                f"currency must be Currency, not {type(self._currency).__name__}"
            )

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, major_units: int, currency: Currency | str) -> Money:
        """
        Generic constructor from whole major units (euros, dollars, ...).
        For fractional amounts use of_major("10.50", ...) or of_minor().
        """
        if isinstance(major_units, bool) or not isinstance(major_units, int):
            raise TypeError(
                f"Money.of() takes whole major units as int, not {type(major_units).__name__}. "
                f"Use Money.of_major() for decimal strings."
            )
        currency = resolve_currency(currency)
        return cls(_minor_units=major_units * currency.multiplier, _currency=currency)

    @classmethod
    def of_minor(cls, minor_units: int, currency: Currency | str) -> Money:
        """Constructor from minor units. No conversion, full precision."""
        return cls(_minor_units=minor_units, _currency=resolve_currency(currency))

    @classmethod
    def of_major(cls, amount: str, currency: Currency | str) -> Money:
        """
        Constructor from a decimal string in major units.

        Raises:
            FormatError: malformed literal ("1,000", "1e3", "12.3.4")
            PrecisionExceededError: "10.005" for a two-decimal currency
        """
        currency = resolve_currency(currency)
        return cls(
            _minor_units=parse_scaled_amount(amount, currency.decimals),
            _currency=currency,
        )

    @classmethod
    def from_float(
        cls,
        value: float,
        currency: Currency | str,
        rounding: RoundingMode = DEFAULT_ROUNDING,
        suppress_warning: bool = False,
    ) -> Money:
        """
        Constructor from float.

        WARNING: rounding happens HERE, once. From then on everything is integer.

        The float is read through its shortest repr (99.995 -> "99.995"), so
        the rounding applies to the decimal the user typed, not to its binary
        approximation. Prefer of_major() in new code.
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"from_float() takes a float, not {type(value).__name__}")
        currency = resolve_currency(currency)
        if not suppress_warning:
            logger.warning(
                "Money.from_float(%r) may lose precision; prefer Money.of_major(%r, %r)",
                value, repr(value), currency.code,
            )
        # Decimal accepts the exponent form of repr ("1e-05", "1e+16")
        ratio = Ratio.of(Decimal(repr(value)))
        minor = rounded_divide(
            ratio.numerator * currency.multiplier, ratio.denominator, rounding
        )
        return cls(_minor_units=minor, _currency=currency)

    @classmethod
    def zero(cls, currency: Currency | str) -> Money:
        """Zero in a currency. Useful as start value for sum()."""
        return cls(_minor_units=0, _currency=resolve_currency(currency))

    # Shorthands for common currencies
    @classmethod
    def euro(cls, value: int) -> Money:
        return cls.of(value, EUR)

    @classmethod
    def euro_cents(cls, cents: int) -> Money:
        return cls.of_minor(cents, EUR)

    @classmethod
    def usd(cls, value: int) -> Money:
        return cls.of(value, USD)

    @classmethod
    def usd_cents(cls, cents: int) -> Money:
        return cls.of_minor(cents, USD)

    # -------------------------------------------------------------------------
    # Allocation
    # -------------------------------------------------------------------------

    def allocate(self, weights: Sequence[object]) -> list[Money]:
        """
        Allocate proportionally to weights (Largest Remainder Method).

        INVARIANT: sum(result) == self (guaranteed)

            Money.usd_cents(10000).allocate([1, 1, 1])
            -> [33.34 USD, 33.33 USD, 33.33 USD]
        """
        return [
            Money.of_minor(share, self._currency)
            for share in allocation.allocate(self._minor_units, weights)
        ]

    def split(self, n: int) -> list[Money]:
        """
        Split into n parts that differ by at most one minor unit.

        INVARIANT: sum(split(n)) == self
        """
        return [
            Money.of_minor(share, self._currency)
            for share in allocation.split(self._minor_units, n)
        ]

    # -------------------------------------------------------------------------
    # Arithmetic (type-safe)
    # -------------------------------------------------------------------------

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            raise TypeError(
                f"Operation not allowed: Money + {type(other).__name__}. "
                f"Use Money.of_major() or Money.of_minor() to convert."
            )
        self._check_same_currency(other)
        return Money.of_minor(self._minor_units + other._minor_units, self._currency)

    def __radd__(self, other: object) -> Money:
        # sum() starts from int 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            raise TypeError(f"Operation not allowed: Money - {type(other).__name__}.")
        self._check_same_currency(other)
        return Money.of_minor(self._minor_units - other._minor_units, self._currency)

    def __neg__(self) -> Money:
        return Money.of_minor(-self._minor_units, self._currency)

    def __abs__(self) -> Money:
        return Money.of_minor(abs(self._minor_units), self._currency)

    def __mul__(self, factor: int) -> Money:
        """
        Multiplication by an integer (quantity).

        Example: unit_price * quantity

        For fractional factors use multiply(), which may need a rounding mode.
        """
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(
                f"Money can only be multiplied by int (quantity), "
                f"not {type(factor).__name__}. Use multiply() for fractions."
            )
        return Money.of_minor(self._minor_units * factor, self._currency)

    def __rmul__(self, factor: int) -> Money:
        return self.__mul__(factor)

    def multiply(self, multiplier: object, rounding: Optional[RoundingMode] = None) -> Money:
        """
        Multiply by an exact scalar ("1.5", 3, Decimal("0.2"), Fraction(1, 3), ...).

        Raises:
            RoundingRequiredError: result is not whole minor units and no rounding given
        """
        return Money.of_minor(
            arithmetic.multiply(self._minor_units, multiplier, rounding), self._currency
        )

    def divide(self, divisor: object, rounding: Optional[RoundingMode] = None) -> Money:
        """
        Divide by an exact scalar.

        Raises:
            DivisionByZeroError: divisor is zero
            RoundingRequiredError: result is not whole minor units and no rounding given
        """
        return Money.of_minor(
            arithmetic.divide(self._minor_units, divisor, rounding), self._currency
        )

    def percentage(self, percent: object, rounding: RoundingMode = DEFAULT_ROUNDING) -> Money:
        """
        The given percent of this amount.

        Example: Money.euro(200).percentage("15") -> 30.00 EUR
        """
        ratio = Ratio.of(percent)
        return self.multiply(Ratio(ratio.numerator, ratio.denominator * 100), rounding)

    def add_percent(self, percent: object, rounding: RoundingMode = DEFAULT_ROUNDING) -> Money:
        return self + self.percentage(percent, rounding)

    def subtract_percent(self, percent: object, rounding: RoundingMode = DEFAULT_ROUNDING) -> Money:
        return self - self.percentage(percent, rounding)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Money):
            return (
                self._minor_units == other._minor_units
                and self._currency.code == other._currency.code
            )
        return NotImplemented

    def __lt__(self, other: Money) -> bool:
        self._check_same_currency(other)
        return self._minor_units < other._minor_units

    def __le__(self, other: Money) -> bool:
        self._check_same_currency(other)
        return self._minor_units <= other._minor_units

    def __gt__(self, other: Money) -> bool:
        self._check_same_currency(other)
        return self._minor_units > other._minor_units

    def __ge__(self, other: Money) -> bool:
        self._check_same_currency(other)
        return self._minor_units >= other._minor_units

    def compare(self, other: Money) -> int:
        """-1, 0 or 1. Useful as a sort key via functools.cmp_to_key."""
        self._check_same_currency(other)
        return (self._minor_units > other._minor_units) - (self._minor_units < other._minor_units)

    def _check_same_currency(self, other: Money) -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Cannot compare Money with {type(other).__name__}")
        if self._currency.code != other._currency.code:
            raise CurrencyMismatchError(self._currency.code, other._currency.code)

    @staticmethod
    def min(*values: Money) -> Money:
        """Smallest of same-currency values."""
        if not values:
            raise InvalidArgumentError("At least one Money value required")
        result = values[0]
        for value in values[1:]:
            if value < result:
                result = value
        return result

    @staticmethod
    def max(*values: Money) -> Money:
        """Largest of same-currency values."""
        if not values:
            raise InvalidArgumentError("At least one Money value required")
        result = values[0]
        for value in values[1:]:
            if value > result:
                result = value
        return result

    def clamp(self, lower: Money, upper: Money) -> Money:
        """Bound this value to [lower, upper]."""
        self._check_same_currency(lower)
        self._check_same_currency(upper)
        if lower > upper:
            raise InvalidArgumentError(f"Clamp lower bound {lower} is greater than upper bound {upper}")
        if self < lower:
            return lower
        if self > upper:
            return upper
        return self

    # -------------------------------------------------------------------------
    # Properties and output
    # -------------------------------------------------------------------------

    @property
    def minor_units(self) -> int:
        """Value in minor units. For persistence and calculations."""
        return self._minor_units

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def amount(self) -> Ratio:
        """Exact value in major units, as a Ratio. Never a float."""
        return Ratio(self._minor_units, self._currency.multiplier)

    def is_positive(self) -> bool:
        return self._minor_units > 0

    def is_negative(self) -> bool:
        return self._minor_units < 0

    def is_zero(self) -> bool:
        return self._minor_units == 0

    def to_decimal_string(self) -> str:
        """
        Raw decimal in major units, inverse of of_major().

            Money.of_minor(-525, "USD").to_decimal_string() -> "-5.25"
        """
        return render_scaled_amount(self._minor_units, self._currency.decimals)

    def format(self, **options: Any) -> str:
        """Display string, see formatting.format_money()."""
        from .formatting import format_money
        return format_money(self, **options)

    def __repr__(self) -> str:
        return f"{self.to_decimal_string()} {self._currency.code}"

    def __str__(self) -> str:
        return self.__repr__()

    def __hash__(self) -> int:
        return hash((self._minor_units, self._currency.code))

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """
        Serialize for persistence/API.

        Format: {"minor_units": int, "currency": str, "decimals": int}

        NOTE: NEVER serialize as float. Always minor_units as int.
        """
        return {
            "minor_units": self._minor_units,
            "currency": self._currency.code,
            "decimals": self._currency.decimals,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Money:
        """
        Deserialize from dict.

        If "decimals" is present it must match the registered currency:
        reading cents as if they were mills would silently scale the amount.
        """
        currency = get_currency(data["currency"])
        decimals = data.get("decimals")
        if decimals is not None and decimals != currency.decimals:
            raise InvalidArgumentError(
                f"Serialized decimals {decimals} do not match {currency.code} "
                f"decimals {currency.decimals}"
            )
        return cls.of_minor(data["minor_units"], currency)


def money(amount: int | str, currency: Currency | str) -> Money:
    """
    Shorthand constructor.

    str is read as major units ("10.50"), int as minor units (1050).
    """
    if isinstance(amount, str):
        return Money.of_major(amount, currency)
    return Money.of_minor(amount, currency)
