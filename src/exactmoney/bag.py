"""
MoneyBag — amounts in several currencies, kept apart.

A wallet or portfolio holds EUR and USD at the same time without mixing
them. Like Money, a bag is immutable: add() and subtract() return a new bag.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from .converter import Converter
from .core import Money
from .currency import Currency, resolve_currency


class MoneyBag:
    """Immutable multi-currency collection, one Money per currency code."""

    __slots__ = ("_contents",)

    def __init__(self, items: Optional[Iterable[Money]] = None):
        contents: dict[str, Money] = {}
        for item in items or ():
            if not isinstance(item, Money):
                raise TypeError(f"MoneyBag holds Money, not {type(item).__name__}")
            existing = contents.get(item.currency.code)
            contents[item.currency.code] = item if existing is None else existing + item
        self._contents: Mapping[str, Money] = MappingProxyType(contents)

    def add(self, money: Money) -> MoneyBag:
        return MoneyBag([*self._contents.values(), money])

    def subtract(self, money: Money) -> MoneyBag:
        return MoneyBag([*self._contents.values(), -money])

    def get(self, currency: Currency | str) -> Money:
        """Amount held in a currency, zero when absent."""
        currency = resolve_currency(currency)
        return self._contents.get(currency.code, Money.zero(currency))

    def total(self, target: Currency | str, converter: Converter) -> Money:
        """Everything converted to target and summed (one rounding per currency)."""
        target = resolve_currency(target)
        result = Money.zero(target)
        for money in self._contents.values():
            result = result + converter.convert(money, target)
        return result

    def currencies(self) -> list[str]:
        return list(self._contents)

    def to_list(self) -> list[dict]:
        return [money.to_dict() for money in self._contents.values()]

    def __iter__(self) -> Iterator[Money]:
        return iter(self._contents.values())

    def __len__(self) -> int:
        return len(self._contents)

    def __contains__(self, currency: object) -> bool:
        code = currency.code if isinstance(currency, Currency) else currency
        return code in self._contents

    def _non_zero(self) -> dict[str, Money]:
        return {code: m for code, m in self._contents.items() if not m.is_zero()}

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MoneyBag):
            return self._non_zero() == other._non_zero()
        return NotImplemented

    def __repr__(self) -> str:
        return f"MoneyBag({', '.join(str(m) for m in self._contents.values())})"
