"""
currency.py — Currency descriptors and the process-wide registry

A Currency is an immutable record. Only `decimals` affects arithmetic: it
fixes the scale (10 ** decimals minor units per major unit). Code, symbol and
locale are display metadata.

The registry maps codes to descriptors so that callers can write
Money.of_major("10.50", "USD"). It is populated at import time and is
read-mostly afterwards. The arithmetic modules never consult it: they take
`decimals` as a plain int.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidArgumentError, UnknownCurrencyError
from .logging_config import get_logger
from .parsing import validate_decimals

logger = get_logger("currency")


@dataclass(frozen=True)
class Currency:
    """
    Currency (or token) with its precision.

    ISO 4217 defines an alphabetic code, a numeric code and a minor unit
    (number of decimals). Here we keep the code and the minor unit, plus a
    symbol and a default locale for formatting.
    """
    code: str
    decimals: int
    symbol: str = ""
    locale: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code.strip():
            raise InvalidArgumentError("Currency code must be a non-empty string")
        object.__setattr__(self, "code", self.code.strip().upper())
        validate_decimals(self.decimals)

    @property
    def multiplier(self) -> int:
        """Major -> minor unit conversion factor."""
        return 10 ** self.decimals

    def __str__(self) -> str:
        return self.code


# ==============================================================================
# REGISTRY
# ==============================================================================

_registry: dict[str, Currency] = {}


def register_currency(currency: Currency) -> Currency:
    """Register (or replace) a currency by its code and return it."""
    existing = _registry.get(currency.code)
    if existing is not None and existing != currency:
        logger.warning("replacing registered currency %s: %r -> %r",
                       currency.code, existing, currency)
    _registry[currency.code] = currency
    logger.debug("registered currency %s (decimals=%d)", currency.code, currency.decimals)
    return currency


def get_currency(code: str) -> Currency:
    """Look up a registered currency by code (case-insensitive)."""
    currency = _registry.get(code.strip().upper()) if isinstance(code, str) else None
    if currency is None:
        raise UnknownCurrencyError(code)
    return currency


def is_currency_registered(code: str) -> bool:
    return isinstance(code, str) and code.strip().upper() in _registry


def registered_currencies() -> dict[str, Currency]:
    """Snapshot of the registry."""
    return dict(_registry)


def resolve_currency(currency: Currency | str) -> Currency:
    """Accept a Currency or a registered code."""
    if isinstance(currency, Currency):
        return currency
    if isinstance(currency, str):
        return get_currency(currency)
    raise TypeError(f"Expected Currency or currency code, not {type(currency).__name__}")


# ==============================================================================
# ISO 4217 (common subset)
# ==============================================================================

USD = register_currency(Currency("USD", 2, "$", "en-US"))
EUR = register_currency(Currency("EUR", 2, "€", "de-DE"))
GBP = register_currency(Currency("GBP", 2, "£", "en-GB"))
JPY = register_currency(Currency("JPY", 0, "¥", "ja-JP"))
CHF = register_currency(Currency("CHF", 2, "CHF", "de-CH"))
CAD = register_currency(Currency("CAD", 2, "CA$", "en-CA"))
AUD = register_currency(Currency("AUD", 2, "A$", "en-AU"))
NZD = register_currency(Currency("NZD", 2, "NZ$", "en-NZ"))
CNY = register_currency(Currency("CNY", 2, "¥", "zh-CN"))
HKD = register_currency(Currency("HKD", 2, "HK$", "zh-HK"))
SGD = register_currency(Currency("SGD", 2, "S$", "en-SG"))
SEK = register_currency(Currency("SEK", 2, "kr", "sv-SE"))
NOK = register_currency(Currency("NOK", 2, "kr", "nb-NO"))
DKK = register_currency(Currency("DKK", 2, "kr.", "da-DK"))
PLN = register_currency(Currency("PLN", 2, "zł", "pl-PL"))
CZK = register_currency(Currency("CZK", 2, "Kč", "cs-CZ"))
HUF = register_currency(Currency("HUF", 2, "Ft", "hu-HU"))
INR = register_currency(Currency("INR", 2, "₹", "en-IN"))
KRW = register_currency(Currency("KRW", 0, "₩", "ko-KR"))
BRL = register_currency(Currency("BRL", 2, "R$", "pt-BR"))
MXN = register_currency(Currency("MXN", 2, "MX$", "es-MX"))
ZAR = register_currency(Currency("ZAR", 2, "R", "en-ZA"))
TRY = register_currency(Currency("TRY", 2, "₺", "tr-TR"))
CLP = register_currency(Currency("CLP", 0, "CLP$", "es-CL"))
ISK = register_currency(Currency("ISK", 0, "kr", "is-IS"))
VND = register_currency(Currency("VND", 0, "₫", "vi-VN"))
# Three-decimal currencies
KWD = register_currency(Currency("KWD", 3, "KD", "ar-KW"))
BHD = register_currency(Currency("BHD", 3, "BD", "ar-BH"))
OMR = register_currency(Currency("OMR", 3, "OMR", "ar-OM"))
JOD = register_currency(Currency("JOD", 3, "JD", "ar-JO"))
TND = register_currency(Currency("TND", 3, "DT", "ar-TN"))
