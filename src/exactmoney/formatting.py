"""
Display formatting for Money.

Built on the same digit transform as the parser (render_scaled_amount), so
the digits shown are always the exact stored value: no float, no rounding.

    format_money(Money.of_major("1234.5", "USD"))                 -> "$1,234.50"
    format_money(Money.of_major("1234.5", "EUR"))                 -> "€1.234,50"
    format_money(Money.of_major("-5", "USD"), accounting=True)    -> "($5.00)"
    format_money(Money.of_major("5", "USD"), display="code")      -> "USD 5.00"
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from .errors import InvalidArgumentError
from .parsing import render_scaled_amount

if TYPE_CHECKING:
    from .core import Money

DEFAULT_LOCALE = "en-US"

# locale -> (group separator, decimal separator)
LOCALE_SEPARATORS: dict[str, tuple[str, str]] = {
    "en-US": (",", "."),
    "en-GB": (",", "."),
    "en-CA": (",", "."),
    "en-AU": (",", "."),
    "en-NZ": (",", "."),
    "en-IN": (",", "."),
    "en-SG": (",", "."),
    "en-ZA": (" ", ","),
    "ja-JP": (",", "."),
    "zh-CN": (",", "."),
    "zh-HK": (",", "."),
    "ko-KR": (",", "."),
    "es-MX": (",", "."),
    "de-DE": (".", ","),
    "de-CH": ("'", "."),
    "it-IT": (".", ","),
    "es-ES": (".", ","),
    "es-CL": (".", ","),
    "pt-BR": (".", ","),
    "tr-TR": (".", ","),
    "da-DK": (".", ","),
    "is-IS": (".", ","),
    "vi-VN": (".", ","),
    "fr-FR": (" ", ","),
    "sv-SE": (" ", ","),
    "nb-NO": (" ", ","),
    "pl-PL": (" ", ","),
    "cs-CZ": (" ", ","),
    "hu-HU": (" ", ","),
}

DISPLAY_MODES = ("symbol", "code")


def separators_for(locale: Optional[str]) -> tuple[str, str]:
    """(group, decimal) separators for a locale; language-only fallback, then en-US."""
    if locale in LOCALE_SEPARATORS:
        return LOCALE_SEPARATORS[locale]
    if locale:
        language = locale.split("-")[0]
        for key, value in LOCALE_SEPARATORS.items():
            if key.split("-")[0] == language:
                return value
    return LOCALE_SEPARATORS[DEFAULT_LOCALE]


def _group(digits: str, separator: str) -> str:
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i:i + 3] for i in range(head, len(digits), 3)]
    return separator.join(groups)


def format_money(
    money: Money,
    *,
    symbol: bool = True,
    display: str = "symbol",
    accounting: bool = False,
    locale: Optional[str] = None,
) -> str:
    """
    Format a Money value for display.

    Args:
        money: value to format
        symbol: include the currency symbol / code
        display: "symbol" ("$1.00") or "code" ("USD 1.00")
        accounting: negative values in parentheses instead of a minus sign
        locale: separator locale; defaults to the currency's, then en-US
    """
    if display not in DISPLAY_MODES:
        raise InvalidArgumentError(
            f"display must be one of {', '.join(DISPLAY_MODES)}, got {display!r}"
        )

    currency = money.currency
    group_sep, decimal_sep = separators_for(locale or currency.locale)

    rendered = render_scaled_amount(abs(money.minor_units), currency.decimals)
    integer_part, _, fractional_part = rendered.partition(".")
    body = _group(integer_part, group_sep)
    if fractional_part:
        body = f"{body}{decimal_sep}{fractional_part}"

    if symbol:
        if display == "symbol" and currency.symbol:
            body = f"{currency.symbol}{body}"
        else:
            body = f"{currency.code} {body}"

    if money.is_negative():
        return f"({body})" if accounting else f"-{body}"
    return body
