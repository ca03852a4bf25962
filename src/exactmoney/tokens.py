"""
Custom tokens (crypto, commodities, loyalty points) usable as currencies.

    ETH = define_token(code="ETH", symbol="Ξ", decimals=18, type="crypto", chain_id=1)
    balance = Money.of_major("1.5", ETH)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .currency import Currency, register_currency
from .errors import InvalidArgumentError

TOKEN_TYPES = ("fiat", "crypto", "commodity", "custom")


@dataclass(frozen=True)
class Token(Currency):
    """A Currency with on-chain / pricing metadata. Arithmetic ignores it."""
    type: str = "custom"
    chain_id: Optional[int] = None
    contract_address: Optional[str] = None
    standard: Optional[str] = None
    coingecko_id: Optional[str] = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.type not in TOKEN_TYPES:
            raise InvalidArgumentError(
                f"Token type must be one of {', '.join(TOKEN_TYPES)}, got {self.type!r}"
            )


def define_token(
    *,
    code: str,
    symbol: str,
    decimals: int,
    type: str = "custom",
    locale: Optional[str] = None,
    chain_id: Optional[int] = None,
    contract_address: Optional[str] = None,
    standard: Optional[str] = None,
    coingecko_id: Optional[str] = None,
) -> Token:
    """Create a Token and register it so it can be referenced by code."""
    if not code:
        raise InvalidArgumentError("Token definition requires a code")
    if not symbol:
        raise InvalidArgumentError("Token definition requires a symbol")

    token = Token(
        code=code,
        decimals=decimals,
        symbol=symbol,
        locale=locale,
        type=type,
        chain_id=chain_id,
        contract_address=contract_address,
        standard=standard,
        coingecko_id=coingecko_id,
    )
    register_currency(token)
    return token


# Pre-defined popular tokens
ETH = define_token(
    code="ETH",
    symbol="Ξ",
    decimals=18,
    type="crypto",
    chain_id=1,
    coingecko_id="ethereum",
)

BTC = define_token(
    code="BTC",
    symbol="₿",
    decimals=8,
    type="crypto",
    coingecko_id="bitcoin",
)

USDC = define_token(
    code="USDC",
    symbol="USDC",
    decimals=6,
    type="crypto",
    chain_id=1,
    contract_address="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
    standard="ERC-20",
    coingecko_id="usd-coin",
)

USDT = define_token(
    code="USDT",
    symbol="₮",
    decimals=6,
    type="crypto",
    chain_id=1,
    contract_address="0xdac17f958d2ee523a2206206994597c13d831ec7",
    standard="ERC-20",
    coingecko_id="tether",
)
