"""CoinCodex public API (beta).

Docs: https://coincodex.com/page/api/

Parameters are path segments rather than a query string, so each endpoint
has a pure URL builder that the fetch methods call.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from currency_core.services.client import ApiClient

COINCODEX_API = "https://coincodex.com/api/coincodex"
COINCODEX_EXCHANGE_API = "https://coincodex.com/api/exchange"


# =============================================================================
# URL builders
# =============================================================================


def coin_url(symbol: str) -> str:
    return f"{COINCODEX_API}/get_coin/{symbol}"


def coin_history_url(symbol: str, start: str, end: str, samples: int) -> str:
    """``start`` / ``end`` are ``YYYY-MM-DD`` dates."""
    return f"{COINCODEX_API}/get_coin_history/{symbol}/{start}/{end}/{samples}"


def coin_markets_url(symbol: str) -> str:
    return f"{COINCODEX_EXCHANGE_API}/get_markets_by_coin/{symbol}/"


def coin_ranges_url(symbols: Iterable[str]) -> str:
    return f"{COINCODEX_API}/get_coin_ranges/{','.join(symbols)}"


def firstpage_history_url(days: int, samples: int, coins_limit: int) -> str:
    return f"{COINCODEX_API}/get_firstpage_history/{days}/{samples}/{coins_limit}"


# =============================================================================
# Data Models
# =============================================================================


@dataclass
class CoinSummary:
    """The descriptive subset of a ``get_coin`` response."""

    symbol: str
    description: str | None = None
    ico_price: float | None = None
    price_high_24h: float | None = None
    price_low_24h: float | None = None
    today_open: float | None = None

    @classmethod
    def from_payload(cls, symbol: str, data: dict[str, Any]) -> CoinSummary:
        return cls(
            symbol=symbol,
            description=data.get("description"),
            ico_price=data.get("ico_price"),
            price_high_24h=data.get("price_high_24_usd"),
            price_low_24h=data.get("price_low_24_usd"),
            today_open=data.get("today_open"),
        )


class CoinCodexAPI(ApiClient):
    SERVICE = "CoinCodex"
    BASE_URL = COINCODEX_API

    def coin(self, symbol: str) -> dict[str, Any]:
        return self._get(coin_url(symbol))

    def coin_summary(self, symbol: str) -> CoinSummary:
        return CoinSummary.from_payload(symbol, self.coin(symbol))

    def coin_history(self, symbol: str, start: str, end: str, samples: int = 30) -> dict[str, list[list[float]]]:
        return self._get(coin_history_url(symbol, start, end, samples))

    def coin_markets(self, symbol: str) -> list[dict[str, Any]]:
        return self._get(coin_markets_url(symbol))

    def coin_ranges(self, symbols: Iterable[str]) -> dict[str, Any]:
        return self._get(coin_ranges_url(symbols))

    def firstpage_history(self, days: int = 7, samples: int = 100, coins_limit: int = 50) -> dict[str, Any]:
        return self._get(firstpage_history_url(days, samples, coins_limit))
