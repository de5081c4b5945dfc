"""CoinGecko API v3.

Docs: https://docs.coingecko.com/reference/introduction

The public host accepts an optional demo key (``x-cg-demo-api-key``).
Pro keys use a different host and header.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import requests

from currency_core.services.client import ApiClient

PRO_URL = "https://pro-api.coingecko.com/api/v3"


def _csv(values: Iterable[str] | str) -> str:
    return values if isinstance(values, str) else ",".join(values)


class CoinGeckoAPI(ApiClient):
    SERVICE = "CoinGecko"
    API_KEY_SETTING = "coingecko_api_key"
    BASE_URL = "https://api.coingecko.com/api/v3"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        *,
        pro: bool = False,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(api_key, base_url or (PRO_URL if pro else None), session=session)
        self.pro = pro

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            return {}
        header = "x-cg-pro-api-key" if self.pro else "x-cg-demo-api-key"
        return {header: self.api_key}

    def _api_error(self, payload: Any) -> str | None:
        if not isinstance(payload, dict):
            return None
        if payload.get("error"):
            return str(payload["error"])
        status = payload.get("status")
        if isinstance(status, dict) and status.get("error_code"):
            return f"{status['error_code']}: {status.get('error_message', '')}".rstrip(": ")
        return None

    def ping(self) -> dict[str, Any]:
        return self._get("/ping")

    def simple_price(
        self,
        ids: Iterable[str] | str,
        vs_currencies: Iterable[str] | str = "usd",
        *,
        include_24hr_change: bool = False,
    ) -> dict[str, dict[str, float]]:
        params = {
            "ids": _csv(ids),
            "vs_currencies": _csv(vs_currencies),
            "include_24hr_change": "true" if include_24hr_change else None,
        }
        return self._get("/simple/price", params)

    def coins_markets(
        self,
        ids: Iterable[str] | str | None = None,
        vs_currency: str = "usd",
        per_page: int = 50,
        page: int = 1,
        *,
        price_change_percentage: str | None = "24h",
    ) -> list[dict[str, Any]]:
        params = {
            "vs_currency": vs_currency,
            "ids": _csv(ids) if ids else None,
            "order": "market_cap_desc",
            "per_page": per_page,
            "page": page,
            "sparkline": "false",
            "price_change_percentage": price_change_percentage,
        }
        return self._get("/coins/markets", params)

    def coin(self, coin_id: str) -> dict[str, Any]:
        params = {"localization": "false", "tickers": "false", "community_data": "false"}
        return self._get(f"/coins/{coin_id}", params)

    def market_chart(self, coin_id: str, vs_currency: str = "usd", days: int | str = 7) -> dict[str, Any]:
        return self._get(f"/coins/{coin_id}/market_chart", {"vs_currency": vs_currency, "days": days})
