"""Bybit V5 market API.

Docs: https://bybit-exchange.github.io/docs/v5/intro

Responses carry ``retCode`` / ``retMsg``; anything but ``retCode == 0`` is
an error even on HTTP 200.
"""

from __future__ import annotations

from typing import Any

from currency_core.services.client import ApiClient


class BybitExchange(ApiClient):
    SERVICE = "Bybit"
    BASE_URL = "https://api.bybit.com"
    SANDBOX_URL = "https://api-testnet.bybit.com"

    def _api_error(self, payload: Any) -> str | None:
        if isinstance(payload, dict) and payload.get("retCode", 0) != 0:
            return f"{payload['retCode']}: {payload.get('retMsg', 'unknown error')}"
        return None

    def _market(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        return self._get(f"/v5/market/{endpoint}", params).get("result", {})

    def server_time(self) -> dict[str, Any]:
        return self._market("time")

    def tickers(self, category: str = "spot", symbol: str | None = None) -> dict[str, Any]:
        return self._market("tickers", {"category": category, "symbol": symbol})

    def orderbook(self, symbol: str, category: str = "spot", limit: int = 25) -> dict[str, Any]:
        return self._market("orderbook", {"category": category, "symbol": symbol, "limit": limit})

    def kline(
        self,
        symbol: str,
        interval: str = "60",
        category: str = "spot",
        limit: int = 200,
    ) -> dict[str, Any]:
        params = {"category": category, "symbol": symbol, "interval": interval, "limit": limit}
        return self._market("kline", params)
