"""Coinbase Exchange public market-data API.

Docs: https://docs.cdp.coinbase.com/exchange/reference
"""

from __future__ import annotations

from typing import Any

from currency_core.services.client import ApiClient


class CoinbaseExchange(ApiClient):
    SERVICE = "Coinbase"
    BASE_URL = "https://api.exchange.coinbase.com"
    SANDBOX_URL = "https://api-public.sandbox.exchange.coinbase.com"

    def _api_error(self, payload: Any) -> str | None:
        if isinstance(payload, dict):
            if payload.get("errors"):
                first = payload["errors"][0]
                return first.get("message", str(first)) if isinstance(first, dict) else str(first)
            if "message" in payload and len(payload) == 1:
                return str(payload["message"])
        return None

    def products(self) -> list[dict[str, Any]]:
        return self._get("/products")

    def product(self, product_id: str) -> dict[str, Any]:
        return self._get(f"/products/{product_id}")

    def ticker(self, product_id: str) -> dict[str, Any]:
        return self._get(f"/products/{product_id}/ticker")

    def candles(
        self,
        product_id: str,
        granularity: int = 3600,
        start: str | None = None,
        end: str | None = None,
    ) -> list[list[float]]:
        """Rows of ``[time, low, high, open, close, volume]``; granularity in seconds."""
        params = {"granularity": granularity, "start": start, "end": end}
        return self._get(f"/products/{product_id}/candles", params)

    def time(self) -> dict[str, Any]:
        return self._get("/time")
