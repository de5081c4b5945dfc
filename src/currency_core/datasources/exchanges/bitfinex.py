"""Bitfinex public v2 API.

Docs: https://docs.bitfinex.com/reference

v2 returns bare arrays. Errors come back as ``["error", code, "message"]``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from currency_core.services.client import ApiClient


class BitfinexExchange(ApiClient):
    SERVICE = "Bitfinex"
    BASE_URL = "https://api-pub.bitfinex.com/v2"

    def _api_error(self, payload: Any) -> str | None:
        if isinstance(payload, list) and payload and payload[0] == "error":
            parts = [str(p) for p in payload[1:]]
            return ": ".join(parts) or "error"
        return None

    def platform_status(self) -> bool:
        """True when the platform is operative (``[1]``), False in maintenance."""
        return self._get("/platform/status") == [1]

    def tickers(self, symbols: Iterable[str] | str = "ALL") -> list[list[Any]]:
        if not isinstance(symbols, str):
            symbols = ",".join(symbols)
        return self._get("/tickers", {"symbols": symbols})

    def ticker(self, symbol: str) -> list[Any]:
        """``[BID, BID_SIZE, ASK, ASK_SIZE, DAILY_CHANGE, ..., LAST_PRICE, VOLUME, HIGH, LOW]``."""
        return self._get(f"/ticker/{symbol}")

    def candles(
        self,
        symbol: str,
        timeframe: str = "1h",
        section: str = "hist",
        limit: int | None = None,
    ) -> list[Any]:
        return self._get(f"/candles/trade:{timeframe}:{symbol}/{section}", {"limit": limit})
