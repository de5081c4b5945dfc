"""Binance spot REST API.

Docs: https://binance-docs.github.io/apidocs/spot/en/

Public market-data endpoints need no key. ``account()`` is a SIGNED
endpoint: the query string gets a ``timestamp`` and an HMAC-SHA256
``signature`` keyed with the API secret, and the key travels in the
``X-MBX-APIKEY`` header.
"""

from __future__ import annotations

import hashlib
import hmac
import time
from typing import Any
from urllib.parse import urlencode

import requests

from currency_core.errors import AuthenticationRequired
from currency_core.services.client import ApiClient, clean_params


def sign_query(params: dict[str, Any], secret: str) -> str:
    """Return ``params`` url-encoded with its HMAC-SHA256 ``signature`` appended."""
    query = urlencode(clean_params(params))
    signature = hmac.new(secret.encode(), query.encode(), hashlib.sha256).hexdigest()
    return f"{query}&signature={signature}"


class BinanceExchange(ApiClient):
    SERVICE = "Binance"
    BASE_URL = "https://api.binance.com"
    SANDBOX_URL = "https://testnet.binance.vision"

    def __init__(
        self,
        api_key: str | None = None,
        api_secret: str | None = None,
        base_url: str | None = None,
        sandbox: bool = False,
        *,
        session: requests.Session | None = None,
        recv_window: int = 5000,
    ) -> None:
        super().__init__(api_key, base_url, sandbox, session=session)
        self.api_secret = api_secret
        self.recv_window = recv_window

    def _headers(self) -> dict[str, str]:
        return {"X-MBX-APIKEY": self.api_key} if self.api_key else {}

    def _api_error(self, payload: Any) -> str | None:
        # Errors look like {"code": -1121, "msg": "Invalid symbol."}
        if isinstance(payload, dict) and "code" in payload and payload.get("code") not in (0, 200):
            return f"{payload.get('code')}: {payload.get('msg', 'unknown error')}"
        return None

    def ping(self) -> dict[str, Any]:
        return self._get("/api/v3/ping")

    def server_time(self) -> int:
        """Server time in milliseconds since the epoch."""
        return int(self._get("/api/v3/time")["serverTime"])

    def exchange_info(self, symbol: str | None = None) -> dict[str, Any]:
        return self._get("/api/v3/exchangeInfo", {"symbol": symbol})

    def ticker_price(self, symbol: str | None = None) -> dict[str, Any] | list[dict[str, Any]]:
        """Latest price for one symbol, or for every symbol when omitted."""
        return self._get("/api/v3/ticker/price", {"symbol": symbol})

    def ticker_24h(self, symbol: str) -> dict[str, Any]:
        return self._get("/api/v3/ticker/24hr", {"symbol": symbol})

    def order_book(self, symbol: str, limit: int = 100) -> dict[str, Any]:
        return self._get("/api/v3/depth", {"symbol": symbol, "limit": limit})

    def klines(self, symbol: str, interval: str, limit: int = 500) -> list[list[Any]]:
        return self._get("/api/v3/klines", {"symbol": symbol, "interval": interval, "limit": limit})

    def account(self) -> dict[str, Any]:
        """Balances and permissions for the key (SIGNED)."""
        if not self.api_key or not self.api_secret:
            raise AuthenticationRequired(
                "Binance account() needs an API key and secret", context={"endpoint": "/api/v3/account"}
            )
        params = {"timestamp": int(time.time() * 1000), "recvWindow": self.recv_window}
        query = sign_query(params, self.api_secret)
        return self._get(f"/api/v3/account?{query}")
