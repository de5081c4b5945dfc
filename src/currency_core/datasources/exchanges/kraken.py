"""Kraken spot REST API.

Docs: https://docs.kraken.com/rest/

Every response is wrapped as ``{"error": [...], "result": {...}}``; the
wrapper unwraps ``result`` and raises when ``error`` is non-empty.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import time
from typing import Any
from urllib.parse import urlencode

import requests

from currency_core.errors import AuthenticationRequired
from currency_core.services.client import ApiClient


def sign_request(url_path: str, data: dict[str, Any], secret: str) -> str:
    """``API-Sign`` value: HMAC-SHA512 of path + SHA256(nonce + postdata)."""
    postdata = urlencode(data)
    message = (str(data["nonce"]) + postdata).encode()
    digest = url_path.encode() + hashlib.sha256(message).digest()
    mac = hmac.new(base64.b64decode(secret), digest, hashlib.sha512)
    return base64.b64encode(mac.digest()).decode()


class KrakenExchange(ApiClient):
    SERVICE = "Kraken"
    BASE_URL = "https://api.kraken.com"

    def __init__(
        self,
        api_key: str | None = None,
        api_secret: str | None = None,
        base_url: str | None = None,
        sandbox: bool = False,
        *,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(api_key, base_url, sandbox, session=session)
        self.api_secret = api_secret

    def _api_error(self, payload: Any) -> str | None:
        if isinstance(payload, dict) and payload.get("error"):
            return "; ".join(str(e) for e in payload["error"])
        return None

    def _public(self, method: str, params: dict[str, Any] | None = None) -> Any:
        return self._get(f"/0/public/{method}", params).get("result", {})

    def server_time(self) -> dict[str, Any]:
        return self._public("Time")

    def system_status(self) -> dict[str, Any]:
        return self._public("SystemStatus")

    def assets(self, asset: str | None = None) -> dict[str, Any]:
        return self._public("Assets", {"asset": asset})

    def asset_pairs(self, pair: str | None = None) -> dict[str, Any]:
        return self._public("AssetPairs", {"pair": pair})

    def ticker(self, pair: str) -> dict[str, Any]:
        return self._public("Ticker", {"pair": pair})

    def ohlc(self, pair: str, interval: int = 1) -> dict[str, Any]:
        """OHLC candles; ``interval`` is in minutes."""
        return self._public("OHLC", {"pair": pair, "interval": interval})

    def balance(self) -> dict[str, str]:
        """Asset balances for the key (private, signed POST)."""
        if not self.api_key or not self.api_secret:
            raise AuthenticationRequired("Kraken balance() needs an API key and secret")
        url_path = "/0/private/Balance"
        data = {"nonce": int(time.time() * 1000)}
        headers = {
            "API-Key": self.api_key,
            "API-Sign": sign_request(url_path, data, self.api_secret),
        }
        return self._post(url_path, data=data, headers=headers).get("result", {})
