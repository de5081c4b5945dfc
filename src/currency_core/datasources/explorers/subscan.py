"""Subscan API for Polkadot and Substrate chains.

Docs: https://support.subscan.io/

Every call is a JSON POST. The body is ``{"code": 0, "message": "Success",
"data": ...}``; a non-zero ``code`` is an error.
"""

from __future__ import annotations

from typing import Any

import requests

from currency_core.services.client import ApiClient


class SubscanAPI(ApiClient):
    SERVICE = "Subscan"
    API_KEY_SETTING = "subscan_api_key"

    def __init__(
        self,
        network: str = "polkadot",
        api_key: str | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(api_key, f"https://{network}.api.subscan.io", session=session)
        self.network = network

    def _headers(self) -> dict[str, str]:
        return {"X-API-Key": self.api_key} if self.api_key else {}

    def _api_error(self, payload: Any) -> str | None:
        if isinstance(payload, dict) and payload.get("code", 0) != 0:
            return f"{payload['code']}: {payload.get('message', 'unknown error')}"
        return None

    def _scan(self, path: str, body: dict[str, Any]) -> Any:
        return self._post(path, json=body).get("data")

    def account(self, address: str) -> dict[str, Any] | None:
        data = self._scan("/api/v2/scan/search", {"key": address})
        return data.get("account") if data else None

    def transfers(self, address: str, row: int = 20, page: int = 0) -> list[dict[str, Any]]:
        data = self._scan("/api/v2/scan/transfers", {"address": address, "row": row, "page": page})
        return (data or {}).get("transfers") or []

    def metadata(self) -> dict[str, Any]:
        return self._scan("/api/scan/metadata", {}) or {}
