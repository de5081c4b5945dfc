"""Tronscan API.

Docs: https://docs.tronscan.org/

Works anonymously at low rate limits; a key goes in ``TRON-PRO-API-KEY``.
"""

from __future__ import annotations

from typing import Any

from currency_core.services.client import ApiClient


class TronscanAPI(ApiClient):
    SERVICE = "Tronscan"
    API_KEY_SETTING = "tronscan_api_key"
    BASE_URL = "https://apilist.tronscanapi.com/api"

    def _headers(self) -> dict[str, str]:
        return {"TRON-PRO-API-KEY": self.api_key} if self.api_key else {}

    def _api_error(self, payload: Any) -> str | None:
        if isinstance(payload, dict) and payload.get("error"):
            return str(payload["error"])
        return None

    def account(self, address: str) -> dict[str, Any]:
        return self._get("/accountv2", {"address": address})

    def transactions(self, address: str, limit: int = 20, start: int = 0) -> dict[str, Any]:
        params = {"address": address, "limit": limit, "start": start, "sort": "-timestamp"}
        return self._get("/transaction", params)

    def chain_parameters(self) -> dict[str, Any]:
        return self._get("/chainparameters")
