"""XRPSCAN API for the XRP Ledger."""

from __future__ import annotations

from typing import Any

from currency_core.services.client import ApiClient


class XrpscanAPI(ApiClient):
    SERVICE = "XRPSCAN"
    BASE_URL = "https://api.xrpscan.com/api/v1"

    def account(self, address: str) -> dict[str, Any]:
        return self._get(f"/account/{address}")

    def account_balances(self, address: str) -> list[dict[str, Any]]:
        return self._get(f"/account/{address}/balances")

    def transactions(self, address: str, marker: str | None = None) -> dict[str, Any]:
        return self._get(f"/account/{address}/transactions", {"marker": marker})
