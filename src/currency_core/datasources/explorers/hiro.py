"""Hiro Stacks Blockchain API.

Docs: https://docs.hiro.so/stacks/api
"""

from __future__ import annotations

from typing import Any

from currency_core.services.client import ApiClient


class HiroStacksAPI(ApiClient):
    SERVICE = "Hiro"
    BASE_URL = "https://api.hiro.so"
    SANDBOX_URL = "https://api.testnet.hiro.so"

    def _headers(self) -> dict[str, str]:
        return {"x-api-key": self.api_key} if self.api_key else {}

    def account_balances(self, principal: str) -> dict[str, Any]:
        return self._get(f"/extended/v1/address/{principal}/balances")

    def account_transactions(self, principal: str, limit: int = 20, offset: int = 0) -> dict[str, Any]:
        return self._get(f"/extended/v1/address/{principal}/transactions", {"limit": limit, "offset": offset})

    def network_info(self) -> dict[str, Any]:
        return self._get("/v2/info")

    def names_for_address(self, address: str, blockchain: str = "stacks") -> list[str]:
        """BNS names owned by ``address`` (legacy names endpoint)."""
        return self._get(f"/v1/addresses/{blockchain}/{address}").get("names", [])
