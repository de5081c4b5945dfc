"""TzKT Tezos indexer API.

Docs: https://api.tzkt.io/
"""

from __future__ import annotations

from typing import Any

from currency_core.services.client import ApiClient

MUTEZ_PER_XTZ = 1_000_000


class TzktAPI(ApiClient):
    SERVICE = "TzKT"
    BASE_URL = "https://api.tzkt.io"
    SANDBOX_URL = "https://api.ghostnet.tzkt.io"

    def account(self, address: str) -> dict[str, Any]:
        return self._get(f"/v1/accounts/{address}")

    def balance(self, address: str) -> float:
        """Spendable balance in XTZ."""
        return int(self._get(f"/v1/accounts/{address}/balance")) / MUTEZ_PER_XTZ

    def operations(self, address: str, limit: int = 20) -> list[dict[str, Any]]:
        return self._get(f"/v1/accounts/{address}/operations", {"limit": limit})

    def head(self) -> dict[str, Any]:
        return self._get("/v1/head")

    def domains(self, address: str, reverse: bool | None = None) -> list[dict[str, Any]]:
        """Tezos Domains records owned by or pointing at ``address``."""
        params: dict[str, Any] = {"address": address}
        if reverse is not None:
            params["reverse"] = str(reverse).lower()
        return self._get("/v1/domains", params)
