"""Tinyman (Algorand AMM) analytics API."""

from __future__ import annotations

from typing import Any

from currency_core.services.client import ApiClient


class TinymanAPI(ApiClient):
    SERVICE = "Tinyman"
    BASE_URL = "https://mainnet.analytics.tinyman.org/api/v1"
    SANDBOX_URL = "https://testnet.analytics.tinyman.org/api/v1"

    def pools(self, limit: int = 10, verified_only: bool = True) -> list[dict[str, Any]]:
        """Pools ordered by liquidity, largest first."""
        params = {
            "limit": limit,
            "ordering": "-liquidity",
            "verified_only": "true" if verified_only else None,
        }
        return self._get("/pools/", params).get("results", [])

    def pool(self, address: str) -> dict[str, Any]:
        return self._get(f"/pools/{address}/")

    def assets(self, limit: int = 50) -> list[dict[str, Any]]:
        return self._get("/assets/", {"limit": limit}).get("results", [])
