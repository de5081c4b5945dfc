"""Boltz atomic-swap API (Bitcoin / Lightning / Liquid).

Docs: https://docs.boltz.exchange/api/api-v2
"""

from __future__ import annotations

from typing import Any

from currency_core.services.client import ApiClient


class BoltzAPI(ApiClient):
    SERVICE = "Boltz"
    BASE_URL = "https://api.boltz.exchange"
    SANDBOX_URL = "https://api.testnet.boltz.exchange"

    def _api_error(self, payload: Any) -> str | None:
        if isinstance(payload, dict) and isinstance(payload.get("error"), str):
            return payload["error"]
        return None

    def version(self) -> str:
        return self._get("/version").get("version", "")

    def pairs(self) -> dict[str, Any]:
        return self._get("/v2/swap/pairs")

    def swap_status(self, swap_id: str) -> dict[str, Any]:
        return self._get(f"/v2/swap/{swap_id}")

    def fee_estimation(self) -> dict[str, float]:
        """Suggested on-chain fee rates (sat/vB) keyed by currency."""
        return self._get("/v2/chain/fees")
