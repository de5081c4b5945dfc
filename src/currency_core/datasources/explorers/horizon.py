"""Stellar Horizon API.

Docs: https://developers.stellar.org/docs/data/horizon/api-reference

A missing account is a plain 404, which surfaces as ``ApiError``.
"""

from __future__ import annotations

from typing import Any

import requests

from currency_core.services.client import ApiClient


class HorizonAPI(ApiClient):
    SERVICE = "Horizon"
    BASE_URL = "https://horizon.stellar.org"
    SANDBOX_URL = "https://horizon-testnet.stellar.org"

    def __init__(
        self,
        testnet: bool = False,
        base_url: str | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(base_url=base_url, sandbox=testnet, session=session)

    @staticmethod
    def _records(payload: dict[str, Any]) -> list[dict[str, Any]]:
        return payload.get("_embedded", {}).get("records", [])

    def account(self, account_id: str) -> dict[str, Any]:
        return self._get(f"/accounts/{account_id}")

    def payments(self, account_id: str, limit: int = 10, order: str = "desc") -> list[dict[str, Any]]:
        payload = self._get(f"/accounts/{account_id}/payments", {"limit": limit, "order": order})
        return self._records(payload)

    def transactions(self, account_id: str, limit: int = 10, order: str = "desc") -> list[dict[str, Any]]:
        payload = self._get(f"/accounts/{account_id}/transactions", {"limit": limit, "order": order})
        return self._records(payload)

    def ledgers_latest(self) -> dict[str, Any] | None:
        records = self._records(self._get("/ledgers", {"order": "desc", "limit": 1}))
        return records[0] if records else None

    def fee_stats(self) -> dict[str, Any]:
        return self._get("/fee_stats")
