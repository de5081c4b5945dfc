"""Lido Ethereum staking API.

Docs: https://docs.lido.fi/integrations/api
"""

from __future__ import annotations

from typing import Any

from currency_core.services.client import ApiClient


class LidoAPI(ApiClient):
    SERVICE = "Lido"
    BASE_URL = "https://eth-api.lido.fi/v1"
    SANDBOX_URL = "https://eth-api-hoodi.testnet.fi/v1"

    def steth_apr_last(self) -> float:
        """Most recent daily stETH APR, in percent."""
        return float(self._get("/protocol/steth/apr/last")["data"]["apr"])

    def steth_apr_sma(self) -> float:
        """Seven-day simple moving average of the stETH APR, in percent."""
        return float(self._get("/protocol/steth/apr/sma")["data"]["smaApr"])

    def withdrawal_time(self, amount: float | None = None) -> dict[str, Any]:
        """Estimated wait for a withdrawal request of ``amount`` stETH."""
        params = {"amount": amount} if amount is not None else None
        return self._get("https://wq-api.lido.fi/v2/request-time/calculate", params)
