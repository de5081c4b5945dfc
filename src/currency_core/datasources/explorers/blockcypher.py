"""BlockCypher REST API for UTXO chains.

Docs: https://www.blockcypher.com/dev/bitcoin/

Free tier works without a token (3 req/s); a token lifts the limits and is
sent as the ``token`` query parameter.
"""

from __future__ import annotations

from typing import Any

import requests

from currency_core.services.client import ApiClient

CHAINS = ("btc", "ltc", "doge", "dash")


class BlockcypherAPI(ApiClient):
    SERVICE = "BlockCypher"
    API_KEY_SETTING = "blockcypher_token"
    BASE_URL = "https://api.blockcypher.com/v1"

    def __init__(
        self,
        chain: str = "btc",
        network: str = "main",
        api_key: str | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        if chain not in CHAINS:
            msg = f"unsupported BlockCypher chain {chain!r} (expected one of {CHAINS})"
            raise ValueError(msg)
        super().__init__(api_key, f"{self.BASE_URL}/{chain}/{network}", session=session)
        self.chain = chain
        self.network = network

    def _api_error(self, payload: Any) -> str | None:
        if isinstance(payload, dict) and payload.get("error"):
            return str(payload["error"])
        return None

    def _get(self, path: str, params: dict[str, Any] | None = None, **kwargs: Any) -> Any:
        params = {**(params or {}), "token": self.api_key}
        return super()._get(path, params, **kwargs)

    def chain_info(self) -> dict[str, Any]:
        return self._get("")

    def address_balance(self, address: str) -> dict[str, Any]:
        return self._get(f"/addrs/{address}/balance")

    def address_full(self, address: str, limit: int = 50) -> dict[str, Any]:
        return self._get(f"/addrs/{address}/full", {"limit": limit})

    def transaction(self, tx_hash: str) -> dict[str, Any]:
        return self._get(f"/txs/{tx_hash}")
