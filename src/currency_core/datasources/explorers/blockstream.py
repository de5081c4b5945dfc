"""Blockstream Esplora API (Bitcoin, Bitcoin testnet, Liquid).

Docs: https://github.com/Blockstream/esplora/blob/master/API.md
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from currency_core.services.client import ApiClient

SATOSHIS_PER_BTC = 100_000_000

NETWORK_URLS = {
    "mainnet": "https://blockstream.info/api",
    "testnet": "https://blockstream.info/testnet/api",
    "liquid": "https://blockstream.info/liquid/api",
}


@dataclass
class AddressBalance:
    """Balance of one address, in satoshis unless noted."""

    confirmed: int
    unconfirmed: int

    @property
    def total(self) -> int:
        return self.confirmed + self.unconfirmed

    @property
    def btc(self) -> float:
        return self.total / SATOSHIS_PER_BTC


class BlockstreamAPI(ApiClient):
    SERVICE = "Blockstream"
    BASE_URL = NETWORK_URLS["mainnet"]
    SANDBOX_URL = NETWORK_URLS["testnet"]

    def __init__(
        self,
        network: str = "mainnet",
        base_url: str | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        if network not in NETWORK_URLS:
            msg = f"unknown Blockstream network {network!r} (expected one of {sorted(NETWORK_URLS)})"
            raise ValueError(msg)
        super().__init__(base_url=base_url or NETWORK_URLS[network], session=session)
        self.network = network

    def address_info(self, address: str) -> dict[str, Any]:
        return self._get(f"/address/{address}")

    def balance(self, address: str) -> AddressBalance:
        """Funded minus spent, split into on-chain and mempool parts."""
        info = self.address_info(address)
        chain = info.get("chain_stats", {})
        mempool = info.get("mempool_stats", {})
        return AddressBalance(
            confirmed=chain.get("funded_txo_sum", 0) - chain.get("spent_txo_sum", 0),
            unconfirmed=mempool.get("funded_txo_sum", 0) - mempool.get("spent_txo_sum", 0),
        )

    def utxos(self, address: str) -> list[dict[str, Any]]:
        return self._get(f"/address/{address}/utxo")

    def transactions(self, address: str) -> list[dict[str, Any]]:
        return self._get(f"/address/{address}/txs")

    def transaction(self, txid: str) -> dict[str, Any]:
        return self._get(f"/tx/{txid}")

    def tip_height(self) -> int:
        return int(self._get("/blocks/tip/height"))

    def fee_estimates(self) -> dict[str, float]:
        """Fee rate (sat/vB) keyed by confirmation target in blocks."""
        return self._get("/fee-estimates")
