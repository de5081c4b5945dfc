"""Stacks BNS resolver (``.btc``, ``.stx``, ``.id``) using the BNS V2 API.

Docs: https://docs.stacks.co/docs/blockchain/bitcoin-name-system

A name resolves to its owner for STX. For other coins the name's zone file
may list wallet addresses; ``btc`` also has a legacy top-level field.
"""

from __future__ import annotations

import re
from typing import Any

from currency_core.domains.base import DomainResolver
from currency_core.errors import ApiError

BNS_V2_API = "https://api.bnsv2.com"


def zonefile_address(zonefile: dict[str, Any], ticker: str) -> str | None:
    """Wallet address for ``ticker`` listed in a BNS zone file, if any."""
    network = ticker.lower()
    for entry in zonefile.get("addresses") or []:
        if entry.get("network") == network and (entry.get("type") == "wallet" or network == "btc"):
            return entry.get("address")
    if network == "btc" and zonefile.get("btc"):
        return zonefile["btc"]
    return None


class StacksBnsResolver(DomainResolver):
    SERVICE = "Stacks BNS"
    BASE_URL = BNS_V2_API

    tickers = ("STX", "BTC")
    tlds = (".btc", ".stx", ".id")
    min_length = 3
    address_pattern = re.compile(r"^(SP|SM)[0-9A-Z]{39}$")

    def supports_ticker(self, ticker: str) -> bool:
        # Any coin can be listed in a zone file.
        return bool(ticker)

    def _forward(self, domain: str, ticker: str) -> str | None:
        payload = self._get(f"/names/{domain}")
        data = payload.get("data")
        if not data or payload.get("status") != "active":
            msg = f"domain {domain} is not active"
            raise ValueError(msg)
        if not data.get("is_valid") or data.get("revoked"):
            msg = f"domain {domain} is not valid or has been revoked"
            raise ValueError(msg)
        if ticker == "STX":
            return data["owner"]

        try:
            zone = self._get(f"/zonefile/{domain}/raw").get("zonefile") or {}
        except ApiError as exc:
            self.log.warning("Zone file for {} unavailable: {}", domain, exc)
            zone = {}
        address = zonefile_address(zone, ticker)
        if not address:
            msg = f"domain {domain} exists but has no {ticker} address in its profile"
            raise ValueError(msg)
        return address

    def _reverse(self, address: str) -> str | None:
        try:
            payload = self._get(f"/names/address/{address}/valid")
        except ApiError as exc:
            if exc.status == 404:
                return None
            raise
        names = payload.get("names") or []
        if len(names) > 1:
            self.log.debug("{} owns {} names, using the first", address, len(names))
        return names[0].get("full_name") if names else None
