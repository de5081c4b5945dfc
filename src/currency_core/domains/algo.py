"""NF Domains (``.algo``) resolver for Algorand.

API guide: https://api-docs.nf.domains/reference/integrators-guide/

Forward lookups read ``owner`` from ``GET /nfd/{name}``. Reverse lookups try
several endpoints in turn (mainnet then testnet address lookup, mainnet then
testnet owner search, and the legacy lookup), because the response shapes
differ and any one of them may be unavailable.
"""

from __future__ import annotations

import re
from typing import Any

from currency_core.domains.base import LOOKUP_ERRORS, DomainResolver

NFD_API = "https://api.nf.domains/nfd"
NFD_TESTNET_API = "https://api.testnet.nf.domains/nfd"


def extract_nfd_name(data: Any, address: str) -> str | None:
    """Find an NFD name in any of the response shapes the NFD API returns."""
    if isinstance(data, list):
        return extract_nfd_name(data[0], address) if data else None
    if not isinstance(data, dict):
        return None

    # v2/address and lookup: keyed by address
    keyed = data.get(address)
    if isinstance(keyed, list) and keyed and isinstance(keyed[0].get("name"), str):
        return keyed[0]["name"]
    if isinstance(keyed, dict) and isinstance(keyed.get("name"), str):
        return keyed["name"]

    # v2/search
    nfds = data.get("nfds")
    if isinstance(nfds, list) and nfds and isinstance(nfds[0].get("name"), str):
        return nfds[0]["name"]

    for key in ("name", "domain", "nfdName"):
        value = data.get(key)
        if isinstance(value, str) and value:
            return value.removesuffix(".algo")

    for value in data.values():
        if isinstance(value, dict | list):
            found = extract_nfd_name(value, address)
            if found:
                return found
    return None


class AlgoDomainsResolver(DomainResolver):
    SERVICE = "NF Domains"
    BASE_URL = NFD_API

    tickers = ("ALGO",)
    tlds = (".algo",)
    min_length = 6
    address_pattern = re.compile(r"^[A-Z2-7]{58}$")

    def normalize_address(self, address: str) -> str:
        return address.strip().upper()

    def _forward(self, domain: str, ticker: str) -> str | None:
        name = domain.removesuffix(".algo")
        data = self._get(f"/{name}")
        if not isinstance(data, dict) or not data.get("owner"):
            msg = f"no owner address found for domain {domain}"
            raise ValueError(msg)
        return data["owner"]

    def _reverse_candidates(self, address: str) -> list[tuple[str, dict[str, Any]]]:
        by_address = {"address": address, "limit": 1, "view": "thumbnail"}
        by_owner = {"owner": address, "limit": 1, "view": "tiny"}
        return [
            (f"{NFD_API}/v2/address", by_address),
            (f"{NFD_TESTNET_API}/v2/address", by_address),
            (f"{NFD_API}/v2/search", by_owner),
            (f"{NFD_TESTNET_API}/v2/search", by_owner),
            (f"{NFD_API}/lookup", {"address": address, "view": "thumbnail", "allowUnverified": "true"}),
        ]

    def _reverse(self, address: str) -> str | None:
        for url, params in self._reverse_candidates(address):
            try:
                name = extract_nfd_name(self._get(url, params), address)
            except LOOKUP_ERRORS as exc:
                self.log.debug("NFD endpoint {} failed: {}", url, exc)
                continue
            if name:
                return self._with_tld(name)
        return None
