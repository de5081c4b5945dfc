"""Tezos Domains (``.tez``) resolver, read through the TzKT indexer."""

from __future__ import annotations

import re

from currency_core.domains.base import DomainResolver

TZKT_API = "https://api.tzkt.io"


class TezosDomainsResolver(DomainResolver):
    SERVICE = "Tezos Domains"
    BASE_URL = TZKT_API

    tickers = ("XTZ",)
    tlds = (".tez",)
    min_length = 5
    address_pattern = re.compile(r"^(tz1|tz2|tz3|KT1)[1-9A-HJ-NP-Za-km-z]{33}$")

    def _forward(self, domain: str, ticker: str) -> str | None:
        records = self._get("/v1/domains", {"name": domain, "select": "address"})
        if not records:
            msg = f"domain {domain} not found"
            raise ValueError(msg)
        first = records[0]
        return first.get("address") if isinstance(first, dict) else first

    def _reverse(self, address: str) -> str | None:
        records = self._get("/v1/domains", {"address": address, "reverse": "true", "select": "name"})
        if not records:
            return None
        first = records[0]
        return first.get("name") if isinstance(first, dict) else first
