"""Solana Name Service (``.sol``) resolver via Bonfida's SNS HTTP proxy.

Proxy responses are wrapped as ``{"s": "ok" | "error", "result": ...}``.
For favourite-domain lookups ``result`` is ``{"domain": <key>, "reverse":
<name without .sol>}`` or ``null`` when the wallet has not set one.
"""

from __future__ import annotations

import re
from typing import Any

from currency_core.domains.base import DomainResolver

SNS_PROXY = "https://sns-sdk-proxy.bonfida.workers.dev"


class SolanaDomainsResolver(DomainResolver):
    SERVICE = "Solana Name Service"
    BASE_URL = SNS_PROXY

    tickers = ("SOL",)
    tlds = (".sol",)
    min_length = 5
    address_pattern = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")

    def _api_error(self, payload: Any) -> str | None:
        if isinstance(payload, dict) and payload.get("s") == "error":
            return str(payload.get("result") or "SNS proxy error")
        return None

    def _forward(self, domain: str, ticker: str) -> str | None:
        result = self._get(f"/resolve/{domain.removesuffix('.sol')}").get("result")
        return result if isinstance(result, str) else None

    def _reverse(self, address: str) -> str | None:
        result = self._get(f"/favorite-domain/{address}").get("result")
        if isinstance(result, dict) and result.get("reverse"):
            return self._with_tld(result["reverse"])
        return None
