"""Jupiter (Solana swap aggregator) price and quote APIs.

API docs: https://dev.jup.ag/docs/api

Price lookups go to the v4 price host first and fall back to the public v2
price API when the primary is down or has no entry for the mint.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from currency_core.errors import ApiError
from currency_core.services.client import ApiClient

PRICE_API = "https://price.jup.ag/v4/price"
PRICE_API_FALLBACK = "https://api.jup.ag/price/v2"
QUOTE_API = "https://quote-api.jup.ag/v4"

SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


# =============================================================================
# Data Models
# =============================================================================


@dataclass
class TokenPrice:
    """Price of one mint, quoted in ``vs_token`` (USDC unless noted)."""

    mint: str
    price: float
    vs_token: str | None = None


@dataclass
class SwapQuote:
    """Best route for swapping ``input_amount`` base units of one mint into another."""

    input_amount: int
    output_amount: int
    price_impact_pct: float
    route_plan: list[Any] = field(default_factory=list)


class JupiterAPI(ApiClient):
    SERVICE = "Jupiter"
    BASE_URL = QUOTE_API

    def prices(self, mints: Iterable[str], *, url: str = PRICE_API) -> dict[str, dict[str, Any]]:
        """Raw price entries keyed by mint address."""
        payload = self._get(url, {"ids": ",".join(mints)})
        data = payload.get("data") if isinstance(payload, dict) else None
        if not data:
            raise ApiError(self.SERVICE, "price response has no data")
        return data

    def token_price(self, mint: str) -> TokenPrice:
        """Price of ``mint``, trying the primary price API then the fallback."""
        try:
            entry = self.prices([mint]).get(mint)
        except ApiError as exc:
            self.log.warning("Primary price API failed, trying fallback: {}", exc)
            entry = None
        if entry is None:
            entry = self.prices([mint], url=PRICE_API_FALLBACK).get(mint)
            if entry is None:
                raise ApiError(self.SERVICE, f"no price for {mint}")
        return TokenPrice(mint=mint, price=float(entry["price"]), vs_token=entry.get("vsTokenSymbol"))

    def sol_price(self) -> TokenPrice:
        return self.token_price(SOL_MINT)

    def quote(self, input_mint: str, output_mint: str, amount: int, slippage_bps: int = 50) -> SwapQuote:
        params = {
            "inputMint": input_mint,
            "outputMint": output_mint,
            "amount": amount,
            "slippageBps": slippage_bps,
        }
        data = self._get("/quote", params)
        return SwapQuote(
            input_amount=int(data["inAmount"]),
            output_amount=int(data["outAmount"]),
            price_impact_pct=float(data.get("priceImpactPct") or 0),
            route_plan=data.get("routePlan") or [],
        )
