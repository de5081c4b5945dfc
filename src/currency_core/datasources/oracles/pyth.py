"""Pyth Network Hermes price service.

Docs: https://hermes.pyth.network/docs/

Hermes returns prices as integer strings plus an exponent; ``PythPrice``
applies ``value * 10**expo`` to both the price and the confidence interval.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from currency_core.services.client import ApiClient


@dataclass
class PythPrice:
    """A scaled price update for one feed."""

    feed_id: str
    price: float
    confidence: float
    expo: int
    publish_time: int

    @property
    def published_at(self) -> datetime:
        return datetime.fromtimestamp(self.publish_time, tz=UTC)

    @classmethod
    def from_parsed(cls, entry: dict[str, Any]) -> PythPrice:
        raw = entry["price"]
        expo = int(raw["expo"])
        scale = 10**expo
        return cls(
            feed_id=entry["id"],
            price=int(raw["price"]) * scale,
            confidence=int(raw["conf"]) * scale,
            expo=expo,
            publish_time=int(raw["publish_time"]),
        )


class PythHermes(ApiClient):
    SERVICE = "Pyth"
    BASE_URL = "https://hermes.pyth.network"

    def latest_price_updates(self, feed_ids: Iterable[str]) -> list[PythPrice]:
        params = {"ids[]": [f.removeprefix("0x") for f in feed_ids], "parsed": "true"}
        payload = self._get("/v2/updates/price/latest", params)
        return [PythPrice.from_parsed(p) for p in payload.get("parsed", [])]

    def price_feeds(self, query: str | None = None, asset_type: str | None = None) -> list[dict[str, Any]]:
        """Feed ids and their attributes, optionally filtered."""
        return self._get("/v2/price_feeds", {"query": query, "asset_type": asset_type})
