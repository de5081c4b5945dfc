"""DIA oracle REST API.

Docs: https://docs.diadata.org/products/token-price-feeds/access-the-oracle

Symbols are upper-cased before they go into the path. Unknown symbols come
back as HTTP 404 with a plain-text body.
"""

from __future__ import annotations

from typing import Any

from currency_core.services.client import ApiClient

#: Filter used by DIA's own price feeds (moving-average, 120s window).
DEFAULT_FILTER = "MAIR120"


class DiaOracle(ApiClient):
    SERVICE = "DIA"
    BASE_URL = "https://api.diadata.org/v1"

    def _api_error(self, payload: Any) -> str | None:
        if isinstance(payload, dict) and payload.get("errorcode"):
            return f"{payload['errorcode']}: {payload.get('errormessage', '')}"
        return None

    def price_feed(self, symbol: str) -> dict[str, Any]:
        """Latest aggregated quotation (``Price``, ``PriceYesterday``, ``Time``...)."""
        return self._get(f"/quotation/{symbol.upper()}")

    def asset_quotation(self, blockchain: str, address: str) -> dict[str, Any]:
        return self._get(f"/assetQuotation/{blockchain}/{address}")

    def supply(self, symbol: str) -> dict[str, Any]:
        return self._get(f"/supply/{symbol.upper()}")

    def quotation_at(self, symbol: str, timestamp: int, window: int = 3600) -> list[Any]:
        """Filtered chart points for the ``window`` seconds ending at ``timestamp``."""
        params = {"starttime": timestamp - window, "endtime": timestamp}
        payload = self._get(f"/chartPointsAllExchanges/{DEFAULT_FILTER}/{symbol.upper()}", params)
        points = payload.get("DataPoints") or []
        if not points:
            return []
        return points[0].get("Series") or []
