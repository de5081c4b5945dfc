"""Uniswap v3 subgraph (The Graph) queries.

Every call is a GraphQL POST; the endpoint returns HTTP 200 with an
``errors`` array when the query fails, which becomes ``ApiError``.
"""

from __future__ import annotations

from typing import Any

from currency_core.services.client import ApiClient

WETH_ADDRESS = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
USDC_ADDRESS = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"

_POOL_FIELDS = """
    id
    feeTier
    liquidity
    sqrtPrice
    token0Price
    token1Price
    volumeUSD
    totalValueLockedUSD
    token0 { id symbol name decimals }
    token1 { id symbol name decimals }
"""


class UniswapSubgraph(ApiClient):
    SERVICE = "Uniswap"
    BASE_URL = "https://api.thegraph.com/subgraphs/name/uniswap/uniswap-v3"

    def _api_error(self, payload: Any) -> str | None:
        if isinstance(payload, dict) and payload.get("errors"):
            first = payload["errors"][0]
            return f"GraphQL error: {first.get('message', 'unknown error') if isinstance(first, dict) else first}"
        return None

    def query(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        body: dict[str, Any] = {"query": query}
        if variables:
            body["variables"] = variables
        return self._post("", json=body).get("data") or {}

    def pool(self, pool_id: str) -> dict[str, Any] | None:
        q = f"query ($id: ID!) {{ pool(id: $id) {{ {_POOL_FIELDS} }} }}"
        return self.query(q, {"id": pool_id.lower()}).get("pool")

    def top_pools(self, first: int = 10) -> list[dict[str, Any]]:
        q = (
            "query ($first: Int!) { pools(first: $first, orderBy: totalValueLockedUSD, "
            f"orderDirection: desc) {{ {_POOL_FIELDS} }} }}"
        )
        return self.query(q, {"first": first}).get("pools", [])

    def token(self, address: str) -> dict[str, Any] | None:
        q = (
            "query ($id: ID!) { token(id: $id) { id symbol name decimals derivedETH "
            "totalValueLockedUSD volumeUSD } }"
        )
        return self.query(q, {"id": address.lower()}).get("token")
