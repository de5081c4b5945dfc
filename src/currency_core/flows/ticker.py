"""
Prefect flow that refreshes the price ticker cache.

Prices for a fixed list of coins come from CoinGecko ``coins/markets`` and
are cached in ``live/ticker.json`` for a few minutes.

Run locally:
    python -m currency_core.flows.ticker
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any

from prefect import flow, task

from currency_core.config import get_settings
from currency_core.datasources.aggregators import CoinGeckoAPI
from currency_core.store import DataStore

store = DataStore(get_settings().data_dir)

TICKER_PATH = Path("live/ticker.json")


@dataclass(frozen=True)
class TickerCoin:
    id: str
    symbol: str
    name: str


TICKER_COINS: tuple[TickerCoin, ...] = (
    TickerCoin("bitcoin", "BTC", "Bitcoin"),
    TickerCoin("ethereum", "ETH", "Ethereum"),
    TickerCoin("ripple", "XRP", "XRP"),
    TickerCoin("solana", "SOL", "Solana"),
    TickerCoin("dogecoin", "DOGE", "Dogecoin"),
    TickerCoin("cardano", "ADA", "Cardano"),
    TickerCoin("avalanche-2", "AVAX", "Avalanche"),
    TickerCoin("chainlink", "LINK", "Chainlink"),
    TickerCoin("stellar", "XLM", "Stellar"),
    TickerCoin("tezos", "XTZ", "Tezos"),
    TickerCoin("near", "NEAR", "Near"),
    TickerCoin("blockstack", "STX", "Stacks"),
    TickerCoin("zcash", "ZEC", "ZCash"),
    TickerCoin("polkadot", "DOT", "Polkadot"),
    TickerCoin("bitcoin-cash", "BCH", "Bitcoin Cash"),
    TickerCoin("uniswap", "UNI", "Uniswap"),
    TickerCoin("litecoin", "LTC", "Litecoin"),
    TickerCoin("aave", "AAVE", "Aave"),
    TickerCoin("algorand", "ALGO", "Algorand"),
    TickerCoin("cosmos", "ATOM", "Cosmos"),
    TickerCoin("lido-dao", "LDO", "Lido DAO"),
    TickerCoin("kusama", "KSM", "Kusama"),
)

DEFAULT_TICKER_COINS: tuple[str, ...] = tuple(c.id for c in TICKER_COINS)


def ticker_rows(markets: list[dict[str, Any]], coin_ids: tuple[str, ...]) -> list[dict[str, Any]]:
    """One row per requested coin, in request order.

    Coins CoinGecko didn't return get zeros rather than being dropped.
    """
    by_id = {m.get("id"): m for m in markets}
    known = {c.id: c for c in TICKER_COINS}
    rows = []
    for coin_id in coin_ids:
        market = by_id.get(coin_id, {})
        coin = known.get(coin_id)
        rows.append(
            {
                "id": coin_id,
                "symbol": coin.symbol if coin else str(market.get("symbol", "")).upper(),
                "name": coin.name if coin else market.get("name", coin_id),
                "price": market.get("current_price") or 0,
                "price_change_24h": market.get("price_change_percentage_24h") or 0,
                "market_cap": market.get("market_cap") or 0,
            }
        )
    return rows


@task(name="fetch-ticker", retries=2, retry_delay_seconds=5)
def fetch_ticker(coin_ids: tuple[str, ...]) -> list[dict[str, Any]]:
    """Fetch market data for ``coin_ids`` from CoinGecko."""
    api = CoinGeckoAPI()
    markets = api.coins_markets(coin_ids, per_page=max(len(coin_ids), 1))
    return ticker_rows(markets, coin_ids)


@task(name="save-ticker")
def save_ticker(rows: list[dict[str, Any]]) -> Path:
    return store.write(
        TICKER_PATH,
        rows,
        source="coingecko",
        ttl=timedelta(minutes=get_settings().ticker_ttl_minutes),
        vs_currency="usd",
    )


@flow(name="refresh-ticker", log_prints=True)
def refresh_ticker(coin_ids: tuple[str, ...] = DEFAULT_TICKER_COINS) -> dict[str, Any]:
    """Serve the cached ticker while fresh, otherwise refetch it."""
    coin_ids = tuple(coin_ids)
    if store.is_fresh(TICKER_PATH):
        print("Ticker data is fresh, skipping fetch.")
        rows = store.read(TICKER_PATH) or []
        return {"coins": len(rows), "source": "cache"}

    print(f"Fetching prices for {len(coin_ids)} coins...")
    rows = fetch_ticker(coin_ids)
    output_path = save_ticker(rows)
    print(f"Saved {len(rows)} coins to {output_path}")
    return {"coins": len(rows), "source": "coingecko"}


if __name__ == "__main__":
    result = refresh_ticker()
    print(f"Flow complete: {result}")
