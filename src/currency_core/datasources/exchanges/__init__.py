"""Centralized exchange REST wrappers.

Public API:
  - binance: BinanceExchange (public market data + signed account)
  - kraken: KrakenExchange (public market data + signed balance)
  - coinbase: CoinbaseExchange
  - bybit: BybitExchange (V5)
  - bitfinex: BitfinexExchange (v2)
"""

from currency_core.datasources.exchanges.binance import BinanceExchange
from currency_core.datasources.exchanges.bitfinex import BitfinexExchange
from currency_core.datasources.exchanges.bybit import BybitExchange
from currency_core.datasources.exchanges.coinbase import CoinbaseExchange
from currency_core.datasources.exchanges.kraken import KrakenExchange

__all__ = [
    "BinanceExchange",
    "BitfinexExchange",
    "BybitExchange",
    "CoinbaseExchange",
    "KrakenExchange",
]
