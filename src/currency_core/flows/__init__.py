"""Prefect flows.

Public API:
  - ticker: refresh_ticker, DEFAULT_TICKER_COINS
"""

from currency_core.flows.ticker import DEFAULT_TICKER_COINS, refresh_ticker

__all__ = ["DEFAULT_TICKER_COINS", "refresh_ticker"]
