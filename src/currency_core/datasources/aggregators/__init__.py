"""Market-data aggregator wrappers.

Public API:
  - coingecko: CoinGeckoAPI
  - coincodex: CoinCodexAPI, CoinSummary, plus pure ``*_url`` builders
"""

from currency_core.datasources.aggregators.coincodex import CoinCodexAPI, CoinSummary
from currency_core.datasources.aggregators.coingecko import CoinGeckoAPI

__all__ = [
    "CoinCodexAPI",
    "CoinGeckoAPI",
    "CoinSummary",
]
