"""DEX and swap-service wrappers.

Public API:
  - jupiter: JupiterAPI, TokenPrice, SwapQuote, SOL_MINT, USDC_MINT
  - tinyman: TinymanAPI
  - uniswap: UniswapSubgraph
  - boltz: BoltzAPI
"""

from currency_core.datasources.dexs.boltz import BoltzAPI
from currency_core.datasources.dexs.jupiter import SOL_MINT, USDC_MINT, JupiterAPI, SwapQuote, TokenPrice
from currency_core.datasources.dexs.tinyman import TinymanAPI
from currency_core.datasources.dexs.uniswap import UniswapSubgraph

__all__ = [
    "SOL_MINT",
    "USDC_MINT",
    "BoltzAPI",
    "JupiterAPI",
    "SwapQuote",
    "TinymanAPI",
    "TokenPrice",
    "UniswapSubgraph",
]
