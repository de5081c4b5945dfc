"""Blockchain explorer wrappers.

Public API:
  - blockstream: BlockstreamAPI, AddressBalance (BTC / testnet / Liquid)
  - blockcypher: BlockcypherAPI (BTC, LTC, DOGE, DASH)
  - tzkt: TzktAPI (Tezos)
  - horizon: HorizonAPI (Stellar)
  - xrpscan: XrpscanAPI (XRP Ledger)
  - tronscan: TronscanAPI (TRON)
  - hiro: HiroStacksAPI (Stacks)
  - subscan: SubscanAPI (Polkadot and Substrate chains)
"""

from currency_core.datasources.explorers.blockcypher import BlockcypherAPI
from currency_core.datasources.explorers.blockstream import AddressBalance, BlockstreamAPI
from currency_core.datasources.explorers.hiro import HiroStacksAPI
from currency_core.datasources.explorers.horizon import HorizonAPI
from currency_core.datasources.explorers.subscan import SubscanAPI
from currency_core.datasources.explorers.tronscan import TronscanAPI
from currency_core.datasources.explorers.tzkt import TzktAPI
from currency_core.datasources.explorers.xrpscan import XrpscanAPI

__all__ = [
    "AddressBalance",
    "BlockcypherAPI",
    "BlockstreamAPI",
    "HiroStacksAPI",
    "HorizonAPI",
    "SubscanAPI",
    "TronscanAPI",
    "TzktAPI",
    "XrpscanAPI",
]
