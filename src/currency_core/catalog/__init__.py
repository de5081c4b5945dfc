"""
Service catalogue: static metadata for third-party crypto services.

Each category module exports a tuple of ``ServiceInfo`` constants:

    exchanges.py         EXCHANGES
    aggregators.py       AGGREGATORS
    dexs.py              DEXS
    oracles.py           ORACLES
    staking_pools.py     STAKING_POOLS
    nft_marketplaces.py  NFT_MARKETPLACES
    p2p_exchanges.py     P2P_EXCHANGES
    ramps.py             RAMPS
    quick_exchanges.py   QUICK_EXCHANGES
    explorers.py         EXPLORERS
    ipfs_providers.py    IPFS_PROVIDERS
    llm_providers.py     LLM_PROVIDERS

All of them are registered here at import time, keyed by category and id.

``currencies.py`` holds per-coin ``CurrencyInfo`` records (CURRENCIES), kept
in a separate registry keyed by ticker.
"""

from __future__ import annotations

from currency_core.catalog.aggregators import AGGREGATORS
from currency_core.catalog.currencies import CURRENCIES
from currency_core.catalog.dexs import DEXS
from currency_core.catalog.exchanges import EXCHANGES
from currency_core.catalog.explorers import EXPLORERS
from currency_core.catalog.ipfs_providers import IPFS_PROVIDERS
from currency_core.catalog.llm_providers import LLM_PROVIDERS
from currency_core.catalog.nft_marketplaces import NFT_MARKETPLACES
from currency_core.catalog.oracles import ORACLES
from currency_core.catalog.p2p_exchanges import P2P_EXCHANGES
from currency_core.catalog.quick_exchanges import QUICK_EXCHANGES
from currency_core.catalog.ramps import RAMPS
from currency_core.catalog.staking_pools import STAKING_POOLS
from currency_core.schemas import Category, CurrencyInfo, ServiceInfo

_REGISTRY: dict[Category, dict[str, ServiceInfo]] = {c: {} for c in Category}
_CURRENCIES: dict[str, CurrencyInfo] = {}


def register(info: ServiceInfo) -> ServiceInfo:
    """Add ``info`` to the registry. Ids must be unique within a category."""
    entries = _REGISTRY[info.category]
    if info.id in entries:
        msg = f"duplicate {info.category} id: {info.id!r}"
        raise ValueError(msg)
    entries[info.id] = info
    return info


def get_service(category: Category | str, service_id: str) -> ServiceInfo | None:
    return _REGISTRY[Category(category)].get(service_id.lower())


def list_services(category: Category | str | None = None) -> list[ServiceInfo]:
    """All registered services, or one category's, sorted by display name."""
    if category is None:
        infos = [info for entries in _REGISTRY.values() for info in entries.values()]
    else:
        infos = list(_REGISTRY[Category(category)].values())
    return sorted(infos, key=lambda i: (i.name.lower(), i.category))


def services_for_ticker(ticker: str) -> list[ServiceInfo]:
    return [info for info in list_services() if info.supports(ticker)]


def register_currency(info: CurrencyInfo) -> CurrencyInfo:
    if info.ticker in _CURRENCIES:
        msg = f"duplicate currency ticker: {info.ticker!r}"
        raise ValueError(msg)
    _CURRENCIES[info.ticker] = info
    return info


def get_currency(ticker: str) -> CurrencyInfo | None:
    return _CURRENCIES.get(ticker.strip().upper())


def list_currencies() -> list[CurrencyInfo]:
    """All currency records, sorted by ticker."""
    return sorted(_CURRENCIES.values(), key=lambda c: c.ticker)


def search(text: str) -> list[ServiceInfo]:
    """Case-insensitive substring match on id, name and description."""
    needle = text.strip().lower()
    if not needle:
        return []
    return [
        info
        for info in list_services()
        if needle in info.id or needle in info.name.lower() or needle in info.description.lower()
    ]


for _group in (
    EXCHANGES,
    AGGREGATORS,
    DEXS,
    ORACLES,
    STAKING_POOLS,
    NFT_MARKETPLACES,
    P2P_EXCHANGES,
    RAMPS,
    QUICK_EXCHANGES,
    EXPLORERS,
    IPFS_PROVIDERS,
    LLM_PROVIDERS,
):
    for _info in _group:
        register(_info)

for _currency in CURRENCIES:
    register_currency(_currency)

__all__ = [
    "get_currency",
    "get_service",
    "list_currencies",
    "list_services",
    "register",
    "register_currency",
    "search",
    "services_for_ticker",
]
