"""Block explorers with public REST APIs."""

from __future__ import annotations

from currency_core.schemas import Category, ServiceInfo

EXPLORERS: tuple[ServiceInfo, ...] = (
    ServiceInfo(
        id="blockcypher",
        name="BlockCypher",
        category=Category.EXPLORER,
        website="https://www.blockcypher.com/",
        description="Multi-chain REST explorer for UTXO coins",
        api_base_url="https://api.blockcypher.com/v1",
        docs_url="https://www.blockcypher.com/dev/",
        tickers=("BTC", "LTC", "DOGE", "DASH"),
        fees={"free_tier": "3 req/sec, 100 req/hour"},
    ),
    ServiceInfo(
        id="blockstream",
        name="Blockstream Esplora",
        category=Category.EXPLORER,
        website="https://blockstream.info/",
        description="Esplora REST API for Bitcoin and Liquid",
        api_base_url="https://blockstream.info/api",
        docs_url="https://github.com/Blockstream/esplora/blob/master/API.md",
        tickers=("BTC",),
    ),
    ServiceInfo(
        id="hiro",
        name="Hiro Stacks API",
        category=Category.EXPLORER,
        website="https://www.hiro.so/",
        description="Stacks blockchain API with BNS name lookups",
        api_base_url="https://api.hiro.so",
        docs_url="https://docs.hiro.so/stacks/api",
        tickers=("STX",),
    ),
    ServiceInfo(
        id="horizon",
        name="Stellar Horizon",
        category=Category.EXPLORER,
        website="https://developers.stellar.org/",
        description="Stellar network REST gateway",
        api_base_url="https://horizon.stellar.org",
        docs_url="https://developers.stellar.org/docs/data/horizon",
        tickers=("XLM",),
        sdk=("stellar-sdk",),
    ),
    ServiceInfo(
        id="subscan",
        name="Subscan",
        category=Category.EXPLORER,
        website="https://www.subscan.io/",
        description="Substrate explorer for Polkadot and parachains",
        api_base_url="https://polkadot.api.subscan.io",
        docs_url="https://support.subscan.io/",
        tickers=("DOT",),
        auth_required=True,
    ),
    ServiceInfo(
        id="tronscan",
        name="Tronscan",
        category=Category.EXPLORER,
        website="https://tronscan.org/",
        description="TRON explorer API",
        api_base_url="https://apilist.tronscanapi.com/api",
        docs_url="https://docs.tronscan.org/",
        tickers=("TRX",),
    ),
    ServiceInfo(
        id="tzkt",
        name="TzKT",
        category=Category.EXPLORER,
        website="https://tzkt.io/",
        description="Tezos indexer with Tezos Domains data",
        api_base_url="https://api.tzkt.io",
        docs_url="https://api.tzkt.io/",
        tickers=("XTZ",),
    ),
    ServiceInfo(
        id="xrpscan",
        name="XRPSCAN",
        category=Category.EXPLORER,
        website="https://xrpscan.com/",
        description="XRP Ledger explorer API",
        api_base_url="https://api.xrpscan.com/api/v1",
        docs_url="https://docs.xrpscan.com/",
        tickers=("XRP",),
    ),
)
