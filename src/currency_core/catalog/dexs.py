"""Decentralized exchanges and swap aggregators, grouped by chain."""

from __future__ import annotations

from currency_core.schemas import Category, ServiceInfo, SocialLinks

JUPITER = ServiceInfo(
    id="jupiter",
    name="Jupiter",
    category=Category.DEX,
    website="https://jup.ag/",
    description="Solana swap aggregator routing across all major Solana DEXs",
    api_base_url="https://quote-api.jup.ag/v6",
    docs_url="https://dev.jup.ag/docs/api",
    tickers=("SOL",),
    social=SocialLinks(twitter="https://twitter.com/JupiterExchange", discord="https://discord.gg/jup"),
    features=("swap quotes", "price api", "limit orders", "dca"),
)

RAYDIUM = ServiceInfo(
    id="raydium",
    name="Raydium",
    category=Category.DEX,
    website="https://raydium.io/",
    description="Solana AMM with concentrated-liquidity pools",
    api_base_url="https://api-v3.raydium.io",
    docs_url="https://docs.raydium.io/",
    tickers=("SOL",),
    social=SocialLinks(twitter="https://twitter.com/RaydiumProtocol"),
)

TINYMAN = ServiceInfo(
    id="tinyman",
    name="Tinyman",
    category=Category.DEX,
    website="https://tinyman.org/",
    description="Algorand AMM; analytics API exposes pools and assets",
    api_base_url="https://mainnet.analytics.tinyman.org/api/v1",
    docs_url="https://docs.tinyman.org/",
    tickers=("ALGO",),
    sdk=("tinyman-py-sdk",),
    social=SocialLinks(twitter="https://twitter.com/tinymanorg", discord="https://discord.gg/wvHnAdmEv6"),
)

UNISWAP = ServiceInfo(
    id="uniswap",
    name="Uniswap",
    category=Category.DEX,
    website="https://uniswap.org/",
    description="Ethereum AMM; pool and token data via The Graph subgraph",
    api_base_url="https://gateway.thegraph.com/api",
    docs_url="https://docs.uniswap.org/api/subgraph/overview",
    tickers=("ETH",),
    sdk=("uniswap-python",),
    social=SocialLinks(twitter="https://twitter.com/Uniswap", discord="https://discord.gg/uniswap"),
    features=("v2", "v3", "v4", "subgraph"),
    fees={"pool_tiers": ["0.01%", "0.05%", "0.30%", "1.00%"]},
)

BOLTZ = ServiceInfo(
    id="boltz",
    name="Boltz",
    category=Category.DEX,
    website="https://boltz.exchange/",
    description="Non-custodial Bitcoin/Lightning/Liquid atomic swaps",
    api_base_url="https://api.boltz.exchange",
    docs_url="https://docs.boltz.exchange/",
    tickers=("BTC",),
    social=SocialLinks(
        twitter="https://twitter.com/BoltzExchange",
        telegram="https://t.me/boltz_exchanges",
        github="https://github.com/BoltzExchange",
    ),
    features=("submarine swaps", "reverse swaps", "chain swaps"),
)

THORCHAIN = ServiceInfo(
    id="thorchain",
    name="THORChain",
    category=Category.DEX,
    website="https://thorchain.org/",
    description="Cross-chain native-asset swaps without wrapping",
    api_base_url="https://thornode.ninerealms.com",
    docs_url="https://dev.thorchain.org/",
    tickers=("BTC", "ETH", "DOGE", "LTC", "ATOM", "BNB"),
    social=SocialLinks(twitter="https://twitter.com/THORChain"),
)

QUIPUSWAP = ServiceInfo(
    id="quipuswap",
    name="QuipuSwap",
    category=Category.DEX,
    website="https://quipuswap.com/",
    description="Tezos AMM for FA1.2/FA2 tokens",
    docs_url="https://docs.quipuswap.com/",
    tickers=("XTZ",),
    social=SocialLinks(twitter="https://twitter.com/QuipuSwap"),
)

XRPL_DEX = ServiceInfo(
    id="xrpl-dex",
    name="XRPL Native DEX",
    category=Category.DEX,
    website="https://xrpl.org/decentralized-exchange.html",
    description="Order-book and AMM exchange built into the XRP Ledger",
    api_base_url="https://s1.ripple.com:51234",
    docs_url="https://xrpl.org/docs/concepts/tokens/decentralized-exchange",
    tickers=("XRP",),
    sdk=("xrpl-py",),
)

STELLARX = ServiceInfo(
    id="stellarx",
    name="StellarX",
    category=Category.DEX,
    website="https://www.stellarx.com/",
    description="Front end for the Stellar network's built-in order book",
    tickers=("XLM",),
    sdk=("stellar-sdk",),
)

DEXS: tuple[ServiceInfo, ...] = (
    BOLTZ,
    JUPITER,
    QUIPUSWAP,
    RAYDIUM,
    STELLARX,
    THORCHAIN,
    TINYMAN,
    UNISWAP,
    XRPL_DEX,
)
