"""Peer-to-peer exchanges and escrow marketplaces."""

from __future__ import annotations

from currency_core.schemas import Category, ServiceInfo, SocialLinks

BISQ = ServiceInfo(
    id="bisq",
    name="Bisq",
    category=Category.P2P_EXCHANGE,
    website="https://bisq.network/",
    description="Open-source desktop P2P exchange over Tor with 2-of-2 multisig escrow",
    docs_url="https://bisq.wiki/",
    tickers=("BTC", "XMR", "LTC"),
    social=SocialLinks(twitter="https://twitter.com/bisq_network", github="https://github.com/bisq-network"),
    features=("non-custodial", "no kyc", "tor"),
    fees={"maker": "0.15%", "taker": "1.15%"},
)

HODLHODL = ServiceInfo(
    id="hodlhodl",
    name="Hodl Hodl",
    category=Category.P2P_EXCHANGE,
    website="https://hodlhodl.com/",
    description="Non-custodial P2P Bitcoin trading with multisig escrow",
    api_base_url="https://hodlhodl.com/api/v1",
    docs_url="https://gitlab.com/hodlhodl-public/public_docs",
    tickers=("BTC",),
    social=SocialLinks(twitter="https://twitter.com/hodlhodl", telegram="https://t.me/hodlhodl"),
    fees={"trade": "0.6%"},
)

LOCALCOINSWAP = ServiceInfo(
    id="localcoinswap",
    name="LocalCoinSwap",
    category=Category.P2P_EXCHANGE,
    website="https://localcoinswap.com/",
    description="Multi-coin P2P marketplace with smart-contract escrow",
    api_base_url="https://api.localcoinswap.com/api/v2",
    tickers=("BTC", "ETH", "LTC", "DASH", "XRP"),
    social=SocialLinks(twitter="https://twitter.com/LocalCoinSwap"),
)

NOONES = ServiceInfo(
    id="noones",
    name="NoOnes",
    category=Category.P2P_EXCHANGE,
    website="https://noones.com/",
    description="P2P marketplace focused on emerging markets",
    api_base_url="https://api.noones.com",
    docs_url="https://dev.noones.com/",
    tickers=("BTC", "ETH", "SOL", "TRX"),
    social=SocialLinks(twitter="https://twitter.com/NoOnesApp"),
)

PEACH = ServiceInfo(
    id="peachbitcoin",
    name="Peach Bitcoin",
    category=Category.P2P_EXCHANGE,
    website="https://peachbitcoin.com/",
    description="Mobile P2P Bitcoin exchange",
    api_base_url="https://api.peachbitcoin.com/v1",
    docs_url="https://docs.peachbitcoin.com/",
    tickers=("BTC",),
    social=SocialLinks(twitter="https://twitter.com/peachbitcoin"),
)

REMITANO = ServiceInfo(
    id="remitano",
    name="Remitano",
    category=Category.P2P_EXCHANGE,
    website="https://remitano.com/",
    description="Escrow-protected P2P marketplace",
    tickers=("BTC", "ETH", "XRP", "TRX", "LTC"),
    social=SocialLinks(twitter="https://twitter.com/remitano"),
)

ROBOSATS = ServiceInfo(
    id="robosats",
    name="RoboSats",
    category=Category.P2P_EXCHANGE,
    website="https://learn.robosats.com/",
    description="Lightning hold-invoice P2P exchange with disposable robot identities",
    docs_url="https://learn.robosats.com/docs/",
    tickers=("BTC",),
    social=SocialLinks(twitter="https://twitter.com/RoboSats", github="https://github.com/RoboSats"),
    features=("lightning", "tor", "no kyc"),
)

BITVALVE = ServiceInfo(
    id="bitvalve",
    name="BitValve",
    category=Category.P2P_EXCHANGE,
    website="https://www.bitvalve.com/",
    description="P2P crypto marketplace with escrow",
    tickers=("BTC", "ETH", "LTC", "DOGE"),
)

P2P_EXCHANGES: tuple[ServiceInfo, ...] = (
    BISQ,
    BITVALVE,
    HODLHODL,
    LOCALCOINSWAP,
    NOONES,
    PEACH,
    REMITANO,
    ROBOSATS,
)
