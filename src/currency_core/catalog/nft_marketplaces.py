"""NFT marketplaces and aggregators."""

from __future__ import annotations

from currency_core.schemas import Category, ServiceInfo, SocialLinks

BLUR = ServiceInfo(
    id="blur",
    name="Blur",
    category=Category.NFT_MARKETPLACE,
    website="https://blur.io/",
    description="Ethereum NFT marketplace and aggregator with real-time price feeds",
    api_base_url="https://api.blur.io",
    docs_url="https://docs.blur.io/",
    tickers=("ETH",),
    social=SocialLinks(twitter="https://twitter.com/blur_io", discord="https://discord.gg/blur"),
    features=("aggregator", "bidding", "lending"),
    notes=("BLUR token: 0x5283D291DBCF85356A21bA090E6db59121208b44",),
)

LOOKSRARE = ServiceInfo(
    id="looksrare",
    name="LooksRare",
    category=Category.NFT_MARKETPLACE,
    website="https://looksrare.org/",
    description="Marketplace that rewards traders with LOOKS; stakers earn trading fees",
    api_base_url="https://api.looksrare.org",
    docs_url="https://docs.looksrare.org/",
    tickers=("ETH",),
    social=SocialLinks(twitter="https://twitter.com/LooksRareNFT", discord="https://discord.gg/looksrare"),
)

OPENSEA = ServiceInfo(
    id="opensea",
    name="OpenSea",
    category=Category.NFT_MARKETPLACE,
    website="https://opensea.io/",
    description="Multi-chain NFT marketplace built on the Seaport protocol",
    api_base_url="https://api.opensea.io/api/v2",
    docs_url="https://docs.opensea.io/reference/api-overview",
    tickers=("ETH", "SOL"),
    social=SocialLinks(twitter="https://twitter.com/opensea", discord="https://discord.gg/opensea"),
    fees={"platform": "2.5%"},
    auth_required=True,
)

MAGIC_EDEN = ServiceInfo(
    id="magic-eden",
    name="Magic Eden",
    category=Category.NFT_MARKETPLACE,
    website="https://magiceden.io/",
    description="Solana-first marketplace, also Bitcoin ordinals and EVM",
    api_base_url="https://api-mainnet.magiceden.dev/v2",
    docs_url="https://docs.magiceden.io/",
    tickers=("SOL", "BTC", "ETH"),
    social=SocialLinks(twitter="https://twitter.com/MagicEden"),
)

OBJKT = ServiceInfo(
    id="objkt",
    name="objkt.com",
    category=Category.NFT_MARKETPLACE,
    website="https://objkt.com/",
    description="Largest Tezos NFT marketplace; GraphQL API",
    api_base_url="https://data.objkt.com/v3/graphql",
    docs_url="https://data.objkt.com/docs",
    tickers=("XTZ",),
    social=SocialLinks(twitter="https://twitter.com/objktcom"),
)

XRP_CAFE = ServiceInfo(
    id="xrp-cafe",
    name="xrp.cafe",
    category=Category.NFT_MARKETPLACE,
    website="https://xrp.cafe/",
    description="XLS-20 NFT marketplace on the XRP Ledger",
    tickers=("XRP",),
)

NFT_MARKETPLACES: tuple[ServiceInfo, ...] = (
    BLUR,
    LOOKSRARE,
    MAGIC_EDEN,
    OBJKT,
    OPENSEA,
    XRP_CAFE,
)
