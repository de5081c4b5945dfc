"""Oracle networks and price-feed providers."""

from __future__ import annotations

from currency_core.schemas import Category, ServiceInfo, SocialLinks

CHAINLINK = ServiceInfo(
    id="chainlink",
    name="Chainlink",
    category=Category.ORACLE,
    website="https://chain.link/",
    description="Decentralized oracle network; on-chain price feed aggregators",
    docs_url="https://docs.chain.link/data-feeds",
    tickers=("ETH", "BNB", "SOL", "DOT", "ALGO", "TRX", "ATOM", "XRP", "DOGE"),
    social=SocialLinks(twitter="https://twitter.com/chainlink", discord="https://discord.gg/chainlink"),
    features=("data feeds", "vrf", "automation", "ccip"),
)

DIA = ServiceInfo(
    id="dia",
    name="DIA",
    category=Category.ORACLE,
    website="https://www.diadata.org/",
    description="Multi-source oracle with transparent sourcing from 85+ exchanges",
    api_base_url="https://api.diadata.org/v1",
    docs_url="https://docs.diadata.org/",
    tickers=("DOT", "ALGO", "LTC", "XLM", "TRX", "STX", "LUNC", "LUNA", "ETH", "ATOM", "XRP", "AR"),
    social=SocialLinks(
        twitter="https://twitter.com/DIAdata_org",
        telegram="https://t.me/DIAdata_org",
        discord="https://discord.gg/diaoracle",
        github="https://github.com/diadata-org",
    ),
    features=("price feeds", "asset quotations", "supply", "historical quotations"),
)

PYTH = ServiceInfo(
    id="pyth",
    name="Pyth Network",
    category=Category.ORACLE,
    website="https://pyth.network/",
    description="First-party pull oracle; price updates served by Hermes",
    api_base_url="https://hermes.pyth.network",
    docs_url="https://docs.pyth.network/",
    tickers=("SOL", "ETH", "ATOM", "STX", "ALGO", "XRP", "LUNC"),
    sdk=("pythclient",),
    social=SocialLinks(
        twitter="https://twitter.com/PythNetwork",
        discord="https://discord.gg/PythNetwork",
        telegram="https://t.me/Pyth_Network",
        github="https://github.com/pyth-network",
    ),
    features=("price feeds", "confidence intervals", "benchmarks"),
)

BAND = ServiceInfo(
    id="band",
    name="Band Protocol",
    category=Category.ORACLE,
    website="https://www.bandprotocol.com/",
    description="Cosmos-SDK oracle chain serving cross-chain data requests",
    api_base_url="https://laozi1.bandchain.org/api",
    docs_url="https://docs.bandchain.org/",
    tickers=("ATOM", "BNB", "XLM", "LUNC", "LUNA", "XRP"),
    social=SocialLinks(twitter="https://twitter.com/BandProtocol"),
)

SWITCHBOARD = ServiceInfo(
    id="switchboard",
    name="Switchboard",
    category=Category.ORACLE,
    website="https://switchboard.xyz/",
    description="Permissionless oracle for Solana and EVM chains",
    docs_url="https://docs.switchboard.xyz/",
    tickers=("SOL",),
    social=SocialLinks(twitter="https://twitter.com/switchboardxyz"),
)

REFLECTOR = ServiceInfo(
    id="reflector",
    name="Reflector",
    category=Category.ORACLE,
    website="https://reflector.network/",
    description="Soroban price oracle for the Stellar network",
    docs_url="https://reflector.network/docs",
    tickers=("XLM",),
)

REDSTONE = ServiceInfo(
    id="redstone",
    name="RedStone",
    category=Category.ORACLE,
    website="https://redstone.finance/",
    description="Modular oracle delivering signed data packages on demand",
    api_base_url="https://api.redstone.finance",
    docs_url="https://docs.redstone.finance/",
    tickers=("ETH", "LTC"),
    social=SocialLinks(twitter="https://twitter.com/redstone_defi"),
)

ORACLES: tuple[ServiceInfo, ...] = (
    BAND,
    CHAINLINK,
    DIA,
    PYTH,
    REDSTONE,
    REFLECTOR,
    SWITCHBOARD,
)
