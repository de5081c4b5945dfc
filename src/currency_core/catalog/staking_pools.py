"""Staking pools and liquid-staking protocols."""

from __future__ import annotations

from currency_core.schemas import Category, ServiceInfo, SocialLinks

LIDO = ServiceInfo(
    id="lido",
    name="Lido",
    category=Category.STAKING_POOL,
    website="https://lido.fi/",
    description="Largest liquid staking protocol; issues stETH",
    api_base_url="https://eth-api.lido.fi/v1",
    docs_url="https://docs.lido.fi/",
    tickers=("ETH",),
    sdk=("@lido-sdk/contracts",),
    social=SocialLinks(twitter="https://twitter.com/LidoFinance", discord="https://discord.gg/lido"),
    features=("liquid staking", "withdrawal queue"),
    fees={"protocol_fee": "10% of rewards", "minimum_stake": "0.001 ETH"},
)

ROCKET_POOL = ServiceInfo(
    id="rocket-pool",
    name="Rocket Pool",
    category=Category.STAKING_POOL,
    website="https://rocketpool.net/",
    description="Decentralized liquid staking with rETH",
    docs_url="https://docs.rocketpool.net/",
    tickers=("ETH",),
    social=SocialLinks(twitter="https://twitter.com/Rocket_Pool"),
    fees={"minimum_stake": "0.01 ETH"},
)

FRAX_ETHER = ServiceInfo(
    id="frax-ether",
    name="Frax Ether",
    category=Category.STAKING_POOL,
    website="https://frax.finance/",
    description="Dual-token liquid staking (frxETH / sfrxETH)",
    docs_url="https://docs.frax.finance/",
    tickers=("ETH",),
)

STAKEWISE = ServiceInfo(
    id="stakewise",
    name="StakeWise",
    category=Category.STAKING_POOL,
    website="https://www.stakewise.io/",
    description="Vault-based liquid staking (osETH)",
    docs_url="https://docs.stakewise.io/",
    tickers=("ETH",),
)

MARINADE = ServiceInfo(
    id="marinade",
    name="Marinade",
    category=Category.STAKING_POOL,
    website="https://marinade.finance/",
    description="Solana liquid staking (mSOL) with delegation strategy across validators",
    docs_url="https://docs.marinade.finance/",
    tickers=("SOL",),
    social=SocialLinks(twitter="https://twitter.com/MarinadeFinance"),
)

JITO = ServiceInfo(
    id="jito",
    name="Jito",
    category=Category.STAKING_POOL,
    website="https://www.jito.network/",
    description="MEV-boosted Solana liquid staking (JitoSOL)",
    docs_url="https://jito-foundation.gitbook.io/jitosol",
    tickers=("SOL",),
    social=SocialLinks(twitter="https://twitter.com/jito_sol"),
)

ACALA_LDOT = ServiceInfo(
    id="acala-ldot",
    name="Acala Liquid DOT",
    category=Category.STAKING_POOL,
    website="https://acala.network/",
    description="Liquid staking derivative for DOT",
    docs_url="https://wiki.acala.network/",
    tickers=("DOT",),
)

STRIDE = ServiceInfo(
    id="stride",
    name="Stride",
    category=Category.STAKING_POOL,
    website="https://www.stride.zone/",
    description="Cosmos liquid staking zone (stATOM)",
    docs_url="https://docs.stride.zone/",
    tickers=("ATOM",),
    social=SocialLinks(twitter="https://twitter.com/stride_zone"),
)

STAKING_POOLS: tuple[ServiceInfo, ...] = (
    ACALA_LDOT,
    FRAX_ETHER,
    JITO,
    LIDO,
    MARINADE,
    ROCKET_POOL,
    STAKEWISE,
    STRIDE,
)
