"""Per-coin reference records.

Unlike the service modules these describe the coins themselves. Each record
holds the chain's key and address scheme, the DEXs and staking providers
that serve it, and the ids aggregators know it by.
"""

from __future__ import annotations

from datetime import date

from currency_core.schemas import AllTimeHigh, CurrencyInfo, SocialLinks, TechnicalInfo, Venue

TEZOS = CurrencyInfo(
    ticker="XTZ",
    name="Tezos",
    description=(
        "A self-amending blockchain platform that can upgrade itself without hard forks. "
        "Tezos uses liquid proof-of-stake and runs smart contracts written in Michelson."
    ),
    creator="Arthur Breitman and Kathleen Breitman",
    debut_year=2018,
    website="https://tezos.com/",
    whitepaper="https://tezos.com/whitepaper.pdf",
    nft_marketplaces=("https://objkt.com/", "https://fxhash.xyz/"),
    technical=TechnicalInfo(
        consensus="Proof of Stake",
        chain_class="Layer 1 Blockchain (Self-Amending / Liquid Proof of Stake)",
        total_supply="Unlimited (inflationary, ~5.5% annual)",
        hashing="Blake2b",
        signing="Ed25519",
        key_curve="Ed25519",
        address_encoding="Blake2b-160 + Base58Check (starts with 'tz1')",
        derivation_path="m/44'/1729'/0'/0'",
        smart_contract_language="Michelson / SmartPy / LIGO / Archetype",
        naming_service="Tezos Domains (.tez)",
        nft_standard="FA2 (TZIP-12)",
        token_standard="FA1.2 / FA2",
    ),
    dexs=(
        Venue(name="QuipuSwap", url="https://quipuswap.com/", kind="AMM DEX"),
        Venue(name="Plenty DeFi", url="https://www.plentydefi.com/", kind="Multi-Feature DeFi"),
        Venue(name="SpicySwap", url="https://spicyswap.xyz/", kind="AMM DEX"),
        Venue(name="Vortex", url="https://vortex.network/", kind="AMM DEX"),
        Venue(name="Youves", url="https://youves.com/", kind="Synthetic Assets DEX"),
        Venue(name="Ctez", url="https://ctez.app/", kind="Collateralized Tez"),
    ),
    staking_providers=(
        Venue(
            name="Native Baking (Delegation)",
            url="https://tezos.com/learn/bake",
            kind="Native Delegation",
            description="Delegate XTZ to public bakers",
        ),
        Venue(name="Temple Wallet Delegation", url="https://templewallet.com/", kind="Wallet Delegation"),
        Venue(name="Kukai Delegation", url="https://kukai.app/", kind="Wallet Delegation"),
        Venue(name="Coinbase Staking", url="https://www.coinbase.com/earn/staking/tezos", kind="Exchange Staking"),
        Venue(name="Kraken Staking", url="https://www.kraken.com/features/staking-coins", kind="Exchange Staking"),
        Venue(name="Everstake", url="https://everstake.one/tezos", kind="Professional Baker"),
    ),
    mining_note="No mining: liquid proof of stake with baking and delegation",
    all_time_high=AllTimeHigh(price=9.12, reached_on=date(2021, 10, 4)),
    social=SocialLinks(
        twitter="https://twitter.com/tezos",
        telegram="https://t.me/tezos",
        discord="https://discord.gg/tezos",
        reddit="https://www.reddit.com/r/tezos/",
        linkedin="https://www.linkedin.com/company/tezos-foundation/",
    ),
    coingecko_id="tezos",
    coinpaprika_id="xtz-tezos",
    cmc_id=2011,
    explorer_url="https://tzkt.io/",
    explorer_api_url="https://api.tzkt.io/",
)

STACKS = CurrencyInfo(
    ticker="STX",
    name="Stacks",
    description=(
        "Brings smart contracts and decentralized applications to Bitcoin. Stacks uses "
        "Proof of Transfer consensus to inherit Bitcoin's security."
    ),
    creator="Muneeb Ali and Ryan Shea",
    debut_year=2021,
    website="https://stacks.org/",
    whitepaper="https://gaia.blockstack.org/hub/1AxyPunHHAHiEffXWESKfbvmBpGQv138Fp/stacks.pdf",
    nft_marketplaces=("https://gamma.io/", "https://tradeport.xyz/stacks"),
    technical=TechnicalInfo(
        consensus="Proof of Transfer",
        chain_class="Layer 2 Blockchain (Bitcoin Layer / Proof of Transfer)",
        total_supply="1,818,000,000 STX (fixed supply)",
        hashing="SHA-256, SHA-512",
        signing="ECDSA-secp256k1",
        key_curve="secp256k1",
        address_encoding="SHA-256 + RIPEMD-160 + C32Check",
        derivation_path="m/44'/5757'/0'/0/0",
        smart_contract_language="Clarity",
        naming_service="BNS (Bitcoin Name System)",
        nft_standard="SIP-009",
        token_standard="SIP-010",
    ),
    dexs=(
        Venue(name="Velar", url="https://www.velar.co/", kind="Liquidity Protocol"),
        Venue(name="ALEX", url="https://alexgo.io/", kind="DeFi Platform"),
        Venue(name="StackSwap", url="https://www.stackswap.org/", kind="AMM DEX"),
        Venue(name="Arkadiko Swap", url="https://arkadiko.finance/", kind="DeFi Protocol"),
        Venue(name="LNSwap", url="https://lnswap.org/", kind="Lightning Swap"),
        Venue(name="Bitflow", url="https://www.bitflow.finance/", kind="Bitcoin DeFi"),
        Venue(name="Charisma", url="https://charisma.rocks/", kind="Gaming DEX"),
    ),
    staking_providers=(
        Venue(
            name="Native Stacking (PoX)",
            url="https://stacks.org/stacking",
            kind="Proof of Transfer Stacking",
            description="Lock STX for a cycle and earn BTC",
        ),
        Venue(name="Xverse Wallet Stacking", url="https://www.xverse.app/", kind="Wallet Stacking"),
        Venue(name="Leather Wallet Stacking", url="https://leather.io/", kind="Wallet Stacking"),
        Venue(name="Friedger Pool", url="https://pool.friedger.de/", kind="Stacking Pool"),
        Venue(name="Planbetter Pool", url="https://planbetter.org/", kind="Stacking Pool"),
        Venue(name="OKX Stacking", url="https://www.okx.com/earn", kind="Exchange Stacking"),
        Venue(name="Staked.us", url="https://staked.us/", kind="Institutional Stacking"),
    ),
    mining_note="Proof of Transfer: miners bid BTC and are rewarded in STX",
    all_time_high=AllTimeHigh(price=3.61, reached_on=date(2021, 11, 16)),
    social=SocialLinks(
        twitter="https://twitter.com/Stacks",
        telegram="https://t.me/StacksChat",
        discord="https://discord.gg/stacks",
        reddit="https://www.reddit.com/r/stacks/",
    ),
    coingecko_id="stacks",
    coinpaprika_id="stx-stacks",
    cmc_id=4847,
    explorer_url="https://explorer.stacks.co/address/",
    explorer_api_url="https://api.mainnet.stacks.co/",
)

TRON = CurrencyInfo(
    ticker="TRX",
    name="Tron",
    description=(
        "A blockchain-based operating system for sharing digital content cheaply, "
        "with a TVM smart-contract layer compatible with Solidity."
    ),
    creator="Tron Foundation",
    debut_year=2017,
    website="https://tron.network/",
    whitepaper="https://tron.network/resources?lng=en&name=1",
    nft_marketplaces=("https://apenft.io/", "https://www.okx.com/web3/marketplace/nft/tron"),
    technical=TechnicalInfo(
        consensus="Delegated Proof of Stake",
        chain_class="Layer 1 Blockchain (Delegated Proof of Stake)",
        total_supply="100,000,000,000 TRX (initial supply, no hard cap)",
        hashing="SHA-256 / Keccak-256",
        signing="ECDSA",
        key_curve="secp256k1",
        address_encoding="Keccak-256 + Base58Check (starts with 'T')",
        derivation_path="m/44'/195'/0'/0/0",
        smart_contract_language="Solidity (TVM)",
        nft_standard="TRC-721",
        token_standard="TRC-20 / TRC-10",
    ),
    dexs=(
        Venue(name="SunSwap", url="https://sunswap.com/", kind="AMM DEX"),
        Venue(name="SunSwap V2", url="https://v2.sunswap.com/", kind="AMM DEX V2"),
        Venue(name="JustMoney", url="https://justmoney.exchange/", kind="Stablecoin DEX"),
        Venue(name="JustLend DAO Swap", url="https://justlend.org/", kind="DeFi Protocol"),
        Venue(name="Poloniex DEX", url="https://poloniex.com/trade", kind="Hybrid Exchange"),
        Venue(name="TronTrade", url="https://trontrade.io/", kind="Multi-Feature DEX"),
    ),
    staking_providers=(
        Venue(
            name="Tron Super Representatives",
            url="https://tronscan.org/#/sr/representatives",
            kind="Native Voting/Staking",
            description="Freeze TRX for energy or bandwidth and vote for a representative",
        ),
        Venue(name="Binance Staking", url="https://www.binance.com/en/staking", kind="Exchange Staking"),
        Venue(name="Poloniex Staking", url="https://poloniex.com/staking", kind="Exchange Staking"),
        Venue(name="JustLend DAO", url="https://justlend.org/", kind="DeFi Staking"),
        Venue(name="SUN.io Staking", url="https://sun.io/", kind="DeFi Staking"),
        Venue(name="TronLink Wallet Staking", url="https://www.tronlink.org/", kind="Wallet Staking"),
    ),
    mining_note="No mining: holders vote for Super Representatives",
    all_time_high=AllTimeHigh(price=0.43, reached_on=date(2024, 12, 4)),
    social=SocialLinks(
        twitter="https://twitter.com/trondao",
        telegram="https://t.me/tronnetworkEN",
        discord="https://discord.gg/tron",
        reddit="https://www.reddit.com/r/Tronix/",
    ),
    coingecko_id="tron",
    coinpaprika_id="trx-tron",
    cmc_id=1958,
    explorer_url="https://tronscan.org/#/address/",
    explorer_api_url="https://api.trongrid.io",
)

BITCOIN_CASH = CurrencyInfo(
    ticker="BCH",
    name="Bitcoin Cash",
    description=(
        "A peer-to-peer electronic cash system forked from Bitcoin with a larger block "
        "size limit to fit more transactions."
    ),
    creator="Bitcoin Community",
    debut_year=2017,
    website="https://bitcoincash.org/",
    whitepaper="https://bitcoincash.org/bitcoin.pdf",
    nft_marketplaces=("https://www.oasis.cash/",),
    technical=TechnicalInfo(
        consensus="Proof of Work",
        chain_class="Layer 1 Blockchain",
        total_supply="21,000,000 BCH",
        hashing="SHA-256 (double)",
        signing="ECDSA",
        key_curve="secp256k1",
        address_encoding="SHA-256 + RIPEMD-160 + Base58Check / CashAddr",
        derivation_path="m/44'/145'/0'/0/0",
        smart_contract_language="CashScript / Bitcoin Script",
        naming_service="CashAddr (BCH native addressing)",
        nft_standard="CashTokens",
        token_standard="SLP / CashTokens",
    ),
    dexs=(
        Venue(name="CashDEX", url="https://cashdex.network/", kind="Atomic Swap DEX"),
        Venue(name="SideShift.ai", url="https://sideshift.ai/", kind="Cross-Chain Exchange"),
        Venue(name="ChangeNOW", url="https://changenow.io/", kind="Instant Exchange"),
        Venue(name="SimpleSwap", url="https://simpleswap.io/", kind="Instant Exchange"),
        Venue(name="MistSwap (SmartBCH)", url="https://mistswap.fi/", kind="AMM DEX"),
        Venue(name="BenSwap (SmartBCH)", url="https://benswap.cash/", kind="AMM DEX"),
        Venue(name="TangoSwap (SmartBCH)", url="https://tangoswap.cash/", kind="AMM DEX"),
    ),
    mining_pools=(
        Venue(name="ViaBTC", url="https://www.viabtc.com/", kind="Mining Pool"),
        Venue(name="AntPool", url="https://www.antpool.com/", kind="Mining Pool"),
        Venue(name="F2Pool", url="https://www.f2pool.com/", kind="Mining Pool"),
        Venue(name="BTC.com", url="https://pool.btc.com/", kind="Mining Pool"),
        Venue(name="Poolin", url="https://www.poolin.com/", kind="Mining Pool"),
        Venue(name="Mining-Dutch", url="https://www.mining-dutch.nl/", kind="Mining Pool"),
    ),
    all_time_high=AllTimeHigh(price=3785.82, reached_on=date(2017, 12, 20)),
    social=SocialLinks(
        twitter="https://twitter.com/bitcoincashorg",
        telegram="https://t.me/bitcoincash",
        discord="https://discord.gg/bitcoincash",
        reddit="https://www.reddit.com/r/BitcoinCash/",
    ),
    coingecko_id="bitcoin-cash",
    coinpaprika_id="bch-bitcoin-cash",
    cmc_id=1831,
    explorer_url="https://blockchair.com/bitcoin-cash/address/",
    explorer_api_url="https://api.blockchair.com/bitcoin-cash/",
)

CURRENCIES: tuple[CurrencyInfo, ...] = (
    BITCOIN_CASH,
    STACKS,
    TEZOS,
    TRON,
)
