"""Centralized exchanges."""

from __future__ import annotations

from currency_core.schemas import Category, ServiceInfo, SocialLinks

BINANCE = ServiceInfo(
    id="binance",
    name="Binance",
    category=Category.EXCHANGE,
    website="https://www.binance.com/",
    description="Largest global cryptocurrency exchange by trading volume",
    api_base_url="https://api.binance.com",
    docs_url="https://binance-docs.github.io/apidocs/spot/en/",
    tickers=("BTC", "ETH", "BNB", "SOL", "XRP", "DOGE", "LTC", "DOT", "ATOM", "TRX", "XLM", "ALGO"),
    sdk=("python-binance", "binance-connector"),
    social=SocialLinks(
        twitter="https://twitter.com/binance",
        telegram="https://t.me/binanceexchange",
        discord="https://discord.gg/binance",
        reddit="https://www.reddit.com/r/binance/",
        youtube="https://www.youtube.com/binance",
        linkedin="https://www.linkedin.com/company/binance",
    ),
    features=("spot", "margin", "futures", "staking", "testnet"),
    fees={"maker": "0.10%", "taker": "0.10%", "bnb_discount": "25%"},
    notes=("Founded 2017", "1000+ trading pairs"),
    auth_required=True,
)

BITFINEX = ServiceInfo(
    id="bitfinex",
    name="Bitfinex",
    category=Category.EXCHANGE,
    website="https://www.bitfinex.com/",
    description="Long-running exchange with deep BTC/USD liquidity and margin funding",
    api_base_url="https://api-pub.bitfinex.com/v2",
    docs_url="https://docs.bitfinex.com/docs",
    tickers=("BTC", "ETH", "XRP", "LTC", "DOT", "SOL", "XLM", "XTZ", "TRX"),
    social=SocialLinks(
        twitter="https://twitter.com/bitfinex",
        telegram="https://t.me/bitfinex",
        reddit="https://www.reddit.com/r/bitfinex/",
    ),
    features=("spot", "margin", "derivatives", "lending"),
    fees={"maker": "0.10%", "taker": "0.20%"},
    auth_required=True,
)

COINBASE = ServiceInfo(
    id="coinbase",
    name="Coinbase",
    category=Category.EXCHANGE,
    website="https://www.coinbase.com/",
    description="US-listed exchange; Advanced Trade and Exchange APIs",
    api_base_url="https://api.exchange.coinbase.com",
    docs_url="https://docs.cdp.coinbase.com/exchange/docs/welcome",
    tickers=("BTC", "ETH", "SOL", "XRP", "DOGE", "LTC", "DOT", "ATOM", "ALGO", "XLM", "XTZ"),
    sdk=("coinbase-advanced-py",),
    social=SocialLinks(
        twitter="https://twitter.com/coinbase",
        youtube="https://www.youtube.com/coinbase",
        linkedin="https://www.linkedin.com/company/coinbase",
    ),
    features=("spot", "staking", "custody", "sandbox"),
    fees={"maker": "0.40%", "taker": "0.60%"},
    auth_required=True,
)

KRAKEN = ServiceInfo(
    id="kraken",
    name="Kraken",
    category=Category.EXCHANGE,
    website="https://www.kraken.com/",
    description="US exchange with spot, futures and on-chain staking",
    api_base_url="https://api.kraken.com",
    docs_url="https://docs.kraken.com/rest/",
    tickers=("BTC", "ETH", "SOL", "XRP", "DOT", "ATOM", "ALGO", "XLM", "XTZ", "DOGE", "LTC", "TRX"),
    sdk=("krakenex", "python-kraken-sdk"),
    social=SocialLinks(
        twitter="https://twitter.com/krakenfx",
        reddit="https://www.reddit.com/r/KrakenSupport/",
        youtube="https://www.youtube.com/krakenfx",
    ),
    features=("spot", "margin", "futures", "staking"),
    fees={"maker": "0.25%", "taker": "0.40%"},
    auth_required=True,
)

BYBIT = ServiceInfo(
    id="bybit",
    name="Bybit",
    category=Category.EXCHANGE,
    website="https://www.bybit.com/",
    description="Derivatives-first exchange with unified V5 API",
    api_base_url="https://api.bybit.com",
    docs_url="https://bybit-exchange.github.io/docs/v5/intro",
    tickers=("BTC", "ETH", "SOL", "XRP", "DOGE", "DOT", "LTC", "TRX"),
    sdk=("pybit",),
    social=SocialLinks(
        twitter="https://twitter.com/Bybit_Official",
        telegram="https://t.me/BybitEnglish",
        discord="https://discord.gg/bybit",
    ),
    features=("spot", "perpetuals", "options", "testnet"),
    fees={"maker": "0.10%", "taker": "0.10%"},
    auth_required=True,
)

BITGET = ServiceInfo(
    id="bitget",
    name="Bitget",
    category=Category.EXCHANGE,
    website="https://www.bitget.com/",
    description="Derivatives and copy-trading exchange",
    api_base_url="https://api.bitget.com",
    docs_url="https://www.bitget.com/api-doc/common/intro",
    tickers=("BTC", "ETH", "SOL", "XRP", "DOGE"),
    social=SocialLinks(twitter="https://twitter.com/bitgetglobal", telegram="https://t.me/Bitget_English"),
    features=("spot", "futures", "copy-trading"),
    auth_required=True,
)

BITSTAMP = ServiceInfo(
    id="bitstamp",
    name="Bitstamp",
    category=Category.EXCHANGE,
    website="https://www.bitstamp.net/",
    description="Luxembourg-licensed exchange, NYDFS BitLicense holder",
    api_base_url="https://www.bitstamp.net/api/v2",
    docs_url="https://www.bitstamp.net/api/",
    tickers=("BTC", "ETH", "XRP", "LTC", "XLM", "ALGO", "DOT", "SOL"),
    social=SocialLinks(twitter="https://twitter.com/Bitstamp"),
    features=("spot", "staking"),
    notes=("Available to New York residents",),
    auth_required=True,
)

GEMINI = ServiceInfo(
    id="gemini",
    name="Gemini",
    category=Category.EXCHANGE,
    website="https://www.gemini.com/",
    description="New York trust-company exchange",
    api_base_url="https://api.gemini.com",
    docs_url="https://docs.gemini.com/rest-api/",
    tickers=("BTC", "ETH", "SOL", "DOGE", "LTC", "XTZ", "DOT", "ATOM"),
    social=SocialLinks(twitter="https://twitter.com/Gemini"),
    features=("spot", "custody", "sandbox"),
    auth_required=True,
)

KUCOIN = ServiceInfo(
    id="kucoin",
    name="KuCoin",
    category=Category.EXCHANGE,
    website="https://www.kucoin.com/",
    description="Global exchange with a long altcoin tail",
    api_base_url="https://api.kucoin.com",
    docs_url="https://www.kucoin.com/docs/beginners/introduction",
    tickers=("BTC", "ETH", "SOL", "XRP", "ALGO", "XLM", "TRX", "DOGE"),
    social=SocialLinks(twitter="https://twitter.com/kucoincom", telegram="https://t.me/Kucoin_Exchange"),
    features=("spot", "margin", "futures", "lending"),
    auth_required=True,
)

OKX = ServiceInfo(
    id="okx",
    name="OKX",
    category=Category.EXCHANGE,
    website="https://www.okx.com/",
    description="Exchange and Web3 wallet provider with V5 unified API",
    api_base_url="https://www.okx.com",
    docs_url="https://www.okx.com/docs-v5/en/",
    tickers=("BTC", "ETH", "SOL", "XRP", "DOGE", "LTC", "DOT", "ATOM", "TRX"),
    social=SocialLinks(twitter="https://twitter.com/okx", telegram="https://t.me/OKXOfficial_English"),
    features=("spot", "perpetuals", "options", "demo-trading"),
    auth_required=True,
)

EXCHANGES: tuple[ServiceInfo, ...] = (
    BINANCE,
    BITFINEX,
    BITGET,
    BITSTAMP,
    BYBIT,
    COINBASE,
    GEMINI,
    KRAKEN,
    KUCOIN,
    OKX,
)
