"""Price and market-data aggregators with free API tiers."""

from __future__ import annotations

from currency_core.schemas import ApiEndpoint, Category, ServiceInfo, SocialLinks

COINGECKO = ServiceInfo(
    id="coingecko",
    name="CoinGecko",
    category=Category.AGGREGATOR,
    website="https://www.coingecko.com/",
    description="Independent price and market-cap aggregator covering 15,000+ coins",
    api_base_url="https://api.coingecko.com/api/v3",
    docs_url="https://docs.coingecko.com/reference/introduction",
    sdk=("pycoingecko",),
    social=SocialLinks(
        twitter="https://twitter.com/coingecko",
        telegram="https://t.me/coingecko",
        reddit="https://www.reddit.com/r/coingecko/",
    ),
    features=("prices", "market-charts", "exchanges", "nfts"),
    fees={"demo": "free, 30 calls/min", "pro": "paid"},
    endpoints=(
        ApiEndpoint(name="ping", path="/ping"),
        ApiEndpoint(name="simple price", path="/simple/price"),
        ApiEndpoint(name="coins markets", path="/coins/markets"),
    ),
)

COINCODEX = ServiceInfo(
    id="coincodex",
    name="CoinCodex",
    category=Category.AGGREGATOR,
    website="https://coincodex.com/",
    description="Cryptocurrency prices, charts, and market cap data for 44,000+ cryptocurrencies",
    api_base_url="https://coincodex.com/api/coincodex",
    docs_url="https://coincodex.com/page/api/",
    social=SocialLinks(
        twitter="https://twitter.com/coincodex",
        telegram="https://t.me/coincodex",
        linkedin="https://www.linkedin.com/company/coincodex",
        youtube="https://www.youtube.com/coincodex",
    ),
    features=("real-time prices", "historical data", "exchange data", "websocket"),
    notes=(
        "API is in beta and subject to change",
        "Free under CC BY-NC 3.0; CoinCodex must be credited",
    ),
    endpoints=(
        ApiEndpoint(name="coin", path="/get_coin/{symbol}"),
        ApiEndpoint(name="coin history", path="/get_coin_history/{symbol}/{start}/{end}/{samples}"),
        ApiEndpoint(name="coin ranges", path="/get_coin_ranges/{symbols}"),
    ),
)

COINPAPRIKA = ServiceInfo(
    id="coinpaprika",
    name="Coinpaprika",
    category=Category.AGGREGATOR,
    website="https://coinpaprika.com/",
    description="Market data for 2,500+ coins, no key needed on the free tier",
    api_base_url="https://api.coinpaprika.com/v1",
    docs_url="https://api.coinpaprika.com/",
    social=SocialLinks(twitter="https://twitter.com/coinpaprika"),
    features=("tickers", "ohlcv", "events"),
)

COINCAP = ServiceInfo(
    id="coincap",
    name="CoinCap",
    category=Category.AGGREGATOR,
    website="https://coincap.io/",
    description="Real-time pricing from the ShapeShift team",
    api_base_url="https://api.coincap.io/v2",
    docs_url="https://docs.coincap.io/",
    features=("assets", "rates", "websocket"),
)

CRYPTOCOMPARE = ServiceInfo(
    id="cryptocompare",
    name="CryptoCompare",
    category=Category.AGGREGATOR,
    website="https://www.cryptocompare.com/",
    description="Institutional-grade aggregated pricing (CCData)",
    api_base_url="https://min-api.cryptocompare.com/data",
    docs_url="https://min-api.cryptocompare.com/documentation",
    social=SocialLinks(twitter="https://twitter.com/CryptoCompare"),
    features=("prices", "historical", "social stats"),
    auth_required=True,
)

MESSARI = ServiceInfo(
    id="messari",
    name="Messari",
    category=Category.AGGREGATOR,
    website="https://messari.io/",
    description="Research-oriented asset metrics and profiles",
    api_base_url="https://data.messari.io/api",
    docs_url="https://messari.io/api/docs",
    social=SocialLinks(twitter="https://twitter.com/MessariCrypto"),
    features=("asset metrics", "profiles", "news"),
    auth_required=True,
)

AGGREGATORS: tuple[ServiceInfo, ...] = (
    COINCAP,
    COINCODEX,
    COINGECKO,
    COINPAPRIKA,
    CRYPTOCOMPARE,
    MESSARI,
)
