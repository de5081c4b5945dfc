"""Fiat on/off ramps."""

from __future__ import annotations

from currency_core.schemas import Category, ServiceInfo, SocialLinks

RAMPS: tuple[ServiceInfo, ...] = (
    ServiceInfo(
        id="banxa",
        name="Banxa",
        category=Category.RAMP,
        website="https://banxa.com/",
        description="Regulated on/off ramp with local payment methods",
        docs_url="https://docs.banxa.com/",
        tickers=("BTC", "ETH", "SOL", "ALGO", "XLM", "DOT"),
        social=SocialLinks(twitter="https://twitter.com/BanxaOfficial"),
    ),
    ServiceInfo(
        id="mercuryo",
        name="Mercuryo",
        category=Category.RAMP,
        website="https://mercuryo.io/",
        description="Widget-based fiat gateway",
        docs_url="https://docs.mercuryo.io/",
        tickers=("BTC", "ETH", "SOL", "TRX", "XTZ", "DOT"),
    ),
    ServiceInfo(
        id="moonpay",
        name="MoonPay",
        category=Category.RAMP,
        website="https://www.moonpay.com/",
        description="Card and bank-transfer on/off ramp embedded in many wallets",
        api_base_url="https://api.moonpay.com",
        docs_url="https://dev.moonpay.com/",
        tickers=("BTC", "ETH", "SOL", "ALGO", "XLM", "XRP", "XTZ", "DOGE", "LTC", "TRX"),
        social=SocialLinks(twitter="https://twitter.com/moonpay"),
        fees={"card": "4.5%", "bank": "1%"},
        auth_required=True,
    ),
    ServiceInfo(
        id="ramp",
        name="Ramp Network",
        category=Category.RAMP,
        website="https://ramp.network/",
        description="Non-custodial on/off ramp SDK",
        api_base_url="https://api.ramp.network/api",
        docs_url="https://docs.ramp.network/",
        tickers=("BTC", "ETH", "SOL", "XRP", "DOT"),
        social=SocialLinks(twitter="https://twitter.com/RampNetwork"),
    ),
    ServiceInfo(
        id="sardine",
        name="Sardine",
        category=Category.RAMP,
        website="https://www.sardine.ai/",
        description="Instant ACH on-ramp with fraud scoring",
        docs_url="https://docs.sardine.ai/",
        tickers=("BTC", "ETH", "SOL"),
    ),
    ServiceInfo(
        id="transak",
        name="Transak",
        category=Category.RAMP,
        website="https://transak.com/",
        description="On/off ramp covering 150+ countries",
        api_base_url="https://api.transak.com/api/v2",
        docs_url="https://docs.transak.com/",
        tickers=("BTC", "ETH", "SOL", "ALGO", "XLM", "STX", "ATOM"),
        social=SocialLinks(twitter="https://twitter.com/Transak"),
    ),
    ServiceInfo(
        id="wert",
        name="Wert",
        category=Category.RAMP,
        website="https://wert.io/",
        description="Card checkout for NFTs and tokens",
        docs_url="https://docs.wert.io/",
        tickers=("ETH", "XTZ", "SOL"),
    ),
)
