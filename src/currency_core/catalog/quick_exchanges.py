"""Instant (account-less) swap services."""

from __future__ import annotations

from currency_core.schemas import Category, ServiceInfo, SocialLinks

QUICK_EXCHANGES: tuple[ServiceInfo, ...] = (
    ServiceInfo(
        id="changelly",
        name="Changelly",
        category=Category.QUICK_EXCHANGE,
        website="https://changelly.com/",
        description="Instant swaps across 500+ assets, JSON-RPC partner API",
        api_base_url="https://api.changelly.com/v2",
        docs_url="https://docs.changelly.com/",
        tickers=("BTC", "ETH", "SOL", "XRP", "XLM", "ALGO", "DOGE", "LTC", "TRX", "XTZ"),
        social=SocialLinks(twitter="https://twitter.com/changelly_team"),
        fees={"floating": "0.25%"},
        auth_required=True,
    ),
    ServiceInfo(
        id="changenow",
        name="ChangeNOW",
        category=Category.QUICK_EXCHANGE,
        website="https://changenow.io/",
        description="Non-custodial limitless swaps",
        api_base_url="https://api.changenow.io/v2",
        docs_url="https://documenter.getpostman.com/view/8180765/SVfTPnM8",
        tickers=("BTC", "ETH", "SOL", "XRP", "XLM", "ALGO", "DOT", "ATOM"),
        social=SocialLinks(twitter="https://twitter.com/ChangeNOW_io"),
        auth_required=True,
    ),
    ServiceInfo(
        id="fixedfloat",
        name="FixedFloat",
        category=Category.QUICK_EXCHANGE,
        website="https://ff.io/",
        description="Fixed or floating rate swaps including Lightning",
        api_base_url="https://ff.io/api/v2",
        docs_url="https://ff.io/api",
        tickers=("BTC", "ETH", "SOL", "XRP", "LTC", "DOGE"),
        auth_required=True,
    ),
    ServiceInfo(
        id="simpleswap",
        name="SimpleSwap",
        category=Category.QUICK_EXCHANGE,
        website="https://simpleswap.io/",
        description="Registration-free exchange of 1500+ coins",
        api_base_url="https://api.simpleswap.io",
        docs_url="https://api.simpleswap.io/",
        tickers=("BTC", "ETH", "SOL", "XRP", "XTZ", "ALGO"),
        social=SocialLinks(twitter="https://twitter.com/SimpleSwap_io"),
        auth_required=True,
    ),
    ServiceInfo(
        id="stealthex",
        name="StealthEX",
        category=Category.QUICK_EXCHANGE,
        website="https://stealthex.io/",
        description="Privacy-focused limitless swaps",
        api_base_url="https://api.stealthex.io/api/v2",
        docs_url="https://documenter.getpostman.com/view/3451964/SVfRt7ZP",
        tickers=("BTC", "ETH", "SOL", "XLM", "XMR"),
        auth_required=True,
    ),
    ServiceInfo(
        id="sideshift",
        name="SideShift.ai",
        category=Category.QUICK_EXCHANGE,
        website="https://sideshift.ai/",
        description="No-signup swaps with a public REST API",
        api_base_url="https://sideshift.ai/api/v2",
        docs_url="https://sideshift.ai/api",
        tickers=("BTC", "ETH", "SOL", "XRP", "LTC", "DOGE"),
        social=SocialLinks(twitter="https://twitter.com/sideshiftai"),
    ),
)
