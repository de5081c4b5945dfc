"""
Per-exchange ping settings.

Each entry names:
  base_url      REST base URL
  auth_path     authenticated endpoint to hit (GET where possible)
  auth_header   builds the auth headers for an API key
  requires_hmac the endpoint also needs an HMAC-signed payload. A 4xx
                "invalid signature" still proves the key was received;
                "invalid key" means the key itself is wrong.
  public_path   no-auth GET used as a connectivity check
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from currency_core.console.models import PingConfig, PublicProbe


@dataclass(frozen=True)
class ExchangeMeta:
    name: str
    base_url: str
    auth_path: str
    auth_method: str
    auth_header: Callable[[str], dict[str, str]]
    requires_hmac: bool
    public_path: str


EXCHANGE_META: dict[str, ExchangeMeta] = {
    "binance": ExchangeMeta(
        "Binance", "https://api.binance.com", "/api/v3/account", "GET",
        lambda k: {"X-MBX-APIKEY": k}, True, "/api/v3/ping",
    ),
    "bitfinex": ExchangeMeta(
        "Bitfinex", "https://api-pub.bitfinex.com", "/v2/auth/r/wallets", "POST",
        lambda k: {"bfx-apikey": k}, True, "/v2/platform/status",
    ),
    "bitflyer": ExchangeMeta(
        "bitFlyer", "https://api.bitflyer.com", "/v1/me/getbalance", "GET",
        lambda k: {"ACCESS-KEY": k}, True, "/v1/getmarkets",
    ),
    "bitget": ExchangeMeta(
        "Bitget", "https://api.bitget.com", "/api/v2/account/info", "GET",
        lambda k: {"ACCESS-KEY": k}, True, "/api/v2/public/time",
    ),
    "bitstamp": ExchangeMeta(
        "Bitstamp", "https://www.bitstamp.net", "/api/v2/balance/", "POST",
        lambda k: {"X-Auth": f"BITSTAMP {k}"}, True, "/api/v2/ticker/btcusd/",
    ),
    "bybit": ExchangeMeta(
        "Bybit", "https://api.bybit.com", "/v5/account/wallet-balance?accountType=UNIFIED", "GET",
        lambda k: {"X-BAPI-API-KEY": k}, True, "/v5/market/time",
    ),
    "coinbase": ExchangeMeta(
        "Coinbase", "https://api.coinbase.com", "/api/v3/brokerage/accounts", "GET",
        lambda k: {"Authorization": f"Bearer {k}"}, False, "/api/v3/brokerage/market/products?limit=1",
    ),
    "gateio": ExchangeMeta(
        "Gate.io", "https://api.gateio.ws", "/api/v4/spot/accounts", "GET",
        lambda k: {"KEY": k}, True, "/api/v4/spot/currencies?limit=1",
    ),
    "gemini": ExchangeMeta(
        "Gemini", "https://api.gemini.com", "/v1/balances", "POST",
        lambda k: {"X-GEMINI-APIKEY": k}, True, "/v1/symbols",
    ),
    "huobi": ExchangeMeta(
        "HTX (Huobi)", "https://api.huobi.pro", "/v1/account/accounts", "GET",
        lambda k: {"AccessKeyId": k}, True, "/v1/common/timestamp",
    ),
    "kraken": ExchangeMeta(
        "Kraken", "https://api.kraken.com", "/0/private/Balance", "POST",
        lambda k: {"API-Key": k}, True, "/0/public/Time",
    ),
    "kucoin": ExchangeMeta(
        "KuCoin", "https://api.kucoin.com", "/api/v1/accounts", "GET",
        lambda k: {"KC-API-KEY": k}, True, "/api/v1/timestamp",
    ),
    "mexc": ExchangeMeta(
        "MEXC", "https://api.mexc.com", "/api/v3/account", "GET",
        lambda k: {"X-MEXC-APIKEY": k}, True, "/api/v3/ping",
    ),
    "okx": ExchangeMeta(
        "OKX", "https://www.okx.com", "/api/v5/account/balance", "GET",
        lambda k: {"OK-ACCESS-KEY": k}, True, "/api/v5/public/time",
    ),
    "upbit": ExchangeMeta(
        "Upbit", "https://api.upbit.com", "/v1/accounts", "GET",
        lambda k: {"Authorization": f"Bearer {k}"}, False, "/v1/market/all?isDetails=false",
    ),
}


def build_exchange_ping_config(exchange_id: str, api_key: str) -> PingConfig | None:
    meta = EXCHANGE_META.get(exchange_id)
    if meta is None:
        return None
    return PingConfig(
        url=f"{meta.base_url}{meta.auth_path}",
        method=meta.auth_method,
        headers=meta.auth_header(api_key),
        label=meta.name,
        endpoint=f"{meta.auth_method} {meta.auth_path}",
        requires_hmac=meta.requires_hmac,
    )


def build_exchange_public_probe(exchange_id: str) -> PublicProbe | None:
    meta = EXCHANGE_META.get(exchange_id)
    if meta is None:
        return None
    return PublicProbe(url=f"{meta.base_url}{meta.public_path}", endpoint=f"GET {meta.public_path}")
