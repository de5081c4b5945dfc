"""Tests for the price aggregator wrappers."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from currency_core.datasources.aggregators import CoinCodexAPI, CoinGeckoAPI, CoinSummary
from currency_core.datasources.aggregators import coincodex
from currency_core.errors import ApiError


class TestCoinGecko:
    def test_demo_key_header(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"bitcoin": {"usd": 65000}})
        api = CoinGeckoAPI("demo-key", session=session)
        assert api.simple_price(["bitcoin"]) == {"bitcoin": {"usd": 65000}}
        kwargs = session.request.call_args.kwargs
        assert kwargs["headers"] == {"x-cg-demo-api-key": "demo-key"}
        assert kwargs["params"] == {"ids": "bitcoin", "vs_currencies": "usd"}

    def test_pro_host_and_header(self, session: Mock) -> None:
        api = CoinGeckoAPI("pro-key", pro=True, session=session)
        assert api.base_url == "https://pro-api.coingecko.com/api/v3"
        api.ping()
        assert session.request.call_args.kwargs["headers"] == {"x-cg-pro-api-key": "pro-key"}

    def test_include_change_flag(self, session: Mock, respond) -> None:
        session.request.return_value = respond({})
        CoinGeckoAPI(session=session).simple_price("bitcoin,ethereum", ["usd", "eur"], include_24hr_change=True)
        assert session.request.call_args.kwargs["params"] == {
            "ids": "bitcoin,ethereum",
            "vs_currencies": "usd,eur",
            "include_24hr_change": "true",
        }

    def test_coins_markets_query(self, session: Mock, respond) -> None:
        session.request.return_value = respond([{"id": "bitcoin", "current_price": 65000}])
        rows = CoinGeckoAPI(session=session).coins_markets(["bitcoin", "ethereum"], per_page=2)
        assert rows[0]["id"] == "bitcoin"
        params = session.request.call_args.kwargs["params"]
        assert params["ids"] == "bitcoin,ethereum"
        assert params["order"] == "market_cap_desc"
        assert params["per_page"] == 2
        assert params["price_change_percentage"] == "24h"

    def test_status_error_code(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"status": {"error_code": 429, "error_message": "Throttled"}})
        with pytest.raises(ApiError, match="429: Throttled"):
            CoinGeckoAPI(session=session).coin("bitcoin")

    def test_rate_limited_http(self, session: Mock, respond) -> None:
        session.request.return_value = respond(text="Too Many Requests", status=429)
        with pytest.raises(ApiError) as exc_info:
            CoinGeckoAPI(session=session).ping()
        assert exc_info.value.status == 429


class TestCoinCodexUrls:
    def test_coin_url(self) -> None:
        assert coincodex.coin_url("BTC") == "https://coincodex.com/api/coincodex/get_coin/BTC"

    def test_history_url(self) -> None:
        assert coincodex.coin_history_url("ETH", "2024-01-01", "2024-02-01", 30) == (
            "https://coincodex.com/api/coincodex/get_coin_history/ETH/2024-01-01/2024-02-01/30"
        )

    def test_markets_url_uses_exchange_api(self) -> None:
        assert coincodex.coin_markets_url("BTC") == "https://coincodex.com/api/exchange/get_markets_by_coin/BTC/"

    def test_ranges_url_joins(self) -> None:
        assert coincodex.coin_ranges_url(["BTC", "ETH"]).endswith("/get_coin_ranges/BTC,ETH")


class TestCoinCodex:
    def test_coin_summary(self, session: Mock, respond) -> None:
        session.request.return_value = respond(
            {"symbol": "BTC", "description": "Digital gold", "price_high_24_usd": 66000, "today_open": 64000}
        )
        summary = CoinCodexAPI(session=session).coin_summary("BTC")
        assert summary == CoinSummary(
            symbol="BTC", description="Digital gold", price_high_24h=66000, today_open=64000
        )
        assert session.request.call_args.args[1] == "https://coincodex.com/api/coincodex/get_coin/BTC"
