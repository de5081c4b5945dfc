"""Tests for the blockchain explorer wrappers."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from currency_core.datasources.explorers import (
    BlockcypherAPI,
    BlockstreamAPI,
    HiroStacksAPI,
    HorizonAPI,
    SubscanAPI,
    TronscanAPI,
    TzktAPI,
    XrpscanAPI,
)
from currency_core.datasources.explorers.blockstream import AddressBalance
from currency_core.errors import ApiError

BTC_ADDRESS = "bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdq"


class TestBlockstream:
    def test_unknown_network_rejected(self) -> None:
        with pytest.raises(ValueError, match="unknown Blockstream network"):
            BlockstreamAPI("regtest")

    def test_network_selects_base_url(self) -> None:
        assert BlockstreamAPI("testnet").base_url == "https://blockstream.info/testnet/api"

    def test_balance_splits_chain_and_mempool(self, session: Mock, respond) -> None:
        session.request.return_value = respond(
            {
                "address": BTC_ADDRESS,
                "chain_stats": {"funded_txo_sum": 150_000_000, "spent_txo_sum": 50_000_000},
                "mempool_stats": {"funded_txo_sum": 10_000, "spent_txo_sum": 0},
            }
        )
        balance = BlockstreamAPI(session=session).balance(BTC_ADDRESS)
        assert balance == AddressBalance(confirmed=100_000_000, unconfirmed=10_000)
        assert balance.total == 100_010_000
        assert balance.btc == pytest.approx(1.0001)
        assert session.request.call_args.args[1] == f"https://blockstream.info/api/address/{BTC_ADDRESS}"

    def test_tip_height(self, session: Mock, respond) -> None:
        session.request.return_value = respond(text="840000")
        assert BlockstreamAPI(session=session).tip_height() == 840000

    def test_missing_tx_is_api_error(self, session: Mock, respond) -> None:
        session.request.return_value = respond(text="Transaction not found", status=404)
        with pytest.raises(ApiError, match="Transaction not found"):
            BlockstreamAPI(session=session).transaction("00" * 32)


class TestBlockcypher:
    def test_unsupported_chain(self) -> None:
        with pytest.raises(ValueError):
            BlockcypherAPI("xmr")

    def test_base_url_includes_chain_and_network(self) -> None:
        assert BlockcypherAPI("ltc").base_url == "https://api.blockcypher.com/v1/ltc/main"

    def test_token_sent_as_query_param(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"balance": 5})
        BlockcypherAPI(api_key="tok", session=session).address_balance(BTC_ADDRESS)
        assert session.request.call_args.kwargs["params"] == {"token": "tok"}

    def test_no_token_no_params(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"name": "BTC.main"})
        assert BlockcypherAPI(session=session).chain_info() == {"name": "BTC.main"}
        args, kwargs = session.request.call_args
        assert args[1] == "https://api.blockcypher.com/v1/btc/main"
        assert kwargs["params"] is None

    def test_error_field(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"error": "Limits reached."})
        with pytest.raises(ApiError, match="Limits reached"):
            BlockcypherAPI(session=session).transaction("abc")


class TestTzkt:
    def test_balance_in_xtz(self, session: Mock, respond) -> None:
        session.request.return_value = respond(2_500_000)
        assert TzktAPI(session=session).balance("tz1abc") == 2.5

    def test_domains_reverse_flag(self, session: Mock, respond) -> None:
        session.request.return_value = respond([])
        TzktAPI(session=session).domains("tz1abc", reverse=True)
        assert session.request.call_args.kwargs["params"] == {"address": "tz1abc", "reverse": "true"}


class TestHorizon:
    def test_testnet(self) -> None:
        assert HorizonAPI(testnet=True).base_url == "https://horizon-testnet.stellar.org"

    def test_payments_unwrap_records(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"_embedded": {"records": [{"id": "1"}, {"id": "2"}]}})
        assert [p["id"] for p in HorizonAPI(session=session).payments("GABC")] == ["1", "2"]

    def test_latest_ledger_empty(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"_embedded": {"records": []}})
        assert HorizonAPI(session=session).ledgers_latest() is None


class TestXrpscan:
    def test_marker_omitted_when_none(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"transactions": []})
        XrpscanAPI(session=session).transactions("rABC")
        assert session.request.call_args.kwargs["params"] is None


class TestTronscan:
    def test_api_key_header(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"balance": 1})
        TronscanAPI(api_key="k", session=session).account("TXYZ")
        kwargs = session.request.call_args.kwargs
        assert kwargs["headers"] == {"TRON-PRO-API-KEY": "k"}
        assert kwargs["params"] == {"address": "TXYZ"}


class TestHiro:
    def test_names_for_address(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"names": ["muneeb.id"]})
        assert HiroStacksAPI(session=session).names_for_address("SP123") == ["muneeb.id"]
        assert session.request.call_args.args[1] == "https://api.hiro.so/v1/addresses/stacks/SP123"


class TestSubscan:
    def test_network_base_url(self) -> None:
        assert SubscanAPI("kusama").base_url == "https://kusama.api.subscan.io"

    def test_account_posts_search(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"code": 0, "message": "Success", "data": {"account": {"balance": "1"}}})
        assert SubscanAPI(api_key="k", session=session).account("15oF4u") == {"balance": "1"}
        args, kwargs = session.request.call_args
        assert args == ("POST", "https://polkadot.api.subscan.io/api/v2/scan/search")
        assert kwargs["json"] == {"key": "15oF4u"}
        assert kwargs["headers"] == {"X-API-Key": "k"}

    def test_nonzero_code_raises(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"code": 10004, "message": "Record Not Found"})
        with pytest.raises(ApiError, match="Record Not Found"):
            SubscanAPI(session=session).transfers("15oF4u")

    def test_transfers_empty_data(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"code": 0, "data": {"transfers": None}})
        assert SubscanAPI(session=session).transfers("15oF4u") == []
