"""Tests for the naming-service resolvers."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests

from currency_core.domains import (
    AlgoDomainsResolver,
    SolanaDomainsResolver,
    StacksBnsResolver,
    TezosDomainsResolver,
)
from currency_core.domains.algo import NFD_API, NFD_TESTNET_API, extract_nfd_name
from currency_core.domains.stx import zonefile_address
from currency_core.errors import DomainResolutionError

ALGO_ADDRESS = "A" * 58
SOL_ADDRESS = "HKKp49qGWXd639QsuH7JiLijfVW5UtCVY4s1n2HANwEA"
STX_ADDRESS = "SP2J6ZY48GV1EZ5V2V5RB9MP66SW86PYKKNRV9EJ7"
TEZ_ADDRESS = "tz1VSUr8wwNhLAzempoch5d6hLRiTh8Cjcjb"


class TestResolverChecks:
    def test_is_domain_by_tld(self) -> None:
        algo = AlgoDomainsResolver()
        assert algo.is_domain("silvio.algo")
        assert algo.is_domain("SILVIO.ALGO")
        assert not algo.is_domain("a.algo")
        assert not algo.is_domain("silvio.sol")
        assert not algo.is_domain(None)

    def test_ticker_support(self) -> None:
        assert SolanaDomainsResolver().supports_ticker("sol")
        assert not SolanaDomainsResolver().supports_ticker("BTC")
        assert StacksBnsResolver().supports_ticker("DOGE")

    def test_algo_address_normalized(self) -> None:
        algo = AlgoDomainsResolver()
        assert algo.is_address(algo.normalize_address(" " + "a" * 58 + " "))
        assert not algo.is_address("0x123")


class TestGetAddress:
    def test_unsupported_ticker(self, session: Mock) -> None:
        with pytest.raises(DomainResolutionError, match="does not support BTC"):
            AlgoDomainsResolver(session=session).get_address("silvio.algo", "BTC")
        session.request.assert_not_called()

    def test_wrong_tld(self, session: Mock) -> None:
        with pytest.raises(DomainResolutionError, match="not a valid"):
            SolanaDomainsResolver(session=session).get_address("bonfida.algo", "SOL")

    def test_404_reported_as_not_found(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"error": "not found"}, status=404)
        with pytest.raises(DomainResolutionError, match="domain missing.algo not found"):
            AlgoDomainsResolver(session=session).get_address("missing.algo", "ALGO")

    def test_network_error_wrapped(self, session: Mock) -> None:
        session.request.side_effect = requests.ConnectionError("down")
        with pytest.raises(DomainResolutionError, match="Failed to resolve Tezos Domains domain alice.tez"):
            TezosDomainsResolver(session=session).get_address("alice.tez", "XTZ")


class TestAlgo:
    def test_forward_reads_owner(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"name": "silvio.algo", "owner": ALGO_ADDRESS})
        assert AlgoDomainsResolver(session=session).get_address("Silvio.algo", "algo") == ALGO_ADDRESS
        assert session.request.call_args.args[1] == f"{NFD_API}/silvio"

    def test_forward_without_owner(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"name": "silvio.algo"})
        with pytest.raises(DomainResolutionError, match="no owner address"):
            AlgoDomainsResolver(session=session).get_address("silvio.algo", "ALGO")

    def test_reverse_falls_through_endpoints(self, session: Mock, respond) -> None:
        session.request.side_effect = [
            respond(text="", status=404),
            respond({}),
            respond({"nfds": [{"name": "silvio.algo"}]}),
        ]
        assert AlgoDomainsResolver(session=session).resolve_domain_for_address(ALGO_ADDRESS.lower()) == "silvio.algo"
        urls = [c.args[1] for c in session.request.call_args_list]
        assert urls == [f"{NFD_API}/v2/address", f"{NFD_TESTNET_API}/v2/address", f"{NFD_API}/v2/search"]

    def test_reverse_none_when_all_fail(self, session: Mock, respond) -> None:
        session.request.return_value = respond(text="", status=500)
        assert AlgoDomainsResolver(session=session).resolve_domain_for_address(ALGO_ADDRESS) is None
        assert session.request.call_count == 5

    def test_reverse_rejects_non_address(self, session: Mock) -> None:
        assert AlgoDomainsResolver(session=session).resolve_domain_for_address("not-an-address") is None
        session.request.assert_not_called()


class TestExtractNfdName:
    def test_keyed_by_address_list(self) -> None:
        assert extract_nfd_name({ALGO_ADDRESS: [{"name": "a.algo"}]}, ALGO_ADDRESS) == "a.algo"

    def test_keyed_by_address_dict(self) -> None:
        assert extract_nfd_name({ALGO_ADDRESS: {"name": "b.algo"}}, ALGO_ADDRESS) == "b.algo"

    def test_plain_name_suffix_removed(self) -> None:
        assert extract_nfd_name([{"name": "c.algo"}], ALGO_ADDRESS) == "c"

    def test_nested(self) -> None:
        assert extract_nfd_name({"wrapper": {"domain": "d"}}, ALGO_ADDRESS) == "d"

    def test_nothing(self) -> None:
        assert extract_nfd_name({"count": 0}, ALGO_ADDRESS) is None
        assert extract_nfd_name([], ALGO_ADDRESS) is None


class TestSolana:
    def test_forward(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"s": "ok", "result": SOL_ADDRESS})
        assert SolanaDomainsResolver(session=session).get_address("bonfida.sol", "SOL") == SOL_ADDRESS
        assert session.request.call_args.args[1] == "https://sns-sdk-proxy.bonfida.workers.dev/resolve/bonfida"

    def test_forward_error_envelope(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"s": "error", "result": "Invalid domain"})
        with pytest.raises(DomainResolutionError, match="Invalid domain"):
            SolanaDomainsResolver(session=session).get_address("nope.sol", "SOL")

    def test_reverse_favorite_domain(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"s": "ok", "result": {"domain": "x", "reverse": "bonfida"}})
        assert SolanaDomainsResolver(session=session).resolve_domain_for_address(SOL_ADDRESS) == "bonfida.sol"

    def test_reverse_error_is_none(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"s": "error", "result": "no favorite"})
        assert SolanaDomainsResolver(session=session).resolve_domain_for_address(SOL_ADDRESS) is None


class TestStacks:
    ACTIVE = {
        "status": "active",
        "data": {"owner": STX_ADDRESS, "is_valid": True, "revoked": False},
    }

    def test_forward_stx_is_owner(self, session: Mock, respond) -> None:
        session.request.return_value = respond(self.ACTIVE)
        assert StacksBnsResolver(session=session).get_address("muneeb.btc", "STX") == STX_ADDRESS
        assert session.request.call_args.args[1] == "https://api.bnsv2.com/names/muneeb.btc"

    def test_forward_btc_from_zonefile(self, session: Mock, respond) -> None:
        session.request.side_effect = [
            respond(self.ACTIVE),
            respond({"zonefile": {"btc": "bc1qexample"}}),
        ]
        assert StacksBnsResolver(session=session).get_address("muneeb.btc", "BTC") == "bc1qexample"

    def test_forward_revoked(self, session: Mock, respond) -> None:
        revoked = {"status": "active", "data": {"owner": STX_ADDRESS, "is_valid": True, "revoked": True}}
        session.request.return_value = respond(revoked)
        with pytest.raises(DomainResolutionError, match="revoked"):
            StacksBnsResolver(session=session).get_address("old.btc", "STX")

    def test_forward_missing_coin(self, session: Mock, respond) -> None:
        session.request.side_effect = [respond(self.ACTIVE), respond(text="", status=404)]
        with pytest.raises(DomainResolutionError, match="no DOGE address"):
            StacksBnsResolver(session=session).get_address("muneeb.btc", "DOGE")

    def test_reverse_first_name(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"names": [{"full_name": "muneeb.btc"}, {"full_name": "m.id"}]})
        assert StacksBnsResolver(session=session).resolve_domain_for_address(STX_ADDRESS) == "muneeb.btc"

    def test_reverse_404_is_none(self, session: Mock, respond) -> None:
        session.request.return_value = respond(text="", status=404)
        assert StacksBnsResolver(session=session).resolve_domain_for_address(STX_ADDRESS) is None

    def test_zonefile_wallet_entries(self) -> None:
        zone = {"addresses": [{"network": "eth", "type": "wallet", "address": "0xabc"}]}
        assert zonefile_address(zone, "ETH") == "0xabc"
        assert zonefile_address(zone, "SOL") is None


class TestTezos:
    def test_forward(self, session: Mock, respond) -> None:
        session.request.return_value = respond([TEZ_ADDRESS])
        assert TezosDomainsResolver(session=session).get_address("alice.tez", "XTZ") == TEZ_ADDRESS
        assert session.request.call_args.kwargs["params"] == {"name": "alice.tez", "select": "address"}

    def test_forward_not_found(self, session: Mock, respond) -> None:
        session.request.return_value = respond([])
        with pytest.raises(DomainResolutionError, match="not found"):
            TezosDomainsResolver(session=session).get_address("nobody.tez", "XTZ")

    def test_reverse_dict_record(self, session: Mock, respond) -> None:
        session.request.return_value = respond([{"name": "alice.tez"}])
        assert TezosDomainsResolver(session=session).resolve_domain_for_address(TEZ_ADDRESS) == "alice.tez"
