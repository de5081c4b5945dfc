"""Tests for the CLI module."""

from __future__ import annotations

import argparse
from unittest.mock import MagicMock, patch

import pytest

from currency_core import __version__
from currency_core.cli import (
    cmd_catalog,
    cmd_currency,
    cmd_info,
    cmd_ping,
    cmd_resolve,
    cmd_reverse,
    cmd_show,
    cmd_ticker,
    create_parser,
    main,
)
from currency_core.console import PingOutcome
from currency_core.console.models import LogEntry, LogLevel
from currency_core.domains.router import DomainLookup
from currency_core.errors import ApiError, DomainResolutionError


class TestParser:
    """Test argument parser creation."""

    def test_create_parser(self) -> None:
        parser = create_parser()
        assert parser.prog == "currency-core"

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        parser = create_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_debug_flag(self) -> None:
        args = create_parser().parse_args(["--debug", "info"])
        assert args.debug is True
        assert args.command == "info"

    def test_catalog_filters(self) -> None:
        args = create_parser().parse_args(["catalog", "--category", "exchange", "--ticker", "btc"])
        assert args.category == "exchange"
        assert args.ticker == "btc"
        assert args.search is None

    def test_unknown_category_rejected(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["show", "casino", "x"])

    def test_ping_requires_key(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["ping", "exchange", "binance"])

    def test_ping_secret_default(self) -> None:
        args = create_parser().parse_args(["ping", "exchange", "binance", "--key", "k"])
        assert args.secret == ""


class TestCommands:
    """Test command handlers."""

    def test_cmd_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        result = cmd_info(argparse.Namespace())
        out = capsys.readouterr().out
        assert result == 0
        assert f"Version: {__version__}" in out
        assert "Catalogue entries:" in out

    def test_cmd_catalog_by_category(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = argparse.Namespace(category="exchange", ticker=None, search=None)
        assert cmd_catalog(args) == 0
        out = capsys.readouterr().out
        assert "binance" in out
        assert "pinata" not in out

    def test_cmd_catalog_search(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = argparse.Namespace(category=None, ticker=None, search="pinata")
        assert cmd_catalog(args) == 0
        out = capsys.readouterr().out
        assert "pinata" in out
        assert out.strip().endswith("services")

    def test_cmd_show(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cmd_show(argparse.Namespace(category="exchange", id="binance")) == 0
        out = capsys.readouterr().out
        assert out.startswith("Binance (exchange/binance)")
        assert "Website:" in out

    def test_cmd_show_unknown(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cmd_show(argparse.Namespace(category="exchange", id="nope")) == 1
        assert "Unknown exchange id: nope" in capsys.readouterr().err

    def test_cmd_currency_lists_records(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cmd_currency(argparse.Namespace(ticker=None)) == 0
        out = capsys.readouterr().out
        assert "XTZ    Tezos" in out
        assert "BCH    Bitcoin Cash" in out

    def test_cmd_currency_record(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cmd_currency(argparse.Namespace(ticker="stx")) == 0
        out = capsys.readouterr().out
        assert out.startswith("Stacks (STX)")
        assert "All-time high: 3.61 USD on 2021-11-16" in out
        assert "DEX: ALEX https://alexgo.io/" in out

    def test_cmd_currency_unknown(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cmd_currency(argparse.Namespace(ticker="DOGE")) == 1
        assert "No currency record for DOGE" in capsys.readouterr().err


class TestResolveCommands:
    @patch("currency_core.cli.get_router")
    def test_resolve_defaults_to_resolver_ticker(
        self, mock_router: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        router = mock_router.return_value
        router.resolver_for_domain.return_value.tickers = ("ALGO",)
        router.get_address.return_value = "ADDR"

        assert cmd_resolve(argparse.Namespace(domain="alice.algo", ticker=None)) == 0
        router.get_address.assert_called_once_with("alice.algo", "ALGO")
        assert capsys.readouterr().out.strip() == "ADDR"

    @patch("currency_core.cli.get_router")
    def test_resolve_unsupported_domain(self, mock_router: MagicMock, capsys: pytest.CaptureFixture[str]) -> None:
        mock_router.return_value.resolver_for_domain.return_value = None
        assert cmd_resolve(argparse.Namespace(domain="alice.eth", ticker=None)) == 1
        assert "No resolver supports domain alice.eth" in capsys.readouterr().err

    @patch("currency_core.cli.get_router")
    def test_resolve_error(self, mock_router: MagicMock, capsys: pytest.CaptureFixture[str]) -> None:
        router = mock_router.return_value
        router.get_address.side_effect = DomainResolutionError("no ETH record")
        assert cmd_resolve(argparse.Namespace(domain="alice.sol", ticker="ETH")) == 1
        assert "Error: no ETH record" in capsys.readouterr().err

    @patch("currency_core.cli.get_router")
    def test_reverse(self, mock_router: MagicMock, capsys: pytest.CaptureFixture[str]) -> None:
        mock_router.return_value.resolve_domain_for_address.return_value = DomainLookup("bob.tez", "Tezos Domains")
        assert cmd_reverse(argparse.Namespace(address="tz1abc", ticker="XTZ")) == 0
        mock_router.return_value.resolve_domain_for_address.assert_called_once_with("tz1abc", "XTZ")
        assert "bob.tez (Tezos Domains)" in capsys.readouterr().out

    @patch("currency_core.cli.get_router")
    def test_reverse_not_found(self, mock_router: MagicMock, capsys: pytest.CaptureFixture[str]) -> None:
        mock_router.return_value.resolve_domain_for_address.return_value = None
        assert cmd_reverse(argparse.Namespace(address="tz1abc", ticker=None)) == 1
        assert "No domain found for tz1abc" in capsys.readouterr().err


def _outcome(ok: bool) -> PingOutcome:
    level = LogLevel.SUCCESS if ok else LogLevel.ERROR
    return PingOutcome(ok=ok, status=200 if ok else 401, logs=[LogEntry(0, "12:00:00", level, "done")])


class TestPingCommand:
    @patch("currency_core.cli.PingConsole")
    def test_ping_exchange(self, mock_console: MagicMock, capsys: pytest.CaptureFixture[str]) -> None:
        mock_console.return_value.ping_exchange.return_value = _outcome(True)
        args = argparse.Namespace(kind="exchange", id="Binance", key="k", secret="s")

        assert cmd_ping(args) == 0
        mock_console.return_value.ping_exchange.assert_called_once_with("binance", "Binance", "k", "s")
        assert "[12:00:00] success done" in capsys.readouterr().out

    @patch("currency_core.cli.PingConsole")
    def test_ping_ipfs_needs_secret(self, mock_console: MagicMock) -> None:
        mock_console.return_value.ping_ipfs.return_value = _outcome(False)
        args = argparse.Namespace(kind="ipfs", id="infura", key="k", secret="")

        assert cmd_ping(args) == 1
        call = mock_console.return_value.ping_ipfs.call_args
        assert call.args[0] == "infura"
        assert call.kwargs["needs_secret"] is True

    @patch("currency_core.cli.PingConsole")
    def test_ping_unknown_exchange(self, mock_console: MagicMock, capsys: pytest.CaptureFixture[str]) -> None:
        args = argparse.Namespace(kind="exchange", id="mtgox", key="k", secret="")
        assert cmd_ping(args) == 1
        mock_console.return_value.ping_exchange.assert_not_called()
        assert "Unknown exchange: mtgox" in capsys.readouterr().err

    @patch("currency_core.cli.PingConsole")
    def test_ping_already_running(self, mock_console: MagicMock, capsys: pytest.CaptureFixture[str]) -> None:
        mock_console.return_value.ping_exchange.return_value = None
        args = argparse.Namespace(kind="exchange", id="binance", key="k", secret="")
        assert cmd_ping(args) == 1
        assert "already running" in capsys.readouterr().err


class TestTickerCommand:
    @patch("currency_core.cli.refresh_ticker")
    def test_ticker(self, mock_flow: MagicMock, capsys: pytest.CaptureFixture[str]) -> None:
        mock_flow.return_value = {"coins": 22, "source": "cache"}
        assert cmd_ticker(argparse.Namespace()) == 0
        assert "22 coins (cache)" in capsys.readouterr().out

    @patch("currency_core.cli.refresh_ticker")
    def test_ticker_error(self, mock_flow: MagicMock, capsys: pytest.CaptureFixture[str]) -> None:
        mock_flow.side_effect = ApiError("CoinGecko", "rate limited", status=429)
        assert cmd_ticker(argparse.Namespace()) == 1
        assert "Error:" in capsys.readouterr().err


class TestMain:
    def test_main_no_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 0
        assert "currency-core" in capsys.readouterr().out

    def test_main_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["info"]) == 0
        assert "Application:" in capsys.readouterr().out
