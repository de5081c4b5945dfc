"""
Command-line interface for currency-core.

Browse the service catalogue, resolve naming-service domains, test API keys
and refresh the price ticker cache.
"""

from __future__ import annotations

import argparse
import sys

from currency_core import __version__, catalog
from currency_core.config import get_settings
from currency_core.console import PingConsole, PingOutcome
from currency_core.console.exchanges import EXCHANGE_META
from currency_core.console.ipfs import NEEDS_SECRET
from currency_core.domains.router import get_router
from currency_core.errors import CurrencyCoreError
from currency_core.flows.ticker import refresh_ticker
from currency_core.log import setup_logging
from currency_core.schemas import Category, CurrencyInfo, ServiceInfo

CATEGORY_CHOICES = [c.value for c in Category]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="currency-core",
        description="Crypto service catalogue, domain resolution and API key checks",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    catalog_parser = subparsers.add_parser("catalog", help="List catalogue entries")
    catalog_parser.add_argument("--category", choices=CATEGORY_CHOICES, help="Only this category")
    catalog_parser.add_argument("--ticker", help="Only services supporting this ticker")
    catalog_parser.add_argument("--search", help="Substring match on id, name and description")

    show_parser = subparsers.add_parser("show", help="Show one catalogue entry")
    show_parser.add_argument("category", choices=CATEGORY_CHOICES)
    show_parser.add_argument("id")

    currency_parser = subparsers.add_parser("currency", help="Show a coin's reference record")
    currency_parser.add_argument("ticker", nargs="?", help="Coin ticker (omit to list all)")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a domain to an address")
    resolve_parser.add_argument("domain")
    resolve_parser.add_argument("--ticker", help="Coin ticker (default: the naming service's own coin)")

    reverse_parser = subparsers.add_parser("reverse", help="Find the domain registered for an address")
    reverse_parser.add_argument("address")
    reverse_parser.add_argument("--ticker", help="Only ask naming services for this ticker")

    ping_parser = subparsers.add_parser("ping", help="Test an API key")
    ping_parser.add_argument("kind", choices=["exchange", "ipfs", "llm"])
    ping_parser.add_argument("id")
    ping_parser.add_argument("--key", required=True, help="API key")
    ping_parser.add_argument("--secret", default="", help="API secret, where the provider needs one")

    subparsers.add_parser("ticker", help="Refresh the price ticker cache")

    return parser


def _print_service(info: ServiceInfo) -> None:
    print(f"{info.name} ({info.category.value}/{info.id})")
    print(f"  Website: {info.website}")
    if info.description:
        print(f"  {info.description}")
    if info.api_base_url:
        print(f"  API: {info.api_base_url}")
    if info.docs_url:
        print(f"  Docs: {info.docs_url}")
    if info.tickers:
        print(f"  Tickers: {', '.join(info.tickers)}")
    for ep in info.endpoints:
        print(f"  Endpoint: {ep.method} {ep.path} ({ep.name})")
    for label, url in info.social.as_dict().items():
        print(f"  {label}: {url}")
    if info.notes:
        print(f"  Notes: {info.notes}")


def _print_currency(info: CurrencyInfo) -> None:
    tech = info.technical
    print(f"{info.name} ({info.ticker})")
    print(f"  {info.description}")
    print(f"  Created by {info.creator} in {info.debut_year}")
    print(f"  Website: {info.website}")
    print(f"  Consensus: {tech.consensus}")
    print(f"  Supply: {tech.total_supply}")
    print(f"  Keys: {tech.key_curve}, path {tech.derivation_path}")
    print(f"  Addresses: {tech.address_encoding}")
    if tech.naming_service:
        print(f"  Naming: {tech.naming_service}")
    if info.all_time_high:
        ath = info.all_time_high
        print(f"  All-time high: {ath.price} {ath.currency} on {ath.reached_on.isoformat()}")
    for label, venues in (("DEX", info.dexs), ("Staking", info.staking_providers), ("Mining", info.mining_pools)):
        for venue in venues:
            print(f"  {label}: {venue.name} {venue.url}")
    if info.mining_note:
        print(f"  Mining: {info.mining_note}")
    if info.explorer_url:
        print(f"  Explorer: {info.explorer_url}")


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Catalogue entries: {len(catalog.list_services())}")
    print(f"Currency records: {len(catalog.list_currencies())}")
    return 0


def cmd_catalog(args: argparse.Namespace) -> int:
    """Handle the 'catalog' command."""
    if args.search:
        services = catalog.search(args.search)
    elif args.ticker:
        services = catalog.services_for_ticker(args.ticker)
    else:
        services = catalog.list_services(args.category)

    if args.category:
        services = [s for s in services if s.category == args.category]
    if args.ticker:
        services = [s for s in services if s.supports(args.ticker)]

    for info in services:
        print(f"{info.category.value:<16} {info.id:<20} {info.name}")
    print(f"{len(services)} services")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Handle the 'show' command."""
    info = catalog.get_service(args.category, args.id)
    if info is None:
        print(f"Unknown {args.category} id: {args.id}", file=sys.stderr)
        return 1
    _print_service(info)
    return 0


def cmd_currency(args: argparse.Namespace) -> int:
    """Handle the 'currency' command."""
    if not args.ticker:
        for info in catalog.list_currencies():
            print(f"{info.ticker:<6} {info.name}")
        return 0
    info = catalog.get_currency(args.ticker)
    if info is None:
        print(f"No currency record for {args.ticker}", file=sys.stderr)
        return 1
    _print_currency(info)
    return 0


def cmd_resolve(args: argparse.Namespace) -> int:
    """Handle the 'resolve' command."""
    router = get_router()
    resolver = router.resolver_for_domain(args.domain)
    if resolver is None:
        print(f"No resolver supports domain {args.domain}", file=sys.stderr)
        return 1
    ticker = args.ticker or resolver.tickers[0]
    try:
        address = router.get_address(args.domain, ticker)
    except CurrencyCoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(address)
    return 0


def cmd_reverse(args: argparse.Namespace) -> int:
    """Handle the 'reverse' command."""
    lookup = get_router().resolve_domain_for_address(args.address, args.ticker)
    if lookup is None:
        print(f"No domain found for {args.address}", file=sys.stderr)
        return 1
    print(f"{lookup.domain} ({lookup.service})")
    return 0


def _print_outcome(outcome: PingOutcome) -> int:
    for entry in outcome.logs:
        print(f"[{entry.ts}] {entry.level.value:<7} {entry.msg}")
    return 0 if outcome.ok else 1


def cmd_ping(args: argparse.Namespace) -> int:
    """Handle the 'ping' command."""
    console = PingConsole()
    service_id = args.id.lower()

    if args.kind == "exchange":
        meta = EXCHANGE_META.get(service_id)
        if meta is None:
            print(f"Unknown exchange: {args.id}", file=sys.stderr)
            return 1
        outcome = console.ping_exchange(service_id, meta.name, args.key, args.secret)
    else:
        category = Category.IPFS if args.kind == "ipfs" else Category.LLM
        info = catalog.get_service(category, service_id)
        if info is None:
            print(f"Unknown {args.kind} provider: {args.id}", file=sys.stderr)
            return 1
        if category is Category.IPFS:
            outcome = console.ping_ipfs(
                service_id, info.name, args.key, args.secret, needs_secret=service_id in NEEDS_SECRET
            )
        else:
            outcome = console.ping_llm(service_id, info.name, args.key)

    if outcome is None:
        print("A check is already running.", file=sys.stderr)
        return 1
    return _print_outcome(outcome)


def cmd_ticker(_args: argparse.Namespace) -> int:
    """Handle the 'ticker' command."""
    try:
        result = refresh_ticker()
    except CurrencyCoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"{result['coins']} coins ({result['source']})")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging("DEBUG" if args.debug or settings.debug else settings.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "catalog": cmd_catalog,
        "show": cmd_show,
        "currency": cmd_currency,
        "resolve": cmd_resolve,
        "reverse": cmd_reverse,
        "ping": cmd_ping,
        "ticker": cmd_ticker,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
