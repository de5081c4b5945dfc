"""
Dispatch domain lookups to the right naming-service resolver.

Forward lookups pick the resolver by TLD. Reverse lookups try the resolvers
for a ticker (or all of them) in order and return the first hit.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import requests

from currency_core.domains.algo import AlgoDomainsResolver
from currency_core.domains.base import DomainResolver
from currency_core.domains.sol import SolanaDomainsResolver
from currency_core.domains.stx import StacksBnsResolver
from currency_core.domains.tez import TezosDomainsResolver
from currency_core.errors import DomainResolutionError


@dataclass(frozen=True)
class DomainLookup:
    """A reverse-lookup hit: the domain and the naming service that owns it."""

    domain: str
    service: str


def default_resolvers(session: requests.Session | None = None) -> list[DomainResolver]:
    return [
        AlgoDomainsResolver(session=session),
        SolanaDomainsResolver(session=session),
        StacksBnsResolver(session=session),
        TezosDomainsResolver(session=session),
    ]


class DomainRouter:
    def __init__(self, resolvers: Sequence[DomainResolver] | None = None) -> None:
        self.resolvers: list[DomainResolver] = list(resolvers) if resolvers is not None else default_resolvers()

    def resolver_for_domain(self, domain: str) -> DomainResolver | None:
        return next((r for r in self.resolvers if r.is_domain(domain)), None)

    def resolver_for_ticker(self, ticker: str | None) -> DomainResolver | None:
        if not ticker:
            return None
        return next((r for r in self.resolvers if ticker.upper() in r.tickers), None)

    def is_domain(self, text: str) -> bool:
        return self.resolver_for_domain(text) is not None

    def get_address(self, domain: str, coin_ticker: str) -> str:
        resolver = self.resolver_for_domain(domain)
        if resolver is None:
            msg = f"No resolver supports domain {domain}"
            raise DomainResolutionError(msg, context={"ticker": coin_ticker})
        return resolver.get_address(domain, coin_ticker)

    def resolve_domain_for_address(self, address: str, ticker: str | None = None) -> DomainLookup | None:
        """First domain any matching resolver finds for ``address``, else None."""
        if ticker:
            candidates = [r for r in self.resolvers if ticker.upper() in r.tickers]
        else:
            candidates = self.resolvers
        for resolver in candidates:
            domain = resolver.resolve_domain_for_address(address)
            if domain:
                return DomainLookup(domain=domain, service=resolver.service)
        return None


_default_router: DomainRouter | None = None


def get_router() -> DomainRouter:
    global _default_router
    if _default_router is None:
        _default_router = DomainRouter()
    return _default_router


def resolve_domain_for_address(address: str, ticker: str | None = None) -> DomainLookup | None:
    """Reverse lookup through the default router."""
    return get_router().resolve_domain_for_address(address, ticker)
