"""
Common shape of a naming-service resolver.

A resolver knows which TLDs and coin tickers its naming service handles,
can map a domain to an address (``get_address``) and an address back to a
domain (``resolve_domain_for_address``).

Forward lookups raise ``DomainResolutionError`` with the message
``"Failed to resolve <service> domain <domain>: <reason>"``. Reverse lookups
never raise: an invalid address, no match, or a failed request all give
``None``.
"""

from __future__ import annotations

import re
from typing import Any, ClassVar

import requests

from currency_core.errors import ApiError, CurrencyCoreError, DomainResolutionError
from currency_core.services.client import ApiClient

#: Failures a reverse lookup turns into "no match".
LOOKUP_ERRORS = (CurrencyCoreError, requests.RequestException, ValueError, KeyError, TypeError, AttributeError)


class DomainResolver(ApiClient):
    """Base class for one naming service (NF Domains, SNS, BNS, ...)."""

    tickers: ClassVar[tuple[str, ...]] = ()
    tlds: ClassVar[tuple[str, ...]] = ()
    min_length: ClassVar[int] = 3
    address_pattern: ClassVar[re.Pattern[str] | None] = None

    @property
    def service(self) -> str:
        return self.SERVICE

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def is_domain(self, text: Any) -> bool:
        """True if ``text`` looks like a domain of this service."""
        if not isinstance(text, str) or len(text) < self.min_length:
            return False
        return text.lower().endswith(self.tlds)

    def supports_ticker(self, ticker: str) -> bool:
        return ticker.upper() in self.tickers

    def normalize_address(self, address: str) -> str:
        return address.strip()

    def is_address(self, address: str) -> bool:
        if self.address_pattern is None:
            return bool(address)
        return bool(self.address_pattern.match(address))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_address(self, domain: str, coin_ticker: str) -> str:
        """Resolve ``domain`` to the ``coin_ticker`` address it points at."""
        self.log.debug("Resolving {} for {}", domain, coin_ticker)
        try:
            if not self.supports_ticker(coin_ticker):
                msg = f"{self.service} does not support {coin_ticker} addresses"
                raise DomainResolutionError(msg)
            if not self.is_domain(domain):
                msg = f"{domain} is not a valid {self.service} domain"
                raise DomainResolutionError(msg)
            address = self._forward(domain.strip().lower(), coin_ticker.upper())
        except ApiError as exc:
            reason = f"domain {domain} not found" if exc.status == 404 else str(exc)
            raise DomainResolutionError(f"Failed to resolve {self.service} domain {domain}: {reason}") from exc
        except LOOKUP_ERRORS as exc:
            raise DomainResolutionError(f"Failed to resolve {self.service} domain {domain}: {exc}") from exc
        if not address:
            msg = f"Failed to resolve {self.service} domain {domain}: no address found"
            raise DomainResolutionError(msg)
        self.log.info("Resolved {} -> {}", domain, address)
        return address

    def resolve_domain_for_address(self, address: str) -> str | None:
        """Reverse lookup. Returns ``None`` on any failure."""
        if not isinstance(address, str):
            return None
        normalized = self.normalize_address(address)
        if not self.is_address(normalized):
            self.log.debug("Not a {} address: {}", self.service, address)
            return None
        try:
            domain = self._reverse(normalized)
        except LOOKUP_ERRORS as exc:
            self.log.debug("Reverse lookup for {} failed: {}", address, exc)
            return None
        if domain:
            self.log.info("Reverse resolved {} -> {}", address, domain)
        return domain or None

    # ------------------------------------------------------------------
    # Service-specific hooks
    # ------------------------------------------------------------------

    def _forward(self, domain: str, ticker: str) -> str | None:
        raise NotImplementedError

    def _reverse(self, address: str) -> str | None:
        raise NotImplementedError

    def _with_tld(self, name: str) -> str:
        tld = self.tlds[0]
        return name if name.lower().endswith(tld) else f"{name}{tld}"
