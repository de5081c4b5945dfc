"""
Metadata models for the service catalogue.

Every catalogue entry is a frozen ``ServiceInfo``: built once at import time
as a module-level constant and never mutated. Validation enforces the only
invariant these records have: an entry must name the service and point at
its website.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(StrEnum):
    """Kind of external service a catalogue entry describes."""

    EXCHANGE = "exchange"
    AGGREGATOR = "aggregator"
    DEX = "dex"
    ORACLE = "oracle"
    STAKING_POOL = "staking_pool"
    NFT_MARKETPLACE = "nft_marketplace"
    P2P_EXCHANGE = "p2p_exchange"
    RAMP = "ramp"
    QUICK_EXCHANGE = "quick_exchange"
    EXPLORER = "explorer"
    IPFS = "ipfs"
    LLM = "llm"


class SocialLinks(BaseModel):
    """Official social-media handles (all optional)."""

    model_config = ConfigDict(frozen=True)

    twitter: str | None = None
    telegram: str | None = None
    discord: str | None = None
    reddit: str | None = None
    github: str | None = None
    youtube: str | None = None
    medium: str | None = None
    linkedin: str | None = None

    def as_dict(self) -> dict[str, str]:
        """Only the links that are set."""
        return {k: v for k, v in self.model_dump().items() if v}


class ApiEndpoint(BaseModel):
    """A documented endpoint of a service's API."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    method: str = "GET"


class ServiceInfo(BaseModel):
    """Descriptive record for one external service."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str = Field(..., description="Stable lookup key, lower-case")
    name: str = Field(..., description="Display name")
    category: Category
    website: str
    description: str = ""
    api_base_url: str | None = None
    docs_url: str | None = None
    tickers: tuple[str, ...] = Field(default=(), description="Chains the service is listed under")
    sdk: tuple[str, ...] = ()
    social: SocialLinks = Field(default_factory=SocialLinks)
    features: tuple[str, ...] = ()
    fees: dict[str, Any] = Field(default_factory=dict)
    notes: tuple[str, ...] = ()
    auth_required: bool = False
    endpoints: tuple[ApiEndpoint, ...] = ()

    @field_validator("id", "name", "website")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value:
            msg = "must be a non-empty string"
            raise ValueError(msg)
        return value

    @field_validator("website", "api_base_url", "docs_url")
    @classmethod
    def _http_url(cls, value: str | None) -> str | None:
        if value is not None and not value.startswith(("http://", "https://")):
            msg = f"must be an http(s) URL, got {value!r}"
            raise ValueError(msg)
        return value

    @field_validator("tickers")
    @classmethod
    def _upper_tickers(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(t.upper() for t in value)

    def supports(self, ticker: str) -> bool:
        """True if the service is listed under ``ticker`` (case-insensitive)."""
        return ticker.upper() in self.tickers


# =============================================================================
# Per-coin reference records
# =============================================================================


class Venue(BaseModel):
    """A place to trade, stake or mine a coin, as listed on its record."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    kind: str = ""
    description: str = ""


class TechnicalInfo(BaseModel):
    """Chain internals a wallet needs to know about."""

    model_config = ConfigDict(frozen=True)

    consensus: str
    chain_class: str
    total_supply: str
    hashing: str
    signing: str
    key_curve: str
    address_encoding: str
    derivation_path: str
    smart_contract_language: str = ""
    naming_service: str | None = None
    nft_standard: str = ""
    token_standard: str = ""
    evm_chain_id: int | None = None


class AllTimeHigh(BaseModel):
    model_config = ConfigDict(frozen=True)

    price: float
    reached_on: date
    currency: str = "USD"


class CurrencyInfo(BaseModel):
    """Reference record for one coin: who made it, how the chain works and
    where it trades.

    ``explorer_url`` is an address-page prefix, so ``explorer_url + address``
    is a link to that address.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    ticker: str
    name: str
    description: str
    creator: str
    debut_year: int
    website: str
    whitepaper: str | None = None
    nft_marketplaces: tuple[str, ...] = ()
    technical: TechnicalInfo
    dexs: tuple[Venue, ...] = ()
    staking_providers: tuple[Venue, ...] = ()
    mining_pools: tuple[Venue, ...] = ()
    mining_note: str = ""
    all_time_high: AllTimeHigh | None = None
    social: SocialLinks = Field(default_factory=SocialLinks)
    coingecko_id: str | None = None
    coinpaprika_id: str | None = None
    cmc_id: int | None = None
    explorer_url: str | None = None
    explorer_api_url: str | None = None

    @field_validator("ticker")
    @classmethod
    def _upper_ticker(cls, value: str) -> str:
        if not value:
            msg = "must be a non-empty string"
            raise ValueError(msg)
        return value.upper()

    @field_validator("website", "whitepaper", "explorer_url", "explorer_api_url")
    @classmethod
    def _http_url(cls, value: str | None) -> str | None:
        if value is not None and not value.startswith(("http://", "https://")):
            msg = f"must be an http(s) URL, got {value!r}"
            raise ValueError(msg)
        return value

    def address_url(self, address: str) -> str | None:
        """Explorer link for ``address``, or None when no explorer is known."""
        if not self.explorer_url:
            return None
        return f"{self.explorer_url}{address}"
