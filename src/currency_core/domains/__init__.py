"""Blockchain naming-service resolution.

Public API:
  - base: DomainResolver
  - algo: AlgoDomainsResolver (NF Domains, .algo)
  - sol: SolanaDomainsResolver (Bonfida SNS, .sol)
  - stx: StacksBnsResolver (BNS V2, .btc .stx .id)
  - tez: TezosDomainsResolver (Tezos Domains, .tez)
  - router: DomainRouter, DomainLookup, resolve_domain_for_address
"""

from currency_core.domains.algo import AlgoDomainsResolver
from currency_core.domains.base import DomainResolver
from currency_core.domains.router import DomainLookup, DomainRouter, resolve_domain_for_address
from currency_core.domains.sol import SolanaDomainsResolver
from currency_core.domains.stx import StacksBnsResolver
from currency_core.domains.tez import TezosDomainsResolver

__all__ = [
    "AlgoDomainsResolver",
    "DomainLookup",
    "DomainResolver",
    "DomainRouter",
    "SolanaDomainsResolver",
    "StacksBnsResolver",
    "TezosDomainsResolver",
    "resolve_domain_for_address",
]
