"""Currency Core - reference catalogue and thin clients for crypto services.

Architecture::

    catalog/       Static metadata records (exchanges, DEXs, oracles, ramps, ...)
    datasources/   Thin REST/GraphQL wrappers, one class per external service
    domains/       Naming-service resolvers (.algo, .sol, .btc/.stx/.id, .tez) + router
    console/       Ping configs and the API-key test console (exchanges, IPFS, LLMs)
    minting/       IPFS pinning + ERC-721 mint pipeline
    flows/         Prefect orchestration (price ticker refresh)
    services/      Shared utilities (HTTP session with retry, base API client)
    store.py       JSON cache with TTL envelopes

Data flow: catalog → datasources/domains/console → store (cache) → cli

Extension points (step-by-step guides live in each package docstring):
  - New catalogue entry:  catalog/__init__.py
  - New API wrapper:      datasources/__init__.py
  - New naming service:   domains/__init__.py
"""

__version__ = "0.1.0"

from currency_core.config import Settings
from currency_core.schemas import Category, ServiceInfo

__all__ = ["Category", "ServiceInfo", "Settings", "__version__"]
