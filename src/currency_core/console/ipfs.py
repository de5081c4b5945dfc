"""
Ping settings for IPFS pinning providers.

Most providers take ``Authorization: Bearer <key>`` and expose some GET
endpoint that proves the key works. The exceptions are listed in the two
override tables; everything else is discovered from the provider's
catalogue entry.
"""

from __future__ import annotations

import base64
import re
from collections.abc import Callable

from currency_core import catalog
from currency_core.console.models import PingConfig
from currency_core.schemas import ApiEndpoint, Category, ServiceInfo


def _b64(text: str) -> str:
    return base64.b64encode(text.encode()).decode()


def _basic(key: str, secret: str) -> dict[str, str]:
    return {"Authorization": f"Basic {_b64(f'{key}:{secret}')}"}


def _crust(key: str, secret: str) -> dict[str, str]:
    if secret:
        return {"Authorization": f"Bearer {_b64(f'{key}:{secret}')}"}
    return {"Authorization": f"Bearer {key}"}


AUTH_HEADER_OVERRIDES: dict[str, Callable[[str, str], dict[str, str]]] = {
    "infura": _basic,
    "filebase": _basic,
    "crust": _crust,
}

#: Basic auth needs both halves.
NEEDS_SECRET = frozenset({"infura", "filebase"})

#: Providers with a dedicated auth-test endpoint, or one on another host.
AUTH_ENDPOINT_OVERRIDES: dict[str, tuple[str, str, str]] = {
    "pinata": ("https://api.pinata.cloud/data/testAuthentication", "GET", "GET /data/testAuthentication"),
    "lighthouse": ("https://api.lighthouse.storage/api/v0/files?pageNo=1", "GET", "GET /api/v0/files"),
    "nftstorage": ("https://api.nft.storage/user/uploads?size=1", "GET", "GET /user/uploads"),
    "storacha": ("https://up.web3.storage/user", "GET", "GET /user"),
}

_AUTH_HINT = re.compile(r"auth|user|status|list|info", re.IGNORECASE)


def find_auth_endpoint(info: ServiceInfo) -> ApiEndpoint | None:
    """Prefer a GET that looks auth-related, then any GET, then the first endpoint."""
    gets = [e for e in info.endpoints if e.method.upper() == "GET"]
    preferred = next((e for e in gets if _AUTH_HINT.search(e.name + e.path)), None)
    if preferred:
        return preferred
    if gets:
        return gets[0]
    return info.endpoints[0] if info.endpoints else None


def build_ipfs_ping_config(provider_id: str, api_key: str, api_secret: str = "") -> PingConfig | None:
    info = catalog.get_service(Category.IPFS, provider_id)
    if info is None:
        return None

    override = AUTH_ENDPOINT_OVERRIDES.get(provider_id)
    if override:
        url, method, endpoint = override
    else:
        ep = find_auth_endpoint(info)
        if ep is None or not info.api_base_url:
            return None
        url = f"{info.api_base_url}{ep.path}"
        method = ep.method.upper()
        endpoint = f"{method} {ep.path}"

    header_builder = AUTH_HEADER_OVERRIDES.get(provider_id)
    headers = header_builder(api_key, api_secret) if header_builder else {"Authorization": f"Bearer {api_key}"}
    return PingConfig(url=url, method=method, headers=headers, label=info.name, endpoint=endpoint)
