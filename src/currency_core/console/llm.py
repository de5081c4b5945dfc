"""Ping settings for LLM API providers.

Every provider is checked by listing its models. Most take a Bearer token;
Anthropic wants ``x-api-key`` plus a version header and Gemini takes the
key as a query parameter.
"""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import urlencode

from currency_core import catalog
from currency_core.console.models import PingConfig
from currency_core.schemas import Category

ANTHROPIC_VERSION = "2023-06-01"

AUTH_HEADER_OVERRIDES: dict[str, Callable[[str], dict[str, str]]] = {
    "anthropic": lambda k: {"x-api-key": k, "anthropic-version": ANTHROPIC_VERSION},
    "gemini": lambda k: {},
}

KEY_IN_QUERY = {"gemini"}


def build_llm_ping_config(provider_id: str, api_key: str) -> PingConfig | None:
    info = catalog.get_service(Category.LLM, provider_id)
    if info is None or not info.endpoints or not info.api_base_url:
        return None

    ep = info.endpoints[0]
    url = f"{info.api_base_url}{ep.path}"
    if provider_id in KEY_IN_QUERY:
        url = f"{url}?" + urlencode({"key": api_key})

    header_builder = AUTH_HEADER_OVERRIDES.get(provider_id)
    headers = header_builder(api_key) if header_builder else {"Authorization": f"Bearer {api_key}"}
    return PingConfig(
        url=url,
        method=ep.method.upper(),
        headers=headers,
        label=info.name,
        endpoint=f"{ep.method.upper()} {ep.path}",
    )
