"""
Shared HTTP client with automatic retry and backoff.

Provides a pre-configured ``requests.Session`` that retries on transient
network errors (timeouts, connection resets, 429/502/503/504) with exponential
backoff.  All wrappers should use this instead of bare ``requests.get``.

Usage::

    from currency_core.services.http import check_response, session

    resp = session.get("https://api.example.com/v1/data", timeout=30)
    data = check_response(resp, "Example")
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from currency_core import __version__
from currency_core.config import get_settings
from currency_core.errors import ApiError

#: Retries the transient errors public crypto APIs return under load.
DEFAULT_RETRY = Retry(
    total=4,
    backoff_factor=2,  # 0s, 2s, 4s, 8s between retries
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # let check_response() handle it
)

USER_AGENT = f"currency-core/{__version__}"

#: Longest response body quoted in an ApiError message.
MAX_ERROR_BODY = 300


def create_session(
    retry: Retry | None = None,
    timeout: float | None = None,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request. Falls back to
            the ``http_timeout`` setting.
    """
    if timeout is None:
        timeout = get_settings().http_timeout
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT
    s.headers["Accept"] = "application/json"

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


def response_text(resp: requests.Response) -> str:
    """Return the response body as text, truncated for error messages."""
    try:
        text = resp.text or ""
    except (AttributeError, UnicodeDecodeError):
        return ""
    text = text.strip()
    if len(text) > MAX_ERROR_BODY:
        return text[:MAX_ERROR_BODY] + "..."
    return text


def check_response(resp: requests.Response, service: str) -> Any:
    """
    Raise ``ApiError`` for non-2xx responses, else return the parsed JSON body.

    Args:
        resp: Response to inspect.
        service: Display name used in the error message.

    Raises:
        ApiError: On a non-2xx status or a body that is not valid JSON.
    """
    if not resp.ok:
        detail = response_text(resp) or resp.reason or "request failed"
        raise ApiError(service, detail, status=resp.status_code)
    try:
        return resp.json()
    except ValueError as exc:
        raise ApiError(service, f"invalid JSON response: {exc}", status=resp.status_code) from exc


#: Module-level session, shared by every wrapper.
session: requests.Session = create_session()
