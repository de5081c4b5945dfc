"""
Base class for the thin REST wrappers in ``datasources/``.

Every wrapper follows the same shape: construct with ``api_key`` /
``base_url`` / ``sandbox``, then each public method formats one request,
sends it through the shared session and returns the parsed JSON. A non-2xx
status or an error field inside the body raises ``ApiError``.

Subclasses set ``SERVICE``, ``BASE_URL`` (and ``SANDBOX_URL`` when the
service has one), and override ``_headers()`` / ``_api_error()`` as needed.
A wrapper that names an ``API_KEY_SETTING`` falls back to that setting when
no ``api_key`` is passed.
"""

from __future__ import annotations

from typing import Any, ClassVar

import requests
from loguru import logger

from currency_core.config import get_settings
from currency_core.errors import ApiError
from currency_core.services import http


def clean_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """Drop ``None`` values so optional arguments don't reach the query string."""
    if not params:
        return {}
    return {k: v for k, v in params.items() if v is not None}


class ApiClient:
    """One-shot request/response client for a single external service."""

    SERVICE: ClassVar[str] = "API"
    BASE_URL: ClassVar[str] = ""
    SANDBOX_URL: ClassVar[str | None] = None
    #: Settings field holding this service's key, e.g. ``"tronscan_api_key"``.
    API_KEY_SETTING: ClassVar[str | None] = None

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        sandbox: bool = False,
        *,
        session: requests.Session | None = None,
    ) -> None:
        if api_key is None and self.API_KEY_SETTING:
            api_key = getattr(get_settings(), self.API_KEY_SETTING).get_secret_value() or None
        self.api_key = api_key
        self.sandbox = sandbox
        if base_url:
            resolved = base_url
        elif sandbox and self.SANDBOX_URL:
            resolved = self.SANDBOX_URL
        else:
            resolved = self.BASE_URL
        self.base_url = resolved.rstrip("/")
        self.session = session or http.session
        self.log = logger.bind(service=self.SERVICE)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r}, sandbox={self.sandbox})"

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        """Headers sent with every request (auth keys, API versions)."""
        return {}

    def _api_error(self, payload: Any) -> str | None:
        """Return the error message embedded in a 2xx body, if any."""
        return None

    # ------------------------------------------------------------------
    # Request plumbing
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        if not path:
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: Any = None,
        files: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        url = self._url(path)
        merged = {**self._headers(), **(headers or {})}
        self.log.debug("{} {}", method, url)
        try:
            resp = self.session.request(
                method,
                url,
                params=clean_params(params) or None,
                json=json,
                data=data,
                files=files,
                headers=merged or None,
            )
        except requests.RequestException as exc:
            self.log.warning("{} {} failed: {}", method, url, exc)
            raise ApiError(self.SERVICE, str(exc)) from exc

        payload = http.check_response(resp, self.SERVICE)
        error = self._api_error(payload)
        if error:
            raise ApiError(self.SERVICE, error, status=resp.status_code)
        return payload

    def _get(self, path: str, params: dict[str, Any] | None = None, **kwargs: Any) -> Any:
        return self._request("GET", path, params=params, **kwargs)

    def _post(self, path: str, **kwargs: Any) -> Any:
        return self._request("POST", path, **kwargs)
