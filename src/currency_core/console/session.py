"""
Interactive API-key checks with a running log.

``PingConsole`` sends one or two requests per check and records what it did
as ``LogEntry`` lines, so a front end can show them as they arrive. A check
that is already running makes further calls return ``None``.
"""

from __future__ import annotations

import itertools
import time
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any

import requests
from loguru import logger
from urllib3.util.retry import Retry

from currency_core.console.exchanges import build_exchange_ping_config, build_exchange_public_probe
from currency_core.console.ipfs import build_ipfs_ping_config
from currency_core.console.llm import build_llm_ping_config
from currency_core.console.models import LogEntry, LogLevel, PingOutcome, mask_key
from currency_core.services import http

#: A check sends exactly one request per phase, so the console never retries.
PING_RETRY = Retry(total=0, raise_on_status=False)

_LOGURU_LEVELS = {
    LogLevel.INFO: "INFO",
    LogLevel.REQUEST: "DEBUG",
    LogLevel.SUCCESS: "SUCCESS",
    LogLevel.ERROR: "ERROR",
    LogLevel.WARN: "WARNING",
}


def _json_body(resp: requests.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return None


def exchange_error_message(body: Any) -> str:
    """``msg``, ``message`` or ``error`` (first element when it's a list)."""
    if not isinstance(body, dict):
        return ""
    for key in ("msg", "message"):
        if body.get(key):
            return str(body[key])
    error = body.get("error")
    if isinstance(error, list):
        return str(error[0]) if error else ""
    return str(error) if error else ""


def provider_error_message(body: Any) -> str:
    """``error`` (string, or its ``details``) falling back to ``message``."""
    if not isinstance(body, dict):
        return ""
    error = body.get("error")
    if isinstance(error, str):
        return error
    if isinstance(error, dict) and error.get("details"):
        return str(error["details"])
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return str(body.get("message") or "")


def count_models(body: Any) -> int | None:
    if isinstance(body, list):
        return len(body)
    if isinstance(body, dict):
        for key in ("data", "models"):
            if isinstance(body.get(key), list):
                return len(body[key])
    return None


def _suffix(detail: str) -> str:
    return f" - {detail}" if detail else ""


class PingConsole:
    """Runs key checks against exchanges, IPFS pinners and LLM providers."""

    def __init__(self, session: requests.Session | None = None) -> None:
        self.session = session or http.create_session(retry=PING_RETRY)
        self.logs: list[LogEntry] = []
        self.pinging = False
        self.open = False
        self._ids = itertools.count()
        self.log = logger.bind(service="console")

    # ------------------------------------------------------------------
    # Log handling
    # ------------------------------------------------------------------

    def add_log(self, level: LogLevel, msg: str) -> LogEntry:
        entry = LogEntry(id=next(self._ids), ts=datetime.now().strftime("%H:%M:%S"), level=level, msg=msg)
        self.logs.append(entry)
        self.log.log(_LOGURU_LEVELS[level], msg)
        return entry

    def clear(self) -> None:
        self.logs = []

    def _reset(self) -> None:
        self.open = True
        self.clear()

    def _outcome(self, ok: bool, status: int | None = None) -> PingOutcome:
        return PingOutcome(ok=ok, status=status, logs=list(self.logs))

    @contextmanager
    def _running(self) -> Iterator[None]:
        self.pinging = True
        try:
            yield
        finally:
            self.pinging = False

    def _send(self, method: str, url: str, headers: dict[str, str] | None = None) -> tuple[requests.Response, int]:
        start = time.monotonic()
        resp = self.session.request(method, url, headers=headers)
        elapsed = int((time.monotonic() - start) * 1000)
        self.add_log(LogLevel.INFO, f"<- HTTP {resp.status_code} {resp.reason or ''}  ({elapsed} ms)".rstrip())
        return resp, elapsed

    def _network_error(self, exc: requests.RequestException, start: float) -> PingOutcome:
        elapsed = int((time.monotonic() - start) * 1000)
        self.add_log(LogLevel.ERROR, f"✗ Network error ({elapsed} ms){_suffix(str(exc))}")
        return self._outcome(False)

    # ------------------------------------------------------------------
    # Exchanges
    # ------------------------------------------------------------------

    def ping_exchange(self, exchange_id: str, name: str, api_key: str, api_secret: str = "") -> PingOutcome | None:
        """Check connectivity, then whether ``api_key`` is accepted."""
        if self.pinging:
            return None
        self._reset()
        if not api_key:
            self.add_log(LogLevel.WARN, "No API key found. Enter an API key before testing.")
            return self._outcome(False)

        config = build_exchange_ping_config(exchange_id, api_key)
        probe = build_exchange_public_probe(exchange_id)

        with self._running():
            self.add_log(LogLevel.INFO, f"Exchange : {name}")
            self.add_log(LogLevel.INFO, f"API Key  : {mask_key(api_key)}")
            if api_secret:
                self.add_log(LogLevel.INFO, f"Secret   : {mask_key(api_secret)}")

            if probe:
                self.add_log(LogLevel.INFO, "Phase 1  : connectivity check")
                self.add_log(LogLevel.REQUEST, f"-> GET {probe.url}")
                start = time.monotonic()
                try:
                    resp, _ = self._send("GET", probe.url)
                except requests.RequestException as exc:
                    return self._network_error(exc, start)
                if resp.ok:
                    self.add_log(LogLevel.SUCCESS, "✓ Exchange reachable")
                else:
                    self.add_log(
                        LogLevel.WARN, "Connectivity check returned non-OK status, proceeding to auth test anyway."
                    )

            if config is None:
                self.add_log(LogLevel.ERROR, "No ping configuration found for this exchange.")
                return self._outcome(False)

            self.add_log(LogLevel.INFO, "Phase 2  : auth key probe")
            if config.requires_hmac:
                self.add_log(
                    LogLevel.WARN,
                    f"Note: {name} requires HMAC signing. A 4xx \"invalid signature\" response confirms "
                    "the key was received; \"invalid key\" means the key itself is wrong.",
                )
            self.add_log(LogLevel.INFO, f"Endpoint : {config.endpoint}")
            self.add_log(LogLevel.REQUEST, f"-> {config.url}")

            start = time.monotonic()
            try:
                resp, _ = self._send(config.method, config.url, config.headers)
            except requests.RequestException as exc:
                return self._network_error(exc, start)

            detail = exchange_error_message(_json_body(resp))
            status = resp.status_code
            if resp.ok:
                self.add_log(LogLevel.SUCCESS, f"✓ Auth valid, key accepted by {name}")
            elif status in (401, 403):
                self.add_log(LogLevel.ERROR, f"✗ {status} Unauthorized{_suffix(detail)}")
            elif status == 400 and config.requires_hmac:
                self.add_log(
                    LogLevel.WARN,
                    f"⚠ 400 Bad Request{_suffix(detail)} (likely missing HMAC signature, key header was accepted)",
                )
            elif status == 400:
                self.add_log(LogLevel.ERROR, f"✗ 400 Bad Request{_suffix(detail)}")
            else:
                self.add_log(LogLevel.ERROR, f"✗ {status} {resp.reason or ''}{_suffix(detail)}".rstrip())
            return self._outcome(resp.ok, status)

    # ------------------------------------------------------------------
    # IPFS providers
    # ------------------------------------------------------------------

    def ping_ipfs(
        self,
        provider_id: str,
        name: str,
        api_key: str,
        api_secret: str = "",
        needs_secret: bool = False,
    ) -> PingOutcome | None:
        if self.pinging:
            return None
        self._reset()
        if not api_key:
            wanted = "a key and secret" if needs_secret else "a key"
            self.add_log(LogLevel.WARN, f"No API key found. Enter {wanted} before testing.")
            return self._outcome(False)
        if needs_secret and not api_secret:
            self.add_log(LogLevel.WARN, f"{name} requires both an API key and secret. Please fill in both fields.")
            return self._outcome(False)

        config = build_ipfs_ping_config(provider_id, api_key, api_secret)
        with self._running():
            self.add_log(LogLevel.INFO, f"Provider : {name}")
            self.add_log(LogLevel.INFO, f"API Key  : {mask_key(api_key)}")
            if api_secret:
                self.add_log(LogLevel.INFO, f"Secret   : {mask_key(api_secret)}")
            self.add_log(LogLevel.INFO, f"Endpoint : {config.endpoint if config else 'unknown'}")
            self.add_log(LogLevel.REQUEST, f"-> {config.url if config else '-'}")
            if config is None:
                self.add_log(LogLevel.ERROR, "No ping configuration found for this provider.")
                return self._outcome(False)

            start = time.monotonic()
            try:
                resp, _ = self._send(config.method, config.url, config.headers)
            except requests.RequestException as exc:
                return self._network_error(exc, start)

            body = _json_body(resp)
            if resp.ok:
                message = body.get("message") if isinstance(body, dict) else None
                detail = message or f"key accepted by {name}"
                self.add_log(LogLevel.SUCCESS, f"✓ Auth valid, {detail}")
            else:
                detail = provider_error_message(body)
                self.add_log(LogLevel.ERROR, f"✗ {resp.status_code} {resp.reason or ''}{_suffix(detail)}".rstrip())
            return self._outcome(resp.ok, resp.status_code)

    # ------------------------------------------------------------------
    # LLM providers
    # ------------------------------------------------------------------

    def ping_llm(self, provider_id: str, name: str, api_key: str) -> PingOutcome | None:
        if self.pinging:
            return None
        self._reset()
        if not api_key:
            self.add_log(LogLevel.WARN, "No API key found. Enter a key before testing.")
            return self._outcome(False)

        config = build_llm_ping_config(provider_id, api_key)
        with self._running():
            self.add_log(LogLevel.INFO, f"Provider : {name}")
            self.add_log(LogLevel.INFO, f"API Key  : {mask_key(api_key)}")
            if config is None:
                self.add_log(LogLevel.ERROR, "No ping configuration found for this provider.")
                return self._outcome(False)
            self.add_log(LogLevel.INFO, f"Endpoint : {config.endpoint}")
            self.add_log(LogLevel.REQUEST, f"-> {config.url.replace(api_key, mask_key(api_key))}")

            start = time.monotonic()
            try:
                resp, _ = self._send(config.method, config.url, config.headers)
            except requests.RequestException as exc:
                return self._network_error(exc, start)

            body = _json_body(resp)
            if resp.ok:
                models = count_models(body)
                detail = f"{models} models available" if models is not None else f"key accepted by {name}"
                self.add_log(LogLevel.SUCCESS, f"✓ Auth valid, {detail}")
            else:
                detail = provider_error_message(body)
                self.add_log(LogLevel.ERROR, f"✗ {resp.status_code} {resp.reason or ''}{_suffix(detail)}".rstrip())
            return self._outcome(resp.ok, resp.status_code)
