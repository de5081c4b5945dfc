"""Exception hierarchy.

Every error raised by a wrapper or resolver derives from
``CurrencyCoreError`` so callers can catch one type and log it.
"""

from __future__ import annotations


class CurrencyCoreError(Exception):
    """Base class for all currency-core errors.

    Attributes:
        message: Human-readable description.
        context: Extra key/value details appended to ``str(err)``.
    """

    def __init__(self, message: str, *, context: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, object] = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{ctx}]"
        return self.message


class ApiError(CurrencyCoreError):
    """A third-party API returned a non-2xx status or an error payload.

    ``status`` is None when the request never got a response (DNS failure,
    timeout, connection reset).
    """

    def __init__(
        self,
        service: str,
        message: str,
        *,
        status: int | None = None,
        context: dict[str, object] | None = None,
    ) -> None:
        self.service = service
        self.status = status
        prefix = f"{service} API error"
        if status is not None:
            prefix = f"{prefix} ({status})"
        super().__init__(f"{prefix}: {message}", context=context)
        self.detail = message


class AuthenticationRequired(CurrencyCoreError):
    """A signed endpoint was called without the credentials it needs."""


class DomainResolutionError(CurrencyCoreError):
    """A forward domain lookup failed."""


class MintError(CurrencyCoreError):
    """A mint transaction was mined but reverted."""
