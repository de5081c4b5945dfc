"""Records shared by the ping console and its config builders."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class LogLevel(StrEnum):
    INFO = "info"
    REQUEST = "request"
    SUCCESS = "success"
    ERROR = "error"
    WARN = "warn"


@dataclass(frozen=True)
class LogEntry:
    """One console line. ``ts`` is wall-clock ``HH:MM:SS``."""

    id: int
    ts: str
    level: LogLevel
    msg: str


@dataclass(frozen=True)
class PingConfig:
    """The request that checks whether a key is accepted."""

    url: str
    method: str
    headers: dict[str, str]
    label: str
    endpoint: str
    requires_hmac: bool = False


@dataclass(frozen=True)
class PublicProbe:
    """An unauthenticated GET used as a connectivity check."""

    url: str
    endpoint: str


@dataclass
class PingOutcome:
    ok: bool
    status: int | None
    logs: list[LogEntry] = field(default_factory=list)


def mask_key(key: str) -> str:
    """Hide all but the last four characters of a credential."""
    if len(key) <= 8:
        return "••••••••"
    return "••••" + key[-4:]
