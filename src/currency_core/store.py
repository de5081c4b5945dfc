"""JSON cache for fetched market data.

Files live in two tiers under the data directory:
  - reference/: slow-changing lists (coin ids, exchange metadata snapshots)
  - live/: prices and tickers, minutes-long TTL

Each file is a ``{"meta": {...}, "data": ...}`` envelope. ``meta`` records
the source, when it was fetched and ``valid_until`` so flows can skip a
fetch while the cached copy is still fresh.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

from loguru import logger


class DataStore:
    """Reads and writes enveloped JSON files below ``base_dir``."""

    def __init__(self, base_dir: Path) -> None:
        self.base = Path(base_dir)
        self.reference = self.base / "reference"
        self.live = self.base / "live"

    def __repr__(self) -> str:
        return f"DataStore({str(self.base)!r})"

    def _resolve(self, path: Path) -> Path:
        full = path if path.is_absolute() else self.base / path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            raise ValueError(f"Path escapes store base directory: {path}") from None
        return full

    def _load(self, path: Path) -> dict[str, Any] | None:
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            envelope: dict[str, Any] = json.load(f)
        return envelope

    def read(self, path: Path) -> Any:
        """Return the ``data`` payload, or None if the file is missing."""
        envelope = self._load(path)
        if envelope is None:
            return None
        return envelope.get("data", envelope)

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        return self._load(path)

    def write(
        self,
        path: Path,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        *,
        ttl: timedelta | None = None,
        **params: Any,
    ) -> Path:
        """Write ``data`` inside a metadata envelope.

        Args:
            path: Path relative to the store root, e.g. ``live/ticker.json``.
            data: JSON-serialisable payload.
            source: Where the data came from, e.g. ``"coingecko"``.
            valid_until: Absolute expiry. Takes precedence over ``ttl``.
            ttl: Expiry relative to now.
            **params: Extra fields copied into ``meta`` (query args etc.).

        Returns:
            The path written.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        now = datetime.now(UTC)
        if valid_until is None and ttl is not None:
            valid_until = now + ttl

        meta: dict[str, Any] = {"source": source, "fetched_at": now.isoformat()}
        if valid_until is not None:
            meta["valid_until"] = valid_until.isoformat()
        meta.update(params)

        with full.open("w") as f:
            json.dump({"meta": meta, "data": data}, f, indent=2)
        logger.debug("Wrote {} ({})", full, source)
        return full

    def is_fresh(self, path: Path) -> bool:
        """True if the file exists and its ``valid_until`` is in the future.

        Files without ``valid_until`` never count as fresh.
        """
        envelope = self._load(path)
        if envelope is None:
            return False
        valid_until = envelope.get("meta", {}).get("valid_until")
        if valid_until is None:
            return False
        expiry = datetime.fromisoformat(valid_until)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return datetime.now(UTC) < expiry
