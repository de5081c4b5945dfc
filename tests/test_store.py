"""Tests for the DataStore module."""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from currency_core.store import DataStore


class TestDataStoreInit:
    def test_creates_tier_paths(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.base == tmp_path
        assert store.reference == tmp_path / "reference"
        assert store.live == tmp_path / "live"


class TestDataStoreWrite:
    """Test writing data with metadata envelopes."""

    def test_write_envelope_format(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        valid = datetime(2026, 3, 1, tzinfo=UTC)
        path = store.write(Path("live/ticker.json"), [{"id": "bitcoin"}], source="coingecko", valid_until=valid)

        assert path == tmp_path / "live" / "ticker.json"
        data = json.loads(path.read_text())
        assert data["meta"]["source"] == "coingecko"
        assert "fetched_at" in data["meta"]
        assert data["meta"]["valid_until"] == valid.isoformat()
        assert data["data"] == [{"id": "bitcoin"}]

    def test_ttl_sets_valid_until(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        before = datetime.now(UTC)
        path = store.write(Path("live/ticker.json"), [], source="coingecko", ttl=timedelta(minutes=5))
        meta = json.loads(path.read_text())["meta"]
        expiry = datetime.fromisoformat(meta["valid_until"])
        assert before + timedelta(minutes=5) <= expiry <= datetime.now(UTC) + timedelta(minutes=5)

    def test_valid_until_wins_over_ttl(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        valid = datetime(2030, 1, 1, tzinfo=UTC)
        path = store.write(Path("live/x.json"), {}, source="t", valid_until=valid, ttl=timedelta(minutes=5))
        assert json.loads(path.read_text())["meta"]["valid_until"] == valid.isoformat()

    def test_write_extra_params(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        path = store.write(Path("live/test.json"), {}, source="test", vs_currency="usd")
        assert json.loads(path.read_text())["meta"]["vs_currency"] == "usd"

    def test_write_no_valid_until(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        path = store.write(Path("reference/coins.json"), {}, source="test")
        assert "valid_until" not in json.loads(path.read_text())["meta"]


class TestDataStoreRead:
    def test_read_returns_data_payload(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("live/test.json"), {"key": "value"}, source="test")
        assert store.read(Path("live/test.json")) == {"key": "value"}

    def test_read_missing_file(self, tmp_path: Path) -> None:
        assert DataStore(tmp_path).read(Path("nonexistent.json")) is None

    def test_read_raw_returns_full_envelope(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("live/test.json"), {"key": "value"}, source="test")
        result = store.read_raw(Path("live/test.json"))
        assert result is not None
        assert result["meta"]["source"] == "test"
        assert result["data"] == {"key": "value"}

    def test_path_escape_rejected(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path / "data")
        with pytest.raises(ValueError, match="escapes"):
            store.read(Path("../secrets.json"))
        with pytest.raises(ValueError, match="escapes"):
            store.write(Path("/etc/passwd"), {}, source="test")


class TestDataStoreIsFresh:
    def test_missing_file_not_fresh(self, tmp_path: Path) -> None:
        assert DataStore(tmp_path).is_fresh(Path("nonexistent.json")) is False

    def test_expired_file_not_fresh(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        past = datetime.now(UTC) - timedelta(hours=1)
        store.write(Path("live/test.json"), {}, source="test", valid_until=past)
        assert store.is_fresh(Path("live/test.json")) is False

    def test_future_valid_until_is_fresh(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("live/test.json"), {}, source="test", ttl=timedelta(minutes=5))
        assert store.is_fresh(Path("live/test.json")) is True

    def test_no_valid_until_not_fresh(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("reference/test.json"), {}, source="test")
        assert store.is_fresh(Path("reference/test.json")) is False

    def test_naive_timestamp_treated_as_utc(self, tmp_path: Path) -> None:
        path = tmp_path / "live" / "naive.json"
        path.parent.mkdir(parents=True)
        future = (datetime.now(UTC) + timedelta(hours=1)).replace(tzinfo=None)
        path.write_text(json.dumps({"meta": {"valid_until": future.isoformat()}, "data": {}}))
        assert DataStore(tmp_path).is_fresh(Path("live/naive.json")) is True
