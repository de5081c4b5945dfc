"""Tests for the service catalogue registry and its data."""

from __future__ import annotations

import pytest

from currency_core import catalog
from currency_core.schemas import Category, ServiceInfo


class TestRegistry:
    def test_every_category_populated(self) -> None:
        for category in Category:
            assert catalog.list_services(category), category

    def test_get_service_case_insensitive(self) -> None:
        info = catalog.get_service(Category.EXCHANGE, "Binance")
        assert info is not None
        assert info.name == "Binance"

    def test_get_service_accepts_category_string(self) -> None:
        assert catalog.get_service("oracle", "chainlink") is not None

    def test_get_service_unknown(self) -> None:
        assert catalog.get_service(Category.DEX, "not-a-dex") is None

    def test_unknown_category_raises(self) -> None:
        with pytest.raises(ValueError):
            catalog.get_service("casino", "x")

    def test_duplicate_registration_rejected(self) -> None:
        existing = catalog.get_service(Category.EXCHANGE, "kraken")
        assert existing is not None
        with pytest.raises(ValueError, match="duplicate"):
            catalog.register(existing)

    def test_list_sorted_by_name(self) -> None:
        names = [i.name.lower() for i in catalog.list_services(Category.ORACLE)]
        assert names == sorted(names)


class TestQueries:
    def test_services_for_ticker(self) -> None:
        sol = catalog.services_for_ticker("sol")
        ids = {i.id for i in sol}
        assert {"jupiter", "jito", "marinade"} <= ids
        assert all(i.supports("SOL") for i in sol)

    def test_search_matches_name(self) -> None:
        assert any(i.id == "coingecko" for i in catalog.search("gecko"))

    def test_search_blank(self) -> None:
        assert catalog.search("  ") == []


class TestCatalogueData:
    """Every entry keeps the descriptive fields a front end relies on."""

    @pytest.mark.parametrize("info", catalog.list_services(), ids=lambda i: f"{i.category}-{i.id}")
    def test_descriptive_fields(self, info: ServiceInfo) -> None:
        assert isinstance(info.name, str) and info.name
        assert info.website.startswith("https://")
        assert info.id == info.id.lower()

    def test_llm_providers_have_models_endpoint(self) -> None:
        for info in catalog.list_services(Category.LLM):
            assert info.api_base_url
            assert info.endpoints and "models" in info.endpoints[0].path

    def test_ipfs_pinata_endpoints(self) -> None:
        pinata = catalog.get_service(Category.IPFS, "pinata")
        assert pinata is not None
        paths = {ep.path for ep in pinata.endpoints}
        assert "/pinning/pinFileToIPFS" in paths


class TestCurrencies:
    """Per-coin reference records."""

    def test_records_registered(self) -> None:
        assert [c.ticker for c in catalog.list_currencies()] == ["BCH", "STX", "TRX", "XTZ"]

    def test_get_currency_case_insensitive(self) -> None:
        info = catalog.get_currency(" xtz ")
        assert info is not None
        assert info.name == "Tezos"
        assert info.technical.key_curve == "Ed25519"

    def test_get_currency_unknown(self) -> None:
        assert catalog.get_currency("DOGE") is None

    def test_duplicate_ticker_rejected(self) -> None:
        with pytest.raises(ValueError, match="duplicate currency"):
            catalog.register_currency(catalog.get_currency("STX"))

    def test_every_record_has_venues_and_ids(self) -> None:
        for info in catalog.list_currencies():
            assert info.dexs, info.ticker
            assert info.coingecko_id, info.ticker
            assert info.explorer_url, info.ticker
            assert info.staking_providers or info.mining_pools, info.ticker

    def test_naming_services_match_resolvers(self) -> None:
        assert "Tezos Domains" in catalog.get_currency("XTZ").technical.naming_service
        assert "BNS" in catalog.get_currency("STX").technical.naming_service
        assert catalog.get_currency("TRX").technical.naming_service is None

    def test_proof_of_work_coin_lists_mining_pools(self) -> None:
        bch = catalog.get_currency("BCH")
        assert bch.technical.consensus == "Proof of Work"
        assert any(pool.name == "ViaBTC" for pool in bch.mining_pools)
        assert bch.staking_providers == ()

    def test_address_url(self) -> None:
        tron = catalog.get_currency("TRX")
        assert tron.address_url("TXyz") == "https://tronscan.org/#/address/TXyz"
