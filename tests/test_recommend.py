# Copyright (c) 2026 Hairmatch
# SPDX-License-Identifier: MIT

"""Tests for the estimate → recommendation pipeline."""

import importlib

import pytest

from hairmatch import recommend
from hairmatch.catalog import CatalogIndex
from hairmatch.match import MatchConfig, rank
from hairmatch.schema import HairEstimate

# The package re-exports the function under the module's name
recommend_module = importlib.import_module("hairmatch.match.recommend")


@pytest.fixture
def index():
    return CatalogIndex.from_raw({"products": [
        {"sku": "IB-1", "name": "Jet Black", "hex": "#0a0a0a", "type": "braid"},
        {"sku": "IB-1B", "name": "Off Black", "hex": "#1c1915", "type": "braid"},
        {"sku": "IB-2", "name": "Darkest Brown", "hex": "#2b2019", "type": "braid"},
        {"sku": "IB-4", "name": "Dark Chocolate", "hex": "#3b2a20", "type": "braid"},
        {"sku": "IB-27", "name": "Honey Blonde", "hex": "#c9955b", "type": "wig"},
        {"sku": "IB-613", "name": "Platinum", "lab": {"L": 90, "a": 0, "b": 14}, "type": "wig"},
    ]})


class TestRecommend:

    def test_raw_estimate(self, index):
        rec = recommend({"tone": "dark_brown", "hair_hex": "#3B2A20"}, index)
        assert rec.tone == "dark_brown"
        assert rec.hair_hex == "#3B2A20"
        assert rec.target_resolved
        assert rec.matches[0].sku == "IB-4"
        assert len(rec.matches) == 5

    def test_matches_equal_rank(self, index):
        rec = recommend(HairEstimate(tone="black", hair_hex="#151515"), index)
        assert list(rec.matches) == rank("#151515", index, 5)

    def test_hair_hex_converted_once(self, index, monkeypatch):
        calls = []
        real = recommend_module.hex_to_lab

        def counting(value):
            calls.append(value)
            return real(value)

        monkeypatch.setattr(recommend_module, "hex_to_lab", counting)
        rec = recommend({"hair_hex": "#3B2A20"}, index)
        assert calls == ["#3B2A20"]
        assert rec.matches[0].sku == "IB-4"

    def test_overflowing_catalog_color_skipped(self):
        index = CatalogIndex.from_raw([{"sku": "big", "lab": [1e200, 0, 0]}, {"sku": "ok", "hex": "#000"}])
        rec = recommend({"hair_hex": "#101010"}, index)
        assert rec.target_resolved
        assert [m.sku for m in rec.matches] == ["ok"]

    def test_camel_case_estimate(self, index):
        rec = recommend({"hairHex": "#c9955b"}, index)
        assert rec.matches[0].sku == "IB-27"
        assert rec.tone is None

    def test_config_top_n(self, index):
        rec = recommend({"hair_hex": "#000"}, index, MatchConfig(top_n=2))
        assert [m.sku for m in rec.matches] == ["IB-1", "IB-1B"]

    def test_product_type_filter(self, index):
        rec = recommend({"hair_hex": "#000"}, index, product_type="wig")
        assert [m.sku for m in rec.matches] == ["IB-27", "IB-613"]


class TestUnresolvedOutcomes:
    """``target_resolved`` separates a bad color from an empty result."""

    def test_missing_hex(self, index):
        rec = recommend({"tone": "black"}, index)
        assert rec.tone == "black"
        assert rec.hair_hex is None
        assert not rec.target_resolved
        assert rec.matches == ()

    def test_malformed_hex(self, index):
        rec = recommend({"hair_hex": "not-a-color"}, index)
        assert rec.hair_hex == "not-a-color"
        assert not rec.target_resolved
        assert rec.matches == ()

    def test_unparsed_estimator_reply(self, index):
        rec = recommend({"raw": "Sorry, I cannot see any hair."}, index)
        assert not rec.target_resolved
        assert not rec.has_matches

    def test_valid_color_empty_catalog(self):
        rec = recommend({"hair_hex": "#3B2A20"}, CatalogIndex())
        assert rec.target_resolved
        assert rec.matches == ()

    def test_valid_color_unmatchable_catalog(self):
        rec = recommend({"hair_hex": "#3B2A20"}, CatalogIndex.from_raw([{"sku": "x"}]))
        assert rec.target_resolved
        assert not rec.has_matches
