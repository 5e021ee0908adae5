"""Tests for dashboard filtering, search and ordering."""

from dataclasses import replace

import pytest

from commoditydata.dashboard import (
    filter_commodities,
    market_summary,
    matches_query,
    sort_for_display,
)
from commoditydata.models.commodity import CommodityCategory
from commoditydata.providers.mock import MOCK_COMMODITIES


@pytest.fixture
def catalog():
    return list(MOCK_COMMODITIES)


class TestSearch:
    def test_empty_query_matches(self, catalog):
        assert all(matches_query(c, "") for c in catalog)

    def test_name_case_insensitive(self, catalog):
        assert [c.id for c in filter_commodities(catalog, query="CRUDE")] == ["WTI", "BRENT"]

    def test_symbol(self, catalog):
        assert [c.id for c in filter_commodities(catalog, query="xag")] == ["SILVER"]

    def test_korean_name(self, catalog):
        assert [c.id for c in filter_commodities(catalog, query="원유")] == ["WTI"]

    def test_no_match(self, catalog):
        assert filter_commodities(catalog, query="zzz") == []


class TestCategory:
    def test_all(self, catalog):
        assert len(filter_commodities(catalog, "ALL")) == len(catalog)
        assert len(filter_commodities(catalog, None)) == len(catalog)

    def test_enum_and_string(self, catalog):
        by_enum = filter_commodities(catalog, CommodityCategory.AGRICULTURE)
        by_str = filter_commodities(catalog, "AGRICULTURE")
        assert by_enum == by_str
        assert {c.id for c in by_enum} >= {"WHEAT", "CORN", "COFFEE"}

    def test_combined(self, catalog):
        result = filter_commodities(catalog, CommodityCategory.ENERGY, query="oil")
        assert {c.id for c in result} == {"WTI", "BRENT", "HEATOIL"}


class TestOrdering:
    def test_biggest_movers_first(self, catalog):
        ordered = sort_for_display(catalog)
        moves = [abs(c.change_percent) for c in ordered]
        assert moves == sorted(moves, reverse=True)

    def test_watchlist_first(self, catalog):
        ordered = sort_for_display(catalog, watchlist=["CATTLE", "SILVER"])
        assert {c.id for c in ordered[:2]} == {"CATTLE", "SILVER"}
        assert ordered[0].id == "SILVER"  # larger move among watched

    def test_does_not_mutate(self, catalog):
        before = list(catalog)
        sort_for_display(catalog, ["GOLD"])
        assert catalog == before


class TestSummary:
    def test_counts(self, catalog):
        flat = replace(catalog[0], change_percent=0.0)
        summary = market_summary([catalog[0], catalog[1], flat])
        assert summary.total == 3
        assert summary.gainers == 1
        assert summary.losers == 1
