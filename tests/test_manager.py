"""Tests for DashboardManager: provider fallback, chart cache, validation."""

import pytest

from commoditydata.cache import MemoryCache, NoCache
from commoditydata.config import CatalogProviderType, DashboardConfig
from commoditydata.errors import CommodityDataError, CommodityDataErrorCode
from commoditydata.manager import DashboardManager
from commoditydata.models.chart import ChartData
from commoditydata.models.commodity import Commodity, CommodityCategory
from commoditydata.models.time_range import TimeRange
from commoditydata.preferences import Currency, JsonFileStore


def _make_manager(*, cache_backend: str = "memory", validate: bool = True) -> DashboardManager:
    config = DashboardConfig(
        providers=[CatalogProviderType.MOCK],
        cache_backend=cache_backend,
        validate=validate,
        catalog_seed=1,
    )
    return DashboardManager(config)


class TestManagerSetup:
    def test_memory_cache(self):
        assert isinstance(_make_manager().cache, MemoryCache)

    def test_no_cache(self):
        assert isinstance(_make_manager(cache_backend="none").cache, NoCache)

    def test_json_storage(self, tmp_path):
        config = DashboardConfig(
            storage_backend="json",
            storage_path=str(tmp_path / "prefs.json"),
        )
        mgr = DashboardManager(config)
        assert isinstance(mgr.store, JsonFileStore)
        mgr.watchlist.add("GOLD")
        assert "GOLD" in DashboardManager(config).watchlist


class TestManagerCatalog:
    def test_list_all(self):
        mgr = _make_manager()
        assert len(mgr.list_commodities()) == 18

    def test_category_filter(self):
        mgr = _make_manager()
        energy = mgr.list_commodities(category=CommodityCategory.ENERGY)
        assert energy
        assert all(c.category is CommodityCategory.ENERGY for c in energy)

    def test_search(self):
        mgr = _make_manager()
        assert [c.id for c in mgr.list_commodities(query="gold")] == ["GOLD"]
        assert [c.id for c in mgr.list_commodities(query="구리")] == ["COPPER"]

    def test_watchlist_first(self):
        mgr = _make_manager()
        mgr.watchlist.add("CATTLE")
        assert mgr.list_commodities()[0].id == "CATTLE"

    def test_get_commodity(self):
        mgr = _make_manager()
        gold = mgr.get_commodity("gold")
        assert gold.id == "GOLD"
        assert gold.current_price == 2035.40

    def test_get_price(self):
        assert _make_manager().get_price("XAG") == 23.15

    def test_not_found(self):
        mgr = _make_manager()
        with pytest.raises(CommodityDataError) as exc_info:
            mgr.get_commodity("UNOBTAINIUM")
        assert exc_info.value.code == CommodityDataErrorCode.NOT_FOUND
        assert not exc_info.value.retryable

    def test_market_summary(self):
        summary = _make_manager().market_summary()
        assert summary.total == 18
        assert summary.gainers + summary.losers <= summary.total
        assert summary.gainers > 0
        assert summary.losers > 0


class TestManagerChart:
    def test_get_chart(self):
        chart = _make_manager().get_chart("GOLD", "1M")
        assert isinstance(chart, ChartData)
        assert len(chart) == 30
        assert chart.time_range is TimeRange.ONE_MONTH
        assert chart.bars[-1].bar.close == 2035.40

    def test_cache_hit(self):
        mgr = _make_manager()
        first = mgr.get_chart("GOLD", TimeRange.ONE_WEEK)
        assert mgr.get_chart("GOLD", "1W") is first

    def test_no_cache_rebuilds_identically(self):
        mgr = _make_manager(cache_backend="none")
        first = mgr.get_chart("WTI", "3M")
        second = mgr.get_chart("WTI", "3M")
        assert first is not second
        assert first == second

    def test_clear_cache(self):
        mgr = _make_manager()
        first = mgr.get_chart("GOLD", "1M")
        mgr.clear_cache("GOLD")
        assert mgr.get_chart("GOLD", "1M") is not first

    @pytest.mark.parametrize("time_range", list(TimeRange))
    def test_every_range_validates(self, time_range):
        chart = _make_manager().get_chart("NATGAS", time_range)
        assert len(chart) == time_range.bar_count

    def test_validation_failure(self):
        mgr = _make_manager(cache_backend="none")
        mgr.providers[0].set_commodities([
            Commodity("BAD", "BAD", "Bad", "불량", "ENERGY", float("nan")),
        ])
        with pytest.raises(CommodityDataError) as exc_info:
            mgr.get_chart("BAD", "1M")
        assert exc_info.value.code == CommodityDataErrorCode.VALIDATION_FAILED

    def test_cached_chart_cannot_be_mutated(self):
        mgr = _make_manager()
        chart = mgr.get_chart("GOLD", "1M")
        original = chart.bars[25].sma[20]
        with pytest.raises(TypeError):
            chart.bars[25].sma[20] = -1.0
        with pytest.raises(TypeError):
            chart.bars[25].ema[12] = -1.0
        assert mgr.get_chart("GOLD", "1M").bars[25].sma[20] == original

    def test_sub_cent_commodity(self):
        mgr = _make_manager(cache_backend="none")
        mgr.providers[0].set_commodities([
            Commodity("DUST", "DST", "Dust", "먼지", "ENERGY", 0.004),
        ])
        chart = mgr.get_chart("DUST", "1M")
        assert len(chart) == 30
        assert all(b.low >= 0.01 for b in chart.raw_bars)

    def test_chart_frame(self):
        df = _make_manager().get_chart_frame("GOLD", "1M")
        assert len(df) == 30
        assert "sma20" in df.columns


class TestManagerFallback:
    def _two_providers(self) -> DashboardManager:
        config = DashboardConfig(
            providers=[CatalogProviderType.MOCK, CatalogProviderType.MOCK],
            cache_backend="none",
        )
        return DashboardManager(config)

    def test_fallback_on_retryable_error(self):
        mgr = self._two_providers()

        def failing(*args, **kwargs):
            raise CommodityDataError("timeout", CommodityDataErrorCode.TIMEOUT, retryable=True)

        mgr.providers[0].get_commodity = failing  # type: ignore[method-assign]
        assert mgr.get_commodity("GOLD").id == "GOLD"

    def test_non_retryable_raises(self):
        mgr = self._two_providers()

        def failing(*args, **kwargs):
            raise CommodityDataError("boom", CommodityDataErrorCode.PROVIDER_ERROR)

        mgr.providers[0].list_commodities = failing  # type: ignore[method-assign]
        with pytest.raises(CommodityDataError, match="boom"):
            mgr.list_commodities()

    def test_all_fail(self):
        mgr = self._two_providers()

        def failing(*args, **kwargs):
            raise CommodityDataError("down", CommodityDataErrorCode.TIMEOUT, retryable=True)

        for p in mgr.providers:
            p.list_commodities = failing  # type: ignore[method-assign]
        with pytest.raises(CommodityDataError, match="down"):
            mgr.list_commodities()

    def test_no_capable_provider(self):
        mgr = self._two_providers()
        for p in mgr.providers:
            p.capabilities = lambda: {"catalog"}  # type: ignore[method-assign]
        with pytest.raises(CommodityDataError) as exc_info:
            mgr.get_price("XAU")
        assert exc_info.value.code == CommodityDataErrorCode.NO_DATA


class TestManagerCurrency:
    def test_toggle_and_convert(self):
        mgr = _make_manager()
        assert mgr.currency.currency is Currency.USD
        mgr.currency.toggle()
        assert mgr.currency.convert(2.0) == 2900.0
