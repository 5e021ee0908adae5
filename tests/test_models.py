"""Tests for data models."""

from datetime import date

import pytest

from commoditydata.models.bar import Bar
from commoditydata.models.chart import ChartData, EnrichedBar
from commoditydata.models.commodity import Commodity, CommodityCategory
from commoditydata.models.time_range import BAR_COUNTS, TimeRange


class TestBar:
    def test_create(self):
        bar = Bar(date=date(2024, 1, 2), open=10.0, high=11.0, low=9.0, close=10.5, volume=100)
        assert bar.open == 10.0
        assert bar.range == 2.0

    def test_fill(self):
        assert Bar(date(2024, 1, 2), 10.0, 11.0, 9.0, 10.5, 1).fill == "up"
        assert Bar(date(2024, 1, 2), 10.0, 11.0, 9.0, 10.0, 1).fill == "up"
        assert Bar(date(2024, 1, 2), 10.0, 11.0, 9.0, 9.5, 1).fill == "down"

    def test_frozen(self):
        bar = Bar(date(2024, 1, 2), 10.0, 11.0, 9.0, 10.5, 1)
        with pytest.raises(AttributeError):
            bar.close = 1.0  # type: ignore[misc]


class TestCommodity:
    def test_category_key(self):
        c = Commodity("GOLD", "XAU", "Gold", "금", CommodityCategory.PRECIOUS_METALS, 2000.0)
        assert c.category_key == "PRECIOUS_METALS"
        raw = Commodity("GOLD", "XAU", "Gold", "금", "METALS", 2000.0)
        assert raw.category_key == "METALS"

    def test_defaults(self):
        c = Commodity("GOLD", "XAU", "Gold", "금", "METALS", 2000.0)
        assert c.currency == "USD"
        assert c.subcategory is None


class TestTimeRange:
    def test_parse(self):
        assert TimeRange.parse("1m") is TimeRange.ONE_MONTH
        assert TimeRange.parse(TimeRange.ALL) is TimeRange.ALL

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            TimeRange.parse("2D")

    def test_every_range_has_a_count(self):
        assert set(BAR_COUNTS) == set(TimeRange)
        assert TimeRange.ONE_YEAR.bar_count == 250


class TestEnrichedBar:
    def test_indicator_maps_are_read_only(self):
        bar = Bar(date(2024, 1, 2), 10.0, 11.0, 9.0, 10.5, 7)
        source = {20: 10.1}
        eb = EnrichedBar(bar=bar, sma=source)
        source[20] = 0.0
        assert eb.sma[20] == 10.1
        with pytest.raises(TypeError):
            eb.sma[50] = 1.0  # type: ignore[index]
        with pytest.raises(TypeError):
            eb.ema[12] = 1.0  # type: ignore[index]

    def test_to_dict(self):
        bar = Bar(date(2024, 1, 2), 10.0, 11.0, 9.0, 10.5, 7)
        eb = EnrichedBar(bar=bar, sma={20: 10.1}, ema={12: None}, rsi=55.5, atr=1.2)
        record = eb.to_dict()
        assert record["close"] == 10.5
        assert record["fill"] == "up"
        assert record["sma20"] == 10.1
        assert record["ema12"] is None
        assert record["rsi"] == 55.5
        assert record["macdHistogram"] is None
        assert record["atr"] == 1.2

    def test_chart_raw_bars(self, sample_bars):
        chart = ChartData("X", TimeRange.ONE_WEEK, tuple(EnrichedBar(bar=b) for b in sample_bars))
        assert chart.raw_bars == sample_bars
        assert len(chart) == 5
