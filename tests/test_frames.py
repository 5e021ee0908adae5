"""Tests for DataFrame export."""

import math

import pandas as pd

from commoditydata.chart import build_chart
from commoditydata.frames import chart_to_frame
from commoditydata.models.chart import ChartData
from commoditydata.models.time_range import TimeRange


class TestChartToFrame:
    def test_shape(self, sample_commodity, today):
        chart = build_chart(sample_commodity, "3M", today=today)
        df = chart_to_frame(chart)
        assert len(df) == 90
        assert isinstance(df.index, pd.DatetimeIndex)
        for col in ("open", "high", "low", "close", "volume", "fill",
                    "sma20", "ema12", "ema26", "rsi", "macd", "macdSignal",
                    "macdHistogram", "bbUpper", "bbMiddle", "bbLower", "atr"):
            assert col in df.columns

    def test_absent_values_are_nan(self, sample_commodity, today):
        df = chart_to_frame(build_chart(sample_commodity, "1M", today=today))
        assert math.isnan(df["sma20"].iloc[0])
        assert not math.isnan(df["sma20"].iloc[-1])
        assert df["close"].iloc[-1] == 2000.0

    def test_empty(self):
        df = chart_to_frame(ChartData("X", TimeRange.ONE_DAY, ()))
        assert df.empty
