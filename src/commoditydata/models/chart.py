"""Enriched bars and chart payload."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from commoditydata.models.bar import Bar
from commoditydata.models.time_range import TimeRange


@dataclass(frozen=True)
class EnrichedBar:
    """A bar with its index-aligned indicator values attached.

    ``None`` marks an indicator still in its warm-up period. The per-period
    ``sma`` and ``ema`` maps are read-only views.
    """

    bar: Bar
    sma: Mapping[int, float | None] = field(default_factory=dict)
    ema: Mapping[int, float | None] = field(default_factory=dict)
    rsi: float | None = None
    macd: float | None = None
    macd_signal: float | None = None
    macd_histogram: float | None = None
    bb_upper: float | None = None
    bb_middle: float | None = None
    bb_lower: float | None = None
    atr: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "sma", MappingProxyType(dict(self.sma)))
        object.__setattr__(self, "ema", MappingProxyType(dict(self.ema)))

    def to_dict(self) -> dict[str, Any]:
        """Flatten into the record shape a chart renderer consumes."""
        b = self.bar
        record: dict[str, Any] = {
            "date": b.date,
            "open": b.open,
            "high": b.high,
            "low": b.low,
            "close": b.close,
            "volume": b.volume,
            "fill": b.fill,
        }
        for period, value in self.sma.items():
            record[f"sma{period}"] = value
        for period, value in self.ema.items():
            record[f"ema{period}"] = value
        record.update(
            rsi=self.rsi,
            macd=self.macd,
            macdSignal=self.macd_signal,
            macdHistogram=self.macd_histogram,
            bbUpper=self.bb_upper,
            bbMiddle=self.bb_middle,
            bbLower=self.bb_lower,
            atr=self.atr,
        )
        return record


@dataclass(frozen=True)
class WindowStats:
    """Aggregates over the visible chart window."""

    high: float
    low: float
    average: float
    volume: int


@dataclass(frozen=True)
class ChartData:
    """Everything the detail view needs for one (commodity, range) pair."""

    commodity_id: str
    time_range: TimeRange
    bars: tuple[EnrichedBar, ...]
    stats: WindowStats | None = None

    @property
    def raw_bars(self) -> list[Bar]:
        return [eb.bar for eb in self.bars]

    def __len__(self) -> int:
        return len(self.bars)
