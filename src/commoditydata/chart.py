"""Chart assembly: simulation parameters, enrichment and window stats."""

from __future__ import annotations

import logging
import zlib
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from commoditydata.indicators import enrich
from commoditydata.models.bar import Bar
from commoditydata.models.chart import ChartData, WindowStats
from commoditydata.models.commodity import Commodity, CommodityCategory
from commoditydata.models.time_range import TimeRange
from commoditydata.simulator import generate

logger = logging.getLogger(__name__)

DEFAULT_VOLATILITY = 0.02

CATEGORY_VOLATILITY: dict[str, float] = {
    "PRECIOUS_METALS": 0.012,
    "METALS": 0.012,
    "INDUSTRIAL_METALS": 0.016,
    "ENERGY": 0.022,
    "AGRICULTURE": 0.015,
}


def derive_seed(commodity_id: str) -> int:
    """Stable integer seed for a commodity id (CRC-32 of its UTF-8 bytes)."""
    return zlib.crc32(commodity_id.encode("utf-8"))


def volatility_for_category(category: CommodityCategory | str) -> float:
    """Base per-period volatility for a category; unknown categories get the default."""
    key = category.value if isinstance(category, CommodityCategory) else str(category)
    return CATEGORY_VOLATILITY.get(key.upper(), DEFAULT_VOLATILITY)


@dataclass(frozen=True)
class SimulationParams:
    """Inputs to the path simulator for one (commodity, range) pair."""

    seed: int
    period_count: int
    base_price: float
    base_volatility: float


def simulation_params(
    commodity: Commodity,
    time_range: TimeRange | str,
) -> SimulationParams:
    tr = TimeRange.parse(time_range)
    return SimulationParams(
        seed=derive_seed(commodity.id),
        period_count=tr.bar_count,
        base_price=commodity.current_price,
        base_volatility=volatility_for_category(commodity.category),
    )


def window_stats(bars: Sequence[Bar]) -> WindowStats | None:
    """High, low, mean close and total volume over the window; None when empty."""
    if not bars:
        return None
    return WindowStats(
        high=max(b.high for b in bars),
        low=min(b.low for b in bars),
        average=sum(b.close for b in bars) / len(bars),
        volume=sum(b.volume for b in bars),
    )


def build_chart(
    commodity: Commodity,
    time_range: TimeRange | str,
    *,
    today: date | None = None,
    sma_periods: Sequence[int] = (20,),
    ema_periods: Sequence[int] = (12, 26),
) -> ChartData:
    """Simulate, enrich and summarise a detail chart from scratch."""
    tr = TimeRange.parse(time_range)
    params = simulation_params(commodity, tr)
    logger.debug(
        "Simulating %s %s: seed=%d bars=%d vol=%.4f",
        commodity.id, tr.value, params.seed, params.period_count, params.base_volatility,
    )

    bars = generate(
        params.seed,
        params.period_count,
        params.base_price,
        params.base_volatility,
        today=today,
    )
    return ChartData(
        commodity_id=commodity.id,
        time_range=tr,
        bars=tuple(enrich(bars, sma_periods, ema_periods)),
        stats=window_stats(bars),
    )
