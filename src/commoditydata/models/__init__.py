"""Commodity data models."""

from commoditydata.models.bar import Bar
from commoditydata.models.chart import ChartData, EnrichedBar, WindowStats
from commoditydata.models.commodity import CATEGORY_LABELS, Commodity, CommodityCategory
from commoditydata.models.time_range import BAR_COUNTS, TimeRange

__all__ = [
    "Bar",
    "EnrichedBar",
    "WindowStats",
    "ChartData",
    "Commodity",
    "CommodityCategory",
    "CATEGORY_LABELS",
    "TimeRange",
    "BAR_COUNTS",
]
