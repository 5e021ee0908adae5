"""Catalog filtering, search and ordering for the dashboard grid."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import dataclass

from commoditydata.models.commodity import Commodity, CommodityCategory

ALL_CATEGORIES = "ALL"


@dataclass(frozen=True)
class MarketSummary:
    total: int
    gainers: int
    losers: int


def matches_query(commodity: Commodity, query: str) -> bool:
    """Case-insensitive match on name/symbol, substring match on the Korean name."""
    if not query:
        return True
    q = query.lower()
    return (
        q in commodity.name.lower()
        or q in commodity.symbol.lower()
        or query in commodity.name_ko
    )


def filter_commodities(
    commodities: Iterable[Commodity],
    category: CommodityCategory | str | None = None,
    query: str = "",
) -> list[Commodity]:
    if isinstance(category, CommodityCategory):
        category = category.value
    return [
        c for c in commodities
        if (category in (None, ALL_CATEGORIES) or c.category_key == category)
        and matches_query(c, query)
    ]


def sort_for_display(
    commodities: Iterable[Commodity],
    watchlist: Collection[str] = (),
) -> list[Commodity]:
    """Watched commodities first, then the biggest movers."""
    return sorted(
        commodities,
        key=lambda c: (c.id not in watchlist, -abs(c.change_percent)),
    )


def market_summary(commodities: Iterable[Commodity]) -> MarketSummary:
    items = list(commodities)
    return MarketSummary(
        total=len(items),
        gainers=sum(1 for c in items if c.change_percent > 0),
        losers=sum(1 for c in items if c.change_percent < 0),
    )
