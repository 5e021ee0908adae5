"""Commodity catalog record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class CommodityCategory(Enum):
    """Top-level commodity groups shown as dashboard filters."""

    PRECIOUS_METALS = "PRECIOUS_METALS"
    ENERGY = "ENERGY"
    AGRICULTURE = "AGRICULTURE"
    INDUSTRIAL_METALS = "INDUSTRIAL_METALS"


CATEGORY_LABELS: dict[CommodityCategory, str] = {
    CommodityCategory.PRECIOUS_METALS: "귀금속",
    CommodityCategory.ENERGY: "에너지",
    CommodityCategory.AGRICULTURE: "농산물",
    CommodityCategory.INDUSTRIAL_METALS: "산업금속",
}


@dataclass(frozen=True)
class Commodity:
    """Tradable commodity as supplied by a catalog provider.

    Attributes:
        id: Stable identifier; also the simulation seed source.
        symbol: Exchange-style ticker.
        name: English display name.
        name_ko: Korean display name.
        category: Category (enum, or a raw string from an external catalog).
        current_price: Latest price; anchors the simulated chart's final close.
        currency: Display currency code.
        change: Absolute change since the previous session.
        change_percent: Percent change since the previous session.
        last_updated: Quote time.
        subcategory: Finer grouping within the category.
        icon: Emoji shown on the card.
        market_cap: Optional market size.
        volume_24h: Optional 24h volume.
    """

    id: str
    symbol: str
    name: str
    name_ko: str
    category: CommodityCategory | str
    current_price: float
    currency: str = "USD"
    change: float = 0.0
    change_percent: float = 0.0
    last_updated: datetime | None = None
    subcategory: str | None = None
    icon: str | None = None
    market_cap: float | None = None
    volume_24h: float | None = None

    @property
    def category_key(self) -> str:
        if isinstance(self.category, CommodityCategory):
            return self.category.value
        return str(self.category)
