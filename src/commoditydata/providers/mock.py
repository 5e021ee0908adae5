"""Mock catalog provider for development and tests; no API keys required."""

from __future__ import annotations

import random
from dataclasses import replace
from datetime import datetime, timezone

from commoditydata.errors import CommodityDataError, CommodityDataErrorCode
from commoditydata.models.commodity import Commodity, CommodityCategory
from commoditydata.providers.base import BaseCatalogProvider

PM = CommodityCategory.PRECIOUS_METALS
EN = CommodityCategory.ENERGY
AG = CommodityCategory.AGRICULTURE
IM = CommodityCategory.INDUSTRIAL_METALS

MOCK_COMMODITIES: tuple[Commodity, ...] = (
    Commodity("GOLD", "XAU", "Gold", "금", PM, 2035.40, change=12.30, change_percent=0.61,
              subcategory="CORE", icon="🥇"),
    Commodity("SILVER", "XAG", "Silver", "은", PM, 23.15, change=-0.21, change_percent=-0.90,
              subcategory="CORE", icon="🥈"),
    Commodity("PLATINUM", "XPT", "Platinum", "백금", PM, 912.50, change=4.80, change_percent=0.53,
              subcategory="PGM_SPECIALTY", icon="⚪"),
    Commodity("PALLADIUM", "XPD", "Palladium", "팔라듐", PM, 968.00, change=-15.20,
              change_percent=-1.55, subcategory="PGM_SPECIALTY", icon="🔘"),
    Commodity("WTI", "CL", "WTI Crude Oil", "WTI 원유", EN, 78.42, change=1.12,
              change_percent=1.45, subcategory="CRUDE_OIL", icon="🛢️"),
    Commodity("BRENT", "BZ", "Brent Crude Oil", "브렌트유", EN, 82.95, change=0.87,
              change_percent=1.06, subcategory="CRUDE_OIL", icon="🛢️"),
    Commodity("NATGAS", "NG", "Natural Gas", "천연가스", EN, 2.61, change=-0.09,
              change_percent=-3.33, subcategory="GAS", icon="🔥"),
    Commodity("HEATOIL", "HO", "Heating Oil", "난방유", EN, 2.74, change=0.02,
              change_percent=0.74, subcategory="REFINED_PRODUCTS", icon="⛽"),
    Commodity("COPPER", "HG", "Copper", "구리", IM, 3.86, change=0.04, change_percent=1.05,
              subcategory="BASE_METALS", icon="🟠"),
    Commodity("ALUMINUM", "ALI", "Aluminum", "알루미늄", IM, 2245.00, change=-12.50,
              change_percent=-0.55, subcategory="BASE_METALS", icon="⬜"),
    Commodity("NICKEL", "NI", "Nickel", "니켈", IM, 16480.00, change=230.00,
              change_percent=1.42, subcategory="BATTERY_ENERGY", icon="🔋"),
    Commodity("IRONORE", "TIO", "Iron Ore", "철광석", IM, 128.30, change=-1.70,
              change_percent=-1.31, subcategory="FERROUS", icon="⛏️"),
    Commodity("WHEAT", "ZW", "Wheat", "밀", AG, 598.25, change=-6.50, change_percent=-1.07,
              subcategory="GRAINS", icon="🌾"),
    Commodity("CORN", "ZC", "Corn", "옥수수", AG, 452.75, change=3.25, change_percent=0.72,
              subcategory="GRAINS", icon="🌽"),
    Commodity("SOYBEAN", "ZS", "Soybeans", "대두", AG, 1198.50, change=8.00,
              change_percent=0.67, subcategory="OILSEEDS", icon="🫘"),
    Commodity("COFFEE", "KC", "Coffee", "커피", AG, 186.40, change=2.95, change_percent=1.61,
              subcategory="SOFT_COMMODITIES", icon="☕"),
    Commodity("SUGAR", "SB", "Sugar", "설탕", AG, 21.84, change=-0.33, change_percent=-1.49,
              subcategory="SOFT_COMMODITIES", icon="🍬"),
    Commodity("CATTLE", "LE", "Live Cattle", "생우", AG, 174.10, change=0.00,
              change_percent=0.00, subcategory="LIVESTOCK", icon="🐄"),
)

PRICE_JITTER = 0.02
CHANGE_JITTER = 0.3


class MockCatalogProvider(BaseCatalogProvider):
    """In-memory catalog backed by ``MOCK_COMMODITIES``.

    ``list_commodities`` perturbs prices slightly on every call to mimic a
    live feed; pass ``seed`` to make the perturbation reproducible, or
    ``jitter=False`` to return the stored records unchanged. Use
    ``set_commodities`` to replace the catalog.
    """

    def __init__(self, seed: int | None = None, jitter: bool = True) -> None:
        self._commodities: dict[str, Commodity] = {c.id: c for c in MOCK_COMMODITIES}
        self._rng = random.Random(seed)
        self.jitter = jitter

    # --- Pre-load helpers ---

    def set_commodities(self, commodities: list[Commodity]) -> None:
        self._commodities = {c.id.upper(): c for c in commodities}

    # --- Provider implementation ---

    def list_commodities(self) -> list[Commodity]:
        now = datetime.now(timezone.utc)
        if not self.jitter:
            return [replace(c, last_updated=now) for c in self._commodities.values()]
        return [self._jittered(c, now) for c in self._commodities.values()]

    def get_commodity(self, commodity_id: str) -> Commodity:
        key = commodity_id.upper()
        if key not in self._commodities:
            raise CommodityDataError(
                f"Commodity not found: {commodity_id}",
                code=CommodityDataErrorCode.NOT_FOUND,
            )
        return replace(self._commodities[key], last_updated=datetime.now(timezone.utc))

    def get_price(self, symbol: str) -> float:
        key = symbol.upper()
        for c in self._commodities.values():
            if c.symbol.upper() == key:
                return c.current_price
        raise CommodityDataError(
            f"Commodity not found: {symbol}",
            code=CommodityDataErrorCode.NOT_FOUND,
        )

    def capabilities(self) -> set[str]:
        return {"catalog", "details", "prices"}

    # --- Jitter ---

    def _jittered(self, c: Commodity, now: datetime) -> Commodity:
        def factor(width: float) -> float:
            return 1 + (self._rng.random() - 0.5) * width

        return replace(
            c,
            current_price=round(c.current_price * factor(PRICE_JITTER), 2),
            change=round(c.change * factor(CHANGE_JITTER), 2),
            change_percent=round(c.change_percent * factor(CHANGE_JITTER), 2),
            last_updated=now,
        )
