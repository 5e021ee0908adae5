"""DashboardManager: catalog fallback, chart cache and preferences in one place."""

from __future__ import annotations

import logging
from typing import Any

import pandas as pd

from commoditydata.cache import CacheBackend, MemoryCache, NoCache
from commoditydata.chart import build_chart
from commoditydata.config import DashboardConfig
from commoditydata.dashboard import (
    MarketSummary,
    filter_commodities,
    market_summary,
    sort_for_display,
)
from commoditydata.errors import CommodityDataError, CommodityDataErrorCode
from commoditydata.frames import chart_to_frame
from commoditydata.models.chart import ChartData
from commoditydata.models.commodity import Commodity, CommodityCategory
from commoditydata.models.time_range import TimeRange
from commoditydata.preferences import (
    CurrencyPreference,
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
    Watchlist,
)
from commoditydata.providers import create_provider
from commoditydata.providers.base import BaseCatalogProvider
from commoditydata.quality import validate_bars

logger = logging.getLogger(__name__)


class DashboardManager:
    """Central orchestrator: provider chain -> cache -> simulate -> validate.

    Usage::

        from commoditydata import create_manager_from_env
        mgr = create_manager_from_env()
        chart = mgr.get_chart("GOLD", "1M")
    """

    def __init__(self, config: DashboardConfig) -> None:
        self.config = config

        # Build provider chain
        self.providers: list[BaseCatalogProvider] = []
        for pt in config.providers:
            kwargs: dict[str, Any] = {}
            if pt.value == "mock":
                kwargs["seed"] = config.catalog_seed
            self.providers.append(create_provider(pt, **kwargs))

        # Build cache
        self.cache: CacheBackend
        if config.cache_backend == "memory":
            self.cache = MemoryCache(
                ttl_seconds=config.cache_ttl_seconds,
                max_entries=config.cache_max_entries,
            )
        else:
            self.cache = NoCache()

        # Build preference store
        self.store: KeyValueStore
        if config.storage_backend == "json":
            self.store = JsonFileStore(config.storage_path)
        else:
            self.store = MemoryStore()
        self.watchlist = Watchlist(self.store)
        self.currency = CurrencyPreference(self.store, config.usd_to_krw_rate)

    # -------------------------------------------------------------- catalog

    def list_commodities(
        self,
        category: CommodityCategory | str | None = None,
        query: str = "",
    ) -> list[Commodity]:
        """Filtered catalog, watchlist entries first, then biggest movers."""
        commodities = self._first_capable("catalog", "list_commodities")
        filtered = filter_commodities(commodities, category, query)
        return sort_for_display(filtered, self.watchlist.ids)

    def get_commodity(self, commodity_id: str) -> Commodity:
        return self._first_capable("details", "get_commodity", commodity_id)

    def get_price(self, symbol: str) -> float:
        return self._first_capable("prices", "get_price", symbol)

    def market_summary(self) -> MarketSummary:
        return market_summary(self._first_capable("catalog", "list_commodities"))

    # ---------------------------------------------------------------- chart

    def get_chart(self, commodity_id: str, time_range: TimeRange | str) -> ChartData:
        """Get a detail chart: cache -> simulate + enrich -> validate -> store."""
        tr = TimeRange.parse(time_range)

        # 1. Cache hit?
        cached = self.cache.get_chart(commodity_id, tr)
        if cached is not None:
            logger.debug("Chart cache hit for %s %s", commodity_id, tr.value)
            return cached

        # 2. Build from the catalog record
        commodity = self.get_commodity(commodity_id)
        chart = build_chart(
            commodity,
            tr,
            sma_periods=self.config.sma_periods,
            ema_periods=self.config.ema_periods,
        )

        # 3. Quality gate
        if self.config.validate:
            result = validate_bars(chart.raw_bars)
            if not result.passed:
                msgs = "; ".join(c.message for c in result.failed_checks)
                raise CommodityDataError(
                    f"Validation failed for {commodity_id} {tr.value}: {msgs}",
                    code=CommodityDataErrorCode.VALIDATION_FAILED,
                )

        # 4. Store in cache
        self.cache.store_chart(chart)
        return chart

    def get_chart_frame(self, commodity_id: str, time_range: TimeRange | str) -> pd.DataFrame:
        return chart_to_frame(self.get_chart(commodity_id, time_range))

    # --------------------------------------------------------------- cache

    def clear_cache(self, commodity_id: str) -> None:
        self.cache.clear(commodity_id)

    def clear_all_cache(self) -> None:
        self.cache.clear_all()

    # ------------------------------------------------------------ internal

    def _first_capable(self, capability: str, method: str, *args: Any, **kwargs: Any) -> Any:
        """Try providers in order for a given capability."""
        last_error: CommodityDataError | None = None
        for provider in self.providers:
            if capability not in provider.capabilities():
                continue
            try:
                return getattr(provider, method)(*args, **kwargs)
            except CommodityDataError as e:
                if not e.retryable:
                    raise
                logger.warning(
                    "%s.%s failed, trying next provider: %s",
                    type(provider).__name__, method, e,
                )
                last_error = e
                continue
            except NotImplementedError:
                continue

        raise last_error or CommodityDataError(
            f"No provider supports '{capability}'",
            code=CommodityDataErrorCode.NO_DATA,
        )
