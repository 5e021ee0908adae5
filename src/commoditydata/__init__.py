"""commoditydata: data and state layer for a commodity-market dashboard.

Catalog providers with fallback, a seeded OHLCV path simulator, a technical
indicator engine (SMA, EMA, RSI, MACD, Bollinger Bands, ATR), chart caching,
and watchlist/currency preferences.

Quick start::

    from commoditydata import create_manager_from_env
    mgr = create_manager_from_env()
    chart = mgr.get_chart("GOLD", "1M")
"""

from __future__ import annotations

import os

from commoditydata.chart import build_chart, derive_seed, simulation_params, window_stats
from commoditydata.config import CatalogProviderType, DashboardConfig
from commoditydata.errors import CommodityDataError, CommodityDataErrorCode
from commoditydata.indicators import compute_indicators, enrich
from commoditydata.manager import DashboardManager
from commoditydata.models.bar import Bar
from commoditydata.models.chart import ChartData, EnrichedBar, WindowStats
from commoditydata.models.commodity import Commodity, CommodityCategory
from commoditydata.models.time_range import TimeRange
from commoditydata.preferences import Currency, CurrencyPreference, Watchlist
from commoditydata.simulator import generate

__version__ = "0.1.0"

__all__ = [
    # Manager
    "DashboardManager",
    "create_manager_from_env",
    # Config
    "DashboardConfig",
    "CatalogProviderType",
    # Errors
    "CommodityDataError",
    "CommodityDataErrorCode",
    # Models
    "Bar",
    "EnrichedBar",
    "ChartData",
    "WindowStats",
    "Commodity",
    "CommodityCategory",
    "TimeRange",
    # Core
    "generate",
    "compute_indicators",
    "enrich",
    "build_chart",
    "derive_seed",
    "simulation_params",
    "window_stats",
    # Preferences
    "Watchlist",
    "Currency",
    "CurrencyPreference",
]


def _env_periods(name: str, default: str) -> tuple[int, ...]:
    raw = os.getenv(name, default)
    return tuple(int(p) for p in raw.split(",") if p.strip())


def create_manager_from_env() -> DashboardManager:
    """Zero-config factory; reads settings from env vars.

    Environment variables:
        COMMODITY_DATA_PROVIDERS: Comma-separated provider list (default: "mock").
        COMMODITY_DATA_CACHE: Chart cache, "memory" or "none" (default: "memory").
        COMMODITY_DATA_CACHE_TTL: Chart cache TTL in seconds (default: 300).
        COMMODITY_DATA_CACHE_MAX: Chart cache capacity before LRU eviction (default: 256).
        COMMODITY_DATA_VALIDATE: "0" disables bar validation (default: "1").
        COMMODITY_DATA_STORAGE: Preference store, "memory" or "json" (default: "memory").
        COMMODITY_DATA_STORAGE_PATH: JSON preference file (default: "data/preferences.json").
        COMMODITY_DATA_USD_KRW: USD->KRW display rate (default: 1450).
        COMMODITY_DATA_SMA: Comma-separated SMA periods (default: "20").
        COMMODITY_DATA_EMA: Comma-separated EMA periods (default: "12,26").
        COMMODITY_DATA_CATALOG_SEED: Seed for the mock catalog price jitter (default: unset).
    """
    provider_str = os.getenv("COMMODITY_DATA_PROVIDERS", "mock")
    provider_types = [
        CatalogProviderType(name.strip())
        for name in provider_str.split(",")
        if name.strip()
    ]

    seed = os.getenv("COMMODITY_DATA_CATALOG_SEED")

    config = DashboardConfig(
        providers=provider_types,
        cache_backend=os.getenv("COMMODITY_DATA_CACHE", "memory"),
        cache_ttl_seconds=int(os.getenv("COMMODITY_DATA_CACHE_TTL", "300")),
        cache_max_entries=int(os.getenv("COMMODITY_DATA_CACHE_MAX", "256")),
        validate=os.getenv("COMMODITY_DATA_VALIDATE", "1") != "0",
        storage_backend=os.getenv("COMMODITY_DATA_STORAGE", "memory"),
        storage_path=os.getenv("COMMODITY_DATA_STORAGE_PATH", "data/preferences.json"),
        usd_to_krw_rate=float(os.getenv("COMMODITY_DATA_USD_KRW", "1450")),
        sma_periods=_env_periods("COMMODITY_DATA_SMA", "20"),
        ema_periods=_env_periods("COMMODITY_DATA_EMA", "12,26"),
        catalog_seed=int(seed) if seed else None,
    )

    return DashboardManager(config)
