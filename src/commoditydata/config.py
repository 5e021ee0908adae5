"""Dashboard configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CatalogProviderType(Enum):
    """Supported commodity catalog backends."""

    MOCK = "mock"


@dataclass
class DashboardConfig:
    """Configuration for DashboardManager.

    Attributes:
        providers: Catalog backends ordered by priority.
        cache_backend: Chart cache type, "memory" or "none".
        cache_ttl_seconds: TTL for cached chart payloads.
        cache_max_entries: LRU bound for the memory cache.
        validate: Whether to run quality checks on generated bars.
        storage_backend: Preference store, "memory" or "json".
        storage_path: JSON file used when ``storage_backend`` is "json".
        usd_to_krw_rate: Fixed conversion rate for the KRW display currency.
        sma_periods: SMA periods attached to every chart.
        ema_periods: EMA periods attached to every chart.
        catalog_seed: Seed for the mock catalog's price jitter (None = unseeded).
    """

    providers: list[CatalogProviderType] = field(
        default_factory=lambda: [CatalogProviderType.MOCK]
    )
    cache_backend: str = "memory"
    cache_ttl_seconds: int = 300
    cache_max_entries: int = 256
    validate: bool = True

    storage_backend: str = "memory"
    storage_path: str = "data/preferences.json"
    usd_to_krw_rate: float = 1450.0

    sma_periods: tuple[int, ...] = (20,)
    ema_periods: tuple[int, ...] = (12, 26)
    catalog_seed: int | None = None
