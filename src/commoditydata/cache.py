"""Cache backends for chart payloads, keyed by (commodity_id, time_range)."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections import OrderedDict

from commoditydata.models.chart import ChartData
from commoditydata.models.time_range import TimeRange


class CacheBackend(ABC):
    """Abstract cache interface."""

    @abstractmethod
    def get_chart(self, commodity_id: str, time_range: TimeRange) -> ChartData | None:
        """Return a cached chart, or None on miss."""
        ...

    @abstractmethod
    def store_chart(self, chart: ChartData) -> None:
        """Store a chart under its own commodity id and range."""
        ...

    @abstractmethod
    def has_data(self, commodity_id: str, time_range: TimeRange) -> bool:
        ...

    @abstractmethod
    def clear(self, commodity_id: str) -> None:
        ...

    @abstractmethod
    def clear_all(self) -> None:
        ...


class NoCache(CacheBackend):
    """No-op cache; always misses."""

    def get_chart(self, commodity_id, time_range):  # type: ignore[override]
        return None

    def store_chart(self, chart):  # type: ignore[override]
        pass

    def has_data(self, commodity_id, time_range):  # type: ignore[override]
        return False

    def clear(self, commodity_id):  # type: ignore[override]
        pass

    def clear_all(self):
        pass


class MemoryCache(CacheBackend):
    """In-memory TTL cache for chart payloads.

    Uses LRU eviction when ``max_entries`` is exceeded.
    """

    def __init__(self, ttl_seconds: int = 300, max_entries: int = 256) -> None:
        self.ttl = ttl_seconds
        self.max_entries = max_entries
        self._store: OrderedDict[str, tuple[float, ChartData]] = OrderedDict()

    def _key(self, commodity_id: str, time_range: TimeRange) -> str:
        return f"{commodity_id.upper()}|{time_range.value}"

    def _evict_expired(self) -> None:
        now = time.monotonic()
        expired = [k for k, (ts, _) in self._store.items() if now - ts > self.ttl]
        for k in expired:
            del self._store[k]

    def _evict_lru(self) -> None:
        while len(self._store) > self.max_entries:
            self._store.popitem(last=False)

    def get_chart(self, commodity_id: str, time_range: TimeRange) -> ChartData | None:
        self._evict_expired()
        key = self._key(commodity_id, time_range)
        entry = self._store.get(key)
        if entry is None:
            return None
        ts, chart = entry
        if time.monotonic() - ts > self.ttl:
            del self._store[key]
            return None
        self._store.move_to_end(key)  # refresh LRU position
        return chart

    def store_chart(self, chart: ChartData) -> None:
        key = self._key(chart.commodity_id, chart.time_range)
        self._store[key] = (time.monotonic(), chart)
        self._store.move_to_end(key)
        self._evict_lru()

    def has_data(self, commodity_id: str, time_range: TimeRange) -> bool:
        self._evict_expired()
        return self._key(commodity_id, time_range) in self._store

    def clear(self, commodity_id: str) -> None:
        prefix = f"{commodity_id.upper()}|"
        keys = [k for k in self._store if k.startswith(prefix)]
        for k in keys:
            del self._store[k]

    def clear_all(self) -> None:
        self._store.clear()
