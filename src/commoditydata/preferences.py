"""Client-side preference storage: watchlist and display currency."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any

from commoditydata.errors import CommodityDataError, CommodityDataErrorCode

logger = logging.getLogger(__name__)

WATCHLIST_KEY = "commodity-watchlist"
CURRENCY_KEY = "commodity-currency"
DEFAULT_USD_TO_KRW = 1450.0


class KeyValueStore(ABC):
    """Minimal persistent key-value interface for JSON-compatible values."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        ...

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        ...


class MemoryStore(KeyValueStore):
    """Process-local store; nothing survives a restart."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """Single JSON document on disk, rewritten on every change.

    An unreadable or corrupt file is treated as empty and replaced on the
    next write.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._data = self._load()

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable preference file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring preference file %s: not a JSON object", self.path)
            return {}
        return data

    def _flush(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(self._data, ensure_ascii=False, indent=2), encoding="utf-8",
            )
        except OSError as e:
            raise CommodityDataError(
                f"Failed to write preferences to {self.path}: {e}",
                code=CommodityDataErrorCode.STORAGE_ERROR,
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._flush()

    def delete(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self._flush()


class Watchlist:
    """Ordered set of commodity ids persisted in a ``KeyValueStore``."""

    def __init__(self, store: KeyValueStore, key: str = WATCHLIST_KEY) -> None:
        self._store = store
        self._key = key

    @property
    def ids(self) -> list[str]:
        value = self._store.get(self._key, [])
        return [str(v) for v in value] if isinstance(value, list) else []

    def __contains__(self, commodity_id: object) -> bool:
        return commodity_id in self.ids

    def __len__(self) -> int:
        return len(self.ids)

    def add(self, commodity_id: str) -> None:
        ids = self.ids
        if commodity_id not in ids:
            self._store.set(self._key, ids + [commodity_id])

    def remove(self, commodity_id: str) -> None:
        ids = self.ids
        if commodity_id in ids:
            self._store.set(self._key, [i for i in ids if i != commodity_id])

    def toggle(self, commodity_id: str) -> bool:
        """Flip membership; returns True if the id is now watched."""
        if commodity_id in self:
            self.remove(commodity_id)
            return False
        self.add(commodity_id)
        return True

    def clear(self) -> None:
        self._store.set(self._key, [])


class Currency(Enum):
    USD = "USD"
    KRW = "KRW"


CURRENCY_SYMBOLS: dict[Currency, str] = {Currency.USD: "$", Currency.KRW: "₩"}


class CurrencyPreference:
    """Display currency toggle with a fixed USD->KRW rate."""

    def __init__(
        self,
        store: KeyValueStore,
        usd_to_krw_rate: float = DEFAULT_USD_TO_KRW,
        key: str = CURRENCY_KEY,
    ) -> None:
        self._store = store
        self._key = key
        self.usd_to_krw_rate = usd_to_krw_rate

    @property
    def currency(self) -> Currency:
        raw = self._store.get(self._key, Currency.USD.value)
        try:
            return Currency(raw)
        except ValueError:
            return Currency.USD

    def set(self, currency: Currency | str) -> None:
        self._store.set(self._key, Currency(currency).value)

    def toggle(self) -> Currency:
        new = Currency.KRW if self.currency is Currency.USD else Currency.USD
        self.set(new)
        return new

    def convert(self, usd_price: float) -> float:
        if self.currency is Currency.KRW:
            return usd_price * self.usd_to_krw_rate
        return usd_price

    @property
    def symbol(self) -> str:
        return CURRENCY_SYMBOLS[self.currency]
