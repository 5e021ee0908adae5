"""Bar (OHLCV) data model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Bar:
    """Single simulated trading period.

    Attributes:
        date: Calendar day the bar represents.
        open: Opening price.
        high: High price.
        low: Low price.
        close: Closing price.
        volume: Traded volume.
    """

    date: date
    open: float
    high: float
    low: float
    close: float
    volume: int

    @property
    def fill(self) -> str:
        """``"up"`` when the bar closed at or above its open, else ``"down"``."""
        return "up" if self.close >= self.open else "down"

    @property
    def range(self) -> float:
        return self.high - self.low
