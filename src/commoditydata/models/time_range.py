"""Chart time-range selector."""

from __future__ import annotations

from enum import Enum


class TimeRange(Enum):
    """Closed set of detail-chart ranges."""

    ONE_DAY = "1D"
    ONE_WEEK = "1W"
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    ONE_YEAR = "1Y"
    ALL = "ALL"

    @property
    def bar_count(self) -> int:
        """Number of simulated bars drawn for this range."""
        return BAR_COUNTS[self]

    @classmethod
    def parse(cls, value: TimeRange | str) -> TimeRange:
        if isinstance(value, cls):
            return value
        return cls(str(value).upper())


BAR_COUNTS: dict[TimeRange, int] = {
    TimeRange.ONE_DAY: 24,
    TimeRange.ONE_WEEK: 14,
    TimeRange.ONE_MONTH: 30,
    TimeRange.THREE_MONTHS: 90,
    TimeRange.ONE_YEAR: 250,
    TimeRange.ALL: 500,
}
